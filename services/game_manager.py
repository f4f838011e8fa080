"""
Game Manager Service for Word Scramble.
Handles the session lifecycle: start, restart and word submission.
"""
import logging
import random
from typing import List, Optional

from config import SETTINGS, LOGGER_NAME_GAME
from models.game import GameSession, ValidationResult
from services.spell_checker import SpellChecker
from services.word_source import choose_root_word
from services.word_validator import WordValidator, normalize_word

logger = logging.getLogger(LOGGER_NAME_GAME)


class GameManager:
    """
    Owns the single game session and routes submissions to the validator.
    """

    def __init__(
        self,
        root_words: List[str],
        spell_checker: SpellChecker,
        validator: Optional[WordValidator] = None,
        rng: Optional[random.Random] = None
    ):
        self.root_words = list(root_words)
        self.spell_checker = spell_checker
        self.validator = validator or WordValidator(spell_checker)
        self.rng = rng or random.Random(SETTINGS.random_seed)
        self._session: Optional[GameSession] = None

    @property
    def session(self) -> GameSession:
        """The current session; starts one on first access."""
        if self._session is None:
            self.start_game()
        return self._session

    def start_game(self) -> GameSession:
        """Start a new session with a fresh root word."""
        root_word = choose_root_word(self.root_words, self.rng)
        if self._session is None:
            self._session = GameSession(root_word=root_word)
        else:
            self._session.reset(root_word)
        logger.info(f"New game started with root word '{root_word}'")
        return self._session

    def restart(self) -> GameSession:
        """Drop the current history and draw a new root word."""
        if self._session is not None:
            logger.info(f"Restarting game: {self._session.to_dict()}")
        return self.start_game()

    async def prepare(self, text: str) -> None:
        """
        Let the spell checker fetch what it needs before submit().
        Words the local checks already reject are never looked up.
        """
        word = normalize_word(text)
        if not word:
            return
        session = self.session
        if not self.validator.is_original(word, session.used_words):
            return
        if not self.validator.is_possible(word, session.root_word):
            return
        await self.spell_checker.prepare(word, self.validator.language)

    def submit(self, text: str) -> ValidationResult:
        """Validate a submission against the current session."""
        session = self.session
        result = self.validator.validate(text, session.root_word, session.used_words)

        if result.is_ignored:
            return result
        if result.is_accepted:
            logger.info(f"Accepted '{result.word}' ({len(session.used_words)} words so far)")
        else:
            session.rejected_attempts += 1
            logger.info(f"Rejected '{result.word}': {result.reason.name}")
        return result
