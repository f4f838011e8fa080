"""
Word Validator Service for Word Scramble.

A candidate is accepted only if it is
  - original   : not accepted before in this session
  - possible   : spelled from the root word's letters
  - real       : recognized by the spell checker
  - long enough: more than three letters by default
  - different  : not the root word itself

Checks run in that order and the first failure decides the reason the
player sees.
"""
import logging
from collections import Counter
from typing import List, Optional

from config import SETTINGS, LOGGER_NAME_GAME, PossibleMode
from models.game import RejectionReason, ValidationResult
from services.spell_checker import SpellChecker

logger = logging.getLogger(LOGGER_NAME_GAME)


def normalize_word(text: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return text.lower().strip()


class WordValidator:
    """
    Decides whether a candidate word is accepted against a root word.
    Holds no game state; the used-words list is passed in and only
    modified when a word is accepted.
    """

    def __init__(
        self,
        spell_checker: SpellChecker,
        language: Optional[str] = None,
        min_word_length: Optional[int] = None,
        possible_mode: Optional[str] = None
    ):
        self.spell_checker = spell_checker
        self.language = language or SETTINGS.language
        self.min_word_length = SETTINGS.min_word_length if min_word_length is None else min_word_length
        self.possible_mode = possible_mode or SETTINGS.possible_mode
        if self.possible_mode not in (PossibleMode.SUBSET, PossibleMode.ANAGRAM):
            raise ValueError(f"Unknown possible mode: {self.possible_mode}")

    def is_original(self, word: str, used_words: List[str]) -> bool:
        return word not in used_words

    def is_possible(self, word: str, root: str) -> bool:
        if self.possible_mode == PossibleMode.ANAGRAM:
            return sorted(word) == sorted(root)
        # every letter must be available in the root at least as many times
        available = Counter(root)
        needed = Counter(word)
        return all(available[letter] >= count for letter, count in needed.items())

    def is_real(self, word: str) -> bool:
        return self.spell_checker.is_recognized_word(word, self.language)

    def is_long_enough(self, word: str) -> bool:
        return len(word) >= self.min_word_length

    def is_different(self, word: str, root: str) -> bool:
        return word != root

    def _reject(self, word: str, root: str, reason: RejectionReason) -> ValidationResult:
        logger.debug(f"Rejected '{word}' for root '{root}': {reason.name}")
        return ValidationResult(
            word=word,
            reason=reason,
            message=reason.format_message(root=root, min_length=self.min_word_length),
        )

    def validate(self, candidate: str, root: str, used_words: List[str]) -> ValidationResult:
        """
        Validate a candidate against the root word.

        Args:
            candidate: Raw user input; normalized before any check
            root: The session's root word
            used_words: Accepted words, most recent first. An accepted
                candidate is inserted at index 0.

        Returns:
            ValidationResult; ignored when the normalized candidate is empty
        """
        word = normalize_word(candidate)
        if not word:
            return ValidationResult(word="")

        if not self.is_original(word, used_words):
            return self._reject(word, root, RejectionReason.DUPLICATE_WORD)
        if not self.is_possible(word, root):
            return self._reject(word, root, RejectionReason.NOT_POSSIBLE)
        if not self.is_real(word):
            return self._reject(word, root, RejectionReason.NOT_RECOGNIZED)
        if not self.is_long_enough(word):
            return self._reject(word, root, RejectionReason.TOO_SHORT)
        if not self.is_different(word, root):
            return self._reject(word, root, RejectionReason.SAME_AS_ROOT)

        used_words.insert(0, word)
        return ValidationResult(word=word)
