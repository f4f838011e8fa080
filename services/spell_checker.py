"""
Spell checking backends for Word Scramble.

Two backends answer "is this a real word?":
- WordListSpellChecker: membership in a local newline-delimited word list.
- FreeDictionarySpellChecker: Free Dictionary API, no API key required.
  https://dictionaryapi.dev/

Validation is synchronous, so the API backend does its network work in
prepare() and is_recognized_word() only reads the resulting cache.
"""
import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional, Set, Tuple

import aiohttp

from config import SETTINGS, LOGGER_NAME_DICTIONARY, SUPPORTED_LANGUAGES, DictionaryBackend

logger = logging.getLogger(LOGGER_NAME_DICTIONARY)


def _check_language(language: str) -> None:
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language: {language}. Available: {sorted(SUPPORTED_LANGUAGES)}"
        )


class SpellChecker:
    """Base class for dictionary lookups."""

    async def prepare(self, word: str, language: str) -> None:
        """Fetch whatever is_recognized_word() will need for this word."""

    def is_recognized_word(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")

    async def close(self) -> None:
        """Release any held resources."""


class WordListSpellChecker(SpellChecker):
    """Recognizes words found in a local word list."""

    def __init__(self, words, language: str = "en"):
        _check_language(language)
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        logger.info(f"Word list dictionary loaded with {len(self._words)} words ({language})")

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListSpellChecker":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        return cls(p.read_text(encoding="utf-8").splitlines(), language)

    def is_recognized_word(self, word: str, language: str) -> bool:
        _check_language(language)
        if language != self.language:
            logger.warning(f"No word list loaded for language '{language}'")
            return False
        return word.strip().lower() in self._words


class FreeDictionarySpellChecker(SpellChecker):
    """
    Recognizes words known to the Free Dictionary API.
    Definite answers (200/404) are cached in memory.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[int] = None
    ):
        self.base_url = (base_url or SETTINGS.dictionary_api_url).rstrip("/")
        self.timeout_seconds = timeout_seconds or SETTINGS.http_timeout_seconds
        self._session: Optional[aiohttp.ClientSession] = None
        self._cache: Dict[Tuple[str, str], bool] = {}
        logger.info(f"Spell checker initialized using Free Dictionary API at {self.base_url}")

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds)
            )
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def prepare(self, word: str, language: str) -> None:
        _check_language(language)
        word_lower = word.strip().lower()
        if not word_lower or (language, word_lower) in self._cache:
            return
        found = await self._lookup(word_lower, language)
        if found is not None:
            self._cache[(language, word_lower)] = found

    async def _lookup(self, word: str, language: str) -> Optional[bool]:
        """Call the API; None means no definite answer."""
        url = f"{self.base_url}/{language}/{word}"
        logger.info(f"Looking up word with Dictionary API: {word}")
        try:
            http_session = await self._get_session()
            async with http_session.get(url) as response:
                if response.status == 200:
                    return True
                if response.status == 404:
                    return False
                logger.warning(f"Dictionary API returned status {response.status} for word '{word}'")
                return None
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Dictionary API connection error for '{word}': {e}")
            return None

    def is_recognized_word(self, word: str, language: str) -> bool:
        _check_language(language)
        word_lower = word.strip().lower()
        cached = self._cache.get((language, word_lower))
        if cached is None:
            # fail safe: reject words we could not verify
            logger.warning(f"No dictionary answer for '{word_lower}', treating as unrecognized")
            return False
        logger.debug(f"Cache hit for word: {word_lower}")
        return cached


def create_spell_checker(backend: Optional[str] = None) -> SpellChecker:
    """Factory: build the configured spell checker backend."""
    backend = backend or SETTINGS.dictionary_backend
    _check_language(SETTINGS.language)
    if backend == DictionaryBackend.API:
        return FreeDictionarySpellChecker()
    if backend == DictionaryBackend.WORDLIST:
        if SETTINGS.dictionary_path is None:
            raise ValueError("DICTIONARY_PATH must be set for the wordlist dictionary backend")
        return WordListSpellChecker.from_file(SETTINGS.dictionary_path, SETTINGS.language)
    raise ValueError(f"Unknown dictionary backend: {backend}. Available: ['api', 'wordlist']")
