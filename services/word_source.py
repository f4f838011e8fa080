"""
Root word source for Word Scramble.
Loads the list of candidate root words and picks one per session.
"""
import asyncio
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

import aiohttp

from config import SETTINGS, LOGGER_NAME_GAME

logger = logging.getLogger(LOGGER_NAME_GAME)


class WordListError(Exception):
    """The root word list could not be loaded."""


def _parse_words(text: str) -> List[str]:
    """Split newline-delimited text into lowercase words, dropping blanks."""
    return [w.strip().lower() for w in text.split("\n") if w.strip()]


def load_word_list(path: Path | str) -> List[str]:
    """Read a newline-delimited word list from disk."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(f"Could not load word list {p}: {e}") from e
    words = _parse_words(text)
    logger.info(f"Loaded {len(words)} root words from {p}")
    return words


async def fetch_word_list(url: str, timeout_seconds: Optional[int] = None) -> List[str]:
    """Download a newline-delimited word list."""
    timeout = aiohttp.ClientTimeout(total=timeout_seconds or SETTINGS.http_timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    raise WordListError(f"Could not load word list {url}: HTTP {response.status}")
                text = await response.text(encoding="utf-8")
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise WordListError(f"Could not load word list {url}: {e}") from e
    words = _parse_words(text)
    logger.info(f"Loaded {len(words)} root words from {url}")
    return words


def choose_root_word(
    words: Sequence[str],
    rng: Optional[random.Random] = None,
    fallback: Optional[str] = None
) -> str:
    """Pick a root word uniformly at random, or the fallback for an empty list."""
    if not words:
        fallback = fallback or SETTINGS.fallback_root_word
        logger.warning(f"Word list is empty, using fallback root word '{fallback}'")
        return fallback
    return (rng or random).choice(list(words))
