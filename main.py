"""
Word Scramble - Main Entry Point

A console word game: build words from the letters of a random root word.
Features:
- Random root word from a local or remote word list
- Dictionary validation (Free Dictionary API or local word list)
- Originality, spelling, length and letter checks with clear feedback
- Restart at any time for a new root word
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import List

from config import (
    SETTINGS,
    LOGGER_NAME_MAIN,
    LOGGER_NAME_GAME,
    LOGGER_NAME_DICTIONARY,
    RESTART_COMMANDS,
    QUIT_COMMANDS,
)
from services.game_manager import GameManager
from services.spell_checker import create_spell_checker
from services.word_source import WordListError, fetch_word_list, load_word_list
from views.console import ConsoleView


# Setup logging
def setup_logging():
    """Configure logging for the game."""
    # Console stays at warnings outside dev mode so log lines don't interleave with play
    console_level = logging.DEBUG if SETTINGS.dev_mode else logging.WARNING

    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level)

    # File handler
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / "word_scramble.log",
        encoding="utf-8",
        mode="a"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    # Setup loggers
    for logger_name in [LOGGER_NAME_MAIN, LOGGER_NAME_GAME, LOGGER_NAME_DICTIONARY]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    # aiohttp logger
    aiohttp_logger = logging.getLogger("aiohttp")
    aiohttp_logger.setLevel(logging.WARNING)
    aiohttp_logger.addHandler(console_handler)

    return logging.getLogger(LOGGER_NAME_MAIN)


async def load_root_words() -> List[str]:
    """Load the root word list from the configured URL or file."""
    if SETTINGS.word_list_url:
        return await fetch_word_list(SETTINGS.word_list_url)
    return load_word_list(SETTINGS.word_list_path)


def play(manager: GameManager, loop: asyncio.AbstractEventLoop) -> None:
    """
    Read submissions until the player quits.

    Input is read on the main thread so Ctrl-C interrupts it directly;
    only the dictionary lookup runs on the event loop.
    """
    print(ConsoleView.welcome())
    print(ConsoleView.root_word(manager.session))

    while True:
        try:
            text = input(ConsoleView.prompt())
        except EOFError:
            break

        command = text.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in RESTART_COMMANDS:
            manager.restart()
            print(ConsoleView.root_word(manager.session))
            continue

        loop.run_until_complete(manager.prepare(text))
        result = manager.submit(text)
        if result.is_ignored:
            continue
        if result.is_accepted:
            print(ConsoleView.root_word(manager.session))
            print(ConsoleView.used_words(manager.session))
        else:
            print(ConsoleView.rejection(result))


def main():
    """Main entry point."""
    # Setup logging
    logger = setup_logging()
    logger.info("Starting Word Scramble...")

    loop = asyncio.new_event_loop()
    try:
        try:
            root_words = loop.run_until_complete(load_root_words())
        except WordListError as e:
            logger.error(f"Could not load the root word list: {e}")
            sys.exit(1)

        try:
            spell_checker = create_spell_checker()
        except (ValueError, FileNotFoundError) as e:
            logger.error(f"Could not set up the dictionary: {e}")
            sys.exit(1)

        logger.info(f"Dictionary backend: {SETTINGS.dictionary_backend} ({SETTINGS.language})")
        manager = GameManager(root_words, spell_checker)

        try:
            play(manager, loop)
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt")
        finally:
            logger.info(f"Final session: {manager.session.to_dict()}")
            loop.run_until_complete(spell_checker.close())
    finally:
        loop.close()


if __name__ == "__main__":
    main()
