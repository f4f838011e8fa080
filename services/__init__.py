"""Services module for Word Scramble."""
from services.game_manager import GameManager
from services.spell_checker import (
    FreeDictionarySpellChecker,
    SpellChecker,
    WordListSpellChecker,
    create_spell_checker,
)
from services.word_source import WordListError, choose_root_word, fetch_word_list, load_word_list
from services.word_validator import WordValidator, normalize_word

__all__ = [
    "GameManager",
    "SpellChecker",
    "WordListSpellChecker",
    "FreeDictionarySpellChecker",
    "create_spell_checker",
    "WordListError",
    "load_word_list",
    "fetch_word_list",
    "choose_root_word",
    "WordValidator",
    "normalize_word",
]
