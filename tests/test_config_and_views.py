from config import DATA_DIR, Settings
from models.game import GameSession, RejectionReason, ValidationResult
from views.console import ConsoleView


def test_settings_defaults(monkeypatch):
    for name in ("WORD_LIST_PATH", "MIN_WORD_LENGTH", "DICTIONARY_BACKEND", "LANGUAGE", "POSSIBLE_MODE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.word_list_path == DATA_DIR / "start.txt"
    assert settings.fallback_root_word == "silkworm"
    assert settings.min_word_length == 4
    assert settings.dictionary_backend == "api"
    assert settings.possible_mode == "subset"
    assert settings.language == "en"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MIN_WORD_LENGTH", "5")
    monkeypatch.setenv("DICTIONARY_BACKEND", "wordlist")
    monkeypatch.setenv("DICTIONARY_PATH", "/usr/share/dict/words")
    monkeypatch.setenv("RANDOM_SEED", "42")
    settings = Settings(_env_file=None)
    assert settings.min_word_length == 5
    assert settings.dictionary_backend == "wordlist"
    assert str(settings.dictionary_path) == "/usr/share/dict/words"
    assert settings.random_seed == 42


def test_console_used_words_lists_newest_first_with_lengths():
    session = GameSession(root_word="silkworm", used_words=["worms", "milk"])
    text = ConsoleView.used_words(session)
    assert text.index("(5) worms") < text.index("(4) milk")
    assert "none yet" in ConsoleView.used_words(GameSession(root_word="silkworm"))
    assert "SILKWORM" in ConsoleView.root_word(session)


def test_console_rejection_shows_title_and_message():
    result = ValidationResult(
        word="silky",
        reason=RejectionReason.NOT_POSSIBLE,
        message=RejectionReason.NOT_POSSIBLE.format_message(root="silkworm"),
    )
    assert ConsoleView.rejection(result) == "[Word not possible] You cannot spell that word from silkworm"
