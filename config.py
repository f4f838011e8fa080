"""
Configuration settings for Word Scramble.
Loads environment variables and defines constants.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Root word source (URL wins over path when both are set)
    word_list_path: Path = Field(default=DATA_DIR / "start.txt", validation_alias="WORD_LIST_PATH")
    word_list_url: Optional[str] = Field(default=None, validation_alias="WORD_LIST_URL")
    fallback_root_word: str = Field(default="silkworm", validation_alias="FALLBACK_ROOT_WORD")

    # Dictionary settings
    language: str = Field(default="en", validation_alias="LANGUAGE")
    dictionary_backend: str = Field(default="api", validation_alias="DICTIONARY_BACKEND")  # "api" or "wordlist"
    dictionary_path: Optional[Path] = Field(default=None, validation_alias="DICTIONARY_PATH")
    dictionary_api_url: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries",
        validation_alias="DICTIONARY_API_URL"
    )
    http_timeout_seconds: int = Field(default=10, validation_alias="HTTP_TIMEOUT_SECONDS")

    # Game rules
    min_word_length: int = Field(default=4, validation_alias="MIN_WORD_LENGTH")
    possible_mode: str = Field(default="subset", validation_alias="POSSIBLE_MODE")  # "subset" or "anagram"
    random_seed: Optional[int] = Field(default=None, validation_alias="RANDOM_SEED")

    # Development mode
    dev_mode: bool = Field(default=False, validation_alias="DEV_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
SETTINGS = Settings()

# Dictionary backends
class DictionaryBackend:
    API = "api"
    WORDLIST = "wordlist"

# Possibility check modes
class PossibleMode:
    SUBSET = "subset"
    ANAGRAM = "anagram"

# Console commands
RESTART_COMMANDS = (":restart", ":r")
QUIT_COMMANDS = (":quit", ":q")

# Logger names
LOGGER_NAME_MAIN = "__main__"
LOGGER_NAME_GAME = "__game__"
LOGGER_NAME_DICTIONARY = "__dictionary__"

# Supported Languages
SUPPORTED_LANGUAGES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
}
