"""
Game state dataclasses for Word Scramble.
These classes hold the in-memory state of the current session.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class RejectionReason(Enum):
    """Why a candidate word was turned down, with its user-facing text."""

    DUPLICATE_WORD = ("Word used already", "Be more original")
    NOT_POSSIBLE = ("Word not possible", "You cannot spell that word from {root}")
    NOT_RECOGNIZED = ("Word not recognized", "You cannot just make them up, you know")
    TOO_SHORT = ("Word too short", "Words must be at least {min_length} letters long")
    SAME_AS_ROOT = ("Word is identical", "You should come up with something new")

    def __init__(self, title: str, message: str):
        self.title = title
        self.message_template = message

    def format_message(self, root: str = "", min_length: int = 4) -> str:
        return self.message_template.format(root=root, min_length=min_length)


@dataclass
class ValidationResult:
    """Result of validating one candidate word."""
    word: str
    reason: Optional[RejectionReason] = None
    message: Optional[str] = None

    @property
    def is_ignored(self) -> bool:
        """Empty candidates are dropped without any feedback."""
        return not self.word

    @property
    def is_accepted(self) -> bool:
        return bool(self.word) and self.reason is None

    @property
    def title(self) -> Optional[str]:
        return self.reason.title if self.reason else None


@dataclass
class GameSession:
    """
    State of the current game.

    used_words is ordered most-recent-first; the validator inserts accepted
    words at index 0.
    """
    root_word: str
    used_words: List[str] = field(default_factory=list)
    rejected_attempts: int = 0

    @property
    def score(self) -> int:
        """Total letters across all accepted words."""
        return sum(len(word) for word in self.used_words)

    def reset(self, root_word: str) -> None:
        """Start over with a new root word and an empty history."""
        self.root_word = root_word
        self.used_words = []
        self.rejected_attempts = 0

    def to_dict(self) -> dict:
        """Convert game state to dictionary for debugging/logging."""
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "used_words_count": len(self.used_words),
            "rejected_attempts": self.rejected_attempts,
            "score": self.score,
        }
