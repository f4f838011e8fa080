"""
Console UI components for Word Scramble.
Formats game state and validation feedback as plain text.
"""
from config import RESTART_COMMANDS, QUIT_COMMANDS
from models.game import GameSession, ValidationResult


class ConsoleView:
    """Factory for the text blocks printed to the terminal."""

    @staticmethod
    def welcome() -> str:
        return (
            "WordScramble\n"
            "Make as many words as you can from the root word.\n"
            f"Type {RESTART_COMMANDS[0]} for a new word, {QUIT_COMMANDS[0]} to leave."
        )

    @staticmethod
    def root_word(session: GameSession) -> str:
        return f"\n== {session.root_word.upper()} ==  (score: {session.score})"

    @staticmethod
    def used_words(session: GameSession) -> str:
        """Previous guesses, newest first, each with its length."""
        if not session.used_words:
            return "Previous guesses: none yet"
        lines = ["Previous guesses:"]
        for word in session.used_words:
            lines.append(f"  ({len(word)}) {word}")
        return "\n".join(lines)

    @staticmethod
    def rejection(result: ValidationResult) -> str:
        return f"[{result.title}] {result.message}"

    @staticmethod
    def prompt() -> str:
        return "Enter your word: "
