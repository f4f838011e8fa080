"""Views module for Word Scramble."""
from views.console import ConsoleView

__all__ = [
    "ConsoleView",
]
