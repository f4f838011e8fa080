"""Game state models for Word Scramble - __init__ module."""
from models.game import GameSession, RejectionReason, ValidationResult

__all__ = [
    "GameSession",
    "RejectionReason",
    "ValidationResult",
]
