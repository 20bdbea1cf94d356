"""
Engine Errors - Recoverable failures raised by the core.

Every error here is recoverable by the caller:
- Invalid moves are re-prompted
- An empty deck skips the current draw phase

Each error carries a stable code so results can report it
without the caller inspecting exception types.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cards import Card


class EngineError(Exception):
    """Base class for engine errors."""
    code = "ENGINE_ERROR"


class EmptyStructure(EngineError):
    """Raised when a ring or hand operation needs at least one element."""
    code = "EMPTY_STRUCTURE"


class IndexOutOfRange(EngineError):
    """Raised when a move references a hand slot that does not exist."""
    code = "INDEX_OUT_OF_RANGE"

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Invalid index: {index} (hand has {size} cards)")


class InvalidStack(EngineError):
    """Raised when a proposed stacked play breaks a stacking rule."""
    code = "INVALID_STACK"

    def __init__(self, rule: str, message: str, position: int | None = None, card: Card | None = None):
        self.rule = rule
        self.position = position
        self.card = card
        super().__init__(message)


class EmptyDeck(EngineError):
    """Raised when drawing from an empty draw pile."""
    code = "EMPTY_DECK"

    def __init__(self, message: str = "Deck is empty"):
        super().__init__(message)
