"""
Session Module - Sets up and drives one game at one terminal.

A session is one play-through:
- Created by setup_game from the registered player names
- Driven round by round by GameLoop
- Ends when a player empties their hand

Nothing is persisted.
"""

from .setup import setup_game
from .presenter import Presenter, Move
from .game_loop import GameLoop, TurnResult

__all__ = [
    "setup_game",
    "Presenter",
    "Move",
    "GameLoop",
    "TurnResult",
]
