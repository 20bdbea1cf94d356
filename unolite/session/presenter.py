"""
Presenter - Interface between the game loop and whoever shows the table.

The loop hands the presenter plain snapshots and gets back a Move.
Terminal play uses TerminalPresenter; tests use scripted presenters.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..schemas import CardInfo, TableSnapshot


@dataclass(frozen=True)
class Move:
    """
    A participant's decision for the round.

    Either hand positions to play in order, or a draw (no positions).
    """
    positions: tuple[int, ...] = ()

    @classmethod
    def play(cls, *positions: int) -> Move:
        return cls(positions=tuple(positions))

    @classmethod
    def draw(cls) -> Move:
        return cls()

    @property
    def is_draw(self) -> bool:
        return not self.positions


class Presenter(ABC):
    """
    Abstract presentation layer.

    Implementations must:
    1. Render the table for the current player
    2. Return the player's move
    3. Report rejected moves so the player can retry
    """

    @abstractmethod
    def show_table(self, snapshot: TableSnapshot):
        """Render the table at the start of a turn."""
        pass

    @abstractmethod
    def choose_move(self, snapshot: TableSnapshot) -> Move:
        """Ask the current player for a move."""
        pass

    @abstractmethod
    def confirm_play_drawn(self, snapshot: TableSnapshot, card: CardInfo) -> bool:
        """Ask whether to play a card just drawn."""
        pass

    def show_rejection(self, message: str):
        """Tell the player a move was refused."""
        pass

    def announce(self, messages: list[str]):
        """Report what happened this turn."""
        pass

    def show_winner(self, name: str):
        pass
