"""
Game State - The engine context every operation receives.

Design principles:
- No globals: one GameState per game, passed explicitly
- Mutable in place: the reducer is the only writer
- Participants outlive turns; the ring only orders them
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator

from .cards import Card, Deck
from .errors import EmptyStructure, IndexOutOfRange
from .turn_ring import TurnRing

if TYPE_CHECKING:
    from ..config import GameConfig


class RoundPhase(Enum):
    """
    Where the current round is.

    AWAITING_PLAY -> (VALIDATED | FORCED_DRAW) -> EFFECTS_APPLIED
    -> (GAME_OVER | NEXT_ROUND), and END_TURN returns to AWAITING_PLAY.
    """
    SETUP = "setup"
    AWAITING_PLAY = "awaiting_play"
    VALIDATED = "validated"
    FORCED_DRAW = "forced_draw"
    EFFECTS_APPLIED = "effects_applied"
    NEXT_ROUND = "next_round"
    GAME_OVER = "game_over"


@dataclass
class Hand:
    """Ordered, insertion-stable cards held by one participant."""
    cards: list[Card] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def card_at(self, index: int) -> Card:
        if not 0 <= index < len(self.cards):
            raise IndexOutOfRange(index, len(self.cards))
        return self.cards[index]

    def remove_at(self, index: int) -> Card:
        """Remove and return the card at index."""
        if not self.cards:
            raise EmptyStructure("Hand is empty")
        card = self.card_at(index)
        del self.cards[index]
        return card

    def append(self, card: Card):
        self.cards.append(card)


@dataclass(eq=False)
class Participant:
    """
    A player seated at the table.

    Compared by identity: two participants with the same name
    are still different seats.
    """
    player_id: str
    name: str
    hand: Hand = field(default_factory=Hand)

    @property
    def hand_size(self) -> int:
        return self.hand.count

    def draw_card(self, card: Card):
        self.hand.append(card)

    def has_playable_card(self, top: Card) -> bool:
        return any(card.is_playable_on(top) for card in self.hand)


@dataclass
class GameState:
    """
    Complete game state.

    This is the canonical context the engine operates on.
    All state changes go through the reducer.
    """
    game_id: str
    config: GameConfig

    # Seats in join order, and their turn order
    players: list[Participant] = field(default_factory=list)
    ring: TurnRing[Participant] = field(default_factory=TurnRing)

    # Table
    deck: Deck = field(default_factory=Deck)
    top_card: Card | None = None

    # Round tracking
    phase: RoundPhase = RoundPhase.SETUP
    round_number: int = 1
    winner: Participant | None = None

    # Card drawn during a forced draw that may still be played
    drawn_card: Card | None = None

    # History (for logging and tests)
    action_history: list[Any] = field(default_factory=list)

    @property
    def current_player(self) -> Participant:
        """Participant at the ring cursor."""
        return self.ring.current()

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def is_over(self) -> bool:
        return self.phase == RoundPhase.GAME_OVER

    def get_player(self, player_id: str) -> Participant | None:
        """Get participant by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None
