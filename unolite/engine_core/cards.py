"""
Cards - Card values and the draw pile.

Cards are immutable values: two cards are equal when color,
kind and value all match. The deck is an ordered pile drawn
from the top.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum

from .errors import EmptyDeck


class CardColor(Enum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"


class CardKind(Enum):
    """What a card does when played."""
    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    CardKind.NUMBER: "Number",
    CardKind.SKIP: "Skip",
    CardKind.REVERSE: "Reverse",
    CardKind.DRAW_TWO: "Draw Two",
}

ACTION_KINDS = (CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO)

MAX_NUMBER = 9
ACTION_COPIES = 2


@dataclass(frozen=True)
class Card:
    """
    A single card.

    value is 0-9 for number cards and None for action cards.
    """
    color: CardColor
    kind: CardKind = CardKind.NUMBER
    value: int | None = None

    def __post_init__(self):
        if self.kind == CardKind.NUMBER:
            if self.value is None or not 0 <= self.value <= MAX_NUMBER:
                raise ValueError(f"Number card needs a value 0-{MAX_NUMBER}, got {self.value}")
        elif self.value is not None:
            raise ValueError(f"{self.kind.label} cards carry no value")

    @classmethod
    def number(cls, color: CardColor, value: int) -> Card:
        return cls(color=color, kind=CardKind.NUMBER, value=value)

    @classmethod
    def action(cls, color: CardColor, kind: CardKind) -> Card:
        return cls(color=color, kind=kind)

    @property
    def is_number(self) -> bool:
        return self.kind == CardKind.NUMBER

    @property
    def rank(self) -> str:
        """Face label: the number, or the action name."""
        return str(self.value) if self.is_number else self.kind.label

    def is_playable_on(self, top: Card) -> bool:
        """Check if this card can be played on the given top card."""
        if self.color == top.color:
            return True
        if self.is_number and top.is_number:
            return self.value == top.value
        return not self.is_number and self.kind == top.kind

    def matches_for_stacking(self, other: Card) -> bool:
        """Check if this card can be stacked with another (same number or same action)."""
        if self.is_number and other.is_number:
            return self.value == other.value
        return not self.is_number and self.kind == other.kind

    def __str__(self) -> str:
        return f"[{self.color.value} {self.rank}]"


@dataclass
class Deck:
    """
    The draw pile. Index 0 is the top.
    """
    cards: list[Card] = field(default_factory=list)

    @classmethod
    def standard(cls) -> Deck:
        """
        Build the 100-card deck.

        Per color: one 0, two of each 1-9, two of each action.
        """
        cards: list[Card] = []
        for color in CardColor:
            cards.append(Card.number(color, 0))
            for value in range(1, MAX_NUMBER + 1):
                cards.append(Card.number(color, value))
                cards.append(Card.number(color, value))
            for _ in range(ACTION_COPIES):
                for kind in ACTION_KINDS:
                    cards.append(Card.action(color, kind))
        return cls(cards=cards)

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self, rng: random.Random | None = None):
        """Shuffle in place (Fisher-Yates via random.shuffle)."""
        (rng or random.Random()).shuffle(self.cards)

    def draw_top(self) -> Card:
        """Remove and return the top card."""
        if not self.cards:
            raise EmptyDeck()
        return self.cards.pop(0)

    def add_card(self, card: Card):
        """Put a card back at the bottom of the pile."""
        self.cards.append(card)
