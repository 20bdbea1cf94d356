"""
Stack Validator - Decides whether chosen cards form one legal play.

A stacked play is several hand cards played together in one turn.
Rules, checked in this order:
1. At least one card is chosen
2. Every position exists in the hand
3. No position is chosen twice
4. The first card is playable on the top card
5. Every later card matches the first for stacking

The validator is pure: it never touches the hand or the table.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .cards import Card
from .errors import IndexOutOfRange, InvalidStack


class StackRule(Enum):
    """Which stacking rule a rejection broke."""
    NON_EMPTY = "non_empty"
    IN_RANGE = "in_range"
    NO_DUPLICATES = "no_duplicates"
    PLAYABLE_FIRST = "playable_first"
    MATCHES_FIRST = "matches_first"


@dataclass(frozen=True)
class StackRejection:
    """Why a proposed stack was refused."""
    rule: StackRule
    message: str
    position: int | None = None
    card: Card | None = None
    hand_size: int = 0


@dataclass(frozen=True)
class StackValidation:
    """
    Result of validating a proposed stack.

    Accepted results carry the positions and cards in play order;
    rejected ones carry the rejection.
    """
    positions: tuple[int, ...] = ()
    cards: tuple[Card, ...] = ()
    rejection: StackRejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def first_card(self) -> Card:
        return self.cards[0]

    @property
    def last_card(self) -> Card:
        return self.cards[-1]

    def raise_for_rejection(self):
        """Raise the matching engine error if this stack was rejected."""
        rejection = self.rejection
        if rejection is None:
            return
        if rejection.rule == StackRule.IN_RANGE:
            raise IndexOutOfRange(rejection.position, rejection.hand_size)
        raise InvalidStack(
            rejection.rule.value,
            rejection.message,
            position=rejection.position,
            card=rejection.card,
        )


def _reject(rule: StackRule, message: str, position: int | None = None, card: Card | None = None) -> StackValidation:
    return StackValidation(rejection=StackRejection(rule, message, position, card))


def validate_stack(top_card: Card, hand: Sequence[Card], positions: Sequence[int]) -> StackValidation:
    """
    Validate a proposed stacked play against the top card.

    Args:
        top_card: Current top of the discard pile
        hand: The player's cards, in hand order
        positions: Chosen hand positions, in the order they will be played

    Returns:
        StackValidation, accepted or carrying the first broken rule
    """
    if not positions:
        return _reject(StackRule.NON_EMPTY, "Choose at least one card")

    for position in positions:
        if not 0 <= position < len(hand):
            return StackValidation(rejection=StackRejection(
                StackRule.IN_RANGE,
                f"Invalid index: {position}",
                position=position,
                hand_size=len(hand),
            ))

    seen: set[int] = set()
    for position in positions:
        if position in seen:
            return _reject(
                StackRule.NO_DUPLICATES,
                f"Duplicate index: {position}",
                position=position,
                card=hand[position],
            )
        seen.add(position)

    first = hand[positions[0]]
    if not first.is_playable_on(top_card):
        return _reject(
            StackRule.PLAYABLE_FIRST,
            f"{first} cannot be played on {top_card}",
            position=positions[0],
            card=first,
        )

    for position in positions[1:]:
        card = hand[position]
        if not card.matches_for_stacking(first):
            return _reject(
                StackRule.MATCHES_FIRST,
                f"{card} does not match {first} for stacking",
                position=position,
                card=card,
            )

    return StackValidation(
        positions=tuple(positions),
        cards=tuple(hand[p] for p in positions),
    )
