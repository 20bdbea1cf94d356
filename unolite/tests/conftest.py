"""
Pytest fixtures for UNO-Lite tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core.cards import Card, CardColor, CardKind, Deck
from ..engine_core.state import GameState, Hand, Participant, RoundPhase
from ..engine_core.turn_ring import TurnRing


RED, BLUE, GREEN, YELLOW = CardColor.RED, CardColor.BLUE, CardColor.GREEN, CardColor.YELLOW


def num(color: CardColor, value: int) -> Card:
    return Card.number(color, value)


def skip(color: CardColor) -> Card:
    return Card.action(color, CardKind.SKIP)


def reverse(color: CardColor) -> Card:
    return Card.action(color, CardKind.REVERSE)


def draw_two(color: CardColor) -> Card:
    return Card.action(color, CardKind.DRAW_TWO)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(seed=1234)


@pytest.fixture
def make_state(config):
    """
    Factory for a game in progress.

    make_state(hands, top=..., deck=...) seats one player per hand
    (named A, B, C, ...) with A to play.
    """
    def _make(
        hands: list[list[Card]],
        top: Card | None = None,
        deck: list[Card] | None = None,
    ) -> GameState:
        players = [
            Participant(player_id=f"p{i}", name=chr(ord("A") + i), hand=Hand(cards=list(cards)))
            for i, cards in enumerate(hands)
        ]
        return GameState(
            game_id="test_game",
            config=config,
            players=players,
            ring=TurnRing(players),
            deck=Deck(cards=list(deck or [])),
            top_card=top or num(RED, 5),
            phase=RoundPhase.AWAITING_PLAY,
        )

    return _make


@pytest.fixture
def three_player_state(make_state) -> GameState:
    """A, B, C with small mixed hands, red 5 on the table, a short deck."""
    return make_state(
        [
            [num(RED, 3), num(BLUE, 3), skip(RED), skip(GREEN), num(YELLOW, 9)],
            [num(GREEN, 1), num(GREEN, 2)],
            [num(BLUE, 7), draw_two(YELLOW)],
        ],
        top=num(RED, 5),
        deck=[num(YELLOW, 1), num(YELLOW, 2), num(YELLOW, 3), num(YELLOW, 4), num(YELLOW, 6)],
    )
