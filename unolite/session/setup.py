"""
Game Setup - Creates the initial game state.

This module handles:
- Player count validation
- Building and shuffling the deck (seeded for determinism)
- Dealing the starting hands
- Flipping the first top card
- Building the turn ring in join order
"""

from __future__ import annotations
import logging
import random
from typing import Sequence

from ..config import GameConfig
from ..engine_core.cards import Card, Deck
from ..engine_core.state import GameState, Participant, RoundPhase
from ..engine_core.turn_ring import TurnRing

logger = logging.getLogger(__name__)


def setup_game(
    player_names: Sequence[str],
    config: GameConfig | None = None,
    deck: Deck | None = None,
) -> GameState:
    """
    Set up a new game.

    Args:
        player_names: Display names in join order
        config: Table rules (defaults if not provided)
        deck: Pre-built draw pile; a shuffled standard deck if not provided

    Returns:
        Initial GameState waiting for the first play
    """
    game_config = config or GameConfig()
    game_config.check_player_count(len(player_names))

    rng = random.Random(game_config.seed)

    if deck is None:
        deck = Deck.standard()
        deck.shuffle(rng)

    players = _create_players(player_names)

    state = GameState(
        game_id=f"unolite_{game_config.seed if game_config.seed is not None else rng.randint(0, 999999)}",
        config=game_config,
        players=players,
        ring=TurnRing(players),
        deck=deck,
    )

    _deal(state, game_config.initial_hand_size)
    state.top_card = _flip_first_card(state.deck, rng)
    state.phase = RoundPhase.AWAITING_PLAY

    logger.info(
        "Game %s ready: %d players, first card %s",
        state.game_id, len(players), state.top_card,
    )
    return state


def _create_players(player_names: Sequence[str]) -> list[Participant]:
    return [
        Participant(player_id=f"player_{i + 1}", name=name or f"Player {i + 1}")
        for i, name in enumerate(player_names)
    ]


def _deal(state: GameState, hand_size: int):
    """Deal hand_size cards to each player in join order."""
    for player in state.players:
        for _ in range(hand_size):
            if state.deck.is_empty:
                return
            player.draw_card(state.deck.draw_top())


def _flip_first_card(deck: Deck, rng: random.Random) -> Card:
    """
    Flip the opening top card.

    Action cards go back into the deck, which is reshuffled, until
    a number card comes up.
    """
    if not any(card.is_number for card in deck.cards):
        raise ValueError("Deck has no number card to open with")

    card = deck.draw_top()
    while not card.is_number:
        deck.add_card(card)
        deck.shuffle(rng)
        card = deck.draw_top()
    return card
