"""
Action Generator - Generates the legal actions for the current phase.

Used by:
1. The game loop (is a forced draw needed?)
2. Snapshots (which hand positions are playable)
3. Tests (is this action in legal_actions?)

Stacks are offered as single plays plus one maximal stack per
playable first card; any ordering of the matching cards is also
legal and accepted by the reducer.
"""

from __future__ import annotations
from typing import Sequence

from .action import Action
from .cards import Card
from .state import GameState, RoundPhase


def playable_positions(hand: Sequence[Card], top: Card) -> list[int]:
    """Hand positions that may open a play on top."""
    return [i for i, card in enumerate(hand) if card.is_playable_on(top)]


def stack_candidates(hand: Sequence[Card], position: int) -> list[int]:
    """
    The card at position followed by every other card that stacks with it.

    Order is hand order after the opening card.
    """
    first = hand[position]
    return [position] + [
        i for i, card in enumerate(hand)
        if i != position and card.matches_for_stacking(first)
    ]


def legal_actions(state: GameState) -> list[Action]:
    """
    Generate all legal actions for the current player.

    Returns a list of fully-specified Action objects.
    """
    if state.phase in (RoundPhase.GAME_OVER, RoundPhase.SETUP):
        return []

    if state.phase in (RoundPhase.EFFECTS_APPLIED, RoundPhase.NEXT_ROUND):
        return [Action.end_turn()]

    player = state.current_player

    if state.phase == RoundPhase.FORCED_DRAW:
        return [Action.play_drawn(player.player_id), Action.pass_turn(player.player_id)]

    hand = player.hand.cards
    openers = playable_positions(hand, state.top_card)
    if not openers:
        return [Action.forced_draw(player.player_id)]

    actions = []
    for position in openers:
        actions.append(Action.play(player.player_id, [position]))
        stack = stack_candidates(hand, position)
        if len(stack) > 1:
            actions.append(Action.play(player.player_id, stack))
    actions.append(Action.draw(player.player_id))
    return actions
