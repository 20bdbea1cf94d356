"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Validates phase and turn before applying
- Returns ActionResult with success/failure
- Plays run in a fixed order: validate, set table, reduce hand,
  check win, resolve effects. The trailing advance is END_TURN.
- Delegates stacked effects to EffectResolver
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .action import Action, ActionResult, ActionType, PLAYER_ACTIONS
from .cards import Card
from .effect_resolver import EffectResolver, PendingStack
from .errors import EmptyDeck, EngineError
from .stack_validator import validate_stack
from .state import GameState, Participant, RoundPhase

logger = logging.getLogger(__name__)

# Which actions each phase accepts
PHASE_ACTIONS = {
    RoundPhase.AWAITING_PLAY: {ActionType.PLAY_CARDS, ActionType.DRAW, ActionType.FORCED_DRAW},
    RoundPhase.FORCED_DRAW: {ActionType.PLAY_DRAWN, ActionType.PASS},
    RoundPhase.EFFECTS_APPLIED: {ActionType.END_TURN},
    RoundPhase.NEXT_ROUND: {ActionType.END_TURN},
}


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """
    resolver: EffectResolver = field(default_factory=EffectResolver)

    @classmethod
    def for_game(cls, state: GameState) -> Reducer:
        """Reducer using the game's configured draw penalty."""
        return cls(resolver=EffectResolver(draw_penalty=state.config.draw_two_penalty))

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the updated state or an error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            logger.debug("Rejected %s: %s", action.action_type.value, validation_error)
            return ActionResult.failure(validation_error, error_code="INVALID_ACTION")

        handler = self._get_handler(action.action_type)

        try:
            result = handler(state, action)
        except EngineError as e:
            logger.debug("Action %s failed: %s", action.action_type.value, e)
            return ActionResult.failure(str(e), error_code=e.code)

        if result.success:
            state.action_history.append(action)
        return result

    def _validate_action(self, state: GameState, action: Action) -> str | None:
        """
        Validate that an action is legal in the current state.

        Returns error message if invalid, None if valid.
        """
        if state.phase == RoundPhase.GAME_OVER:
            return "Game is over - no actions allowed"

        if state.phase == RoundPhase.SETUP:
            return "Game not started - deal the cards first"

        allowed = PHASE_ACTIONS.get(state.phase, set())
        if action.action_type not in allowed:
            return f"{action.action_type.value} not allowed during {state.phase.value}"

        if action.action_type in PLAYER_ACTIONS:
            current = state.current_player
            if action.player_id != current.player_id:
                return f"Not {action.player_id}'s turn"

        return None

    def _get_handler(self, action_type: ActionType):
        handlers = {
            ActionType.PLAY_CARDS: self._handle_play_cards,
            ActionType.DRAW: self._handle_draw,
            ActionType.FORCED_DRAW: self._handle_forced_draw,
            ActionType.PLAY_DRAWN: self._handle_play_drawn,
            ActionType.PASS: self._handle_pass,
            ActionType.END_TURN: self._handle_end_turn,
        }
        return handlers[action_type]

    def _handle_play_cards(self, state: GameState, action: Action) -> ActionResult:
        """Validate and play a (possibly stacked) set of hand cards."""
        player = state.current_player
        validation = validate_stack(state.top_card, player.hand.cards, action.positions)
        validation.raise_for_rejection()

        state.phase = RoundPhase.VALIDATED
        cards = list(validation.cards)

        # Last card played sets the color and rank to follow
        state.top_card = validation.last_card

        # Highest index first so lower indices stay valid
        for position in sorted(validation.positions, reverse=True):
            player.hand.remove_at(position)

        played = " + ".join(str(c) for c in cards)
        return self._finish_play(state, player, cards, [f"{player.name} plays {played}"])

    def _handle_play_drawn(self, state: GameState, action: Action) -> ActionResult:
        """Play the card picked up by a forced draw as a stack of one."""
        player = state.current_player
        card = state.drawn_card
        if card is None:
            return ActionResult.failure("No drawn card to play", error_code="INVALID_ACTION")

        position = player.hand.count - 1
        state.top_card = card
        player.hand.remove_at(position)
        state.drawn_card = None

        return self._finish_play(state, player, [card], [f"{player.name} plays {card}"])

    def _finish_play(
        self,
        state: GameState,
        player: Participant,
        cards: list[Card],
        changes: list[str],
    ) -> ActionResult:
        """UNO notice, win check, then effect resolution."""
        uno = player.hand_size == 1
        if uno:
            changes.append(f"{player.name} has UNO!")

        if player.hand.is_empty:
            state.phase = RoundPhase.GAME_OVER
            state.winner = player
            changes.append(f"{player.name} wins! Congratulations!")
            logger.info("%s won in round %d", player.name, state.round_number)
            return ActionResult.success_with_state(
                state,
                changes=changes,
                played_cards=cards,
                uno=uno,
                winner=player.player_id,
            )

        outcome = self.resolver.resolve(state, PendingStack(kind=cards[0].kind, count=len(cards)))
        changes.extend(outcome.messages)
        state.phase = RoundPhase.EFFECTS_APPLIED

        return ActionResult.success_with_state(
            state,
            changes=changes,
            played_cards=cards,
            effect=outcome,
            uno=uno,
        )

    def _handle_draw(self, state: GameState, action: Action) -> ActionResult:
        """Voluntary draw: take one card and end the turn."""
        player = state.current_player
        card = self._draw_one(state, player)
        state.phase = RoundPhase.NEXT_ROUND
        if card is None:
            return ActionResult.success_with_state(state, changes=["Deck is empty! Skipping turn."])
        return ActionResult.success_with_state(
            state,
            changes=[f"{player.name} drew a card"],
            drawn_card=card,
        )

    def _handle_forced_draw(self, state: GameState, action: Action) -> ActionResult:
        """
        Draw because nothing in hand is playable.

        A playable drawn card may be played at once (PLAY_DRAWN)
        or kept (PASS); otherwise the turn is over.
        """
        player = state.current_player
        if player.has_playable_card(state.top_card):
            return ActionResult.failure(
                f"{player.name} has a playable card", error_code="INVALID_ACTION"
            )

        changes = ["No playable cards! Drawing from deck..."]
        card = self._draw_one(state, player)
        if card is None:
            state.phase = RoundPhase.NEXT_ROUND
            changes.append("Deck is empty! Skipping turn.")
            return ActionResult.success_with_state(state, changes=changes)

        changes.append(f"{player.name} drew a card")
        playable = card.is_playable_on(state.top_card)
        if playable:
            state.drawn_card = card
            state.phase = RoundPhase.FORCED_DRAW
            changes.append(f"{card} can be played")
        else:
            state.phase = RoundPhase.NEXT_ROUND

        return ActionResult.success_with_state(
            state,
            changes=changes,
            drawn_card=card,
            drawn_card_playable=playable,
        )

    def _handle_pass(self, state: GameState, action: Action) -> ActionResult:
        """Keep the drawn card and end the turn."""
        player = state.current_player
        state.drawn_card = None
        state.phase = RoundPhase.NEXT_ROUND
        return ActionResult.success_with_state(state, changes=[f"{player.name} keeps the card"])

    def _handle_end_turn(self, state: GameState, action: Action) -> ActionResult:
        """Trailing advance: hand the turn to the next player."""
        state.ring.advance()
        state.round_number += 1
        state.phase = RoundPhase.AWAITING_PLAY
        return ActionResult.success_with_state(
            state,
            changes=[f"Turn ended. Next player: {state.current_player.name}"],
        )

    def _draw_one(self, state: GameState, player: Participant) -> Card | None:
        """Draw one card for player; None when the deck is empty."""
        try:
            card = state.deck.draw_top()
        except EmptyDeck:
            logger.info("Deck empty, %s skips the draw", player.name)
            return None
        player.draw_card(card)
        return card


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer for the game and applies the action.
    """
    return Reducer.for_game(state).apply(state, action)
