"""
Game Loop - Drives rounds through the reducer.

Each round:
1. Presenter shows the table to the current player
2. If nothing in hand is playable, a forced draw happens; a playable
   drawn card may be played at once
3. Otherwise the player picks cards (re-prompted until legal) or draws
4. Effects are resolved by the reducer
5. Unless someone won, the turn ends and the ring advances

There is one game and one actor; nothing here is concurrent.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState, Participant, RoundPhase
from ..schemas import CardInfo, snapshot_from_state
from .presenter import Presenter

logger = logging.getLogger(__name__)

STALLED_NOTICE = "Nobody can play and the deck is empty. The game cannot finish."


@dataclass
class TurnResult:
    """
    Result of playing one round.

    Contains what the presenter announced and, at the end, the winner.
    """
    player_id: str
    phase: RoundPhase
    played: list[str] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)
    rejections: list[str] = field(default_factory=list)
    drew: bool = False
    winner: str | None = None

    @property
    def game_over(self) -> bool:
        return self.phase == RoundPhase.GAME_OVER


class GameLoop:
    """
    The main game loop driver.

    Usage:
        state = setup_game(["Ann", "Bob"])
        loop = GameLoop(state, TerminalPresenter())
        winner = loop.run()
    """

    def __init__(self, state: GameState, presenter: Presenter, reducer: Reducer | None = None):
        self.state = state
        self.presenter = presenter
        self.reducer = reducer or Reducer.for_game(state)
        self._empty_draws = 0

    @property
    def phase(self) -> RoundPhase:
        return self.state.phase

    @property
    def stalled(self) -> bool:
        """True once a full lap of players drew from an empty deck."""
        return self._empty_draws >= self.state.num_players

    def run(self, max_rounds: int | None = None) -> Participant | None:
        """
        Play rounds until someone wins.

        Returns the winner, or None if max_rounds ran out first.
        """
        rounds = 0
        while not self.state.is_over:
            if max_rounds is not None and rounds >= max_rounds:
                logger.info("Stopped after %d rounds without a winner", rounds)
                return None
            self.play_round()
            rounds += 1
        return self.state.winner

    def play_round(self) -> TurnResult:
        """Play the current player's turn and hand over to the next."""
        state = self.state
        player = state.current_player
        result = TurnResult(player_id=player.player_id, phase=state.phase)

        if state.is_over:
            result.winner = state.winner.player_id if state.winner else None
            return result

        snapshot = snapshot_from_state(state)
        self.presenter.show_table(snapshot)

        legal = legal_actions(state)
        if [a.action_type for a in legal] == [ActionType.FORCED_DRAW]:
            self._forced_draw(player, result)
        else:
            self._choose_and_play(player, result)

        if state.is_over:
            result.phase = state.phase
            result.winner = state.winner.player_id
            self.presenter.show_winner(state.winner.name)
            return result

        self._apply(Action.end_turn(), result)
        result.phase = state.phase
        return result

    def _forced_draw(self, player: Participant, result: TurnResult):
        outcome = self._apply(Action.forced_draw(player.player_id), result)
        result.drew = True
        self._note_draw(outcome, result)
        if not outcome.drawn_card_playable:
            return

        snapshot = snapshot_from_state(self.state)
        card = CardInfo.from_card(outcome.drawn_card)
        if self.presenter.confirm_play_drawn(snapshot, card):
            self._apply(Action.play_drawn(player.player_id), result)
        else:
            self._apply(Action.pass_turn(player.player_id), result)

    def _choose_and_play(self, player: Participant, result: TurnResult):
        while True:
            move = self.presenter.choose_move(snapshot_from_state(self.state))
            if move.is_draw:
                outcome = self._apply(Action.draw(player.player_id), result)
                self._note_draw(outcome, result)
                result.drew = True
                return

            outcome = self.reducer.apply(self.state, Action.play(player.player_id, move.positions))
            if outcome.success:
                self._record(outcome, result)
                self._empty_draws = 0
                return

            logger.debug("%s move %s rejected: %s", player.name, move.positions, outcome.error)
            result.rejections.append(outcome.error)
            self.presenter.show_rejection(outcome.error)

    def _note_draw(self, outcome: ActionResult, result: TurnResult):
        if outcome.drawn_card is not None:
            self._empty_draws = 0
            return
        self._empty_draws += 1
        if self._empty_draws == self.state.num_players:
            logger.warning("Stalled in round %d: empty deck, no playable hands", self.state.round_number)
            result.messages.append(STALLED_NOTICE)
            self.presenter.announce([STALLED_NOTICE])

    def _apply(self, action: Action, result: TurnResult) -> ActionResult:
        outcome = self.reducer.apply(self.state, action)
        if not outcome.success:
            # Loop-issued actions are always legal for the phase
            raise RuntimeError(f"{action.action_type.value} failed: {outcome.error}")
        self._record(outcome, result)
        return outcome

    def _record(self, outcome: ActionResult, result: TurnResult):
        result.played.extend(str(c) for c in outcome.played_cards)
        result.messages.extend(outcome.state_changes)
        self.presenter.announce(outcome.state_changes)
