"""
Tests for legal action generation.
"""

from ..engine_core.action import Action, ActionType
from ..engine_core.action_generator import legal_actions, playable_positions, stack_candidates
from ..engine_core.reducer import apply_action
from ..engine_core.state import RoundPhase
from .conftest import BLUE, GREEN, RED, YELLOW, num, skip


class TestPlayablePositions:

    def test_marks_color_and_rank_matches(self):
        hand = [num(BLUE, 5), num(GREEN, 1), skip(RED), num(YELLOW, 9)]
        assert playable_positions(hand, num(RED, 5)) == [0, 2]

    def test_stack_candidates_follow_first_card(self):
        hand = [num(BLUE, 5), num(GREEN, 5), skip(RED), num(RED, 5)]
        assert stack_candidates(hand, 3) == [3, 0, 1]
        assert stack_candidates(hand, 2) == [2]


class TestLegalActions:
    """Tests that generated actions match each phase."""

    def test_awaiting_play_offers_singles_stacks_and_draw(self, three_player_state):
        actions = legal_actions(three_player_state)

        assert Action.play("p0", [0]) in actions
        assert Action.play("p0", [0, 1]) in actions
        assert Action.play("p0", [2, 3]) in actions
        assert Action.play("p0", [4]) not in actions
        assert actions[-1] == Action.draw("p0")

    def test_every_generated_play_is_accepted(self, three_player_state, make_state):
        """Each generated play succeeds when applied to a fresh copy."""
        for action in legal_actions(three_player_state):
            if action.action_type != ActionType.PLAY_CARDS:
                continue
            state = make_state(
                [list(p.hand.cards) for p in three_player_state.players],
                top=three_player_state.top_card,
                deck=list(three_player_state.deck.cards),
            )
            assert apply_action(state, action).success

    def test_no_playable_card_forces_draw(self, make_state):
        state = make_state([[num(BLUE, 1)], [num(GREEN, 1)]])
        assert legal_actions(state) == [Action.forced_draw("p0")]

    def test_forced_draw_phase(self, make_state):
        state = make_state([[num(BLUE, 1)], [num(GREEN, 1)]], deck=[num(RED, 1)])
        apply_action(state, Action.forced_draw("p0"))
        assert legal_actions(state) == [Action.play_drawn("p0"), Action.pass_turn("p0")]

    def test_after_play_only_end_turn(self, three_player_state):
        apply_action(three_player_state, Action.play("p0", [0]))
        assert legal_actions(three_player_state) == [Action.end_turn()]

    def test_game_over_has_no_actions(self, three_player_state):
        three_player_state.phase = RoundPhase.GAME_OVER
        assert legal_actions(three_player_state) == []
