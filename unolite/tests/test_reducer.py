"""
Tests for the reducer (state transitions).

Tests:
- Play ordering: table, hand, win check, effects
- Forced and voluntary draws
- Phase and turn validation
- Error handling
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.reducer import Reducer, apply_action
from ..engine_core.state import RoundPhase
from ..engine_core.turn_ring import Direction
from .conftest import BLUE, GREEN, RED, YELLOW, draw_two, num, reverse, skip


class TestPlayCards:
    """Tests for playing cards."""

    def test_stack_sets_top_to_last_card(self, three_player_state):
        """The last card played decides the color to follow."""
        state = three_player_state

        result = apply_action(state, Action.play("p0", [0, 1]))

        assert result.success
        assert state.top_card == num(BLUE, 3)
        assert result.played_cards == [num(RED, 3), num(BLUE, 3)]
        assert state.players[0].hand.cards == [skip(RED), skip(GREEN), num(YELLOW, 9)]
        assert state.phase == RoundPhase.EFFECTS_APPLIED
        assert "A plays [Red 3] + [Blue 3]" in result.state_changes

    def test_removal_keeps_other_cards_in_order(self, make_state):
        state = make_state([[num(RED, 1), num(BLUE, 9), num(GREEN, 1), num(YELLOW, 4)], []])
        state.top_card = num(RED, 1)

        apply_action(state, Action.play("p0", [2, 0]))

        assert state.players[0].hand.cards == [num(BLUE, 9), num(YELLOW, 4)]
        assert state.top_card == num(RED, 1)

    def test_end_turn_advances_once(self, three_player_state):
        state = three_player_state
        apply_action(state, Action.play("p0", [0]))

        result = apply_action(state, Action.end_turn())

        assert result.success
        assert state.current_player.name == "B"
        assert state.round_number == 2
        assert state.phase == RoundPhase.AWAITING_PLAY

    def test_skip_stack_passes_two_players(self, three_player_state):
        """A plays two skips: B and C lose their turns, A plays again."""
        state = three_player_state

        apply_action(state, Action.play("p0", [2, 3]))
        assert state.current_player.name == "C"

        apply_action(state, Action.end_turn())
        assert state.current_player.name == "A"

    def test_two_player_reverse_acts_like_skip(self, make_state):
        """Ring [A,B]: a single reverse flips direction and A plays again."""
        state = make_state([[reverse(RED), num(GREEN, 1)], [num(BLUE, 2)]])

        apply_action(state, Action.play("p0", [0]))
        apply_action(state, Action.end_turn())

        assert state.ring.direction == Direction.COUNTER_CLOCKWISE
        assert state.current_player.name == "A"

    def test_draw_two_stack_hits_next_player(self, make_state):
        deck = [num(YELLOW, v) for v in range(6)]
        state = make_state(
            [[draw_two(RED), draw_two(BLUE), num(GREEN, 7)], [num(GREEN, 1)], [num(GREEN, 2)]],
            deck=deck,
        )

        result = apply_action(state, Action.play("p0", [0, 1]))

        assert state.players[1].hand_size == 5
        assert result.effect.victim is state.players[1]
        apply_action(state, Action.end_turn())
        assert state.current_player.name == "C"

    def test_invalid_stack_leaves_state_untouched(self, three_player_state):
        state = three_player_state
        hand_before = list(state.players[0].hand.cards)

        result = apply_action(state, Action.play("p0", [0, 2]))

        assert not result.success
        assert result.error_code == "INVALID_STACK"
        assert "does not match" in result.error
        assert state.players[0].hand.cards == hand_before
        assert state.top_card == num(RED, 5)
        assert state.phase == RoundPhase.AWAITING_PLAY
        assert state.action_history == []

    def test_out_of_range_index(self, three_player_state):
        result = apply_action(three_player_state, Action.play("p0", [9]))
        assert not result.success
        assert result.error_code == "INDEX_OUT_OF_RANGE"

    def test_unplayable_first_card(self, three_player_state):
        result = apply_action(three_player_state, Action.play("p0", [4]))
        assert result.error_code == "INVALID_STACK"
        assert "cannot be played" in result.error

    def test_wrong_player_fails(self, three_player_state):
        result = apply_action(three_player_state, Action.play("p1", [0]))
        assert not result.success
        assert "turn" in result.error.lower()


class TestWinAndUno:
    """Tests for the win check and UNO notice."""

    def test_emptying_hand_wins_without_effects(self, make_state):
        """A winning skip is not resolved: the ring does not move."""
        state = make_state([[skip(RED)], [num(GREEN, 1)], [num(GREEN, 2)]])

        result = apply_action(state, Action.play("p0", [0]))

        assert result.success
        assert result.winner == "p0"
        assert result.effect is None
        assert state.phase == RoundPhase.GAME_OVER
        assert state.winner is state.players[0]
        assert state.current_player.name == "A"
        assert "A wins! Congratulations!" in result.state_changes

    def test_winning_draw_two_stack_gives_no_penalty(self, make_state):
        state = make_state(
            [[draw_two(RED), draw_two(BLUE)], [num(GREEN, 1)]],
            deck=[num(YELLOW, 1)] * 4,
        )
        apply_action(state, Action.play("p0", [0, 1]))
        assert state.players[1].hand_size == 1
        assert state.deck.size == 4

    def test_uno_when_one_card_left(self, make_state):
        state = make_state([[num(RED, 3), num(BLUE, 3), num(YELLOW, 9)], [num(GREEN, 1)]])

        result = apply_action(state, Action.play("p0", [0, 1]))

        assert result.uno
        assert "A has UNO!" in result.state_changes

    def test_no_uno_with_more_cards(self, three_player_state):
        result = apply_action(three_player_state, Action.play("p0", [0]))
        assert not result.uno

    def test_no_actions_after_game_over(self, make_state):
        state = make_state([[num(RED, 1)], [num(GREEN, 1)]])
        apply_action(state, Action.play("p0", [0]))

        result = apply_action(state, Action.end_turn())

        assert not result.success
        assert "over" in result.error.lower()


class TestDraws:
    """Tests for voluntary and forced draws."""

    def test_voluntary_draw_ends_turn(self, three_player_state):
        state = three_player_state

        result = apply_action(state, Action.draw("p0"))

        assert result.success
        assert result.drawn_card == num(YELLOW, 1)
        assert state.players[0].hand_size == 6
        assert state.phase == RoundPhase.NEXT_ROUND

    def test_voluntary_draw_on_empty_deck_skips(self, make_state):
        state = make_state([[num(RED, 1)], [num(GREEN, 1)]])
        result = apply_action(state, Action.draw("p0"))
        assert result.success
        assert "Deck is empty! Skipping turn." in result.state_changes
        assert state.phase == RoundPhase.NEXT_ROUND

    def test_forced_draw_playable_card_can_be_played(self, make_state):
        state = make_state([[num(BLUE, 1), num(GREEN, 8)], [num(GREEN, 1)]], deck=[num(RED, 2)])

        drawn = apply_action(state, Action.forced_draw("p0"))
        assert drawn.drawn_card_playable
        assert state.phase == RoundPhase.FORCED_DRAW

        played = apply_action(state, Action.play_drawn("p0"))

        assert played.success
        assert state.top_card == num(RED, 2)
        assert state.players[0].hand.cards == [num(BLUE, 1), num(GREEN, 8)]
        assert state.drawn_card is None
        assert state.phase == RoundPhase.EFFECTS_APPLIED

    def test_forced_draw_drawn_skip_takes_effect(self, make_state):
        state = make_state([[num(BLUE, 1), num(BLUE, 2)], [num(GREEN, 1)], [num(GREEN, 2)]], deck=[skip(RED)])

        apply_action(state, Action.forced_draw("p0"))
        apply_action(state, Action.play_drawn("p0"))
        apply_action(state, Action.end_turn())

        assert state.current_player.name == "C"

    def test_forced_draw_pass_keeps_card(self, make_state):
        state = make_state([[num(BLUE, 1)], [num(GREEN, 1)]], deck=[num(RED, 2)])
        apply_action(state, Action.forced_draw("p0"))

        result = apply_action(state, Action.pass_turn("p0"))

        assert result.success
        assert state.players[0].hand_size == 2
        assert state.phase == RoundPhase.NEXT_ROUND

    def test_forced_draw_unplayable_ends_turn(self, make_state):
        state = make_state([[num(BLUE, 1)], [num(GREEN, 1)]], deck=[num(BLUE, 2)])

        result = apply_action(state, Action.forced_draw("p0"))

        assert not result.drawn_card_playable
        assert state.phase == RoundPhase.NEXT_ROUND
        assert not apply_action(state, Action.play_drawn("p0")).success

    def test_forced_draw_on_empty_deck_skips(self, make_state):
        state = make_state([[num(BLUE, 1)], [num(GREEN, 1)]])
        result = apply_action(state, Action.forced_draw("p0"))
        assert result.success
        assert state.phase == RoundPhase.NEXT_ROUND
        apply_action(state, Action.end_turn())
        assert state.current_player.name == "B"

    def test_forced_draw_refused_with_playable_hand(self, three_player_state):
        result = apply_action(three_player_state, Action.forced_draw("p0"))
        assert not result.success


class TestPhaseValidation:
    """Tests for phase checks."""

    def test_end_turn_requires_a_finished_play(self, three_player_state):
        result = apply_action(three_player_state, Action.end_turn())
        assert not result.success
        assert "not allowed" in result.error

    def test_cannot_play_twice(self, three_player_state):
        state = three_player_state
        apply_action(state, Action.play("p0", [0]))
        assert not apply_action(state, Action.play("p0", [0])).success

    def test_setup_phase_rejects_actions(self, three_player_state):
        three_player_state.phase = RoundPhase.SETUP
        result = apply_action(three_player_state, Action.play("p0", [0]))
        assert "not started" in result.error


class TestActionHistory:
    """Tests for action history tracking."""

    def test_successful_actions_logged(self, three_player_state):
        state = three_player_state
        action = Action.play("p0", [0])
        Reducer().apply(state, action)
        assert state.action_history == [action]

    def test_reducer_uses_configured_penalty(self, make_state, config):
        state = make_state([[draw_two(RED), num(RED, 1)], [num(GREEN, 1)]], deck=[num(YELLOW, 1)] * 6)
        state.config = config.model_copy(update={"draw_two_penalty": 3})

        apply_action(state, Action.play("p0", [0]))

        assert state.players[1].hand_size == 4
