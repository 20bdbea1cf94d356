"""
Action System - Actions, payloads, and results.

Actions represent one step of a round:
1. Player actions (play cards, draw, play or pass the drawn card)
2. System actions (end turn)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Player actions
    PLAY_CARDS = "play_cards"
    DRAW = "draw"  # Voluntary draw, ends the turn
    FORCED_DRAW = "forced_draw"  # No playable card in hand
    PLAY_DRAWN = "play_drawn"  # Play the card just drawn
    PASS = "pass"  # Keep the card just drawn

    # System actions
    END_TURN = "end_turn"


PLAYER_ACTIONS = frozenset({
    ActionType.PLAY_CARDS,
    ActionType.DRAW,
    ActionType.FORCED_DRAW,
    ActionType.PLAY_DRAWN,
    ActionType.PASS,
})


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    positions are hand indices in play order (PLAY_CARDS only).
    """
    action_type: ActionType
    player_id: str | None = None
    positions: tuple[int, ...] = ()

    @classmethod
    def play(cls, player_id: str, positions: list[int] | tuple[int, ...]) -> Action:
        """Factory for a (possibly stacked) play."""
        return cls(
            action_type=ActionType.PLAY_CARDS,
            player_id=player_id,
            positions=tuple(positions),
        )

    @classmethod
    def draw(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.DRAW, player_id=player_id)

    @classmethod
    def forced_draw(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.FORCED_DRAW, player_id=player_id)

    @classmethod
    def play_drawn(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.PLAY_DRAWN, player_id=player_id)

    @classmethod
    def pass_turn(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.PASS, player_id=player_id)

    @classmethod
    def end_turn(cls) -> Action:
        return cls(action_type=ActionType.END_TURN)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - Errors (if failed)
    - Human-readable changes and effect details (for the presenter)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    # For presentation
    state_changes: list[str] = field(default_factory=list)

    # Play details
    played_cards: list[Any] = field(default_factory=list)  # Card
    effect: Any | None = None  # EffectOutcome
    uno: bool = False
    winner: str | None = None

    # Draw details
    drawn_card: Any | None = None  # Card
    drawn_card_playable: bool = False

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        **details: Any,
    ) -> ActionResult:
        """Create a success result with the updated state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            **details,
        )
