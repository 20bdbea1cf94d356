"""
Engine Core - Turn order, stacked play validation and effect resolution.

The engine is the runtime that:
1. Tracks whose turn it is (TurnRing)
2. Validates stacked plays (validate_stack)
3. Applies actions via the reducer
4. Resolves stacked effects (EffectResolver)
"""

from .errors import EngineError, EmptyStructure, IndexOutOfRange, InvalidStack, EmptyDeck
from .cards import Card, CardColor, CardKind, Deck
from .turn_ring import TurnRing, Direction
from .state import GameState, Participant, Hand, RoundPhase
from .stack_validator import StackRule, StackRejection, StackValidation, validate_stack
from .effect_resolver import EffectResolver, EffectOutcome, PendingStack
from .action import Action, ActionType, ActionResult
from .reducer import Reducer, apply_action
from .action_generator import legal_actions, playable_positions, stack_candidates

__all__ = [
    "EngineError",
    "EmptyStructure",
    "IndexOutOfRange",
    "InvalidStack",
    "EmptyDeck",
    "Card",
    "CardColor",
    "CardKind",
    "Deck",
    "TurnRing",
    "Direction",
    "GameState",
    "Participant",
    "Hand",
    "RoundPhase",
    "StackRule",
    "StackRejection",
    "StackValidation",
    "validate_stack",
    "EffectResolver",
    "EffectOutcome",
    "PendingStack",
    "Action",
    "ActionType",
    "ActionResult",
    "Reducer",
    "apply_action",
    "legal_actions",
    "playable_positions",
    "stack_candidates",
]
