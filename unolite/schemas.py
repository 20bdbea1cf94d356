"""
Pydantic Schemas - Plain data handed to the presentation layer.

The presenter never sees engine objects. Each round it receives a
TableSnapshot built from the GameState and answers with a Move.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from .engine_core.action_generator import playable_positions
from .engine_core.cards import Card
from .engine_core.state import GameState


class CardInfo(BaseModel):
    """Card information for display."""
    color: str
    kind: str
    value: Optional[int] = None
    label: str = Field(description="Rendered form, e.g. [Red 5]")

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> CardInfo:
        return cls(
            color=card.color.value,
            kind=card.kind.value,
            value=card.value,
            label=str(card),
        )


class PlayerInfo(BaseModel):
    """Seat information for display."""
    player_id: str
    name: str
    hand_count: int = 0
    is_current_turn: bool = False


class TableSnapshot(BaseModel):
    """Everything the presenter needs to render one round."""
    round_number: int
    phase: str
    direction: str
    top_card: Optional[CardInfo] = None
    current_player: PlayerInfo
    players: list[PlayerInfo] = Field(default_factory=list, description="Join order")
    play_order: list[str] = Field(default_factory=list, description="Names from the current player on")
    hand: list[CardInfo] = Field(default_factory=list, description="Current player's hand")
    playable_positions: list[int] = Field(default_factory=list)
    deck_size: int = 0


def snapshot_from_state(state: GameState) -> TableSnapshot:
    """Build the presenter view of the current round."""
    current = state.current_player
    players = [
        PlayerInfo(
            player_id=p.player_id,
            name=p.name,
            hand_count=p.hand_size,
            is_current_turn=p is current,
        )
        for p in state.players
    ]
    hand = current.hand.cards
    return TableSnapshot(
        round_number=state.round_number,
        phase=state.phase.value,
        direction=state.ring.direction.value,
        top_card=CardInfo.from_card(state.top_card) if state.top_card else None,
        current_player=next(p for p in players if p.is_current_turn),
        players=players,
        play_order=[p.name for p in state.ring.play_order()],
        hand=[CardInfo.from_card(c) for c in hand],
        playable_positions=playable_positions(hand, state.top_card) if state.top_card else [],
        deck_size=state.deck.size,
    )
