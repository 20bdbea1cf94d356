"""
Effect Resolver - Turns a completed play into ring and penalty effects.

Called after the hand has been reduced and the top card set to
the last card played. The outer loop always performs one more
advance after resolution, so every effect is expressed relative
to that trailing advance:

    SKIP x N:      advance N times, the trailing advance passes N players
    REVERSE x N:   odd N flips direction, even N cancels out;
                   with two players the flip also advances once
    DRAW_TWO x N:  advance to the victim, who draws 2N and is then
                   passed over by the trailing advance
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .cards import CardKind
from .state import GameState, Participant

logger = logging.getLogger(__name__)

DRAW_TWO_PENALTY = 2


@dataclass(frozen=True)
class PendingStack:
    """A just-completed play: what kind of card, and how many."""
    kind: CardKind
    count: int

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"Stack count must be at least 1, got {self.count}")


@dataclass
class EffectOutcome:
    """
    What resolving a stack did.

    skipped lists participants the ring moved onto (and so past)
    for SKIP; victim is the DRAW_TWO target.
    """
    kind: CardKind
    count: int
    skipped: list[Participant] = field(default_factory=list)
    direction_reversed: bool = False
    victim: Participant | None = None
    cards_drawn: int = 0
    messages: list[str] = field(default_factory=list)


@dataclass
class EffectResolver:
    """
    Resolves stacked effects against the game state.

    Stateless between calls - everything lives in GameState.
    """
    draw_penalty: int = DRAW_TWO_PENALTY

    def resolve(self, game: GameState, pending: PendingStack) -> EffectOutcome:
        """Apply the effects of a pending stack and describe them."""
        outcome = EffectOutcome(kind=pending.kind, count=pending.count)
        handler = {
            CardKind.SKIP: self._resolve_skip,
            CardKind.REVERSE: self._resolve_reverse,
            CardKind.DRAW_TWO: self._resolve_draw_two,
        }.get(pending.kind)
        if handler is not None:
            handler(game, outcome)
        logger.debug(
            "Resolved %s x%d: cursor on %s",
            pending.kind.value, pending.count, game.current_player.name,
        )
        return outcome

    def _resolve_skip(self, game: GameState, outcome: EffectOutcome):
        count = outcome.count
        if count == 1:
            outcome.messages.append("SKIP! Next player loses their turn.")
        else:
            outcome.messages.append(f"SKIP x{count}! Next {count} players lose their turn.")
        for _ in range(count):
            game.ring.advance()
            outcome.skipped.append(game.ring.current())

    def _resolve_reverse(self, game: GameState, outcome: EffectOutcome):
        if outcome.count % 2 == 0:
            outcome.messages.append(
                f"REVERSE x{outcome.count}! Direction unchanged (cancels out)."
            )
            return

        game.ring.reverse_direction()
        outcome.direction_reversed = True
        outcome.messages.append("REVERSE! Turn order reversed.")
        if len(game.ring) == 2:
            # Two players: reverse acts like skip
            game.ring.advance()
            outcome.skipped.append(game.ring.current())

    def _resolve_draw_two(self, game: GameState, outcome: EffectOutcome):
        total = self.draw_penalty * outcome.count
        game.ring.advance()
        victim = game.ring.current()
        outcome.victim = victim

        if outcome.count == 1:
            outcome.messages.append(
                f"DRAW TWO! {victim.name} draws {total} cards and loses their turn."
            )
        else:
            outcome.messages.append(
                f"DRAW TWO x{outcome.count}! {victim.name} draws {total} cards "
                f"and loses their turn."
            )

        for _ in range(total):
            if game.deck.is_empty:
                logger.info("Deck ran out after %d penalty cards", outcome.cards_drawn)
                outcome.messages.append(
                    f"Deck is empty! {victim.name} only drew {outcome.cards_drawn}."
                )
                break
            victim.draw_card(game.deck.draw_top())
            outcome.cards_drawn += 1
