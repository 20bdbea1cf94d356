"""
Turn Ring - Circular turn order with a cursor and a direction.

The ring is an arena of slots. Each slot holds one member and
two link tables (next / prev) connect the slots into a cycle.
The cursor is a slot index, so stepping either way is O(1)
and there are no node references to go stale.

Built once at setup (insert_at_end) and never shrunk during a
game. To change the roster, rebuild the ring.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Generic, Iterable, TypeVar

from .errors import EmptyStructure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Direction(Enum):
    """Traversal direction of the ring."""
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    def flipped(self) -> Direction:
        if self == Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE
        return Direction.CLOCKWISE


class TurnRing(Generic[T]):
    """
    Circular sequence of members with a movable cursor.

    Invariants:
    - cursor is None iff the ring is empty
    - following next (or prev) from any slot visits every slot
      exactly once per lap
    - next[prev[i]] == i and prev[next[i]] == i for every slot
    """

    def __init__(self, members: Iterable[T] = ()):
        self._slots: list[T] = []
        self._next: list[int] = []
        self._prev: list[int] = []
        self._cursor: int | None = None
        self.direction = Direction.CLOCKWISE
        for member in members:
            self.insert_at_end(member)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"TurnRing(size={len(self)}, cursor={self._cursor}, direction={self.direction.value})"

    @property
    def is_empty(self) -> bool:
        return not self._slots

    @property
    def is_forward(self) -> bool:
        return self.direction == Direction.CLOCKWISE

    # --- Construction ---

    def insert_at_end(self, member: T):
        """
        Append a member after the current last slot.

        The first member inserted becomes current.
        """
        slot = len(self._slots)
        self._slots.append(member)
        if slot == 0:
            self._next.append(0)
            self._prev.append(0)
            self._cursor = 0
            return

        head = 0
        tail = self._prev[head]
        self._next.append(head)
        self._prev.append(tail)
        self._next[tail] = slot
        self._prev[head] = slot

    def rebuild(self, roster: Iterable[T]):
        """Replace all members, resetting cursor and direction."""
        self._slots = []
        self._next = []
        self._prev = []
        self._cursor = None
        self.direction = Direction.CLOCKWISE
        for member in roster:
            self.insert_at_end(member)
        logger.debug("Ring rebuilt with %d members", len(self._slots))

    # --- Traversal ---

    def current(self) -> T:
        """Member at the cursor."""
        if self._cursor is None:
            raise EmptyStructure("Turn ring is empty")
        return self._slots[self._cursor]

    def advance(self):
        """Move the cursor one step in the current direction."""
        if self._cursor is None:
            return
        self._cursor = self._step(self._cursor)

    def advance_by(self, steps: int):
        """Advance the cursor `steps` times."""
        if steps < 0:
            raise ValueError(f"Cannot advance by a negative number of steps: {steps}")
        for _ in range(steps):
            self.advance()

    def reverse_direction(self):
        """Flip the direction flag. The cursor stays put."""
        self.direction = self.direction.flipped()
        logger.debug("Ring direction now %s", self.direction.value)

    def peek_next(self) -> T:
        """Member that advance() would land on, without moving."""
        if self._cursor is None:
            raise EmptyStructure("Turn ring is empty")
        return self._slots[self._step(self._cursor)]

    def _step(self, slot: int) -> int:
        if self.is_forward:
            return self._next[slot]
        return self._prev[slot]

    # --- Views ---

    def members(self) -> list[T]:
        """Members in join order."""
        return list(self._slots)

    def play_order(self) -> list[T]:
        """Members starting at the cursor, following the direction."""
        if self._cursor is None:
            return []
        order = []
        slot = self._cursor
        for _ in range(len(self._slots)):
            order.append(self._slots[slot])
            slot = self._step(slot)
        return order
