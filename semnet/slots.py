"""
Slot Collection for SemNet.

A slot is a named, directed edge from the owning concept to a target
concept. The collection is an ordered, growable array of slots:

Growth policy (part of the contract, not an implementation detail):
    When an append finds count == capacity, capacity becomes
    max(INITIAL_SLOT_CAPACITY, capacity * SLOT_GROWTH_FACTOR).
    Capacity sequence: 0 -> 2 -> 4 -> 8 -> 16 ...
    Appends are amortized O(1). Capacity never shrinks while live.

The collection owns its slot names. Targets are arena handles and are
never owned, followed or released here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .errors import allocation_failure, invalid_argument, require_text


logger = logging.getLogger("semnet.slots")


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

INITIAL_SLOT_CAPACITY = 2
SLOT_GROWTH_FACTOR = 2


# =============================================================================
# SLOT
# =============================================================================

@dataclass(frozen=True)
class Slot:
    """
    One named relation.

    name   — relation name, not unique within a concept
    target — arena handle of the target concept (non-owning)
    """
    name: str
    target: int


def next_capacity(capacity: int) -> int:
    """Capacity after one growth step."""
    return max(INITIAL_SLOT_CAPACITY, capacity * SLOT_GROWTH_FACTOR)


# =============================================================================
# SLOT COLLECTION
# =============================================================================

class SlotCollection:
    """
    Ordered, growable sequence of slots.

    The backing list is pre-sized to `capacity` and never handed out;
    iteration and indexing yield Slot values, so growth cannot
    invalidate anything a caller holds.
    """

    def __init__(self, max_capacity: Optional[int] = None) -> None:
        if max_capacity is not None and max_capacity < 0:
            raise invalid_argument(f"max_capacity must be >= 0, got {max_capacity}")
        self.max_capacity = max_capacity
        self._storage: list[Optional[Slot]] = []
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Slot]:
        for index in range(self._count):
            yield self._storage[index]

    def __getitem__(self, index: int) -> Slot:
        if not isinstance(index, int):
            raise TypeError(f"slot index must be int, got {type(index).__name__}")
        if index < 0:
            index += self._count
        if not (0 <= index < self._count):
            raise IndexError(f"slot index out of range (count = {self._count})")
        return self._storage[index]

    def __repr__(self) -> str:
        return f"SlotCollection(count={self._count}, capacity={self.capacity})"

    def append(self, name: Any, target: Any) -> Slot:
        """
        Append a (name, target) slot.

        Grows storage first if the collection is full. On any failure the
        collection is left exactly as it was.

        Raises:
            ConceptError: INVALID_ARGUMENT if name or target is missing,
                          ALLOCATION_FAILURE if storage cannot grow
        """
        name = require_text(name, "slot name")
        if target is None:
            raise invalid_argument(f"slot '{name}' requires a target")
        if isinstance(target, bool) or not isinstance(target, int):
            raise invalid_argument(
                f"slot target must be a concept handle, got {type(target).__name__}"
            )

        if self._count == self.capacity:
            self._grow()

        slot = Slot(name=name, target=target)
        self._storage[self._count] = slot
        self._count += 1
        return slot

    def _grow(self) -> None:
        """
        Double the backing storage (2 on first growth).

        Raises:
            ConceptError: ALLOCATION_FAILURE if the new capacity exceeds
                          max_capacity or memory is exhausted
        """
        old_capacity = self.capacity
        new_capacity = next_capacity(old_capacity)

        if self.max_capacity is not None and new_capacity > self.max_capacity:
            raise allocation_failure(
                f"slot capacity {new_capacity} exceeds limit {self.max_capacity}"
            )

        try:
            storage: list[Optional[Slot]] = [None] * new_capacity
        except MemoryError:
            raise allocation_failure(
                f"failed to allocate {new_capacity} slots"
            ) from None

        storage[:self._count] = self._storage[:self._count]
        self._storage = storage
        logger.debug("Slot storage grew %d -> %d", old_capacity, new_capacity)

    def named(self, name: str) -> list[Slot]:
        """All slots with the given name, in insertion order (linear scan)."""
        return [slot for slot in self if slot.name == name]

    def names(self) -> list[str]:
        """Distinct slot names in first-seen order."""
        seen: dict[str, None] = {}
        for slot in self:
            seen.setdefault(slot.name, None)
        return list(seen)

    def release(self) -> None:
        """Drop every slot name and the backing storage."""
        self._storage = []
        self._count = 0
