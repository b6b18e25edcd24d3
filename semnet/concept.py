"""
Concept Entity for SemNet.

A Concept is a node in the semantic network: an id, a type label, and an
owned, ordered collection of outgoing slots.

Ownership:
    A concept owns its id, its type label, its slot names and its slot
    storage. It never owns the concepts its slots point at. Slots hold
    arena handles, and the arena (SemanticNetwork) is the only owner of
    concepts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import invalid_argument, require_text
from .slots import SlotCollection


class ConceptState(Enum):
    """Per-concept lifecycle. FREED is terminal."""
    LIVE = "live"
    FREED = "freed"


@dataclass(eq=False)
class Concept:
    """
    A node in the semantic network.

    Concepts are created by SemanticNetwork.construct and compare by
    identity: two concepts with the same id are still different nodes.

    Fields:
        handle      — stable arena handle, never reused
        concept_id  — caller-supplied key (uniqueness is a caller convention)
        type_label  — single free-form classification label
        slots       — ordered outgoing relations
        state       — LIVE until torn down, then FREED
        network_key — token of the owning network
    """
    handle: int
    concept_id: str
    type_label: str
    slots: SlotCollection = field(default_factory=SlotCollection)
    state: ConceptState = ConceptState.LIVE
    network_key: Optional[int] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate the owned strings at construction time."""
        require_text(self.concept_id, "concept id")
        require_text(self.type_label, "concept type", self.concept_id)

    @property
    def is_live(self) -> bool:
        return self.state is ConceptState.LIVE

    @property
    def slot_count(self) -> int:
        return self.slots.count

    @property
    def slot_capacity(self) -> int:
        return self.slots.capacity

    def release(self) -> None:
        """
        Release the slot names and slot storage and mark the concept FREED.

        Targets are handles into the arena and are left alone. The id and
        type label stay readable so later misuse can be reported by name.
        """
        self.slots.release()
        self.state = ConceptState.FREED


def require_live(concept: Any, argument: str) -> Concept:
    """
    Validate that a concept argument is present and LIVE.

    Raises:
        ConceptError: INVALID_ARGUMENT if concept is None, not a Concept,
                      or already torn down
    """
    if concept is None:
        raise invalid_argument(f"{argument} is required")
    if not isinstance(concept, Concept):
        raise invalid_argument(
            f"{argument} must be Concept, got {type(concept).__name__}"
        )
    if not concept.is_live:
        raise invalid_argument(
            f"{argument} '{concept.concept_id}' has been torn down",
            concept.concept_id,
        )
    return concept
