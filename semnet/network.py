"""
Semantic Network arena for SemNet.

The network is the single owner of every concept it constructs. Slots
refer to targets by stable integer handle, so a target can be aliased by
any number of slots without any of them owning it, and tearing a target
down leaves the referring slots resolvable to "absent" rather than
dangling.

Public operations:
    construct(id, type)            — create a LIVE concept
    append(concept, name, target)  — add a slot (amortized O(1))
    render(concept)                — textual dump of one concept
    teardown(concept)              — shallow release of one concept

Every rejected call raises ConceptError. Nothing is silently ignored,
except that render and teardown accept None as a no-op.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Optional, Union

from .concept import Concept, require_live
from .errors import (
    ConceptError,
    allocation_failure,
    invalid_argument,
    require_text,
)
from .render import render_concept
from .slots import Slot, SlotCollection


logger = logging.getLogger("semnet.network")

_network_keys = itertools.count(1)


class SemanticNetwork:
    """
    Arena of concepts addressed by handle.

    Args:
        max_concepts:      optional ceiling on live concepts; constructing
                           past it is an ALLOCATION_FAILURE
        max_slot_capacity: optional ceiling on each concept's slot
                           capacity; growing past it is an
                           ALLOCATION_FAILURE
    """

    def __init__(
        self,
        max_concepts: Optional[int] = None,
        max_slot_capacity: Optional[int] = None,
    ) -> None:
        if max_concepts is not None and max_concepts < 0:
            raise invalid_argument(f"max_concepts must be >= 0, got {max_concepts}")
        if max_slot_capacity is not None and max_slot_capacity < 0:
            raise invalid_argument(
                f"max_slot_capacity must be >= 0, got {max_slot_capacity}"
            )
        self.max_concepts = max_concepts
        self.max_slot_capacity = max_slot_capacity
        self._key = next(_network_keys)
        self._handles = itertools.count(1)
        self._concepts: dict[int, Concept] = {}
        # id -> handles of live concepts with that id, oldest first
        self._by_id: dict[str, list[int]] = {}

    def __len__(self) -> int:
        return len(self._concepts)

    def __contains__(self, item: Union[Concept, int]) -> bool:
        if isinstance(item, Concept):
            return item.network_key == self._key and item.handle in self._concepts
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self._concepts
        return False

    def __repr__(self) -> str:
        return f"SemanticNetwork(concepts={len(self._concepts)})"

    # =========================================================================
    # CONSTRUCT
    # =========================================================================

    def construct(self, concept_id: Any, type_label: Any) -> Concept:
        """
        Create a LIVE concept with an empty slot collection.

        Raises:
            ConceptError: INVALID_ARGUMENT if id or type is missing,
                          ALLOCATION_FAILURE if the network is full
        """
        concept_id = require_text(concept_id, "concept id")
        type_label = require_text(type_label, "concept type", concept_id)

        if self.max_concepts is not None and len(self._concepts) >= self.max_concepts:
            raise allocation_failure(
                f"network is full ({self.max_concepts} concepts)",
                concept_id,
            )

        try:
            concept = Concept(
                handle=next(self._handles),
                concept_id=concept_id,
                type_label=type_label,
                slots=SlotCollection(max_capacity=self.max_slot_capacity),
                network_key=self._key,
            )
        except MemoryError:
            raise allocation_failure(
                "failed to allocate concept", concept_id
            ) from None

        shadowed = self._by_id.setdefault(concept_id, [])
        if shadowed:
            logger.warning(
                "Concept id '%s' already live (handle %d); shadowing it",
                concept_id, shadowed[-1],
            )
        shadowed.append(concept.handle)
        self._concepts[concept.handle] = concept

        logger.debug(
            "Constructed concept '%s' (%s) as handle %d",
            concept_id, type_label, concept.handle,
        )
        return concept

    # =========================================================================
    # APPEND
    # =========================================================================

    def append(self, concept: Any, name: Any, target: Any) -> Slot:
        """
        Append a (name -> target) slot to concept.

        The target is aliased by handle, never copied or owned. Appending
        the same name again adds an independent slot (multi-valued
        relation).

        Raises:
            ConceptError: INVALID_ARGUMENT if any argument is missing,
                          torn down, or foreign to this network;
                          ALLOCATION_FAILURE if slot storage cannot grow
        """
        source = self._require_member(concept, "concept")
        name = require_text(name, "slot name", source.concept_id)
        if target is None:
            raise invalid_argument(
                f"slot '{name}' on '{source.concept_id}' requires a target",
                source.concept_id,
            )
        target = self._require_member(target, "target")

        try:
            slot = source.slots.append(name, target.handle)
        except ConceptError as exc:
            if exc.concept_id is None:
                exc.concept_id = source.concept_id
            raise

        logger.debug(
            "Slot #%d on '%s': %s -> '%s'",
            source.slot_count, source.concept_id, name, target.concept_id,
        )
        return slot

    # =========================================================================
    # RENDER
    # =========================================================================

    def render(self, concept: Optional[Concept]) -> str:
        """
        Render one concept in the fixed text format.

        None renders as the empty string. Targets that have been torn down
        render as "(null)".

        Raises:
            ConceptError: INVALID_ARGUMENT if concept is torn down or
                          foreign to this network
        """
        if concept is None:
            return ""
        concept = self._require_member(concept, "concept")
        return render_concept(concept, self.resolve)

    # =========================================================================
    # TEARDOWN
    # =========================================================================

    def teardown(self, concept: Optional[Concept]) -> None:
        """
        Shallow teardown of one concept.

        Releases the concept's slot names and slot storage and removes it
        from the network. Targets of its slots are untouched. Slots on
        other concepts that point at it will render "(null)" from now on.

        Raises:
            ConceptError: INVALID_ARGUMENT if concept is already torn down
                          or foreign to this network
        """
        if concept is None:
            return
        concept = self._require_member(concept, "concept")

        handles = self._by_id.get(concept.concept_id, [])
        if concept.handle in handles:
            handles.remove(concept.handle)
        if not handles:
            self._by_id.pop(concept.concept_id, None)

        slot_count = concept.slot_count
        concept.release()
        del self._concepts[concept.handle]

        logger.debug(
            "Tore down concept '%s' (handle %d, %d slots released)",
            concept.concept_id, concept.handle, slot_count,
        )

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def resolve(self, handle: int) -> Optional[Concept]:
        """The live concept for a handle, or None once torn down."""
        return self._concepts.get(handle)

    def find(self, concept_id: str) -> Optional[Concept]:
        """The most recently constructed live concept with this id."""
        handles = self._by_id.get(concept_id)
        if not handles:
            return None
        return self._concepts[handles[-1]]

    def concepts(self) -> list[Concept]:
        """Live concepts in construction order."""
        return list(self._concepts.values())

    def targets(self, concept: Concept) -> list[Optional[Concept]]:
        """Slot targets of one concept in slot order; torn-down targets are None."""
        concept = self._require_member(concept, "concept")
        return [self.resolve(slot.target) for slot in concept.slots]

    def _require_member(self, concept: Any, argument: str) -> Concept:
        concept = require_live(concept, argument)
        if concept.network_key != self._key or concept.handle not in self._concepts:
            raise invalid_argument(
                f"{argument} '{concept.concept_id}' belongs to another network",
                concept.concept_id,
            )
        return concept
