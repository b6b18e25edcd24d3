"""
Tests for SemNet — Semantic Network operations.

These tests verify that:
1. append adds slots in call order and aliases targets by handle
2. Absent arguments to append are reported and change nothing
3. teardown is shallow and never touches targets
4. Lookup by id and handle follows the lifecycle
"""

import logging

import pytest

from semnet.concept import ConceptState
from semnet.errors import ConceptError, ConceptErrorKind
from semnet.network import SemanticNetwork


@pytest.fixture
def network():
    return SemanticNetwork()


@pytest.fixture
def people(network):
    john = network.construct("john", "Person")
    mary = network.construct("mary", "Person")
    jane = network.construct("jane", "Person")
    return john, mary, jane


# =============================================================================
# APPEND TESTS
# =============================================================================

class TestAppend:
    """Test append(concept, name, target)."""

    def test_append_n_slots(self, network, people):
        """N appends give count N in call order."""
        john, mary, jane = people
        calls = [("likes", mary), ("knows", jane), ("likes", jane), ("knows", mary)]
        for name, target in calls:
            network.append(john, name, target)

        assert john.slot_count == len(calls)
        assert [(s.name, s.target) for s in john.slots] == [
            (name, target.handle) for name, target in calls
        ]

    def test_append_returns_committed_slot(self, network, people):
        """The returned slot is the one stored."""
        john, mary, _ = people
        slot = network.append(john, "likes", mary)
        assert john.slots[0] is slot
        assert slot.target == mary.handle

    def test_multi_valued_relation(self, network, people):
        """Two 'likes' slots to different targets persist independently."""
        john, mary, jane = people
        network.append(john, "likes", mary)
        network.append(john, "likes", jane)

        likes = john.slots.named("likes")
        assert [network.resolve(s.target) for s in likes] == [mary, jane]
        assert likes[0].target != likes[1].target

    def test_target_is_aliased_not_copied(self, network, people):
        """Many slots on many concepts may share one target."""
        john, mary, jane = people
        network.append(john, "likes", jane)
        network.append(mary, "likes", jane)
        network.append(mary, "admires", jane)

        assert network.targets(john) == [jane]
        assert network.targets(mary) == [jane, jane]
        assert jane.slot_count == 0

    def test_self_reference_allowed(self, network, people):
        """A concept may point at itself."""
        john, _, _ = people
        network.append(john, "is", john)
        assert network.targets(john) == [john]

    def test_append_follows_capacity_doubling(self, network, people):
        """Capacity after appends 1, 3, 5, 9 is 2, 4, 8, 16."""
        john, mary, _ = people
        capacities = []
        for _ in range(9):
            network.append(john, "knows", mary)
            capacities.append(john.slot_capacity)

        assert [capacities[i - 1] for i in (1, 3, 5, 9)] == [2, 4, 8, 16]

    def test_append_logs_growth(self, network, people, caplog):
        """Slot storage growth is logged at DEBUG."""
        john, mary, _ = people
        with caplog.at_level(logging.DEBUG, logger="semnet"):
            network.append(john, "likes", mary)
        assert "Slot storage grew 0 -> 2" in caplog.text


class TestAppendRejections:
    """Test that absent arguments are reported for each position."""

    def _snapshot(self, concept):
        return concept.slot_count, [(s.name, s.target) for s in concept.slots]

    def test_absent_concept(self, network, people):
        """Absent concept raises INVALID_ARGUMENT; nothing changes."""
        john, mary, _ = people
        network.append(john, "likes", mary)
        before = self._snapshot(john)

        with pytest.raises(ConceptError) as exc_info:
            network.append(None, "likes", mary)

        assert exc_info.value.kind == ConceptErrorKind.INVALID_ARGUMENT
        assert self._snapshot(john) == before
        assert mary.slot_count == 0

    def test_absent_name(self, network, people):
        """Absent name raises INVALID_ARGUMENT; nothing changes."""
        john, mary, _ = people
        network.append(john, "likes", mary)
        before = self._snapshot(john)

        with pytest.raises(ConceptError, match="slot name is required") as exc_info:
            network.append(john, None, mary)

        assert exc_info.value.kind == ConceptErrorKind.INVALID_ARGUMENT
        assert exc_info.value.concept_id == "john"
        assert self._snapshot(john) == before

    def test_absent_target(self, network, people):
        """Absent target raises INVALID_ARGUMENT; nothing changes."""
        john, mary, _ = people
        network.append(john, "likes", mary)
        before = self._snapshot(john)

        with pytest.raises(ConceptError, match="requires a target") as exc_info:
            network.append(john, "likes", None)

        assert exc_info.value.kind == ConceptErrorKind.INVALID_ARGUMENT
        assert self._snapshot(john) == before

    def test_freed_target_rejected(self, network, people):
        """A torn-down target cannot be linked."""
        john, mary, _ = people
        network.teardown(mary)
        with pytest.raises(ConceptError, match="target 'mary' has been torn down"):
            network.append(john, "likes", mary)
        assert john.slot_count == 0

    def test_freed_source_rejected(self, network, people):
        """A torn-down source cannot grow."""
        john, mary, _ = people
        network.teardown(john)
        with pytest.raises(ConceptError, match="has been torn down"):
            network.append(john, "likes", mary)

    def test_foreign_concept_rejected(self, network, people):
        """Concepts from another network cannot be linked."""
        john, _, _ = people
        other = SemanticNetwork()
        stranger = other.construct("stranger", "Person")

        with pytest.raises(ConceptError, match="belongs to another network"):
            network.append(john, "knows", stranger)
        with pytest.raises(ConceptError, match="belongs to another network"):
            network.append(stranger, "knows", john)
        assert john.slot_count == 0
        assert stranger.slot_count == 0

    def test_slot_limit_is_allocation_failure(self):
        """Growth past max_slot_capacity is a recoverable ALLOCATION_FAILURE."""
        network = SemanticNetwork(max_slot_capacity=2)
        john = network.construct("john", "Person")
        book = network.construct("book", "Object")
        network.append(john, "owns", book)
        network.append(john, "owns", book)

        with pytest.raises(ConceptError) as exc_info:
            network.append(john, "owns", book)

        assert exc_info.value.kind == ConceptErrorKind.ALLOCATION_FAILURE
        assert exc_info.value.concept_id == "john"
        assert john.slot_count == 2
        assert john.slot_capacity == 2


# =============================================================================
# TEARDOWN TESTS
# =============================================================================

class TestTeardown:
    """Test shallow teardown."""

    def test_teardown_none_is_noop(self, network, people):
        """teardown(None) does nothing."""
        network.teardown(None)
        assert len(network) == 3

    def test_teardown_marks_freed_and_releases_slots(self, network, people):
        """The concept becomes FREED and its slot storage is released."""
        john, mary, _ = people
        network.append(john, "likes", mary)
        network.teardown(john)

        assert john.state == ConceptState.FREED
        assert john.slot_count == 0
        assert john.slot_capacity == 0
        assert john not in network
        assert len(network) == 2

    def test_teardown_leaves_targets_untouched(self, network):
        """Targets stay live and renderable after the source is torn down."""
        john = network.construct("john", "Person")
        book = network.construct("book", "Object")
        pen = network.construct("pen", "Object")
        network.append(book, "next_to", pen)
        network.append(john, "owns", book)
        before = network.render(book)

        network.teardown(john)

        assert book.is_live
        assert book in network
        assert network.render(book) == before
        assert network.targets(book) == [pen]

    def test_double_teardown_rejected(self, network, people):
        """Tearing down a FREED concept is reported."""
        john, _, _ = people
        network.teardown(john)
        with pytest.raises(ConceptError) as exc_info:
            network.teardown(john)
        assert exc_info.value.kind == ConceptErrorKind.INVALID_ARGUMENT

    def test_torn_down_target_resolves_to_none(self, network, people):
        """Slots pointing at a torn-down concept resolve to None."""
        john, mary, jane = people
        network.append(john, "likes", mary)
        network.append(john, "likes", jane)
        network.teardown(mary)

        assert network.targets(john) == [None, jane]
        assert network.resolve(mary.handle) is None
        assert john.slot_count == 2


# =============================================================================
# LOOKUP TESTS
# =============================================================================

class TestLookup:
    """Test id and handle lookup."""

    def test_find_by_id(self, network, people):
        john, _, _ = people
        assert network.find("john") is john
        assert network.find("nobody") is None

    def test_find_after_teardown(self, network, people):
        john, _, _ = people
        network.teardown(john)
        assert network.find("john") is None

    def test_duplicate_id_shadows_and_warns(self, network, caplog):
        """A second live 'x' shadows the first; teardown falls back."""
        first = network.construct("x", "Old")
        with caplog.at_level(logging.WARNING, logger="semnet.network"):
            second = network.construct("x", "New")

        assert "already live" in caplog.text
        assert network.find("x") is second

        network.teardown(second)
        assert network.find("x") is first
        assert first in network

    def test_concepts_in_construction_order(self, network, people):
        john, mary, jane = people
        network.teardown(mary)
        assert network.concepts() == [john, jane]

    def test_membership_by_handle(self, network, people):
        john, _, _ = people
        assert john.handle in network
        assert True not in network
        assert "john" not in network

    def test_handles_not_reused(self, network, people):
        """A handle freed by teardown is never handed out again."""
        john, _, _ = people
        old_handle = john.handle
        network.teardown(john)
        replacement = network.construct("john", "Person")
        assert replacement.handle != old_handle
