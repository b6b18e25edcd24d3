# SemNet
# In-memory semantic network: concepts joined by named slots.

"""
Core invariant: a concept owns its strings and slot storage, never the
concepts its slots point at.

Concepts live in a SemanticNetwork arena and slots refer to targets by
handle, so teardown is always shallow and never leaves a dangling edge.
"""

from .concept import Concept, ConceptState
from .errors import ConceptError, ConceptErrorKind
from .network import SemanticNetwork
from .render import NULL_TARGET_MARKER, render_concept
from .slots import INITIAL_SLOT_CAPACITY, SLOT_GROWTH_FACTOR, Slot, SlotCollection

__all__ = [
    "Concept",
    "ConceptError",
    "ConceptErrorKind",
    "ConceptState",
    "INITIAL_SLOT_CAPACITY",
    "NULL_TARGET_MARKER",
    "SLOT_GROWTH_FACTOR",
    "SemanticNetwork",
    "Slot",
    "SlotCollection",
    "render_concept",
]

__version__ = "0.1.0"
