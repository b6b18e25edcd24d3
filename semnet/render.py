"""
Textual rendering of a single concept.

Output format (tab-indented, 1-based ordinals):

    ID: <id>
    Types: <type>
    Slots (# of slots = <n>):
    	#<i>
    		Name: <name>
    		Target: <target-id-or-"(null)">

Rendering is shallow: targets are printed by id only, never expanded.
"""

from __future__ import annotations

from typing import Callable, Optional

from .concept import Concept


NULL_TARGET_MARKER = "(null)"

Resolver = Callable[[int], Optional[Concept]]


def format_target(handle: Optional[int], resolve: Resolver) -> str:
    """Target id, or the null marker when the handle no longer resolves."""
    if handle is None:
        return NULL_TARGET_MARKER
    target = resolve(handle)
    if target is None:
        return NULL_TARGET_MARKER
    return target.concept_id


def render_lines(concept: Concept, resolve: Resolver) -> list[str]:
    lines = [
        f"ID: {concept.concept_id}",
        f"Types: {concept.type_label}",
        f"Slots (# of slots = {concept.slot_count}):",
    ]
    for ordinal, slot in enumerate(concept.slots, start=1):
        lines.append(f"\t#{ordinal}")
        lines.append(f"\t\tName: {slot.name}")
        lines.append(f"\t\tTarget: {format_target(slot.target, resolve)}")
    return lines


def render_concept(concept: Optional[Concept], resolve: Resolver) -> str:
    """
    Render one concept, newline-terminated.

    An absent concept renders as the empty string.
    """
    if concept is None:
        return ""
    return "".join(f"{line}\n" for line in render_lines(concept, resolve))
