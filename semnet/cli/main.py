"""
SemNet CLI — build and print small semantic networks.

Commands:
    semnet demo                 — construct john/Person and book/Object,
                                  link john --owns--> book, print john
    semnet build [options]      — build a throwaway network from
                                  --concept ID:TYPE and --slot SRC:NAME:DST
                                  arguments and print --show concepts

Networks are not persisted; every invocation starts empty.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from ..concept import Concept
from ..errors import ConceptError, invalid_argument
from ..network import SemanticNetwork


logger = logging.getLogger("semnet.cli")


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_concept_spec(spec: str) -> tuple[str, str]:
    """
    Parse "ID:TYPE" into (id, type).

    The type may itself contain colons; the id may not.
    """
    concept_id, sep, type_label = spec.partition(":")
    if not sep or not concept_id:
        raise invalid_argument(f"concept spec '{spec}' must look like ID:TYPE")
    return concept_id, type_label


def parse_slot_spec(spec: str) -> tuple[str, str, str]:
    """
    Parse "SRC:NAME:DST" into (source id, slot name, target id).

    The slot name may contain colons; source and target ids may not.
    """
    source_id, sep, rest = spec.partition(":")
    name, sep2, target_id = rest.rpartition(":")
    if not (sep and sep2) or not source_id or not target_id:
        raise invalid_argument(f"slot spec '{spec}' must look like SRC:NAME:DST")
    return source_id, name, target_id


def lookup(network: SemanticNetwork, concept_id: str) -> Concept:
    concept = network.find(concept_id)
    if concept is None:
        raise invalid_argument(f"unknown concept id '{concept_id}'", concept_id)
    return concept


# =============================================================================
# NETWORK BUILDERS
# =============================================================================

def build_demo_network() -> tuple[SemanticNetwork, Concept]:
    """The fixed demo: john --owns--> book. Returns (network, john)."""
    network = SemanticNetwork()
    john = network.construct("john", "Person")
    book = network.construct("book", "Object")
    network.append(john, "owns", book)
    return network, john


def build_network(
    concept_specs: list[str],
    slot_specs: list[str],
) -> SemanticNetwork:
    """Construct every concept first, then append every slot in order."""
    network = SemanticNetwork()

    for spec in concept_specs:
        concept_id, type_label = parse_concept_spec(spec)
        network.construct(concept_id, type_label)

    for spec in slot_specs:
        source_id, name, target_id = parse_slot_spec(spec)
        network.append(
            lookup(network, source_id),
            name,
            lookup(network, target_id),
        )

    logger.info(
        "Built network with %d concepts and %d slots",
        len(network), len(slot_specs),
    )
    return network


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_demo(args: argparse.Namespace) -> int:
    """Run the fixed john/book scenario."""
    try:
        network, john = build_demo_network()
    except ConceptError as e:
        print(f"ERROR: {e}")
        return 1

    print(network.render(john), end="")
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Build a network from arguments and print the requested concepts."""
    concept_specs = getattr(args, "concepts", None) or []
    slot_specs = getattr(args, "slots", None) or []
    show_ids = getattr(args, "show", None) or []

    try:
        network = build_network(concept_specs, slot_specs)
        if show_ids:
            shown = [lookup(network, concept_id) for concept_id in show_ids]
        else:
            shown = network.concepts()
    except ConceptError as e:
        print(f"ERROR: {e}")
        return 1

    print("\n".join(network.render(concept) for concept in shown), end="")
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def configure_logging(verbosity: int) -> None:
    """WARNING by default, INFO with -v, DEBUG with -vv; always to stderr."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="semnet",
        description="SemNet — in-memory semantic network of concepts and slots",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Build john --owns--> book and print john",
    )
    demo_parser.set_defaults(func=cmd_demo)

    # Build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build a network from arguments and print concepts",
    )
    build_parser.add_argument(
        "--concept",
        dest="concepts",
        action="append",
        metavar="ID:TYPE",
        help="Construct a concept (repeatable)",
    )
    build_parser.add_argument(
        "--slot",
        dest="slots",
        action="append",
        metavar="SRC:NAME:DST",
        help="Append a slot to SRC pointing at DST (repeatable)",
    )
    build_parser.add_argument(
        "--show",
        action="append",
        metavar="ID",
        help="Concept to print (repeatable; default: all)",
    )
    build_parser.set_defaults(func=cmd_build)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
