"""Command-line interface for giftgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter
from typing import List, Optional

from giftgraph.config import ParticipantConfig
from giftgraph.errors import GiftGraphError, InternalInconsistency
from giftgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from giftgraph.model.graph import GiftGraph, build_graph_from_config

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[list], max_width: int = 60) -> str:
    """Render ``rows`` under ``headers`` as an indented ASCII table.

    Cells are clipped to ``max_width`` characters.
    """

    def clip(val: object) -> str:
        s = str(val)
        return s if len(s) <= max_width else s[: max_width - 3] + "..."

    cells = [[clip(val) for val in row] for row in [headers, *rows]]
    widths = [max(len(row[col]) for row in cells) for col in range(len(headers))]

    lines = [
        "   " + " | ".join(c.ljust(w) for c, w in zip(row, widths)) for row in cells
    ]
    lines.insert(1, "   " + "-+-".join("-" * w for w in widths))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _print_graph(graph: GiftGraph, detail: bool) -> None:
    """Print a summary of ``graph`` and, with ``detail``, every edge."""
    summary = graph.summary()

    print("\n" + "=" * 60)
    print("GIFT GRAPH")
    print("=" * 60)

    n = summary.participant_count
    print(f"\n{n} participants:")
    print(
        _format_table(
            ["ID", "Name"],
            [[node.id, node.name] for node in graph.nodes() if node.is_participant],
            max_width=40,
        )
    )

    print("\nEdges:")
    print(
        _format_table(
            ["Type", "Count", "Capacity"],
            [
                [
                    "source",
                    summary.source_edge_count,
                    summary.source_capacity,
                ],
                ["sink", summary.sink_edge_count, summary.sink_capacity],
                ["peer", summary.peer_edge_count, summary.peer_capacity],
                ["total", summary.edge_count, summary.total_capacity],
            ],
        )
    )

    if detail:
        print("\nAll edges:")
        print(
            _format_table(
                ["From", "To", "Capacity", "Used", "Note"],
                [
                    [
                        graph.node(edge.source).name,
                        graph.node(edge.target).name,
                        edge.capacity,
                        edge.used_capacity,
                        edge.note,
                    ]
                    for edge in graph.edges
                ],
            )
        )


def _build(config: ParticipantConfig, detail: bool) -> None:
    """Build the graph for ``config`` and print it; exit 1 on failure."""
    logger.info("Building gift graph")
    _start_time = perf_counter()

    try:
        graph = build_graph_from_config(config)
        graph.check_integrity()
    except InternalInconsistency as e:
        logger.error(f"Internal inconsistency while building graph: {e}")
        print(f"❌ ERROR: internal inconsistency: {e}")
        sys.exit(1)
    except GiftGraphError as e:
        logger.error(f"Invalid input: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    _print_graph(graph, detail)

    _elapsed = perf_counter() - _start_time
    logger.info(f"Gift graph built successfully in {_format_duration(_elapsed)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``giftgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="giftgraph",
        description="Build the capacity graph of a gift exchange.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress info logging"
    )
    parser.add_argument(
        "--people",
        "-p",
        default="",
        help="A comma separated list of people (takes precedence over --num)",
    )
    parser.add_argument(
        "--num",
        "-n",
        type=int,
        default=0,
        help="Number of people, named 'Person 1' .. 'Person N'",
    )
    parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Also print every edge with its capacity and note",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    config = ParticipantConfig.from_cli(names=args.people, count=args.num)
    _build(config, args.detail)


if __name__ == "__main__":
    main()
