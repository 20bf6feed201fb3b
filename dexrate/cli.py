"""Command-line interface for dexrate."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import jsonschema
import pandas as pd

from dexrate.algorithms.best_rate import all_pairs_best_paths, best_path
from dexrate.analysis.rate_matrix import rate_matrix, rate_records
from dexrate.graph.rate_graph import RateGraph
from dexrate.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)

# Graph used when no rate file is given
DEMO_RATES = [
    ("A", "B", 1.4),
    ("A", "C", 0.1),
    ("B", "C", 0.2),
    ("C", "D", 0.2),
    ("D", "F", 2.5),
]


def _load_graph(path: Optional[Path]) -> RateGraph:
    """Load a rate file, or the demo graph when ``path`` is None.

    Raises:
        SystemExit: With code 1 if the file is missing or invalid.
    """
    if path is None:
        logger.info("No rate file given; using the demo graph")
        return RateGraph.from_rates(DEMO_RATES)

    try:
        graph = RateGraph.from_yaml_file(path)
    except FileNotFoundError:
        logger.error("Rate file not found: %s", path)
        raise SystemExit(1) from None
    except (ValueError, jsonschema.ValidationError) as exc:
        message = exc.message if isinstance(exc, jsonschema.ValidationError) else exc
        logger.error("Invalid rate file %s: %s", path, message)
        raise SystemExit(1) from None

    logger.info("Loaded %s from %s", graph, path)
    return graph


def _format_rate(value: float) -> str:
    """Return rate right-aligned with four decimals."""
    return f"{value:8.4f}"


def _print_pairs(graph: RateGraph, as_json: bool) -> None:
    if as_json:
        print(json.dumps(rate_records(graph), indent=2, default=str))
        return

    count = 0
    for src, dst, path in all_pairs_best_paths(graph):
        print(f"{src} -> {dst}: {_format_rate(path.rate)} ({path})")
        count += 1
    logger.info("Found rates for %d ordered pair(s)", count)


def _print_query(graph: RateGraph, src: str, dst: str, as_json: bool) -> None:
    path = best_path(graph, src, dst)
    if path is None:
        print(f"No rate from {src} to {dst}", file=sys.stderr)
        raise SystemExit(1)

    if as_json:
        print(json.dumps(path.to_dict(), indent=2))
    else:
        print(f"{src} -> {dst}: {_format_rate(path.rate)} ({path})")


def _print_matrix(graph: RateGraph) -> None:
    matrix = rate_matrix(graph)
    with pd.option_context("display.max_rows", None, "display.max_columns", None):
        print(matrix.to_string(na_rep="-", float_format=lambda v: f"{v:.4f}"))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dexrate`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="dexrate",
        description="Find the best compounded conversion rates in a rate graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{pairs,query,matrix}",
        help="Available commands",
    )

    pairs_parser = subparsers.add_parser(
        "pairs", help="Print the best rate for every reachable vertex pair"
    )
    query_parser = subparsers.add_parser(
        "query", help="Print the best rate and path between two vertices"
    )
    matrix_parser = subparsers.add_parser(
        "matrix", help="Print the all-pairs best rate matrix"
    )

    for p in (pairs_parser, matrix_parser):
        p.add_argument(
            "rates",
            type=Path,
            nargs="?",
            default=None,
            help="Path to rate YAML (default: built-in demo graph)",
        )
    query_parser.add_argument("rates", type=Path, help="Path to rate YAML")
    query_parser.add_argument("src", help="Source vertex")
    query_parser.add_argument("dst", help="Destination vertex")

    for p in (pairs_parser, query_parser):
        p.add_argument("--json", action="store_true", help="Print JSON output")

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

    if args.command == "pairs":
        _print_pairs(_load_graph(args.rates), args.json)
    elif args.command == "query":
        _print_query(_load_graph(args.rates), args.src, args.dst, args.json)
    elif args.command == "matrix":
        _print_matrix(_load_graph(args.rates))


if __name__ == "__main__":
    main()
