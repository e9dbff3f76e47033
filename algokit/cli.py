"""
Command line entry point for algokit.

Examples:
    python -m algokit hull points.json
    echo '[[0, 0], [4, 0], [4, 4], [2, 2]]' | python -m algokit hull
    python -m algokit primes 30
    python -m algokit prefix ababaca
    python -m algokit combinations 2 a b c
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from algokit.combination import combinations
from algokit.config import get_settings
from algokit.convex_hull import convex_hull
from algokit.errors import AlgokitError
from algokit.models import HullRequest
from algokit.prefix import prefix_table
from algokit.sieve import primes_up_to

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit",
        description="Convex hulls and a few small standalone algorithms",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: ALGOKIT_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    hull_parser = subparsers.add_parser(
        "hull", help="Convex hull of a JSON list of points"
    )
    hull_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to read, or - for stdin (default: -)",
    )
    hull_parser.add_argument(
        "--tolerance",
        type=float,
        help="Collinearity tolerance (default: ALGOKIT_COLLINEAR_TOLERANCE)",
    )

    primes_parser = subparsers.add_parser("primes", help="Primes up to N")
    primes_parser.add_argument("n", type=int)

    prefix_parser = subparsers.add_parser(
        "prefix", help="KMP prefix table of a pattern"
    )
    prefix_parser.add_argument("pattern")

    combinations_parser = subparsers.add_parser(
        "combinations", help="Ordered k-selections of distinct items"
    )
    combinations_parser.add_argument("k", type=int)
    combinations_parser.add_argument("items", nargs="*")

    return parser


def _read_document(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def _run_hull(args: argparse.Namespace, precision: int, tolerance: float) -> Any:
    request = HullRequest.model_validate(_read_document(args.file))
    hull = convex_hull(request.positions(), tolerance=tolerance)
    return [[round(p.x, precision), round(p.y, precision)] for p in hull]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "hull":
            tolerance = (
                settings.collinear_tolerance
                if args.tolerance is None
                else args.tolerance
            )
            result = _run_hull(args, settings.output_precision, tolerance)
        elif args.command == "primes":
            result = primes_up_to(args.n)
        elif args.command == "prefix":
            result = prefix_table(args.pattern)
        else:
            result = combinations(args.items, args.k)
    except (AlgokitError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(json.dumps(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
