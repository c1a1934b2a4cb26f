#!/usr/bin/env python3
"""
Command-line interface for limited combination enumeration.

Usage:
    limited-combo --items "A:2,B:1,C:1" --size 2 --mode max
    python -m limited_combo.cli --items-file hand.txt --mode min --size 3 --output out.csv
"""

import argparse
import logging
from itertools import islice
from pathlib import Path

from .config import EnumerationConfig
from .export import combinations_to_frame, write_frame
from .parsing import load_counts, parse_counts
from .sentry_config import capture_exception, init_sentry, set_enumeration_context
from .types import InvalidConfiguration, Mode

logger = logging.getLogger(__name__)

EXIT_INVALID_CONFIGURATION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Enumerate combinations of typed items with limited availability"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--items", type=str,
                        help='Availability pairs, e.g. "A:2,B:1,C:1"')
    source.add_argument("--items-file", type=Path,
                        help="File with one item per line (e.g. '2x Name')")
    parser.add_argument("--size", type=int, default=None,
                        help="Combination size (default: total number of items)")
    parser.add_argument("--mode", type=str, default=Mode.EXACT.value,
                        choices=[m.value for m in Mode],
                        help="Interpretation of --size")
    parser.add_argument("--limit", type=int, default=None,
                        help="Stop after this many combinations")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="Write combinations to a .csv or .json file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv=None) -> int:
    """Main entry point for the enumeration CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s: %(message)s",
    )
    if init_sentry():
        logger.debug("Sentry error monitoring enabled")

    try:
        counts = load_counts(args.items_file) if args.items_file else parse_counts(args.items)
        config = EnumerationConfig(
            counts=counts,
            size=args.size,
            mode=args.mode,
            limit=args.limit,
            output=args.output,
        )
        set_enumeration_context(config.mode.value, config.size, config.counts)
        combinations = config.build()
    except InvalidConfiguration as e:
        logger.error("Invalid configuration: %s", e)
        capture_exception(e)
        return EXIT_INVALID_CONFIGURATION

    logger.info(
        "Enumerating %s combinations of size %d over %d items (%d types)",
        config.mode.value, combinations.size, combinations.total_atoms,
        len(combinations.atoms),
    )

    if config.output is None:
        emitted = 0
        for combination in islice(combinations, config.limit):
            print(" ".join(str(atom) for atom in combination))
            emitted += 1
        logger.info("Emitted %d combinations", emitted)
        return 0

    frame = combinations_to_frame(combinations, limit=config.limit)
    write_frame(frame, config.output)
    return 0


if __name__ == "__main__":
    exit(main())
