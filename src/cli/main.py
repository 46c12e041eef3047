"""
floral — command line interface

    floral [-a] [-e] [-o] [--data PATH] [--verbose] [NAME]

Prints the floral formula of a plant family (or of every family in an order
with -o), optionally explained in prose. Names are matched leniently; a name
too far from any known one gets a "did you mean" suggestion.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from src.core.errors import FloralFormulaError
from src.explain import FormulaExplainer, explain_flower_type
from src.records import (
    DEFAULT_DATA_PATH,
    FloralRecord,
    LookupConfig,
    RecordStore,
    resolve_name,
)

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floral",
        description="Show floral formulae of flowering plant families and orders.",
    )
    parser.add_argument(
        "name",
        nargs="?",
        help="flowering plant family (or order, with -o) name",
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="print every record in the database"
    )
    parser.add_argument(
        "-e", "--explain", action="store_true", help="explain the floral formula"
    )
    parser.add_argument(
        "-o", "--order", action="store_true", help="search plant orders, not families"
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_DATA_PATH,
        help="floral formula database (default: bundled data/formulae.csv)",
    )
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "-V", "--version", action="version", version=f"floral v{__version__}"
    )
    return parser


def format_record(
    record: FloralRecord, explainer: Optional[FormulaExplainer] = None
) -> str:
    """Header line(s) followed by the formula or its explanation."""
    if explainer is not None:
        return "\n".join(
            [
                f"{record.order} -> {record.family_title}",
                explain_flower_type(record.flower_type),
                explainer.explain(record.formula),
            ]
        )
    return (
        f"{record.order} -> {record.family_title} -> "
        f"{record.flower_type.display_name}\n{record.formula}"
    )


def main(
    argv: Optional[Sequence[str]] = None,
    lookup_config: Optional[LookupConfig] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.name is None and not args.all:
        parser.print_help()
        return 0

    try:
        store = RecordStore.from_path(args.data)
    except (FloralFormulaError, OSError) as exc:
        print(f"floral error: {exc}", file=sys.stderr)
        return 1

    if args.all:
        records = store.records()
    else:
        candidates = store.orders() if args.order else store.families()
        result = resolve_name(candidates, args.name, lookup_config)
        if result is None:
            print(f"floral error: no records in {args.data}", file=sys.stderr)
            return 1
        if not result.is_match:
            print(
                f"You typed {args.name}, did you mean {result.match}? Or something else?"
            )
            return 0
        logger.debug("resolved %r to %r (distance %d)", args.name, result.match, result.distance)
        records = store.by_order(result.match) if args.order else store.by_family(result.match)

    explainer = FormulaExplainer() if args.explain else None
    for record in records:
        print(format_record(record, explainer))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
