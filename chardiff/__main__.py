"""
chardiff Entry Point
====================

Command-line interface: reads two texts, computes their diff and prints
the records followed by a summary.

Usage:
    python -m chardiff <source_a> [source_b] [--precision word] [--json]
"""
import argparse
import json
import sys

from .config import DEFAULT_TIMEOUT_MS, PRECISIONS, DiffOptions
from .differ import compute_diff
from .exceptions import ComputationTimeout, InvalidConfiguration
from .input_controller import InputController
from .logging_utils import configure_logging
from .models import KIND_MODIFY
from .stats import compute_stats

EXIT_NO_INPUT = 1
EXIT_INVALID_CONFIG = 2
EXIT_TIMEOUT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chardiff",
        description="chardiff: character-level text comparison")
    parser.add_argument("source_a", help="First file or single combined file")
    parser.add_argument("source_b", nargs="?", help="Second file (optional)")
    parser.add_argument("--precision", choices=PRECISIONS, default="character",
                        help="Comparison unit (default: character)")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_MS,
                        help="Alignment budget in milliseconds (default: %(default)s)")
    parser.add_argument("--ignore-case", action="store_true", help="Compare case-insensitively")
    parser.add_argument("--ignore-whitespace", action="store_true",
                        help="Treat whitespace differences as equal")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--stats", action="store_true", help="Include addition/deletion counts")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def format_record(record) -> str:
    if record.kind == KIND_MODIFY:
        return f"{record.position} {record.kind} {record.original_content!r} -> {record.content!r}"
    return f"{record.position} {record.kind} {record.content!r}"


def main(argv=None) -> int:
    """
    Main execution function.

    1. Parses command line arguments.
    2. Reads the input file(s).
    3. Computes the diff.
    4. Prints the records and summary to stdout.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    # 1. Read Input
    text_a, text_b = InputController().parse(args.source_a, args.source_b)
    if text_a is None or text_b is None:
        print("Error: No input data found.", file=sys.stderr)
        return EXIT_NO_INPUT

    options = DiffOptions(
        timeout_ms=args.timeout,
        ignore_whitespace=args.ignore_whitespace,
        ignore_case=args.ignore_case,
        precision=args.precision,
    )

    # 2. Run Diff
    try:
        result = compute_diff(text_a, text_b, options)
    except InvalidConfiguration as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except ComputationTimeout as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_TIMEOUT

    stats = compute_stats(result) if args.stats else None

    # 3. Output Results
    if args.json:
        payload = result.to_dict()
        if stats is not None:
            payload["stats"] = stats.to_dict()
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    for record in result.diffs:
        print(format_record(record))
    print(f"distance={result.edit_distance} similarity={result.similarity:.2f}%")
    if stats is not None:
        print(f"+{stats.additions} -{stats.deletions} ~{stats.modifications}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
