# src/lotto_pick_extractor/demo.py
import argparse
import logging
import sys

from .extraction.general.token import strip_separators
from .extraction.general.utils import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    temp_data_dir,
)


def _format_outcome(outcome, show_misses: bool):
    if outcome.found:
        return f"{outcome.digits} -> {','.join(outcome.pick)}"
    if show_misses:
        return f"{outcome.digits} -> no pick ({outcome.reason.value})"
    return None


def _run_group(inputs, *, show_misses: bool, debug: bool) -> None:
    from .extraction.orchestrator import find_lotto_pick

    for raw in inputs:
        outcome = find_lotto_pick(strip_separators(raw), debug=debug)
        line = _format_outcome(outcome, show_misses)
        if line is not None:
            print(line)


def main(argv=None):
    """CLI: print the first valid lottery pick hidden in each digit string."""
    from .extraction.pick import load_sample_inputs

    parser = argparse.ArgumentParser(
        prog="lotto-pick",
        description="Split digit strings into 1/2-digit numbers and print a valid 7-number pick.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Inputs may contain separators (spaces, dashes, commas).\n"
            "Put inputs that start with a dash after --, e.g.\n"
            "  lotto-pick -- -49-38-53-28-9-47-54"
        ),
    )
    parser.add_argument(
        "digits",
        nargs="*",
        help="Digit strings to check (e.g. 4938532894754). Defaults to the bundled samples.",
    )
    parser.add_argument("--samples", action="store_true", help="Also run the bundled sample groups")
    parser.add_argument(
        "--all",
        action="store_true",
        dest="show_misses",
        help="Also print inputs without a pick, with the reason",
    )
    parser.add_argument("--debug", action="store_true", help="List each filter stage's survivors")
    parser.add_argument(
        "--data-dir",
        metavar="PATH",
        help="Read sample_inputs.json from PATH instead of the bundled data dir",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    groups = []
    if args.digits:
        groups.append((None, args.digits))
    if args.samples or not args.digits:
        try:
            if args.data_dir:
                with temp_data_dir(args.data_dir):
                    groups.extend(load_sample_inputs().items())
            else:
                groups.extend(load_sample_inputs().items())
        except (DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError) as e:
            print(f"❌ Error: {e}", file=sys.stderr)
            sys.exit(1)

    for i, (title, inputs) in enumerate(groups):
        if title is not None:
            print(f"\n{title}" if i else title)
        _run_group(inputs, show_misses=args.show_misses, debug=args.debug)


if __name__ == "__main__":
    main()
