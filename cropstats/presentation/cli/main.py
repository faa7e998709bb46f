"""CLI interface for crop profitability statistics."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from ...application.services.crop_stats_service import CropStatsService
from ...domain.entities.preference_set import PreferenceSet
from ...domain.entities.season import Season
from ...domain.entities.value_option import ValueOption
from ...infrastructure.repositories.text_crop_repository import TextCropRepository

from ...config.settings import DEFAULT_PLOT_SIZE, LOGGING_SETTINGS

# === Exit codes ===
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PARSE_FAILURE = 2

logger = logging.getLogger(__name__)

DESCRIPTION = "Profitability statistics for crops read from a whitespace-separated table."
EPILOG = (
    "The crop table is read from standard input (or --file), one crop per line:\n"
    "  name base_price sell_price days_per_harvest season\n"
    "Lines starting with '#' are comments. Crops with a zero price or harvest\n"
    "time, or season N/A, are skipped."
)


class UsageError(Exception):
    """Raised for a command line that cannot be turned into preferences."""


class CropStatsArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def plot_size(value: str) -> int:
    """argparse type for -z: an integer of at least 1."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid plot size: {value!r}")
    if size < 1:
        raise argparse.ArgumentTypeError(f"plot size must be at least 1, got {size}")
    return size


def build_parser() -> CropStatsArgumentParser:
    parser = CropStatsArgumentParser(
        prog="crop-stats",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    # === Values: at least one is expected, none is tolerated ===
    values = parser.add_argument_group("values")
    value_flags = [
        ("-p", ValueOption.PROFIT, "profit per crop"),
        ("-P", ValueOption.PROFIT_PER_PLOT, "profit per plot"),
        ("-s", ValueOption.SEASON, "profit per season"),
        ("-S", ValueOption.SEASON_PER_PLOT, "profit per season over a plot"),
        ("-w", ValueOption.WEEK, "average profit per week"),
        ("-W", ValueOption.WEEK_PER_PLOT, "average profit per week over a plot"),
        ("-t", ValueOption.HARVEST, "days per harvest"),
    ]
    for flag, option, help_text in value_flags:
        values.add_argument(
            flag, dest="values", action="append_const", const=option, help=help_text
        )

    # === Season filters: none means every season ===
    seasons = parser.add_argument_group("season filters")
    for season in Season:
        seasons.add_argument(
            f"--{season.value.lower()}",
            dest="seasons",
            action="append_const",
            const=season,
            help=f"only {season.value} crops",
        )

    # === Configuration ===
    config = parser.add_argument_group("configuration")
    config.add_argument(
        "-z",
        dest="plot_size",
        type=plot_size,
        default=DEFAULT_PLOT_SIZE,
        metavar="N",
        help=f"plot size (default: {DEFAULT_PLOT_SIZE})",
    )
    config.add_argument(
        "-c", dest="clean_output", action="store_true", help="clean, tab-separated output"
    )
    config.add_argument(
        "-f", "--file", type=Path, default=None, help="read the crop table from FILE instead of stdin"
    )
    config.add_argument(
        "--export", type=Path, default=None, metavar="CSV", help="also write all metrics to CSV"
    )
    return parser


def parse_preferences(argv: List[str]) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        Namespace carrying a ``preferences`` PreferenceSet plus I/O options

    Raises:
        UsageError: No arguments, unknown flag or invalid plot size
    """
    parser = build_parser()
    if not argv:
        raise UsageError("no options given")

    args = parser.parse_args(argv)
    args.preferences = PreferenceSet(
        values=frozenset(args.values or ()),
        seasons=frozenset(args.seasons or ()),
        plot_size=args.plot_size,
        clean_output=args.clean_output,
    )
    return args


def open_stdin():
    """Standard input as text, with undecodable bytes replaced."""
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    return sys.stdin


def silence_stdout():
    """Point stdout at devnull so the final flush after a closed pipe is quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        logger.debug("stdout has no file descriptor to redirect")


def main(argv: Optional[List[str]] = None):
    logging.basicConfig(
        level=LOGGING_SETTINGS["level"],
        format=LOGGING_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if "-h" in argv or "--help" in argv:
        parser.print_help(sys.stdout)
        sys.exit(EXIT_OK)

    try:
        args = parse_preferences(argv)
    except UsageError as e:
        if not argv:
            parser.print_help(sys.stderr)
        else:
            parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)
    except Exception as e:
        logger.error(f"Failed to parse options: {e}", exc_info=True)
        sys.exit(EXIT_PARSE_FAILURE)

    logger.debug(f"Preferences: {args.preferences}")

    try:
        if args.file is not None:
            with open(args.file, "r", encoding="utf-8", errors="replace") as fh:
                repo = TextCropRepository(fh)
                CropStatsService(repo, args.preferences).run(export_path=args.export)
        else:
            repo = TextCropRepository(open_stdin())
            CropStatsService(repo, args.preferences).run(export_path=args.export)
    except BrokenPipeError:
        silence_stdout()
        sys.exit(EXIT_OK)
    except OSError as e:
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    logger.info(f"Read {repo.lines_read} lines")


if __name__ == "__main__":
    main()
