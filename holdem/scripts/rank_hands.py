#!/usr/bin/env python
"""Rank Texas Hold'em hands from the command line.

Reads the community cards and one line per player, then prints the
players best hand first:

    $ printf 'KH KD KS AD AS\\nBar TS JD\\nFoo AC TD\\n' | holdem-rank
    1 Foo Full House Ace King
    2 Bar Full House King Ace

Usage:
    python -m holdem.scripts.rank_hands < table.txt
    python -m holdem.scripts.rank_hands --input table.txt --verbose
    python -m holdem.scripts.rank_hands --deal 6 --seed 42
    python -m holdem.scripts.rank_hands --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from holdem import resolve_seed
from holdem.engine import MAX_PLAYERS, InputError, Ranking, Table, parse_input, rank_hands
from holdem.rules import CATEGORY_NAMES, HoldemError, describe_categories, format_cards

logger = logging.getLogger(__name__)

# Styles for the top of the ranking; everyone else is printed plain
RANK_STYLES = {
    1: "bold green",
    2: "yellow",
}


@dataclass
class RankConfig:
    """Command line configuration."""

    verbose: bool = False
    input_path: Optional[str] = None

    # Random table
    deal: Optional[int] = None
    seed: Optional[int] = None

    # Output
    log_level: str = "WARNING"
    color: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RankConfig":
        log_level = args.log_level
        if log_level is None:
            log_level = "INFO" if args.verbose else "WARNING"
        return cls(
            verbose=args.verbose,
            input_path=args.input,
            deal=args.deal,
            seed=args.seed,
            log_level=log_level.upper(),
            color=not args.no_color,
        )


def build_parser() -> argparse.ArgumentParser:
    categories = describe_categories()
    epilog_lines = ["Hand categories, best first:"]
    for category, description in categories.items():
        epilog_lines.append(f"  {CATEGORY_NAMES[category]:<16} {description}")
    epilog_lines += [
        "",
        "Examples:",
        "  python -m holdem.scripts.rank_hands < table.txt",
        "  python -m holdem.scripts.rank_hands --input table.txt --verbose",
        "  python -m holdem.scripts.rank_hands --deal 6 --seed 42",
    ]

    parser = argparse.ArgumentParser(
        prog="holdem-rank",
        description="Rank Texas Hold'em hands. The first input line holds the five "
        "community cards (e.g. 'KH KD KS AD AS'); each following line holds a "
        "player name and two hole cards (e.g. 'Foo AC TD').",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="\n".join(epilog_lines),
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Also print hole cards and the best five cards"
    )
    parser.add_argument(
        "--input", "-i", type=str, default=None, help="Read the table from a file instead of stdin"
    )
    parser.add_argument(
        "--deal",
        type=int,
        default=None,
        metavar="N",
        help=f"Ignore input and deal a random table of N players (1-{MAX_PLAYERS})",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for --deal"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "debug", "info", "warning", "error"],
        help="Logging level (default: WARNING, INFO with --verbose)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def read_input(stream: TextIO) -> List[str]:
    """Read non-empty, stripped lines from a stream.

    Handles both LF and CRLF line endings.

    Raises:
        InputError: If fewer than two non-empty lines are present
    """
    lines = [line.strip() for line in stream.read().splitlines()]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        raise InputError("At least 2 lines of input are required.")
    return lines


def format_ranking(ranking: Ranking, verbose: bool = False) -> str:
    """Format one output line, e.g. '1 Foo Full House Ace King'."""
    line = str(ranking)
    if verbose:
        hole = format_cards(ranking.hand.cards)
        best = format_cards(ranking.result.best_cards)
        line = f"{line} [{hole}] ({best})"
    return line


def format_rankings(rankings: Sequence[Ranking], verbose: bool = False) -> List[str]:
    return [format_ranking(ranking, verbose) for ranking in rankings]


def load_table(config: RankConfig, stdin: TextIO, console: Console) -> Table:
    if config.deal is not None:
        seed = resolve_seed(config.seed)
        logger.info("Dealing %d players with seed %d", config.deal, seed)
        table = Table.deal(config.deal, seed=seed)
        for line in table.to_lines():
            console.print(Text(line, style="dim"), soft_wrap=True)
        return table

    if config.input_path is not None:
        logger.info("Reading table from %s", config.input_path)
        with open(config.input_path, encoding="utf-8") as f:
            return parse_input(read_input(f))
    return parse_input(read_input(stdin))


def run(config: RankConfig, stdin: TextIO, console: Console) -> int:
    """Rank one table and print the result.

    Returns:
        Process exit status
    """
    try:
        table = load_table(config, stdin, console)
        rankings = rank_hands(table.community, table.hands)
    except (HoldemError, OSError) as e:
        logger.debug("Failed to rank hands", exc_info=True)
        console.print(f"Error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1

    for ranking in rankings:
        style = RANK_STYLES.get(ranking.rank, "")
        console.print(Text(format_ranking(ranking, config.verbose), style=style), soft_wrap=True)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the hand ranker."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = RankConfig.from_args(args)

    configure_logging(config.log_level)
    console = Console(no_color=not config.color, highlight=False)

    try:
        return run(config, sys.stdin, console)
    except KeyboardInterrupt:
        console.print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
