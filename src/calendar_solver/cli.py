from __future__ import annotations

import argparse
import datetime
import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from .api import load_puzzle, solve_date, solve_reserved, survey_dates
from .backtrack import PuzzleError, SolveResult
from .interactive import interactive_solver
from .layout import default_puzzle
from .plotting import plot_board, print_board
from .types import Puzzle
from .yaml_io import write_puzzle_yaml


def _parse_cell(text: str) -> tuple[int, int]:
    try:
        r, c = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL with integers, got {text!r}"
        ) from None
    return (r, c)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calendar-solver",
        description="Cover a calendar board with its pieces, leaving a date open.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML puzzle definition (rows + pieces); built-in default if omitted",
    )
    parser.add_argument(
        "--month",
        type=int,
        help="Month to reserve (1-12); needs --day. Today if both omitted",
    )
    parser.add_argument("--day", type=int, help="Day to reserve; needs --month")
    parser.add_argument(
        "--reserve",
        type=_parse_cell,
        action="append",
        metavar="ROW,COL",
        help="Reserve an explicit cell (repeatable); overrides --month/--day",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Stop the search after this many placements",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the solved board in a Plotly figure",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Open the click-to-reserve board window",
    )
    parser.add_argument(
        "--survey",
        action="store_true",
        help="Try every month/day pair and list the unsolvable ones",
    )
    parser.add_argument(
        "--write-template",
        action="store_true",
        help="Write the built-in puzzle as YAML to --config and exit",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def _load(config: str | None) -> Puzzle:
    if config is not None and not Path(config).exists():
        print(f"Config not found: {config}. Using built-in puzzle.")
        return load_puzzle(None)
    return load_puzzle(config)


def _survey(puzzle: Puzzle, max_nodes: int | None) -> int:
    if not puzzle.months or puzzle.reserved_count == 0:
        print(f"Puzzle {puzzle.name} has no dates to reserve; nothing to survey.")
        return 0
    statuses = survey_dates(puzzle, max_nodes=max_nodes)
    failed = [k for k, v in statuses.items() if v != "solved"]
    print(f"{len(statuses) - len(failed)}/{len(statuses)} dates solvable")
    for month, day in failed:
        print(f"  {puzzle.months[month - 1]} {day}: {statuses[(month, day)]}")
    return 0


def _solve(puzzle: Puzzle, args: argparse.Namespace) -> SolveResult:
    if args.reserve:
        return solve_reserved(puzzle, args.reserve, max_nodes=args.max_nodes)
    if not puzzle.months or puzzle.reserved_count == 0:
        print(f"Solving {puzzle.name} with no reserved cells")
        return solve_reserved(puzzle, [], max_nodes=args.max_nodes)
    if args.month is None:
        today = datetime.date.today()
        month, day = today.month, today.day
    else:
        month, day = args.month, args.day
    print(f"Solving for month={month} day={day}")
    return solve_date(puzzle, month, day, max_nodes=args.max_nodes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if (args.month is None) != (args.day is None):
        parser.error("--month and --day must be given together")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.write_template:
        target = args.config or "puzzle.yaml"
        write_puzzle_yaml(target, default_puzzle(), overwrite=True)
        print(f"Wrote template config to {target}")
        return 0

    try:
        puzzle = _load(args.config)
        if args.interactive:
            interactive_solver(puzzle, max_nodes=args.max_nodes)
            return 0
        if args.survey:
            return _survey(puzzle, args.max_nodes)
        result = _solve(puzzle, args)
    except PuzzleError as e:
        print(f"Invalid puzzle: {e}")
        return 2
    except yaml.YAMLError as e:
        print(f"Invalid config: {e}")
        return 2
    except (ValueError, TypeError, IndexError) as e:
        print(f"Invalid input: {e}")
        return 2

    if result.board is None:
        if result.status == "node_limit":
            print(f"Search stopped after {args.max_nodes} nodes.")
        else:
            print("No solution found.")
        return 1

    print_board(result.board, puzzle)
    print(f"Solved in {result.nodes} nodes")
    if args.plot:
        plot_board(result.board, puzzle).show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
