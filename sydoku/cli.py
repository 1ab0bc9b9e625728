"""Command-line interface for the Sudoku puzzle engine."""

import argparse
import datetime
import json
import logging
import sys

from tqdm import tqdm

from .core.grid import Grid
from .generator import PuzzleGenerator, Difficulty, date_string
from .game import puzzle_to_dict
from .solvers import BacktrackingSolver


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Engine: generator, daily challenge and solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  sydoku generate --count 5 --difficulty medium

  # Show today's hard daily challenge
  sydoku daily --difficulty hard

  # Solve a puzzle and check it has a unique solution
  sydoku solve --puzzle "530070000600195000..."
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    difficulty_choices = [d.value for d in Difficulty]

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=difficulty_choices + ["all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Daily command
    daily_parser = subparsers.add_parser("daily", help="Show the daily challenge puzzle")
    daily_parser.add_argument(
        "--date", type=str, default=None,
        help="Challenge date as YYYY-MM-DD (default: today)"
    )
    daily_parser.add_argument(
        "--difficulty", "-d",
        choices=difficulty_choices,
        default="medium",
        help="Difficulty level (default: medium)"
    )
    daily_parser.add_argument(
        "--solution", action="store_true",
        help="Also print the solution"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "generate": cmd_generate,
        "daily": cmd_daily,
        "solve": cmd_solve,
    }
    return commands[args.command](args)


def cmd_generate(args) -> int:
    """Handle the generate command."""
    generator = PuzzleGenerator(seed=args.seed)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    puzzles = []
    for difficulty in difficulties:
        for _ in tqdm(range(args.count), desc=f"Generating {difficulty.value}",
                      disable=args.output is None):
            puzzles.append(generator.generate_puzzle(difficulty))

    if args.output:
        with open(args.output, "w") as f:
            json.dump([puzzle_to_dict(p) for p in puzzles], f, indent=2)
        print(f"{len(puzzles)} puzzles saved to {args.output}")
        return 0

    for i, puzzle in enumerate(puzzles, 1):
        print(f"\n--- {puzzle.difficulty.display_name} Puzzle {i} ({puzzle.clue_count} clues) ---")
        print(puzzle.initial)
        print(f"Code: {puzzle.to_code()}")
    return 0


def cmd_daily(args) -> int:
    """Handle the daily command."""
    try:
        day = date_string(args.date or datetime.date.today())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    difficulty = Difficulty(args.difficulty)
    puzzle = PuzzleGenerator().generate_puzzle(difficulty, date_seed=day)

    print(f"Daily challenge {day} ({difficulty.display_name}, {puzzle.clue_count} clues)")
    print(puzzle.initial)
    print(f"Code: {puzzle.to_code()}")
    if args.solution:
        print("\nSolution:")
        print(puzzle.solution)
    return 0


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        grid = Grid.from_string(args.puzzle.strip())
    except ValueError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        return 1

    print("Input puzzle:")
    print(grid)
    print()

    solver = BacktrackingSolver()
    count = solver.count_solutions(grid, limit=2)
    if count == 0:
        print("✗ No solution")
        return 1

    solution = solver.solve(grid)
    print(f"✓ Solved in {solver.stats.time_seconds:.4f}s "
          f"({solver.stats.nodes_explored:,} nodes)")
    print(solution)

    if count == 1:
        print("Solution is unique")
    else:
        print("Warning: puzzle has more than one solution")
    return 0


if __name__ == "__main__":
    sys.exit(main())
