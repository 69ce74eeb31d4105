#!/usr/bin/env python3
"""
Minesweeper - Terminal entry point.

Usage:
    python main.py [--difficulty {beginner,intermediate,expert}]
    python main.py --rows R --cols C --mines M [--seed S] [--no-color]
"""
import argparse

from src.minesweeper.board import Board, BoardConfig, DIFFICULTIES, get_difficulty
from src.minesweeper.terminal import play


def build_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """Resolve the board configuration from command line arguments."""
    custom = (args.rows, args.cols, args.mines)
    if all(value is None for value in custom):
        return get_difficulty(args.difficulty)
    if any(value is None for value in custom):
        parser.error("--rows, --cols and --mines must be given together")
    try:
        return BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)
    except ValueError as err:
        parser.error(str(err))


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size (default: beginner)",
    )
    parser.add_argument("--rows", type=int, help="Custom number of rows")
    parser.add_argument("--cols", type=int, help="Custom number of columns")
    parser.add_argument("--mines", type=int, help="Custom number of mines")
    parser.add_argument("--seed", type=int, help="Random seed for mine placement")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )

    args = parser.parse_args()
    config = build_config(parser, args)

    print("Welcome to Minesweeper!")
    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")

    board = Board(config, seed=args.seed)
    play(board, color=not args.no_color)


if __name__ == "__main__":
    main()
