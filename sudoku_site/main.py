"""
Command line front end.

    sudoku-site build --all          # write index.html + sudoku_easy/medium/hard.html
    sudoku-site build                # same, asking for difficulty and title first
    sudoku-site generate -d hard     # print a puzzle
    sudoku-site solve "530070000..." # solve an 81 character puzzle
    sudoku-site serve                # preview server
"""
import argparse
import logging
import sys
import time

from . import config
from .errors import SudokuError
from .game_logic.board import count_holes, format_board, grid_from_string
from .game_logic.difficulty import Difficulty, difficulty_label, parse_difficulty
from .game_logic.rng import seed
from .game_logic.solver import solve
from .game_logic.sudoku import generate_puzzle
from .html_export import default_theme
from .site import build_site

logger = logging.getLogger(__name__)


def read_line(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _seed_from_args(args, clock_fallback: bool):
    if args.seed is not None:
        seed(args.seed)
    elif clock_fallback:
        seed(int(time.time()))


def build_command(args) -> int:
    # Each run publishes a new set of puzzles unless a seed is given
    _seed_from_args(args, clock_fallback=True)

    active = parse_difficulty(config.DEFAULT_DIFFICULTY)
    title = args.title
    if not args.all:
        print("Sudoku generator")
        active = parse_difficulty(
            read_line(f"Difficulty (1=Easy, 2=Medium, 3=Hard) [{list(Difficulty).index(active) + 1}]: "),
            active,
        )
        if title is None:
            title = read_line(f"Page title [{config.SITE_TITLE}]: ") or None

    theme = default_theme()
    build_site(args.output_dir, title=title, theme=theme, active=active, max_attempts=args.max_attempts)

    print("OK: wrote index.html + sudoku_easy/medium/hard.html")
    if not args.all:
        print("Open index.html in your browser.")
    return 0


def generate_command(args) -> int:
    _seed_from_args(args, clock_fallback=False)
    difficulty = parse_difficulty(args.difficulty, parse_difficulty(config.DEFAULT_DIFFICULTY))
    puzzle, solution = generate_puzzle(difficulty, max_attempts=args.max_attempts)

    print(f"{difficulty_label(difficulty)} puzzle ({count_holes(puzzle)} holes):")
    print(format_board(puzzle))
    if args.show_solution:
        print("\nSolution:")
        print(format_board(solution))
    return 0


def solve_command(args) -> int:
    _seed_from_args(args, clock_fallback=False)
    board = solve(grid_from_string(args.puzzle))
    print(format_board(board))
    return 0


def serve_command(args) -> int:
    from web_app.app import app

    logger.info(f"Preview server starting on port {args.port}")
    app.run(debug=args.debug, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-site", description="Sudoku puzzle generator and static site exporter")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="write the static site")
    build.add_argument("--all", action="store_true", help="don't prompt, use defaults")
    build.add_argument("--output-dir", default=config.OUTPUT_DIR)
    build.add_argument("--title", default=None)
    build.add_argument("--seed", type=int, default=None, help="default: seeded from the clock")
    build.add_argument("--max-attempts", type=int, default=None)
    build.set_defaults(func=build_command)

    generate = sub.add_parser("generate", help="print a puzzle")
    generate.add_argument("-d", "--difficulty", default=config.DEFAULT_DIFFICULTY)
    generate.add_argument("--seed", type=int, default=None)
    generate.add_argument("--max-attempts", type=int, default=None)
    generate.add_argument("--show-solution", action="store_true")
    generate.set_defaults(func=generate_command)

    solve_p = sub.add_parser("solve", help="solve an 81 character puzzle ('0' or '.' = empty)")
    solve_p.add_argument("puzzle")
    solve_p.add_argument("--seed", type=int, default=None)
    solve_p.set_defaults(func=solve_command)

    serve = sub.add_parser("serve", help="run the preview server")
    serve.add_argument("--port", type=int, default=5001)
    serve.add_argument("--debug", action="store_true")
    serve.set_defaults(func=serve_command)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=args.log_level.upper()
    )

    try:
        return args.func(args)
    except SudokuError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
