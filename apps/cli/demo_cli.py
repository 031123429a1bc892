"""Command-line driver: benchmark the solver on reference puzzles, solve a grid, or generate a new puzzle."""

# demo_cli.py
# Usage:
#   python -m apps.cli.demo_cli bench
#   python -m apps.cli.demo_cli solve "..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3.."
#   python -m apps.cli.demo_cli generate --clues 17 --seed 123 --json

import argparse
import json
import sys
import time

from cpsudoku.config import load_settings
from cpsudoku.errors import GenerationError, MalformedInputError, UnsolvableError
from cpsudoku.grid_codec import format_grid, grid_to_string
from cpsudoku.logutil import error, log
from cpsudoku.sudoku_tools import Generator, Solver, generate_tool

EASY = "..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3.."
HARD = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"
HARDEST = ".....6....59.....82....8....45........3........6..3.54...325..6.................."

BENCH_PUZZLES = [("easy", EASY), ("hard", HARD), ("hardest", HARDEST)]


def time_solve(solver: Solver, puzzle: str) -> float:
    start = time.perf_counter()
    solver.solve_str(puzzle)
    return time.perf_counter() - start


def cmd_bench(args, settings) -> int:
    solver = Solver(settings)
    generator = Generator(settings, seed=args.seed)
    puzzles = list(BENCH_PUZZLES)
    puzzles.append((f"generated-{args.clues}", generator.generate_str(args.clues)))
    for name, puzzle in puzzles:
        log(f"solving {name}: {puzzle}", quiet=args.quiet)
        print(f"{time_solve(solver, puzzle):.6f}")
    return 0


def cmd_solve(args, settings) -> int:
    state = Solver(settings).solve_str(args.grid)
    solution = grid_to_string(state)
    if args.json:
        print(json.dumps({"puzzle": args.grid, "solution": solution}, indent=2))
    else:
        print(format_grid(solution))
    return 0


def cmd_generate(args, settings) -> int:
    payload = generate_tool(args.clues, seed=args.seed, settings=settings)
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(format_grid(payload["puzzle"]))
        print()
        print(payload["puzzle"])
    log(f"[ok] clues={payload['clues']} distinct={payload['distinct']} attempts={payload['attempts']}",
        quiet=args.quiet)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Constraint-propagation Sudoku solver and generator.")
    ap.add_argument("--config", type=str, default=None, help="YAML settings file")
    ap.add_argument("--verbose", action="store_true", default=None, help="Log solver progress")
    ap.add_argument("--quiet", action="store_true", help="Suppress informational logs")
    sub = ap.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("bench", help="Time the reference puzzles and one generated puzzle")
    b.add_argument("--clues", type=int, default=17)
    b.add_argument("--seed", type=int, default=None)
    b.set_defaults(func=cmd_bench)

    s = sub.add_parser("solve", help="Solve an 81-char grid ('.' or 0 = blank)")
    s.add_argument("grid")
    s.add_argument("--json", action="store_true")
    s.set_defaults(func=cmd_solve)

    g = sub.add_parser("generate", help="Generate a puzzle with at least N clues")
    g.add_argument("--clues", type=int, default=17)
    g.add_argument("--seed", type=int, default=None)
    g.add_argument("--max-attempts", type=int, default=None, help="Give up after this many attempts (0 = never)")
    g.add_argument("--json", action="store_true")
    g.set_defaults(func=cmd_generate)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(
            args.config,
            verbose=args.verbose,
            max_attempts=getattr(args, "max_attempts", None),
        )
    except (OSError, ValueError) as e:
        error(f"config: {e}")
        return 2
    try:
        return args.func(args, settings)
    except MalformedInputError as e:
        error(str(e))
        return 2
    except (UnsolvableError, GenerationError) as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
