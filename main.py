"""
Chess Puzzle Solver - Entry Point

Solves a start/target board pair with one of the registered search
strategies and prints the move sequence.

Example:
    python main.py                                   # Reference puzzle, BFS
    python main.py --strategy astar
    python main.py --strategy dfs --max-depth 12
    python main.py --strategy trial_error --seed 7 --max-attempts 500
    python main.py --start "KBB/RR." --target ".BB/RRK" --debug
"""

import sys
import logging
import argparse
from typing import List, Optional

from src.solver import (
    BoardState,
    SolutionCursor,
    SolverParameterError,
    get_strategy_info,
    get_strategy_names,
    get_heuristic_names,
    solve,
    REFERENCE_START,
    REFERENCE_TARGET,
)
from src.settings import load_settings, save_settings, strategy_params
from src.debug import save_solution_image


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Log to both console and solver.log."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a move sequence turning a start board into a target board"
    )
    parser.add_argument("--strategy", choices=get_strategy_names(),
                        help="Search strategy (default from config.json, else bfs)")
    parser.add_argument("--start", default=REFERENCE_START,
                        help="Start board, rows separated by '/' (default: %(default)s)")
    parser.add_argument("--target", default=REFERENCE_TARGET,
                        help="Target board, rows separated by '/' (default: %(default)s)")
    parser.add_argument("--max-depth", type=int, help="Depth bound for dfs/backtracking")
    parser.add_argument("--max-attempts", type=int, help="Attempts for trial_error strategies")
    parser.add_argument("--depth-bound", type=int, help="Moves per attempt for trial_error_depth")
    parser.add_argument("--seed", type=int, help="Random seed for trial_error strategies")
    parser.add_argument("--heuristic", choices=get_heuristic_names(), help="Estimator for astar")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logging and save a PNG of the solution to ./debug/")
    parser.add_argument("--list-strategies", action="store_true",
                        help="List available strategies and exit")
    parser.add_argument("--save-settings", action="store_true",
                        help="Persist the effective settings to config.json")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"  {info['name']:<18} {info['description']}")
        return 0

    # CLI flags override saved settings
    settings = load_settings()
    overrides = {
        "strategy_name": args.strategy,
        "max_depth": args.max_depth,
        "max_attempts": args.max_attempts,
        "depth_bound": args.depth_bound,
        "seed": args.seed,
        "heuristic": args.heuristic,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    if args.debug:
        settings["debug_enabled"] = True

    configure_logging(settings["debug_enabled"])

    if args.save_settings:
        save_settings(settings)

    try:
        start = BoardState.from_string(args.start)
        target = BoardState.from_string(args.target)
        name = settings["strategy_name"]
        solution = solve(start, target, strategy=name, **strategy_params(settings, name))
    except SolverParameterError as e:
        logger.error(f"Invalid strategy parameter: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 2

    print(f"Start:\n{start}\n\nTarget:\n{target}\n")

    if not solution.found:
        reason = "pieces differ" if solution.is_infeasible else "search exhausted"
        print(f"No solution found by {name} ({reason})")
        return 1

    print(f"{name}: {solution.move_count} moves in "
          f"{solution.metrics.computation_time_ms:.1f}ms "
          f"({solution.metrics.states_explored} states explored)")
    cursor = SolutionCursor(solution)
    while not cursor.is_exhausted:
        index = cursor.move_index + 1
        print(f"  {index}. {cursor.advance()}")

    if settings["debug_enabled"]:
        logger.info(f"Debug image saved: {save_solution_image(solution)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
