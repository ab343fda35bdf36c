"""
Crossing Solver - Entry Point

Solves a registered puzzle with a registered search strategy and prints
one line per move.

Example:
    python main.py
    python main.py --show-states --debug
    python main.py --strategy bfs --max-nodes 1000
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from crossing.puzzles import create_problem, get_puzzle_info
from crossing.rendering import render_solution, render_states
from crossing.settings import load_settings, save_settings
from crossing.solver import (
    SearchContext,
    Solution,
    create_strategy,
    get_default_strategy_name,
    get_strategy_info,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """Configure logging to stderr and optionally to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # stderr
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


class Application:
    """
    Main application controller.

    Resolves the puzzle and strategy from CLI arguments and saved
    settings, runs the search and prints the result.
    """

    def __init__(self, args: argparse.Namespace, settings: Dict[str, Any]):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override settings)
            settings: Loaded persistent settings
        """
        self.args = args
        self.settings = settings

        self.puzzle_name = args.puzzle or settings.get("puzzle_name", "river_crossing")
        self.strategy_name = (args.strategy or settings.get("strategy_name")
                              or get_default_strategy_name())
        self.timeout_sec = args.timeout if args.timeout is not None else settings.get("timeout_sec")
        self.max_nodes = args.max_nodes if args.max_nodes is not None else settings.get("max_nodes")

    def solve(self) -> Solution:
        """
        Build the problem and strategy and run one search.

        Raises:
            ValueError: If the puzzle or strategy name is unknown
        """
        problem = create_problem(self.puzzle_name)
        strategy = create_strategy(self.strategy_name)
        logger.info(f"Solving {self.puzzle_name} with {self.strategy_name}")

        context = SearchContext(
            problem=problem,
            timeout_sec=self.timeout_sec,
            max_nodes=self.max_nodes,
        )
        return strategy.solve(context)

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        solution = self.solve()

        if solution.was_cancelled:
            logger.warning("Search stopped before finishing; no solution printed")
        elif not solution.has_actions and not solution.goal_reached:
            logger.info("No solution found")

        if self.args.show_states:
            for line in render_states(solution.states):
                print(line)
            print()

        for line in render_solution(solution.actions):
            print(line)

        if self.args.save:
            self.settings["puzzle_name"] = self.puzzle_name
            self.settings["strategy_name"] = self.strategy_name
            save_settings(self.settings)

        return 0


def print_registry() -> None:
    """Print available puzzles and strategies."""
    print("Puzzles:")
    for info in get_puzzle_info():
        print(f"  {info['name']:<16} {info['description']}")
    print("Strategies:")
    for info in get_strategy_info():
        print(f"  {info['name']:<16} {info['description']}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crossing Solver - Breadth-first search for river crossing puzzles"
    )
    parser.add_argument(
        "--puzzle",
        help="Puzzle to solve (default: from config.json, else river_crossing)"
    )
    parser.add_argument(
        "--strategy", "-s",
        help="Search strategy (default: from config.json, else bfs)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Stop searching after this many seconds"
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        help="Stop searching after creating this many nodes"
    )
    parser.add_argument(
        "--show-states",
        action="store_true",
        help="Print the configuration after each move before the moves"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save the chosen puzzle and strategy to config.json"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available puzzles and strategies and exit"
    )
    parser.add_argument(
        "--log-file",
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, solve the puzzle and print the moves."""
    args = parse_args(argv)
    settings = load_settings()

    level = "DEBUG" if args.debug else settings.get("log_level", "INFO")
    configure_logging(level, args.log_file)

    if args.list:
        print_registry()
        return 0

    application = Application(args, settings)
    try:
        return application.run()
    except ValueError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
