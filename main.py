"""
nxcube console - Entry Point

Reads one facelet string per line from standard input, prints the cube and
the solving move (or "No Solution").

Example:
    python main.py
    python main.py --strategy idastar --bound 20
    echo WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY | python main.py
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from nxcube.cube import CubeFormatError, CubeInvariantError, CubeState
from nxcube.heuristics import HeuristicsTables
from nxcube.render import save_cube_image
from nxcube.settings import load_settings
from nxcube.solver import RubiksCubeSolver, get_strategy_names


logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
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


def load_or_build_table(cache: Optional[str]) -> HeuristicsTables:
    """
    Load the corner table from cache, building and caching it if missing.

    Args:
        cache: Pickle file path, or None/"" to always build

    Returns:
        Corner heuristics tables
    """
    if cache and Path(cache).exists():
        try:
            return HeuristicsTables.load(cache)
        except Exception as e:
            logger.warning(f"Failed to load table cache {cache}: {e}, rebuilding")

    tables = HeuristicsTables()
    tables.calc_corner_heuristics_table()
    if cache:
        tables.save(cache)
    return tables


class Application:
    """
    Console application controller.

    Owns the solver (and its table) and solves each input line.
    """

    def __init__(self, strategy_name: str, bound: int, render_dir: Optional[str] = None):
        """
        Args:
            strategy_name: Strategy for cubes larger than 2x2x2
            bound: Turn budget
            render_dir: Directory for PNG renders of each input (None = off)
        """
        self.strategy_name = strategy_name
        self.bound = bound
        self.render_dir = Path(render_dir) if render_dir else None
        self.solver = RubiksCubeSolver()
        self._count = 0

    def setup(self, table_cache: Optional[str]) -> None:
        self.solver.add_heuristics_table(load_or_build_table(table_cache))
        logger.info(f"Application initialized, strategy: {self.strategy_name}, bound: {self.bound}")

    def handle_line(self, line: str) -> None:
        """Parse, print and solve one facelet string."""
        try:
            state = CubeState.from_state_string(line)
        except CubeFormatError as e:
            print(f"Invalid cube: {e}")
            return

        self._count += 1
        print(state)
        if self.render_dir is not None:
            path = self.render_dir / f"cube_{self._count:03d}.png"
            save_cube_image(state, path)
            logger.info(f"Cube image saved: {path}")

        try:
            if state.size() == 2:
                solution = self.solver.solver_2x2x2_heuristics_table(state)
            else:
                solution = self.solver.solve(state, self.strategy_name, bound=self.bound)
        except CubeInvariantError as e:
            logger.warning(f"Unsolvable cube: {e}")
            print(f"Invalid cube: {e}")
            print("No Solution")
            return
        print(solution)

    def run(self) -> int:
        print("Enter a facelet string (ULFRBD faces, row-major), one per line:")
        for raw in sys.stdin:
            line = raw.strip()
            if not line:
                continue
            self.handle_line(line)
        return 0


def main():
    """Main entry point."""
    settings = load_settings()

    parser = argparse.ArgumentParser(description="nxnxn Rubik's cube solver")
    parser.add_argument(
        "--strategy",
        default=settings["strategy_name"],
        choices=get_strategy_names(),
        help=f"Search strategy (default: {settings['strategy_name']})"
    )
    parser.add_argument(
        "--bound",
        type=int,
        default=settings["dpll_bound"],
        help=f"Maximum solution length (default: {settings['dpll_bound']})"
    )
    parser.add_argument(
        "--table",
        default=settings["table_cache"],
        help="Corner table cache file (built and saved if missing)"
    )
    parser.add_argument(
        "--render",
        metavar="DIR",
        default=None,
        help="Save a PNG of every input cube into DIR"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args()

    setup_logging(args.debug or settings.get("debug_enabled", False))

    app = Application(args.strategy, args.bound, args.render)
    app.setup(args.table)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
