"""
Cube Solver Module - Facade over the search strategies.

RubiksCubeSolver owns a reference to the heuristics tables and hands that
same reference to every strategy it creates, so the multi-million entry
corner table is built once and never copied.
"""

import logging
import threading
from typing import Optional

from ..cube import CubeState
from ..heuristics import GODS_NUMBER_2X2X2, HeuristicsTables
from .context import SolutionContext
from .factory import create_strategy, get_default_strategy_name
from .solution import Solution

logger = logging.getLogger(__name__)


class RubiksCubeSolver:
    """
    Entry point for solving cube states.

    Example:
        solver = RubiksCubeSolver()
        solver.calc_new_heuristics_table()
        solution = solver.solve_dpll(state, 15)
        print(solution)
    """

    def __init__(self, heuristics: Optional[HeuristicsTables] = None):
        """
        Args:
            heuristics: Prebuilt tables to share (None to build or add later)
        """
        self.heuristics = heuristics

    def calc_new_heuristics_table(self) -> None:
        """Build a fresh corner table and use it from now on."""
        tables = HeuristicsTables()
        tables.calc_corner_heuristics_table()
        self.heuristics = tables

    def add_heuristics_table(self, heuristics_table: HeuristicsTables) -> None:
        """Use heuristics_table, unless tables are already set."""
        if self.heuristics is None:
            self.heuristics = heuristics_table

    def solve(
        self,
        state: CubeState,
        strategy_name: Optional[str] = None,
        bound: Optional[int] = None,
        cancel_flag: Optional[threading.Event] = None,
        timeout_sec: Optional[float] = None,
        **strategy_kwargs
    ) -> Solution:
        """
        Run a named strategy on state.

        Args:
            state: State to solve (not modified)
            strategy_name: Registered strategy (default strategy if None)
            bound: Turn budget (strategy default if None)
            cancel_flag: Event that stops the search when set
            timeout_sec: Give up after this many seconds
            **strategy_kwargs: Extra strategy constructor arguments

        Returns:
            Solution with status and metrics

        Raises:
            ValueError: If strategy_name is not registered
        """
        name = strategy_name or get_default_strategy_name()
        strategy = create_strategy(name, heuristics=self.heuristics, **strategy_kwargs)

        context = SolutionContext(state=state.copy(), bound=bound, timeout_sec=timeout_sec)
        if cancel_flag is not None:
            context.cancel_flag = cancel_flag

        solution = strategy.solve(context)
        metrics = solution.metrics
        logger.info(
            f"[{name}] {solution.status.name}: {solution.move_count} turns, "
            f"{metrics.states_explored} states, {metrics.pruned_branches} pruned, "
            f"{metrics.computation_time_ms:.1f}ms"
        )
        return solution

    def solve_dpll(self, state: CubeState, k: int) -> Solution:
        """Bounded DFS up to k turns, pruned with the corner heuristic."""
        return self.solve(state, "dpll", bound=k)

    def solver_2x2x2_heuristics_table(self, state: CubeState,
                                      k: int = GODS_NUMBER_2X2X2) -> Solution:
        """Optimal 2x2x2 solution of at most k turns from the corner table."""
        return self.solve(state, "table2x2", bound=k)

    def solve_with_idastar(self, state: CubeState, solve_smaller: bool = True,
                           bound: Optional[int] = None) -> Solution:
        """IDA* with the corner heuristic (and smaller cubes if solve_smaller)."""
        return self.solve(state, "idastar", bound=bound, solve_smaller=solve_smaller)
