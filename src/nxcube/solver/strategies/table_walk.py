"""
Table Walk Strategy - Optimal 2x2x2 solutions read off the corner table.
"""

import logging
import time

from ...cube import CubeInvariantError, Move
from ...heuristics import GODS_NUMBER_2X2X2
from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..solution import Solution, SolveStatus

logger = logging.getLogger(__name__)


@register_strategy
class TableWalkStrategy(SolverStrategy):
    """
    Walk down the corner table from a 2x2x2 state to solved.

    The table holds the exact distance of every 2x2x2 state, so at each
    step some turn leads to a state one closer. Taking the first such turn
    gives an optimal solution without any search.
    """
    name = "table2x2"
    description = "2x2x2 table walk (instant) - optimal from the corner table"
    default_bound = GODS_NUMBER_2X2X2

    def solve(self, context: SolutionContext) -> Solution:
        """
        Read an optimal solution of a 2x2x2 state from the table.

        Returns:
            BAD_INPUT for n != 2, NO_HEURISTICS without a table, UNSOLVABLE
            if the distance exceeds the bound or the state is unreachable

        Raises:
            CubeInvariantError: If the table has no downhill turn from an
                unsolved state
        """
        start_time = time.perf_counter()
        state = context.state
        k = self._bound(context)

        if state.size() != 2:
            return self._build_solution(None, SolveStatus.BAD_INPUT, start_time)
        if self.heuristics is None or not self.heuristics.has_corners:
            return self._build_solution(None, SolveStatus.NO_HEURISTICS, start_time)
        if state.is_solved():
            return self._build_solution(Move.empty(), SolveStatus.SOLVED, start_time)

        distance = self.corner_heuristic(state)
        if distance is None or distance > k:
            logger.debug(f"[Table2x2] Distance {distance} not within bound {k}")
            return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time, 1)

        current = state.copy()
        solution = Move.empty()
        states_explored = 1
        remaining = distance

        while remaining > 0:
            for turn in current.all_turns():
                candidate = current.copy()
                candidate.turn(turn)
                states_explored += 1
                value = self.corner_heuristic(candidate)
                if value is not None and value < remaining:
                    current = candidate
                    solution.push(turn)
                    remaining = value
                    break
            else:
                raise CubeInvariantError(
                    f"No turn lowers table distance {remaining} of state:\n{current}"
                )

        if not current.is_solved():
            raise CubeInvariantError(f"Table walk ended on an unsolved state:\n{current}")

        return self._build_solution(solution, SolveStatus.SOLVED, start_time, states_explored)
