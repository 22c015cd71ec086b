"""
DPLL Strategy - Bounded depth-first search with branch and bound.

Explores every turn sequence up to the bound using an explicit work stack
and an arena of (Move, CubeState) slots indexed by depth, so memory stays
at O(bound * n^2) and Python's recursion limit never matters.
"""

import logging
import time
from typing import List, Optional, Tuple

from ...cube import CubeState, Move
from ...heuristics import GODS_NUMBER_2X2X2
from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..solution import Solution, SolveStatus

logger = logging.getLogger(__name__)


@register_strategy
class DpllStrategy(SolverStrategy):
    """
    Single pass depth-first search to a fixed depth k.

    Algorithm:
        1. Push every turn at depth 1
        2. Pop a (depth, turn), apply it to the parent slot, store the
           result in slot[depth]
        3. Solved -> return the move in that slot
        4. Below k: if the corner lower bound exceeds the remaining
           budget prune, else push every efficient next turn

    Without a corner table the lower bound comes from running this same
    search on the corner 2x2x2 projection, which is much slower.
    """
    name = "dpll"
    description = "Bounded DFS - branch and bound on the corner heuristic"
    default_bound = 15

    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a solution of at most context.bound turns.

        Args:
            context: Solution context with state, bound and cancellation

        Returns:
            SOLVED with the move found first, UNSOLVABLE if the bound is
            exhausted, CANCELLED if stopped
        """
        start_time = time.perf_counter()
        root = context.state
        k = self._bound(context)

        if root.is_solved():
            return self._build_solution(Move.empty(), SolveStatus.SOLVED, start_time)
        if k <= 0:
            return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time)

        all_turns = root.all_turns()
        use_lower_bound = root.size() > 2

        history: List[Optional[Tuple[Move, CubeState]]] = [None] * (k + 1)
        history[0] = (Move.empty(), root.copy())
        work = [(1, turn) for turn in all_turns]

        states_explored = 0
        pruned = 0

        while work:
            depth, turn = work.pop()

            parent_move, parent_state = history[depth - 1]
            state = parent_state.copy()
            state.turn(turn)
            this_move = parent_move.copy()
            this_move.push(turn)
            history[depth] = (this_move, state)
            states_explored += 1

            if states_explored % self.CANCEL_CHECK_INTERVAL == 0 and self._check_cancelled(context):
                logger.info(f"[DPLL] Cancelled after {states_explored} states")
                return self._build_solution(None, SolveStatus.CANCELLED, start_time,
                                            states_explored, pruned)

            if state.is_solved():
                logger.debug(
                    f"[DPLL] Found {len(this_move)} turn solution, "
                    f"{states_explored} states explored, {pruned} pruned"
                )
                return self._build_solution(this_move, SolveStatus.SOLVED, start_time,
                                            states_explored, pruned)

            if depth >= k:
                continue

            remaining = k - depth
            if use_lower_bound and remaining < GODS_NUMBER_2X2X2:
                if self._exceeds_lower_bound(state, remaining, context):
                    pruned += 1
                    continue

            for next_turn in all_turns:
                if this_move.is_next_turn_efficient(next_turn):
                    work.append((depth + 1, next_turn))

        logger.debug(
            f"[DPLL] No solution within {k} turns, "
            f"{states_explored} states explored, {pruned} pruned"
        )
        return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time,
                                    states_explored, pruned)

    def _exceeds_lower_bound(self, state: CubeState, remaining: int,
                             context: SolutionContext) -> bool:
        """
        True if the corners alone need more than remaining turns.

        Args:
            state: Current (n > 2) state
            remaining: Turns left in the budget
            context: Parent context, for cancellation

        Returns:
            True if the branch can be pruned
        """
        if self.heuristics is not None and self.heuristics.has_corners:
            h_val = self.corner_heuristic(state)
            # None: corner configuration not reachable at all
            return h_val is None or h_val > remaining

        corners = SolutionContext(
            state=state.from_corners_to_2x2x2(),
            bound=remaining,
            cancel_flag=context.cancel_flag,
        )
        return self.solve(corners).status == SolveStatus.UNSOLVABLE
