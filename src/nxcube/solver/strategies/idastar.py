"""
IDA* Strategy - Iterative deepening A* on the corner heuristic.

Each iteration explores, best first, every node whose f = g + h stays within
the current bound, recording the smallest f that went over. That minimum
becomes the next bound. With an admissible h the first solution found is
as short as the turn pruning rules allow.

For cubes larger than 4 the heuristic is the max of the corner table and
the length of an IDA* solution of the cube's outer layers projected onto
a cube two sizes smaller.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...cube import CubeState, Move
from ..base import SolverStrategy
from ..context import SolutionContext
from ..factory import register_strategy
from ..solution import Solution, SolveStatus

logger = logging.getLogger(__name__)

# Heuristic values are memoised for nodes shallower than this
MEMO_DEPTH = 7


@dataclass
class SearchNode:
    """
    Node on the IDA* frontier.

    Attributes:
        f: g + h estimate of the total solution length
        order: Tie breaker (newer nodes first, so ties go depth first)
        moves: Turns taken to reach this state
        state: Cube state after moves
    """
    f: int
    order: int
    moves: Move
    state: CubeState

    def __lt__(self, other: "SearchNode") -> bool:
        """Min-heap ordering: lowest f is the most promising."""
        return (self.f, self.order) < (other.f, other.order)

    @property
    def g(self) -> int:
        return len(self.moves)


@register_strategy
class IdaStarStrategy(SolverStrategy):
    """
    IDA* using the corner table and, optionally, smaller cubes.

    Parameters:
        solve_smaller: Add the recursive smaller-cube heuristic (n > 4)
    """
    name = "idastar"
    description = "IDA* - best first within a rising bound"
    default_bound = 40

    def __init__(self, heuristics=None, solve_smaller: bool = True):
        super().__init__(heuristics)
        self.solve_smaller = solve_smaller

    def solve(self, context: SolutionContext) -> Solution:
        """
        Run IDA* from context.state.

        The search bound is capped by context.bound (default_bound if None):
        once the next bound would exceed it the search reports UNSOLVABLE.

        Returns:
            SOLVED, UNSOLVABLE, NO_HEURISTICS or CANCELLED solution
        """
        start_time = time.perf_counter()
        root = context.state

        if self.heuristics is None or not self.heuristics.has_corners:
            return self._build_solution(None, SolveStatus.NO_HEURISTICS, start_time)
        if root.is_solved():
            return self._build_solution(Move.empty(), SolveStatus.SOLVED, start_time)

        memo: Optional[Dict[bytes, int]] = {} if root.size() > 4 else None
        max_bound = self._bound(context)

        start_h = self._heuristic(root, 0, None, memo, context)
        if start_h is None:
            return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time)

        all_turns = root.all_turns()
        bound = start_h
        states_explored = 0
        pruned = 0
        order = itertools.count()

        while True:
            if bound > max_bound:
                logger.debug(f"[IDA*] Bound {bound} exceeds limit {max_bound}")
                return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time,
                                            states_explored, pruned)

            logger.debug(f"[IDA*] Iteration with bound {bound}")
            min_excess: Optional[int] = None
            frontier: List[SearchNode] = [SearchNode(start_h, 0, Move.empty(), root)]

            while frontier:
                node = heapq.heappop(frontier)

                if node.state.is_solved():
                    logger.debug(
                        f"[IDA*] Found {node.g} turn solution, "
                        f"{states_explored} states explored, {pruned} pruned"
                    )
                    return self._build_solution(node.moves, SolveStatus.SOLVED, start_time,
                                                states_explored, pruned)

                next_g = node.g + 1
                for turn in all_turns:
                    if not node.moves.is_next_turn_efficient(turn):
                        continue

                    state = node.state.copy()
                    state.turn(turn)
                    states_explored += 1

                    if (states_explored % self.CANCEL_CHECK_INTERVAL == 0
                            and self._check_cancelled(context)):
                        logger.info(f"[IDA*] Cancelled after {states_explored} states")
                        return self._build_solution(None, SolveStatus.CANCELLED, start_time,
                                                    states_explored, pruned)

                    next_h = self._heuristic(state, next_g, bound - next_g, memo, context)
                    if next_h is None:
                        pruned += 1
                        continue

                    next_f = next_g + next_h
                    if next_f > bound:
                        pruned += 1
                        if min_excess is None or next_f < min_excess:
                            min_excess = next_f
                    else:
                        moves = node.moves.copy()
                        moves.push(turn)
                        heapq.heappush(frontier, SearchNode(next_f, -next(order), moves, state))

            if min_excess is None:
                return self._build_solution(None, SolveStatus.UNSOLVABLE, start_time,
                                            states_explored, pruned)
            bound = min_excess

    def _heuristic(self, state: CubeState, g: int, cutoff: Optional[int],
                   memo: Optional[Dict[bytes, int]],
                   context: SolutionContext) -> Optional[int]:
        """Memoised calc_heuristics for shallow nodes of large cubes."""
        if memo is None or g >= MEMO_DEPTH:
            return self.calc_heuristics(state, cutoff, context)

        key = state.to_bytes()
        if key in memo:
            return memo[key]
        value = self.calc_heuristics(state, cutoff, context)
        if value is not None:
            memo[key] = value
        return value

    def calc_heuristics(self, state: CubeState, cutoff: Optional[int] = None,
                        context: Optional[SolutionContext] = None) -> Optional[int]:
        """
        Max of every available admissible lower bound.

        Args:
            state: Cube state to estimate
            cutoff: Skip the expensive bounds once the cheap one exceeds this
            context: Parent context, for cancellation

        Returns:
            Lower bound on turns to solve, None if the corners are not in
            the table
        """
        h_val = self.corner_heuristic(state)
        if h_val is None:
            return None
        if cutoff is not None and h_val > cutoff:
            return h_val

        if self.solve_smaller and state.size() > 4:
            # 2x2x2 is what the corner table already covers
            smaller = SolutionContext(state=state.from_outer_to_smaller_cube_size(state.size() - 2))
            if context is not None:
                smaller.cancel_flag = context.cancel_flag
            sub = self.solve(smaller)
            if sub.is_solved:
                h_val = max(h_val, sub.move_count)

        return h_val
