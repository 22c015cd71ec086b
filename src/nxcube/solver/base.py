"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import Optional

from ..cube import CubeState, Move
from ..heuristics import HeuristicsTables
from .context import SolutionContext
from .solution import Solution, SolutionMetrics, SolveStatus


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        default_bound: Turn budget used when the context has none
        heuristics: Shared heuristics tables (may be None)
    """
    name: str = "base"
    description: str = "Base strategy"
    default_bound: int = 14

    # Expansions between cancellation checks
    CANCEL_CHECK_INTERVAL = 256

    def __init__(self, heuristics: Optional[HeuristicsTables] = None):
        """
        Args:
            heuristics: Heuristics tables shared by reference, not copied
        """
        self.heuristics = heuristics

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search for a move that solves context.state.

        Must periodically check context.is_cancelled() and return a
        CANCELLED solution if True.

        Args:
            context: Solution context with state, bound and cancellation

        Returns:
            Solution with move, status and metrics
        """
        pass

    def corner_heuristic(self, state: CubeState) -> Optional[int]:
        """Corner table lower bound, or None without a table."""
        if self.heuristics is None:
            return None
        return self.heuristics.corner_heuristic(state)

    def _bound(self, context: SolutionContext) -> int:
        return self.default_bound if context.bound is None else context.bound

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_solution(
        self,
        moves: Optional[Move],
        status: SolveStatus,
        start_time: float,
        states_explored: int = 0,
        pruned_branches: int = 0
    ) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return Solution(
            moves=moves if moves is not None else Move.empty(),
            status=status,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                pruned_branches=pruned_branches,
                strategy_name=self.name
            )
        )
