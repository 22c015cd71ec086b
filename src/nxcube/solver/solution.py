"""
Solution Module - Result of a strategy computation.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from ..cube import Move


class SolveStatus(Enum):
    """
    Outcome of a search.

    States:
        SOLVED: A solving move was found within the bound
        UNSOLVABLE: The bound was exhausted without reaching solved
        NO_HEURISTICS: A heuristic was required but no table is loaded
        BAD_INPUT: The strategy can not handle this state
        CANCELLED: Stopped by the caller or the timeout
    """
    SOLVED = auto()
    UNSOLVABLE = auto()
    NO_HEURISTICS = auto()
    BAD_INPUT = auto()
    CANCELLED = auto()


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of cube states generated
        pruned_branches: Number of branches cut by heuristics
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        moves: Solving move (empty unless status is SOLVED)
        status: Outcome of the search
        metrics: Performance statistics
    """
    moves: Move = field(default_factory=Move.empty)
    status: SolveStatus = SolveStatus.UNSOLVABLE
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_solved(self) -> bool:
        return self.status == SolveStatus.SOLVED

    @property
    def move_count(self) -> int:
        """Number of turns in solution."""
        return len(self.moves)

    def __str__(self):
        if self.is_solved:
            return f"Solution: {self.moves}"
        return "No Solution"
