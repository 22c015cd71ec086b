"""
Solver Package - Search strategies for the nxnxn cube.

Strategies are pluggable and selected by name at runtime.

Public API:
    - RubiksCubeSolver: Facade owning the shared heuristics tables
    - Solution, SolutionMetrics, SolveStatus: Search results
    - SolutionContext: State, bound and cancellation for one search
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from nxcube.cube import CubeState
    from nxcube.solver import RubiksCubeSolver

    solver = RubiksCubeSolver()
    solver.calc_new_heuristics_table()

    state, _ = CubeState.rnd_scramble(3, 6)
    solution = solver.solve_dpll(state, 6)
    if solution.is_solved:
        print(solution.moves)
"""

# Core data structures
from .solution import Solution, SolutionMetrics, SolveStatus
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .cube_solver import RubiksCubeSolver

__all__ = [
    # Data structures
    "Solution",
    "SolutionMetrics",
    "SolveStatus",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "RubiksCubeSolver",
]
