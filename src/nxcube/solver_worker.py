"""
Solver Worker Module

Runs one solve on a background thread so a caller can keep working, or
give up on the search, while it runs.
"""

import logging
import threading
from typing import Callable, Optional

from .cube import CubeState
from .solver import RubiksCubeSolver, Solution


logger = logging.getLogger(__name__)


class SolverWorker(threading.Thread):
    """
    Background worker thread for a single solve.

    Example:
        worker = SolverWorker(solver, state, "idastar")
        worker.start()
        # ...
        worker.request_stop()
        worker.join()
        print(worker.result)

    Attributes:
        result: Solution once the search finished (None before, or on error)
        error: Exception raised by the search, if any
        on_finished: Called with the Solution (or None on error) at the end
    """

    def __init__(
        self,
        solver: RubiksCubeSolver,
        state: CubeState,
        strategy_name: Optional[str] = None,
        bound: Optional[int] = None,
        on_finished: Optional[Callable[[Optional[Solution]], None]] = None,
        **strategy_kwargs
    ):
        """
        Initialize the solver worker.

        Args:
            solver: Solver holding the shared heuristics tables
            state: State to solve
            strategy_name: Strategy to run (solver default if None)
            bound: Turn budget (strategy default if None)
            on_finished: Optional completion callback
            **strategy_kwargs: Extra strategy constructor arguments
        """
        super().__init__(daemon=True)
        self.solver = solver
        self.state = state
        self.strategy_name = strategy_name
        self.bound = bound
        self.on_finished = on_finished
        self.strategy_kwargs = strategy_kwargs

        self.result: Optional[Solution] = None
        self.error: Optional[BaseException] = None
        self._cancel_flag = threading.Event()

    def run(self):
        """Run the search. Called when thread starts."""
        logger.info(f"Solver worker started ({self.strategy_name or 'default'})")
        try:
            self.result = self.solver.solve(
                self.state,
                self.strategy_name,
                bound=self.bound,
                cancel_flag=self._cancel_flag,
                **self.strategy_kwargs
            )
        except Exception as e:
            logger.exception("Error in solver worker")
            self.error = e
        finally:
            logger.info("Solver worker stopped")
            if self.on_finished:
                self.on_finished(self.result)

    def request_stop(self):
        """
        Request the search to stop.

        The strategy notices at its next cancellation check and returns a
        CANCELLED solution. Use join() after calling this to block until
        stopped.
        """
        logger.info("Stop requested")
        self._cancel_flag.set()

    def is_running(self) -> bool:
        return self.is_alive()
