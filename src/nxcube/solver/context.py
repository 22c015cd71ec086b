"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Optional

from ..cube import CubeState


@dataclass
class SolutionContext:
    """
    Context passed to strategies containing the cube state, turn budget
    and cancellation.

    Attributes:
        state: Cube state to solve
        bound: Maximum number of turns (strategy default if None)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = no limit)
        start_time: When computation started
    """
    state: CubeState
    bound: Optional[int] = None
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False
