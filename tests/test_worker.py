"""
Tests for the background solver worker.

Usage:
    pytest tests/test_worker.py
"""

import random

from nxcube.cube import CubeState, Face, FaceTurn
from nxcube.solver import RubiksCubeSolver, SolveStatus
from nxcube.solver_worker import SolverWorker


def test_worker_result_and_callback(solver):
    state = CubeState.std_solved_nxnxn(3)
    state.turn(FaceTurn(Face.LEFT, True, 0, 3))
    finished = []

    worker = SolverWorker(solver, state, "dpll", bound=2, on_finished=finished.append)
    worker.start()
    worker.join(timeout=60)

    assert not worker.is_running()
    assert worker.error is None
    assert worker.result.is_solved
    assert worker.result.move_count == 1
    assert finished == [worker.result]


def test_worker_cancellation():
    state, _ = CubeState.rnd_scramble(3, 20, random.Random(99))
    worker = SolverWorker(RubiksCubeSolver(), state, "dpll", bound=12)
    worker.request_stop()
    worker.start()
    worker.join(timeout=60)

    assert not worker.is_running()
    assert worker.result.status == SolveStatus.CANCELLED


def test_worker_stores_error():
    finished = []
    worker = SolverWorker(RubiksCubeSolver(), CubeState.std_solved_nxnxn(3), "no_such_strategy",
                          on_finished=finished.append)
    worker.start()
    worker.join(timeout=10)

    assert isinstance(worker.error, ValueError)
    assert worker.result is None
    assert finished == [None]
