"""
Tests for the corner pattern database.

Usage:
    pytest tests/test_heuristics.py
"""

import random

import pytest

from nxcube import heuristics
from nxcube.cube import CubeInvariantError, CubeState
from nxcube.heuristics import CORNER_STATE_COUNT, GODS_NUMBER_2X2X2, HeuristicsTables
from nxcube.solver import SolutionContext, SolveStatus, create_strategy


def test_corner_table_cardinality(corner_tables):
    assert corner_tables.has_corners
    assert len(corner_tables) == CORNER_STATE_COUNT


def test_corner_table_distances(corner_tables):
    distances = set(corner_tables.corners.values())
    assert min(distances) == 0
    assert max(distances) == GODS_NUMBER_2X2X2
    assert corner_tables.corner_heuristic(CubeState.std_solved_nxnxn(2)) == 0


def test_solved_cubes_of_any_size_have_zero_distance(corner_tables):
    for n in range(2, 8):
        assert corner_tables.corner_heuristic(CubeState.std_solved_nxnxn(n)) == 0


def test_every_scramble_is_in_the_table(corner_tables):
    rng = random.Random(21)
    for _ in range(200):
        state, _ = CubeState.rnd_scramble(2, 50, rng)
        assert corner_tables.corner_heuristic(state) is not None


def test_corner_heuristic_is_exact_on_2x2x2(corner_tables):
    """A 2x2x2 needs h turns: bounded search finds h, not h - 1."""
    dpll = create_strategy("dpll")
    rng = random.Random(2)
    for depth in range(1, 5):
        for _ in range(3):
            state, _ = CubeState.rnd_scramble(2, depth, rng)
            h = corner_tables.corner_heuristic(state)
            assert h <= depth

            found = dpll.solve(SolutionContext(state=state, bound=h))
            assert found.status == SolveStatus.SOLVED
            assert found.move_count == h
            if h > 0:
                shorter = dpll.solve(SolutionContext(state=state, bound=h - 1))
                assert shorter.status == SolveStatus.UNSOLVABLE


def test_corner_heuristic_is_admissible_on_larger_cubes(corner_tables):
    rng = random.Random(4)
    for n in (3, 4, 5):
        for depth in range(0, 8):
            state, _ = CubeState.rnd_scramble(n, depth, rng)
            assert corner_tables.corner_heuristic(state) <= depth


def test_mirrored_scheme_is_not_in_the_table(corner_tables):
    state, _ = CubeState.rnd_scramble(3, 12, random.Random(17))
    mirrored = CubeState.from_state_string(state.to_state_string().translate(str.maketrans("GB", "BG")))
    assert corner_tables.corner_heuristic(mirrored) is None
    assert corner_tables.corner_heuristic(mirrored.from_corners_to_2x2x2()) is None


def test_empty_tables():
    tables = HeuristicsTables()
    assert not tables.has_corners
    assert len(tables) == 0
    assert tables.corner_heuristic(CubeState.std_solved_nxnxn(3)) is None


def test_edge_table_not_implemented():
    with pytest.raises(NotImplementedError):
        HeuristicsTables().calc_edge_heuristics_table(True)


def test_save_load_round_trip(tmp_path, monkeypatch):
    monkeypatch.setattr(heuristics, "CORNER_STATE_COUNT", 2)
    solved = CubeState.std_solved_nxnxn(2)
    tables = HeuristicsTables({solved.canonical_key(): 0, b"other": 1})

    path = tmp_path / "corners.pkl"
    tables.save(path)
    loaded = HeuristicsTables.load(path)

    assert loaded.corners == tables.corners
    assert loaded.corner_heuristic(solved) == 0


def test_load_rejects_incomplete_table(tmp_path):
    path = tmp_path / "partial.pkl"
    HeuristicsTables({b"only": 0}).save(path)
    with pytest.raises(CubeInvariantError):
        HeuristicsTables.load(path)


def test_save_without_table_raises(tmp_path):
    with pytest.raises(ValueError):
        HeuristicsTables().save(tmp_path / "none.pkl")
