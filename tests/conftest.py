"""
Shared fixtures for the nxcube tests.

The corner table takes a while to build, so it is built once per session.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nxcube.heuristics import HeuristicsTables
from nxcube.solver import RubiksCubeSolver


@pytest.fixture(scope="session")
def corner_tables():
    tables = HeuristicsTables()
    tables.calc_corner_heuristics_table()
    return tables


@pytest.fixture
def solver(corner_tables):
    """Solver sharing the session corner table."""
    return RubiksCubeSolver(corner_tables)
