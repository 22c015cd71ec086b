"""
Tests for the console loop in main.py.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import Application
from nxcube.cube import CubeState, Face, FaceTurn


def mirrored_3x3() -> str:
    """Solved 3x3 after U0, with the Left and Right colours swapped."""
    state = CubeState.std_solved_nxnxn(3)
    state.turn(FaceTurn(Face.UP, False, 0, 3))
    return state.to_state_string().translate(str.maketrans("GB", "BG"))


def test_mirrored_scheme_prints_no_solution(corner_tables, capsys):
    app = Application("dpll", 3)
    app.solver.add_heuristics_table(corner_tables)

    app.handle_line(mirrored_3x3())
    out = capsys.readouterr().out
    assert out.rstrip().endswith("No Solution")


def test_mirrored_scheme_with_idastar(corner_tables, capsys):
    app = Application("idastar", 5)
    app.solver.add_heuristics_table(corner_tables)

    app.handle_line(mirrored_3x3())
    assert capsys.readouterr().out.rstrip().endswith("No Solution")


def test_loop_continues_after_bad_lines(corner_tables, capsys):
    app = Application("dpll", 3)
    app.solver.add_heuristics_table(corner_tables)

    app.handle_line("WWW")
    app.handle_line(mirrored_3x3())
    state = CubeState.std_solved_nxnxn(3)
    state.turn(FaceTurn(Face.FRONT, True, 0, 3))
    app.handle_line(state.to_state_string())

    out = capsys.readouterr().out
    assert "Invalid cube" in out
    assert out.rstrip().endswith("Solution: (F0)")


def test_2x2x2_uses_table_walk(corner_tables, capsys):
    app = Application("dpll", 3)
    app.solver.add_heuristics_table(corner_tables)

    state = CubeState.std_solved_nxnxn(2)
    state.turn(FaceTurn(Face.RIGHT, False, 0, 2))
    app.handle_line(state.to_state_string())
    last = capsys.readouterr().out.rstrip().splitlines()[-1]
    # R0' or, up to a whole cube rotation, L0'
    assert last in ("Solution: (R0')", "Solution: (L0')")
