"""
Cube Package - nxnxn cube model.

Public API:
    - Color, Face, Axis: Enumerants
    - Turn, AxisTurn, FaceTurn: Single-slice quarter turns
    - Move: Ordered sequence of turns
    - CubeState: Facelet array with turn application
    - CubeFormatError, UnknownColorError, CubeInvariantError

Usage:
    from nxcube.cube import CubeState, FaceTurn, Face

    state = CubeState.std_solved_nxnxn(3)
    three_turns = (FaceTurn(Face.UP, True, 0, 3).as_move()
                   * FaceTurn(Face.FRONT, True, 0, 3).as_move()
                   * FaceTurn(Face.LEFT, True, 0, 3).as_move())
    state.do_move(three_turns)
    print(state)
"""

from .errors import CubeFormatError, UnknownColorError, CubeInvariantError
from .turn import Color, Face, Axis, Turn, AxisTurn, FaceTurn
from .move import Move
from .state import CubeState

__all__ = [
    "Color",
    "Face",
    "Axis",
    "Turn",
    "AxisTurn",
    "FaceTurn",
    "Move",
    "CubeState",
    "CubeFormatError",
    "UnknownColorError",
    "CubeInvariantError",
]
