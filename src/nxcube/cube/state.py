"""
Cube State Module - Facelet array representation of an nxnxn cube.
"""

import math
import random
from typing import List, Optional, Tuple

import numpy as np

from .errors import CubeFormatError, CubeInvariantError
from .facelets import orientation_permutations, rotation_permutation, turn_permutation
from .move import Move
from .turn import Axis, Color, Face, FaceTurn, Turn

# 2x2x2 reference corner (Right/Back/Down stickers of the bottom back right
# cubie) and the colours it must show in the normal orientation.
REFERENCE_CORNER = (15, 18, 23)
REFERENCE_COLORS = (Color.BLUE, Color.ORANGE, Color.YELLOW)


class CubeState:
    """
    State of an nxnxn cube as a flat array of 6*n*n colours.

    Faces are stored in ULFRBD order, each row-major (left to right, top to
    bottom). The facelet array is never written in place; every mutation
    rebinds it, so copies can share storage.

    Example:
        >>> state = CubeState.std_solved_nxnxn(3)
        >>> state.turn(FaceTurn(Face.UP, True, 0, 3))
        >>> state.is_solved()
        False

    Attributes:
        n: Edge length of the cube
    """

    def __init__(self, n: int, data: np.ndarray):
        """
        Args:
            n: Cube size
            data: uint8 array of 6*n*n Color values
        """
        if len(data) != 6 * n * n:
            raise CubeFormatError(f"Expected {6 * n * n} facelets for n={n}, got {len(data)}")
        self.n = n
        self._data = data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_state_string(cls, s: str) -> 'CubeState':
        """
        Parse a facelet string.

        The string holds 6*n^2 colour letters (W, G, R, B, O, Y, any case)
        in face order ULFRBD, each face left to right, top to bottom.

        Args:
            s: Facelet string

        Returns:
            Parsed CubeState

        Raises:
            CubeFormatError: If the length is not 6*n^2
            UnknownColorError: If a letter is not a colour symbol
        """
        length = len(s)
        n = math.isqrt(length // 6)
        if length == 0 or length % 6 != 0 or n * n != length // 6:
            raise CubeFormatError(
                f"State string length {length} is not 6*n^2 for any n"
            )
        data = np.fromiter((Color.from_symbol(ch) for ch in s), dtype=np.uint8, count=length)
        return cls(n, data)

    @classmethod
    def std_solved_nxnxn(cls, n: int) -> 'CubeState':
        """Solved cube with ULFRBD coloured W, G, R, B, O, Y."""
        data = np.repeat(np.arange(6, dtype=np.uint8), n * n)
        return cls(n, data)

    @classmethod
    def rnd_scramble(cls, n: int, num_turns: int,
                     rng: Optional[random.Random] = None) -> Tuple['CubeState', Move]:
        """
        Scramble a solved cube with random turns.

        Returns:
            (scrambled state, scramble move)
        """
        state = cls.std_solved_nxnxn(n)
        scramble = Move.rnd_move(n, num_turns, rng)
        state.do_move(scramble)
        return state, scramble

    def from_corners_to_2x2x2(self) -> 'CubeState':
        """Project onto a 2x2x2 cube made of this cube's corner facelets."""
        return self.from_outer_to_smaller_cube_size(2)

    def from_outer_to_smaller_cube_size(self, m: int) -> 'CubeState':
        """
        Project onto a smaller m-cube built from the outer layers.

        Keeps the outer m//2 rows and columns of every face, plus the centre
        row and column when m is odd. Any turn of this cube acts on the
        projection as at most one turn of the smaller cube, so the smaller
        cube never needs more turns to solve.

        Args:
            m: Target size, 2 <= m <= n, odd only if n is odd

        Returns:
            Projected CubeState of size m
        """
        n = self.n
        if not 2 <= m <= n or (m % 2 == 1 and n % 2 == 0):
            raise ValueError(f"Can not project a {n}x{n}x{n} cube onto size {m}")

        half = m // 2
        keep = list(range(half))
        if m % 2 == 1:
            keep.append(n // 2)
        keep.extend(range(n - half, n))

        faces = self._data.reshape(6, n, n)
        data = faces[:, keep][:, :, keep].reshape(-1).copy()
        return CubeState(m, data)

    def copy(self) -> 'CubeState':
        return CubeState(self.n, self._data)

    # ------------------------------------------------------------------
    # Turning
    # ------------------------------------------------------------------

    def turn(self, turn: Turn) -> None:
        """
        Apply a single quarter turn.

        Raises:
            CubeInvariantError: If the turn is for another cube size or
                turns a layer at or past the middle
        """
        ft = turn.to_face_based()
        if ft.cube_size != self.n or not 0 <= ft.num_in < self.n // 2:
            raise CubeInvariantError(
                f"Turn {ft!r} can not be applied to a {self.n}x{self.n}x{self.n} cube"
            )
        self._data = self._data[turn_permutation(self.n, ft.face, ft.inv, ft.num_in)]

    def do_move(self, rubiks_move: Move) -> None:
        """Apply every turn of a move in order."""
        for turn in rubiks_move:
            self.turn(turn)

    def rotate_cube(self, axis: Axis) -> None:
        """Rotate the whole cube (not a slice) in the positive direction."""
        self._data = self._data[rotation_permutation(self.n, axis)]

    def all_turns(self) -> List[FaceTurn]:
        """Every legal turn: 6 faces x n//2 layers x (inverted, normal)."""
        return [
            FaceTurn(face, inv, num_in, self.n)
            for face in Face
            for num_in in range(self.n // 2)
            for inv in (True, False)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_solved(self) -> bool:
        """True if every face is a single colour (any colour scheme)."""
        faces = self._data.reshape(6, -1)
        return bool((faces == faces[:, :1]).all())

    def size(self) -> int:
        return self.n

    def data_at(self, i: int) -> Color:
        return Color(int(self._data[i]))

    def to_bytes(self) -> bytes:
        return self._data.tobytes()

    def to_state_string(self) -> str:
        return "".join(Color(int(c)).symbol for c in self._data)

    # ------------------------------------------------------------------
    # 2x2x2 canonical orientation
    # ------------------------------------------------------------------

    def _find_normal_orientation(self) -> Optional[np.ndarray]:
        if self.n != 2:
            raise CubeInvariantError(f"Only 2x2x2 cubes have a normal orientation (n={self.n})")
        data = self._data
        for perm in orientation_permutations(2):
            if all(data[perm[i]] == c for i, c in zip(REFERENCE_CORNER, REFERENCE_COLORS)):
                return perm
        return None

    def _normal_orientation(self) -> np.ndarray:
        perm = self._find_normal_orientation()
        if perm is not None:
            return perm
        raise CubeInvariantError(
            f"No orientation puts the reference corner in place:\n{self}"
        )

    def rotate_to_normal_2x2x2(self) -> None:
        """
        Rotate a 2x2x2 cube until the reference corner reads Blue, Orange,
        Yellow on its Right, Back and Down stickers.

        Raises:
            CubeInvariantError: If n != 2 or no orientation matches
        """
        self._data = self._data[self._normal_orientation()]

    def canonical_key(self) -> bytes:
        """Facelet bytes of the 2x2x2 state in normal orientation."""
        return self._data[self._normal_orientation()].tobytes()

    def find_canonical_key(self) -> Optional[bytes]:
        """
        Like canonical_key(), but None when no orientation shows the
        reference corner (a mirrored colour scheme or a twisted corner).
        """
        perm = self._find_normal_orientation()
        if perm is None:
            return None
        return self._data[perm].tobytes()

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, CubeState):
            return NotImplemented
        return self.n == other.n and np.array_equal(self._data, other._data)

    def __hash__(self):
        # 2x2x2 states that differ by a whole-cube rotation hash the same
        if self.n == 2:
            return hash(self.canonical_key())
        return hash((self.n, self._data.tobytes()))

    def __repr__(self):
        return f"CubeState(n={self.n}, '{self.to_state_string()}')"

    def __str__(self):
        n = self.n
        faces = self._data.reshape(6, n, n)

        def row(face: Face, i: int) -> str:
            return "".join(Color(int(c)).symbol for c in faces[face][i])

        pad = " " * (n + 1)
        lines = [pad + row(Face.UP, i) for i in range(n)]
        lines += [
            " ".join(row(f, i) for f in (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK))
            for i in range(n)
        ]
        lines += [pad + row(Face.DOWN, i) for i in range(n)]
        return "\n".join(lines)
