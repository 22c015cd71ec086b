"""
Turn Module - Colours, faces, axes and single-slice quarter turns.

A turn can be written in two equivalent coordinate systems:

    AxisTurn: (axis, pos_rot, index, cube_size)
        index is the signed layer distance from the centre. Index 0 is never
        used; for even cube sizes we pretend a phantom centre layer exists.
        pos_rot follows the right hand rule around the positive axis.

    FaceTurn: (face, inv, num_in, cube_size)
        num_in = 0 is the outer face, num_in = 1 the layer behind it, etc.
        A normal turn is clockwise looking at the face, inv is counter
        clockwise. Layers at or past the middle can not be turned.

Mapping between the two:
    Up = +Z, Left = +X, Front = +Y, Right = -X, Back = -Y, Down = -Z
    num_in = cube_size // 2 - |index|
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, TYPE_CHECKING

from .errors import UnknownColorError

if TYPE_CHECKING:
    from .move import Move


class Color(IntEnum):
    """Sticker colour. Values index the standard solved face order."""
    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5

    @property
    def symbol(self) -> str:
        """Capital first letter of the colour name."""
        return self.name[0]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Color':
        """
        Parse a single colour letter (case-insensitive).

        Args:
            symbol: One of W, G, R, B, O, Y

        Returns:
            Matching Color

        Raises:
            UnknownColorError: If the letter is not a colour symbol
        """
        try:
            return _COLOR_BY_SYMBOL[symbol.upper()]
        except KeyError:
            raise UnknownColorError(f"Unknown colour symbol: {symbol!r}") from None


_COLOR_BY_SYMBOL = {c.symbol: c for c in Color}


class Face(IntEnum):
    """ULFRBD face. Values are the face block order in the facelet array."""
    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5

    @property
    def symbol(self) -> str:
        return self.name[0]


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


# axis -> (face on the positive side, face on the negative side)
_AXIS_FACES = {
    Axis.X: (Face.LEFT, Face.RIGHT),
    Axis.Y: (Face.FRONT, Face.BACK),
    Axis.Z: (Face.UP, Face.DOWN),
}

# face -> (axis, True if the face is on the positive side)
_FACE_AXIS = {
    face: (axis, positive)
    for axis, pair in _AXIS_FACES.items()
    for face, positive in zip(pair, (True, False))
}


class Turn(ABC):
    """
    Base for the two turn representations.

    Equality and hashing normalise to the face-based form, so an AxisTurn
    and the FaceTurn it converts to compare equal.
    """

    cube_size: int

    @abstractmethod
    def to_face_based(self) -> 'FaceTurn':
        pass

    @abstractmethod
    def to_axis_based(self) -> 'AxisTurn':
        pass

    @abstractmethod
    def invert(self) -> 'Turn':
        """Same layer, opposite direction."""

    def _key(self) -> Tuple[Face, bool, int, int]:
        ft = self.to_face_based()
        return (ft.face, ft.inv, ft.num_in, ft.cube_size)

    def __eq__(self, other):
        if not isinstance(other, Turn):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def commutes_with(self, other: 'Turn') -> bool:
        """
        Check if two turns commute.

        Turns on the same axis commute. Turns on different axes are treated
        as never commuting (even when the slices are far apart).
        """
        return self.to_axis_based().axis == other.to_axis_based().axis

    def resize_hold_center(self, new_cube_size: int) -> Optional['AxisTurn']:
        """
        Move this turn to a cube of another size keeping its index.

        The layer keeps its distance from the centre of the cube.

        Returns:
            The resized turn, or None if that layer does not exist on the
            new cube size.
        """
        at = self.to_axis_based()
        if abs(at.index) > new_cube_size // 2:
            return None
        return AxisTurn(at.axis, at.pos_rot, at.index, new_cube_size)

    def resize_hold_face(self, new_cube_size: int) -> Optional['FaceTurn']:
        """
        Move this turn to a cube of another size keeping num_in.

        The layer keeps its distance from the nearest face.

        Returns:
            The resized turn, or None if that layer can not be turned on
            the new cube size.
        """
        ft = self.to_face_based()
        if ft.num_in >= new_cube_size // 2:
            return None
        return FaceTurn(ft.face, ft.inv, ft.num_in, new_cube_size)

    def as_move(self) -> 'Move':
        """Create a move with just this one turn."""
        from .move import Move
        return Move([self])


@dataclass(frozen=True, eq=False)
class AxisTurn(Turn):
    """
    Turn addressed by axis and signed layer index.

    Attributes:
        axis: Rotation axis
        pos_rot: True for a positive (right hand rule) rotation
        index: Signed layer index, never 0, |index| <= cube_size // 2
        cube_size: Edge length of the cube this turn is for
    """
    axis: Axis
    pos_rot: bool
    index: int
    cube_size: int

    def to_face_based(self) -> 'FaceTurn':
        positive_face, negative_face = _AXIS_FACES[self.axis]
        if self.index > 0:
            return FaceTurn(positive_face, self.pos_rot,
                            self.cube_size // 2 - self.index, self.cube_size)
        return FaceTurn(negative_face, not self.pos_rot,
                        self.cube_size // 2 + self.index, self.cube_size)

    def to_axis_based(self) -> 'AxisTurn':
        return self

    def invert(self) -> 'AxisTurn':
        return AxisTurn(self.axis, not self.pos_rot, self.index, self.cube_size)

    def __repr__(self):
        return (f"AxisTurn(axis={self.axis.name}, pos_rot={self.pos_rot}, "
                f"index={self.index}, cube_size={self.cube_size})")


@dataclass(frozen=True, eq=False)
class FaceTurn(Turn):
    """
    Turn addressed by face and depth.

    Attributes:
        face: Face the turn is named after
        inv: True for counter clockwise (looking at the face)
        num_in: Layers in from the face, 0 is the outer layer
        cube_size: Edge length of the cube this turn is for
    """
    face: Face
    inv: bool
    num_in: int
    cube_size: int

    def to_face_based(self) -> 'FaceTurn':
        return self

    def to_axis_based(self) -> AxisTurn:
        axis, positive = _FACE_AXIS[self.face]
        half = self.cube_size // 2
        if positive:
            return AxisTurn(axis, self.inv, half - self.num_in, self.cube_size)
        return AxisTurn(axis, not self.inv, -half + self.num_in, self.cube_size)

    def invert(self) -> 'FaceTurn':
        return FaceTurn(self.face, not self.inv, self.num_in, self.cube_size)

    def __str__(self):
        tick = "'" if self.inv else ""
        return f"{self.face.symbol}{self.num_in}{tick}"

    def __repr__(self):
        return (f"FaceTurn(face={self.face.name}, inv={self.inv}, "
                f"num_in={self.num_in}, cube_size={self.cube_size})")
