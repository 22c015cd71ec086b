"""
Cube Errors Module - Exception types raised by the cube model.
"""


class CubeFormatError(ValueError):
    """Facelet string has a length that is not 6 * n^2."""


class UnknownColorError(CubeFormatError):
    """Facelet string contains a symbol outside the six colour letters."""


class CubeInvariantError(RuntimeError):
    """
    Internal invariant broken (logic defect, not a recoverable condition).

    Raised when a turn is applied to a cube of a different size, or when a
    2x2x2 state cannot be rotated into the reference orientation.
    """
