"""
Facelet Permutations - Index permutations for turns and cube rotations.

Every turn and whole-cube rotation is a fixed permutation of the 6*n*n
facelet positions. They are derived once by running the sticker moves on an
array of indices, then cached. Applying one to a state is a single numpy
gather: ``new_data = data[perm]``.

Facelet layout: faces in ULFRBD order, each face stored row-major. Face
nets are oriented as in the unfolded cube::

        U
      L F R B
        D
"""

from functools import lru_cache
from typing import List, Tuple

import numpy as np

from .turn import Axis, Face


def _face_slice(n: int, face: Face) -> slice:
    start = int(face) * n * n
    return slice(start, start + n * n)


def _rotate_block(idx: np.ndarray, n: int, face: Face, inv: bool) -> None:
    """Rotate one face block 90 degrees (clockwise unless inv)."""
    s = _face_slice(n, face)
    block = idx[s].reshape(n, n)
    idx[s] = np.rot90(block, 1 if inv else -1).flatten()


def _cycle_blocks(idx: np.ndarray, n: int, faces: Tuple[Face, Face, Face, Face]) -> None:
    """Whole-face 4-cycle: faces[0] <- faces[1] <- faces[2] <- faces[3] <- faces[0]."""
    blocks = [idx[_face_slice(n, f)].copy() for f in faces]
    for dst, src in zip(faces, blocks[1:] + blocks[:1]):
        idx[_face_slice(n, dst)] = src


def _turn_strips(n: int, face: Face, num_in: int) -> List[np.ndarray]:
    """
    Strips moved by a turn, as four index arrays [A, B, C, D].

    A normal turn sends B to A, C to B, D to C and A to D; an inverted turn
    runs the cycle the other way. Element i of each strip lines up with
    element i of the others.
    """
    nn = n * n
    k = num_in
    i = np.arange(n)
    r = n - 1 - i

    if face == Face.UP:
        row = k * n + i
        return [nn + row, 2 * nn + row, 3 * nn + row, 4 * nn + row]
    if face == Face.DOWN:
        row = (n - 1 - k) * n + i
        return [nn + row, 4 * nn + row, 3 * nn + row, 2 * nn + row]
    if face == Face.LEFT:
        return [i * n + k,
                4 * nn + r * n + (n - 1 - k),
                5 * nn + i * n + k,
                2 * nn + i * n + k]
    if face == Face.RIGHT:
        col = n - 1 - k
        return [i * n + col,
                2 * nn + i * n + col,
                5 * nn + i * n + col,
                4 * nn + r * n + k]
    if face == Face.FRONT:
        return [(n - 1 - k) * n + i,
                nn + r * n + (n - 1 - k),
                5 * nn + k * n + r,
                3 * nn + i * n + k]
    # Face.BACK
    return [k * n + i,
            3 * nn + i * n + (n - 1 - k),
            5 * nn + (n - 1 - k) * n + r,
            nn + r * n + k]


def _freeze(idx: np.ndarray) -> np.ndarray:
    idx.setflags(write=False)
    return idx


@lru_cache(maxsize=None)
def turn_permutation(n: int, face: Face, inv: bool, num_in: int) -> np.ndarray:
    """
    Gather permutation for a face-based quarter turn.

    Args:
        n: Cube size
        face: Turned face
        inv: Counter clockwise if True
        num_in: Layer depth (0 = outer face)

    Returns:
        Read-only index array p such that the turned data is ``data[p]``
    """
    idx = np.arange(6 * n * n)

    if num_in == 0:
        _rotate_block(idx, n, face, inv)

    a, b, c, d = _turn_strips(n, face, num_in)
    va, vb, vc, vd = idx[a], idx[b], idx[c], idx[d]
    if inv:
        idx[a], idx[b], idx[c], idx[d] = vd, va, vb, vc
    else:
        idx[a], idx[b], idx[c], idx[d] = vb, vc, vd, va

    return _freeze(idx)


@lru_cache(maxsize=None)
def rotation_permutation(n: int, axis: Axis) -> np.ndarray:
    """
    Gather permutation for a positive whole-cube rotation about axis.

    Equivalent to turning every layer of that axis with pos_rot=True.
    """
    idx = np.arange(6 * n * n)

    if axis == Axis.X:
        _rotate_block(idx, n, Face.BACK, False)
        _rotate_block(idx, n, Face.BACK, False)
        _rotate_block(idx, n, Face.RIGHT, False)
        _rotate_block(idx, n, Face.LEFT, True)
        _cycle_blocks(idx, n, (Face.UP, Face.FRONT, Face.DOWN, Face.BACK))
        _rotate_block(idx, n, Face.BACK, False)
        _rotate_block(idx, n, Face.BACK, False)
    elif axis == Axis.Y:
        _rotate_block(idx, n, Face.BACK, False)
        _rotate_block(idx, n, Face.FRONT, True)
        _cycle_blocks(idx, n, (Face.UP, Face.RIGHT, Face.DOWN, Face.LEFT))
        for face in (Face.UP, Face.LEFT, Face.DOWN, Face.RIGHT):
            _rotate_block(idx, n, face, True)
    else:
        _rotate_block(idx, n, Face.DOWN, False)
        _rotate_block(idx, n, Face.UP, True)
        _cycle_blocks(idx, n, (Face.LEFT, Face.BACK, Face.RIGHT, Face.FRONT))

    return _freeze(idx)


@lru_cache(maxsize=None)
def orientation_permutations(n: int) -> Tuple[np.ndarray, ...]:
    """
    Every whole-cube orientation, in the order they are tried.

    Walks the 4x4x4 nest of X, Y, Z rotations (Z innermost) and keeps the
    first occurrence of each distinct orientation, which leaves 24.
    """
    px = rotation_permutation(n, Axis.X)
    py = rotation_permutation(n, Axis.Y)
    pz = rotation_permutation(n, Axis.Z)

    seen = set()
    ordered = []
    current = np.arange(6 * n * n)
    for _ in range(4):
        for _ in range(4):
            for _ in range(4):
                key = current.tobytes()
                if key not in seen:
                    seen.add(key)
                    ordered.append(_freeze(current.copy()))
                current = current[pz]
            current = current[py]
        current = current[px]
    return tuple(ordered)
