import itertools

import numpy as np

from .coords import (
    CELLS,
    SIZE,
    centered_from_index,
    index_from_centered,
    index_from_vector,
    indices,
    vector_from_index,
)
from .types import Transform


def shift(axis: int) -> Transform:
    """Unit translation along ``axis``, wrapping modulo 4 on that axis."""
    if axis not in (0, 1, 2):
        raise ValueError(f"axis must be 0, 1 or 2, got {axis}")
    out: list[int] = []
    for i in range(CELLS):
        v = list(vector_from_index(i))
        v[axis] = (v[axis] + 1) % SIZE
        out.append(index_from_vector(*v))
    return Transform(tuple(out))


def rotation(matrix: np.ndarray) -> Transform:
    """Index permutation obtained by applying ``matrix`` to centered coordinates."""
    m = np.asarray(matrix, dtype=int)
    if m.shape != (3, 3):
        raise ValueError(f"rotation matrix must be 3x3, got shape {m.shape}")
    out: list[int] = []
    for i in range(CELLS):
        cx, cy, cz = (int(c) for c in m @ np.array(centered_from_index(i)))
        out.append(index_from_centered(cx, cy, cz))
    return Transform(tuple(out))


def rotation_matrices() -> list[np.ndarray]:
    """The 6 x 4 = 24 proper rotations of the cube.

    Column 0 (image of e1) is any signed unit vector, column 1 (image of e2)
    a signed unit vector along another axis and column 2 their cross product,
    so every matrix has determinant +1. The identity comes first.
    """
    units = [
        sign * np.eye(3, dtype=int)[axis]
        for axis, sign in itertools.product(range(3), (1, -1))
    ]
    out: list[np.ndarray] = []
    for u, v in itertools.product(units, units):
        if np.dot(u, v) != 0:
            continue
        out.append(np.column_stack([u, v, np.cross(u, v)]))
    return out


def apply(mask: int, transform: Transform) -> int:
    out = 0
    for i in indices(mask):
        out |= 1 << transform.map[i]
    return out


def compose(a: Transform, b: Transform) -> Transform:
    """``a`` after ``b``."""
    return Transform(tuple(a.map[j] for j in b.map))


IDENTITY = Transform(tuple(range(CELLS)))

X = shift(0)
Y = shift(1)
Z = shift(2)

ROTATIONS: tuple[Transform, ...] = tuple(
    rotation(m) for m in rotation_matrices()
)
assert len(ROTATIONS) == 24
