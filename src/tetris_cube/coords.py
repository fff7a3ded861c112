"""Coordinate conversions for the 4x4x4 volume.

Three representations are used:

- corner coordinates ``(x, y, z)`` with values 0..3,
- centered coordinates with values -3, -1, 1, 3 (the cube centers of an
  8x8x8 enclosure measured from its middle), so that integer rotation
  matrices map cells onto cells,
- a linear index 0..63, ``x + 4y + 16z``. An occupancy mask sets bit ``i``
  for every occupied index ``i``.
"""

from collections.abc import Iterable, Iterator

Voxel = tuple[int, int, int]

SIZE = 4
CELLS = SIZE**3
FULL_MASK = (1 << CELLS) - 1


def vector_from_index(index: int) -> Voxel:
    return (index & 3, (index >> 2) & 3, (index >> 4) & 3)


def index_from_vector(x: int, y: int, z: int) -> int:
    return x + (y << 2) + (z << 4)


def centered_from_index(index: int) -> Voxel:
    x, y, z = vector_from_index(index)
    return (2 * x - 3, 2 * y - 3, 2 * z - 3)


def index_from_centered(cx: int, cy: int, cz: int) -> int:
    return ((cx + 3) >> 1) + ((cy + 3) << 1) + ((cz + 3) << 3)


def mask_from_vectors(vectors: Iterable[Voxel]) -> int:
    mask = 0
    for x, y, z in vectors:
        mask |= 1 << index_from_vector(x, y, z)
    return mask


def indices(mask: int) -> Iterator[int]:
    """Yield the set bits of ``mask`` in ascending order."""
    for i in range(CELLS):
        if mask >> i & 1:
            yield i


def popcount(mask: int) -> int:
    return mask.bit_count()


def bounding_box(mask: int) -> Voxel:
    """Maximum corner coordinate reached along each axis."""
    mx = my = mz = 0
    for i in indices(mask):
        x, y, z = vector_from_index(i)
        mx, my, mz = max(mx, x), max(my, y), max(mz, z)
    return (mx, my, mz)
