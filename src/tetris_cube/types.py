from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .coords import (
    CELLS,
    FULL_MASK,
    SIZE,
    Voxel,
    indices,
    mask_from_vectors,
    popcount,
)


class Color(Enum):
    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Piece:
    """A colored polycube given by the corner coordinates of its cubes.

    Catalog pieces must also touch zero on every axis (see `is_canonical`);
    the orientation is arbitrary since rotations are applied separately.
    """

    name: str
    color: Color
    cubes: tuple[Voxel, ...]

    def __post_init__(self) -> None:
        if not self.cubes:
            raise ValueError(f"Piece {self.name}: cubes must be non-empty")
        for cube in self.cubes:
            if len(cube) != 3:
                raise ValueError(
                    f"Piece {self.name}: cube {cube!r} must have 3 coordinates"
                )
            if any(not 0 <= c < SIZE for c in cube):
                raise ValueError(
                    f"Piece {self.name}: cube {cube!r} outside 0..{SIZE - 1}"
                )
        if len(set(self.cubes)) != len(self.cubes):
            raise ValueError(f"Piece {self.name}: duplicate cubes")

    @property
    def mask(self) -> int:
        return mask_from_vectors(self.cubes)

    @property
    def size(self) -> int:
        return len(self.cubes)

    @property
    def is_canonical(self) -> bool:
        """True if the cubes reach coordinate 0 on every axis.

        Shifts only move a piece towards higher coordinates, so a piece that
        starts away from the origin misses placements.
        """
        return all(min(c[axis] for c in self.cubes) == 0 for axis in range(3))


def check_catalog(pieces: Sequence[Piece]) -> None:
    """Validate a piece catalog before solving."""
    if not pieces:
        raise ValueError("pieces is empty")
    names = [p.name for p in pieces]
    if len(set(names)) != len(names):
        raise ValueError("Piece names must be unique")
    for p in pieces:
        if not p.is_canonical:
            raise ValueError(
                f"Piece {p.name}: minimum coordinate must be 0 on every axis"
            )
    total = sum(p.size for p in pieces)
    if total != CELLS:
        raise ValueError(f"Pieces have {total} cubes, volume has {CELLS} cells")


@dataclass(frozen=True)
class Transform:
    """Permutation of the 64 cell indices."""

    map: tuple[int, ...]

    def __post_init__(self) -> None:
        if sorted(self.map) != list(range(CELLS)):
            raise ValueError(f"Transform map must be a permutation of 0..{CELLS - 1}")


@dataclass(frozen=True)
class Placement:
    """One position and orientation of a piece, identified by its mask alone."""

    mask: int
    piece: str = field(compare=False)

    @property
    def size(self) -> int:
        return popcount(self.mask)


@dataclass(frozen=True)
class Solution:
    placements: tuple[Placement, ...]

    @property
    def mask(self) -> int:
        out = 0
        for p in self.placements:
            out |= p.mask
        return out

    @property
    def is_complete(self) -> bool:
        total = sum(p.size for p in self.placements)
        return total == CELLS and self.mask == FULL_MASK

    def cell_owners(self) -> list[int]:
        """Index (in solver piece order) of the placement covering each cell.

        Cells not covered by any placement are -1.
        """
        owners = [-1] * CELLS
        for k, placement in enumerate(self.placements):
            for i in indices(placement.mask):
                assert owners[i] == -1, f"cell {i} covered twice"
                owners[i] = k
        return owners
