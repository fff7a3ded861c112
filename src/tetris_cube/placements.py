from .coords import SIZE, bounding_box
from .transforms import ROTATIONS, X, Y, Z, apply
from .types import Piece, Placement


def all_shifts(piece: Piece) -> list[Placement]:
    """All translations of the piece's initial mask that stay inside the volume.

    Order: x offset outer, y middle, z inner.
    """
    mx, my, mz = bounding_box(piece.mask)
    placements: list[Placement] = []
    xbits = piece.mask
    for _ in range(SIZE - mx):
        ybits = xbits
        for _ in range(SIZE - my):
            zbits = ybits
            for _ in range(SIZE - mz):
                placements.append(Placement(zbits, piece.name))
                zbits = apply(zbits, Z)
            ybits = apply(ybits, Y)
        xbits = apply(xbits, X)
    return placements


def all_placements(piece: Piece) -> list[Placement]:
    """Every rotation of every shift, with duplicate masks removed.

    Pieces with internal symmetry reach the same mask through different
    rotations; the first occurrence wins so the order stays deterministic.
    """
    seen: dict[int, Placement] = {}
    for placement in all_shifts(piece):
        for rot in ROTATIONS:
            mask = apply(placement.mask, rot)
            if mask not in seen:
                seen[mask] = Placement(mask, piece.name)
    return list(seen.values())


def placements_for(piece: Piece, is_first: bool) -> list[Placement]:
    # Fixing the orientation of the first piece picks one representative of
    # every class of solutions related by a rotation of the whole cube.
    if is_first:
        return all_shifts(piece)
    return all_placements(piece)
