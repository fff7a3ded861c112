import logging
from collections.abc import Iterator, Sequence
from itertools import islice

from .placements import placements_for
from .types import Piece, Placement, Solution

logger = logging.getLogger(__name__)


def placement_sets(pieces: Sequence[Piece]) -> list[list[Placement]]:
    """Candidate placements per piece, in solver order.

    Symmetry breaking: the first piece is only translated, never rotated, so
    solutions that differ by a rotation of the whole cube are found once.
    """
    if not pieces:
        raise ValueError("pieces is empty")
    sets = [placements_for(p, is_first=(k == 0)) for k, p in enumerate(pieces)]
    for p, candidates in zip(pieces, sets, strict=True):
        logger.debug("piece %s: %d placements", p.name, len(candidates))
    return sets


def iter_solutions(
    placement_sets: Sequence[Sequence[Placement]],
) -> Iterator[Solution]:
    """Yield every non-overlapping assignment of one placement per piece.

    Depth-first over the pieces in the given order, trying candidates in the
    given order; a candidate is admissible when its mask does not intersect
    the cells filled so far.
    """
    if not placement_sets:
        raise ValueError("placement_sets is empty")

    n = len(placement_sets)
    partial: list[Placement] = []

    def _search(occupied: int) -> Iterator[Solution]:
        depth = len(partial)
        if depth == n:
            yield Solution(tuple(partial))
            return
        for candidate in placement_sets[depth]:
            if candidate.mask & occupied:
                continue
            partial.append(candidate)
            try:
                yield from _search(occupied | candidate.mask)
            finally:
                partial.pop()

    yield from _search(0)


def solve(
    placement_sets: Sequence[Sequence[Placement]],
    *,
    max_solutions: int | None = None,
) -> list[Solution]:
    """Return all solutions (or the first `max_solutions`) in search order."""
    if max_solutions is not None and max_solutions < 0:
        raise ValueError("max_solutions must be >= 0")
    sols = list(islice(iter_solutions(placement_sets), max_solutions))
    logger.info("found %d solutions", len(sols))
    return sols
