import itertools

import pytest

from tetris_cube.catalog import TETRIS_CUBE
from tetris_cube.coords import CELLS, FULL_MASK, indices, popcount
from tetris_cube.placements import all_placements, all_shifts
from tetris_cube.solver import iter_solutions, placement_sets, solve
from tetris_cube.transforms import ROTATIONS, apply
from tetris_cube.types import Color, Piece, Placement


def _slab(name, xs):
    return Piece(
        name,
        Color.RED,
        tuple((x, y, z) for z in range(4) for y in range(4) for x in xs),
    )


def _bar(name):
    return Piece(
        name,
        Color.BLUE,
        tuple((x, y, z) for z in range(4) for y in range(2) for x in range(2)),
    )


SLAB_A = _slab("A", (0, 1))
SLAB_B = _slab("B", (2, 3))
BARS = [_bar(f"bar{i}") for i in range(4)]


def assert_complete(solution, n_pieces):
    masks = [p.mask for p in solution.placements]
    assert len(masks) == n_pieces
    for a, b in itertools.combinations(masks, 2):
        assert a & b == 0
    union = 0
    for m in masks:
        union |= m
    assert union == FULL_MASK
    assert solution.is_complete

    owners = solution.cell_owners()
    assert len(owners) == CELLS
    assert -1 not in owners
    for k, m in enumerate(masks):
        assert owners.count(k) == popcount(m)


def test_two_slabs():
    sets = [all_shifts(SLAB_A), all_placements(SLAB_B)]
    sols = solve(sets)

    assert sols[0].placements == (
        all_shifts(SLAB_A)[0],
        all_placements(SLAB_B)[0],
    )
    assert sols[0].placements[0].mask == SLAB_A.mask
    assert sols[0].placements[1].mask == SLAB_B.mask
    # A may also slide to x in {2, 3} with B rotated onto x in {0, 1}
    assert len(sols) == 2
    assert sols[1].placements[0].mask == SLAB_B.mask
    assert sols[1].placements[1].mask == SLAB_A.mask
    for s in sols:
        assert_complete(s, 2)


def test_four_bars():
    # 9 tilings of the cube by 2x2x4 bars; together they hold 12 vertical
    # bars the unrotated first bar can take, and the other three bars
    # are placed in 3! orders.
    sols = solve(placement_sets(BARS))
    assert len(sols) == 12 * 6
    assert len({tuple(p.mask for p in s.placements) for s in sols}) == len(sols)
    for s in sols:
        assert_complete(s, 4)
        assert [p.piece for p in s.placements] == ["bar0", "bar1", "bar2", "bar3"]


def test_solve_is_deterministic():
    first = solve(placement_sets(BARS))
    second = solve(placement_sets(BARS))
    assert [s.placements for s in first] == [s.placements for s in second]


def test_max_solutions_truncates_in_order():
    full = solve(placement_sets(BARS))
    assert solve(placement_sets(BARS), max_solutions=5) == full[:5]
    assert solve(placement_sets(BARS), max_solutions=0) == []


def test_no_solution_is_empty():
    stairs = Piece(
        "stairs",
        Color.YELLOW,
        tuple((x, y, 0) for x in range(4) for y in range(4))
        + tuple((x, y, z) for x in range(4) for y in range(2) for z in (1, 2)),
    )
    assert stairs.size == 32
    assert solve(placement_sets([SLAB_A, stairs])) == []


def test_search_state_is_restored_between_solutions():
    gen = iter_solutions(placement_sets(BARS))
    a = next(gen)
    b = next(gen)
    assert a != b
    gen.close()
    assert_complete(a, 4)
    assert_complete(b, 4)


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        placement_sets([])
    with pytest.raises(ValueError):
        solve([])


def test_catalog_placement_sets_break_symmetry():
    sets = placement_sets(TETRIS_CUBE)
    assert len(sets) == 12
    assert sets[0] == all_shifts(TETRIS_CUBE[0])
    for piece, candidates in zip(TETRIS_CUBE[1:], sets[1:]):
        assert candidates == all_placements(piece)


@pytest.mark.slow
def test_reference_catalog_is_solvable():
    sols = solve(placement_sets(TETRIS_CUBE), max_solutions=1)
    assert len(sols) == 1
    assert_complete(sols[0], 12)


def test_eight_cubes():
    # the unrotated first cube sits in one of 8 octants, the other seven
    # fill the remaining octants in any order
    cubes = [
        Piece(f"c{i}", Color.RED, tuple(itertools.product(range(2), repeat=3)))
        for i in range(8)
    ]
    assert len(solve(placement_sets(cubes))) == 8 * 5040


def _exact_cover(columns, rows, partial):
    """Dict-of-sets exact cover search, always branching on the tightest column."""
    if not columns:
        yield list(partial)
        return
    col = min(columns, key=lambda c: len(columns[c]))
    for row in sorted(columns[col]):
        partial.append(row)
        removed = _select(columns, rows, row)
        yield from _exact_cover(columns, rows, partial)
        _deselect(columns, rows, row, removed)
        partial.pop()


def _select(columns, rows, row):
    removed = []
    for j in rows[row]:
        for i in columns[j]:
            for k in rows[i]:
                if k != j:
                    columns[k].remove(i)
        removed.append(columns.pop(j))
    return removed


def _deselect(columns, rows, row, removed):
    for j in reversed(rows[row]):
        columns[j] = removed.pop()
        for i in columns[j]:
            for k in rows[i]:
                if k != j:
                    columns[k].add(i)


@pytest.fixture(scope="module")
def reference_tiling():
    """Masks of one tiling of the reference catalog, in catalog order.

    Found with a cell-first search over every placement of every piece, then
    turned as a whole so the first piece is only translated.
    """
    rows = {}
    for k, piece in enumerate(TETRIS_CUBE):
        for p in all_placements(piece):
            rows[(k, p.mask)] = [("piece", k)] + [("cell", i) for i in indices(p.mask)]
    columns = {("piece", k): set() for k in range(len(TETRIS_CUBE))}
    columns.update({("cell", i): set() for i in range(CELLS)})
    for row, cols in rows.items():
        for c in cols:
            columns[c].add(row)

    found = next(_exact_cover(columns, rows, []))
    masks = [mask for _, mask in sorted(found)]

    shifts = {p.mask for p in all_shifts(TETRIS_CUBE[0])}
    for rot in ROTATIONS:
        turned = [apply(m, rot) for m in masks]
        if turned[0] in shifts:
            return turned
    raise AssertionError("no rotation brings the first piece to a shift")


def test_reference_catalog_from_known_tiling(reference_tiling):
    # fix the first nine pieces, search the last three freely
    sets = [
        [Placement(mask, piece.name)]
        for piece, mask in zip(TETRIS_CUBE[:9], reference_tiling[:9])
    ]
    sets += [all_placements(piece) for piece in TETRIS_CUBE[9:]]
    for piece, mask in zip(TETRIS_CUBE[9:], reference_tiling[9:]):
        assert mask in {p.mask for p in all_placements(piece)}

    sols = solve(sets)
    assert sols
    for s in sols:
        assert_complete(s, 12)
    found = [tuple(p.mask for p in s.placements) for s in sols]
    assert tuple(reference_tiling) in found
