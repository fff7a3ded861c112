from collections.abc import Sequence
from pathlib import Path

import plotly.graph_objects as go

from . import placements as _placements
from . import solver as _solver
from .catalog import TETRIS_CUBE
from .plotting import plot_solution
from .types import Piece, Placement, Solution, check_catalog
from .yaml_io import load_catalog_yaml


def puzzles_assets_dir() -> Path:
    return Path(__file__).resolve().parent / "assets" / "puzzles"


def list_puzzle_assets() -> list[str]:
    """List available catalog YAML filenames under assets/puzzles."""

    d = puzzles_assets_dir()
    if not d.exists():
        return []
    return sorted(p.name for p in d.glob("*.yaml") if p.is_file())


def resolve_puzzle_asset(name: str) -> Path:
    """Resolve a catalog YAML within assets/puzzles by filename.

    Only allows selecting files directly under assets/puzzles (no path
    separators) to avoid arbitrary file access.
    """

    n = str(name or "").strip()
    if not n:
        raise ValueError("Puzzle name is empty")
    if "/" in n or "\\" in n or n.startswith("."):
        raise ValueError(f"Invalid puzzle name: {n!r}")
    if not n.lower().endswith(".yaml"):
        n = f"{n}.yaml"

    p = puzzles_assets_dir() / n
    if not p.exists():
        raise FileNotFoundError(f"Puzzle not found: {n}")
    return p


def load_catalog(path: str | Path) -> list[Piece]:
    """Load a catalog from a YAML path or a bundled asset name."""
    p = Path(path)
    if not p.exists() and len(p.parts) == 1:
        p = resolve_puzzle_asset(str(path))
    return load_catalog_yaml(p)


def pieces() -> list[Piece]:
    """The reference twelve-piece catalog, in solver order."""
    return list(TETRIS_CUBE)


def placements_for(piece: Piece, is_first: bool) -> list[Placement]:
    return _placements.placements_for(piece, is_first)


def solve(
    placement_sets: Sequence[Sequence[Placement]],
    *,
    max_solutions: int | None = None,
) -> list[Solution]:
    return _solver.solve(placement_sets, max_solutions=max_solutions)


def cell_owners(solution: Solution) -> list[int]:
    return solution.cell_owners()


def solve_catalog(
    catalog: Sequence[Piece],
    *,
    max_solutions: int | None = None,
) -> list[Solution]:
    """Validate a catalog, build its placement sets and solve it."""
    check_catalog(catalog)
    return solve(_solver.placement_sets(catalog), max_solutions=max_solutions)


def solve_and_plot(
    *,
    path: str | Path = "tetris_cube.yaml",
    max_solutions: int = 1,
    solution_index: int = 0,
) -> tuple[go.Figure, Solution]:
    """Solve a catalog and return (figure, solution)."""
    catalog = load_catalog(path)
    sols = solve_catalog(catalog, max_solutions=max_solutions)
    if not sols:
        raise RuntimeError("No cube solutions returned")
    i = max(0, min(solution_index, len(sols) - 1))
    sol = sols[i]
    return plot_solution(catalog, sol), sol
