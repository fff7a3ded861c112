from collections.abc import Sequence

import plotly.graph_objects as go

from .coords import SIZE, index_from_vector, indices, vector_from_index
from .types import Color, Piece, Placement, Solution

_OWNER_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Shades per catalog color, cycled for pieces sharing a color.
_COLOR_SHADES: dict[Color, list[str]] = {
    Color.RED: ["#EF553B", "#B82E1C", "#FF8A75", "#8C1D0F"],
    Color.BLUE: ["#636EFA", "#2F3BC4", "#9AA2FF", "#1B2590"],
    Color.YELLOW: ["#FECB52", "#D9A21E", "#FFE08F", "#A67A0C"],
}


def _format_layers(cell_char) -> str:
    """Four text lines, top row (y = 3) first.

    Each line shows the x-rows of the four z-layers side by side.
    """
    lines: list[str] = []
    for y in range(SIZE - 1, -1, -1):
        rows = [
            "".join(cell_char(index_from_vector(x, y, z)) for x in range(SIZE))
            for z in range(SIZE)
        ]
        lines.append(" ".join(rows))
    return "\n".join(lines)


def format_placement(placement: Placement) -> str:
    """Render a placement with X for occupied and _ for empty cells."""
    return _format_layers(lambda i: "X" if placement.mask >> i & 1 else "_")


def format_solution(solution: Solution) -> str:
    """Render a solution with the owning piece index (0-9, then A-Z) per cell.

    Uncovered cells are shown as '.'.
    """
    owners = solution.cell_owners()
    return _format_layers(
        lambda i: _OWNER_CHARS[owners[i]] if owners[i] >= 0 else "."
    )


def piece_colors(pieces: Sequence[Piece]) -> dict[str, str]:
    """Hex color per piece name, distinct within each catalog color."""
    used: dict[Color, int] = {}
    out: dict[str, str] = {}
    for p in pieces:
        shades = _COLOR_SHADES[p.color]
        n = used.get(p.color, 0)
        out[p.name] = shades[n % len(shades)]
        used[p.color] = n + 1
    return out


def _add_voxel_cube_to_mesh(
    *,
    x0: float,
    y0: float,
    z0: float,
    size: float,
    xs: list[float],
    ys: list[float],
    zs: list[float],
    ii: list[int],
    jj: list[int],
    kk: list[int],
) -> None:
    """Append a unit cube (12 triangles) to a growing Mesh3d buffer."""
    base = len(xs)
    x1, y1, z1 = x0 + size, y0 + size, z0 + size

    verts = [
        (x0, y0, z0),
        (x0, y1, z0),
        (x1, y1, z0),
        (x1, y0, z0),
        (x0, y0, z1),
        (x0, y1, z1),
        (x1, y1, z1),
        (x1, y0, z1),
    ]
    for x, y, z in verts:
        xs.append(x)
        ys.append(y)
        zs.append(z)

    # Same topology as the Plotly docs "Mesh Cube".
    i_loc = [7, 0, 0, 0, 4, 4, 6, 6, 4, 0, 3, 2]
    j_loc = [3, 4, 1, 2, 5, 6, 5, 2, 0, 1, 6, 3]
    k_loc = [0, 7, 2, 3, 6, 7, 1, 1, 5, 5, 7, 6]
    for a, b, c in zip(i_loc, j_loc, k_loc, strict=True):
        ii.append(base + a)
        jj.append(base + b)
        kk.append(base + c)


def plot_solution(
    pieces: Sequence[Piece], solution: Solution, *, title: str = "Cube solution"
) -> go.Figure:
    """Return a Plotly 3D figure of the solution, one voxel mesh per piece."""
    if len(pieces) != len(solution.placements):
        raise ValueError(
            f"Solution has {len(solution.placements)} placements for {len(pieces)} pieces"
        )
    colors = piece_colors(pieces)
    inset = 0.02  # tiny inset to reduce z-fighting between adjacent cubes

    data: list[object] = []
    for piece, placement in zip(pieces, solution.placements, strict=True):
        xs: list[float] = []
        ys: list[float] = []
        zs: list[float] = []
        ii: list[int] = []
        jj: list[int] = []
        kk: list[int] = []
        for i in indices(placement.mask):
            x, y, z = vector_from_index(i)
            _add_voxel_cube_to_mesh(
                x0=x + inset,
                y0=y + inset,
                z0=z + inset,
                size=1.0 - 2 * inset,
                xs=xs,
                ys=ys,
                zs=zs,
                ii=ii,
                jj=jj,
                kk=kk,
            )
        data.append(
            go.Mesh3d(
                x=xs,
                y=ys,
                z=zs,
                i=ii,
                j=jj,
                k=kk,
                color=colors[piece.name],
                opacity=1.0,
                flatshading=True,
                name=piece.name,
                hovertemplate=f"{piece.name} ({piece.color.name.lower()})<extra></extra>",
                showscale=False,
            )
        )

    fig = go.Figure(data=data)
    axis_range = [-0.25, SIZE + 0.25]
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=50, b=10),
        height=600,
        scene=dict(
            xaxis=dict(range=axis_range, dtick=1, title="x"),
            yaxis=dict(range=axis_range, dtick=1, title="y"),
            zaxis=dict(range=axis_range, dtick=1, title="z"),
            aspectmode="cube",
        ),
        showlegend=True,
    )
    return fig
