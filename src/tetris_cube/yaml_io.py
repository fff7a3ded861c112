import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from .coords import Voxel
from .types import Color, Piece, check_catalog

logger = logging.getLogger(__name__)


def _coerce_cubes(values: object, *, label: str) -> tuple[Voxel, ...]:
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"{label} must be a list")
    if not values:
        raise ValueError(f"{label} must be non-empty")

    out: list[Voxel] = []
    for i, v in enumerate(values):
        if not isinstance(v, (list, tuple)) or len(v) != 3:
            raise ValueError(f"{label}[{i}] must be a list of 3 integers")
        coords: list[int] = []
        for c in v:
            if isinstance(c, bool) or not isinstance(c, int):
                raise TypeError(
                    f"{label}[{i}] must contain integers, got {type(c).__name__}"
                )
            coords.append(c)
        out.append((coords[0], coords[1], coords[2]))
    return tuple(out)


def _coerce_color(value: object, *, label: str) -> Color:
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise TypeError(f"{label} must be a string")
    s = value.strip().upper()
    try:
        return Color[s]
    except KeyError:
        names = ", ".join(c.name for c in Color)
        raise ValueError(f"{label} invalid color {value!r} (expected {names})") from None


def load_catalog_yaml(path: str | Path) -> list[Piece]:
    """Load a piece catalog from a YAML file, in file order."""
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("YAML root must be a mapping")

    pieces_node = raw.get("pieces")
    if not isinstance(pieces_node, list):
        raise ValueError("YAML must contain a list under key 'pieces'")

    pieces: list[Piece] = []
    for idx, item in enumerate(pieces_node):
        if not isinstance(item, dict):
            raise ValueError(f"pieces[{idx}] must be a mapping")
        name = item.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"pieces[{idx}].name must be a non-empty string")
        color = _coerce_color(item.get("color"), label=f"pieces[{idx}].color")
        cubes = _coerce_cubes(item.get("cubes"), label=f"pieces[{idx}].cubes")
        pieces.append(Piece(name=name, color=color, cubes=cubes))

    check_catalog(pieces)

    logger.debug("loaded %d pieces from %s", len(pieces), path)
    return pieces


def dump_catalog_yaml(pieces: Sequence[Piece]) -> str:
    """Construct a YAML document (as string) from a piece catalog."""
    doc = {
        "version": 1,
        "pieces": [
            {
                "name": p.name,
                "color": p.color.name,
                "cubes": [list(c) for c in p.cubes],
            }
            for p in pieces
        ],
    }
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=None)


def write_catalog_yaml(
    path: str | Path,
    pieces: Sequence[Piece],
    *,
    overwrite: bool = False,
) -> None:
    p = Path(path)
    if p.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {p}")
    p.write_text(dump_catalog_yaml(pieces), encoding="utf-8")
