from __future__ import annotations

import argparse
import logging
from itertools import islice
from pathlib import Path

from .api import load_catalog, pieces
from .placements import placements_for
from .plotting import format_placement, format_solution, plot_solution
from .solver import iter_solutions, placement_sets
from .types import check_catalog
from .yaml_io import write_catalog_yaml


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Enumerate all dissections of the 4x4x4 Tetris cube."
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML piece catalog (path or bundled asset name); built-in catalog if omitted",
    )
    parser.add_argument(
        "--write-template",
        action="store_true",
        help="Write the built-in catalog as YAML to --config and exit",
    )
    parser.add_argument(
        "--max-solutions",
        type=int,
        default=None,
        help="Stop after this many solutions (default: all)",
    )
    parser.add_argument(
        "--show-placements",
        action="store_true",
        help="Print every placement of every piece before solving",
    )
    parser.add_argument(
        "--html",
        type=str,
        default=None,
        help="Write a 3D plot of the first solution to this HTML file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)
    if args.max_solutions is not None and args.max_solutions < 0:
        parser.error("--max-solutions must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.write_template:
        if not args.config:
            parser.error("--write-template requires --config")
        write_catalog_yaml(args.config, pieces(), overwrite=True)
        print(f"Wrote template config to {args.config}")
        return

    if args.config:
        catalog = load_catalog(args.config)
    else:
        catalog = pieces()
        check_catalog(catalog)

    if args.show_placements:
        for k, piece in enumerate(catalog):
            for placement in placements_for(piece, is_first=(k == 0)):
                print(f"{piece.name} ({piece.color.name.lower()})")
                print(format_placement(placement))
                print()

    count = 0
    first = None
    solutions = iter_solutions(placement_sets(catalog))
    for solution in islice(solutions, args.max_solutions):
        if first is None:
            first = solution
        count += 1
        print(f"Solution {count}")
        print(format_solution(solution))
        print()
    print(f"{count} solutions")

    if args.html:
        if first is None:
            print("No solution to plot")
            return
        fig = plot_solution(catalog, first)
        fig.write_html(Path(args.html))
        print(f"Wrote {args.html}")


if __name__ == "__main__":
    main()
