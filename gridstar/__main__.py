"""Module entry point for `python -m gridstar`."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from gridstar.app import run_search
from gridstar.render.viewer import render_report
from gridstar.search.contracts import DiagonalCost
from gridstar.search.scenarios import DEMO_SCENARIO, Scenario, parse_cell


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find a shortest path on an obstacle grid with A*."
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Start cell as x,y (defaults to the demo start).",
    )
    parser.add_argument(
        "--goal",
        default=None,
        help="Goal cell as x,y (defaults to the demo goal).",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Grid width (defaults to the demo width).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Grid height (defaults to the demo height).",
    )
    parser.add_argument(
        "--wall",
        action="append",
        default=None,
        help="Blocked cell as x,y. Repeatable; replaces the demo walls.",
    )
    parser.add_argument(
        "--diagonal",
        choices=[mode.value for mode in DiagonalCost],
        default=None,
        help="Diagonal step cost: integer (same as straight) or exact (sqrt 2).",
    )
    parser.add_argument(
        "--no-corner-cutting",
        action="store_true",
        help="Disallow diagonal steps past a blocked orthogonal neighbour.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the search report as JSON instead of the map view.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        scenario = _build_scenario(args)
        grid, report = run_search(
            scenario,
            diagonal=args.diagonal,
            allow_corner_cutting=False if args.no_corner_cutting else None,
        )
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc

    console = Console()
    if args.json:
        console.print_json(report.model_dump_json())
        return
    console.print(render_report(grid, report))
    console.print(f"path length: {len(report.path)}")


def _build_scenario(args: argparse.Namespace) -> Scenario:
    walls = DEMO_SCENARIO.walls
    if args.wall is not None:
        walls = tuple(parse_cell(raw) for raw in args.wall)
    return Scenario(
        width=args.width if args.width is not None else DEMO_SCENARIO.width,
        height=args.height if args.height is not None else DEMO_SCENARIO.height,
        start=parse_cell(args.start) if args.start else DEMO_SCENARIO.start,
        goal=parse_cell(args.goal) if args.goal else DEMO_SCENARIO.goal,
        walls=walls,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


if __name__ == "__main__":
    main()
