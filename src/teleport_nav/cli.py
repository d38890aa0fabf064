# src/teleport_nav/cli.py
"""
teleport-path: run one teleport search over a YAML voxel world.

    teleport-path --world config/worlds/demo.yaml --start 0 64 0 --end 12 64 0

Exit code 0 when a path is found, 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import load_pathfinder_config
from .geometry import Position, distance
from .logging_config import configure_logging
from .pathfinder import PathfindingResult, TeleportPathfinder
from .telemetry import LoggingTelemetrySink
from .world import LineOfSightOracle, load_world


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Time-budgeted teleport pathfinding over a voxel world."
    )
    parser.add_argument("--world", required=True, type=Path, help="World YAML file")
    parser.add_argument(
        "--start", required=True, nargs=3, type=float, metavar=("X", "Y", "Z")
    )
    parser.add_argument(
        "--end", required=True, nargs=3, type=float, metavar=("X", "Y", "Z")
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.0,
        help="Squared goal distance tolerance (0 = exact cell)",
    )
    parser.add_argument(
        "--config", type=Path, help="Pathfinder YAML config (default: config/pathfinder.yaml)"
    )
    parser.add_argument("--budget-ms", type=float, help="Override the search budget")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def _path_table(path: List[Position]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("z", justify="right")
    table.add_column("hop", justify="right")

    prev: Optional[Position] = None
    for i, p in enumerate(path):
        hop = "-" if prev is None else f"{distance(prev, p):.2f}"
        table.add_row(str(i), f"{p.x:g}", f"{p.y:g}", f"{p.z:g}", hop)
        prev = p
    return table


def _summary_panel(result: PathfindingResult) -> Panel:
    table = Table.grid()
    table.add_column(justify="left")
    style = "green" if result.success else "red"
    table.add_row(f"[bold]Status:[/bold] [{style}]{result.status.value}[/{style}]")
    table.add_row(f"[bold]Hubs discovered:[/bold] {result.nodes_explored}")
    table.add_row(f"[bold]Expansions:[/bold] {result.expansions}")
    table.add_row(f"[bold]Elapsed:[/bold] {result.elapsed_ms} ms")
    table.add_row(f"[bold]Path length:[/bold] {len(result.path)}")
    return Panel(table, title="Search Summary", border_style="cyan")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    # without --config, config/pathfinder.yaml (or built-in defaults)
    config = load_pathfinder_config(args.config)
    if args.budget_ms is not None:
        config = replace(config, budget_ms=args.budget_ms)

    world = load_world(args.world)
    pathfinder = TeleportPathfinder(
        Position(*args.start),
        Position(*args.end),
        args.tolerance,
        oracle=LineOfSightOracle(world),
        config=config,
        telemetry=LoggingTelemetrySink(),
    )
    result = pathfinder.compute()

    console = Console()
    console.print(_summary_panel(result))
    if result.path:
        console.print(_path_table(result.path))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
