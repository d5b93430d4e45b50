# src/cli/plan_path.py
"""
Run one grid search and show the result.

    python -m cli.plan_path --from 0,1 --to 2,1 --width 3 --height 3 \
        --stone 1,0 --stone 1,1 --stone 1,2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from env.loader import load_settings
from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger
from monitoring.logging_config import configure_logging
from nav.grid import CellKind, Coord, CostModel, PathGrid
from nav.pathfinder import PathfindingResult, find_path

logger = logging.getLogger(__name__)

_GLYPHS = {
    CellKind.FREE: (".", "dim"),
    CellKind.STONE: ("#", "bold white"),
    CellKind.BODY: ("o", "yellow"),
}


def parse_coord(text: str) -> Coord:
    """Parse "X,Y" into a coordinate tuple."""
    try:
        x_str, y_str = text.split(",")
        return (int(x_str), int(y_str))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A* route across a snake board, avoiding stones and the body."
    )
    parser.add_argument("--from", dest="start", type=parse_coord, required=True)
    parser.add_argument("--to", dest="goal", type=parse_coord, required=True)
    parser.add_argument("--width", type=int, help="Grid width (default from config)")
    parser.add_argument("--height", type=int, help="Grid height (default from config)")
    parser.add_argument(
        "--stone", type=parse_coord, action="append", default=[], help="Stone at X,Y"
    )
    parser.add_argument(
        "--body", type=parse_coord, action="append", default=[], help="Snake body at X,Y"
    )
    parser.add_argument(
        "--passable-stones",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Treat stones as prohibitive but crossable, like the body (default from config)",
    )
    parser.add_argument("--max-expansions", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="Settings YAML")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def render_grid(grid: PathGrid, start: Coord, goal: Coord, path: Sequence[Coord]) -> Text:
    """Character map of the grid with the route overlaid."""
    on_path = set(path)
    text = Text()
    for y in range(grid.height):
        for x in range(grid.width):
            coord = (x, y)
            if coord == start:
                text.append("S", style="bold green")
            elif coord == goal:
                text.append("G", style="bold red")
            elif coord in on_path:
                text.append("*", style="bold cyan")
            else:
                glyph, style = _GLYPHS[grid.cell_at(coord).kind]
                text.append(glyph, style=style)
        if y < grid.height - 1:
            text.append("\n")
    return text


def _summary(result: PathfindingResult) -> str:
    line = f"{result.status.value}: {len(result.path)} steps, cost {result.cost}"
    if result.crosses_obstacle:
        line += " (crosses an obstacle)"
    return line + f", {result.expansions} expansions"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.logging.level)
    logger.debug("Settings: %s", settings)

    bus = EventBus()
    events: Optional[JsonFileLogger] = None
    if settings.logging.events_path:
        events = JsonFileLogger(Path(settings.logging.events_path), bus)

    try:
        grid = PathGrid(
            width=args.width if args.width is not None else settings.grid.width,
            height=args.height if args.height is not None else settings.grid.height,
            stones=args.stone,
            snake_body=args.body,
            cost_model=CostModel(
                stones_passable=(
                    args.passable_stones
                    if args.passable_stones is not None
                    else settings.search.stones_passable
                )
            ),
        )
        max_expansions = (
            args.max_expansions
            if args.max_expansions is not None
            else settings.search.max_expansions
        )
        result = find_path(
            grid, args.start, args.goal, max_expansions=max_expansions, bus=bus
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    finally:
        if events is not None:
            events.close()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, sort_keys=True))
    else:
        console = Console()
        console.print(
            Panel(
                render_grid(grid, args.start, args.goal, result.path),
                title=f"{grid.width}x{grid.height}",
                expand=False,
            )
        )
        console.print(_summary(result))

    return 0


if __name__ == "__main__":
    sys.exit(main())
