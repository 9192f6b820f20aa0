"""
CLI (Command Line Interface).

Quick terminal commands to inspect what the layout core produces, e.g.:

    schedulegen layout courses.json
    schedulegen layout courses.json --json
    schedulegen map courses.json
    schedulegen palette "cs 240" --type lab
    schedulegen term

Note:
- The CLI only reads course files; it never writes user data
- Drawing is left to whatever consumes the --json output
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schedulegen.buildings import resolve_markers
from schedulegen.colors import generate_palette, hsl_to_hex
from schedulegen.courses_io import load_courses
from schedulegen.layout import compute_layout
from schedulegen.model import SESSION_TYPES
from schedulegen.term import current_term, default_title, term_map_image
from schedulegen.viewport import fit_viewport, place_markers

console = Console()


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


def _cmd_layout(args: argparse.Namespace) -> int:
    """
    Print the weekly columns with the position/height of every session box.
    """
    courses = load_courses(args.file)
    layout = compute_layout(courses)

    if args.json:
        _print_json(dataclasses.asdict(layout))
        return 0

    console.print(f"[bold]{default_title()}[/bold] timetable")
    console.print(
        f"Day span: {layout.day_span_hours}h | base height: {layout.base_height:.1f}px/h "
        f"| columns: {', '.join(layout.columns)}"
    )

    table = Table(box=box.SIMPLE)
    for day in layout.boxes:
        table.add_column(day)

    max_len = max((len(b) for b in layout.boxes.values()), default=0)
    for r in range(max_len):
        row = []
        for day_boxes in layout.boxes.values():
            if r >= len(day_boxes):
                row.append("")
                continue
            b = day_boxes[r]
            row.append(
                f"[{hsl_to_hex(b.palette.primary_text)}]{escape(b.name_label)}[/]\n"
                f"{escape(b.room_label)}\n{b.time_label}\n"
                f"top {b.position:.0f}px, h {b.height:.0f}px"
            )
        table.add_row(*row)
    console.print(table)
    return 0


def _cmd_map(args: argparse.Namespace) -> int:
    """
    Print the map viewport and marker positions for the buildings in use.
    """
    courses = load_courses(args.file)
    markers = resolve_markers(courses)
    if not markers:
        console.print("No known buildings in any room.")
        return 0

    viewport = fit_viewport(markers)
    placed = place_markers(markers, viewport)

    if args.json:
        _print_json(
            {
                "image": term_map_image(current_term()),
                "viewport": dataclasses.asdict(viewport),
                "markers": [dataclasses.asdict(p) for p in placed],
            }
        )
        return 0

    console.print(
        f"Map {term_map_image(current_term())}: crop top={viewport.cropped_top:.1f}% "
        f"left={viewport.cropped_left:.1f}% scale={viewport.scale:.3f} "
        f"size={viewport.container_width:.0f}x{viewport.container_height:.0f}px"
    )
    table = Table(title="Buildings", box=box.SIMPLE)
    table.add_column("Code")
    table.add_column("x (px)", justify="right")
    table.add_column("y (px)", justify="right")
    for p in placed:
        table.add_row(f"[{p.marker.color}]{p.marker.code.lower()}[/]", f"{p.x:.1f}", f"{p.y:.1f}")
    console.print(table)
    return 0


def _cmd_palette(args: argparse.Namespace) -> int:
    name = (args.name or "").strip().lower()
    if not name:
        console.print("Please provide a course name.")
        return 1

    palette = generate_palette(name, args.type)
    console.print(f"background     {palette.background}")
    console.print(f"primary text   {palette.primary_text}")
    console.print(f"secondary text {palette.secondary_text}")
    return 0


def _cmd_term(args: argparse.Namespace) -> int:
    console.print(f"{current_term()} ({default_title()})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="schedulegen", description="Weekly timetable layout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_layout = sub.add_parser("layout", help="Lay out a week of courses")
    p_layout.add_argument("file", type=str, help="Course list JSON file")
    p_layout.add_argument("--json", action="store_true", help="Print the layout as JSON")

    p_map = sub.add_parser("map", help="Fit the campus map around used buildings")
    p_map.add_argument("file", type=str, help="Course list JSON file")
    p_map.add_argument("--json", action="store_true", help="Print the viewport as JSON")

    p_palette = sub.add_parser("palette", help="Show the colours of a course")
    p_palette.add_argument("name", type=str, help="Course name (e.g. 'cs 240')")
    p_palette.add_argument("--type", choices=SESSION_TYPES, default="lec", help="Session type")

    sub.add_parser("term", help="Show the current term")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "layout":
        raise SystemExit(_cmd_layout(args))
    if args.command == "map":
        raise SystemExit(_cmd_map(args))
    if args.command == "palette":
        raise SystemExit(_cmd_palette(args))
    if args.command == "term":
        raise SystemExit(_cmd_term(args))

    raise SystemExit(2)
