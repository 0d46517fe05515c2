"""CLI for form-layout."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from form_layout import __version__
from form_layout.errors import LayoutError
from form_layout.layout.boxes import compute_boxes
from form_layout.layout.constants import EDGE_X, EDGE_Y, ROW_EDGE_Y
from form_layout.layout.geometry import Point, ZoneConfig
from form_layout.layout.manager import PointerEvent, handle_delete, handle_drop
from form_layout.render import render_svg
from form_layout.schema.document import load_canvas, save_canvas
from form_layout.schema.model import Canvas, RowGroup
from form_layout.schema.properties import ComponentType
from form_layout.themes import THEMES


def _parse_fraction(ctx: click.Context, param: click.Parameter, value: str) -> tuple[float, float]:
    try:
        x_str, y_str = value.split(",")
        return float(x_str), float(y_str)
    except ValueError:
        raise click.BadParameter("expected two numbers like 0.9,0.5") from None


def _load(path: Path) -> Canvas:
    try:
        return load_canvas(path)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions to stderr.")
def cli(verbose: bool) -> None:
    """form-layout: arrange form fields on a single-column canvas."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@cli.command()
@click.argument("canvas_file", type=click.Path(exists=True, path_type=Path))
@click.option("--new", "new_type", type=click.Choice([c.value for c in ComponentType]),
              default=None, help="Drop a new field of this type from the palette.")
@click.option("--move", "move_id", default=None,
              help="Drop an existing field or row group (by id).")
@click.option("--target", "target_id", default=None,
              help="Id of the node dropped on. Omit to append to the end.")
@click.option("--at", "at", default="0.5,0.5", callback=_parse_fraction,
              help="Pointer position as fractions of the target box (default: 0.5,0.5)")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON path. Defaults to overwriting the input.")
@click.option("--edge-x", type=float, default=EDGE_X,
              help=f"Left/right zone width fraction (default: {EDGE_X})")
@click.option("--edge-y", type=float, default=EDGE_Y,
              help=f"Top/bottom zone fraction on fields (default: {EDGE_Y})")
@click.option("--row-edge-y", type=float, default=ROW_EDGE_Y,
              help=f"Top/bottom zone fraction on rows (default: {ROW_EDGE_Y})")
def drop(
    canvas_file: Path,
    new_type: str | None,
    move_id: str | None,
    target_id: str | None,
    at: tuple[float, float],
    output: Path | None,
    edge_x: float,
    edge_y: float,
    row_edge_y: float,
) -> None:
    """Drop a palette item or an existing node onto a canvas."""
    if (new_type is None) == (move_id is None):
        raise click.UsageError("Pass exactly one of --new or --move.")
    try:
        zones = ZoneConfig(edge_x=edge_x, edge_y=edge_y, row_edge_y=row_edge_y)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None

    canvas = _load(canvas_file)
    if new_type is not None:
        payload = {"source": "palette", "componentType": new_type}
    else:
        payload = {"source": "canvas", "id": move_id}

    # Pointer is given relative to the target's wireframe box
    bounds = compute_boxes(canvas).get(target_id) if target_id else None
    point = bounds.point_at(*at) if bounds else Point(0.0, 0.0)
    pointer = PointerEvent(point.x, point.y, bounds)

    outcome = handle_drop(canvas, pointer, target_id, payload, zones=zones)
    if outcome.fault is not None:
        click.echo(f"Drop error: {outcome.fault}", err=True)
        raise SystemExit(1)
    if outcome.rejection is not None:
        message = outcome.message or "pointer is outside the target"
        click.echo(f"Rejected ({outcome.rejection.value}): {message}", err=True)
        raise SystemExit(2)

    if output is None:
        output = canvas_file
    save_canvas(outcome.canvas, output)
    click.echo(f"Placed {outcome.placed_id} ({outcome.intent.value}) -> {output}")


@cli.command()
@click.argument("canvas_file", type=click.Path(exists=True, path_type=Path))
@click.argument("node_id")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON path. Defaults to overwriting the input.")
def delete(canvas_file: Path, node_id: str, output: Path | None) -> None:
    """Delete a field or row group, dissolving rows left with one field."""
    canvas = _load(canvas_file)
    try:
        result = handle_delete(canvas, node_id)
    except LayoutError as e:
        click.echo(f"Delete error: {e}", err=True)
        raise SystemExit(1)

    if output is None:
        output = canvas_file
    save_canvas(result, output)
    click.echo(f"Deleted {node_id} -> {output}")


@cli.command()
@click.argument("canvas_file", type=click.Path(exists=True, path_type=Path))
def validate(canvas_file: Path) -> None:
    """Validate a canvas document."""
    canvas = _load(canvas_file)
    click.echo(f"Valid: {len(canvas)} nodes, {canvas.field_count()} fields, "
               f"{len(canvas.row_groups())} row groups")


@cli.command()
@click.argument("canvas_file", type=click.Path(exists=True, path_type=Path))
def info(canvas_file: Path) -> None:
    """Print canvas statistics and an outline of the column."""
    canvas = _load(canvas_file)
    click.echo(f"Nodes: {len(canvas)}")
    click.echo(f"Fields: {canvas.field_count()}")
    click.echo(f"Row groups: {len(canvas.row_groups())}")
    for i, node in enumerate(canvas.nodes):
        if isinstance(node, RowGroup):
            click.echo(f"  [{i}] row {node.id}")
            for child in node.children:
                click.echo(f"        - {child.id} ({child.component_type.value}) {child.label}")
        else:
            click.echo(f"  [{i}] {node.id} ({node.component_type.value}) {node.label}")


@cli.command()
@click.argument("canvas_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="wireframe",
              help="Visual theme (default: wireframe)")
@click.option("--width", type=float, default=None, help="Canvas column width in pixels")
@click.option("--title", default="", help="Title drawn above the canvas")
def render(
    canvas_file: Path,
    output: Path | None,
    theme: str,
    width: float | None,
    title: str,
) -> None:
    """Render a canvas to an SVG wireframe."""
    canvas = _load(canvas_file)
    kwargs = {"title": title}
    if width is not None:
        kwargs["width"] = width
    svg = render_svg(canvas, THEMES[theme], **kwargs)

    if output is None:
        output = canvas_file.with_suffix(".svg")

    output.write_text(svg if svg.endswith("\n") else svg + "\n")
    click.echo(f"Rendered {canvas.field_count()} fields, "
               f"{len(canvas.row_groups())} row groups -> {output}")
