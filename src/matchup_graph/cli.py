"""CLI for matchup-graph."""

from __future__ import annotations

import json
from pathlib import Path

import click

from matchup_graph import __version__
from matchup_graph.layout import Spacing, compute_layout
from matchup_graph.layout.constants import (
    DEFAULT_MAX_DEGREE,
    HORIZONTAL_SPACING,
    MAX_DEGREE_LIMIT,
    VERTICAL_SPACING,
)
from matchup_graph.parser import Dataset, EdgeFilter, load_dataset_file
from matchup_graph.parser.model import ALL_CATEGORIES
from matchup_graph.render import render_svg
from matchup_graph.themes import THEMES


def _echo_event(event: str, data: dict) -> None:
    """Observer that streams pipeline events to stderr."""
    details = " ".join(f"{k}={v}" for k, v in data.items())
    click.echo(f"[{event}] {details}", err=True)


def _load(data_file: Path) -> Dataset:
    try:
        return load_dataset_file(data_file)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _check_team(dataset: Dataset, team_id: str) -> None:
    if team_id not in dataset.teams:
        click.echo(f"Error: unknown team '{team_id}'", err=True)
        raise SystemExit(1)


def _comparison_options(func):
    """Shared arguments and options for commands that build a comparison."""
    func = click.option("--min-leverage", type=float, default=0.0,
                        help="Drop games below this leverage (default: 0)")(func)
    func = click.option("--category", default=ALL_CATEGORIES,
                        help="Only use games of this type (default: ALL)")(func)
    func = click.option("-d", "--max-degree", type=click.IntRange(0, MAX_DEGREE_LIMIT),
                        default=DEFAULT_MAX_DEGREE,
                        help=f"Maximum path length in hops (default: {DEFAULT_MAX_DEGREE})")(func)
    func = click.argument("destination")(func)
    func = click.argument("source")(func)
    func = click.argument("data_file", type=click.Path(exists=True, path_type=Path))(func)
    return func


def _run(
    ctx: click.Context,
    data_file: Path,
    source: str,
    destination: str,
    max_degree: int,
    category: str,
    min_leverage: float,
    spacing: Spacing | None = None,
):
    dataset = _load(data_file)
    _check_team(dataset, source)
    _check_team(dataset, destination)
    observer = _echo_event if ctx.obj.get("verbose") else None
    edge_filter = EdgeFilter(category=category, min_leverage=min_leverage)
    try:
        subgraph = dataset.subgraph(source, destination, max_degree, edge_filter,
                                    observer=observer)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    result = compute_layout(subgraph, labels=dataset.labels(), spacing=spacing,
                            observer=observer)
    return dataset, result


def _format_degree(degree: float) -> str:
    return f"{degree:g}"


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Print layout pipeline events to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """matchup-graph: layered comparison diagrams between two teams."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("data_file", type=click.Path(exists=True, path_type=Path))
def info(data_file: Path) -> None:
    """Show information about a dataset."""
    dataset = _load(data_file)
    edges = dataset.edge_universe()
    click.echo(f"Teams: {len(dataset.teams)}")
    click.echo(f"Games: {len(dataset.games)}")
    click.echo(f"Connections: {len(edges)}")
    click.echo(f"Categories: {', '.join(dataset.categories()) or '(none)'}")


@cli.command()
@_comparison_options
@click.pass_context
def path(
    ctx: click.Context,
    data_file: Path,
    source: str,
    destination: str,
    max_degree: int,
    category: str,
    min_leverage: float,
) -> None:
    """Show the canonical path and layers between SOURCE and DESTINATION."""
    dataset, result = _run(ctx, data_file, source, destination, max_degree,
                           category, min_leverage)
    labels = dataset.labels()
    if result.is_empty:
        click.echo(f"No connection within {max_degree} degrees")
        return

    sub = result.subgraph
    click.echo("Path: " + " -> ".join(labels.get(n, n) for n in sub.shortest_path))
    click.echo(f"Hops: {sub.path_hops}")
    click.echo(f"Subgraph: {len(sub.nodes)} teams, {len(sub.edges)} connections")
    for degree, nodes in result.layers.items():
        names = ", ".join(labels.get(n, n) for n in nodes)
        click.echo(f"  [{_format_degree(degree)}] {names}")
    if result.crossings is not None:
        click.echo(f"Crossings: {result.crossings.initial_crossings} -> "
                   f"{result.crossings.final_crossings}")


@cli.command()
@_comparison_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write JSON here instead of stdout")
@click.pass_context
def layout(
    ctx: click.Context,
    data_file: Path,
    source: str,
    destination: str,
    max_degree: int,
    category: str,
    min_leverage: float,
    output: Path | None,
) -> None:
    """Compute node positions between SOURCE and DESTINATION as JSON."""
    _dataset, result = _run(ctx, data_file, source, destination, max_degree,
                            category, min_leverage)
    sub = result.subgraph
    doc = {
        "source": sub.source,
        "destination": sub.destination,
        "max_degree": sub.max_degree,
        "empty": result.is_empty,
        "shortest_path": list(sub.shortest_path),
        "edges": sorted(sub.edges),
        "degrees": {n: result.degrees[n] for n in sorted(result.degrees)},
        "positions": {
            n: {"x": x, "y": y} for n, (x, y) in sorted(result.positions.items())
        },
    }
    text = json.dumps(doc, indent=2)
    if output is None:
        click.echo(text)
        return
    output.write_text(text + "\n")
    click.echo(f"Laid out {len(result.positions)} teams -> {output}")


@cli.command()
@_comparison_options
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <source>_<destination>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--display-degree", type=float, default=None,
              help="Hide teams beyond this degree without re-running the layout")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--x-spacing", type=float, default=HORIZONTAL_SPACING,
              help=f"Horizontal spacing between layers (default: {HORIZONTAL_SPACING:g})")
@click.option("--y-spacing", type=float, default=VERTICAL_SPACING,
              help=f"Vertical spacing between teams (default: {VERTICAL_SPACING:g})")
@click.pass_context
def render(
    ctx: click.Context,
    data_file: Path,
    source: str,
    destination: str,
    max_degree: int,
    category: str,
    min_leverage: float,
    output: Path | None,
    theme: str,
    display_degree: float | None,
    width: int | None,
    height: int | None,
    x_spacing: float,
    y_spacing: float,
) -> None:
    """Render the comparison between SOURCE and DESTINATION to SVG."""
    spacing = Spacing(horizontal_spacing=x_spacing, vertical_spacing=y_spacing)
    dataset, result = _run(ctx, data_file, source, destination, max_degree,
                           category, min_leverage, spacing=spacing)
    labels = dataset.labels()
    title = f"{labels[source]} vs {labels[destination]}"
    edge_filter = EdgeFilter(category=category, min_leverage=min_leverage)
    svg = render_svg(result, THEMES[theme], labels=labels, title=title,
                     width=width, height=height, display_degree=display_degree,
                     conferences=dataset.conferences(),
                     edges=dataset.edge_universe(edge_filter))

    if output is None:
        output = Path(f"{source}_{destination}.svg")
    output.write_text(svg)

    if result.is_empty:
        click.echo(f"No connection within {max_degree} degrees -> {output}")
        return
    click.echo(f"Rendered {len(result.positions)} teams, "
               f"{len(result.subgraph.edges)} connections, "
               f"{len(result.layers)} layers -> {output}")
