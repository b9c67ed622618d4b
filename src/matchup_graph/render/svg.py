"""SVG generation for comparison graphs using drawsvg."""

from __future__ import annotations

import math

import drawsvg as draw

from matchup_graph.layout.engine import LayoutResult
from matchup_graph.parser.model import Edge, split_edge_key
from matchup_graph.render.constants import (
    CANVAS_PADDING,
    CONFERENCE_COLORS,
    DEFAULT_EDGE_COLOR,
    EDGE_LABEL_FONT_SIZE,
    EDGE_LABEL_OPACITY,
    EDGE_WIDTH_LEVERAGE_SCALE,
    EMPTY_HEIGHT,
    EMPTY_WIDTH,
    LABEL_OFFSET,
    LEGEND_GAP,
    OTHER_CONFERENCE_COLOR,
    TITLE_Y,
)
from matchup_graph.render.legend import (
    compute_legend_dimensions,
    degree_color,
    render_legend,
)
from matchup_graph.render.style import Theme


def render_svg(
    result: LayoutResult,
    theme: Theme,
    labels: dict[str, str] | None = None,
    title: str = "",
    width: int | None = None,
    height: int | None = None,
    display_degree: float | None = None,
    padding: float = CANVAS_PADDING,
    conferences: dict[str, str | None] | None = None,
    edges: dict[str, Edge] | None = None,
) -> str:
    """Render a computed layout to an SVG string.

    ``display_degree`` hides nodes beyond the bound without moving the rest.
    When ``conferences`` (team_id -> conference id) is given, nodes are
    filled by conference; endpoints keep the theme's endpoint fill. When
    ``edges`` (the edge universe keyed by edge key) is given, edge widths
    scale with summed leverage and each edge is labelled with its game
    count and mean leverage.
    """
    labels = labels or {}
    if result.is_empty:
        return _render_empty(result, theme, labels, width, height)

    # A display bound hiding every node still draws the full, blank canvas
    view = result.visible(display_degree)
    positions = view.positions

    # Bounds come from the full layout so hiding nodes never shifts the canvas
    all_x = [x for x, _ in result.positions.values()]
    all_y = [y for _, y in result.positions.values()]
    min_y = min(all_y) - padding
    shift_y = -min_y + (TITLE_Y + padding / 2 if title else padding / 2)

    edge_degrees = sorted(
        {d for d in (result.edge_degree(k) for k in view.edges) if d is not None}
    )
    legend_w, legend_h = compute_legend_dimensions(edge_degrees, theme)

    legend_y = shift_y + max(all_y) + padding / 2 + LEGEND_GAP
    auto_width = max(max(all_x) + padding * 2, legend_w + padding * 2)
    auto_height = legend_y + legend_h + padding / 2

    svg_width = width or int(auto_width)
    svg_height = height or int(auto_height)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if title:
        d.append(draw.Text(
            title,
            theme.title_font_size,
            padding, TITLE_Y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    shifted = {nid: (x, y + shift_y) for nid, (x, y) in positions.items()}

    _render_edges(d, result, view.edges, shifted, theme, edges)
    _render_nodes(d, result, shifted, theme, conferences)
    _render_labels(d, shifted, labels, theme)

    render_legend(d, edge_degrees, theme, padding, legend_y)

    return d.as_svg()


def _render_empty(
    result: LayoutResult,
    theme: Theme,
    labels: dict[str, str],
    width: int | None,
    height: int | None,
) -> str:
    """Explicit "no connection" state for an empty result."""
    sub = result.subgraph
    svg_width = width or EMPTY_WIDTH
    svg_height = height or EMPTY_HEIGHT
    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))
    message = (
        f"No connection between {labels.get(sub.source, sub.source)} and "
        f"{labels.get(sub.destination, sub.destination)} "
        f"within {sub.max_degree} degrees"
    )
    d.append(draw.Text(
        message,
        theme.label_font_size,
        svg_width / 2, svg_height / 2,
        fill=theme.message_color,
        font_family=theme.label_font_family,
        text_anchor="middle",
        dominant_baseline="central",
    ))
    return d.as_svg()


def conference_color(conference: str | None) -> str:
    """Node fill for a conference id, falling back to the "other" colour."""
    if not conference:
        return OTHER_CONFERENCE_COLOR
    return CONFERENCE_COLORS.get(conference, OTHER_CONFERENCE_COLOR)


def edge_width_scale(edge: Edge) -> float:
    """Stroke width multiplier: log2 of summed leverage, never below 1."""
    return max(1.0, math.log2(1 + edge.total_leverage * EDGE_WIDTH_LEVERAGE_SCALE))


def edge_label(edge: Edge) -> str:
    """Game count, with the mean leverage when there is any."""
    if edge.mean_leverage > 0:
        return f"{len(edge.games)} (lev: {edge.mean_leverage:.2f})"
    return f"{len(edge.games)}"


def _render_edges(
    d: draw.Drawing,
    result: LayoutResult,
    keys: frozenset[str],
    positions: dict[str, tuple[float, float]],
    theme: Theme,
    edges: dict[str, Edge] | None,
) -> None:
    """Draw edges behind nodes, canonical path edges last and thicker."""
    edges = edges or {}
    path_edges = result.subgraph.path_edges()
    ordered = sorted(keys, key=lambda k: (k in path_edges, k))
    for key in ordered:
        pair = split_edge_key(key)
        if pair is None:
            continue
        a, b = pair
        if a not in positions or b not in positions:
            continue
        x1, y1 = positions[a]
        x2, y2 = positions[b]
        color = degree_color(result.edge_degree(key)) or DEFAULT_EDGE_COLOR
        on_path = key in path_edges
        edge = edges.get(key)

        stroke_width = theme.edge_width
        if edge is not None:
            stroke_width *= edge_width_scale(edge)
        if on_path:
            stroke_width = max(stroke_width, theme.path_edge_width)

        d.append(draw.Line(
            x1, y1, x2, y2,
            stroke=color,
            stroke_width=stroke_width,
            stroke_opacity=1.0 if on_path else 0.7,
            stroke_linecap="round",
        ))
        if edge is not None and edge.games:
            d.append(draw.Text(
                edge_label(edge),
                EDGE_LABEL_FONT_SIZE,
                (x1 + x2) / 2, (y1 + y2) / 2 - stroke_width,
                fill=theme.label_color,
                fill_opacity=EDGE_LABEL_OPACITY,
                font_family=theme.label_font_family,
                text_anchor="middle",
            ))


def _render_nodes(
    d: draw.Drawing,
    result: LayoutResult,
    positions: dict[str, tuple[float, float]],
    theme: Theme,
    conferences: dict[str, str | None] | None,
) -> None:
    endpoints = {result.subgraph.source, result.subgraph.destination}
    for nid in sorted(positions):
        x, y = positions[nid]
        is_bridge = result.degrees.get(nid, 0.0) % 1 != 0
        if nid in endpoints and theme.endpoint_fill:
            fill = theme.endpoint_fill
        elif conferences is not None:
            fill = conference_color(conferences.get(nid))
        else:
            fill = theme.node_fill
        kwargs = {}
        if is_bridge:
            kwargs["stroke_dasharray"] = theme.bridge_stroke_dasharray
        d.append(draw.Circle(
            x, y, theme.node_radius,
            fill=fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
            **kwargs,
        ))


def _render_labels(
    d: draw.Drawing,
    positions: dict[str, tuple[float, float]],
    labels: dict[str, str],
    theme: Theme,
) -> None:
    for nid in sorted(positions):
        x, y = positions[nid]
        d.append(draw.Text(
            labels.get(nid, nid),
            theme.label_font_size,
            x, y - LABEL_OFFSET,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
        ))
