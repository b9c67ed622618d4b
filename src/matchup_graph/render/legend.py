"""Degree legend for comparison graph SVGs."""

from __future__ import annotations

import drawsvg as draw

from matchup_graph.render.constants import (
    DEGREE_COLORS,
    LEGEND_BORDER_RADIUS,
    LEGEND_CHAR_WIDTH_RATIO,
    LEGEND_LINE_HEIGHT,
    LEGEND_PADDING,
    LEGEND_SWATCH_WIDTH,
    LEGEND_TEXT_GAP,
)
from matchup_graph.render.style import Theme


def degree_color(degree: int | None) -> str | None:
    """Colour for an edge degree, clamped to the palette."""
    if degree is None:
        return None
    return DEGREE_COLORS[max(0, min(degree, len(DEGREE_COLORS) - 1))]


def degree_label(degree: int) -> str:
    if degree == 0:
        return "Degree 0 (from source)"
    return f"Degree {degree}"


def compute_legend_dimensions(degrees: list[int], theme: Theme) -> tuple[float, float]:
    """Compute the width and height of the legend without rendering it.

    Returns (0, 0) if there are no degrees to show.
    """
    if not degrees:
        return (0.0, 0.0)
    text_offset = LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP
    max_label_len = max(len(degree_label(d)) for d in degrees)
    char_width = theme.legend_font_size * LEGEND_CHAR_WIDTH_RATIO
    width = LEGEND_PADDING * 2 + text_offset + max_label_len * char_width
    height = LEGEND_PADDING * 2 + len(degrees) * LEGEND_LINE_HEIGHT
    return (width, height)


def render_legend(
    drawing: draw.Drawing,
    degrees: list[int],
    theme: Theme,
    x: float,
    y: float,
) -> None:
    """Render a legend mapping edge colours to degrees, drawing downward from (x, y)."""
    if not degrees:
        return

    legend_width, legend_height = compute_legend_dimensions(degrees, theme)
    drawing.append(
        draw.Rectangle(
            x,
            y,
            legend_width,
            legend_height,
            rx=LEGEND_BORDER_RADIUS,
            ry=LEGEND_BORDER_RADIUS,
            fill=theme.legend_background,
        )
    )

    for i, degree in enumerate(degrees):
        entry_y = y + LEGEND_PADDING + i * LEGEND_LINE_HEIGHT + LEGEND_LINE_HEIGHT / 2
        drawing.append(
            draw.Line(
                x + LEGEND_PADDING,
                entry_y,
                x + LEGEND_PADDING + LEGEND_SWATCH_WIDTH,
                entry_y,
                stroke=degree_color(degree),
                stroke_width=theme.edge_width * 1.5,
                stroke_linecap="round",
            )
        )
        drawing.append(
            draw.Text(
                degree_label(degree),
                theme.legend_font_size,
                x + LEGEND_PADDING + LEGEND_SWATCH_WIDTH + LEGEND_TEXT_GAP,
                entry_y,
                fill=theme.legend_text_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            )
        )
