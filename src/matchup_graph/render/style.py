"""Theme and style constants for comparison graph rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a comparison graph."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_radius: float
    node_stroke_width: float
    edge_width: float
    path_edge_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    message_color: str
    legend_background: str
    legend_text_color: str
    legend_font_size: float
    # Endpoint (source/destination) highlighting
    endpoint_fill: str = ""  # empty = inherit node_fill
    bridge_stroke_dasharray: str = "4,3"
