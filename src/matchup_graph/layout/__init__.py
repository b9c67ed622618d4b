"""Layered layout engine for comparison subgraphs."""

from matchup_graph.layout.engine import (
    LayoutRequest,
    LayoutResult,
    LayoutSession,
    VisibleLayout,
    compute_layout,
)
from matchup_graph.layout.positions import Spacing
from matchup_graph.layout.subgraph import build_subgraph

__all__ = [
    "LayoutRequest",
    "LayoutResult",
    "LayoutSession",
    "Spacing",
    "VisibleLayout",
    "build_subgraph",
    "compute_layout",
]
