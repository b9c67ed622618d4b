"""SVG rendering of computed layouts."""

from matchup_graph.render.svg import render_svg

__all__ = ["render_svg"]
