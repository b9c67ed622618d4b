"""Render constants used across render modules.

Centralizes magic numbers from svg.py and legend.py.
Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 60.0
"""Default padding around the entire SVG canvas."""

TITLE_Y: float = 30.0
"""Baseline of the title text."""

EMPTY_WIDTH: int = 480
"""Canvas width used for the "no connection" message."""

EMPTY_HEIGHT: int = 120
"""Canvas height used for the "no connection" message."""

LEGEND_GAP: float = 30.0
"""Gap between content area and legend."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
DEFAULT_EDGE_COLOR: str = "#4562aa"
"""Edge colour when no degree is known."""

DEGREE_COLORS: tuple[str, ...] = (
    "#00FF00",  # 0: direct connection
    "#FFFF00",  # 1 hop
    "#FFA500",  # 2 hops
    "#FF4500",  # 3 hops
    "#FF6B35",  # 4 hops
    "#DC143C",  # 5 hops
    "#8B0000",  # 6 hops
)
"""Edge colour by degree, clamped to the last entry."""

EDGE_LABEL_FONT_SIZE: float = 10.0
"""Font size of the per-edge game count and leverage label."""

EDGE_LABEL_OPACITY: float = 0.8
"""Opacity of edge labels, so they don't compete with team labels."""

EDGE_WIDTH_LEVERAGE_SCALE: float = 4.0
"""Multiplier on summed leverage before the log2 width scaling."""

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------
CONFERENCE_COLORS: dict[str, str] = {
    # Power conferences
    "acc": "#D50032",
    "b1g": "#1E90FF",
    "b12": "#FF6A00",
    "sec": "#FDB827",
    # Group of 5
    "aac": "#0B4F6C",
    "cusa": "#004B8D",
    "mac": "#006747",
    "mwc": "#582C83",
    "sbc": "#F9A602",
    # Independents and other FBS
    "ind": "#4B4B4B",
    "wac": "#008272",
    # Historical
    "be": "#9CCC65",
    "pac12": "#1E88E5",
    "pac10": "#1E88E5",
    "pac8": "#1E88E5",
    "swc": "#FF6B35",
    "big8": "#FF9E00",
    "big7": "#FFA500",
    "big6": "#FFB84D",
    # Minor
    "ivy": "#0B4F1E",
    "southland": "#7CB342",
    "bw": "#26C6DA",
    "pcaa": "#4DD0E1",
    "aawu": "#AB47BC",
    "pcc": "#BA68C8",
    "swac": "#D4AF37",
    "mvc": "#8D6E63",
    "mviaa": "#A1887F",
    "skyline": "#78909C",
    "biaa": "#90A4AE",
    "western": "#BCAAA4",
    "southern": "#B0BEC5",
    "rmc": "#CFD8DC",
    "msac": "#E0E0E0",
    # Division placeholders
    "fbs": "#1f77b4",
    "fcs": "#ff7f0e",
}
"""Node fill by conference id."""

OTHER_CONFERENCE_COLOR: str = "#444444"
"""Node fill for teams with a missing or unlisted conference."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_OFFSET: float = 16.0
"""Vertical distance from node center to its label."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 22.0
"""Vertical height per degree entry in legend."""

LEGEND_PADDING: float = 12.0
"""Internal padding of legend box."""

LEGEND_SWATCH_WIDTH: float = 24.0
"""Width of color swatch line in legend."""

LEGEND_TEXT_GAP: float = 12.0
"""Gap between swatch end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 6
"""Corner radius for legend background rectangle."""
