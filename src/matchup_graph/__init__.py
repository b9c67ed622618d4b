"""matchup-graph: layered comparison diagrams for weighted matchup graphs."""

__version__ = "0.1.0"
