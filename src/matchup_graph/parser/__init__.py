"""Dataset loading and the graph data model."""

from matchup_graph.parser.loader import load_dataset, load_dataset_file
from matchup_graph.parser.model import Dataset, Edge, EdgeFilter, Game, Subgraph, Team

__all__ = [
    "Dataset",
    "Edge",
    "EdgeFilter",
    "Game",
    "Subgraph",
    "Team",
    "load_dataset",
    "load_dataset_file",
]
