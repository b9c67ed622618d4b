"""Data model for matchup graphs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

EDGE_KEY_DELIMITER = "__"
ALL_CATEGORIES = "ALL"
MIN_LEVERAGE_FLOOR = 1e-6

Observer = Callable[[str, dict], None]
"""Pipeline event callback: ``observer(event, data)``."""


def edge_key(a: str, b: str) -> str:
    """Canonical key for the unordered pair (a, b)."""
    if b < a:
        a, b = b, a
    return f"{a}{EDGE_KEY_DELIMITER}{b}"


def split_edge_key(key: str) -> tuple[str, str] | None:
    """Split an edge key into its two ids, or None if it is malformed."""
    parts = key.split(EDGE_KEY_DELIMITER)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


@dataclass
class Team:
    """A node in the matchup graph."""

    id: str
    label: str
    conference: str | None = None


@dataclass
class Game:
    """A scheduled game between two teams."""

    id: str
    home: str
    away: str
    leverage: float = 0.0
    category: str = "UNKNOWN"
    date: str | None = None


@dataclass(frozen=True)
class EdgeFilter:
    """Predicate applied to games before they become edges."""

    category: str = ALL_CATEGORIES
    min_leverage: float = 0.0

    def accepts(self, game: Game) -> bool:
        if self.category != ALL_CATEGORIES and game.category != self.category:
            return False
        return game.leverage >= self.min_leverage


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted connection between two teams.

    One edge stands for every filtered game played by the pair. The
    weight is the inverse of the mean leverage, so more important
    connections are shorter.
    """

    a: str
    b: str
    games: tuple[Game, ...] = ()
    mean_leverage: float = 0.0

    @property
    def key(self) -> str:
        return edge_key(self.a, self.b)

    @property
    def weight(self) -> float:
        return 1.0 / max(MIN_LEVERAGE_FLOOR, self.mean_leverage)

    @property
    def total_leverage(self) -> float:
        return sum(g.leverage for g in self.games)


@dataclass(frozen=True)
class Subgraph:
    """Bounded comparison subgraph between two endpoints.

    An empty subgraph (no nodes, no edges, no path) is the valid
    negative result for "no connection within max_degree".
    """

    source: str
    destination: str
    max_degree: int
    nodes: frozenset[str] = frozenset()
    edges: frozenset[str] = frozenset()
    shortest_path: tuple[str, ...] = ()

    @classmethod
    def empty(cls, source: str, destination: str, max_degree: int) -> Subgraph:
        return cls(source=source, destination=destination, max_degree=max_degree)

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def path_hops(self) -> int:
        """Hop count of the canonical shortest path."""
        return max(len(self.shortest_path) - 1, 0)

    def path_edges(self) -> frozenset[str]:
        """Edge keys along the canonical shortest path."""
        return frozenset(
            edge_key(a, b) for a, b in zip(self.shortest_path, self.shortest_path[1:])
        )

    def adjacency(self) -> dict[str, set[str]]:
        """Neighbour sets for every node, skipping malformed edge keys."""
        adj: dict[str, set[str]] = {nid: set() for nid in self.nodes}
        for key in self.edges:
            pair = split_edge_key(key)
            if pair is None:
                continue
            a, b = pair
            if a in adj and b in adj:
                adj[a].add(b)
                adj[b].add(a)
        return adj


@dataclass
class Dataset:
    """Teams and games supplied by the data loader."""

    teams: dict[str, Team] = field(default_factory=dict)
    games: list[Game] = field(default_factory=list)

    def add_team(self, team: Team) -> None:
        self.teams[team.id] = team

    def add_game(self, game: Game) -> None:
        self.games.append(game)

    def labels(self) -> dict[str, str]:
        """Return team_id -> display label."""
        return {tid: team.label for tid, team in self.teams.items()}

    def conferences(self) -> dict[str, str | None]:
        """Return team_id -> conference id (None when unknown)."""
        return {tid: team.conference for tid, team in self.teams.items()}

    def categories(self) -> list[str]:
        return sorted({g.category for g in self.games})

    def edge_universe(self, edge_filter: EdgeFilter | None = None) -> dict[str, Edge]:
        """Aggregate filtered games into one edge per team pair."""
        edge_filter = edge_filter or EdgeFilter()
        grouped: dict[str, list[Game]] = {}
        for game in self.games:
            if game.home == game.away:
                continue
            if game.home not in self.teams or game.away not in self.teams:
                continue
            if not edge_filter.accepts(game):
                continue
            grouped.setdefault(edge_key(game.home, game.away), []).append(game)

        edges: dict[str, Edge] = {}
        for key in sorted(grouped):
            games = grouped[key]
            a, b = sorted((games[0].home, games[0].away))
            mean = sum(g.leverage for g in games) / len(games)
            edges[key] = Edge(a=a, b=b, games=tuple(games), mean_leverage=mean)
        return edges

    def subgraph(
        self,
        source: str,
        destination: str,
        max_degree: int,
        edge_filter: EdgeFilter | None = None,
        observer: Observer | None = None,
    ) -> Subgraph:
        """Build the bounded comparison subgraph under an edge filter."""
        from matchup_graph.layout.subgraph import build_subgraph

        return build_subgraph(
            source,
            destination,
            max_degree,
            self.edge_universe(edge_filter).values(),
            labels=self.labels(),
            observer=observer,
        )
