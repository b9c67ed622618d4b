"""Bounded comparison subgraph between two endpoints.

Keeps every node and edge lying on at least one simple path of at most
``max_degree`` hops from source to destination, and records the canonical
(minimum total weight) path used later to anchor layering and ordering.
"""

from __future__ import annotations

__all__ = ["build_subgraph", "weighted_shortest_path"]

from collections.abc import Iterable

import networkx as nx

from matchup_graph.parser.model import Edge, Observer, Subgraph, edge_key


def _build_graph(edges: Iterable[Edge]) -> nx.Graph:
    """Undirected weighted graph, built in key order for stable tie-breaking."""
    G = nx.Graph()
    for edge in sorted(edges, key=lambda e: e.key):
        G.add_edge(edge.a, edge.b, weight=edge.weight)
    return G


def weighted_shortest_path(G: nx.Graph, source: str, destination: str) -> list[str]:
    """Minimum-weight path by Dijkstra, or [] when unreachable."""
    try:
        return nx.dijkstra_path(G, source, destination, weight="weight")
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return []


def _path_weight(G: nx.Graph, path: list[str]) -> float:
    return sum(G[a][b]["weight"] for a, b in zip(path, path[1:]))


def _prune_to_bound(
    G: nx.Graph, source: str, destination: str, max_degree: int
) -> nx.Graph:
    """Drop nodes that cannot lie on any path of at most max_degree hops.

    A node n can only be on such a path if d(source, n) + d(n, destination)
    is within the bound, so removing the others never changes the result
    of the path enumeration.
    """
    from_source = nx.single_source_shortest_path_length(G, source, cutoff=max_degree)
    to_dest = nx.single_source_shortest_path_length(G, destination, cutoff=max_degree)
    keep = [
        n
        for n in from_source
        if n in to_dest and from_source[n] + to_dest[n] <= max_degree
    ]
    return G.subgraph(keep)


def build_subgraph(
    source: str,
    destination: str,
    max_degree: int,
    edges: Iterable[Edge],
    labels: dict[str, str] | None = None,
    observer: Observer | None = None,
) -> Subgraph:
    """Build the comparison subgraph for a source/destination pair.

    Args:
        source: Start endpoint id.
        destination: End endpoint id.
        max_degree: Maximum hop length of retained paths. 0 asks for the
            direct connection only.
        edges: The edge universe, already filtered by the edge predicate.
        labels: team_id -> label, used to break canonical path ties.
        observer: Optional ``observer(event, data)`` callback.

    Returns the Subgraph, or the empty sentinel when no path of at most
    ``max_degree`` hops exists.
    """
    if max_degree < 0:
        raise ValueError(f"max_degree must be >= 0, got {max_degree}")

    labels = labels or {}
    empty = Subgraph.empty(source, destination, max_degree)

    G = _build_graph(edges)
    if source == destination or source not in G or destination not in G:
        _notify(observer, "subgraph.empty", source, destination, max_degree)
        return empty

    if max_degree == 0:
        if not G.has_edge(source, destination):
            _notify(observer, "subgraph.empty", source, destination, max_degree)
            return empty
        subgraph = Subgraph(
            source=source,
            destination=destination,
            max_degree=max_degree,
            nodes=frozenset((source, destination)),
            edges=frozenset((edge_key(source, destination),)),
            shortest_path=(source, destination),
        )
        _notify_built(observer, subgraph)
        return subgraph

    canonical = weighted_shortest_path(G, source, destination)

    bounded = _prune_to_bound(G, source, destination, max_degree)
    nodes: set[str] = set()
    keys: set[str] = set()
    paths: list[list[str]] = []
    if source in bounded and destination in bounded:
        for path in nx.all_simple_paths(bounded, source, destination, cutoff=max_degree):
            paths.append(path)
            nodes.update(path)
            keys.update(edge_key(a, b) for a, b in zip(path, path[1:]))

    if not paths:
        _notify(observer, "subgraph.empty", source, destination, max_degree)
        return empty

    if len(canonical) - 1 > max_degree:
        # The global Dijkstra path is longer than the bound and would not
        # be drawn; fall back to the lightest bounded path.
        canonical = min(
            paths,
            key=lambda p: (
                _path_weight(G, p),
                len(p),
                [labels.get(n, n) for n in p],
                p,
            ),
        )

    subgraph = Subgraph(
        source=source,
        destination=destination,
        max_degree=max_degree,
        nodes=frozenset(nodes),
        edges=frozenset(keys),
        shortest_path=tuple(canonical),
    )
    _notify_built(observer, subgraph)
    return subgraph


def _notify(
    observer: Observer | None,
    event: str,
    source: str,
    destination: str,
    max_degree: int,
) -> None:
    if observer is not None:
        observer(
            event,
            {"source": source, "destination": destination, "max_degree": max_degree},
        )


def _notify_built(observer: Observer | None, subgraph: Subgraph) -> None:
    if observer is not None:
        observer(
            "subgraph.built",
            {
                "nodes": len(subgraph.nodes),
                "edges": len(subgraph.edges),
                "shortest_path": list(subgraph.shortest_path),
                "max_degree": subgraph.max_degree,
            },
        )
