"""Layer assignment for comparison layouts (X-coordinate positioning).

Each node's layer ("degree") is its unweighted hop distance from the
source. The destination is pinned to the hop count of the canonical
weighted path, which may exceed its BFS distance. Nodes off the canonical
path that reach the destination in fewer hops are bridges and sit half a
layer further right, between their own layer and the next.
"""

from __future__ import annotations

__all__ = ["assign_layers", "group_layers", "find_bridges"]

import networkx as nx

from matchup_graph.layout.constants import BRIDGE_OFFSET
from matchup_graph.parser.model import Observer, Subgraph


def _subgraph_graph(subgraph: Subgraph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(sorted(subgraph.nodes))
    for node, neighbours in sorted(subgraph.adjacency().items()):
        for nb in sorted(neighbours):
            G.add_edge(node, nb)
    return G


def find_bridges(
    subgraph: Subgraph, hops: dict[str, int], G: nx.Graph
) -> dict[str, int]:
    """Return bridge_node -> BFS layer for nodes offering a shortcut.

    A bridge is off the canonical path, adjacent to the destination, and
    reaches it in fewer hops than the canonical path uses.
    """
    on_path = set(subgraph.shortest_path)
    dest = subgraph.destination
    path_hops = subgraph.path_hops
    bridges: dict[str, int] = {}
    if dest not in G:
        return bridges
    for node in sorted(G.neighbors(dest)):
        if node == subgraph.source or node in on_path or node not in hops:
            continue
        if hops[node] + 1 < path_hops:
            bridges[node] = hops[node]
    return bridges


def assign_layers(subgraph: Subgraph, observer: Observer | None = None) -> dict[str, float]:
    """Assign each node of the subgraph a (possibly fractional) degree.

    Returns a dict mapping node_id -> degree. The source is always 0 and
    the destination equals the canonical path's hop count. An empty
    subgraph yields an empty mapping.
    """
    if subgraph.is_empty:
        return {}

    # Direct-connection view: both endpoints share the first layer
    if subgraph.max_degree == 0:
        return {subgraph.source: 0.0, subgraph.destination: 0.0}

    G = _subgraph_graph(subgraph)
    hops: dict[str, int] = dict(nx.single_source_shortest_path_length(G, subgraph.source))

    degrees: dict[str, float] = {nid: float(d) for nid, d in hops.items()}
    degrees[subgraph.destination] = float(subgraph.path_hops)

    for node, layer in find_bridges(subgraph, hops, G).items():
        degrees[node] = layer + BRIDGE_OFFSET
        if observer is not None:
            observer(
                "layers.bridge",
                {
                    "node": node,
                    "layer": layer,
                    "degree": degrees[node],
                    "shortcut_hops": layer + 1,
                    "path_hops": subgraph.path_hops,
                },
            )

    if observer is not None:
        observer(
            "layers.assigned",
            {
                "layers": len(set(degrees.values())),
                "path_hops": subgraph.path_hops,
                "bfs_hops": hops.get(subgraph.destination),
            },
        )
    return degrees


def group_layers(
    degrees: dict[str, float],
    labels: dict[str, str] | None = None,
    shortest_path: tuple[str, ...] = (),
) -> dict[float, tuple[str, ...]]:
    """Group nodes into layers keyed by degree, in ascending degree order.

    Within a layer the initial order puts canonical path nodes first, then
    sorts by label and id.
    """
    labels = labels or {}
    on_path = set(shortest_path)
    buckets: dict[float, list[str]] = {}
    for nid, degree in degrees.items():
        buckets.setdefault(degree, []).append(nid)

    return {
        degree: tuple(
            sorted(
                buckets[degree],
                key=lambda n: (n not in on_path, labels.get(n, n), n),
            )
        )
        for degree in sorted(buckets)
    }
