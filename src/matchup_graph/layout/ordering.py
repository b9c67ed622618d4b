"""In-layer vertical ordering by iterative median sweeps.

Layers are reordered to reduce edge crossings between numerically
adjacent layers. Each sweep sorts a layer by the median position of its
neighbours in the layer just placed; down-sweeps walk left to right and
up-sweeps right to left. The best ordering seen is kept, so crossings
never increase.
"""

from __future__ import annotations

__all__ = [
    "CrossingResult",
    "count_crossings",
    "count_layer_crossings",
    "median_position",
    "minimize_crossings",
    "order_by_median",
]

from collections.abc import Iterable
from dataclasses import dataclass

from matchup_graph.layout.constants import MAX_SWEEP_ITERATIONS, STALL_LIMIT
from matchup_graph.parser.model import Observer, split_edge_key

Layers = dict[float, tuple[str, ...]]


@dataclass(frozen=True)
class CrossingResult:
    """Outcome of crossing minimization."""

    layers: Layers
    initial_crossings: int
    final_crossings: int
    iterations: int


def _neighbour_map(edges: Iterable[str]) -> dict[str, set[str]]:
    """Adjacency from edge keys, skipping malformed keys."""
    adj: dict[str, set[str]] = {}
    for key in edges:
        pair = split_edge_key(key)
        if pair is None:
            continue
        a, b = pair
        adj.setdefault(a, set()).add(b)
        adj.setdefault(b, set()).add(a)
    return adj


def count_layer_crossings(
    upper: tuple[str, ...], lower: tuple[str, ...], edges: Iterable[str]
) -> int:
    """Count inverted edge pairs between two ordered layers."""
    upper_pos = {nid: i for i, nid in enumerate(upper)}
    lower_pos = {nid: i for i, nid in enumerate(lower)}
    segments: list[tuple[int, int]] = []
    for key in edges:
        pair = split_edge_key(key)
        if pair is None:
            continue
        a, b = pair
        if a in upper_pos and b in lower_pos:
            segments.append((upper_pos[a], lower_pos[b]))
        elif b in upper_pos and a in lower_pos:
            segments.append((upper_pos[b], lower_pos[a]))

    crossings = 0
    for i in range(len(segments)):
        a1, a2 = segments[i]
        for j in range(i + 1, len(segments)):
            b1, b2 = segments[j]
            if (a1 < b1 and a2 > b2) or (a1 > b1 and a2 < b2):
                crossings += 1
    return crossings


def count_crossings(layers: Layers, edges: Iterable[str]) -> int:
    """Total crossings over every pair of numerically adjacent layers."""
    edges = list(edges)
    degrees = sorted(layers)
    return sum(
        count_layer_crossings(layers[d1], layers[d2], edges)
        for d1, d2 in zip(degrees, degrees[1:])
    )


def median_position(
    node: str, adjacent: tuple[str, ...], neighbours: dict[str, set[str]]
) -> float | None:
    """Median index of the node's neighbours in an adjacent layer.

    Returns None when the node has no neighbour there.
    """
    positions = sorted(
        i for i, nid in enumerate(adjacent) if nid in neighbours.get(node, ())
    )
    if not positions:
        return None
    mid = len(positions) // 2
    if len(positions) % 2 == 0:
        return (positions[mid - 1] + positions[mid]) / 2
    return float(positions[mid])


def order_by_median(
    layer: tuple[str, ...],
    adjacent: tuple[str, ...],
    neighbours: dict[str, set[str]],
    labels: dict[str, str],
    on_path: set[str],
) -> tuple[str, ...]:
    """Sort a layer by neighbour median, unplaced nodes last.

    Ties prefer canonical path nodes, then label, then id.
    """

    def sort_key(nid: str) -> tuple:
        median = median_position(nid, adjacent, neighbours)
        return (
            median is None,
            median if median is not None else 0.0,
            nid not in on_path,
            labels.get(nid, nid),
            nid,
        )

    return tuple(sorted(layer, key=sort_key))


def _sweep(
    layers: Layers,
    neighbours: dict[str, set[str]],
    labels: dict[str, str],
    on_path: set[str],
) -> Layers:
    """One down-sweep followed by one up-sweep, returning new layers."""
    degrees = sorted(layers)
    ordered = dict(layers)
    for prev, cur in zip(degrees, degrees[1:]):
        ordered[cur] = order_by_median(ordered[cur], ordered[prev], neighbours, labels, on_path)
    for cur, nxt in reversed(list(zip(degrees, degrees[1:]))):
        ordered[cur] = order_by_median(ordered[cur], ordered[nxt], neighbours, labels, on_path)
    return ordered


def minimize_crossings(
    layers: Layers,
    edges: Iterable[str],
    labels: dict[str, str] | None = None,
    shortest_path: Iterable[str] = (),
    observer: Observer | None = None,
) -> CrossingResult:
    """Reorder nodes within layers to reduce crossings.

    Runs at most ``min(7, 2 * layer_count + 1)`` sweep iterations and
    stops once two consecutive iterations bring no reduction. The input
    mapping is left untouched.
    """
    edges = list(edges)
    labels = labels or {}
    on_path = set(shortest_path)
    neighbours = _neighbour_map(edges)

    max_iterations = min(MAX_SWEEP_ITERATIONS, 2 * len(layers) + 1)
    current = dict(layers)
    initial = count_crossings(current, edges)
    best, best_crossings = current, initial

    iteration = 0
    stalled = 0
    while iteration < max_iterations and best_crossings > 0:
        iteration += 1
        current = _sweep(current, neighbours, labels, on_path)
        crossings = count_crossings(current, edges)
        improved = crossings < best_crossings
        if improved:
            best, best_crossings = current, crossings
            stalled = 0
        else:
            stalled += 1
        if observer is not None:
            observer(
                "crossings.iteration",
                {"iteration": iteration, "crossings": crossings, "improved": improved},
            )
        if stalled >= STALL_LIMIT:
            break

    if observer is not None:
        observer(
            "crossings.done",
            {
                "initial": initial,
                "final": best_crossings,
                "iterations": iteration,
                "max_iterations": max_iterations,
            },
        )
    return CrossingResult(
        layers=best,
        initial_crossings=initial,
        final_crossings=best_crossings,
        iterations=iteration,
    )
