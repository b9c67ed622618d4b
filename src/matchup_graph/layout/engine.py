"""Layout coordinator: combines subgraph, layering, ordering, and coordinates.

Pipeline: bounded subgraph -> layer assignment -> crossing minimization
-> coordinate mapping. Every stage returns fresh values, nothing is
mutated in place, and display filtering never re-runs the pipeline.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from matchup_graph.layout.layers import assign_layers, group_layers
from matchup_graph.layout.ordering import CrossingResult, minimize_crossings
from matchup_graph.layout.positions import Spacing, place_nodes
from matchup_graph.parser.model import (
    Dataset,
    EdgeFilter,
    Observer,
    Subgraph,
    split_edge_key,
)


@dataclass(frozen=True)
class VisibleLayout:
    """The part of a computed layout shown under a display bound."""

    nodes: frozenset[str]
    edges: frozenset[str]
    positions: dict[str, tuple[float, float]]


@dataclass(frozen=True)
class LayoutResult:
    """Output of one full pipeline run."""

    subgraph: Subgraph
    degrees: dict[str, float] = field(default_factory=dict)
    layers: dict[float, tuple[str, ...]] = field(default_factory=dict)
    positions: dict[str, tuple[float, float]] = field(default_factory=dict)
    crossings: CrossingResult | None = None

    @property
    def is_empty(self) -> bool:
        return self.subgraph.is_empty

    def edge_degree(self, key: str) -> int | None:
        """Degree used to colour an edge: its lower endpoint's layer."""
        pair = split_edge_key(key)
        if pair is None or pair[0] not in self.degrees or pair[1] not in self.degrees:
            return None
        return int(math.floor(min(self.degrees[pair[0]], self.degrees[pair[1]])))

    def visible(self, display_degree: float | None = None) -> VisibleLayout:
        """Restrict the layout to nodes at or below ``display_degree``.

        Positions are reused as computed; nothing is laid out again.
        """
        if display_degree is None:
            nodes = frozenset(self.degrees)
        else:
            nodes = frozenset(n for n, d in self.degrees.items() if d <= display_degree)
        edges = set()
        for key in self.subgraph.edges:
            pair = split_edge_key(key)
            if pair is not None and pair[0] in nodes and pair[1] in nodes:
                edges.add(key)
        return VisibleLayout(
            nodes=nodes,
            edges=frozenset(edges),
            positions={n: self.positions[n] for n in nodes if n in self.positions},
        )


def compute_layout(
    subgraph: Subgraph,
    labels: dict[str, str] | None = None,
    spacing: Spacing | None = None,
    minimize: bool = True,
    observer: Observer | None = None,
) -> LayoutResult:
    """Compute layer assignment, ordering, and positions for a subgraph."""
    if subgraph.is_empty:
        return LayoutResult(subgraph=subgraph)

    labels = labels or {}
    degrees = assign_layers(subgraph, observer=observer)
    layers = group_layers(degrees, labels, subgraph.shortest_path)

    crossings = None
    if minimize:
        crossings = minimize_crossings(
            layers,
            subgraph.edges,
            labels,
            subgraph.shortest_path,
            observer=observer,
        )
        layers = crossings.layers

    positions = place_nodes(layers, spacing, observer=observer)
    if observer is not None:
        observer(
            "layout.computed",
            {"nodes": len(positions), "layers": len(layers)},
        )
    return LayoutResult(
        subgraph=subgraph,
        degrees=degrees,
        layers=layers,
        positions=positions,
        crossings=crossings,
    )


@dataclass(frozen=True)
class LayoutRequest:
    """A comparison request between two teams."""

    source: str
    destination: str
    max_degree: int
    edge_filter: EdgeFilter = EdgeFilter()
    display_degree: float | None = None

    @property
    def layout_key(self) -> tuple:
        """Fields that change the computed layout (display bound excluded)."""
        return (self.source, self.destination, self.max_degree, self.edge_filter)


class LayoutSession:
    """Caches the last layout and recomputes only on layout-relevant changes.

    Changing only ``display_degree`` between requests toggles visibility
    over the cached positions, keeping the drawing stable.
    """

    def __init__(
        self,
        dataset: Dataset,
        spacing: Spacing | None = None,
        observer: Observer | None = None,
    ) -> None:
        self.dataset = dataset
        self.spacing = spacing
        self.observer = observer
        self.recomputations = 0
        self._request: LayoutRequest | None = None
        self._result: LayoutResult | None = None

    @property
    def result(self) -> LayoutResult | None:
        return self._result

    def update(self, request: LayoutRequest) -> LayoutResult:
        """Apply a request, re-running the pipeline only when needed."""
        if (
            self._result is not None
            and self._request is not None
            and self._request.layout_key == request.layout_key
        ):
            self._request = request
            if self.observer is not None:
                self.observer("session.reused", {"display_degree": request.display_degree})
            return self._result

        subgraph = self.dataset.subgraph(
            request.source,
            request.destination,
            request.max_degree,
            request.edge_filter,
            observer=self.observer,
        )
        self._result = compute_layout(
            subgraph,
            labels=self.dataset.labels(),
            spacing=self.spacing,
            observer=self.observer,
        )
        self._request = request
        self.recomputations += 1
        return self._result

    def visible(self) -> VisibleLayout:
        """Visible part of the cached layout under the current display bound."""
        if self._result is None or self._request is None:
            raise RuntimeError("LayoutSession.visible() called before update()")
        return self._result.visible(self._request.display_degree)
