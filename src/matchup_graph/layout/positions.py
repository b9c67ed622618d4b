"""Coordinate assignment for ordered layers.

X is a pure function of degree, so bridge nodes at half-integer degrees
land strictly between their integer neighbours. Y spreads each layer
symmetrically around a vertical center in the minimized order, followed
by a bounded collision pass.
"""

from __future__ import annotations

__all__ = ["Spacing", "layer_spacing", "place_nodes", "resolve_collisions"]

from dataclasses import dataclass

from matchup_graph.layout.constants import (
    CANVAS_HEIGHT,
    COLLISION_PASSES,
    COLLISION_X_WINDOW,
    DENSE_LAYER_STEP,
    DENSE_LAYER_THRESHOLD,
    HORIZONTAL_SPACING,
    MARGIN,
    MIN_SEPARATION,
    MIN_VERTICAL_GAP,
    VERTICAL_SPACING,
)
from matchup_graph.parser.model import Observer


@dataclass(frozen=True)
class Spacing:
    """Spacing constants for coordinate assignment."""

    margin: float = MARGIN
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING
    center_y: float = CANVAS_HEIGHT / 2
    min_vertical_gap: float = MIN_VERTICAL_GAP
    dense_layer_threshold: int = DENSE_LAYER_THRESHOLD
    dense_layer_step: float = DENSE_LAYER_STEP
    collision_x_window: float = COLLISION_X_WINDOW
    min_separation: float = MIN_SEPARATION
    collision_passes: int = COLLISION_PASSES


def layer_spacing(count: int, spacing: Spacing) -> float:
    """Vertical step for a layer holding ``count`` nodes.

    Dense layers widen the step so they don't crowd.
    """
    step = max(spacing.vertical_spacing, spacing.min_vertical_gap)
    if count > spacing.dense_layer_threshold:
        extra = (count - spacing.dense_layer_threshold) * spacing.dense_layer_step
        step = max(spacing.vertical_spacing + extra, spacing.min_vertical_gap)
    return step


def resolve_collisions(
    positions: dict[str, tuple[float, float]],
    spacing: Spacing,
    observer: Observer | None = None,
) -> dict[str, tuple[float, float]]:
    """Push apart nodes that sit too close together.

    Nodes within ``collision_x_window`` horizontally and closer than
    ``min_separation`` vertically are separated by moving the lower node
    down. Runs a fixed number of passes rather than to convergence.
    """
    coords = dict(positions)
    for pass_idx in range(spacing.collision_passes):
        moved = 0
        items = sorted(coords, key=lambda n: (coords[n][0], coords[n][1], n))
        for i, a in enumerate(items):
            for b in items[i + 1 :]:
                ax, ay = coords[a]
                bx, by = coords[b]
                if abs(bx - ax) >= spacing.collision_x_window:
                    break
                if abs(by - ay) >= spacing.min_separation:
                    continue
                upper, lower = (a, b) if (ay, a) <= (by, b) else (b, a)
                lx = coords[lower][0]
                coords[lower] = (lx, coords[upper][1] + spacing.min_separation)
                moved += 1
        if observer is not None:
            observer("positions.collision", {"pass": pass_idx + 1, "moved": moved})
        if not moved:
            break
    return coords


def place_nodes(
    layers: dict[float, tuple[str, ...]],
    spacing: Spacing | None = None,
    observer: Observer | None = None,
) -> dict[str, tuple[float, float]]:
    """Map ordered layers to (x, y) coordinates.

    Args:
        layers: degree -> nodes in display order (top to bottom).
        spacing: Spacing constants; defaults to ``Spacing()``.
        observer: Optional ``observer(event, data)`` callback.

    Returns a dict mapping node_id -> (x, y).
    """
    spacing = spacing or Spacing()
    positions: dict[str, tuple[float, float]] = {}
    for degree in sorted(layers):
        nodes = layers[degree]
        if not nodes:
            continue
        x = spacing.margin + degree * spacing.horizontal_spacing
        if len(nodes) == 1:
            positions[nodes[0]] = (x, spacing.center_y)
            continue
        step = layer_spacing(len(nodes), spacing)
        start_y = spacing.center_y - (len(nodes) - 1) * step / 2
        for i, nid in enumerate(nodes):
            positions[nid] = (x, start_y + i * step)

    return resolve_collisions(positions, spacing, observer)
