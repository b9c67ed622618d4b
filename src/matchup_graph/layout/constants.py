"""Layout constants used across layout modules.

Centralizes magic numbers from subgraph.py, ordering.py, and positions.py.
"""

# ---------------------------------------------------------------------------
# Comparison subgraph
# ---------------------------------------------------------------------------
DEFAULT_MAX_DEGREE: int = 3
"""Default hop bound between the two endpoints."""

MAX_DEGREE_LIMIT: int = 6
"""Largest hop bound offered by the CLI (path enumeration is exponential)."""

# ---------------------------------------------------------------------------
# Layering
# ---------------------------------------------------------------------------
BRIDGE_OFFSET: float = 0.5
"""Fractional offset added to a bridge node's BFS layer."""

# ---------------------------------------------------------------------------
# Crossing minimization
# ---------------------------------------------------------------------------
MAX_SWEEP_ITERATIONS: int = 7
"""Upper bound on down/up sweep iterations."""

STALL_LIMIT: int = 2
"""Stop after this many consecutive iterations without a reduction."""

# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------
MARGIN: float = 50.0
"""Left padding from canvas edge to the source layer."""

HORIZONTAL_SPACING: float = 220.0
"""Horizontal distance between integer layers."""

VERTICAL_SPACING: float = 50.0
"""Base vertical distance between nodes in one layer."""

CANVAS_HEIGHT: float = 600.0
"""Reference canvas height; layers are centered on half of it."""

NODE_RADIUS: float = 30.0
"""Node radius used to derive the minimum in-layer gap."""

MIN_VERTICAL_GAP: float = NODE_RADIUS * 2
"""Smallest vertical step between nodes in one layer."""

DENSE_LAYER_THRESHOLD: int = 4
"""Layers with more nodes than this get wider vertical spacing."""

DENSE_LAYER_STEP: float = 10.0
"""Extra vertical spacing per node beyond the dense threshold."""

COLLISION_X_WINDOW: float = 80.0
"""Horizontal distance under which two nodes are checked for collision."""

MIN_SEPARATION: float = 40.0
"""Minimum vertical separation enforced by the collision pass."""

COLLISION_PASSES: int = 2
"""Number of collision sweeps (bounded, not run to convergence)."""
