"""Position component.

World coordinates (grid cell centres for placed objects). Stored in
``State.position`` keyed by entity id.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """World coordinate.

    Attributes:
        x: Horizontal coordinate (0 at the left edge).
        y: Vertical coordinate (0 at the bottom edge).
    """

    x: float
    y: float
