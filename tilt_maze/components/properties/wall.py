from dataclasses import dataclass


@dataclass(frozen=True)
class Wall:
    """Marker (no data). Walls are the only bodies the player collides with."""

    pass
