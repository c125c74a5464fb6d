from dataclasses import dataclass


@dataclass(frozen=True)
class Vortex:
    """Hazard marker. Touching a vortex costs a point and kills the player."""

    pass
