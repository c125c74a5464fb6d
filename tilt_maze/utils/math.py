"""Interpolation helpers used by transition animations."""

from tilt_maze.components import Position


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; ``t`` is clamped to ``[0, 1]``."""
    t = min(max(t, 0.0), 1.0)
    return start + (end - start) * t


def lerp_position(start: Position, end: Position, t: float) -> Position:
    """Interpolate between two positions, returning ``end`` exactly at ``t >= 1``."""
    if t >= 1.0:
        return end
    return Position(lerp(start.x, end.x, t), lerp(start.y, end.y, t))
