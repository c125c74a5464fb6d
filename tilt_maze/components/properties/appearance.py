"""Rendering appearance component.

``Appearance`` is the presentation-facing view of an entity: which sprite to
draw and the animated ``scale`` / ``hidden`` values driven by transition and
cooldown systems. Vortices and teleports spin forever (``rotating``); the spin
angle itself is left to the renderer.
"""

from dataclasses import dataclass
from enum import StrEnum, auto


class AppearanceName(StrEnum):
    """Enumeration of built-in sprite names."""

    BANNER = auto()
    BLOCK = auto()
    FINISH = auto()
    PLAYER = auto()
    STAR = auto()
    TELEPORT = auto()
    VORTEX = auto()


@dataclass(frozen=True)
class Appearance:
    """Visual rendering metadata.

    Attributes:
        name: Symbolic sprite identifier.
        scale: Uniform scale factor (1.0 is full size).
        hidden: If True the entity is not drawn.
        rotating: If True the sprite spins continuously.
    """

    name: AppearanceName
    scale: float = 1.0
    hidden: bool = False
    rotating: bool = False
