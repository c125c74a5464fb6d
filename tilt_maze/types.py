"""Common type aliases and enumerations.

``EntityID`` keys every component store on :class:`tilt_maze.state.State`.
``EntityKind`` is the tagged union the contact resolver dispatches on.
"""

from enum import StrEnum, auto
from typing import Tuple

EntityID = int

Vector = Tuple[float, float]

Contact = Tuple[EntityID, EntityID]


class EntityKind(StrEnum):
    """Placed game object categories (plus the end-of-sequence banner)."""

    WALL = auto()
    VORTEX = auto()
    STAR = auto()
    TELEPORT = auto()
    FINISH = auto()
    PLAYER = auto()
    BANNER = auto()


class TransitionKind(StrEnum):
    """Player animation sequences during which contacts are ignored."""

    DYING = auto()
    TELEPORTING = auto()


class PhaseName(StrEnum):
    """Steps of a transition sequence."""

    MOVE = auto()
    SHRINK = auto()
    REMOVE = auto()
    HIDE = auto()
    JUMP = auto()
    UNHIDE = auto()
    GROW = auto()
