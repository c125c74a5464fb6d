"""Physics body component and collision categories.

The external physics engine reads ``Body`` to build its rigid bodies. The
category / contact / collision bit masks mirror the usual 2D engine model:

* ``category``: what the body is.
* ``contact_mask``: categories for which contact-begin events are wanted.
* ``collision_mask``: categories that physically block the body.

The player collides only with walls and asks for contacts with stars,
vortices, finish zones and teleports. Everything else is static.
"""

from dataclasses import dataclass
from typing import Optional
from enum import IntFlag


class CollisionCategory(IntFlag):
    NONE = 0
    PLAYER = 1
    WALL = 2
    STAR = 4
    VORTEX = 8
    FINISH = 16
    TELEPORT = 32


PLAYER_CONTACTS = (
    CollisionCategory.STAR
    | CollisionCategory.VORTEX
    | CollisionCategory.FINISH
    | CollisionCategory.TELEPORT
)


@dataclass(frozen=True)
class Body:
    """Physics body descriptor.

    Attributes:
        category: Category bit of this body.
        contact_mask: Categories that should raise contact events.
        collision_mask: Categories that physically block this body.
        dynamic: Whether the engine integrates forces for this body. The
            player's body is made non-dynamic while a transition plays.
        radius: Circle radius; ``None`` for a cell-sized rectangle (walls).
    """

    category: CollisionCategory
    contact_mask: CollisionCategory = CollisionCategory.NONE
    collision_mask: CollisionCategory = CollisionCategory.NONE
    dynamic: bool = False
    radius: Optional[float] = None
