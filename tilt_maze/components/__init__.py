"""tilt_maze.components
=================================

Aggregate import surface for all ECS component dataclasses::

    from tilt_maze.components import Position, Teleport, Cooldown

Properties describe what an entity is; effects (the teleport cooldown) are
temporary and ticked away by systems.
"""

# Effects
from .effects import Cooldown

# Properties
from .properties import Appearance, AppearanceName
from .properties import Banner
from .properties import Body, CollisionCategory, PLAYER_CONTACTS
from .properties import Finish
from .properties import Player
from .properties import Position
from .properties import Rewardable
from .properties import Star
from .properties import Teleport
from .properties import Vortex
from .properties import Wall

__all__ = [
    # Effects
    "Cooldown",
    # Properties
    "Appearance",
    "AppearanceName",
    "Banner",
    "Body",
    "CollisionCategory",
    "Finish",
    "PLAYER_CONTACTS",
    "Player",
    "Position",
    "Rewardable",
    "Star",
    "Teleport",
    "Vortex",
    "Wall",
]
