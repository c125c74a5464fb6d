"""Property component aggregates.

This module re-exports *property* components: stable attributes describing
what an entity is (:class:`Wall`, :class:`Star`, :class:`Teleport`) and how it
is presented and simulated (:class:`Position`, :class:`Appearance`,
:class:`Body`). Systems express change by replacing these frozen dataclasses
in the ``State`` stores.
"""

from .appearance import Appearance, AppearanceName
from .banner import Banner
from .body import Body, CollisionCategory, PLAYER_CONTACTS
from .finish import Finish
from .player import Player
from .position import Position
from .rewardable import Rewardable
from .star import Star
from .teleport import Teleport
from .vortex import Vortex
from .wall import Wall

__all__ = [
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
