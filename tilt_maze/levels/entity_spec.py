from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type

from tilt_maze.components.properties import (
    Appearance,
    Banner,
    Body,
    Finish,
    Player,
    Rewardable,
    Star,
    Teleport,
    Vortex,
    Wall,
)
from tilt_maze.types import EntityKind

# Map component class -> State store name (used by convert.py)
COMPONENT_TO_FIELD: Dict[Type[Any], str] = {
    Appearance: "appearance",
    Banner: "banner",
    Body: "body",
    Finish: "finish",
    Player: "player",
    Rewardable: "rewardable",
    Star: "star",
    Teleport: "teleport",
    Vortex: "vortex",
    Wall: "wall",
}


@dataclass
class EntitySpec:
    """
    Mutable bag of ECS components for authoring (no Position here).
    The kind is recorded in the entity registry; components are copied into
    the matching State stores when the spec is placed.
    """

    kind: EntityKind

    # Components
    appearance: Optional[Appearance] = None
    banner: Optional[Banner] = None
    body: Optional[Body] = None
    finish: Optional[Finish] = None
    player: Optional[Player] = None
    rewardable: Optional[Rewardable] = None
    star: Optional[Star] = None
    teleport: Optional[Teleport] = None
    vortex: Optional[Vortex] = None
    wall: Optional[Wall] = None

    def iter_components(self) -> List[Tuple[str, Any]]:
        """
        Yield (store_name, component) for non-None component fields that map to State stores.
        """
        out: List[Tuple[str, Any]] = []
        for _, store_name in COMPONENT_TO_FIELD.items():
            comp = getattr(self, store_name, None)
            if comp is not None:
                out.append((store_name, comp))
        return out


__all__ = ["EntitySpec", "COMPONENT_TO_FIELD"]
