"""ECS convenience queries over :class:`tilt_maze.state.State`."""

from typing import Iterable, List, Optional

from tilt_maze.state import State
from tilt_maze.types import EntityID, EntityKind


def kind_of(state: State, eid: EntityID) -> Optional[EntityKind]:
    """Return the kind of a live entity, or ``None`` if it no longer exists."""
    entity = state.entity.get(eid)
    return None if entity is None else entity.kind


def entities_of_kind(state: State, kinds: Iterable[EntityKind]) -> List[EntityID]:
    """Return the ids of live entities whose kind is in ``kinds``, sorted."""
    wanted = set(kinds)
    return sorted(eid for eid, entity in state.entity.items() if entity.kind in wanted)


def active_teleports(state: State) -> List[EntityID]:
    """Return the ids of teleports currently accepting players, sorted."""
    return sorted(eid for eid, teleport in state.teleport.items() if teleport.active)
