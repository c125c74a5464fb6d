"""Garbage collection utilities.

Entities are removed by dropping them from the master ``entity`` registry;
the garbage collector then prunes every component store down to the ids the
registry still knows. This keeps removal a single operation regardless of how
many components an entity carries.
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, Set, cast

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tilt_maze.state import State
from tilt_maze.types import EntityID


def compute_alive_entities(state: State) -> Set[EntityID]:
    """Return the ids present in the entity registry."""
    return set(state.entity.keys())


def run_garbage_collector(state: State) -> State:
    """Prune component maps to only contain registered entity IDs."""
    alive = compute_alive_entities(state)
    new_fields: Dict[str, Any] = {}
    for name in state.__dataclass_fields__:
        if name == "entity":
            continue
        value = getattr(state, name)
        if isinstance(value, type(pmap())):
            value_map = cast(PMap[EntityID, Any], value)
            if all(k in alive for k in value_map):
                continue
            new_fields[name] = pmap({k: v for k, v in value_map.items() if k in alive})
    if not new_fields:
        return state
    return replace(state, **new_fields)


def remove_entities(state: State, entity_ids: Iterable[EntityID]) -> State:
    """Remove entities and all their components. Unknown ids are ignored."""
    registry = state.entity
    for eid in entity_ids:
        registry = registry.discard(eid)
    if registry is state.entity:
        return state
    return run_garbage_collector(replace(state, entity=registry))
