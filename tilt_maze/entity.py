"""Entity primitives & ID generation.

Each placed object is an ``EntityID`` (an integer) plus component dataclasses
stored in persistent maps on :class:`tilt_maze.state.State`. The registry
record :class:`Entity` carries the object's :class:`EntityKind` so contact
resolution can dispatch without probing every store.

IDs are *not* recycled: a respawned player or a reloaded level always gets
fresh IDs, so contact events that still reference the old objects resolve to
nothing.
"""

from dataclasses import dataclass
from typing import Iterator

from tilt_maze.types import EntityID, EntityKind


@dataclass(frozen=True)
class Entity:
    """Registry record.

    Attributes:
        kind: Category of the placed object.
    """

    kind: EntityKind


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)
