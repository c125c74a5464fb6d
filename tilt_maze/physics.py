"""External physics engine contract.

The engine does not integrate rigid bodies itself. A host adapter wraps a
real 2D engine and implements :class:`PhysicsWorld`:

* it builds (and keeps in sync) bodies from the ``Body`` and ``Position``
    stores of the state it is handed, honouring ``Body.dynamic``;
* ``set_gravity`` receives the gravity computed from input each tick;
* ``step`` integrates ``dt`` and reports the new positions of dynamic bodies
    together with the contact-begin pairs that occurred.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Protocol

from tilt_maze.components import Position
from tilt_maze.state import State
from tilt_maze.types import Contact, EntityID, Vector


@dataclass(frozen=True)
class PhysicsStep:
    """Outcome of one physics integration step.

    Attributes:
        positions: New positions of moved bodies.
        contacts: Contact-begin pairs, in the order the engine raised them.
    """

    positions: Mapping[EntityID, Position] = field(default_factory=dict)
    contacts: List[Contact] = field(default_factory=list)


class PhysicsWorld(Protocol):
    def set_gravity(self, gravity: Vector) -> None: ...

    def step(self, state: State, dt: float) -> PhysicsStep: ...
