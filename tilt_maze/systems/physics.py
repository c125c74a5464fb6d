from dataclasses import replace
from typing import Mapping

from tilt_maze.components import Position
from tilt_maze.state import State
from tilt_maze.types import EntityID


def physics_position_system(
    state: State, positions: Mapping[EntityID, Position]
) -> State:
    """Adopt engine-reported positions for live entities with a dynamic body.

    Reports for removed entities or for bodies the transition system is
    animating (non-dynamic) are ignored.
    """
    state_position = state.position
    for eid, position in positions.items():
        body = state.body.get(eid)
        if body is None or not body.dynamic or eid not in state.entity:
            continue
        state_position = state_position.set(eid, position)
    if state_position is state.position:
        return state
    return replace(state, position=state_position)
