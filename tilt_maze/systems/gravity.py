"""Input-to-gravity mapping.

The player is never moved directly: input sets the world gravity and the
physics engine does the rest. Two modes exist, picked by the host according
to what the platform offers:

* ``POINTER``: gravity points from the player towards the last recorded
    pointer location, scaled down by ``pointer_divisor``. Without a recorded
    pointer (or without a player) gravity is left unchanged.
* ``TILT``: the accelerometer reading is rotated into screen axes,
    ``(ay * -tilt_scale, ax * tilt_scale)``.

Gravity keeps being computed during transitions; the player's body is not
dynamic then, so it has no visible effect.
"""

from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Optional

from tilt_maze.components import Position
from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.state import State
from tilt_maze.types import Vector


class InputMode(StrEnum):
    POINTER = auto()
    TILT = auto()


@dataclass(frozen=True)
class TiltSample:
    """Raw accelerometer reading (device axes)."""

    ax: float
    ay: float


def pointer_gravity(
    pointer: Optional[Position],
    player_position: Optional[Position],
    config: GameConfig = DEFAULT_CONFIG,
) -> Optional[Vector]:
    """Gravity pulling the player towards the pointer, or ``None`` if undefined."""
    if pointer is None or player_position is None:
        return None
    return (
        (pointer.x - player_position.x) / config.pointer_divisor,
        (pointer.y - player_position.y) / config.pointer_divisor,
    )


def tilt_gravity(sample: TiltSample, config: GameConfig = DEFAULT_CONFIG) -> Vector:
    """Gravity for an accelerometer reading (axes swapped and scaled)."""
    return (sample.ay * -config.tilt_scale, sample.ax * config.tilt_scale)


def record_pointer(state: State, x: float, y: float) -> State:
    return replace(state, pointer=Position(x, y))


def clear_pointer(state: State) -> State:
    if state.pointer is None:
        return state
    return replace(state, pointer=None)


def gravity_system(
    state: State,
    mode: InputMode,
    tilt: Optional[TiltSample] = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Recompute ``state.gravity`` from the input of the given mode.

    Missing input (no tilt sample, no pointer, no player) keeps the previous
    gravity.
    """
    gravity: Optional[Vector] = None
    if mode == InputMode.TILT:
        if tilt is not None:
            gravity = tilt_gravity(tilt, config)
    else:
        player_id = state.player_id
        player_position = None if player_id is None else state.position.get(player_id)
        gravity = pointer_gravity(state.pointer, player_position, config)

    if gravity is None or gravity == state.gravity:
        return state
    return replace(state, gravity=gravity)
