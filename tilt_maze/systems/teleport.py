"""Teleport pairing and cooldown system.

Teleports are paired dynamically: when the player enters one, the
destination is drawn uniformly from the *other* teleports that are currently
active. Both ends then go inactive (and hidden) for ``teleport_cooldown``
time units, each on its own :class:`Cooldown`; the cooldown system brings
them back independently of how the teleport animation is doing.

The random source is always passed in so callers control reproducibility.
Candidates are drawn from a sorted list, so a seeded ``random.Random`` yields
the same destination for the same world.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from tilt_maze.components import Cooldown, Teleport
from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.state import State
from tilt_maze.types import EntityID
from tilt_maze.utils.ecs import active_teleports

logger = logging.getLogger(__name__)


def find_destination(
    state: State, entry_id: EntityID, rng: random.Random
) -> Optional[EntityID]:
    """Pick a destination for a player entering ``entry_id``.

    Returns:
        EntityID | None: A random active teleport other than the entry, or
        ``None`` when there is no candidate.
    """
    candidates = [eid for eid in active_teleports(state) if eid != entry_id]
    if not candidates:
        return None
    destination = rng.choice(candidates)
    logger.debug(
        "Teleport %d -> %d (of %d candidates)", entry_id, destination, len(candidates)
    )
    return destination


def _set_teleport_active(state: State, eid: EntityID, active: bool) -> State:
    teleport = state.teleport.get(eid)
    if teleport is None:
        return state
    state_teleport = state.teleport.set(eid, Teleport(active=active))
    state_appearance = state.appearance
    if eid in state_appearance:
        state_appearance = state_appearance.set(
            eid, replace(state_appearance[eid], hidden=not active)
        )
    return replace(state, teleport=state_teleport, appearance=state_appearance)


def deactivate_teleport(
    state: State, eid: EntityID, config: GameConfig = DEFAULT_CONFIG
) -> State:
    """Disable and hide a teleport and start its cooldown."""
    if eid not in state.teleport:
        return state
    state = _set_teleport_active(state, eid, False)
    return replace(
        state, cooldown=state.cooldown.set(eid, Cooldown(config.teleport_cooldown))
    )


def cooldown_system(state: State, dt: float) -> State:
    """Tick teleport cooldowns by ``dt`` and reactivate the expired ones."""
    if not state.cooldown:
        return state
    state_cooldown = state.cooldown
    expired = []
    for eid, cooldown in state.cooldown.items():
        remaining = cooldown.remaining - dt
        if remaining <= 0:
            state_cooldown = state_cooldown.remove(eid)
            expired.append(eid)
        else:
            state_cooldown = state_cooldown.set(eid, Cooldown(remaining))
    state = replace(state, cooldown=state_cooldown)
    for eid in expired:
        state = _set_teleport_active(state, eid, True)
    return state
