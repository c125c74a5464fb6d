"""Contact resolution system.

The physics engine reports contact-begin events as pairs of entity ids. Only
pairs involving the current player matter; the other side's kind decides
what happens:

* vortex: lose a point, start the death sequence;
* star: remove the star, gain a point;
* finish: gain ten points and load the next level;
* teleport: if active, deactivate it; if another active teleport exists,
    deactivate that one too and start the teleport sequence.

Contacts are ignored while a transition plays, and contacts that reference
entities which no longer exist (collected stars, the previous level, a dead
player) are silently dropped: engines legitimately deliver stale or
overlapping notifications. Within a batch the contacts are folded in order,
so a transition started by one contact guards all the following ones.
"""

import logging
import random
from typing import Iterable, Optional

from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.levels.provider import LevelProvider
from tilt_maze.state import State
from tilt_maze.systems.teleport import deactivate_teleport, find_destination
from tilt_maze.systems.transition import begin_death, begin_teleport
from tilt_maze.systems.world import adjust_score, load_level
from tilt_maze.types import Contact, EntityID, EntityKind
from tilt_maze.utils.ecs import kind_of
from tilt_maze.utils.gc import remove_entities

logger = logging.getLogger(__name__)


def _reward(state: State, eid: EntityID) -> int:
    rewardable = state.rewardable.get(eid)
    return 0 if rewardable is None else rewardable.amount


def _other_side(
    player_id: EntityID, entity_a: EntityID, entity_b: EntityID
) -> Optional[EntityID]:
    if entity_a == player_id and entity_b != player_id:
        return entity_b
    if entity_b == player_id and entity_a != player_id:
        return entity_a
    return None


def vortex_contact(
    state: State, player_id: EntityID, vortex_id: EntityID, config: GameConfig
) -> State:
    state = adjust_score(state, _reward(state, vortex_id))
    return begin_death(state, player_id, state.position[vortex_id], config)


def star_contact(state: State, star_id: EntityID) -> State:
    reward = _reward(state, star_id)
    state = remove_entities(state, [star_id])
    return adjust_score(state, reward)


def finish_contact(
    state: State, finish_id: EntityID, provider: LevelProvider, config: GameConfig
) -> State:
    state = adjust_score(state, _reward(state, finish_id))
    return load_level(state, state.level + 1, provider, config)


def teleport_contact(
    state: State,
    player_id: EntityID,
    entry_id: EntityID,
    rng: random.Random,
    config: GameConfig,
) -> State:
    teleport = state.teleport.get(entry_id)
    if teleport is None or not teleport.active:
        return state
    state = deactivate_teleport(state, entry_id, config)
    destination_id = find_destination(state, entry_id, rng)
    if destination_id is None:
        logger.debug("Teleport %d has no active destination", entry_id)
        return state
    state = deactivate_teleport(state, destination_id, config)
    return begin_teleport(
        state,
        player_id,
        state.position[entry_id],
        state.position[destination_id],
        config,
    )


def contact_system(
    state: State,
    entity_a: EntityID,
    entity_b: EntityID,
    provider: LevelProvider,
    rng: random.Random,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Resolve one contact-begin event between ``entity_a`` and ``entity_b``.

    Arguments:
        state:
            Current immutable state.
        entity_a, entity_b:
            Ids reported by the physics engine, in any order.
        provider:
            Level source used when a finish zone advances the level.
        rng:
            Random source for teleport destination selection.
        config:
            Game constants.

    Returns:
        State
            Updated state, or ``state`` itself when the contact is irrelevant.
    """
    if state.is_transitioning:
        return state

    player_id = state.player_id
    if player_id is None:
        return state
    other_id = _other_side(player_id, entity_a, entity_b)
    if other_id is None:
        return state

    kind = kind_of(state, other_id)
    if kind is None:
        logger.debug("Ignoring contact with removed entity %d", other_id)
        return state

    if kind == EntityKind.VORTEX:
        return vortex_contact(state, player_id, other_id, config)
    elif kind == EntityKind.STAR:
        return star_contact(state, other_id)
    elif kind == EntityKind.FINISH:
        return finish_contact(state, other_id, provider, config)
    elif kind == EntityKind.TELEPORT:
        return teleport_contact(state, player_id, other_id, rng, config)
    return state


def resolve_contacts(
    state: State,
    contacts: Iterable[Contact],
    provider: LevelProvider,
    rng: random.Random,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Fold a batch of contacts into the state, in delivery order."""
    for entity_a, entity_b in contacts:
        state = contact_system(state, entity_a, entity_b, provider, rng, config)
    return state
