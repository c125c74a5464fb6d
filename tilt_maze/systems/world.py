"""World lifecycle system.

Level (re)loading, teardown, player respawn and score bookkeeping. These are
the operations every other part of the engine uses to mutate the world as a
whole; contact and transition systems call into them rather than editing the
level stores directly.

``load_level`` always tears the previous level down *before* asking the
provider or the parser for anything, so a failed load leaves a clean, empty
world instead of a half-built one.
"""

import logging
from dataclasses import replace

from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.levels.convert import add_entity, place_directives
from tilt_maze.levels.factories import create_banner, create_player
from tilt_maze.levels.parser import parse
from tilt_maze.levels.provider import LevelProvider
from tilt_maze.state import State
from tilt_maze.types import EntityKind
from tilt_maze.utils.ecs import entities_of_kind
from tilt_maze.utils.gc import remove_entities

logger = logging.getLogger(__name__)

LEVEL_KINDS = (
    EntityKind.WALL,
    EntityKind.VORTEX,
    EntityKind.STAR,
    EntityKind.FINISH,
    EntityKind.PLAYER,
    EntityKind.TELEPORT,
    EntityKind.BANNER,
)


def clear_up(state: State) -> State:
    """Remove every level entity and the banner, and drop any in-flight transition.

    Idempotent: clearing an empty world returns an equal state.
    """
    state = remove_entities(state, entities_of_kind(state, LEVEL_KINDS))
    if state.transition is not None:
        state = replace(state, transition=None)
    return state


def load_level(
    state: State,
    number: int,
    provider: LevelProvider,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Replace the world with level ``number``.

    If the provider has no such level the level sequence is finished: the
    world stays empty apart from a banner showing the final score.

    Raises:
        LevelFormatError: The level text is malformed (the world is left empty).
        LevelResourceError: The level exists but could not be read.
    """
    state = replace(clear_up(state), level=number, player_start=None)
    text = provider.get_level(number)
    if text is None:
        logger.info(
            "No level %d; level sequence finished with score %d", number, state.score
        )
        state, _ = add_entity(state, create_banner(state.score, config))
        return replace(state, level_finished=True)

    directives = parse(text, number, config.cell_size)
    state = place_directives(state, directives, config)
    logger.info("Loaded level %d (%d entities)", number, len(state.entity))
    return state


def respawn_player(state: State, config: GameConfig = DEFAULT_CONFIG) -> State:
    """Recreate the player at the recorded start position (no-op without one)."""
    if state.player_start is None:
        return state
    state = remove_entities(state, list(state.player.keys()))
    state, _ = add_entity(state, create_player(config), state.player_start)
    return state


def adjust_score(state: State, delta: int) -> State:
    """Add ``delta`` to the score; the score has no floor or ceiling."""
    if delta == 0:
        return state
    return replace(state, score=state.score + delta)


def start_game(
    state: State, provider: LevelProvider, config: GameConfig = DEFAULT_CONFIG
) -> State:
    """Reset score and level and load level 1, whatever the prior state."""
    state = replace(state, score=0, level=1, level_finished=False)
    return load_level(state, 1, provider, config)
