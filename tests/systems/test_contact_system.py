import random
from dataclasses import replace
from typing import Optional

from tilt_maze.components import Position
from tilt_maze.levels.provider import LevelProvider, MappingLevelProvider
from tilt_maze.state import State
from tilt_maze.systems.contact import contact_system, resolve_contacts
from tilt_maze.systems.teleport import deactivate_teleport
from tilt_maze.types import EntityID, EntityKind, TransitionKind
from tests.test_utils import (
    LastChoice,
    make_level_state,
    make_provider,
    only_id,
    player_id,
)

NO_LEVELS = MappingLevelProvider({})


def contact(
    state: State,
    a: EntityID,
    b: EntityID,
    provider: LevelProvider = NO_LEVELS,
    rng: Optional[random.Random] = None,
) -> State:
    return contact_system(state, a, b, provider, rng or random.Random(0))


def test_star_contact_scores_once() -> None:
    state = make_level_state("ps")
    player, star = player_id(state), only_id(state, EntityKind.STAR)

    collected = contact(state, player, star)
    assert collected.score == 1
    assert star not in collected.entity
    assert star not in collected.position
    assert star not in collected.star

    again = contact(collected, star, player)
    assert again is collected
    assert again.score == 1


def test_contact_order_does_not_matter() -> None:
    state = make_level_state("ps")
    player, star = player_id(state), only_id(state, EntityKind.STAR)
    assert contact(state, star, player).score == contact(state, player, star).score == 1


def test_contacts_without_player_are_ignored() -> None:
    state = make_level_state("psv")
    star, vortex = only_id(state, EntityKind.STAR), only_id(state, EntityKind.VORTEX)
    assert contact(state, star, vortex) is state
    player = player_id(state)
    assert contact(state, player, player) is state


def test_contact_with_unknown_entity_is_ignored() -> None:
    state = make_level_state("ps")
    assert contact(state, player_id(state), 10**9) is state


def test_contact_from_a_stale_player_is_ignored() -> None:
    old_player = player_id(make_level_state("ps"))
    reloaded = make_level_state("ps")
    star = only_id(reloaded, EntityKind.STAR)
    assert contact(reloaded, old_player, star) is reloaded


def test_vortex_contact_penalizes_and_starts_dying() -> None:
    state = make_level_state("pv")
    player, vortex = player_id(state), only_id(state, EntityKind.VORTEX)

    hit = contact(state, player, vortex)
    assert hit.score == -1
    assert hit.is_transitioning
    assert hit.transition is not None
    assert hit.transition.kind == TransitionKind.DYING
    assert hit.transition.player_id == player
    assert not hit.body[player].dynamic

    assert contact(hit, player, vortex).score == -1


def test_contacts_ignored_while_transitioning() -> None:
    state = make_level_state("psv")
    player = player_id(state)
    star, vortex = only_id(state, EntityKind.STAR), only_id(state, EntityKind.VORTEX)
    dying = contact(state, player, vortex)
    assert contact(dying, player, star) is dying
    assert star in dying.entity


def test_finish_contact_advances_level() -> None:
    provider = make_provider("pf", "p  f\nx  s")
    state = make_level_state("pf")
    state = contact(state, player_id(state), only_id(state, EntityKind.FINISH), provider)
    assert state.score == 10
    assert state.level == 2
    assert not state.level_finished
    assert state.player_start == Position(32, 96)
    assert len(state.star) == 1


def test_finish_contact_without_next_level_finishes() -> None:
    provider = make_provider("pf")
    state = make_level_state("pf")
    state = contact(state, player_id(state), only_id(state, EntityKind.FINISH), provider)
    assert state.level_finished
    assert state.level == 2
    assert state.score == 10
    assert state.player_id is None
    assert len(state.banner) == 1


def test_batch_after_finish_ignores_previous_level_ids() -> None:
    provider = make_provider("pfs", "ps")
    state = make_level_state("pfs")
    player = player_id(state)
    finish, star = only_id(state, EntityKind.FINISH), only_id(state, EntityKind.STAR)
    state = resolve_contacts(
        state, [(player, finish), (player, star)], provider, random.Random(0)
    )
    assert state.score == 10
    assert state.level == 2
    assert len(state.star) == 1


def test_batch_vortex_guards_following_contacts() -> None:
    state = make_level_state("pvs")
    player = player_id(state)
    vortex, star = only_id(state, EntityKind.VORTEX), only_id(state, EntityKind.STAR)
    state = resolve_contacts(
        state,
        [(player, vortex), (vortex, player), (player, star)],
        NO_LEVELS,
        random.Random(0),
    )
    assert state.score == -1
    assert star in state.entity


def test_teleport_contact_starts_teleport() -> None:
    state = make_level_state("t p t")
    player = player_id(state)
    entry, destination = sorted(state.teleport)
    rng = LastChoice()
    state = contact(state, player, entry, rng=rng)
    assert rng.seen == [[destination]]
    assert state.transition is not None
    assert state.transition.kind == TransitionKind.TELEPORTING
    assert not state.teleport[entry].active
    assert not state.teleport[destination].active
    assert state.cooldown[entry].remaining == 5.0
    assert state.cooldown[destination].remaining == 5.0
    assert state.score == 0


def test_lone_teleport_goes_on_cooldown_without_moving_player() -> None:
    state = make_level_state("tp")
    player = player_id(state)
    (teleport,) = state.teleport
    rng = LastChoice()
    used = contact(state, player, teleport, rng=rng)
    assert rng.seen == []
    assert not used.is_transitioning
    assert not used.teleport[teleport].active
    assert used.appearance[teleport].hidden
    assert used.cooldown[teleport].remaining == 5.0
    assert used.position[player] == state.position[player]
    assert used.body[player].dynamic


def test_teleport_with_only_inactive_partner_goes_on_cooldown() -> None:
    state = make_level_state("t p t")
    player = player_id(state)
    entry, other = sorted(state.teleport)
    state = deactivate_teleport(state, other)
    used = contact(state, player, entry)
    assert not used.is_transitioning
    assert not used.teleport[entry].active
    assert entry in used.cooldown


def test_inactive_teleport_contact_is_noop() -> None:
    state = make_level_state("t p t")
    player = player_id(state)
    entry, destination = sorted(state.teleport)
    used = contact(state, player, entry)
    # Drop the animation so only the cooldown remains.
    used = replace(used, transition=None)
    assert contact(used, player, entry) is used
    assert contact(used, player, destination) is used
