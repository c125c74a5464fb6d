from tilt_maze.entity import new_entity_id
from tilt_maze.types import EntityKind
from tilt_maze.utils.ecs import active_teleports, entities_of_kind, kind_of
from tilt_maze.utils.gc import remove_entities, run_garbage_collector
from tests.test_utils import make_level_state, only_id


def test_remove_entities_prunes_every_store() -> None:
    state = make_level_state("pt")
    teleport = only_id(state, EntityKind.TELEPORT)
    pruned = remove_entities(state, [teleport])
    assert teleport not in pruned.entity
    assert teleport not in pruned.position
    assert teleport not in pruned.appearance
    assert teleport not in pruned.body
    assert teleport not in pruned.teleport
    assert pruned.player == state.player


def test_remove_unknown_ids_is_identity() -> None:
    state = make_level_state("p")
    assert remove_entities(state, [10**9]) is state
    assert remove_entities(state, []) is state


def test_collector_without_orphans_is_identity() -> None:
    state = make_level_state("psx")
    assert run_garbage_collector(state) is state


def test_kind_queries() -> None:
    state = make_level_state("tpt s")
    first, second = entities_of_kind(state, [EntityKind.TELEPORT])
    assert first < second
    assert kind_of(state, first) == EntityKind.TELEPORT
    assert kind_of(state, 10**9) is None
    assert active_teleports(state) == [first, second]
    assert len(entities_of_kind(state, [EntityKind.STAR, EntityKind.PLAYER])) == 2


def test_entity_ids_are_never_reused() -> None:
    a, b = new_entity_id(), new_entity_id()
    c = new_entity_id()
    assert a < b < c
