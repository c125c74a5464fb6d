from tilt_maze.components import Position
from tilt_maze.systems.physics import physics_position_system
from tilt_maze.systems.transition import begin_death
from tilt_maze.types import EntityKind
from tests.test_utils import make_level_state, only_id, player_id


def test_dynamic_player_position_adopted() -> None:
    state = make_level_state("p")
    player = player_id(state)
    state = physics_position_system(state, {player: Position(40, 50)})
    assert state.position[player] == Position(40, 50)


def test_static_bodies_are_not_moved() -> None:
    state = make_level_state("px")
    wall = only_id(state, EntityKind.WALL)
    moved = physics_position_system(state, {wall: Position(0, 0)})
    assert moved.position[wall] == Position(96, 32)


def test_transitioning_player_is_not_moved() -> None:
    state = make_level_state("pv")
    player = player_id(state)
    vortex = only_id(state, EntityKind.VORTEX)
    state = begin_death(state, player, state.position[vortex])
    moved = physics_position_system(state, {player: Position(500, 500)})
    assert moved.position[player] == Position(32, 32)


def test_removed_entities_are_ignored() -> None:
    state = make_level_state("p")
    moved = physics_position_system(state, {10**9: Position(1, 1)})
    assert 10**9 not in moved.position
