"""Player transition system (vortex death and teleport sequences).

A transition is a list of :class:`tilt_maze.state.Phase` steps evaluated a
little at a time: every tick ``transition_system`` advances the current step
by the elapsed time, carrying leftover time into the following steps, so the
update loop never waits on an animation. Timed steps interpolate the player's
position or scale; zero-length steps act once when entered.

Dying::

    MOVE (to the vortex) -> SHRINK -> REMOVE -> respawn at start

Teleporting::

    MOVE (to the entry) -> SHRINK -> HIDE -> JUMP (to the destination)
    -> UNHIDE -> GROW -> player body dynamic again

For the whole sequence the player's body is not dynamic and
``State.transition`` is set, which makes the contact system ignore contacts.
Sequences cannot be cancelled except by tearing the level down.
"""

from dataclasses import replace
from typing import Tuple

from tilt_maze.components import Position
from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.state import Phase, State, Transition
from tilt_maze.systems.world import respawn_player
from tilt_maze.types import EntityID, PhaseName, TransitionKind
from tilt_maze.utils.gc import remove_entities
from tilt_maze.utils.math import lerp, lerp_position


def _set_dynamic(state: State, eid: EntityID, dynamic: bool) -> State:
    body = state.body.get(eid)
    if body is None or body.dynamic == dynamic:
        return state
    return replace(state, body=state.body.set(eid, replace(body, dynamic=dynamic)))


def _set_appearance(state: State, eid: EntityID, **changes: object) -> State:
    appearance = state.appearance.get(eid)
    if appearance is None:
        return state
    return replace(
        state,
        appearance=state.appearance.set(eid, replace(appearance, **changes)),
    )


def _begin(
    state: State, kind: TransitionKind, player_id: EntityID, phases: Tuple[Phase, ...]
) -> State:
    state = _set_dynamic(state, player_id, False)
    return replace(
        state, transition=Transition(kind=kind, player_id=player_id, phases=phases)
    )


def begin_death(
    state: State,
    player_id: EntityID,
    vortex_position: Position,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Start the vortex death sequence for ``player_id``."""
    phases = (
        Phase(PhaseName.MOVE, config.phase_duration, target_position=vortex_position),
        Phase(PhaseName.SHRINK, config.phase_duration, target_scale=config.shrink_scale),
        Phase(PhaseName.REMOVE),
    )
    return _begin(state, TransitionKind.DYING, player_id, phases)


def begin_teleport(
    state: State,
    player_id: EntityID,
    entry_position: Position,
    destination_position: Position,
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Start the teleport sequence from ``entry_position`` to ``destination_position``."""
    phases = (
        Phase(PhaseName.MOVE, config.phase_duration, target_position=entry_position),
        Phase(PhaseName.SHRINK, config.phase_duration, target_scale=config.shrink_scale),
        Phase(PhaseName.HIDE),
        Phase(
            PhaseName.JUMP, config.phase_duration, target_position=destination_position
        ),
        Phase(PhaseName.UNHIDE),
        Phase(PhaseName.GROW, config.phase_duration, target_scale=1.0),
    )
    return _begin(state, TransitionKind.TELEPORTING, player_id, phases)


def _enter_phase(state: State, transition: Transition) -> Tuple[State, Transition]:
    """Run the entry action of the current step and snapshot the animation origin."""
    phase = transition.phase
    eid = transition.player_id
    if phase.name == PhaseName.REMOVE:
        state = remove_entities(state, [eid])
    elif phase.name == PhaseName.HIDE:
        state = _set_appearance(state, eid, hidden=True)
    elif phase.name == PhaseName.UNHIDE:
        state = _set_appearance(state, eid, hidden=False)
    elif phase.name == PhaseName.JUMP and phase.target_position is not None:
        if eid in state.position:
            state = replace(
                state, position=state.position.set(eid, phase.target_position)
            )

    appearance = state.appearance.get(eid)
    transition = replace(
        transition,
        started=True,
        origin=state.position.get(eid),
        origin_scale=1.0 if appearance is None else appearance.scale,
    )
    return state, transition


def _animate(state: State, transition: Transition, progress: float) -> State:
    """Apply the current step's interpolation at ``progress`` in ``[0, 1]``."""
    phase = transition.phase
    eid = transition.player_id
    if phase.name == PhaseName.MOVE and phase.target_position is not None:
        if transition.origin is not None and eid in state.position:
            position = lerp_position(transition.origin, phase.target_position, progress)
            state = replace(state, position=state.position.set(eid, position))
    elif phase.target_scale is not None:
        scale = lerp(transition.origin_scale, phase.target_scale, progress)
        if progress >= 1.0:
            scale = phase.target_scale
        state = _set_appearance(state, eid, scale=scale)
    return state


def _complete(state: State, transition: Transition, config: GameConfig) -> State:
    state = replace(state, transition=None)
    if transition.kind == TransitionKind.DYING:
        return respawn_player(state, config)
    state = _set_appearance(state, transition.player_id, scale=1.0, hidden=False)
    return _set_dynamic(state, transition.player_id, True)


def transition_system(
    state: State, dt: float, config: GameConfig = DEFAULT_CONFIG
) -> State:
    """Advance the in-flight transition by ``dt`` (no-op when idle)."""
    transition = state.transition
    remaining = dt
    while transition is not None:
        if not transition.started:
            state, transition = _enter_phase(state, transition)

        phase = transition.phase
        left_in_phase = phase.duration - transition.elapsed
        if remaining < left_in_phase:
            elapsed = transition.elapsed + remaining
            state = _animate(state, transition, elapsed / phase.duration)
            return replace(state, transition=replace(transition, elapsed=elapsed))

        remaining -= left_in_phase
        state = _animate(state, transition, 1.0)
        if transition.is_last_phase:
            return _complete(state, transition, config)
        transition = replace(
            transition, index=transition.index + 1, elapsed=0.0, started=False
        )
    return state
