"""Top-level game orchestration.

:class:`GameController` is the one mutable object of the engine. It owns the
current :class:`~tilt_maze.state.State` snapshot and is the entry point for
the host: the frame loop calls :meth:`GameController.tick`, the input layer
forwards pointer and tilt samples, and the presentation layer subscribes with
:meth:`GameController.add_listener`.

Per tick the order is fixed:

1. timers: teleport cooldowns, then the player transition;
2. input: gravity from the tilt sample or the recorded pointer;
3. physics: gravity handed to the engine, one integration step, dynamic
    positions adopted;
4. contacts: the step's contact pairs resolved in delivery order.

Usage::

    controller = GameController(DirectoryLevelProvider("levels"), physics)
    controller.start_game()
    while running:
        controller.tick(dt, TiltSample(ax, ay))
"""

import logging
import random
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Protocol

from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.levels.parser import LevelFormatError
from tilt_maze.levels.provider import LevelProvider, PackageLevelProvider
from tilt_maze.physics import PhysicsWorld
from tilt_maze.state import State
from tilt_maze.systems.contact import resolve_contacts
from tilt_maze.systems.gravity import (
    InputMode,
    TiltSample,
    clear_pointer,
    gravity_system,
    record_pointer,
)
from tilt_maze.systems.physics import physics_position_system
from tilt_maze.systems.teleport import cooldown_system
from tilt_maze.systems.transition import transition_system
from tilt_maze.systems.world import clear_up, load_level, start_game
from tilt_maze.types import Contact

logger = logging.getLogger(__name__)


class GameListener(Protocol):
    """Presentation-side observer of game state changes."""

    def on_score_changed(self, score: int) -> None: ...

    def on_level_loaded(self, level: int) -> None: ...

    def on_level_sequence_finished(self, score: int) -> None: ...


class GameController:
    """Drive a tilt-maze game.

    Args:
        provider: Source of level texts; defaults to the bundled levels.
        physics: Adapter to the physics engine. Without one, ticks still
            advance timers and input but nothing moves and no contacts occur;
            contacts can then be injected with :meth:`handle_contacts`.
        mode: Which input drives gravity.
        rng: Random source for teleport destinations.
        config: Game constants.
    """

    def __init__(
        self,
        provider: Optional[LevelProvider] = None,
        physics: Optional[PhysicsWorld] = None,
        *,
        mode: InputMode = InputMode.TILT,
        rng: Optional[random.Random] = None,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> None:
        self.provider: LevelProvider = (
            provider if provider is not None else PackageLevelProvider()
        )
        self.physics = physics
        self.mode = mode
        self.rng = rng if rng is not None else random.Random()
        self.config = config
        self.state = State()
        self._listeners: List[GameListener] = []

    # -------- Listeners --------

    def add_listener(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        self._listeners.remove(listener)

    def _commit(self, state: State, reloaded: bool = False) -> State:
        previous, self.state = self.state, state
        if state.score != previous.score:
            for listener in list(self._listeners):
                listener.on_score_changed(state.score)
        if state.level_finished and not previous.level_finished:
            for listener in list(self._listeners):
                listener.on_level_sequence_finished(state.score)
        elif not state.level_finished and (reloaded or state.level != previous.level):
            for listener in list(self._listeners):
                listener.on_level_loaded(state.level)
        return state

    # -------- Level lifecycle --------

    def start_game(self) -> State:
        """Reset score and level and load level 1."""
        logger.info("Starting game")
        state = self._loading(
            lambda: start_game(self.state, self.provider, self.config)
        )
        return self._commit(state, reloaded=True)

    def load_level(self, number: int) -> State:
        state = self._loading(
            lambda: load_level(self.state, number, self.provider, self.config)
        )
        return self._commit(state, reloaded=True)

    def _loading(self, load: Callable[[], State]) -> State:
        try:
            return load()
        except LevelFormatError:
            # The load cleared the world before failing; mirror that here.
            self._commit(replace(clear_up(self.state), player_start=None))
            raise

    # -------- Frame loop --------

    def tick(self, dt: float, tilt: Optional[TiltSample] = None) -> State:
        """Advance the game by ``dt`` time units.

        Raises:
            ValueError: If ``dt`` is negative.
            LevelFormatError: A finish zone led to a malformed level.
        """
        if dt < 0:
            raise ValueError(f"dt must not be negative: {dt}")

        state = replace(self.state, time=self.state.time + dt)
        state = cooldown_system(state, dt)
        state = transition_system(state, dt, self.config)
        state = gravity_system(state, self.mode, tilt, self.config)

        if self.physics is not None:
            self.physics.set_gravity(state.gravity)
            result = self.physics.step(state, dt)
            state = physics_position_system(state, result.positions)
            self._commit(state)
            return self.handle_contacts(result.contacts)
        return self._commit(state)

    def handle_contacts(self, contacts: Iterable[Contact]) -> State:
        """Resolve contact-begin pairs against the current state."""
        batch = list(contacts)
        if not batch:
            return self.state
        state = self._loading(
            lambda: resolve_contacts(
                self.state, batch, self.provider, self.rng, self.config
            )
        )
        return self._commit(state)

    # -------- Pointer input --------

    def pointer_down(self, x: float, y: float) -> State:
        """Record a touch; on the end-of-sequence screen it restarts the game."""
        self._commit(record_pointer(self.state, x, y))
        if self.state.level_finished:
            return self.start_game()
        return self.state

    def pointer_move(self, x: float, y: float) -> State:
        return self._commit(record_pointer(self.state, x, y))

    def pointer_up(self) -> State:
        return self._commit(clear_pointer(self.state))
