"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game world at one instant: the entities of the current level, score, level
number, the in-flight player transition (if any) and the latest input
bookkeeping. All systems are pure functions that take a ``State`` plus inputs
(contacts, elapsed time, tilt samples) and return a *new* ``State``; only the
:class:`tilt_maze.game.GameController` holds a mutable reference to the
current snapshot.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not possess that
    component. ``entity`` is the master registry; an id missing from it is
    gone (collected star, dead player, previous level).
* ``transition`` replaces the original game's fire-and-forget animation
    closures with explicit data: while it is set the player is mid-death or
    mid-teleport, the player's body is not dynamic and contacts are ignored.
* ``level_finished`` is the terminal marker reached when the level provider
    has no resource for the requested level number.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pyrsistent import PMap, pmap

from tilt_maze.components import (
    Appearance,
    Banner,
    Body,
    Cooldown,
    Finish,
    Player,
    Position,
    Rewardable,
    Star,
    Teleport,
    Vortex,
    Wall,
)
from tilt_maze.entity import Entity
from tilt_maze.types import EntityID, PhaseName, TransitionKind, Vector


@dataclass(frozen=True)
class Phase:
    """One step of a transition sequence.

    Attributes:
        name: What the step does.
        duration: Time the step lasts; zero for instantaneous steps.
        target_position: Where the player ends up (MOVE interpolates to it,
            JUMP sets it immediately).
        target_scale: Scale the player ends up at (SHRINK / GROW).
    """

    name: PhaseName
    duration: float = 0.0
    target_position: Optional[Position] = None
    target_scale: Optional[float] = None


@dataclass(frozen=True)
class Transition:
    """In-flight death or teleport sequence of the player.

    Attributes:
        kind: Dying or teleporting.
        player_id: Player entity the sequence animates.
        phases: Ordered steps.
        index: Index of the current step.
        elapsed: Time spent in the current step.
        started: Whether the current step's entry actions already ran.
        origin: Player position when the current step started.
        origin_scale: Player scale when the current step started.
    """

    kind: TransitionKind
    player_id: EntityID
    phases: Tuple[Phase, ...]
    index: int = 0
    elapsed: float = 0.0
    started: bool = False
    origin: Optional[Position] = None
    origin_scale: float = 1.0

    @property
    def phase(self) -> Phase:
        return self.phases[self.index]

    @property
    def is_last_phase(self) -> bool:
        return self.index == len(self.phases) - 1


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of live entities and their kinds.
        appearance (PMap[EntityID, Appearance]): Sprite, scale and visibility.
        banner (PMap[EntityID, Banner]): End-of-sequence message entities.
        body (PMap[EntityID, Body]): Physics body descriptors.
        cooldown (PMap[EntityID, Cooldown]): Remaining teleport cooldowns.
        finish (PMap[EntityID, Finish]): Level exits.
        player (PMap[EntityID, Player]): The player token (at most one entry).
        position (PMap[EntityID, Position]): World positions.
        rewardable (PMap[EntityID, Rewardable]): Score deltas applied on contact.
        star (PMap[EntityID, Star]): Collectible stars.
        teleport (PMap[EntityID, Teleport]): Teleport endpoints.
        vortex (PMap[EntityID, Vortex]): Lethal hazards.
        wall (PMap[EntityID, Wall]): Static blocking cells.
        score (int): Accumulated score; may go negative.
        level (int): Current level number, starting at 1.
        level_finished (bool): True once no further level resource exists.
        transition (Transition | None): Player death / teleport in progress.
        player_start (Position | None): Where the player (re)spawns.
        gravity (Vector): World gravity last computed from input.
        pointer (Position | None): Last recorded pointer location.
        time (float): Total simulated time.
    """

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    ## Effects
    cooldown: PMap[EntityID, Cooldown] = pmap()
    ## Properties
    appearance: PMap[EntityID, Appearance] = pmap()
    banner: PMap[EntityID, Banner] = pmap()
    body: PMap[EntityID, Body] = pmap()
    finish: PMap[EntityID, Finish] = pmap()
    player: PMap[EntityID, Player] = pmap()
    position: PMap[EntityID, Position] = pmap()
    rewardable: PMap[EntityID, Rewardable] = pmap()
    star: PMap[EntityID, Star] = pmap()
    teleport: PMap[EntityID, Teleport] = pmap()
    vortex: PMap[EntityID, Vortex] = pmap()
    wall: PMap[EntityID, Wall] = pmap()

    # Status
    score: int = 0
    level: int = 1
    level_finished: bool = False
    transition: Optional[Transition] = None
    player_start: Optional[Position] = None

    # Input
    gravity: Vector = (0.0, 0.0)
    pointer: Optional[Position] = None

    time: float = 0.0

    @property
    def player_id(self) -> Optional[EntityID]:
        """Id of the current player entity, or ``None`` when there is none."""
        return next(iter(self.player.keys()), None)

    @property
    def is_transitioning(self) -> bool:
        """True while a death or teleport sequence is playing."""
        return self.transition is not None
