"""Convenience factory functions for authoring ``EntitySpec`` objects.

Each helper returns a preconfigured :class:`EntitySpec` for one level
letter (plus the end-of-sequence banner). Physics bodies follow the original
bit-mask setup: static sensors for stars, vortices, finishes and teleports, a
static rectangle for walls and a dynamic circle for the player that only
collides with walls.
"""

from __future__ import annotations

from typing import Callable, Dict

from tilt_maze.components.properties import (
    Appearance,
    AppearanceName,
    Banner,
    Body,
    CollisionCategory,
    Finish,
    PLAYER_CONTACTS,
    Player,
    Rewardable,
    Star,
    Teleport,
    Vortex,
    Wall,
)
from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.types import EntityKind
from .entity_spec import EntitySpec


def _sensor_body(category: CollisionCategory, radius: float) -> Body:
    return Body(
        category=category,
        contact_mask=CollisionCategory.PLAYER,
        collision_mask=CollisionCategory.NONE,
        dynamic=False,
        radius=radius,
    )


def create_player(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Tilt-controlled player token."""
    return EntitySpec(
        kind=EntityKind.PLAYER,
        appearance=Appearance(name=AppearanceName.PLAYER),
        body=Body(
            category=CollisionCategory.PLAYER,
            contact_mask=PLAYER_CONTACTS,
            collision_mask=CollisionCategory.WALL,
            dynamic=True,
            radius=config.player_radius,
        ),
        player=Player(),
    )


def create_wall(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Static blocking cell."""
    return EntitySpec(
        kind=EntityKind.WALL,
        appearance=Appearance(name=AppearanceName.BLOCK),
        body=Body(category=CollisionCategory.WALL),
        wall=Wall(),
    )


def create_vortex(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Spinning hazard costing ``vortex_penalty`` points."""
    return EntitySpec(
        kind=EntityKind.VORTEX,
        appearance=Appearance(name=AppearanceName.VORTEX, rotating=True),
        body=_sensor_body(CollisionCategory.VORTEX, config.item_radius),
        rewardable=Rewardable(amount=-config.vortex_penalty),
        vortex=Vortex(),
    )


def create_star(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Collectible star worth ``star_reward`` points."""
    return EntitySpec(
        kind=EntityKind.STAR,
        appearance=Appearance(name=AppearanceName.STAR),
        body=_sensor_body(CollisionCategory.STAR, config.item_radius),
        rewardable=Rewardable(amount=config.star_reward),
        star=Star(),
    )


def create_teleport(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Active teleport endpoint (paired at trigger time)."""
    return EntitySpec(
        kind=EntityKind.TELEPORT,
        appearance=Appearance(name=AppearanceName.TELEPORT, rotating=True),
        body=_sensor_body(CollisionCategory.TELEPORT, config.item_radius),
        teleport=Teleport(active=True),
    )


def create_finish(config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """Level exit worth ``finish_reward`` points."""
    return EntitySpec(
        kind=EntityKind.FINISH,
        appearance=Appearance(name=AppearanceName.FINISH),
        body=_sensor_body(CollisionCategory.FINISH, config.item_radius),
        rewardable=Rewardable(amount=config.finish_reward),
        finish=Finish(),
    )


def create_banner(score: int, config: GameConfig = DEFAULT_CONFIG) -> EntitySpec:
    """End-of-sequence message carrying the final score (no physics body)."""
    return EntitySpec(
        kind=EntityKind.BANNER,
        appearance=Appearance(name=AppearanceName.BANNER),
        banner=Banner(text=config.banner_template.format(score=score)),
    )


FACTORIES: Dict[EntityKind, Callable[[GameConfig], EntitySpec]] = {
    EntityKind.WALL: create_wall,
    EntityKind.VORTEX: create_vortex,
    EntityKind.STAR: create_star,
    EntityKind.TELEPORT: create_teleport,
    EntityKind.FINISH: create_finish,
    EntityKind.PLAYER: create_player,
}
