"""Gameplay tuning constants.

All literals of the original game (cell size, rewards, animation timings,
input scaling) live on a single frozen :class:`GameConfig`. The defaults
reproduce the original behavior; hosts may pass a customised instance to the
controller and every system reads it from there.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Game constants.

    Attributes:
        cell_size: Side of a level grid cell in world units.
        star_reward: Score gained per collected star.
        vortex_penalty: Score lost per vortex death (positive number).
        finish_reward: Score gained on reaching a finish zone.
        phase_duration: Duration of each timed transition phase.
        shrink_scale: Scale the player shrinks to before vanishing.
        teleport_cooldown: Time a used teleport stays inactive.
        pointer_divisor: Pointer offset divisor for pointer-relative gravity.
        tilt_scale: Accelerometer multiplier for tilt gravity.
        player_radius: Collision radius of the player body.
        item_radius: Collision radius of stars, vortices, finishes, teleports.
        banner_template: End-of-sequence text; ``{score}`` is substituted.
    """

    cell_size: int = 64
    star_reward: int = 1
    vortex_penalty: int = 1
    finish_reward: int = 10
    phase_duration: float = 0.25
    shrink_scale: float = 0.0001
    teleport_cooldown: float = 5.0
    pointer_divisor: float = 100.0
    tilt_scale: float = 50.0
    player_radius: float = 32.0
    item_radius: float = 32.0
    banner_template: str = (
        "Game Over!\nScore: {score}.\nTouch the screen to play again"
    )

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive: {self.cell_size}")
        if self.phase_duration < 0:
            raise ValueError(
                f"phase_duration must not be negative: {self.phase_duration}"
            )
        if self.teleport_cooldown < 0:
            raise ValueError(
                f"teleport_cooldown must not be negative: {self.teleport_cooldown}"
            )
        if self.pointer_divisor == 0:
            raise ValueError("pointer_divisor must be non-zero")

    @property
    def half_cell(self) -> float:
        return self.cell_size / 2


DEFAULT_CONFIG = GameConfig()
