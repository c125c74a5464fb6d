"""Effect components.

Effects are temporary, time-limited decorations of an entity that a system
ticks down and removes once expired. The only effect in the game is the
teleport :class:`Cooldown`.
"""

from .cooldown import Cooldown

__all__ = ["Cooldown"]
