from dataclasses import dataclass


@dataclass(frozen=True)
class Star:
    """Collectible marker. Removed from the world when the player touches it."""

    pass
