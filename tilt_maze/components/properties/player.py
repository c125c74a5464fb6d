"""Player marker component.

Presence of :class:`Player` designates the tilt-controlled token. At most one
entity carries it at any time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marker (no fields)."""

    pass
