"""Teleport component.

Teleports are not paired at authoring time: the destination is chosen when
the player enters one, among the other teleports that are ``active``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Teleport:
    """Teleport endpoint.

    Attributes:
        active: False while the teleport is cooling down after use; inactive
            teleports neither trigger nor act as destinations.
    """

    active: bool = True
