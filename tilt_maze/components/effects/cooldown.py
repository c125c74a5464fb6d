from dataclasses import dataclass


@dataclass(frozen=True)
class Cooldown:
    """Remaining time before a used teleport becomes active again.

    The cooldown system decrements ``remaining`` by each tick's elapsed time;
    ``remaining <= 0`` means expired, at which point the component is removed
    and the teleport reactivated.

    Attributes:
        remaining: Time units left.
    """

    remaining: float
