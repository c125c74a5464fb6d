from dataclasses import dataclass


@dataclass(frozen=True)
class Rewardable:
    """Score change applied when the player touches the entity.

    Attributes:
        amount:
            Signed score delta (stars and finish zones are positive, vortices
            negative).
    """

    amount: int
