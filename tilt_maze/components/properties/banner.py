from dataclasses import dataclass


@dataclass(frozen=True)
class Banner:
    """End-of-sequence message shown once no further level exists.

    Attributes:
        text: Message for the presentation layer, including the final score.
    """

    text: str
