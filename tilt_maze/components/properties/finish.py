from dataclasses import dataclass


@dataclass(frozen=True)
class Finish:
    """Level exit marker. Touching it advances to the next numbered level."""

    pass
