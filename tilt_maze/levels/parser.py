"""Text level parser.

Levels are rectangular-ish character grids, one text line per row. The last
line is row 0 (the bottom of the world), so the first line of the file ends
up with the highest y-coordinate. Each character maps to at most one entity:

====  ===========
char  entity
====  ===========
``x`` wall
``v`` vortex
``s`` star
``t`` teleport
``f`` finish
``p`` player start
`` `` empty
====  ===========

Rows may have different lengths; a short row simply yields fewer columns.
Any other character is a content error and aborts the load.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from tilt_maze.components import Position
from tilt_maze.types import EntityKind

CELL_SIZE = 64

LEVEL_ALPHABET: Dict[str, Optional[EntityKind]] = {
    "x": EntityKind.WALL,
    "v": EntityKind.VORTEX,
    "s": EntityKind.STAR,
    "t": EntityKind.TELEPORT,
    "f": EntityKind.FINISH,
    "p": EntityKind.PLAYER,
    " ": None,
}


class LevelFormatError(ValueError):
    """Base class for malformed level text."""


class InvalidLevelFormat(LevelFormatError):
    """Level text contains a character outside the level alphabet."""

    def __init__(
        self, character: str, row: int, column: int, level_number: Optional[int] = None
    ) -> None:
        self.character = character
        self.row = row
        self.column = column
        self.level_number = level_number
        where = "" if level_number is None else f" in level {level_number}"
        super().__init__(
            f"Unknown level letter {character!r} at row {row}, column {column}{where}"
        )


class PlayerStartError(LevelFormatError):
    """Level text does not contain exactly one player start."""

    def __init__(self, count: int, level_number: Optional[int] = None) -> None:
        self.count = count
        self.level_number = level_number
        prefix = "Level" if level_number is None else f"Level {level_number}"
        super().__init__(
            f"{prefix} must contain exactly one player start 'p', found {count}"
        )


@dataclass(frozen=True)
class PlacementDirective:
    """A single entity to place.

    Attributes:
        kind: Entity category.
        column: Grid column (0 at the left).
        row: Grid row (0 at the bottom).
        position: World coordinate of the cell centre.
    """

    kind: EntityKind
    column: int
    row: int
    position: Position


def cell_center(column: int, row: int, cell_size: int = CELL_SIZE) -> Position:
    """Return the world coordinate of the centre of grid cell ``(column, row)``."""
    return Position(cell_size * column + cell_size / 2, cell_size * row + cell_size / 2)


def split_rows(text: str) -> List[str]:
    """Split level text on ``\\n`` only.

    A single trailing newline adds no row, and a ``\\r`` ending a row (CRLF
    files) is dropped. Any other control or separator character stays in the
    row and fails the alphabet check.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse(
    text: str, level_number: Optional[int] = None, cell_size: int = CELL_SIZE
) -> List[PlacementDirective]:
    """Convert level text into placement directives.

    Args:
        text: Newline separated rows. A trailing newline does not add a row.
        level_number: Level being parsed; only used in error messages.
        cell_size: Side of a grid cell in world units.

    Returns:
        List[PlacementDirective]: One directive per non-empty cell, bottom row
        first, left to right.

    Raises:
        InvalidLevelFormat: A character is not in ``LEVEL_ALPHABET``.
        PlayerStartError: The level has no player start, or more than one.
    """
    directives: List[PlacementDirective] = []
    lines = split_rows(text)
    for row, line in enumerate(reversed(lines)):
        for column, letter in enumerate(line):
            if letter not in LEVEL_ALPHABET:
                raise InvalidLevelFormat(letter, row, column, level_number)
            kind = LEVEL_ALPHABET[letter]
            if kind is None:
                continue
            directives.append(
                PlacementDirective(
                    kind=kind,
                    column=column,
                    row=row,
                    position=cell_center(column, row, cell_size),
                )
            )

    player_count = sum(1 for d in directives if d.kind == EntityKind.PLAYER)
    if player_count != 1:
        raise PlayerStartError(player_count, level_number)
    return directives
