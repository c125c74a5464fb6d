"""Bridge between authoring specs / parsed directives and the ECS ``State``.

``add_entity`` materializes one :class:`EntitySpec` at a position;
``place_directives`` applies a parsed level; ``render_text`` goes the other
way and turns the static entities of a state back into level text.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tilt_maze.components import Position
from tilt_maze.config import DEFAULT_CONFIG, GameConfig
from tilt_maze.entity import Entity, new_entity_id
from tilt_maze.state import State
from tilt_maze.types import EntityID, EntityKind
from .entity_spec import EntitySpec
from .factories import FACTORIES
from .parser import LEVEL_ALPHABET, PlacementDirective

KIND_TO_LETTER: Dict[EntityKind, str] = {
    kind: letter for letter, kind in LEVEL_ALPHABET.items() if kind is not None
}


def add_entity(
    state: State, spec: EntitySpec, position: Optional[Position] = None
) -> Tuple[State, EntityID]:
    """
    Allocate a new EntityID, register it with the spec's kind and copy the present components.
    Off-world entities (the banner) are added with ``position=None``.
    """
    eid = new_entity_id()
    changes: Dict[str, Any] = {"entity": state.entity.set(eid, Entity(kind=spec.kind))}
    for store_name, comp in spec.iter_components():
        changes[store_name] = getattr(state, store_name).set(eid, comp)
    if position is not None:
        changes["position"] = state.position.set(eid, position)
    return replace(state, **changes), eid


def place_directives(
    state: State,
    directives: Iterable[PlacementDirective],
    config: GameConfig = DEFAULT_CONFIG,
) -> State:
    """Create one entity per directive; the player directive also records the start."""
    for directive in directives:
        spec = FACTORIES[directive.kind](config)
        state, _ = add_entity(state, spec, directive.position)
        if directive.kind == EntityKind.PLAYER:
            state = replace(state, player_start=directive.position)
    return state


def render_text(state: State, config: GameConfig = DEFAULT_CONFIG) -> str:
    """
    Render placed entities back into level text (top row first).
    The player is drawn at its recorded start position; positions are snapped to the grid.
    Banners and other off-grid entities are skipped.
    """
    cells: Dict[Tuple[int, int], str] = {}
    for eid, entity in state.entity.items():
        letter = KIND_TO_LETTER.get(entity.kind)
        if letter is None:
            continue
        if entity.kind == EntityKind.PLAYER:
            pos = state.player_start or state.position.get(eid)
        else:
            pos = state.position.get(eid)
        if pos is None:
            continue
        column = int(pos.x // config.cell_size)
        row = int(pos.y // config.cell_size)
        cells[(column, row)] = letter

    if not cells:
        return ""
    height = max(row for _, row in cells) + 1
    lines: List[str] = []
    for row in reversed(range(height)):
        columns = [c for c, r in cells if r == row]
        width = max(columns) + 1 if columns else 0
        lines.append("".join(cells.get((c, row), " ") for c in range(width)))
    return "\n".join(lines)
