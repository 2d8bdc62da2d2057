"""Check a finished selection path against the target words."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from wordgarden.grid import Cell
from wordgarden.state import GameState

logger = logging.getLogger(__name__)


class SelectionOutcome(Enum):
    TOO_SHORT = "too_short"
    NEWLY_FOUND = "newly_found"
    ALREADY_FOUND = "already_found"
    INVALID = "invalid"


@dataclass
class SelectionResult:
    outcome: SelectionOutcome
    word: str | None = None
    candidate: str = ""
    cells: list[Cell] = field(default_factory=list)
    won: bool = False


def match_word(candidate: str, targets: tuple[str, ...]) -> str | None:
    """Target spelled by the candidate, forwards first, then reversed."""
    if candidate in targets:
        return candidate
    reverse = candidate[::-1]
    if reverse in targets:
        return reverse
    return None


def validate_selection(state: GameState, path: list[Cell]) -> SelectionResult:
    """Classify a finished path and record a newly found word in the state."""
    cells = list(path)
    if len(cells) < 2:
        return SelectionResult(SelectionOutcome.TOO_SHORT, cells=cells)

    if not all(state.grid.in_bounds(r, c) for r, c in cells):
        logger.debug("Selection leaves the grid: %s", cells)
        return SelectionResult(SelectionOutcome.INVALID, cells=cells)

    candidate = state.grid.read(cells)
    logger.debug('Validating: "%s" / "%s"', candidate, candidate[::-1])
    word = match_word(candidate, state.target_words)

    if word is None:
        return SelectionResult(SelectionOutcome.INVALID, candidate=candidate, cells=cells)
    if word in state.found_words:
        return SelectionResult(SelectionOutcome.ALREADY_FOUND, word, candidate, cells)

    state.found_words.add(word)
    state.found_cells[word] = cells
    logger.debug("Word found: %s (%d/%d)", word, state.found_count,
                 len(state.target_words))
    return SelectionResult(SelectionOutcome.NEWLY_FOUND, word, candidate, cells,
                           won=state.is_won())
