"""Randomized, retry-bounded placement of target words into a grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from wordgarden.constants import MAX_PLACEMENT_ATTEMPTS
from wordgarden.grid import Direction, Grid, PlacedWord, initialize_grid

logger = logging.getLogger(__name__)

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


@dataclass
class PlacementReport:
    """Outcome of a placement pass. Unplaced words are a shortfall, not an error."""
    placed: list[PlacedWord] = field(default_factory=list)
    unplaced: list[str] = field(default_factory=list)

    @property
    def shortfall(self) -> int:
        return len(self.unplaced)


def start_range(direction: Direction, length: int,
                size: int) -> tuple[int, int, int, int] | None:
    """Legal (min_row, max_row, min_col, max_col) starts keeping the word in bounds.

    Returns None when the word cannot fit in this direction at all.
    """
    dr, dc = direction.value
    min_row, max_row = 0, size - 1
    min_col, max_col = 0, size - 1
    if dr > 0:
        max_row = size - length
    if dc > 0:
        max_col = size - length
    if dc < 0:
        min_col = length - 1
    if max_row < min_row or max_col < min_col:
        return None
    return min_row, max_row, min_col, max_col


def _try_place(grid: Grid, word: str, rng: random.Random,
               max_attempts: int) -> PlacedWord | None:
    for _ in range(max_attempts):
        direction = rng.choice(DIRECTIONS)
        bounds = start_range(direction, len(word), grid.size)
        if bounds is None:
            continue
        min_row, max_row, min_col, max_col = bounds
        row = rng.randint(min_row, max_row)
        col = rng.randint(min_col, max_col)
        if grid.can_place_word(word, row, col, direction):
            return grid.place_word(word, row, col, direction)
    return None


def place_words(grid: Grid, words: list[str] | tuple[str, ...],
                rng: random.Random | None = None,
                max_attempts: int = MAX_PLACEMENT_ATTEMPTS) -> PlacementReport:
    """Place each word at a random legal position, giving up after max_attempts."""
    rng = rng or random.Random()
    report = PlacementReport()
    for word in words:
        placed = _try_place(grid, word, rng, max_attempts)
        if placed is None:
            report.unplaced.append(word)
        else:
            report.placed.append(placed)
    if report.unplaced:
        logger.warning("Placed %d/%d words; could not place %s",
                       len(report.placed), len(words), ", ".join(report.unplaced))
    return report


def build_grid(words: list[str] | tuple[str, ...], size: int,
               rng: random.Random | None = None,
               max_attempts: int = MAX_PLACEMENT_ATTEMPTS) -> tuple[Grid, PlacementReport]:
    """Allocate, pack and fill a fresh grid."""
    rng = rng or random.Random()
    grid = initialize_grid(size)
    report = place_words(grid, words, rng, max_attempts)
    grid.fill_empty_cells(rng)
    return grid, report
