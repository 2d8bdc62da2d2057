"""Square letter grid for hiding words along four directions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from wordgarden.constants import ALPHABET

Cell = tuple[int, int]


class Direction(Enum):
    HORIZONTAL = (0, 1)            # row stays same, col increases
    VERTICAL = (1, 0)              # row increases, col stays same
    DIAGONAL_DOWN_RIGHT = (1, 1)
    DIAGONAL_DOWN_LEFT = (1, -1)

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]


_SHORT_NAMES = {
    Direction.HORIZONTAL: "H",
    Direction.VERTICAL: "V",
    Direction.DIAGONAL_DOWN_RIGHT: "D1",
    Direction.DIAGONAL_DOWN_LEFT: "D2",
}


@dataclass
class PlacedWord:
    """Record of a word placement on the grid."""
    word: str
    row: int
    col: int
    direction: Direction
    cells: list[Cell] = field(default_factory=list)


class Grid:
    """Fixed-size square grid of letters; empty cells hold None until filled."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: list[list[str | None]] = [[None] * size for _ in range(size)]
        self.placed_words: list[PlacedWord] = []

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> str | None:
        return self.cells[row][col]

    def is_full(self) -> bool:
        return all(letter is not None for line in self.cells for letter in line)

    def _word_positions(self, word: str, row: int, col: int,
                        direction: Direction) -> list[Cell]:
        dr, dc = direction.value
        return [(row + i * dr, col + i * dc) for i in range(len(word))]

    def can_place_word(self, word: str, row: int, col: int,
                       direction: Direction) -> bool:
        """Check whether a word fits starting at (row, col).

        Every target cell must lie inside the grid and be either empty or
        already hold the same letter, which lets words cross each other.
        """
        for i, (r, c) in enumerate(self._word_positions(word, row, col, direction)):
            if not self.in_bounds(r, c):
                return False
            existing = self.cells[r][c]
            if existing is not None and existing != word[i]:
                return False
        return True

    def place_word(self, word: str, row: int, col: int,
                   direction: Direction) -> PlacedWord:
        """Write a word into the grid. Callers check can_place_word first."""
        positions = self._word_positions(word, row, col, direction)
        for (r, c), letter in zip(positions, word):
            self.cells[r][c] = letter
        placed = PlacedWord(word, row, col, direction, positions)
        self.placed_words.append(placed)
        return placed

    def fill_empty_cells(self, rng: random.Random | None = None) -> int:
        """Give every empty cell a random letter. Returns the number filled."""
        rng = rng or random.Random()
        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] is None:
                    self.cells[r][c] = rng.choice(ALPHABET)
                    filled += 1
        return filled

    def read(self, cells: list[Cell]) -> str:
        """Concatenate the letters at the given cells, in order."""
        return "".join(self.cells[r][c] or "" for r, c in cells)

    def rows(self) -> list[str]:
        return ["".join(letter or "." for letter in line) for line in self.cells]


def initialize_grid(size: int) -> Grid:
    """Allocate an empty size x size grid."""
    return Grid(size)
