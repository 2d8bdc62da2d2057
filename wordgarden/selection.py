"""Drag-selection path: a straight, backtrackable line of adjacent cells."""

from __future__ import annotations

from enum import Enum

from wordgarden.grid import Cell


class SelectionError(Exception):
    """Raised when a gesture event arrives in the wrong state."""


class SelectionState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


def are_cells_adjacent(a: Cell | None, b: Cell | None) -> bool:
    """True when the cells touch, including diagonally, and are not the same cell."""
    if a is None or b is None:
        return False
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return dr <= 1 and dc <= 1 and not (dr == 0 and dc == 0)


class SelectionPath:
    """Tracks the cells of the current drag gesture.

    The first two cells fix a step vector; every later cell must continue
    that vector. Revisiting an earlier cell cuts the path back to it.
    """

    def __init__(self) -> None:
        self.cells: list[Cell] = []
        self.state = SelectionState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.state is SelectionState.DRAGGING

    @property
    def step(self) -> tuple[int, int] | None:
        """Direction vector fixed by the first two cells, if any."""
        if len(self.cells) < 2:
            return None
        (r0, c0), (r1, c1) = self.cells[0], self.cells[1]
        return r1 - r0, c1 - c0

    def start(self, cell: Cell) -> None:
        if self.is_dragging:
            raise SelectionError("Selection already in progress")
        self.cells = [cell]
        self.state = SelectionState.DRAGGING

    def extend(self, cell: Cell) -> bool:
        """Offer the cell under the pointer. Returns True if the path changed."""
        if not self.is_dragging:
            return False
        last = self.cells[-1]
        if cell == last:
            return False

        if cell in self.cells:
            # Backtrack to the earlier occurrence
            del self.cells[self.cells.index(cell) + 1:]
            return True

        if not are_cells_adjacent(last, cell):
            return False
        if len(self.cells) >= 2:
            if (cell[0] - last[0], cell[1] - last[1]) != self.step:
                return False
        self.cells.append(cell)
        return True

    def end(self) -> list[Cell]:
        """Finish the gesture, returning the path and resetting to idle."""
        if not self.is_dragging:
            raise SelectionError("No selection in progress")
        finished = self.cells
        self.cells = []
        self.state = SelectionState.IDLE
        return finished

    def cancel(self) -> None:
        self.cells = []
        self.state = SelectionState.IDLE
