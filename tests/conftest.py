"""Shared fixtures for Word Garden tests."""

from __future__ import annotations

import random

import pytest

from wordgarden.grid import Direction, Grid
from wordgarden.state import GameConfig, GameState


class FakeClock:
    """Manually advanced clock for scheduler tests."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_state(words: tuple[str, ...], size: int,
               placements: list[tuple[str, int, int, Direction]],
               filler: str | None = None) -> GameState:
    """Game state with words forced at known positions instead of random ones.

    Remaining cells are filled with `filler` if given, otherwise seeded random letters.
    """
    grid = Grid(size)
    for word, row, col, direction in placements:
        assert grid.can_place_word(word, row, col, direction)
        grid.place_word(word, row, col, direction)
    if filler is not None:
        for r in range(size):
            for c in range(size):
                if grid.get(r, c) is None:
                    grid.cells[r][c] = filler
    else:
        grid.fill_empty_cells(random.Random(0))
    return GameState(config=GameConfig(grid_size=size, words=words), grid=grid)


@pytest.fixture
def state_factory():
    return make_state


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ab_state() -> GameState:
    """4x4 grid with AB at (0,0) horizontal; the rest is X."""
    return make_state(("AB",), 4, [("AB", 0, 0, Direction.HORIZONTAL)], filler="X")


@pytest.fixture
def zen_state() -> GameState:
    """ZEN across the top row of a 5x5 grid; the rest is Q."""
    return make_state(("ZEN",), 5, [("ZEN", 0, 0, Direction.HORIZONTAL)], filler="Q")


@pytest.fixture
def small_config() -> GameConfig:
    return GameConfig(grid_size=6, words=("ZEN", "CALM", "STONE"))
