"""Game configuration and the single per-game state value."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from wordgarden.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_WORDS,
    MAX_PLACEMENT_ATTEMPTS,
    POPUP_HIDE_DELAY,
    WIN_MESSAGE_DELAY,
)
from wordgarden.feedback import SoundPolicy
from wordgarden.garden import FIVE_STAGE, GrowthLadder
from wordgarden.grid import Cell, Grid, PlacedWord
from wordgarden.placement import build_grid
from wordgarden.selection import SelectionPath


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    words: tuple[str, ...] = DEFAULT_WORDS
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    growth_ladder: GrowthLadder = FIVE_STAGE
    sound_policy: SoundPolicy = "per-word"
    popup_hide_delay: float = POPUP_HIDE_DELAY
    win_message_delay: float = WIN_MESSAGE_DELAY

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.grid_size}")
        if self.max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        if self.sound_policy not in ("per-word", "single"):
            raise ValueError(f"Unknown sound policy {self.sound_policy!r}")
        # One entry per word, first occurrence wins
        words = tuple(dict.fromkeys(w.strip().upper() for w in self.words))
        if not words:
            raise ValueError("At least one target word is required")
        for w in words:
            if not w.isalpha():
                raise ValueError(f"Target words must be alphabetic, got {w!r}")
        # Normalize in place; the dataclass is frozen
        object.__setattr__(self, "words", words)


@dataclass
class GameState:
    """Everything that changes during one game. Rebuilt on every new game."""
    config: GameConfig
    grid: Grid
    unplaced_words: list[str] = field(default_factory=list)
    found_words: set[str] = field(default_factory=set)
    # Cells of the selection that found each word
    found_cells: dict[str, list[Cell]] = field(default_factory=dict)
    selection: SelectionPath = field(default_factory=SelectionPath)

    @property
    def target_words(self) -> tuple[str, ...]:
        return self.config.words

    @property
    def placed_words(self) -> list[PlacedWord]:
        return self.grid.placed_words

    @property
    def found_count(self) -> int:
        return len(self.found_words)

    def is_won(self) -> bool:
        return len(self.found_words) == len(self.target_words)

    @classmethod
    def create(cls, config: GameConfig,
               rng: random.Random | None = None) -> GameState:
        grid, report = build_grid(config.words, config.grid_size, rng,
                                  config.max_attempts)
        return cls(config=config, grid=grid, unplaced_words=list(report.unplaced))
