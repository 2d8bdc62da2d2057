"""Game controller: owns the state, drives selection and cosmetic feedback."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from wordgarden.feedback import (
    SoundPlayer,
    WinPayload,
    get_mindfulness_prompt,
    play_audio,
    sound_for,
)
from wordgarden.garden import growth_class, growth_stage
from wordgarden.grid import Cell
from wordgarden.scheduler import ScheduledTask, Scheduler
from wordgarden.state import GameConfig, GameState
from wordgarden.validator import SelectionOutcome, SelectionResult, validate_selection

logger = logging.getLogger(__name__)


@dataclass
class Popup:
    """Overlay shown after a found word ("prompt") or on completion ("win")."""
    kind: str = "prompt"
    text: str = ""
    visible: bool = False
    win: WinPayload | None = None


class GameController:
    """Single owner of the active GameState.

    Rendering, audio and timers are adapter concerns: the controller
    records what should be shown and schedules delayed changes on its
    Scheduler, which adapters advance with tick().
    """

    def __init__(self, config: GameConfig | None = None,
                 scheduler: Scheduler | None = None,
                 sound_player: SoundPlayer | None = None,
                 seed: int | None = None) -> None:
        self.config = config or GameConfig()
        self.scheduler = scheduler or Scheduler()
        self.sound_player = sound_player
        self.popup = Popup()
        self.growth_stage = 0
        self.last_sound: str | None = None
        self._hide_task: ScheduledTask | None = None
        self._win_task: ScheduledTask | None = None
        self.state = self.new_game(seed)

    # -- lifecycle -----------------------------------------------------------

    def new_game(self, seed: int | None = None) -> GameState:
        """Cancel pending timers and rebuild the game from scratch."""
        logger.debug("Resetting game state")
        self.scheduler.cancel_all()
        self._hide_task = None
        self._win_task = None
        self.popup = Popup()
        self.last_sound = None
        self.state = GameState.create(self.config, random.Random(seed))
        self.growth_stage = growth_stage(0, len(self.config.words),
                                         self.config.growth_ladder)
        return self.state

    def tick(self, now: float | None = None) -> int:
        return self.scheduler.run_due(now)

    # -- selection -------------------------------------------------------------

    def start_selection(self, cell: Cell) -> None:
        self.state.selection.start(cell)

    def move_selection(self, cell: Cell) -> bool:
        return self.state.selection.extend(cell)

    def end_selection(self) -> SelectionResult:
        path = self.state.selection.end()
        result = validate_selection(self.state, path)
        if result.outcome is SelectionOutcome.NEWLY_FOUND:
            self._on_word_found(result)
        return result

    def select(self, cells: list[Cell]) -> SelectionResult:
        """Replay a whole drag gesture: start on the first cell, move through the rest."""
        if not cells:
            raise ValueError("Selection needs at least one cell")
        self.start_selection(cells[0])
        for cell in cells[1:]:
            self.move_selection(cell)
        return self.end_selection()

    # -- feedback --------------------------------------------------------------

    @property
    def growth_class(self) -> str:
        return growth_class(self.growth_stage)

    def is_won(self) -> bool:
        return self.state.is_won()

    def _on_word_found(self, result: SelectionResult) -> None:
        word = result.word
        self.last_sound = sound_for(word, self.config.sound_policy)
        play_audio(self.last_sound, self.sound_player)

        stage = growth_stage(self.state.found_count, len(self.config.words),
                             self.config.growth_ladder)
        if stage != self.growth_stage:
            logger.debug("Garden grows to stage %d", stage)
        self.growth_stage = stage

        self.show_mindfulness_moment(word)
        if result.won:
            self._win_task = self.scheduler.call_later(
                self.config.win_message_delay, self.display_win_message)

    def show_mindfulness_moment(self, word: str) -> None:
        if self._hide_task is not None:
            self._hide_task.cancel()
        self.popup = Popup("prompt", get_mindfulness_prompt(word), True)
        self._hide_task = self.scheduler.call_later(
            self.config.popup_hide_delay, self._hide_popup)

    def _hide_popup(self) -> None:
        self.popup.visible = False
        self._hide_task = None

    def display_win_message(self) -> None:
        if self._hide_task is not None:
            self._hide_task.cancel()
            self._hide_task = None
        payload = WinPayload()
        self.popup = Popup("win", payload.title, True, payload)
        self._win_task = None
