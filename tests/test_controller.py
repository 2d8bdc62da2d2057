"""Tests for the game controller: selection flow, popups, timers and reset."""

from __future__ import annotations

import pytest

from wordgarden.garden import THREE_STAGE
from wordgarden.grid import Direction
from wordgarden.scheduler import Scheduler
from wordgarden.selection import SelectionError
from wordgarden.state import GameConfig
from wordgarden.controller import GameController
from wordgarden.validator import SelectionOutcome


@pytest.fixture
def played() -> list[str]:
    return []


@pytest.fixture
def controller(clock, played, state_factory) -> GameController:
    """Controller whose game has ZEN on row 0 and CALM down column 4."""
    ctrl = GameController(GameConfig(grid_size=5, words=("ZEN", "CALM")),
                          scheduler=Scheduler(clock), sound_player=played.append, seed=3)
    ctrl.state = state_factory(
        ("ZEN", "CALM"), 5,
        [("ZEN", 0, 0, Direction.HORIZONTAL), ("CALM", 1, 4, Direction.VERTICAL)],
        filler="Q",
    )
    return ctrl


def find_zen(ctrl: GameController):
    return ctrl.select([(0, 0), (0, 1), (0, 2)])


def find_calm(ctrl: GameController):
    return ctrl.select([(1, 4), (2, 4), (3, 4), (4, 4)])


class TestConfig:
    def test_words_normalized(self) -> None:
        config = GameConfig(words=(" zen", "Calm "))
        assert config.words == ("ZEN", "CALM")

    def test_repeated_words_collapse(self) -> None:
        config = GameConfig(words=("ZEN", "zen", "CALM", " Zen "))
        assert config.words == ("ZEN", "CALM")

    def test_repeated_words_still_winnable(self, clock, state_factory) -> None:
        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN", "zen")),
                              scheduler=Scheduler(clock))
        ctrl.state = state_factory(ctrl.config.words, 5,
                                   [("ZEN", 0, 0, Direction.HORIZONTAL)], filler="Q")
        result = find_zen(ctrl)
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert result.won

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 0},
        {"words": ()},
        {"words": ("ZEN", "NO WAY")},
        {"max_attempts": 0},
        {"sound_policy": "loud"},
    ])
    def test_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            GameConfig(**kwargs)


class TestNewGame:
    def test_fresh_state(self) -> None:
        ctrl = GameController(seed=1)
        state = ctrl.state
        assert state.grid.size == 10
        assert state.grid.is_full()
        assert state.found_count == 0
        assert len(state.placed_words) + len(state.unplaced_words) == 8
        assert ctrl.growth_stage == 0
        assert not ctrl.popup.visible

    def test_seed_reproducible(self) -> None:
        assert GameController(seed=9).state.grid.rows() == GameController(seed=9).state.grid.rows()

    def test_reset_clears_progress_and_timers(self, controller: GameController, clock) -> None:
        find_zen(controller)
        assert controller.popup.visible
        old_state = controller.state

        controller.new_game(seed=5)
        assert controller.state is not old_state
        assert controller.state.found_words == set()
        assert not controller.popup.visible
        assert controller.scheduler.pending() == []
        assert controller.growth_stage == 0


class TestSelectionFlow:
    def test_drag_events(self, controller: GameController) -> None:
        controller.start_selection((0, 2))
        assert controller.move_selection((0, 1))
        assert not controller.move_selection((1, 1))
        assert controller.move_selection((0, 0))
        result = controller.end_selection()
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert result.word == "ZEN"
        assert not controller.state.selection.is_dragging

    def test_end_without_start(self, controller: GameController) -> None:
        with pytest.raises(SelectionError):
            controller.end_selection()

    def test_select_requires_cells(self, controller: GameController) -> None:
        with pytest.raises(ValueError):
            controller.select([])

    def test_bent_drag_is_cut_to_straight_line(self, controller: GameController) -> None:
        # The turn at (1,1) is ignored and the line continues to (0,2)
        result = controller.select([(0, 0), (0, 1), (1, 1), (0, 2)])
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert result.cells == [(0, 0), (0, 1), (0, 2)]

    def test_found_cells_follow_selection(self, clock, state_factory) -> None:
        ctrl = GameController(GameConfig(grid_size=3, words=("ZEN",)),
                              scheduler=Scheduler(clock))
        # ZEN only appears as filler letters; placement fell short
        state = state_factory(("ZEN",), 3, [], filler="Q")
        state.grid.cells[0] = ["Z", "E", "N"]
        state.unplaced_words = ["ZEN"]
        ctrl.state = state

        result = ctrl.select([(0, 2), (0, 1), (0, 0)])
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert ctrl.state.found_cells == {"ZEN": [(0, 2), (0, 1), (0, 0)]}

    def test_new_game_clears_found_cells(self, controller: GameController) -> None:
        find_zen(controller)
        assert controller.state.found_cells
        controller.new_game(seed=2)
        assert controller.state.found_cells == {}

    def test_invalid_has_no_feedback(self, controller: GameController, played) -> None:
        result = controller.select([(1, 0), (1, 1)])
        assert result.outcome is SelectionOutcome.INVALID
        assert played == []
        assert not controller.popup.visible


class TestFeedback:
    def test_found_word_plays_sound_and_shows_prompt(self, controller: GameController,
                                                     played) -> None:
        find_zen(controller)
        assert played == ["sounds/zen.mp3"]
        assert controller.popup.visible
        assert controller.popup.kind == "prompt"
        assert controller.popup.text == "Seek Zen..."

    def test_already_found_is_silent(self, controller: GameController, played) -> None:
        find_zen(controller)
        result = find_zen(controller)
        assert result.outcome is SelectionOutcome.ALREADY_FOUND
        assert played == ["sounds/zen.mp3"]

    def test_popup_hides_after_delay(self, controller: GameController, clock) -> None:
        find_zen(controller)
        clock.advance(4.0)
        controller.tick()
        assert controller.popup.visible
        clock.advance(1.5)
        controller.tick()
        assert not controller.popup.visible

    def test_new_popup_restarts_hide_timer(self, clock, played, state_factory) -> None:
        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN", "CALM", "STONE")),
                              scheduler=Scheduler(clock), sound_player=played.append)
        ctrl.state = state_factory(
            ("ZEN", "CALM", "STONE"), 5,
            [("ZEN", 0, 0, Direction.HORIZONTAL), ("CALM", 1, 4, Direction.VERTICAL)],
            filler="Q",
        )
        find_zen(ctrl)
        clock.advance(4.0)
        find_calm(ctrl)
        clock.advance(2.0)
        ctrl.tick()
        # First popup's hide was cancelled; the CALM popup is still up
        assert ctrl.popup.visible
        assert ctrl.popup.text == "Find a moment of calm..."
        assert len(ctrl.scheduler.pending()) == 1

    def test_audio_failure_does_not_break_game(self, clock, state_factory) -> None:
        def blocked(path: str) -> None:
            raise PermissionError(path)

        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN",)),
                              scheduler=Scheduler(clock), sound_player=blocked)
        ctrl.state = state_factory(("ZEN",), 5, [("ZEN", 0, 0, Direction.HORIZONTAL)],
                                   filler="Q")
        result = find_zen(ctrl)
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert ctrl.state.found_words == {"ZEN"}

    def test_crashing_player_still_reaches_win(self, clock, state_factory) -> None:
        def crashing(path: str) -> None:
            raise RuntimeError("decoder crashed")

        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN",)),
                              scheduler=Scheduler(clock), sound_player=crashing)
        ctrl.state = state_factory(("ZEN",), 5, [("ZEN", 0, 0, Direction.HORIZONTAL)],
                                   filler="Q")
        result = find_zen(ctrl)
        assert result.outcome is SelectionOutcome.NEWLY_FOUND
        assert result.won
        assert ctrl.popup.visible
        assert ctrl.popup.text == "Seek Zen..."

        clock.advance(1.0)
        ctrl.tick()
        assert ctrl.popup.kind == "win"
        assert ctrl.popup.visible

    def test_single_sound_policy(self, clock, played, state_factory) -> None:
        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN",), sound_policy="single"),
                              scheduler=Scheduler(clock), sound_player=played.append)
        ctrl.state = state_factory(("ZEN",), 5, [("ZEN", 0, 0, Direction.HORIZONTAL)],
                                   filler="Q")
        find_zen(ctrl)
        assert played == ["sounds/peacock.mp3"]

    def test_growth_follows_ladder(self, clock, state_factory) -> None:
        ctrl = GameController(GameConfig(grid_size=5, words=("ZEN", "CALM"),
                                         growth_ladder=THREE_STAGE),
                              scheduler=Scheduler(clock))
        ctrl.state = state_factory(
            ("ZEN", "CALM"), 5,
            [("ZEN", 0, 0, Direction.HORIZONTAL), ("CALM", 1, 4, Direction.VERTICAL)],
            filler="Q",
        )
        find_zen(ctrl)
        assert ctrl.growth_stage == 1
        assert ctrl.growth_class == "growth-stage-1"
        find_calm(ctrl)
        assert ctrl.growth_stage == 2


class TestWin:
    def test_win_message_after_delay(self, controller: GameController, clock) -> None:
        find_zen(controller)
        result = find_calm(controller)
        assert result.won
        assert controller.is_won()
        assert controller.popup.kind == "prompt"

        clock.advance(0.5)
        controller.tick()
        assert controller.popup.kind == "prompt"

        clock.advance(0.3)
        controller.tick()
        assert controller.popup.kind == "win"
        assert controller.popup.visible
        assert controller.popup.win.title == "Harmony Found."

    def test_win_popup_stays(self, controller: GameController, clock) -> None:
        find_zen(controller)
        find_calm(controller)
        clock.advance(1.0)
        controller.tick()
        clock.advance(10.0)
        controller.tick()
        assert controller.popup.kind == "win"
        assert controller.popup.visible

    def test_reset_before_win_message_cancels_it(self, controller: GameController,
                                                 clock) -> None:
        find_zen(controller)
        find_calm(controller)
        controller.new_game(seed=1)
        clock.advance(1.0)
        controller.tick()
        assert not controller.popup.visible
        assert controller.popup.kind == "prompt"
