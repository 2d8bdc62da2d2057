"""CLI entry point for the Word Garden word search."""

from __future__ import annotations

import argparse
import logging
import re
import sys
import time

from wordgarden.constants import DEFAULT_GRID_SIZE, DEFAULT_WORDS
from wordgarden.controller import GameController
from wordgarden.display import print_game, print_placements, print_popup
from wordgarden.garden import LADDERS
from wordgarden.grid import Cell
from wordgarden.selection import SelectionError
from wordgarden.state import GameConfig
from wordgarden.validator import SelectionOutcome

OUTCOME_MESSAGES = {
    SelectionOutcome.TOO_SHORT: "Select at least two letters.",
    SelectionOutcome.ALREADY_FOUND: "Already found {word}.",
    SelectionOutcome.INVALID: '"{candidate}" is not on the list.',
    SelectionOutcome.NEWLY_FOUND: "Found {word}!",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Word Garden: a mindful word search",
    )
    parser.add_argument(
        "--size", "-s",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid size (default: {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument(
        "--words", "-w",
        type=str,
        help='Comma-separated words to hide, e.g. "ZEN,CALM,STONE"',
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible grid",
    )
    parser.add_argument(
        "--ladder",
        choices=sorted(LADDERS),
        default="five",
        help="Garden growth ladder (default: five)",
    )
    parser.add_argument(
        "--sound-policy",
        choices=["per-word", "single"],
        default="per-word",
        help="Play a sound per word or one shared sound",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Print where each word was hidden",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    return parser.parse_args(argv)


def parse_words(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_WORDS
    return tuple(w.upper() for w in re.split(r"[,\s]+", raw.strip()) if w)


def line_cells(start: Cell, end: Cell) -> list[Cell]:
    """Cells from start to end, stepping one cell at a time toward end.

    Off-line ends produce a bent path, which the selection path then rejects.
    """
    cells = [start]
    r, c = start
    while (r, c) != end and len(cells) <= max(abs(end[0] - start[0]), abs(end[1] - start[1])):
        r += (end[0] > r) - (end[0] < r)
        c += (end[1] > c) - (end[1] < c)
        cells.append((r, c))
    return cells


def parse_selection(raw: str) -> tuple[Cell, Cell] | None:
    nums = [int(n) for n in re.findall(r"-?\d+", raw)]
    if len(nums) != 4:
        return None
    return (nums[0], nums[1]), (nums[2], nums[3])


def announce_sound(path: str) -> None:
    print(f"  (sound: {path})")


def play_selection(controller: GameController, start: Cell, end: Cell) -> None:
    grid = controller.state.grid
    if not (grid.in_bounds(*start) and grid.in_bounds(*end)):
        print("Cells must be inside the grid.")
        return
    try:
        result = controller.select(line_cells(start, end))
    except SelectionError as e:
        print(f"Selection error: {e}")
        return
    message = OUTCOME_MESSAGES[result.outcome]
    print(message.format(word=result.word, candidate=result.candidate))
    if result.won:
        time.sleep(controller.config.win_message_delay)


def game_loop(controller: GameController, reveal: bool) -> None:
    while True:
        controller.tick()
        print_game(controller)
        print_popup(controller)
        if reveal:
            print_placements(controller)

        print("\nSelect with: start_row start_col end_row end_col  /  [N]ew / [Q]uit")
        try:
            choice = input("> ").strip().upper()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break

        if choice == "Q":
            print("Goodbye.")
            break
        if choice == "N":
            controller.new_game()
            continue

        cells = parse_selection(choice)
        if cells is None:
            print("Invalid input. Enter four numbers, e.g. 0 0 0 3")
            continue
        play_selection(controller, *cells)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig(
            grid_size=args.size,
            words=parse_words(args.words),
            growth_ladder=LADDERS[args.ladder],
            sound_policy=args.sound_policy,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    controller = GameController(config, sound_player=announce_sound, seed=args.seed)
    game_loop(controller, args.reveal)


if __name__ == "__main__":
    main()
