"""Terminal rendering of the letter grid, word list and garden."""

from __future__ import annotations

from wordgarden.controller import GameController
from wordgarden.grid import Cell, Grid

GARDEN_ART = ["  .  ", "  ,  ", " \\|/ ", " \\*/ ", "\\*@*/"]


def render_grid(grid: Grid, highlight: set[Cell] | None = None) -> str:
    """Render the grid with row/column headers; highlighted cells are lowercase."""
    highlight = highlight or set()
    lines: list[str] = []

    header = "    " + "".join(f"{c:3d}" for c in range(grid.size))
    lines.append(header)
    lines.append("    " + "---" * grid.size)

    for row in range(grid.size):
        parts: list[str] = [f"{row:3d}|"]
        for col in range(grid.size):
            letter = grid.get(row, col) or "."
            if (row, col) in highlight:
                letter = letter.lower()
            parts.append(f"  {letter}")
        lines.append("".join(parts))

    return "\n".join(lines)


def render_word_list(words: tuple[str, ...], found: set[str]) -> str:
    return "  ".join(f"[{w}]" if w in found else w for w in words)


def render_garden(stage: int) -> str:
    art = GARDEN_ART[min(stage, len(GARDEN_ART) - 1)]
    return f"Garden: {art} (stage {stage})"


def print_game(controller: GameController) -> None:
    """Print the board, word list and garden for the current game."""
    state = controller.state
    found_cells = {cell for cells in state.found_cells.values() for cell in cells}
    print("\n" + render_grid(state.grid, found_cells))
    print("\nFind: " + render_word_list(state.target_words, state.found_words))
    print(f"Found {state.found_count}/{len(state.target_words)}")
    print(render_garden(controller.growth_stage))


def print_popup(controller: GameController) -> None:
    popup = controller.popup
    if not popup.visible:
        return
    if popup.kind == "win" and popup.win is not None:
        print(f"\n*** {popup.win.title} {popup.win.message} ***")
        print(f"    {popup.win.action} [N]ew game / [Q]uit")
    else:
        print(f"\n  ~ {popup.text} ~")


def print_placements(controller: GameController) -> None:
    """Print where each word was hidden, and any that did not fit."""
    state = controller.state
    for pw in state.placed_words:
        print(f"  {pw.word:<10s} at ({pw.row},{pw.col}) {pw.direction.short_name}")
    if state.unplaced_words:
        print(f"  ** Could not place: {', '.join(state.unplaced_words)} **")
