"""Word Garden web application: Flask backend."""
from __future__ import annotations

import sys
import uuid
from pathlib import Path

# Ensure project root is on sys.path so `wordgarden.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, render_template, request

from wordgarden.controller import GameController
from wordgarden.garden import LADDERS
from wordgarden.grid import Cell
from wordgarden.selection import SelectionError
from wordgarden.state import GameConfig
from wordgarden.validator import SelectionOutcome

app = Flask(__name__)

# Keep the grid small enough to render and large enough for the word list
MAX_GRID_SIZE = 20

# Game controllers keyed by session UUID
GAMES: dict[str, GameController] = {}


def _parse_cells(raw) -> list[Cell] | None:
    """Turn [[row, col], ...] into cell tuples, or None if malformed."""
    if not isinstance(raw, list) or not raw:
        return None
    cells: list[Cell] = []
    for item in raw:
        if (not isinstance(item, (list, tuple)) or len(item) != 2
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in item)):
            return None
        cells.append((item[0], item[1]))
    return cells


def game_to_json(controller: GameController) -> dict:
    """Serialize a game to the JSON format expected by the frontend."""
    state = controller.state
    popup = controller.popup
    popup_json: dict = {"visible": popup.visible, "kind": popup.kind, "text": popup.text}
    if popup.win is not None:
        popup_json["win"] = {
            "title": popup.win.title,
            "message": popup.win.message,
            "action": popup.win.action,
        }
    return {
        "size": state.grid.size,
        "grid": [list(row) for row in state.grid.rows()],
        "words": list(state.target_words),
        "found": sorted(state.found_words),
        "found_cells": sorted(
            {(r, c) for cells in state.found_cells.values() for r, c in cells}
        ),
        "unplaced": list(state.unplaced_words),
        "growth_stage": controller.growth_stage,
        "growth_class": controller.growth_class,
        "popup": popup_json,
        "popup_hide_delay": controller.config.popup_hide_delay,
        "win_message_delay": controller.config.win_message_delay,
        "won": controller.is_won(),
    }


def _get_game(session_id: str) -> GameController | None:
    return GAMES.get(session_id)


@app.route("/")
def index():
    return render_template("index.html")


@app.route("/new", methods=["POST"])
def new_game():
    data = request.get_json(silent=True) or {}
    session_id = data.get("session_id") or ""
    seed = data.get("seed")
    if seed is not None and not isinstance(seed, int):
        return jsonify({"error": "seed must be an integer"}), 400

    controller = _get_game(session_id)
    if controller is None:
        size = data.get("size", 10)
        if not isinstance(size, int) or not 1 <= size <= MAX_GRID_SIZE:
            return jsonify({"error": f"size must be an integer from 1 to {MAX_GRID_SIZE}"}), 400
        ladder = LADDERS.get(data.get("ladder", "five"))
        if ladder is None:
            return jsonify({"error": "Unknown growth ladder"}), 400
        try:
            config = GameConfig(grid_size=size, growth_ladder=ladder,
                                sound_policy=data.get("sound_policy", "per-word"))
        except ValueError as e:
            return jsonify({"error": f"Invalid configuration: {e}"}), 400
        session_id = str(uuid.uuid4())
        controller = GameController(config, seed=seed)
        GAMES[session_id] = controller
    else:
        controller.new_game(seed)

    if controller.state.unplaced_words:
        app.logger.warning("Session %s: could not place %s", session_id,
                           ", ".join(controller.state.unplaced_words))
    result = game_to_json(controller)
    result["session_id"] = session_id
    return jsonify(result)


@app.route("/select", methods=["POST"])
def select():
    data = request.get_json(silent=True) or {}
    session_id = data.get("session_id", "")
    controller = _get_game(session_id)
    if controller is None:
        return jsonify({"error": "Session not found"}), 404

    cells = _parse_cells(data.get("cells"))
    if cells is None:
        return jsonify({"error": "cells must be a non-empty list of [row, col] pairs"}), 400

    controller.tick()
    try:
        result = controller.select(cells)
    except SelectionError as e:
        controller.state.selection.cancel()
        return jsonify({"error": f"Selection error: {e}"}), 400

    payload = game_to_json(controller)
    payload["session_id"] = session_id
    payload["result"] = {
        "outcome": result.outcome.value,
        "word": result.word,
        "candidate": result.candidate,
        "cells": [[r, c] for r, c in result.cells],
        "won": result.won,
    }
    payload["sound"] = (controller.last_sound
                        if result.outcome is SelectionOutcome.NEWLY_FOUND else None)
    return jsonify(payload)


@app.route("/state", methods=["GET"])
def state():
    session_id = request.args.get("session_id", "")
    controller = _get_game(session_id)
    if controller is None:
        return jsonify({"error": "Session not found"}), 404
    controller.tick()
    result = game_to_json(controller)
    result["session_id"] = session_id
    return jsonify(result)


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8080)
