from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, redirect, request
from werkzeug.routing import BaseConverter

from game import (
    EXAMPLE_BOARD,
    RENDER_PATTERN,
    SIZE_PATTERN,
    STATE_PATTERN,
    Coord,
    Game,
    canonical,
    from_string,
    get,
    iter_cells,
    load_page,
    next_generation,
    to_string,
    toggle,
    unserialize,
)

logger = logging.getLogger(__name__)

# Largest number of columns or rows a client may ask for
MAX_SIZE = int(os.getenv("BITLIFE_MAX_SIZE", "64"))


class SizeConverter(BaseConverter):
    regex = SIZE_PATTERN


class StateConverter(BaseConverter):
    regex = STATE_PATTERN


class RenderConverter(BaseConverter):
    regex = RENDER_PATTERN


app = Flask(__name__)
app.url_map.converters["size"] = SizeConverter
app.url_map.converters["state"] = StateConverter
app.url_map.converters["render"] = RenderConverter


def _error(message: str, status: int = 400) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), status


def _size_error(g: Game) -> Optional[str]:
    cols, rows = g.size
    if cols < 1 or rows < 1:
        return f"invalid board size {cols}x{rows}"
    if cols > MAX_SIZE or rows > MAX_SIZE:
        return f"board {cols}x{rows} is too large (max {MAX_SIZE}x{MAX_SIZE})"
    return None


def game_to_json(game: str) -> Dict[str, Any]:
    g = unserialize(game)
    return {"game": canonical(game), "size": [int(g.cols), int(g.rows)]}


def cells_to_json(game: str):
    return [c.as_dict() for c in iter_cells(game)]


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _game_from_body(body: Dict[str, Any]) -> Tuple[Optional[str], Optional[Tuple[Any, int]]]:
    """Return (game, None) or (None, error_response) for a JSON body."""
    game = body.get("game")
    if not isinstance(game, str):
        logger.warning("request without a game representation: %r", body)
        return None, _error("game required")
    problem = _size_error(unserialize(game))
    if problem:
        logger.info("rejected board %s: %s", game[:32], problem)
        return None, _error(problem)
    return game, None


def _cell_from_body(body: Dict[str, Any]) -> Optional[Coord]:
    cell = body.get("cell")
    if not isinstance(cell, (list, tuple)) or len(cell) != 2:
        return None
    # JSON numbers may arrive as floats, including inf from Infinity or 1e400
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in cell):
        return None
    return cell[0], cell[1]


# ---------- Pages ----------

@app.get("/")
def index() -> Any:
    return redirect(f"/{EXAMPLE_BOARD}", code=307)


@app.get("/<size:size>")
@app.get("/<size:size>/<state:state>")
@app.get("/<size:size>/<state:state>/<render:render>")
def board_page(size: str, state: Optional[str] = None, render: Optional[str] = None) -> Any:
    # the size converter guarantees load_page can read the size
    page = load_page(size, state, render)
    problem = _size_error(Game(size=page.size, board=0))
    if problem:
        logger.info("rejected page %s: %s", size, problem)
        return _error(problem)
    payload = {"ok": True, **page.to_json()}
    if page.prefer_ssr:
        payload["cells"] = cells_to_json(page.game)
    return jsonify(payload)


# ---------- Game API ----------

@app.post("/api/next")
def api_next() -> Any:
    game, err = _game_from_body(_body())
    if err:
        return err
    return jsonify({"ok": True, **game_to_json(next_generation(game))})


@app.post("/api/toggle")
def api_toggle() -> Any:
    body = _body()
    game, err = _game_from_body(body)
    if err:
        return err
    cell = _cell_from_body(body)
    if cell is None:
        logger.warning("bad cell in toggle request: %r", body.get("cell"))
        return _error("cell must be [x, y]")
    return jsonify({"ok": True, **game_to_json(toggle(game, cell))})


@app.post("/api/get")
def api_get() -> Any:
    body = _body()
    game, err = _game_from_body(body)
    if err:
        return err
    cell = _cell_from_body(body)
    if cell is None:
        logger.warning("bad cell in get request: %r", body.get("cell"))
        return _error("cell must be [x, y]")
    return jsonify({"ok": True, "value": get(game, cell)})


@app.post("/api/cells")
def api_cells() -> Any:
    game, err = _game_from_body(_body())
    if err:
        return err
    return jsonify({"ok": True, **game_to_json(game), "cells": cells_to_json(game)})


@app.post("/api/text")
def api_text() -> Any:
    body = _body()
    text = body.get("text")
    if isinstance(text, str):
        game = from_string(text)
        problem = _size_error(unserialize(game))
        if problem:
            logger.info("rejected picture: %s", problem)
            return _error(problem)
        return jsonify({"ok": True, **game_to_json(game)})
    game, err = _game_from_body(body)
    if err:
        return err
    return jsonify({"ok": True, "text": to_string(game)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=debug)
