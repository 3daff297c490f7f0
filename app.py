from __future__ import annotations

import os
import random
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, send_from_directory

from game import (
    GameSession,
    SnapshotError,
    TieBreakResult,
    decide_starting_player,
    load_snapshot,
    pretty,
    resolve_save_path,
    save_snapshot,
    snapshot_to_json,
)

DEFAULT_SAVE_DIR = os.getenv("TTT_SAVE_DIR", "data")

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)


def _seed_from_env() -> Optional[int]:
    raw = os.getenv("TTT_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        app.logger.warning("ignoring non-integer TTT_SEED=%r", raw)
        return None


class GameController:
    """The page's game: one session, the selected save file and the die RNG."""

    def __init__(self, save_dir: str = DEFAULT_SAVE_DIR, seed: Optional[int] = None) -> None:
        self.session = GameSession()
        self.save_dir = save_dir
        self.save_path: Optional[str] = None
        self.rng = random.Random(seed)

    def persist(self) -> None:
        """Writes the current snapshot to the selected file, if any. OSError propagates."""
        if self.save_path is None:
            return
        save_snapshot(self.save_path, self.session.export_snapshot())


controller = GameController(seed=_seed_from_env())


def state_to_json(c: GameController) -> Dict[str, Any]:
    s = c.session
    out = snapshot_to_json(s.export_snapshot())
    out.update({
        "winningLine": list(s.winning_line) if s.winning_line is not None else None,
        "lastWinner": s.last_winner,
        "phase": s.phase,
        "status": s.status_text,
        "needsTieBreak": s.needs_tie_break,
        "saveFile": os.path.basename(c.save_path) if c.save_path else None,
    })
    return out


def _tie_break_to_json(tb: TieBreakResult) -> Dict[str, Any]:
    return {"player": tb.player, "roll": tb.roll, "reason": tb.reason}


def _json_body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _name_from(body: Dict[str, Any]) -> Optional[str]:
    name = body.get("name")
    return name if isinstance(name, str) else None


def _autosave(out: Dict[str, Any]) -> Dict[str, Any]:
    # A failed autosave does not undo the action; the page shows saveError.
    try:
        controller.persist()
    except OSError as e:
        app.logger.error("autosave to %s failed: %s", controller.save_path, e)
        out["saveError"] = str(e)
    return out


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Game API (required by main.js) ----------

@app.get("/api/state")
def api_state() -> Any:
    return jsonify({"ok": True, "state": state_to_json(controller)})


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    try:
        cell = int(body["cell"])
    except (KeyError, TypeError, ValueError, OverflowError):
        return jsonify({"ok": False, "error": "cell must be an integer 0-8"}), 400

    applied = controller.session.apply_move(cell)
    out: Dict[str, Any] = {"ok": True, "applied": applied}
    if applied:
        s = controller.session
        if not s.running:
            app.logger.info("game over: %s\n%s", s.status_text, pretty(s.board, s.winning_line))
        _autosave(out)
    out["state"] = state_to_json(controller)
    return jsonify(out)


@app.post("/api/restart")
def api_restart() -> Any:
    body = _json_body()
    guesses = body.get("guesses")
    if not isinstance(guesses, list):
        guesses = []
    g1 = guesses[0] if len(guesses) > 0 else None
    g2 = guesses[1] if len(guesses) > 1 else None

    s = controller.session
    out: Dict[str, Any] = {"ok": True}
    if s.begin_restart():
        if s.last_winner is not None:
            starter = s.last_winner
        else:
            tb = decide_starting_player(g1, g2, controller.rng)
            out["tieBreak"] = _tie_break_to_json(tb)
            starter = tb.player
        s.complete_restart(starter)
        app.logger.info("game started, %s to move", starter)
    else:
        app.logger.info("game stopped")
    _autosave(out)
    out["state"] = state_to_json(controller)
    return jsonify(out)


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    path = resolve_save_path(controller.save_dir, _name_from(body))
    fresh = GameSession()
    fresh.new_game()
    try:
        save_snapshot(path, fresh.export_snapshot())
    except OSError as e:
        app.logger.error("could not create %s: %s", path, e)
        return jsonify({"ok": False, "error": f"could not create save file: {e}"}), 500
    controller.session.new_game()
    controller.save_path = path
    app.logger.info("new game file %s", path)
    return jsonify({"ok": True, "state": state_to_json(controller)})


@app.post("/api/load")
def api_load() -> Any:
    body = _json_body()
    path = resolve_save_path(controller.save_dir, _name_from(body))
    try:
        snapshot = load_snapshot(path)
    except FileNotFoundError:
        return jsonify({"ok": False, "error": f"no such save file: {os.path.basename(path)}"}), 404
    except SnapshotError as e:
        app.logger.warning("rejected snapshot %s: %s", path, e)
        return jsonify({"ok": False, "error": f"bad snapshot: {e}"}), 400
    except OSError as e:
        app.logger.error("could not read %s: %s", path, e)
        return jsonify({"ok": False, "error": f"could not read save file: {e}"}), 500
    controller.session.load_snapshot(snapshot)
    controller.save_path = path
    app.logger.info("loaded %s", path)
    return jsonify({"ok": True, "state": state_to_json(controller)})


@app.post("/api/save")
def api_save() -> Any:
    if controller.save_path is None:
        return jsonify({"ok": False, "error": "no save file selected"}), 400
    try:
        controller.persist()
    except OSError as e:
        app.logger.error("save to %s failed: %s", controller.save_path, e)
        return jsonify({"ok": False, "error": f"could not write save file: {e}"}), 500
    return jsonify({"ok": True, "state": state_to_json(controller)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
