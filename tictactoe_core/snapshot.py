from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from .board import CELL_COUNT, CELL_VALUES, PLAYERS, Cell, Player


class SnapshotError(ValueError):
    """Raised when snapshot content is malformed or out of domain."""


@dataclass(frozen=True)
class Snapshot:
    """The persisted game: board, side to move and the running flag."""
    board: Tuple[Cell, ...]
    current_player: Player
    running: bool

    def __post_init__(self) -> None:
        if len(self.board) != CELL_COUNT:
            raise SnapshotError(f"board must have {CELL_COUNT} cells, got {len(self.board)}")
        for i, cell in enumerate(self.board):
            if cell not in CELL_VALUES:
                raise SnapshotError(f"invalid cell {i}: {cell!r}")
        if self.current_player not in PLAYERS:
            raise SnapshotError(f"invalid current player: {self.current_player!r}")
        if not isinstance(self.running, bool):
            raise SnapshotError(f"running must be a boolean, got {self.running!r}")

    @classmethod
    def of(cls, board: Sequence[Cell], current_player: Player, running: bool) -> 'Snapshot':
        return cls(board=tuple(board), current_player=current_player, running=running)


def snapshot_to_json(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "board": list(snapshot.board),
        "currentPlayer": snapshot.current_player,
        "running": snapshot.running,
    }


def snapshot_from_json(obj: Any) -> Snapshot:
    """Builds a Snapshot from decoded JSON; extra keys are ignored."""
    if not isinstance(obj, dict):
        raise SnapshotError("snapshot must be a JSON object")
    try:
        board = obj["board"]
        current = obj["currentPlayer"]
        running = obj["running"]
    except KeyError as e:
        raise SnapshotError(f"missing field: {e.args[0]}") from None
    if not isinstance(board, list):
        raise SnapshotError("board must be a list")
    return Snapshot.of(board, current, running)


def parse_snapshot(text: str) -> Snapshot:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"malformed JSON: {e}") from e
    return snapshot_from_json(obj)


def dump_snapshot(snapshot: Snapshot) -> str:
    return json.dumps(snapshot_to_json(snapshot), indent=2)
