from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# The Flask app and tests import from here; the logic lives under tictactoe_core/*.

from tictactoe_core.board import (  # noqa: F401
    CELL_COUNT,
    EMPTY,
    NO_WINNER,
    O,
    PLAYERS,
    WIN_LINES,
    X,
    Cell,
    Line,
    Player,
    WinResult,
    empty_board,
    evaluate_winner,
    is_draw,
    next_player,
    pretty,
)
from tictactoe_core.session import FINISHED, IDLE, IN_PROGRESS, GameSession  # noqa: F401
from tictactoe_core.snapshot import (  # noqa: F401
    Snapshot,
    SnapshotError,
    dump_snapshot,
    parse_snapshot,
    snapshot_from_json,
    snapshot_to_json,
)
from tictactoe_core.storage import (  # noqa: F401
    DEFAULT_SAVE_NAME,
    load_snapshot,
    resolve_save_path,
    save_snapshot,
)
from tictactoe_core.tiebreak import (  # noqa: F401
    PLAYER_ONE,
    PLAYER_TWO,
    TieBreakResult,
    decide_starting_player,
    parse_guess,
)
