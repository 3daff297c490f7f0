from __future__ import annotations

from typing import Callable, List, Optional

from .board import (
    CELL_COUNT,
    EMPTY,
    X,
    Cell,
    Line,
    Player,
    empty_board,
    evaluate_winner,
    is_draw,
    next_player,
)
from .snapshot import Snapshot

IDLE = 'idle'
IN_PROGRESS = 'in_progress'
FINISHED = 'finished'


class GameSession:
    """
    Mutable state of one game window: board, side to move, running flag and
    the last winner, which seeds the starting player of the next game.

    Illegal moves are ignored rather than raised so stray clicks are harmless.
    """

    def __init__(self) -> None:
        self.board: List[Cell] = empty_board()
        self.current_player: Player = X
        self.running: bool = False
        self.last_winner: Optional[Player] = None
        self.winning_line: Optional[Line] = None
        # Set when the board came from a snapshot; only affects status_text.
        self._loaded = False
        self._stopped = False

    # ---------- Moves ----------

    def apply_move(self, cell: int) -> bool:
        """Places the current player's mark. Returns False (and changes nothing) if illegal."""
        if not self.running or not 0 <= cell < CELL_COUNT or self.board[cell] != EMPTY:
            return False
        self.board[cell] = self.current_player

        result = evaluate_winner(self.board)
        if result:
            self.running = False
            self.last_winner = result.winner
            self.winning_line = result.line
        elif is_draw(self.board):
            self.running = False
        else:
            self.current_player = next_player(self.current_player)
        self._loaded = False
        return True

    # ---------- Lifecycle ----------

    @property
    def needs_tie_break(self) -> bool:
        """True when the next start has no previous winner to begin with."""
        return not self.running and self.last_winner is None

    def start_or_restart(self, tie_break: Callable[[], Player]) -> None:
        """
        Stops a running game (board kept), or clears the board and starts a new
        one. The new game opens with the last winner, else with `tie_break()`.
        """
        if not self.begin_restart():
            return
        starter = self.last_winner if self.last_winner is not None else tie_break()
        self.complete_restart(starter)

    def begin_restart(self) -> bool:
        """
        First half of start_or_restart for front ends that cannot block on input.
        Returns True when the caller must follow with complete_restart().
        """
        if self.running:
            self.running = False
            self._stopped = True
            self._loaded = False
            return False
        return True

    def complete_restart(self, starter: Player) -> None:
        self._reset(starter)

    def new_game(self) -> None:
        """Fresh game for a newly created save file: X always starts."""
        self._reset(X)

    def _reset(self, starter: Player) -> None:
        self.board = empty_board()
        self.winning_line = None
        self.current_player = starter
        self.running = True
        self._loaded = False
        self._stopped = False

    # ---------- Snapshots ----------

    def export_snapshot(self) -> Snapshot:
        return Snapshot.of(self.board, self.current_player, self.running)

    def load_snapshot(self, snapshot: Snapshot) -> None:
        """Overwrites board, current player and running flag. last_winner is kept."""
        self.board = list(snapshot.board)
        self.current_player = snapshot.current_player
        self.running = snapshot.running
        self.winning_line = None
        self._loaded = True
        self._stopped = False

    # ---------- Derived views ----------

    @property
    def phase(self) -> str:
        if self.running:
            return IN_PROGRESS
        if self.winning_line is not None or any(cell != EMPTY for cell in self.board):
            if not self._stopped:
                return FINISHED
        return IDLE

    @property
    def status_text(self) -> str:
        if self.running:
            return f"{self.current_player}'s turn"
        if self._loaded:
            return "Game Over"
        if self._stopped:
            return "Game stopped."
        if self.winning_line is not None:
            return f"{self.current_player} wins!"
        if is_draw(self.board):
            return "Draw!"
        return "Press Start to begin."
