from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

Cell = str  # '', 'X', 'O'
Player = str  # 'X', 'O'
Line = Tuple[int, int, int]

EMPTY: Cell = ''
X: Player = 'X'
O: Player = 'O'
PLAYERS: Tuple[Player, Player] = (X, O)
CELL_VALUES: Tuple[Cell, ...] = (EMPTY, X, O)

SIZE = 3
CELL_COUNT = SIZE * SIZE

# Checked in this order; the first full line wins.
WIN_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """Outcome of scanning the board: the winner and its line, or neither."""
    winner: Optional[Player] = None
    line: Optional[Line] = None

    def __bool__(self) -> bool:
        return self.winner is not None


NO_WINNER = WinResult()


def empty_board() -> List[Cell]:
    return [EMPTY] * CELL_COUNT


def evaluate_winner(board: Sequence[Cell]) -> WinResult:
    """Returns the first winning line in WIN_LINES order, or NO_WINNER."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return WinResult(winner=board[a], line=line)
    return NO_WINNER


def is_draw(board: Sequence[Cell]) -> bool:
    """True when no cell is empty. Does not look for a winner; check that first."""
    return all(cell != EMPTY for cell in board)


def next_player(current: Player) -> Player:
    return O if current == X else X


def pretty(board: Sequence[Cell], line: Optional[Line] = None) -> str:
    """Generates a human-readable 3x3 grid, bracketing the cells of `line`."""
    marked = set(line or ())
    rows: List[str] = []
    for r in range(SIZE):
        row: List[str] = []
        for c in range(SIZE):
            i = r * SIZE + c
            sym = board[i] or '.'
            row.append(f"[{sym}]" if i in marked else f" {sym} ")
        rows.append("".join(row).rstrip())
    return "\n".join(rows)
