import unittest

from game import (
    EMPTY,
    NO_WINNER,
    O,
    WIN_LINES,
    X,
    empty_board,
    evaluate_winner,
    is_draw,
    next_player,
    pretty,
)


def make_board(text):
    # 'X', 'O' or '.' per cell, row-major, whitespace ignored
    cells = [ch for ch in text if not ch.isspace()]
    assert len(cells) == 9
    return [EMPTY if ch == '.' else ch for ch in cells]


class TestBoardEngine(unittest.TestCase):
    def test_given_each_win_line_filled_when_evaluated_then_winner_and_line_reported(self):
        for line in WIN_LINES:
            for player in (X, O):
                board = empty_board()
                for i in line:
                    board[i] = player
                res = evaluate_winner(board)
                self.assertEqual(res.winner, player)
                self.assertEqual(res.line, line)
                self.assertTrue(res)

    def test_given_empty_or_partial_board_when_evaluated_then_no_winner(self):
        self.assertEqual(evaluate_winner(empty_board()), NO_WINNER)
        res = evaluate_winner(make_board("XO. .X. O.."))
        self.assertFalse(res)
        self.assertIsNone(res.winner)
        self.assertIsNone(res.line)

    def test_given_two_full_lines_when_evaluated_then_first_in_priority_order_wins(self):
        # Row 0 and column 0 are both X: rows are checked before columns
        board = make_board("XXX X.. X..")
        self.assertEqual(evaluate_winner(board).line, (0, 1, 2))
        # Column 2 and the anti-diagonal are both O: columns before diagonals
        board = make_board("..O .OO O.O")
        self.assertEqual(evaluate_winner(board).line, (2, 5, 8))
        # Lines for both players: the earlier line decides the winner
        board = make_board("... OOO XXX")
        res = evaluate_winner(board)
        self.assertEqual(res.winner, O)
        self.assertEqual(res.line, (3, 4, 5))

    def test_given_full_board_without_line_when_checked_then_draw_and_no_winner(self):
        board = make_board("XOX XOO OXX")
        self.assertTrue(is_draw(board))
        self.assertEqual(evaluate_winner(board), NO_WINNER)

    def test_given_full_board_with_line_when_is_draw_alone_then_still_true(self):
        board = make_board("XXX OOX XOO")
        self.assertTrue(is_draw(board))
        self.assertEqual(evaluate_winner(board).winner, X)

    def test_given_any_empty_cell_when_is_draw_then_false(self):
        self.assertFalse(is_draw(empty_board()))
        self.assertFalse(is_draw(make_board("XOX XOO OX.")))

    def test_given_marker_when_next_player_then_alternates_and_is_involution(self):
        self.assertEqual(next_player(X), O)
        self.assertEqual(next_player(O), X)
        for p in (X, O):
            self.assertEqual(next_player(next_player(p)), p)

    def test_given_board_and_line_when_pretty_then_marks_and_brackets_rendered(self):
        board = make_board("XXX O.O ...")
        txt = pretty(board, (0, 1, 2))
        lines = txt.split("\n")
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], "[X][X][X]")
        self.assertIn('O', lines[1])
        self.assertIn('.', lines[2])
        self.assertNotIn('[', pretty(board))


if __name__ == "__main__":
    unittest.main(verbosity=2)
