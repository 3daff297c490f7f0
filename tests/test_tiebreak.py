import random
import unittest

from game import O, PLAYER_ONE, PLAYER_TWO, X, decide_starting_player, parse_guess


class _FixedRoll(random.Random):
    """Random whose randint always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        return self.value


class TestTieBreak(unittest.TestCase):
    def test_player_markers(self):
        self.assertEqual(PLAYER_ONE, O)
        self.assertEqual(PLAYER_TWO, X)

    def test_given_guess_inputs_when_parsed_then_only_1_to_6_accepted(self):
        self.assertEqual(parse_guess("3"), 3)
        self.assertEqual(parse_guess(" 6 "), 6)
        self.assertEqual(parse_guess(1), 1)
        for bad in (None, "", "abc", "0", "7", -2, "a4", "+9", True):
            self.assertIsNone(parse_guess(bad), bad)

    def test_given_trailing_text_or_fraction_when_parsed_then_leading_digits_used(self):
        self.assertEqual(parse_guess("2.5"), 2)
        self.assertEqual(parse_guess("4abc"), 4)
        self.assertEqual(parse_guess("  +5 dots"), 5)
        self.assertEqual(parse_guess(3.9), 3)

    def test_given_fractional_guesses_when_deciding_then_roll_happens(self):
        rng = _FixedRoll(2)
        res = decide_starting_player("2.5", "6abc", rng)
        self.assertEqual((res.player, res.roll, res.reason), (O, 2, "closer"))
        self.assertEqual(rng.calls, 1)

    def test_given_invalid_guess_when_deciding_then_player_one_without_roll(self):
        for g1, g2 in (("x", "3"), ("3", None), ("9", "2"), (None, None)):
            rng = _FixedRoll(4)
            res = decide_starting_player(g1, g2, rng)
            self.assertEqual(res.player, O)
            self.assertIsNone(res.roll)
            self.assertEqual(res.reason, "invalid")
            self.assertEqual(rng.calls, 0)

    def test_given_closer_guess_when_deciding_then_that_player_starts(self):
        res = decide_starting_player(5, 1, _FixedRoll(6))
        self.assertEqual((res.player, res.roll, res.reason), (O, 6, "closer"))
        res = decide_starting_player(5, 1, _FixedRoll(2))
        self.assertEqual((res.player, res.roll, res.reason), (X, 2, "closer"))

    def test_given_equal_distance_when_deciding_then_player_one_starts(self):
        res = decide_starting_player(2, 4, _FixedRoll(3))
        self.assertEqual((res.player, res.roll, res.reason), (O, 3, "tie"))
        res = decide_starting_player(5, 5, _FixedRoll(1))
        self.assertEqual(res.reason, "tie")
        self.assertEqual(res.player, O)

    def test_given_seeded_rng_when_deciding_then_roll_in_range_and_repeatable(self):
        a = decide_starting_player(1, 6, random.Random(42))
        b = decide_starting_player(1, 6, random.Random(42))
        self.assertEqual(a, b)
        self.assertTrue(1 <= a.roll <= 6)
        # Guesses 1 and 6: only an exact 3.5 could tie, so someone is always closer
        self.assertEqual(a.reason, "closer")


if __name__ == "__main__":
    unittest.main(verbosity=2)
