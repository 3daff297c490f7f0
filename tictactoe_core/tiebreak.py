from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Any, Optional

from .board import O, X, Player

DIE_MIN = 1
DIE_MAX = 6

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')

# Player 1 plays O and is the fallback whenever the roll cannot decide.
PLAYER_ONE: Player = O
PLAYER_TWO: Player = X


@dataclass(frozen=True)
class TieBreakResult:
    player: Player
    roll: Optional[int]  # None when the guesses were rejected
    reason: str  # 'closer', 'tie' or 'invalid'


def parse_guess(value: Any) -> Optional[int]:
    """
    Parses a die guess from its leading digits ("4abc" -> 4, "2.5" -> 2).
    Returns None when there are no leading digits or the value is outside 1..6.
    """
    if isinstance(value, bool) or value is None:
        return None
    m = _LEADING_INT.match(str(value))
    if m is None:
        return None
    guess = int(m.group(1))
    if guess < DIE_MIN or guess > DIE_MAX:
        return None
    return guess


def decide_starting_player(guess1: Any, guess2: Any, rng: Optional[random.Random] = None) -> TieBreakResult:
    """
    Rolls a die and gives the first move to whoever guessed closer.
    Player 1's guess is `guess1` (plays O), Player 2's is `guess2` (plays X).
    Exact ties and any invalid guess go to Player 1; invalid guesses skip the roll.
    """
    g1 = parse_guess(guess1)
    g2 = parse_guess(guess2)
    if g1 is None or g2 is None:
        return TieBreakResult(player=PLAYER_ONE, roll=None, reason='invalid')

    rng = rng or random.Random()
    roll = rng.randint(DIE_MIN, DIE_MAX)
    diff1 = abs(roll - g1)
    diff2 = abs(roll - g2)
    if diff1 < diff2:
        return TieBreakResult(player=PLAYER_ONE, roll=roll, reason='closer')
    if diff2 < diff1:
        return TieBreakResult(player=PLAYER_TWO, roll=roll, reason='closer')
    return TieBreakResult(player=PLAYER_ONE, roll=roll, reason='tie')
