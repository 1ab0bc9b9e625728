"""Deterministic random source for the shared daily challenge."""

from __future__ import annotations
import datetime
import random
from typing import Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.difficulty import Difficulty

DateLike = Union[str, datetime.date]

_MASK64 = (1 << 64) - 1


def parse_date(date: DateLike) -> datetime.date:
    """Accept a ``datetime.date`` or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(date, datetime.datetime):
        return date.date()
    if isinstance(date, datetime.date):
        return date
    try:
        return datetime.datetime.strptime(date, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid daily challenge date {date!r}, expected YYYY-MM-DD") from e


def date_string(date: DateLike) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return parse_date(date).isoformat()


def daily_seed(date: DateLike, difficulty: Difficulty) -> int:
    """
    Derive the seed for a date's daily puzzle.

    The seed is the date as the integer YYYYMMDD times a per-difficulty
    prime, so every player gets the same puzzle for a given date and
    difficulty while each difficulty still gets its own puzzle.
    """
    day = parse_date(date)
    return (day.year * 10000 + day.month * 100 + day.day) * difficulty.daily_multiplier


class DailyRandom(random.Random):
    """
    64-bit linear congruential generator behind the ``random.Random`` API.

    The stdlib Mersenne Twister is seeded differently across Python
    versions for non-int seeds and its helpers are not pinned, so daily
    puzzles use this fixed recurrence instead. Bits are taken from the top
    of each output because the low bits of a power-of-two LCG cycle with
    short periods.
    """

    MULTIPLIER = 6364136223846793005
    INCREMENT = 1442695040888963407

    def __init__(self, seed: int):
        self._state = 0
        super().__init__(seed)

    def seed(self, a=None, version=2) -> None:
        if not isinstance(a, int):
            raise TypeError(f"DailyRandom needs an int seed, got {type(a).__name__}")
        self._state = abs(a) & _MASK64
        self.gauss_next = None

    def getstate(self):
        return self._state

    def setstate(self, state) -> None:
        self._state = state

    def next_uint64(self) -> int:
        """Advance the generator and return the raw 64-bit output."""
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) & _MASK64
        return self._state

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        result = 0
        filled = 0
        while filled < k:
            take = min(32, k - filled)
            result = (result << take) | (self.next_uint64() >> (64 - take))
            filled += take
        return result

    def random(self) -> float:
        return (self.next_uint64() >> 11) * (1.0 / (1 << 53))

    def below(self, n: int) -> int:
        """
        Uniform int in ``[0, n)``.

        Takes the high word of a 64x64-bit product and rejects draws whose
        low word falls under ``2**64 % n`` (Lemire's method), the way
        Swift's ``next(upperBound:)`` does, so daily puzzles match the
        Swift client.
        """
        if n <= 0:
            raise ValueError("upper bound must be positive")
        product = self.next_uint64() * n
        if product & _MASK64 < n:
            threshold = (-n & _MASK64) % n
            while product & _MASK64 < threshold:
                product = self.next_uint64() * n
        return product >> 64

    def shuffle(self, x) -> None:
        """Forward Fisher-Yates shuffle in place, draw for draw as Swift's ``shuffle(using:)``."""
        amount = len(x)
        i = 0
        while amount > 1:
            j = i + self.below(amount)
            amount -= 1
            x[i], x[j] = x[j], x[i]
            i += 1
