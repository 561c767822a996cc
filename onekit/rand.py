"""Non-cryptographic random helpers: ranges, dice, shuffles and characters."""

from __future__ import annotations

import enum
import random
import string
from typing import Any, MutableSequence

__all__ = ["Generator", "CharPool", "Randomizer"]

LOWERS = string.ascii_lowercase
UPPERS = string.ascii_uppercase
DIGITS = string.digits
SPECIALS = "'\"\\!@#$%^&*()-_=+[]{}|;:,.<>`~ /?"


class Generator(enum.Enum):
    """Which random source a Randomizer draws from."""

    DEFAULT = 0
    """Repeatable, seedable generator."""
    RANDOM = 1
    """Non-repeatable system generator."""


class CharPool(enum.IntFlag):
    """Character sets that character_from may draw from."""

    LOWER = 1 << 0
    UPPER = 1 << 1
    DIGIT = 1 << 2
    SPECIAL = 1 << 3
    ALL = LOWER | UPPER | DIGIT | SPECIAL


_POOLS = (
    (CharPool.LOWER, LOWERS),
    (CharPool.UPPER, UPPERS),
    (CharPool.DIGIT, DIGITS),
    (CharPool.SPECIAL, SPECIALS),
)


class Randomizer:
    """A source of random integers, dice rolls, shuffles and characters."""

    def __init__(self, generator: Generator | int = Generator.DEFAULT,
                 seed: int | None = None) -> None:
        self.generator = Generator(generator)
        if self.generator is Generator.DEFAULT:
            self._rng: random.Random = random.Random(seed)
        else:
            self._rng = random.SystemRandom()

    @property
    def repeatable(self) -> bool:
        """True when the generator can be seeded."""
        return self.generator is Generator.DEFAULT

    def seed(self, value: int) -> bool:
        """Reseed a repeatable generator; returns False if it is not seedable."""
        if not self.repeatable:
            return False
        self._rng.seed(value)
        return True

    def between(self, low: int, high: int) -> int:
        """Return an integer in the inclusive range [low, high]."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def dice(self, num: int, sides: int) -> int:
        """Roll ``num`` dice of ``sides`` sides and return the total."""
        return sum(self.between(1, sides) for _ in range(max(num, 0)))

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle ``items`` in place with the Fisher-Yates algorithm."""
        for i in range(len(items), 0, -1):
            r = self.between(1, i)
            items[r - 1], items[i - 1] = items[i - 1], items[r - 1]

    def lower(self) -> str:
        """A random lower case letter."""
        return LOWERS[self.between(0, len(LOWERS) - 1)]

    def upper(self) -> str:
        """A random upper case letter."""
        return UPPERS[self.between(0, len(UPPERS) - 1)]

    def digit(self) -> str:
        """A random decimal digit."""
        return DIGITS[self.between(0, len(DIGITS) - 1)]

    def special(self) -> str:
        """A random special character."""
        return SPECIALS[self.between(0, len(SPECIALS) - 1)]

    def character_from(self, pool: CharPool | int) -> str:
        """A random character drawn evenly from the selected sets.

        Raises ValueError if ``pool`` selects no set.
        """
        pool = CharPool(int(pool) & CharPool.ALL)
        chars = "".join(chars for flag, chars in _POOLS if pool & flag)
        if not chars:
            raise ValueError("character pool selects no character set")
        return chars[self.between(1, len(chars)) - 1]