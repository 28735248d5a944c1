"""Random source for arena duels.

This module provides the injectable randomness used by combat and item
generation:
- A RandomFunc type alias (inclusive integer range -> int)
- Seeded random sources that never touch the global `random` state
- Damage bonus rolls with a structured result for logging and display

Every caller receives its random source as an explicit argument, so tests can
swap in scripted values (see arena.testing).
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

# Type alias for random function (allows mocking in tests)
RandomFunc = Callable[[int, int], int]


@dataclass
class DamageRollResult:
    """Result of a damage roll."""

    roller: str  # Who rolled
    base: int  # Attack stat before the random bonus
    bonus: int  # Random bonus drawn
    max_bonus: int  # Upper bound of the bonus range
    total: int  # base + bonus

    def to_dict(self) -> dict:
        """Convert to dictionary for display."""
        return {
            "roller": self.roller,
            "base": self.base,
            "bonus": self.bonus,
            "max_bonus": self.max_bonus,
            "total": self.total,
        }


def create_rand_func(seed: int | None = None) -> RandomFunc:
    """Create a random source backed by its own generator.

    Args:
        seed: Seed for the generator. If None, the wall clock is used.

    Returns:
        A RandomFunc returning integers in [low, high] inclusive

    Examples:
        >>> roll = create_rand_func(42)
        >>> 0 <= roll(0, 4) <= 4
        True
    """
    if seed is None:
        seed = time.time_ns()
    logger.debug(f"Random source seeded with {seed}")
    return random.Random(seed).randint


def roll_bonus(max_bonus: int, rand_func: RandomFunc) -> int:
    """Draw a uniform bonus in [0, max_bonus].

    Args:
        max_bonus: Inclusive upper bound of the bonus
        rand_func: Random source

    Raises:
        ValueError: If max_bonus is negative
    """
    if max_bonus < 0:
        raise ValueError(f"Bonus upper bound must be non-negative: {max_bonus}")
    return rand_func(0, max_bonus)


def roll_damage(roller: str, base: int, max_bonus: int, rand_func: RandomFunc) -> DamageRollResult:
    """Roll damage as a base value plus a random bonus.

    Args:
        roller: Who is dealing damage
        base: The attacker's attack stat
        max_bonus: Inclusive upper bound of the random bonus
        rand_func: Random source

    Returns:
        DamageRollResult with the drawn bonus and the total
    """
    bonus = roll_bonus(max_bonus, rand_func)
    result = DamageRollResult(
        roller=roller,
        base=base,
        bonus=bonus,
        max_bonus=max_bonus,
        total=base + bonus,
    )
    logger.debug(f"Roll: {format_damage_roll(result)}")
    return result


def format_damage_roll(result: DamageRollResult | dict) -> str:
    """Format a damage roll for display.

    Examples:
        "Damage for Hero: 20 + [3 of 0-4] = 23"
    """
    if isinstance(result, dict):
        roller = result["roller"]
        base = result["base"]
        bonus = result["bonus"]
        max_bonus = result["max_bonus"]
        total = result["total"]
    else:
        roller = result.roller
        base = result.base
        bonus = result.bonus
        max_bonus = result.max_bonus
        total = result.total

    return f"Damage for {roller}: {base} + [{bonus} of 0-{max_bonus}] = {total}"
