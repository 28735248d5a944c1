"""Shared tools for arena duels."""

from arena.tools.dice import (
    DamageRollResult,
    RandomFunc,
    create_rand_func,
    format_damage_roll,
    roll_bonus,
    roll_damage,
)

__all__ = [
    "DamageRollResult",
    "RandomFunc",
    "create_rand_func",
    "format_damage_roll",
    "roll_bonus",
    "roll_damage",
]
