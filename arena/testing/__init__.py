"""Testing utilities for Arena Duel.

This package provides:
- ScriptedRandom: Replays a fixed sequence of random values and records draws
- fixed_rand_func / min_rand_func / max_rand_func: Constant random sources
"""

from arena.testing.scripted_random import (
    RandomCall,
    ScriptedRandom,
    fixed_rand_func,
    max_rand_func,
    min_rand_func,
)

__all__ = [
    "RandomCall",
    "ScriptedRandom",
    "fixed_rand_func",
    "max_rand_func",
    "min_rand_func",
]
