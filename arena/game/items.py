"""Item generation and sorting.

Random items draw a name from a small vocabulary and both bonuses from
1-10. Items sort ascending by their combined bonus.
"""

from __future__ import annotations

import logging
from typing import Iterable

from arena.game.models import Item
from arena.tools.dice import RandomFunc

logger = logging.getLogger(__name__)

ITEM_NAMES: tuple[str, ...] = ("Sword", "Shield", "Amulet", "Ring")

MIN_ITEM_BONUS = 1
MAX_ITEM_BONUS = 10


def generate_random_item(rand_func: RandomFunc) -> Item:
    """Create an item with a random name and bonuses in [1, 10].

    Args:
        rand_func: Random source

    Returns:
        A new Item
    """
    name = ITEM_NAMES[rand_func(0, len(ITEM_NAMES) - 1)]
    attack_bonus = rand_func(MIN_ITEM_BONUS, MAX_ITEM_BONUS)
    defense_bonus = rand_func(MIN_ITEM_BONUS, MAX_ITEM_BONUS)
    return Item(name=name, attack_bonus=attack_bonus, defense_bonus=defense_bonus)


def generate_random_items(count: int, rand_func: RandomFunc) -> list[Item]:
    """Create a list of random items.

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Item count must be non-negative: {count}")
    return [generate_random_item(rand_func) for _ in range(count)]


def sort_items(items: Iterable[Item]) -> list[Item]:
    """Return items sorted ascending by combined bonus.

    Insertion sort over a copy; the input is left untouched. Items with
    equal combined bonus keep their relative order.
    """
    result = list(items)

    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key

    logger.debug(f"Sorted {len(result)} items by combined bonus")
    return result
