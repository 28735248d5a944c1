"""Character archetypes and their fixed stat blocks.

An archetype is the tag that selects a character's base stats, its damage
roll and its level-up growth. Behaviour is chosen by matching on the tag
rather than by subclassing.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from arena.tools.dice import DamageRollResult, RandomFunc, roll_damage


class CharacterArchetype(str, Enum):
    """Playable archetypes."""

    WARRIOR = "warrior"
    MAGE = "mage"


# Base stat blocks (fixed constants, not configurable)
ARCHETYPE_STATS: dict[CharacterArchetype, dict[str, Any]] = {
    CharacterArchetype.WARRIOR: {
        "display_name": "Warrior",
        "health": 100,
        "attack": 20,
        "defense": 10,
        "max_damage_bonus": 4,
    },
    CharacterArchetype.MAGE: {
        "display_name": "Mage",
        "health": 80,
        "attack": 25,
        "defense": 5,
        "max_damage_bonus": 9,
    },
}


def max_damage_bonus(archetype: CharacterArchetype) -> int:
    """Upper bound of the random damage bonus for an archetype."""
    match archetype:
        case CharacterArchetype.WARRIOR:
            return ARCHETYPE_STATS[CharacterArchetype.WARRIOR]["max_damage_bonus"]
        case CharacterArchetype.MAGE:
            return ARCHETYPE_STATS[CharacterArchetype.MAGE]["max_damage_bonus"]
    raise ValueError(f"Unknown archetype: {archetype}")


def roll_attack_damage(
    archetype: CharacterArchetype,
    roller: str,
    attack: int,
    rand_func: RandomFunc,
) -> DamageRollResult:
    """Roll outgoing damage: attack plus an archetype-specific random bonus.

    Warriors add 0-4, Mages add 0-9. Each call draws independently.

    Args:
        archetype: The attacker's archetype
        roller: The attacker's name (for logging)
        attack: The attacker's current attack stat
        rand_func: Random source

    Returns:
        DamageRollResult with the drawn bonus and total
    """
    return roll_damage(roller, attack, max_damage_bonus(archetype), rand_func)


def compute_damage(archetype: CharacterArchetype, attack: int, rand_func: RandomFunc) -> int:
    """Outgoing damage before the defender's defense is subtracted."""
    return roll_attack_damage(archetype, archetype.value, attack, rand_func).total
