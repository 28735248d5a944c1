"""Character construction.

Characters are built from the fixed stat blocks in ARCHETYPE_STATS. Only
Warrior and Mage exist; anything else is rejected.
"""

import logging

from arena.game.archetypes import ARCHETYPE_STATS, CharacterArchetype
from arena.game.models import Character

logger = logging.getLogger(__name__)


class UnsupportedCharacterType(ValueError):
    """Raised when asked to build a character of an unknown archetype."""

    def __init__(self, archetype: object):
        self.archetype = archetype
        supported = ", ".join(a.value for a in CharacterArchetype)
        super().__init__(f"Unsupported character type: {archetype!r} (supported: {supported})")


def parse_archetype(archetype: CharacterArchetype | str) -> CharacterArchetype:
    """Resolve an archetype from an enum member or its name/value.

    Raises:
        UnsupportedCharacterType: If the archetype is not recognised
    """
    if isinstance(archetype, CharacterArchetype):
        return archetype
    if isinstance(archetype, str):
        try:
            return CharacterArchetype(archetype.strip().lower())
        except ValueError:
            pass
    raise UnsupportedCharacterType(archetype)


def create_character(archetype: CharacterArchetype | str, name: str) -> Character:
    """Build a fresh level 1 character with its archetype's base stats.

    Args:
        archetype: CharacterArchetype member or its value ("warrior", "mage")
        name: Display name

    Returns:
        A new Character with no experience and an empty inventory

    Raises:
        UnsupportedCharacterType: If the archetype is not recognised
    """
    resolved = parse_archetype(archetype)
    stats = ARCHETYPE_STATS[resolved]

    character = Character(
        name=name,
        archetype=resolved,
        health=stats["health"],
        attack=stats["attack"],
        defense=stats["defense"],
    )
    logger.info(f"Created {stats['display_name']} {character}")
    return character


def create_warrior(name: str) -> Character:
    """Build a Warrior (100 HP, 20 ATK, 10 DEF)."""
    return create_character(CharacterArchetype.WARRIOR, name)


def create_mage(name: str) -> Character:
    """Build a Mage (80 HP, 25 ATK, 5 DEF)."""
    return create_character(CharacterArchetype.MAGE, name)
