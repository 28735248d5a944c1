"""Experience and level-up rules.

Level-ups are pure: apply_level_up takes the current stats and returns the
grown stats for an archetype. Characters apply the result to themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from arena.game.archetypes import CharacterArchetype

# Experience needed per level: threshold(level) = level * EXPERIENCE_PER_LEVEL
EXPERIENCE_PER_LEVEL = 100

# Growth applied to every archetype on level-up
BASE_GROWTH: dict[str, int] = {"health": 10, "attack": 5, "defense": 5}

# Extra growth on top of BASE_GROWTH
ARCHETYPE_GROWTH: dict[CharacterArchetype, dict[str, int]] = {
    CharacterArchetype.WARRIOR: {"attack": 5},
    CharacterArchetype.MAGE: {"health": 5},
}


@dataclass(frozen=True)
class Stats:
    """Snapshot of the stats a level-up touches."""

    level: int
    health: int
    attack: int
    defense: int


@dataclass
class LevelUpResult:
    """Record of a single level-up."""

    name: str
    archetype: CharacterArchetype
    before: Stats
    after: Stats

    @property
    def new_level(self) -> int:
        return self.after.level

    @property
    def announcement(self) -> str:
        return (
            f"{self.name} reaches level {self.after.level}! "
            f"(HP +{self.after.health - self.before.health}, "
            f"ATK +{self.after.attack - self.before.attack}, "
            f"DEF +{self.after.defense - self.before.defense})"
        )


def experience_threshold(level: int) -> int:
    """Experience needed to advance past the given level."""
    return level * EXPERIENCE_PER_LEVEL


def apply_level_up(archetype: CharacterArchetype, stats: Stats) -> Stats:
    """Return the stats after one level-up.

    Args:
        archetype: Which growth rule to apply
        stats: Stats before the level-up

    Returns:
        New Stats with the level incremented and base plus archetype growth added
    """
    grown = replace(
        stats,
        level=stats.level + 1,
        health=stats.health + BASE_GROWTH["health"],
        attack=stats.attack + BASE_GROWTH["attack"],
        defense=stats.defense + BASE_GROWTH["defense"],
    )

    match archetype:
        case CharacterArchetype.WARRIOR:
            extra = ARCHETYPE_GROWTH[CharacterArchetype.WARRIOR]
            return replace(grown, attack=grown.attack + extra["attack"])
        case CharacterArchetype.MAGE:
            extra = ARCHETYPE_GROWTH[CharacterArchetype.MAGE]
            return replace(grown, health=grown.health + extra["health"])

    return grown
