"""Tests for the level-up rules."""

import pytest

from arena.game.archetypes import CharacterArchetype
from arena.game.progression import (
    ARCHETYPE_GROWTH,
    BASE_GROWTH,
    Stats,
    apply_level_up,
    experience_threshold,
)

START = Stats(level=1, health=50, attack=20, defense=10)


class TestExperienceThreshold:
    """Tests for experience_threshold."""

    @pytest.mark.parametrize("level,expected", [(1, 100), (2, 200), (7, 700)])
    def test_threshold_is_level_times_100(self, level, expected):
        """Threshold scales linearly with level."""
        assert experience_threshold(level) == expected


class TestApplyLevelUp:
    """Tests for apply_level_up."""

    def test_returns_new_stats(self):
        """Input stats should not be modified."""
        after = apply_level_up(CharacterArchetype.WARRIOR, START)
        assert after is not START
        assert START.level == 1

    def test_warrior_growth(self):
        """Warrior: +10 HP, +10 ATK, +5 DEF."""
        after = apply_level_up(CharacterArchetype.WARRIOR, START)
        assert after == Stats(level=2, health=60, attack=30, defense=15)

    def test_mage_growth(self):
        """Mage: +15 HP, +5 ATK, +5 DEF."""
        after = apply_level_up(CharacterArchetype.MAGE, START)
        assert after == Stats(level=2, health=65, attack=25, defense=15)

    @pytest.mark.parametrize("archetype", list(CharacterArchetype))
    def test_every_archetype_gets_base_growth(self, archetype):
        """Attack and defense always grow by at least the base amount."""
        after = apply_level_up(archetype, START)

        assert after.level == START.level + 1
        assert after.attack - START.attack >= BASE_GROWTH["attack"]
        assert after.defense - START.defense >= BASE_GROWTH["defense"]
        assert after.health - START.health >= BASE_GROWTH["health"]

    def test_every_archetype_has_growth_entry(self):
        """Each archetype should define its extra growth."""
        assert set(ARCHETYPE_GROWTH) == set(CharacterArchetype)

    def test_growth_is_repeatable(self):
        """Chained level-ups add the same growth each time."""
        stats = START
        for _ in range(3):
            stats = apply_level_up(CharacterArchetype.WARRIOR, stats)

        assert stats.level == 4
        assert stats.attack == START.attack + 30
        assert stats.health == START.health + 30
