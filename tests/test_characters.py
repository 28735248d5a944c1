"""Tests for archetypes and character construction."""

import pytest

from arena.game.archetypes import (
    ARCHETYPE_STATS,
    CharacterArchetype,
    compute_damage,
    max_damage_bonus,
)
from arena.game.characters import (
    UnsupportedCharacterType,
    create_character,
    create_mage,
    create_warrior,
    parse_archetype,
)
from arena.game.models import Item
from arena.testing import ScriptedRandom


class TestArchetypeStats:
    """Tests for the fixed stat blocks."""

    def test_every_archetype_has_stats(self):
        """Each archetype should have a complete stat block."""
        for archetype in CharacterArchetype:
            stats = ARCHETYPE_STATS[archetype]
            for key in ("display_name", "health", "attack", "defense", "max_damage_bonus"):
                assert key in stats, f"{archetype} missing {key}"

    def test_damage_bonus_bounds(self):
        """Warriors roll 0-4, Mages roll 0-9."""
        assert max_damage_bonus(CharacterArchetype.WARRIOR) == 4
        assert max_damage_bonus(CharacterArchetype.MAGE) == 9

    def test_compute_damage_pure_function(self):
        """compute_damage adds a bonus drawn from the archetype's range."""
        rand = ScriptedRandom([3, 8])

        assert compute_damage(CharacterArchetype.WARRIOR, 20, rand) == 23
        assert compute_damage(CharacterArchetype.MAGE, 25, rand) == 33
        assert [(c.low, c.high) for c in rand.calls] == [(0, 4), (0, 9)]

    def test_each_call_draws_independently(self):
        """Every damage computation takes a fresh draw."""
        rand = ScriptedRandom([0, 4, 1])
        results = [compute_damage(CharacterArchetype.WARRIOR, 20, rand) for _ in range(3)]
        assert results == [20, 24, 21]


class TestCreateCharacter:
    """Tests for create_character."""

    def test_create_warrior_by_enum(self):
        """Enum members build the matching archetype."""
        hero = create_character(CharacterArchetype.WARRIOR, "Hero")
        assert hero.name == "Hero"
        assert hero.archetype == CharacterArchetype.WARRIOR
        assert hero.health == 100

    @pytest.mark.parametrize("value", ["mage", "MAGE", " Mage "])
    def test_create_by_string(self, value):
        """String values are accepted case-insensitively."""
        enemy = create_character(value, "Enemy")
        assert enemy.archetype == CharacterArchetype.MAGE
        assert enemy.health == 80

    def test_helpers(self):
        """create_warrior and create_mage build the right archetypes."""
        assert create_warrior("A").archetype == CharacterArchetype.WARRIOR
        assert create_mage("B").archetype == CharacterArchetype.MAGE

    def test_characters_are_independent(self):
        """Two characters never share an inventory."""
        first = create_warrior("A")
        second = create_warrior("B")
        first.add_item(Item(name="Ring", attack_bonus=1, defense_bonus=1))
        assert second.inventory == []

    @pytest.mark.parametrize("archetype", ["rogue", "", 42, None])
    def test_unsupported_archetype(self, archetype):
        """Unknown archetypes raise UnsupportedCharacterType."""
        with pytest.raises(UnsupportedCharacterType, match="Unsupported character type"):
            create_character(archetype, "Nobody")

    def test_unsupported_is_value_error(self):
        """The error is a ValueError and remembers the bad archetype."""
        with pytest.raises(ValueError) as exc_info:
            parse_archetype("paladin")

        assert isinstance(exc_info.value, UnsupportedCharacterType)
        assert exc_info.value.archetype == "paladin"
