"""Pydantic models for duel state.

These models define items and characters. Characters are mutated in place
during a duel; items never change once created.
"""

from __future__ import annotations

import logging
from functools import total_ordering

from pydantic import BaseModel, Field

from arena.game.archetypes import CharacterArchetype, compute_damage, roll_attack_damage
from arena.game.display import format_character, format_item
from arena.game.progression import LevelUpResult, Stats, apply_level_up, experience_threshold
from arena.tools.dice import DamageRollResult, RandomFunc

logger = logging.getLogger(__name__)


@total_ordering
class Item(BaseModel):
    """A piece of equipment granting flat stat bonuses.

    Items order and compare by their combined bonus (attack + defense).
    Two items with different names but the same combined bonus are equal.
    """

    model_config = {"frozen": True}

    name: str = Field(description="Item name")
    attack_bonus: int = Field(default=0, ge=0, description="Added to attack when equipped")
    defense_bonus: int = Field(default=0, ge=0, description="Added to defense when equipped")

    @property
    def combined(self) -> int:
        """Ordering key: attack bonus plus defense bonus."""
        return self.attack_bonus + self.defense_bonus

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.combined == other.combined

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.combined < other.combined

    def __hash__(self) -> int:
        return hash(self.combined)

    def __str__(self) -> str:
        return format_item(self)


class Character(BaseModel):
    """State of a duelist.

    Health is floored at zero and a character at zero health is dead.
    Equipping an item permanently adds its bonuses; items are never removed.
    """

    name: str = Field(frozen=True, description="Character's display name")
    archetype: CharacterArchetype = Field(description="Selects damage roll and level-up growth")
    health: int = Field(ge=0, description="Current hit points")
    attack: int = Field(description="Attack stat, raised by items and level-ups")
    defense: int = Field(description="Defense stat, raised by items and level-ups")
    level: int = Field(default=1, ge=1)
    experience: int = Field(default=0, ge=0, description="Experience toward the next level")
    inventory: list[Item] = Field(default_factory=list, description="Equipped items, in order")

    @property
    def is_alive(self) -> bool:
        """Check if character is alive (HP > 0)."""
        return self.health > 0

    @property
    def stats(self) -> Stats:
        return Stats(level=self.level, health=self.health, attack=self.attack, defense=self.defense)

    def add_item(self, item: Item) -> None:
        """Equip an item, adding its bonuses to attack and defense."""
        self.inventory.append(item)
        self.attack += item.attack_bonus
        self.defense += item.defense_bonus
        logger.info(f"{self.name} equips {format_item(item)}")

    def take_damage(self, amount: int) -> None:
        """Reduce health by amount, never below zero.

        Args:
            amount: Damage to apply. Negative values are treated as 0.
        """
        self.health = max(0, self.health - max(0, amount))

    def roll_damage(self, rand_func: RandomFunc) -> DamageRollResult:
        """Roll outgoing damage with the full breakdown."""
        return roll_attack_damage(self.archetype, self.name, self.attack, rand_func)

    def compute_damage(self, rand_func: RandomFunc) -> int:
        """Outgoing damage before the defender's defense is subtracted."""
        return compute_damage(self.archetype, self.attack, rand_func)

    def level_up(self) -> LevelUpResult:
        """Advance one level using this character's archetype growth.

        Returns:
            LevelUpResult with the stats before and after
        """
        before = self.stats
        after = apply_level_up(self.archetype, before)

        self.level = after.level
        self.health = after.health
        self.attack = after.attack
        self.defense = after.defense

        result = LevelUpResult(name=self.name, archetype=self.archetype, before=before, after=after)
        logger.info(result.announcement)
        return result

    def gain_experience(self, amount: int) -> list[LevelUpResult]:
        """Add experience and level up as many times as it allows.

        Each level-up spends level * 100 experience, checked against the
        level at the time, so a single large award can advance several levels.

        Args:
            amount: Experience to add. Negative values are treated as 0.

        Returns:
            One LevelUpResult per level gained (empty if none)

        Examples:
            A level 1 character gaining 350 experience ends at level 3 with
            50 experience: 350 - 100 = 250 (level 2), 250 - 200 = 50 (level 3).
        """
        self.experience += max(0, amount)

        level_ups = []
        while self.experience >= experience_threshold(self.level):
            self.experience -= experience_threshold(self.level)
            level_ups.append(self.level_up())

        return level_ups

    def __str__(self) -> str:
        return format_character(self)
