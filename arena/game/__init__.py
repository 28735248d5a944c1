"""Duel mechanics: characters, items, progression and combat."""

from arena.game.archetypes import (
    ARCHETYPE_STATS,
    CharacterArchetype,
    compute_damage,
    max_damage_bonus,
    roll_attack_damage,
)
from arena.game.characters import (
    UnsupportedCharacterType,
    create_character,
    create_mage,
    create_warrior,
    parse_archetype,
)
from arena.game.combat import (
    DEFAULT_EXPERIENCE_AWARD,
    AttackResult,
    BattleOutcome,
    BattleResult,
    fight,
    resolve_attack,
)
from arena.game.display import (
    format_battle_start,
    format_character,
    format_item,
    format_item_list,
)
from arena.game.items import (
    ITEM_NAMES,
    generate_random_item,
    generate_random_items,
    sort_items,
)
from arena.game.models import Character, Item
from arena.game.progression import (
    LevelUpResult,
    Stats,
    apply_level_up,
    experience_threshold,
)

__all__ = [
    # Archetypes
    "ARCHETYPE_STATS",
    "CharacterArchetype",
    "compute_damage",
    "max_damage_bonus",
    "roll_attack_damage",
    # Characters
    "UnsupportedCharacterType",
    "create_character",
    "create_mage",
    "create_warrior",
    "parse_archetype",
    # Combat
    "DEFAULT_EXPERIENCE_AWARD",
    "AttackResult",
    "BattleOutcome",
    "BattleResult",
    "fight",
    "resolve_attack",
    # Display
    "format_battle_start",
    "format_character",
    "format_item",
    "format_item_list",
    # Items
    "ITEM_NAMES",
    "generate_random_item",
    "generate_random_items",
    "sort_items",
    # Models
    "Character",
    "Item",
    # Progression
    "LevelUpResult",
    "Stats",
    "apply_level_up",
    "experience_threshold",
]
