"""Text formatting for items, characters and battles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from arena.game.models import Character, Item


def format_item(item: Item) -> str:
    """Format an item, e.g. "Sword [ATK: 3, DEF: 7]"."""
    return f"{item.name} [ATK: {item.attack_bonus}, DEF: {item.defense_bonus}]"


def format_character(character: Character) -> str:
    """Format a character, e.g. "Hero [HP: 100, ATK: 20, DEF: 10, LVL: 1]"."""
    return (
        f"{character.name} [HP: {character.health}, ATK: {character.attack}, "
        f"DEF: {character.defense}, LVL: {character.level}]"
    )


def format_battle_start(side1: Character, side2: Character) -> str:
    """Announcement line for the start of a duel."""
    return f"Battle starts between {format_character(side1)} and {format_character(side2)}"


def format_item_list(items: Iterable[Item]) -> str:
    """Format items one per line with their combined bonus.

    Examples:
        "  1. Sword [ATK: 3, DEF: 7] (total 10)"
    """
    lines = [
        f"  {i + 1}. {format_item(item)} (total {item.combined})"
        for i, item in enumerate(items)
    ]
    if not lines:
        return "  (no items)"
    return "\n".join(lines)
