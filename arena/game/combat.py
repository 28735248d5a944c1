"""Duel resolution.

This module resolves a one-on-one duel between two characters:
- Attack resolution (damage roll minus defense, floored at zero)
- The round loop with its fixed turn order
- Experience for the survivor

Turn order is asymmetric. Side 1 always strikes first in a round,
and if that hit defeats side 2 the duel ends before side 2 can answer.
Side 2's answer is never skipped while side 1 is still standing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from arena.game.display import format_battle_start
from arena.game.models import Character
from arena.game.progression import LevelUpResult
from arena.tools.dice import RandomFunc

logger = logging.getLogger(__name__)

# Experience granted to the survivor of a duel
DEFAULT_EXPERIENCE_AWARD = 50


class BattleOutcome(str, Enum):
    """State of a duel."""

    ONGOING = "ongoing"
    SIDE1_DEFEATED = "side1_defeated"
    SIDE2_DEFEATED = "side2_defeated"
    NO_WINNER = "no_winner"  # Nobody fought, or the round limit ran out

    @property
    def is_terminal(self) -> bool:
        return self is not BattleOutcome.ONGOING


@dataclass
class AttackResult:
    """Result of a single attack."""

    attacker: str
    defender: str
    raw_damage: int  # Attack stat plus random bonus
    bonus: int  # Random part of raw_damage
    defender_defense: int
    damage: int  # What actually landed, never negative
    defender_health_before: int
    defender_health_after: int
    defender_defeated: bool
    narrative: str


@dataclass
class BattleResult:
    """Result of a whole duel."""

    outcome: BattleOutcome
    rounds: int
    attacks: list[AttackResult] = field(default_factory=list)
    winner: str | None = None
    loser: str | None = None
    experience_awarded: int = 0
    level_ups: list[LevelUpResult] = field(default_factory=list)
    events: list[str] = field(default_factory=list)

    @property
    def has_winner(self) -> bool:
        return self.winner is not None


def resolve_attack(attacker: Character, defender: Character, rand_func: RandomFunc) -> AttackResult:
    """Resolve one attack and apply its damage.

    Damage is the attacker's roll minus the defender's defense, floored at 0.

    Args:
        attacker: Character dealing damage
        defender: Character receiving damage (mutated)
        rand_func: Random source for the damage bonus

    Returns:
        AttackResult with full resolution details
    """
    roll = attacker.roll_damage(rand_func)
    damage = max(0, roll.total - defender.defense)

    health_before = defender.health
    defender.take_damage(damage)
    defeated = not defender.is_alive

    narrative = f"{attacker.name} deals {damage} damage to {defender.name}"
    if defeated:
        narrative += f". {defender.name} falls!"
    else:
        narrative += f" ({defender.health} HP remaining)"

    logger.debug(
        f"{attacker.name} rolls {roll.total} vs DEF {defender.defense}: "
        f"{health_before} -> {defender.health} HP"
    )

    return AttackResult(
        attacker=attacker.name,
        defender=defender.name,
        raw_damage=roll.total,
        bonus=roll.bonus,
        defender_defense=defender.defense,
        damage=damage,
        defender_health_before=health_before,
        defender_health_after=defender.health,
        defender_defeated=defeated,
        narrative=narrative,
    )


def _finish(
    result: BattleResult,
    outcome: BattleOutcome,
    winner: Character,
    loser: Character,
    experience_award: int,
) -> BattleResult:
    """Record a decisive outcome and pay the winner."""
    result.outcome = outcome
    result.winner = winner.name
    result.loser = loser.name
    result.events.append(f"{loser.name} is defeated!")

    result.experience_awarded = experience_award
    result.level_ups = winner.gain_experience(experience_award)
    result.events.extend(level_up.announcement for level_up in result.level_ups)

    logger.info(
        f"Battle over after {result.rounds} round(s): {winner.name} defeats {loser.name} "
        f"and gains {experience_award} XP"
    )
    return result


def fight(
    side1: Character,
    side2: Character,
    rand_func: RandomFunc,
    experience_award: int = DEFAULT_EXPERIENCE_AWARD,
    max_rounds: int | None = None,
) -> BattleResult:
    """Run a duel to completion.

    Each round side1 attacks side2; if side2 survives, side2 attacks side1.
    The duel ends as soon as either side reaches 0 HP, and the survivor gains
    experience (possibly levelling up). If either side starts at 0 HP no round
    is fought and there is no winner.

    Args:
        side1: Character who strikes first each round
        side2: Character who answers
        rand_func: Random source for damage bonuses
        experience_award: Experience given to the survivor
        max_rounds: Optional round limit; reaching it ends with no winner

    Returns:
        BattleResult with the outcome, attack log and event lines
    """
    result = BattleResult(outcome=BattleOutcome.ONGOING, rounds=0)
    result.events.append(format_battle_start(side1, side2))
    logger.info(result.events[0])

    while side1.is_alive and side2.is_alive:
        if max_rounds is not None and result.rounds >= max_rounds:
            logger.warning(f"Round limit of {max_rounds} reached with both sides standing")
            result.events.append(f"The duel is called off after {result.rounds} round(s).")
            result.outcome = BattleOutcome.NO_WINNER
            return result

        result.rounds += 1

        attack = resolve_attack(side1, side2, rand_func)
        result.attacks.append(attack)
        result.events.append(attack.narrative)

        if not side2.is_alive:
            return _finish(result, BattleOutcome.SIDE2_DEFEATED, side1, side2, experience_award)

        attack = resolve_attack(side2, side1, rand_func)
        result.attacks.append(attack)
        result.events.append(attack.narrative)

        if not side1.is_alive:
            return _finish(result, BattleOutcome.SIDE1_DEFEATED, side2, side1, experience_award)

    # Only reachable when someone entered the duel already at 0 HP
    logger.warning(f"No duel fought: {side1.name} or {side2.name} has no health left")
    result.events.append("Nobody is able to fight.")
    result.outcome = BattleOutcome.NO_WINNER
    return result
