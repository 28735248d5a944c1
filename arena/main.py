"""Main entry point for Arena Duel.

Runs a duel between a Warrior and a Mage, each carrying one random item,
then demonstrates sorting a batch of random items by their combined bonus.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from arena.config import Settings, get_settings
from arena.game.characters import UnsupportedCharacterType, create_character
from arena.game.combat import BattleResult, fight
from arena.game.display import format_character, format_item_list
from arena.game.items import generate_random_item, generate_random_items, sort_items
from arena.game.models import Character
from arena.tools.dice import RandomFunc, create_rand_func

logger = logging.getLogger(__name__)


def print_banner() -> None:
    """Print the application banner."""
    banner = """
    ========================================
     Arena Duel
     Warrior vs Mage, one round at a time
    ========================================
    """
    print(banner)


def setup_logging(level: str, verbose: bool = False) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
    )


def show_configuration(settings: Settings) -> None:
    """Print the effective settings."""
    print("[CONFIG]")
    for name, value in settings.model_dump().items():
        print(f"  {name}: {value}")


def build_duelists(
    hero: str,
    enemy: str,
    rand_func: RandomFunc,
    hero_type: str = "warrior",
    enemy_type: str = "mage",
) -> tuple[Character, Character]:
    """Create both duelists and give each one random item.

    Raises:
        UnsupportedCharacterType: If either archetype is not recognised
    """
    side1 = create_character(hero_type, hero)
    side2 = create_character(enemy_type, enemy)

    side1.add_item(generate_random_item(rand_func))
    side2.add_item(generate_random_item(rand_func))

    return side1, side2


def run_duel(
    side1: Character,
    side2: Character,
    rand_func: RandomFunc,
    settings: Settings,
) -> BattleResult:
    """Fight the duel and print every event line."""
    result = fight(
        side1,
        side2,
        rand_func,
        experience_award=settings.experience_award,
        max_rounds=settings.max_rounds,
    )

    for event in result.events:
        print(event)

    print()
    print(f"After {result.rounds} round(s):")
    print(f"  {format_character(side1)}")
    print(f"  {format_character(side2)}")
    return result


def run_sort_demo(count: int, rand_func: RandomFunc) -> None:
    """Generate random items and print them before and after sorting."""
    items = generate_random_items(count, rand_func)

    print("\nItems before sorting:")
    print(format_item_list(items))

    print("\nItems sorted by combined bonus:")
    print(format_item_list(sort_items(items)))


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Arena Duel - turn-based Warrior vs Mage simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m arena.main                       # Random duel
  python -m arena.main --seed 42             # Reproducible duel
  python -m arena.main --hero Conan --enemy Merlin
  python -m arena.main --items 10            # Sort ten random items
  python -m arena.main --show-config         # Print settings and exit
        """,
    )

    parser.add_argument("--seed", type=int, help="Seed for the random source")
    parser.add_argument("--hero", default="Hero", help="Name of the first duelist")
    parser.add_argument("--enemy", default="Enemy", help="Name of the second duelist")
    parser.add_argument("--hero-type", default="warrior", help="Archetype of the first duelist")
    parser.add_argument("--enemy-type", default="mage", help="Archetype of the second duelist")
    parser.add_argument("--items", type=int, help="Number of items in the sorting demo")
    parser.add_argument("--max-rounds", type=int, help="End the duel with no winner after this many rounds")
    parser.add_argument("--verbose", action="store_true", help="Log every damage roll")
    parser.add_argument("--show-config", action="store_true", help="Print settings and exit")

    args = parser.parse_args()

    settings = get_settings()
    overrides = {
        "rng_seed": args.seed,
        "item_count": args.items,
        "max_rounds": args.max_rounds,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if overrides:
        try:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
        except ValidationError as e:
            parser.error(f"invalid option value: {e.errors()[0]['msg']}")

    setup_logging(settings.log_level, verbose=args.verbose)
    print_banner()

    if args.show_config:
        show_configuration(settings)
        sys.exit(0)

    rand_func = create_rand_func(settings.rng_seed)

    try:
        side1, side2 = build_duelists(
            args.hero,
            args.enemy,
            rand_func,
            hero_type=args.hero_type,
            enemy_type=args.enemy_type,
        )
    except UnsupportedCharacterType as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    run_duel(side1, side2, rand_func, settings)
    run_sort_demo(settings.item_count, rand_func)


if __name__ == "__main__":
    main()
