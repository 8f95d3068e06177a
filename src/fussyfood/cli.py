"""Command-line entry point for meal suggestions."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from fussyfood.app_logging import configure_logging
from fussyfood.containers import AppContainer, open_container
from fussyfood.domain.errors import FussyFoodError
from fussyfood.domain.foods import DietaryRestriction, MealType, Suggestion
from fussyfood.presentation import format_meal

_logger = logging.getLogger(__name__)

TODDLER_COMMAND = "toddler"
FAMILY_COMMAND = "family"


def _package_version() -> str:
    try:
        return version("fussyfood")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``fussyfood`` command."""
    parser = argparse.ArgumentParser(
        prog="fussyfood",
        description="Suggest fruits and vegetables for toddlers and families.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging on stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_package_version()}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        (TODDLER_COMMAND, "Suggest toddler-approved foods"),
        (FAMILY_COMMAND, "Suggest foods for the whole family"),
    ):
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.add_argument(
            "--meal",
            required=True,
            choices=[meal.value for meal in MealType],
            help="Meal to plan for",
        )
        subparser.add_argument(
            "--diet",
            default=DietaryRestriction.NONE.value,
            choices=[diet.value for diet in DietaryRestriction],
            help="Dietary restriction (default: none)",
        )
    return parser


def suggest(
    container: AppContainer,
    meal_type: MealType,
    restriction: DietaryRestriction,
    toddler_only: bool,
) -> str:
    """Run one suggestion request and return the rendered text."""
    foods = container.suggestion_service.suggest_meal(
        meal_type, restriction.flags(), toddler_only
    )
    suggestions = [
        Suggestion(
            food=food,
            allergens=frozenset(container.allergy_service.allergens_for(food.id)),
        )
        for food in foods
    ]
    return format_meal(
        meal_type, suggestions, toddler_only=toddler_only, restriction=restriction
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, print suggestions and return the exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    meal_type = MealType(args.meal)
    restriction = DietaryRestriction(args.diet)
    toddler_only = args.command == TODDLER_COMMAND
    try:
        with open_container() as container:
            output = suggest(container, meal_type, restriction, toddler_only)
    except FussyFoodError as exc:
        _logger.debug("Suggestion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0
