"""Error types raised by the suggestion pipeline."""


class FussyFoodError(Exception):
    """Base class for errors surfaced to the CLI user."""


class ConfigurationError(FussyFoodError):
    """Settings are missing or invalid."""


class FoodStoreConnectionError(FussyFoodError):
    """The Food Store could not be reached."""


class FoodQueryError(FussyFoodError):
    """A Food Store query failed or returned malformed data."""


class NoFoodFoundError(FussyFoodError):
    """No candidate food exists for a required pick."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No {category} matches the requested filters")
        self.category = category
