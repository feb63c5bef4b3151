"""Menu model: dishes and the target/dish groups read from a data file.

A MenuGroup is built once per section of the input and is read-only
afterwards; the solver and formatter only ever see its derived views.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from menusum.domain.exceptions import ValidationError
from menusum.domain.model.value_objects import Money


@dataclass(frozen=True)
class Dish:
    """A named menu item with a strictly positive price."""

    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValidationError("Dish name cannot be empty")
        if not self.price.is_positive:
            raise ValidationError(
                f"Dish price must be greater than zero: '{self.name}'"
            )


@dataclass(frozen=True)
class MenuGroup:
    """One target price followed by the dishes that may be combined to hit it."""

    target: Money
    dishes: tuple[Dish, ...] = field(default_factory=tuple)
    line: int | None = None  # where the target appeared, for diagnostics

    @staticmethod
    def of(target: str, dishes: list[tuple[str, str]]) -> MenuGroup:
        """Build a group from raw currency strings."""
        return MenuGroup(
            target=Money.parse(target),
            dishes=tuple(Dish(name, Money.parse(price)) for name, price in dishes),
        )

    def candidate_values(self) -> list[int]:
        """Distinct dish prices in cents, largest first."""
        return sorted({dish.price.cents for dish in self.dishes}, reverse=True)

    def name_lookup(self) -> dict[int, tuple[str, ...]]:
        """Map each price in cents to the dish names at that price.

        Names keep the order they appeared in the input.
        """
        lookup: dict[int, list[str]] = {}
        for dish in self.dishes:
            lookup.setdefault(dish.price.cents, []).append(dish.name)
        return {price: tuple(names) for price, names in lookup.items()}
