"""
Pizza builder (Builder pattern).

A single builder serves every variant: the variant tag selects the pricing
constants from `VARIANT_PROFILES`, so there is no per-variant builder subclass.
Each builder owns exactly one Pizza, created at construction time with a
fixed size. The builder never seals its product; `product()` can be called
any number of times and later `with_ingredient()` calls keep mutating the
same pizza.
"""

import logging
from collections.abc import Iterable

from pizzeria.domain.errors import InvalidQuantityError
from pizzeria.domain.models import Ingredient, Pizza, PizzaSize, PizzaVariant

logger = logging.getLogger(__name__)


class PizzaBuilder:
    """Accumulates ingredient selections onto one pizza of a given variant."""

    def __init__(self, variant: PizzaVariant | int | str, size: PizzaSize | int | str) -> None:
        # Both raise a PizzeriaError subclass on bad input; nothing is defaulted.
        variant = PizzaVariant.parse(variant)
        size = PizzaSize.parse(size)
        self._product = Pizza(variant=variant, size=size)
        logger.info("Started %s pizza (%s)", variant.value, size.code)

    @classmethod
    def create(
        cls,
        variant: PizzaVariant | int | str,
        size: PizzaSize | int | str,
        ingredients: Iterable[tuple[Ingredient, int]] = (),
    ) -> Pizza:
        """Build a pizza from (ingredient, count) pairs in one call."""
        builder = cls(variant, size)
        for ingredient, times in ingredients:
            builder.with_ingredient(ingredient, times)
        return builder.product()

    @property
    def variant(self) -> PizzaVariant:
        return self._product.variant

    @property
    def size(self) -> PizzaSize:
        return self._product.size

    def with_ingredient(self, ingredient: Ingredient, times: int = 1) -> "PizzaBuilder":
        if times < 0:
            raise InvalidQuantityError(times)
        for _ in range(times):
            self._product.add_ingredient(ingredient)
        if times:
            logger.debug("Added %s x%d to %s pizza", ingredient.name, times, self.variant.value)
        return self

    def product(self) -> Pizza:
        return self._product
