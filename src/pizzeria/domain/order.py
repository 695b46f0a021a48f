"""
Order aggregate: the ingredient catalog plus the pizzas recorded this session.

An Order is created once per session and only ever grows. It owns no I/O;
the interactive shell and the CLI drive it through `order_pizza()` with a
validated `PizzaOrderRequest` and read results back through `summary()`.
"""

import logging
from collections.abc import Iterable

from pizzeria.config import DEFAULT_CATALOG
from pizzeria.domain.builder import PizzaBuilder
from pizzeria.domain.errors import UnknownIngredientError
from pizzeria.domain.models import Ingredient, OrderSummary, Pizza, PizzaLine, PizzaOrderRequest
from pizzeria.domain.pricing import PricingStrategy, StandardPricingStrategy

logger = logging.getLogger(__name__)


class Order:
    """Holds the catalog and the running pizza list; computes totals on demand."""

    def __init__(
        self,
        catalog: Iterable[Ingredient] | None = None,
        pricing: PricingStrategy | None = None,
    ) -> None:
        self._catalog: list[Ingredient] = list(DEFAULT_CATALOG if catalog is None else catalog)
        self._pizzas: list[Pizza] = []
        # Strategy pattern: swap in a different pricing strategy if needed.
        self.pricing: PricingStrategy = pricing or StandardPricingStrategy()

    @property
    def catalog(self) -> tuple[Ingredient, ...]:
        return tuple(self._catalog)

    @property
    def pizzas(self) -> tuple[Pizza, ...]:
        return tuple(self._pizzas)

    def ingredient(self, index: int) -> Ingredient:
        # Negative indexes would silently wrap around on a list.
        if not 0 <= index < len(self._catalog):
            raise UnknownIngredientError(index)
        return self._catalog[index]

    def record_pizza(self, pizza: Pizza) -> None:
        self._pizzas.append(pizza)
        logger.info("Recorded pizza #%d: %s (%s)", len(self._pizzas), pizza.variant.value, pizza.size_label())

    def order_pizza(self, request: PizzaOrderRequest) -> Pizza:
        """Build the requested pizza from catalog selections and record it.

        All catalog indexes are resolved before anything is built, so an
        invalid selection leaves the order untouched.
        """
        picks = [(self.ingredient(sel.index), sel.quantity) for sel in request.selections]
        pizza = PizzaBuilder.create(request.variant, request.size, picks)
        self.record_pizza(pizza)
        return pizza

    def order_total(self) -> int:
        return self.pricing.order_total(self._pizzas)

    def cashback(self, total: int | None = None) -> int:
        if total is None:
            total = self.order_total()
        return self.pricing.cashback(total)

    def summary(self) -> OrderSummary:
        total = self.order_total()
        return OrderSummary(
            pizzas=[
                PizzaLine(
                    description=pizza.description(),
                    variant=pizza.variant,
                    size=pizza.size_label(),
                    total_cost=pizza.total_cost(),
                )
                for pizza in self._pizzas
            ],
            total=total,
            cashback=self.cashback(total),
        )
