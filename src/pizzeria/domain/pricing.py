"""
Order-level pricing strategies (Strategy pattern).

Per-pizza cost is fixed by the variant table and lives on Pizza itself. What
an *order* charges on top of that (the running total and the cashback shown
to the customer) is delegated to a `PricingStrategy`, so a different scheme
can be injected into Order without touching the aggregate.

Pricing is pure arithmetic: no I/O, no clock, no randomness.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from pizzeria.config import CASHBACK_RATE
from pizzeria.domain.models import Pizza


class PricingStrategy(Protocol):
    """Interface for pricing a whole order.

    Any class with these two methods satisfies the protocol (structural
    subtyping, no explicit inheritance needed).
    """

    def order_total(self, pizzas: Iterable[Pizza]) -> int: ...

    def cashback(self, total: int) -> int: ...


class StandardPricingStrategy:
    """Default pricing: sum of pizza totals, 5% cashback truncated to a whole unit.

    Examples:
        - Pizzas costing 700 and 900:  total 1600, cashback 80
        - Single vegan MD pizza, 710:  total 710,  cashback 35
    """

    CASHBACK_RATE: Decimal = CASHBACK_RATE

    def order_total(self, pizzas: Iterable[Pizza]) -> int:
        return sum(pizza.total_cost() for pizza in pizzas)

    def cashback(self, total: int) -> int:
        numerator, denominator = self.CASHBACK_RATE.as_integer_ratio()
        return total * numerator // denominator
