"""
Interactive text-menu shell for placing a pizza order.

The shell is the only place that reads user input. It turns menu choices into
a validated `PizzaOrderRequest` and hands it to `Order.order_pizza()`; invalid
input is ignored or re-prompted here and never reaches the domain core.

Input and output are injectable so sessions can be scripted in tests:

    answers = iter(["1", "0", "-1", "-1"])
    shell = OrderShell(input_fn=lambda prompt: next(answers), output=buf)
    shell.run()
"""

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from pizzeria.config import CURRENCY, EXIT_CHOICE
from pizzeria.domain.errors import UnknownVariantError
from pizzeria.domain.models import (
    VARIANT_PROFILES,
    IngredientSelection,
    PizzaOrderRequest,
    PizzaSize,
    PizzaVariant,
)
from pizzeria.domain.order import Order

logger = logging.getLogger(__name__)

PROMPT = "> "


# ── Rendering ────────────────────────────────────────────────────────


def variant_menu_line() -> str:
    numbers = "/".join(str(profile.menu_number) for profile in VARIANT_PROFILES.values())
    names = "/".join(variant.value.title() for variant in VARIANT_PROFILES)
    return f"{numbers}/{EXIT_CHOICE}: {names} Pizza/quit"


def size_menu_lines() -> list[str]:
    return [f"{size.value}: {size.display_name} ({size.diameter_cm} cm)" for size in PizzaSize]


def catalog_lines(order: Order) -> list[str]:
    return [f"{i}: {ingredient.name} ({ingredient.cost}) " for i, ingredient in enumerate(order.catalog)]


def order_lines(order: Order) -> list[str]:
    if not order.pizzas:
        return []
    return ["## Your order ##"] + [pizza.description() for pizza in order.pizzas]


def total_lines(order: Order) -> list[str]:
    if not order.pizzas:
        return []
    total = order.order_total()
    return ["$$ ORDER TOTAL $$", f"{total} {CURRENCY} + {order.cashback(total)} cashback 🤫"]


def menu_lines(order: Order) -> list[str]:
    """Everything a customer can choose from, without starting a session."""
    lines = ["# Pizzas #"]
    for profile in VARIANT_PROFILES.values():
        lines.append(
            f"{profile.menu_number}: {profile.label} (base {profile.base_cost}, ingredients x{profile.cost_multiplier})"
        )
    lines.append("# Sizes #")
    lines.extend(size_menu_lines())
    lines.append("# Ingredients #")
    lines.extend(catalog_lines(order))
    return lines


# ── Interactive loop ─────────────────────────────────────────────────


class OrderShell:
    """Runs the order loop until the customer quits or input runs out."""

    def __init__(
        self,
        order: Order | None = None,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.order = order or Order()
        self._input = input_fn
        self._output = output or sys.stdout

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._output)

    def _read_choice(self) -> int | None:
        """Read one integer choice; None if the line is not a number.

        Raises EOFError when input is exhausted.
        """
        raw = self._input(PROMPT).strip()
        try:
            return int(raw)
        except ValueError:
            logger.debug("Ignoring non-numeric input %r", raw)
            return None

    def run(self) -> Order:
        self._say("# Pizza Order #")
        try:
            while True:
                self._say(*order_lines(self.order))
                if not self.order_round():
                    break
        except EOFError:
            logger.info("Input closed; finishing order")
        self._say(*total_lines(self.order))
        return self.order

    def order_round(self) -> bool:
        """Offer the variant menu once. Returns False when the customer quits."""
        self._say(variant_menu_line())
        choice = self._read_choice()
        if choice == EXIT_CHOICE:
            return False
        if choice is None:
            return True
        try:
            variant = PizzaVariant.parse(choice)
        except UnknownVariantError:
            logger.debug("No pizza on the menu as %d", choice)
            return True
        self.order.order_pizza(self.ask_request(variant))
        return True

    def ask_request(self, variant: PizzaVariant) -> PizzaOrderRequest:
        self._say(f"## Order {variant.value.title()} Pizza ##")
        size = self.ask_size()
        selections = self.ask_ingredients()
        return PizzaOrderRequest(variant=variant, size=size, selections=selections)

    def ask_size(self) -> PizzaSize:
        self._say("Choose your pizza size: ")
        while True:
            self._say(*size_menu_lines())
            choice = self._read_choice()
            if choice is not None and PizzaSize.SMALL <= choice <= PizzaSize.XLARGE:
                return PizzaSize(choice)

    def ask_ingredients(self) -> list[IngredientSelection]:
        self._say("### Choose Ingredients ###")
        counts: dict[int, int] = {}
        catalog = self.order.catalog
        while True:
            if counts:
                self._say("#### Chosen ingredients ####")
                for index in sorted(counts):
                    self._say(f"{catalog[index].name} ({counts[index]}) ")
            self._say("#### Available Ingredients ####")
            self._say(*catalog_lines(self.order))
            self._say(f"Type `{EXIT_CHOICE}` to exit the ingredients dialog")

            choice = self._read_choice()
            if choice == EXIT_CHOICE:
                return [IngredientSelection(index=i, quantity=counts[i]) for i in sorted(counts)]
            if choice is not None and 0 <= choice < len(catalog):
                counts[choice] = counts.get(choice, 0) + 1
