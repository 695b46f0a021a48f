"""
Tests for the Order aggregate.

Covers the seeded catalog, append-only pizza recording, order_pizza() with
catalog selections, totals/cashback and the serializable summary.
"""

import json

import pytest

from pizzeria.domain.builder import PizzaBuilder
from pizzeria.domain.errors import UnknownIngredientError
from pizzeria.domain.models import (
    Ingredient,
    IngredientSelection,
    PizzaOrderRequest,
    PizzaSize,
    PizzaVariant,
)
from pizzeria.domain.order import Order
from pizzeria.domain.pricing import StandardPricingStrategy


class TestCatalog:
    def test_seeded_with_salt_and_pepper(self, order, salt, pepper):
        assert order.catalog == (salt, pepper)

    def test_catalog_is_read_only_view(self, order):
        view = order.catalog
        assert isinstance(view, tuple)
        assert order.catalog[0].name == "Salt"

    def test_custom_catalog(self):
        basil = Ingredient(name="Basil", cost=2)
        assert Order(catalog=[basil]).catalog == (basil,)

    def test_ingredient_lookup(self, order, pepper):
        assert order.ingredient(1) == pepper

    @pytest.mark.parametrize("index", [-1, 2, 99])
    def test_ingredient_lookup_out_of_range(self, order, index):
        with pytest.raises(UnknownIngredientError) as exc_info:
            order.ingredient(index)
        assert exc_info.value.index == index
        assert isinstance(exc_info.value, LookupError)


class TestRecording:
    def test_empty_order_totals_zero(self, order):
        assert order.pizzas == ()
        assert order.order_total() == 0
        assert order.cashback() == 0

    def test_totals_over_recorded_pizzas(self, order):
        order.record_pizza(PizzaBuilder("vegan", "MD").product())  # 700
        order.record_pizza(PizzaBuilder("hawaiian", "MD").product())  # 900
        assert order.order_total() == 1600
        assert order.cashback() == 80
        assert order.cashback(710) == 35

    def test_record_keeps_order_of_arrival(self, order):
        first = PizzaBuilder("pepperoni", "SM").product()
        second = PizzaBuilder("vegan", "SM").product()
        order.record_pizza(first)
        order.record_pizza(second)
        assert order.pizzas == (first, second)

    def test_order_pizza_resolves_catalog_selections(self, order, salt, pepper):
        request = PizzaOrderRequest(
            variant=PizzaVariant.VEGAN,
            size=PizzaSize.MEDIUM,
            selections=[IngredientSelection(index=0, quantity=2), IngredientSelection(index=1)],
        )
        pizza = order.order_pizza(request)
        assert order.pizzas == (pizza,)
        assert pizza.quantity_of(salt) == 2
        assert pizza.quantity_of(pepper) == 1
        assert order.order_total() == 710

    def test_order_pizza_with_zero_quantity_selection(self, order):
        request = PizzaOrderRequest(
            variant="pepperoni",
            size=3,
            selections=[IngredientSelection(index=0, quantity=0)],
        )
        pizza = order.order_pizza(request)
        assert pizza.lines == []
        assert pizza.total_cost() == 1920

    def test_invalid_selection_records_nothing(self, order):
        request = PizzaOrderRequest(
            variant=PizzaVariant.HAWAIIAN,
            size=PizzaSize.SMALL,
            selections=[IngredientSelection(index=1), IngredientSelection(index=5)],
        )
        with pytest.raises(UnknownIngredientError):
            order.order_pizza(request)
        assert order.pizzas == ()

    def test_injected_pricing_strategy(self):
        class FlatCashback:
            def order_total(self, pizzas):
                return sum(p.total_cost() for p in pizzas)

            def cashback(self, total):
                return 10

        order = Order(pricing=FlatCashback())
        order.record_pizza(PizzaBuilder("vegan", "SM").product())
        assert order.cashback() == 10

    def test_recording_does_not_reprice_the_order(self):
        class CountingPricing(StandardPricingStrategy):
            calls = 0

            def order_total(self, pizzas):
                CountingPricing.calls += 1
                return super().order_total(pizzas)

        order = Order(pricing=CountingPricing())
        for _ in range(5):
            order.record_pizza(PizzaBuilder("vegan", "SM").product())
        assert CountingPricing.calls == 0
        assert order.order_total() == 1750


class TestSummary:
    def test_summary_snapshot(self, order):
        order.order_pizza(
            PizzaOrderRequest(
                variant=PizzaVariant.HAWAIIAN,
                size=PizzaSize.SMALL,
                selections=[IngredientSelection(index=1, quantity=4)],
            )
        )
        summary = order.summary()
        assert summary.total == 464
        assert summary.cashback == 23
        assert len(summary.pizzas) == 1
        line = summary.pizzas[0]
        assert line.description == "Hawaiian Pizza 🍍 / SM / Pepper: 4 / 464"
        assert line.size == "SM"
        assert line.total_cost == 464

    def test_summary_serializes_to_json(self, order):
        order.record_pizza(PizzaBuilder("pepperoni", "XL").product())
        data = json.loads(order.summary().model_dump_json())
        assert data["total"] == 1920
        assert data["cashback"] == 96
        assert data["pizzas"][0]["variant"] == "pepperoni"
