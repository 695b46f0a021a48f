import io

import pytest

from pizzeria.domain.models import Ingredient
from pizzeria.domain.order import Order
from pizzeria.shell import OrderShell


@pytest.fixture
def salt() -> Ingredient:
    return Ingredient(name="Salt", cost=5)


@pytest.fixture
def pepper() -> Ingredient:
    return Ingredient(name="Pepper", cost=3)


@pytest.fixture
def order() -> Order:
    return Order()


@pytest.fixture
def run_session():
    """Run the interactive shell against scripted answers; EOF once they run out."""

    def _run(*answers: str, order: Order | None = None) -> tuple[Order, str]:
        feed = iter(answers)

        def fake_input(prompt: str) -> str:
            try:
                return next(feed)
            except StopIteration:
                raise EOFError from None

        out = io.StringIO()
        shell = OrderShell(order=order, input_fn=fake_input, output=out)
        shell.run()
        return shell.order, out.getvalue()

    return _run
