"""Runtime configuration defaults for the pizzeria."""

from decimal import Decimal

from pizzeria.domain.models import Ingredient

# Ingredients offered when an Order is created without an explicit catalog.
DEFAULT_CATALOG: tuple[Ingredient, ...] = (
    Ingredient(name="Salt", cost=5),
    Ingredient(name="Pepper", cost=3),
)

CASHBACK_RATE = Decimal("0.05")
CURRENCY = "USD"

# Menu sentinel for "quit" / "done" in every interactive prompt.
EXIT_CHOICE = -1

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
