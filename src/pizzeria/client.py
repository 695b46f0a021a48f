"""
CLI client — runs the interactive order shell or places a one-shot order.

Usage:
    # Interactive text menu (default):
    python -m pizzeria.client

    # Print the menu (variants, sizes, ingredient catalog) and exit:
    python -m pizzeria.client --menu

    # One pizza without prompts; prints the order summary as JSON:
    python -m pizzeria.client --variant vegan --size MD --ingredient 0x2 --ingredient 1
"""

import argparse
import logging
from collections.abc import Sequence

from pizzeria.config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from pizzeria.domain.errors import PizzeriaError
from pizzeria.domain.models import IngredientSelection, PizzaOrderRequest, PizzaSize, PizzaVariant
from pizzeria.domain.order import Order
from pizzeria.shell import OrderShell, menu_lines

logger = logging.getLogger(__name__)


def parse_selection(text: str) -> IngredientSelection:
    """Parse `INDEX` or `INDEXxCOUNT` (e.g. `0x2`) into a selection."""
    index, sep, count = text.strip().lower().partition("x")
    try:
        return IngredientSelection(index=int(index), quantity=int(count) if sep else 1)
    except ValueError:
        # pydantic's ValidationError is a ValueError too.
        raise argparse.ArgumentTypeError(f"invalid ingredient selection: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pizzeria", description="Order pizzas from the console")
    parser.add_argument("--menu", action="store_true", help="Print the menu and exit")
    parser.add_argument(
        "--variant",
        help="Pizza variant for a one-shot order: " + ", ".join(v.value for v in PizzaVariant),
    )
    parser.add_argument("--size", default="SM", help="Pizza size: 0-3, SM/MD/LG/XL or a size name (default SM)")
    parser.add_argument(
        "--ingredient",
        action="append",
        type=parse_selection,
        default=[],
        metavar="INDEX[xCOUNT]",
        help="Catalog index to add, optionally repeated COUNT times (may be given more than once)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default WARNING)",
    )
    return parser


def run_once(order: Order, args: argparse.Namespace) -> None:
    request = PizzaOrderRequest(
        variant=PizzaVariant.parse(args.variant),
        size=PizzaSize.parse(args.size),
        selections=args.ingredient,
    )
    logger.info("Placing one-shot order: %s", request.model_dump_json())
    order.order_pizza(request)
    print(order.summary().model_dump_json(indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    order = Order()
    if args.menu:
        print("\n".join(menu_lines(order)))
        return
    if args.variant is None:
        OrderShell(order).run()
        return
    try:
        run_once(order, args)
    except PizzeriaError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
