"""
Domain models for the pizza ordering core.

All models use Pydantic v2 BaseModel for validation and serialization. Value
types (Ingredient, VariantProfile) are frozen so they can be shared process-wide
and used as dict keys.

Enums: PizzaSize is an IntEnum because its ordinal takes part in pricing
(size factor = ordinal + 1). PizzaVariant inherits from (str, Enum) so it
serializes as a plain string in JSON output.
"""

from decimal import Decimal
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pizzeria.domain.errors import InvalidSizeError, UnknownVariantError

UNKNOWN_SIZE_LABEL = "UNKNOWN"


class Ingredient(BaseModel):
    """A selectable ingredient with a per-unit cost.

    Equality and hashing use the full value (name + cost). Two ingredients
    with the same name and cost are the same ingredient as far as a pizza's
    quantity counting is concerned.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    cost: int = Field(..., ge=0)  # Per unit added, before the variant multiplier

    @property
    def sort_key(self) -> int:
        return self.cost


class PizzaSize(IntEnum):
    """Available pizza sizes. The ordinal scales the variant's base cost."""

    SMALL = 0   # SM, 25 cm, base cost x1
    MEDIUM = 1  # MD, 30 cm, base cost x2
    LARGE = 2   # LG, 35 cm, base cost x3
    XLARGE = 3  # XL, 40 cm, base cost x4

    @property
    def factor(self) -> int:
        return self.value + 1

    @property
    def code(self) -> str:
        return SIZE_CODES[self]

    @property
    def diameter_cm(self) -> int:
        return SIZE_DIAMETERS_CM[self]

    @property
    def display_name(self) -> str:
        return "XLarge" if self is PizzaSize.XLARGE else self.name.title()

    @classmethod
    def parse(cls, value: "PizzaSize | int | str") -> "PizzaSize":
        """Resolve a member, an ordinal, a two-letter code or a name.

        Raises InvalidSizeError for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidSizeError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidSizeError(value) from None
        if isinstance(value, str):
            text = value.strip().upper()
            if text.isdecimal():
                return cls.parse(int(text))
            for size, code in SIZE_CODES.items():
                if text == code:
                    return size
            if text in cls.__members__:
                return cls[text]
        raise InvalidSizeError(value)


SIZE_CODES: dict[PizzaSize, str] = {
    PizzaSize.SMALL: "SM",
    PizzaSize.MEDIUM: "MD",
    PizzaSize.LARGE: "LG",
    PizzaSize.XLARGE: "XL",
}

SIZE_DIAMETERS_CM: dict[PizzaSize, int] = {
    PizzaSize.SMALL: 25,
    PizzaSize.MEDIUM: 30,
    PizzaSize.LARGE: 35,
    PizzaSize.XLARGE: 40,
}


class VariantProfile(BaseModel):
    """Fixed pricing and display constants for one pizza variant."""

    model_config = ConfigDict(frozen=True)

    label: str                                       # Shown in descriptions, emoji included
    base_cost: int = Field(..., ge=0)                # Scaled by the size factor
    cost_multiplier: Decimal = Field(..., ge=0)      # Applied to the summed ingredient cost
    menu_number: int                                 # 1-based choice in the text menu, not an ordinal


class PizzaVariant(str, Enum):
    """The closed set of pizza variants, mapped to their profiles below."""

    VEGAN = "vegan"
    HAWAIIAN = "hawaiian"
    PEPPERONI = "pepperoni"

    @property
    def profile(self) -> VariantProfile:
        return VARIANT_PROFILES[self]

    @classmethod
    def parse(cls, value: "PizzaVariant | int | str") -> "PizzaVariant":
        """Resolve a member, a tag/name string or a menu number.

        Integers (and digit strings) are 1-based menu numbers as printed in
        the text menu, unlike PizzaSize where integers are 0-based ordinals.
        Raises UnknownVariantError for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text.isdecimal():
                return cls.parse(int(text))
            for variant in cls:
                if text == variant.value:
                    return variant
        elif isinstance(value, int) and not isinstance(value, bool):
            for variant in cls:
                if VARIANT_PROFILES[variant].menu_number == value:
                    return variant
        raise UnknownVariantError(value)


# Multipliers are exact decimals; ingredient totals are truncated after scaling.
VARIANT_PROFILES: dict[PizzaVariant, VariantProfile] = {
    PizzaVariant.VEGAN: VariantProfile(
        label="Vegan Pizza 🥦", base_cost=350, cost_multiplier=Decimal("0.8"), menu_number=1
    ),
    PizzaVariant.HAWAIIAN: VariantProfile(
        label="Hawaiian Pizza 🍍", base_cost=450, cost_multiplier=Decimal("1.2"), menu_number=2
    ),
    PizzaVariant.PEPPERONI: VariantProfile(
        label="Pepperoni Pizza 🍕", base_cost=480, cost_multiplier=Decimal("1.5"), menu_number=3
    ),
}


# ── Pizza composition ────────────────────────────────────────────────


class IngredientLine(BaseModel):
    """One distinct ingredient on a pizza and how many times it was added."""

    ingredient: Ingredient
    quantity: int = Field(..., ge=1)


class Pizza(BaseModel):
    """A pizza of a given variant and size with its ingredient composition.

    Created by PizzaBuilder; do not construct directly in application code.
    Lines only ever grow: there is no way to remove an ingredient.
    """

    variant: PizzaVariant
    size: PizzaSize
    lines: list[IngredientLine] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_one_line_per_ingredient(self) -> "Pizza":
        seen: set[Ingredient] = set()
        for line in self.lines:
            if line.ingredient in seen:
                raise ValueError(f"duplicate line for ingredient {line.ingredient.name!r} ({line.ingredient.cost})")
            seen.add(line.ingredient)
        return self

    @property
    def base_cost(self) -> int:
        return self.variant.profile.base_cost

    @property
    def cost_multiplier(self) -> Decimal:
        return self.variant.profile.cost_multiplier

    def add_ingredient(self, ingredient: Ingredient) -> None:
        for line in self.lines:
            if line.ingredient == ingredient:
                line.quantity += 1
                return
        self.lines.append(IngredientLine(ingredient=ingredient, quantity=1))

    def quantity_of(self, ingredient: Ingredient) -> int:
        for line in self.lines:
            if line.ingredient == ingredient:
                return line.quantity
        return 0

    def ordered_lines(self) -> list[IngredientLine]:
        """Lines in ascending cost order; equal costs keep insertion order."""
        return sorted(self.lines, key=lambda line: line.ingredient.sort_key)

    def ingredients_summary(self) -> str:
        return "".join(f"{line.ingredient.name}: {line.quantity} / " for line in self.ordered_lines())

    def size_label(self) -> str:
        return SIZE_CODES.get(self.size, UNKNOWN_SIZE_LABEL)

    def details(self) -> str:
        return f"{self.size_label()} / {self.ingredients_summary()}{self.total_cost()}"

    def description(self) -> str:
        return f"{self.variant.profile.label} / {self.details()}"

    def ingredients_cost(self) -> int:
        """Scale the summed ingredient cost by the variant multiplier, then truncate."""
        subtotal = sum(line.ingredient.cost * line.quantity for line in self.lines)
        # Integer ratio keeps this exact for any subtotal size; floor == trunc here.
        numerator, denominator = self.cost_multiplier.as_integer_ratio()
        return subtotal * numerator // denominator

    def total_cost(self) -> int:
        return self.base_cost * self.size.factor + self.ingredients_cost()


# ── Construction commands and output snapshots ───────────────────────
# The shell turns user input into these commands; the core never reads input.


class IngredientSelection(BaseModel):
    """A catalog reference plus how many times to add it."""

    index: int = Field(..., ge=0)
    quantity: int = Field(1, ge=0)


class PizzaOrderRequest(BaseModel):
    """A fully validated command to build and record one pizza."""

    variant: PizzaVariant
    size: PizzaSize
    selections: list[IngredientSelection] = Field(default_factory=list)


class PizzaLine(BaseModel):
    """One pizza in an order summary."""

    description: str
    variant: PizzaVariant
    size: str
    total_cost: int


class OrderSummary(BaseModel):
    """Snapshot of an order for display or JSON output."""

    pizzas: list[PizzaLine]
    total: int
    cashback: int
