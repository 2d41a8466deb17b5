"""Domain models for the kitchen."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import assert_never

from kitchen.constant import DEFAULT_PROTEIN_TYPE, ELABORATE_MIN_INGREDIENTS, ELABORATE_MIN_PREP_TIME

CENTS = Decimal("0.01")


class Cuisine(Enum):
    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"


class ServingStyle(Enum):
    PLATED = "PLATED"
    FAMILY_STYLE = "FAMILY_STYLE"
    BUFFET = "BUFFET"


class CookingMethod(Enum):
    GRILLED = "GRILLED"
    BAKED = "BAKED"
    BOILED = "BOILED"
    FRIED = "FRIED"
    STEAMED = "STEAMED"
    RAW = "RAW"


class SideCategory(Enum):
    GRAIN = "GRAIN"
    PASTA = "PASTA"
    LEGUME = "LEGUME"
    BREAD = "BREAD"
    SALAD = "SALAD"
    SOUP = "SOUP"
    STARCHES = "STARCHES"
    VEGETABLE = "VEGETABLE"


class FlavorProfile(Enum):
    SWEET = "SWEET"
    BITTER = "BITTER"
    SOUR = "SOUR"
    SALTY = "SALTY"
    UMAMI = "UMAMI"


@dataclass(frozen=True)
class DietaryRequest:
    """Independent dietary flags; any combination may be set."""

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False

    @classmethod
    def everything(cls) -> DietaryRequest:
        return cls(True, True, True, True, True, True)

    def active_flags(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class SideDish:
    """A side served with a main course."""

    name: str
    category: SideCategory = SideCategory.GRAIN


def _to_price(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"price cannot be expressed in cents (got {value!r})") from None


@dataclass
class DishBase:
    """Fields shared by every dish variant."""

    name: str = ""
    ingredients: list[str] = field(default_factory=list)
    prep_time: int = 0
    price: Decimal = Decimal("0.00")
    cuisine: Cuisine = Cuisine.OTHER

    def __post_init__(self) -> None:
        self.ingredients = list(self.ingredients)
        self.price = _to_price(self.price)


@dataclass
class Appetizer(DishBase):
    serving_style: ServingStyle = ServingStyle.PLATED
    spiciness_level: int = 0
    vegetarian: bool = False


@dataclass
class MainCourse(DishBase):
    cooking_method: CookingMethod = CookingMethod.GRILLED
    protein_type: str = DEFAULT_PROTEIN_TYPE
    side_dishes: list[SideDish] = field(default_factory=list)
    gluten_free: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        self.side_dishes = list(self.side_dishes)

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes.append(side_dish)


@dataclass
class Dessert(DishBase):
    flavor_profile: FlavorProfile = FlavorProfile.SWEET
    sweetness_level: int = 0
    contains_nuts: bool = False


Dish = Appetizer | MainCourse | Dessert


def is_elaborate(dish: Dish) -> bool:
    """A dish with many ingredients that also takes at least an hour."""
    return len(dish.ingredients) >= ELABORATE_MIN_INGREDIENTS and dish.prep_time >= ELABORATE_MIN_PREP_TIME


def dish_kind(dish: Dish) -> str:
    """Return the record discriminator token for a dish."""
    match dish:
        case Appetizer():
            return "APPETIZER"
        case MainCourse():
            return "MAINCOURSE"
        case Dessert():
            return "DESSERT"
        case _:
            assert_never(dish)
