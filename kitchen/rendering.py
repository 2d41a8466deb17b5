"""Text formats for dishes and reports, plus rich helpers for the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from rich.text import Text

from kitchen.models import (
    Appetizer,
    CookingMethod,
    Cuisine,
    Dessert,
    DietaryRequest,
    Dish,
    FlavorProfile,
    MainCourse,
    ServingStyle,
    SideCategory,
    dish_kind,
)

if TYPE_CHECKING:
    from kitchen.kitchen import Kitchen

SERVING_STYLE_LABELS: dict[ServingStyle, str] = {
    ServingStyle.PLATED: "Plated",
    ServingStyle.FAMILY_STYLE: "Family Style",
    ServingStyle.BUFFET: "Buffet",
}

COOKING_METHOD_LABELS: dict[CookingMethod, str] = {
    CookingMethod.GRILLED: "Grilled",
    CookingMethod.BAKED: "Baked",
    CookingMethod.BOILED: "Boiled",
    CookingMethod.FRIED: "Fried",
    CookingMethod.STEAMED: "Steamed",
    CookingMethod.RAW: "Raw",
}

SIDE_CATEGORY_LABELS: dict[SideCategory, str] = {
    SideCategory.GRAIN: "Grain",
    SideCategory.PASTA: "Pasta",
    SideCategory.LEGUME: "Legume",
    SideCategory.BREAD: "Bread",
    SideCategory.SALAD: "Salad",
    SideCategory.SOUP: "Soup",
    SideCategory.STARCHES: "Starches",
    SideCategory.VEGETABLE: "Vegetable",
}

FLAVOR_PROFILE_LABELS: dict[FlavorProfile, str] = {
    FlavorProfile.SWEET: "Sweet",
    FlavorProfile.BITTER: "Bitter",
    FlavorProfile.SOUR: "Sour",
    FlavorProfile.SALTY: "Salty",
    FlavorProfile.UMAMI: "Umami",
}

DIETARY_FLAG_LABELS: dict[str, str] = {
    "vegetarian": "Vegetarian",
    "vegan": "Vegan",
    "gluten_free": "Gluten-Free",
    "nut_free": "Nut-Free",
    "low_sodium": "Low Sodium",
    "low_sugar": "Low Sugar",
}


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _common_lines(dish: Dish) -> list[str]:
    return [
        f"Dish Name: {dish.name}",
        f"Ingredients: {', '.join(dish.ingredients)}",
        f"Preparation Time: {dish.prep_time} minutes",
        f"Price: ${dish.price:.2f}",
        f"Cuisine Type: {dish.cuisine.name}",
    ]


def _variant_lines(dish: Dish) -> list[str]:
    match dish:
        case Appetizer():
            return [
                f"Serving Style: {SERVING_STYLE_LABELS[dish.serving_style]}",
                f"Spiciness Level: {dish.spiciness_level}",
                f"Vegetarian: {yes_no(dish.vegetarian)}",
            ]
        case MainCourse():
            sides = ", ".join(
                f"{side.name} (Category: {SIDE_CATEGORY_LABELS[side.category]})" for side in dish.side_dishes
            )
            return [
                f"Cooking Method: {COOKING_METHOD_LABELS[dish.cooking_method]}",
                f"Protein Type: {dish.protein_type}",
                f"Side Dishes: {sides}",
                f"Gluten-Free: {yes_no(dish.gluten_free)}",
            ]
        case Dessert():
            return [
                f"Flavor Profile: {FLAVOR_PROFILE_LABELS[dish.flavor_profile]}",
                f"Sweetness Level: {dish.sweetness_level}",
                f"Contains Nuts: {yes_no(dish.contains_nuts)}",
            ]
        case _:
            assert_never(dish)


def render_dish(dish: Dish) -> str:
    """Render one dish as newline-terminated ``Label: value`` lines."""
    return "".join(f"{line}\n" for line in _common_lines(dish) + _variant_lines(dish))


def report_lines(kitchen: Kitchen) -> list[str]:
    lines = [f"{cuisine.name}: {kitchen.tally_cuisine(cuisine.name)}" for cuisine in Cuisine]
    lines.append("")
    lines.append(f"AVERAGE PREP TIME: {kitchen.average_prep_time()}")
    lines.append(f"ELABORATE DISHES: {kitchen.elaborate_percentage():.2f}%")
    return lines


def render_report(kitchen: Kitchen) -> str:
    """Cuisine tallies, a blank line, then average prep time and elaborate share."""
    return "".join(f"{line}\n" for line in report_lines(kitchen))


def badge_style(kind: str) -> str:
    """Return a consistent badge style for dish variants."""
    if kind == "APPETIZER":
        return "bold #ffffff on #b23a48"
    if kind == "MAINCOURSE":
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_dish_label(dish: Dish) -> Text:
    """Render a dish name with a colored variant tag and its prep time."""
    kind = dish_kind(dish)
    text = Text()
    text.append(kind[0], style=badge_style(kind))
    text.append(f" {dish.name}")
    text.append(f"  {dish.prep_time} min", style="dim")
    return text


def format_request_tags(request: DietaryRequest) -> Text:
    """Render the active dietary flags as compact tags."""
    text = Text()
    for idx, flag in enumerate(request.active_flags()):
        if idx > 0:
            text.append(" ")
        text.append(f"[{DIETARY_FLAG_LABELS[flag]}]", style="white")
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Visible slice of a scrolling list that keeps `selected` near the middle."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        start = selected - rows // 2
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)
