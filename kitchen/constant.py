"""Editable static ingredient and dietary configuration."""

from __future__ import annotations

NON_VEGETARIAN_INGREDIENTS: frozenset[str] = frozenset(
    {"Meat", "Chicken", "Fish", "Beef", "Pork", "Lamb", "Shrimp", "Bacon"}
)

GLUTEN_INGREDIENTS: frozenset[str] = frozenset(
    {"Wheat", "Flour", "Bread", "Pasta", "Barley", "Rye", "Oats", "Crust"}
)

NUT_INGREDIENTS: frozenset[str] = frozenset(
    {"Almonds", "Walnuts", "Pecans", "Hazelnuts", "Peanuts", "Cashews", "Pistachios"}
)

DAIRY_EGG_INGREDIENTS: frozenset[str] = frozenset(
    {"Milk", "Eggs", "Cheese", "Butter", "Cream", "Yogurt"}
)

# Replacements for the 1st, 2nd, ... non-vegetarian match. Matches past the end are dropped.
VEGETARIAN_SUBSTITUTES: tuple[str, ...] = ("Beans", "Mushrooms")

VEGETARIAN_PROTEIN = "Tofu"

# Side dish category names (SideCategory member names) that carry gluten.
GLUTEN_SIDE_CATEGORIES: frozenset[str] = frozenset({"GRAIN", "PASTA", "BREAD", "STARCHES"})

LOW_SODIUM_SPICINESS_REDUCTION = 2
LOW_SUGAR_SWEETNESS_REDUCTION = 3

ELABORATE_MIN_INGREDIENTS = 5
ELABORATE_MIN_PREP_TIME = 60

DEFAULT_PROTEIN_TYPE = "UNKNOWN"
