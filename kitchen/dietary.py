"""Dietary accommodation rules for each dish variant."""

from __future__ import annotations

from typing import Collection, assert_never

from kitchen.constant import (
    DAIRY_EGG_INGREDIENTS,
    GLUTEN_INGREDIENTS,
    GLUTEN_SIDE_CATEGORIES,
    LOW_SODIUM_SPICINESS_REDUCTION,
    LOW_SUGAR_SWEETNESS_REDUCTION,
    NON_VEGETARIAN_INGREDIENTS,
    NUT_INGREDIENTS,
    VEGETARIAN_PROTEIN,
    VEGETARIAN_SUBSTITUTES,
)
from kitchen.models import Appetizer, Dessert, DietaryRequest, Dish, MainCourse


def substitute_non_vegetarian(ingredients: list[str]) -> None:
    """
    Replace non-vegetarian ingredients in place.

    The counter runs across the whole list: the first match becomes "Beans",
    the second "Mushrooms", and every later match is deleted.
    """
    matches = 0
    idx = 0
    while idx < len(ingredients):
        if ingredients[idx] not in NON_VEGETARIAN_INGREDIENTS:
            idx += 1
            continue
        if matches < len(VEGETARIAN_SUBSTITUTES):
            ingredients[idx] = VEGETARIAN_SUBSTITUTES[matches]
            idx += 1
        else:
            del ingredients[idx]
        matches += 1


def remove_ingredients(ingredients: list[str], banned: Collection[str]) -> None:
    """Delete every ingredient found in `banned`, keeping the order of the rest."""
    ingredients[:] = [ingredient for ingredient in ingredients if ingredient not in banned]


def reduce_level(level: int, amount: int) -> int:
    return max(0, level - amount)


def _accommodate_appetizer(dish: Appetizer, request: DietaryRequest) -> None:
    if request.vegetarian:
        dish.vegetarian = True
        substitute_non_vegetarian(dish.ingredients)
    if request.low_sodium:
        dish.spiciness_level = reduce_level(dish.spiciness_level, LOW_SODIUM_SPICINESS_REDUCTION)
    if request.gluten_free:
        remove_ingredients(dish.ingredients, GLUTEN_INGREDIENTS)


def _accommodate_main_course(dish: MainCourse, request: DietaryRequest) -> None:
    if request.vegetarian:
        dish.protein_type = VEGETARIAN_PROTEIN
        substitute_non_vegetarian(dish.ingredients)
    if request.vegan:
        dish.protein_type = VEGETARIAN_PROTEIN
        remove_ingredients(dish.ingredients, DAIRY_EGG_INGREDIENTS)
    if request.gluten_free:
        dish.gluten_free = True
        dish.side_dishes[:] = [
            side for side in dish.side_dishes if side.category.name not in GLUTEN_SIDE_CATEGORIES
        ]


def _accommodate_dessert(dish: Dessert, request: DietaryRequest) -> None:
    if request.nut_free:
        dish.contains_nuts = False
        remove_ingredients(dish.ingredients, NUT_INGREDIENTS)
    if request.low_sugar:
        dish.sweetness_level = reduce_level(dish.sweetness_level, LOW_SUGAR_SWEETNESS_REDUCTION)
    if request.vegan:
        remove_ingredients(dish.ingredients, DAIRY_EGG_INGREDIENTS)


def accommodate(dish: Dish, request: DietaryRequest) -> None:
    """Mutate `dish` in place so it satisfies the flags that apply to its variant."""
    match dish:
        case Appetizer():
            _accommodate_appetizer(dish, request)
        case MainCourse():
            _accommodate_main_course(dish, request)
        case Dessert():
            _accommodate_dessert(dish, request)
        case _:
            assert_never(dish)
