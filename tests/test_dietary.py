import pytest

from conftest import make_appetizer, make_dessert, make_main_course
from kitchen.dietary import accommodate, reduce_level, remove_ingredients, substitute_non_vegetarian
from kitchen.models import DietaryRequest, SideCategory, SideDish


@pytest.mark.parametrize(
    "given,expected",
    (
        (["Chicken", "Rice", "Beef", "Fish"], ["Beans", "Rice", "Mushrooms"]),
        (["Bacon", "Bacon", "Bacon", "Bacon", "Rice"], ["Beans", "Mushrooms", "Rice"]),
        (["Rice", "Tomato"], ["Rice", "Tomato"]),
        (["Lamb"], ["Beans"]),
        (["Tofu", "Shrimp", "Pork", "Meat", "Onion", "Fish"], ["Tofu", "Beans", "Mushrooms", "Onion"]),
        ([], []),
        # Matching is exact and case-sensitive.
        (["chicken", "Chicken breast"], ["chicken", "Chicken breast"]),
    ),
)
def test_substitute_non_vegetarian(given: list[str], expected: list[str]) -> None:
    substitute_non_vegetarian(given)
    assert given == expected


def test_remove_ingredients_removes_every_copy() -> None:
    ingredients = ["Milk", "Sugar", "Milk", "Eggs", "Vanilla"]
    remove_ingredients(ingredients, {"Milk", "Eggs"})
    assert ingredients == ["Sugar", "Vanilla"]


@pytest.mark.parametrize(
    "level,amount,expected",
    ((0, 2, 0), (1, 2, 0), (2, 2, 0), (5, 2, 3), (2, 3, 0), (10, 3, 7)),
)
def test_reduce_level_never_negative(level: int, amount: int, expected: int) -> None:
    assert reduce_level(level, amount) == expected


def test_appetizer_vegetarian() -> None:
    dish = make_appetizer(ingredients=["Chicken", "Rice", "Beef", "Fish"], vegetarian=False)
    accommodate(dish, DietaryRequest(vegetarian=True))
    assert dish.vegetarian is True
    assert dish.ingredients == ["Beans", "Rice", "Mushrooms"]


@pytest.mark.parametrize("start,expected", ((0, 0), (1, 0), (2, 0), (3, 1), (9, 7)))
def test_appetizer_low_sodium_clamps(start: int, expected: int) -> None:
    dish = make_appetizer(spiciness_level=start)
    accommodate(dish, DietaryRequest(low_sodium=True))
    assert dish.spiciness_level == expected


def test_appetizer_gluten_free() -> None:
    dish = make_appetizer(ingredients=["Bread", "Tomato", "Crust", "Oats", "Basil"])
    accommodate(dish, DietaryRequest(gluten_free=True))
    assert dish.ingredients == ["Tomato", "Basil"]


def test_appetizer_handlers_run_in_order() -> None:
    dish = make_appetizer(ingredients=["Bread", "Chicken", "Flour", "Pork", "Fish"], spiciness_level=4)
    accommodate(dish, DietaryRequest.everything())
    assert dish.ingredients == ["Beans", "Mushrooms"]
    assert dish.spiciness_level == 2
    assert dish.vegetarian is True


def test_appetizer_ignores_other_flags() -> None:
    dish = make_appetizer(ingredients=["Milk", "Almonds", "Chicken"], spiciness_level=3, vegetarian=False)
    accommodate(dish, DietaryRequest(vegan=True, nut_free=True, low_sugar=True))
    assert dish == make_appetizer(ingredients=["Milk", "Almonds", "Chicken"], spiciness_level=3, vegetarian=False)


def test_main_course_vegetarian() -> None:
    dish = make_main_course(ingredients=["Chicken", "Rice", "Beef", "Fish"])
    accommodate(dish, DietaryRequest(vegetarian=True))
    assert dish.protein_type == "Tofu"
    assert dish.ingredients == ["Beans", "Rice", "Mushrooms"]


def test_main_course_vegan() -> None:
    dish = make_main_course(ingredients=["Chicken", "Cheese", "Rice", "Butter", "Eggs"])
    accommodate(dish, DietaryRequest(vegan=True))
    assert dish.protein_type == "Tofu"
    assert dish.ingredients == ["Chicken", "Rice"]


def test_main_course_vegetarian_then_vegan() -> None:
    dish = make_main_course(ingredients=["Chicken", "Cheese", "Beef", "Eggs", "Pork"])
    accommodate(dish, DietaryRequest(vegetarian=True, vegan=True))
    assert dish.ingredients == ["Beans", "Mushrooms"]


def test_main_course_gluten_free_drops_gluten_sides() -> None:
    sides = [
        SideDish("Rice", SideCategory.GRAIN),
        SideDish("Penne", SideCategory.PASTA),
        SideDish("Lentils", SideCategory.LEGUME),
        SideDish("Roll", SideCategory.BREAD),
        SideDish("Greens", SideCategory.SALAD),
        SideDish("Broth", SideCategory.SOUP),
        SideDish("Fries", SideCategory.STARCHES),
        SideDish("Carrots", SideCategory.VEGETABLE),
    ]
    dish = make_main_course(side_dishes=sides, ingredients=["Beef", "Flour"])
    accommodate(dish, DietaryRequest(gluten_free=True))
    assert dish.gluten_free is True
    assert [side.name for side in dish.side_dishes] == ["Lentils", "Greens", "Broth", "Carrots"]
    # Ingredients are not touched by the main course gluten handler.
    assert dish.ingredients == ["Beef", "Flour"]


def test_main_course_ignores_other_flags() -> None:
    dish = make_main_course()
    accommodate(dish, DietaryRequest(nut_free=True, low_sodium=True, low_sugar=True))
    assert dish == make_main_course()


def test_dessert_nut_free() -> None:
    dish = make_dessert(ingredients=["Pecans", "Sugar", "Walnuts", "Peanuts", "Flour"])
    accommodate(dish, DietaryRequest(nut_free=True))
    assert dish.contains_nuts is False
    assert dish.ingredients == ["Sugar", "Flour"]


@pytest.mark.parametrize("start,expected", ((0, 0), (2, 0), (3, 0), (4, 1), (9, 6)))
def test_dessert_low_sugar_clamps(start: int, expected: int) -> None:
    dish = make_dessert(sweetness_level=start)
    accommodate(dish, DietaryRequest(low_sugar=True))
    assert dish.sweetness_level == expected


def test_dessert_vegan() -> None:
    dish = make_dessert(ingredients=["Cream", "Eggs", "Sugar", "Yogurt", "Vanilla"])
    accommodate(dish, DietaryRequest(vegan=True))
    assert dish.ingredients == ["Sugar", "Vanilla"]


def test_dessert_ignores_other_flags() -> None:
    dish = make_dessert(ingredients=["Bacon", "Flour", "Sugar"])
    accommodate(dish, DietaryRequest(vegetarian=True, gluten_free=True, low_sodium=True))
    assert dish.ingredients == ["Bacon", "Flour", "Sugar"]
