from decimal import Decimal

import pytest

from kitchen.kitchen import Kitchen
from kitchen.models import (
    Appetizer,
    CookingMethod,
    Cuisine,
    Dessert,
    FlavorProfile,
    MainCourse,
    ServingStyle,
    SideCategory,
    SideDish,
)

HEADER = "dish_type,name,ingredients,prep_time,price,cuisine_type,additional_attributes\n"

THREE_RECORDS = (
    HEADER
    + "APPETIZER,Bruschetta,Bread;Tomato;Basil,15,8.99,ITALIAN,PLATED;1;true\n"
    + "MAINCOURSE,Beef Stew,Beef;Carrot;Potato;Onion;Celery,90,17.50,FRENCH,BOILED;Beef;Baguette:BREAD;false\n"
    + "DESSERT,Pecan Pie,Pecans;Butter;Flour;Sugar;Eggs,60,7.25,AMERICAN,SWEET;9;true\n"
)


def make_appetizer(**overrides) -> Appetizer:
    values = dict(
        name="Bruschetta",
        ingredients=["Bread", "Tomato", "Basil"],
        prep_time=15,
        price=Decimal("8.99"),
        cuisine=Cuisine.ITALIAN,
        serving_style=ServingStyle.FAMILY_STYLE,
        spiciness_level=1,
        vegetarian=True,
    )
    values.update(overrides)
    return Appetizer(**values)


def make_main_course(**overrides) -> MainCourse:
    values = dict(
        name="Beef Stew",
        ingredients=["Beef", "Carrot", "Potato", "Onion", "Celery"],
        prep_time=90,
        price=Decimal("17.50"),
        cuisine=Cuisine.FRENCH,
        cooking_method=CookingMethod.BOILED,
        protein_type="Beef",
        side_dishes=[SideDish("Baguette", SideCategory.BREAD), SideDish("Green Salad", SideCategory.SALAD)],
        gluten_free=False,
    )
    values.update(overrides)
    return MainCourse(**values)


def make_dessert(**overrides) -> Dessert:
    values = dict(
        name="Pecan Pie",
        ingredients=["Pecans", "Butter", "Flour", "Sugar", "Eggs"],
        prep_time=60,
        price=Decimal("7.25"),
        cuisine=Cuisine.AMERICAN,
        flavor_profile=FlavorProfile.SWEET,
        sweetness_level=9,
        contains_nuts=True,
    )
    values.update(overrides)
    return Dessert(**values)


@pytest.fixture
def kitchen() -> Kitchen:
    k = Kitchen()
    k.order(make_appetizer())
    k.order(make_main_course())
    k.order(make_dessert())
    return k


@pytest.fixture
def dishes_file(tmp_path):
    path = tmp_path / "dishes.csv"
    path.write_text(THREE_RECORDS, encoding="utf-8")
    return path
