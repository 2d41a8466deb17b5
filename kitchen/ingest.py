"""Decode dish records from comma-separated text.

Record layout (one header line, then one dish per line):

    dish_type,name,ingredients,prep_time,price,cuisine_type,additional_attributes

`ingredients` and `additional_attributes` are `;`-separated. The attribute
block depends on `dish_type`:

    APPETIZER   serving_style;spiciness_level;vegetarian
    MAINCOURSE  cooking_method;protein_type;side_dishes;gluten_free
    DESSERT     flavor_profile;sweetness_level;contains_nuts

`side_dishes` is `name:CATEGORY|name:CATEGORY|...`.

Unknown enum tokens fall back to a default, unknown dish types are skipped,
and malformed numbers raise `InvalidRecord`.
"""

from __future__ import annotations

import csv
import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, TypeVar

from kitchen.log import log_event
from kitchen.models import (
    CENTS,
    Appetizer,
    CookingMethod,
    Cuisine,
    Dessert,
    Dish,
    FlavorProfile,
    MainCourse,
    ServingStyle,
    SideCategory,
    SideDish,
)

E = TypeVar("E", bound=Enum)

RECORD_FIELDS = ("dish_type", "name", "ingredients", "prep_time", "price", "cuisine_type", "additional_attributes")


class InvalidRecord(ValueError):
    """Raised when a record cannot be decoded into a dish."""

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        prefix = f"Line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{reason}")


def split_field(text: str, sep: str) -> list[str]:
    """Split a sub-delimited field; an empty field holds nothing."""
    if not text:
        return []
    parts = [part.strip() for part in text.split(sep)]
    if parts[-1] == "":
        parts.pop()
    return parts


def decode_enum(enum_cls: type[E], token: str, default: E) -> E:
    """Exact, case-sensitive member-name lookup with a fallback."""
    return enum_cls.__members__.get(token, default)


def decode_cuisine(token: str) -> Cuisine:
    return decode_enum(Cuisine, token, Cuisine.OTHER)


def decode_bool(token: str) -> bool:
    return token == "true"


def _part(parts: list[str], idx: int) -> str:
    return parts[idx] if idx < len(parts) else ""


def _parse_count(text: str, field_name: str, line_number: int | None) -> int:
    try:
        value = int(text)
    except ValueError:
        raise InvalidRecord(f"{field_name} must be an integer (got {text!r})", line_number) from None
    if value < 0:
        raise InvalidRecord(f"{field_name} must not be negative (got {value})", line_number)
    return value


def _parse_price(text: str, line_number: int | None) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidRecord(f"price must be a decimal number (got {text!r})", line_number) from None
    if not value.is_finite():
        raise InvalidRecord(f"price must be finite (got {text!r})", line_number)
    try:
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidRecord(f"price is out of range (got {text!r})", line_number) from None


def decode_side_dishes(block: str) -> list[SideDish]:
    """Decode `name:CATEGORY|name:CATEGORY` into side dishes."""
    sides: list[SideDish] = []
    for entry in split_field(block, "|"):
        name, _, category = entry.partition(":")
        sides.append(SideDish(name=name.strip(), category=decode_enum(SideCategory, category.strip(), SideCategory.GRAIN)))
    return sides


def parse_record(cells: list[str], line_number: int | None = None) -> Dish | None:
    """Decode one record. Returns None for an unrecognised dish type."""
    if len(cells) < len(RECORD_FIELDS):
        raise InvalidRecord(f"expected {len(RECORD_FIELDS)} fields, got {len(cells)}", line_number)

    dish_type, name, ingredients_text, prep_text, price_text, cuisine_text, attributes_text = (
        cell.strip() for cell in cells[: len(RECORD_FIELDS)]
    )
    if dish_type not in {"APPETIZER", "MAINCOURSE", "DESSERT"}:
        log_event("record_skipped", {"line": line_number, "dish_type": dish_type}, level=logging.DEBUG)
        return None

    ingredients = split_field(ingredients_text, ";")
    prep_time = _parse_count(prep_text, "prep_time", line_number)
    price = _parse_price(price_text, line_number)
    cuisine = decode_cuisine(cuisine_text)
    attrs = split_field(attributes_text, ";")

    if dish_type == "APPETIZER":
        return Appetizer(
            name=name,
            ingredients=ingredients,
            prep_time=prep_time,
            price=price,
            cuisine=cuisine,
            serving_style=decode_enum(ServingStyle, _part(attrs, 0), ServingStyle.PLATED),
            spiciness_level=_parse_count(_part(attrs, 1), "spiciness_level", line_number),
            vegetarian=decode_bool(_part(attrs, 2)),
        )

    if dish_type == "MAINCOURSE":
        return MainCourse(
            name=name,
            ingredients=ingredients,
            prep_time=prep_time,
            price=price,
            cuisine=cuisine,
            cooking_method=decode_enum(CookingMethod, _part(attrs, 0), CookingMethod.GRILLED),
            protein_type=_part(attrs, 1),
            side_dishes=decode_side_dishes(_part(attrs, 2)),
            gluten_free=decode_bool(_part(attrs, 3)),
        )

    return Dessert(
        name=name,
        ingredients=ingredients,
        prep_time=prep_time,
        price=price,
        cuisine=cuisine,
        flavor_profile=decode_enum(FlavorProfile, _part(attrs, 0), FlavorProfile.SWEET),
        sweetness_level=_parse_count(_part(attrs, 1), "sweetness_level", line_number),
        contains_nuts=decode_bool(_part(attrs, 2)),
    )


def read_records(lines: Iterable[str], *, skip_invalid: bool = False) -> Iterator[Dish]:
    """Yield dishes in source order, skipping the header and blank lines."""
    reader = csv.reader(lines)
    header_seen = False
    for cells in reader:
        if not header_seen:
            header_seen = True
            continue
        if not cells or all(not cell.strip() for cell in cells):
            continue
        try:
            dish = parse_record(cells, reader.line_num)
        except InvalidRecord as exc:
            if not skip_invalid:
                raise
            log_event("record_invalid", {"line": exc.line_number, "reason": exc.reason}, level=logging.WARNING)
            continue
        if dish is not None:
            yield dish


def load_dishes(path: str | Path, *, skip_invalid: bool = False) -> Iterator[Dish]:
    """Yield every dish stored in the file at `path`."""
    with Path(path).open(newline="", encoding="utf-8-sig") as fh:
        yield from read_records(fh, skip_invalid=skip_invalid)
