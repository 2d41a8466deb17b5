"""The kitchen: a bag of dishes with running aggregates."""

from __future__ import annotations

import csv
import logging
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Iterator

from kitchen.bag import Bag
from kitchen.config import BAG_CAPACITY, BAG_UNIQUE
from kitchen.dietary import accommodate
from kitchen.ingest import load_dishes
from kitchen.log import log_event
from kitchen.models import CENTS, Cuisine, DietaryRequest, Dish, dish_kind, is_elaborate
from kitchen.rendering import render_dish, render_report

_ZERO_PERCENT = Decimal("0.00")


class Kitchen:
    """
    Owns every dish it holds and keeps two running aggregates in step with
    the bag: the total prep time and the number of elaborate dishes.

    Aggregates change only after the bag accepts an add or a remove, so a
    refused `order` or a missed `serve` leaves them untouched.
    """

    def __init__(self, bag: Bag[Dish] | None = None) -> None:
        self._bag: Bag[Dish] = Bag(capacity=BAG_CAPACITY, unique=BAG_UNIQUE) if bag is None else bag
        self._total_prep_time = 0
        self._elaborate_count = 0
        for dish in self._bag:
            self._track(dish, 1)

    @classmethod
    def from_csv(cls, path: str | Path, *, skip_invalid: bool = False, bag: Bag[Dish] | None = None) -> Kitchen:
        """
        Build a kitchen from a dish file.

        A missing or unreadable file is logged and yields an empty kitchen.
        `InvalidRecord` propagates unless `skip_invalid` is set.
        """
        kitchen = cls(bag=bag)
        log_event("load_start", {"path": path})
        try:
            loaded = list(load_dishes(path, skip_invalid=skip_invalid))
        except OSError as exc:
            log_event("load_missing", {"path": path, "error": exc}, level=logging.ERROR)
            return kitchen
        except (UnicodeDecodeError, csv.Error) as exc:
            log_event("load_failed", {"path": path, "error": exc}, level=logging.ERROR)
            return kitchen
        for dish in loaded:
            kitchen.order(dish)
        log_event("load_done", {"path": path, "dishes": kitchen.size()})
        return kitchen

    def _track(self, dish: Dish, sign: int) -> None:
        self._total_prep_time += sign * dish.prep_time
        if is_elaborate(dish):
            self._elaborate_count += sign

    def order(self, dish: Dish) -> bool:
        """
        Take ownership of `dish`. Returns the bag's verdict.

        The very same object is never held twice; order an equal copy instead.
        """
        if self.holds(dish):
            log_event("order_rejected", {"dish": dish.name, "reason": "already_held"}, level=logging.DEBUG)
            return False
        if not self._bag.add(dish):
            log_event("order_rejected", {"dish": dish.name, "size": self.size()}, level=logging.DEBUG)
            return False
        self._track(dish, 1)
        return True

    def serve(self, dish: Dish) -> bool:
        """Remove one dish equal to `dish`. Returns the bag's verdict."""
        if self.is_empty():
            return False
        if not self._bag.remove(dish):
            log_event("serve_missed", {"dish": dish.name}, level=logging.DEBUG)
            return False
        self._track(dish, -1)
        return True

    def holds(self, dish: Dish) -> bool:
        """True when this exact object, not just an equal one, is held."""
        return any(held is dish for held in self._bag)

    def size(self) -> int:
        return self._bag.size()

    def is_empty(self) -> bool:
        return self._bag.is_empty()

    def dishes(self) -> list[Dish]:
        """Snapshot of the held dishes."""
        return self._bag.to_list()

    def prep_time_sum(self) -> int:
        if self.is_empty():
            return 0
        return self._total_prep_time

    def average_prep_time(self) -> int:
        """Mean prep time rounded half up to a whole minute."""
        if self.is_empty():
            return 0
        mean = Decimal(self._total_prep_time) / Decimal(self.size())
        return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def elaborate_count(self) -> int:
        if self.is_empty() or self._elaborate_count == 0:
            return 0
        return self._elaborate_count

    def elaborate_percentage(self) -> Decimal:
        """Share of elaborate dishes, e.g. 7 of 13 gives Decimal("53.85")."""
        if self.is_empty() or self._elaborate_count == 0:
            return _ZERO_PERCENT
        scaled = (Decimal(self._elaborate_count) / Decimal(self.size()) * 10000).quantize(
            Decimal(1), rounding=ROUND_HALF_UP
        )
        return (scaled / 100).quantize(CENTS)

    def recompute_totals(self) -> tuple[int, int]:
        """Prep time sum and elaborate count computed from scratch."""
        dishes = self._bag.to_list()
        return sum(dish.prep_time for dish in dishes), sum(1 for dish in dishes if is_elaborate(dish))

    def tally_cuisine(self, cuisine_type: str) -> int:
        """Count dishes of a cuisine token. Unknown tokens count nothing."""
        cuisine = Cuisine.__members__.get(cuisine_type)
        if cuisine is None:
            return 0
        return sum(1 for dish in self._bag if dish.cuisine is cuisine)

    def evict_below_prep_time(self, threshold: int) -> int:
        """Serve every dish quicker than `threshold` minutes."""
        removed = 0
        for dish in self.dishes():
            if dish.prep_time < threshold and self.serve(dish):
                removed += 1
        if removed:
            log_event("evicted", {"below_prep_time": threshold, "removed": removed})
        return removed

    def evict_cuisine(self, cuisine_type: str) -> int:
        """Serve every dish of a cuisine token. Unknown tokens remove nothing."""
        cuisine = Cuisine.__members__.get(cuisine_type)
        if cuisine is None:
            return 0
        removed = 0
        for dish in self.dishes():
            if dish.cuisine is cuisine and self.serve(dish):
                removed += 1
        if removed:
            log_event("evicted", {"cuisine": cuisine.name, "removed": removed})
        return removed

    def apply_dietary_adjustment(self, request: DietaryRequest) -> None:
        """Accommodate `request` on every held dish, in place."""
        for dish in self._bag:
            was_elaborate = is_elaborate(dish)
            accommodate(dish, request)
            if was_elaborate != is_elaborate(dish):
                self._elaborate_count += -1 if was_elaborate else 1
        log_event(
            "dietary_adjusted",
            {"flags": request.active_flags(), "dishes": self.size(), "elaborate": self._elaborate_count},
        )

    def count_by_kind(self) -> dict[str, int]:
        counts = {"APPETIZER": 0, "MAINCOURSE": 0, "DESSERT": 0}
        for dish in self._bag:
            counts[dish_kind(dish)] += 1
        return counts

    def render_menu(self) -> str:
        return "".join(render_dish(dish) for dish in self._bag)

    def report(self) -> str:
        return render_report(self)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._bag)

    def __contains__(self, dish: object) -> bool:
        return dish in self._bag
