import asyncio

import pytest

from kitchen import kitchen_app
from kitchen.dietary_modal import DietaryModal
from kitchen.kitchen import Kitchen
from kitchen.kitchen_app import KitchenApp
from kitchen.models import DietaryRequest


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    monkeypatch.setattr(kitchen_app, "DEBUG_LOG_PATH", str(tmp_path / "debug.log"))


def test_serve_selected_dish(kitchen: Kitchen) -> None:
    async def scenario() -> None:
        app = KitchenApp(kitchen)
        async with app.run_test() as pilot:
            assert app.selected_index == 0
            await pilot.press("s")
            assert app.system_status == "Served Bruschetta"
            assert kitchen.size() == 2
            assert kitchen.prep_time_sum() == 150
            assert app.selected_index == 0

    asyncio.run(scenario())


def test_dietary_modal_applies_request(kitchen: Kitchen) -> None:
    async def scenario() -> None:
        app = KitchenApp(kitchen)
        async with app.run_test() as pilot:
            await pilot.press("f")
            assert isinstance(app.screen, DietaryModal)
            # vegetarian, then down to low_sugar
            await pilot.press("enter", "j", "j", "j", "j", "j", "enter", "a")
            await pilot.pause()
            assert not isinstance(app.screen, DietaryModal)
            assert app.last_request == DietaryRequest(vegetarian=True, low_sugar=True)
            by_name = {dish.name: dish for dish in kitchen}
            assert by_name["Beef Stew"].protein_type == "Tofu"
            assert by_name["Pecan Pie"].sweetness_level == 6
            assert (kitchen.prep_time_sum(), kitchen.elaborate_count()) == kitchen.recompute_totals()

    asyncio.run(scenario())


def test_dietary_modal_close_leaves_dishes(kitchen: Kitchen) -> None:
    async def scenario() -> None:
        app = KitchenApp(kitchen)
        async with app.run_test() as pilot:
            await pilot.press("f", "enter", "escape")
            await pilot.pause()
            assert app.last_request == DietaryRequest()
            assert {dish.name: dish for dish in kitchen}["Beef Stew"].protein_type == "Beef"

    asyncio.run(scenario())


def test_toggle_report_and_print(kitchen: Kitchen, monkeypatch) -> None:
    printed = []
    monkeypatch.setattr(kitchen_app, "print_kitchen_report", printed.append)

    async def scenario() -> None:
        app = KitchenApp(kitchen)
        async with app.run_test() as pilot:
            await pilot.press("r")
            assert app.show_report is True
            await pilot.press("p")
            assert app.system_status == "Report printed"
            await pilot.press("r")
            assert app.show_report is False

    asyncio.run(scenario())
    assert printed == [kitchen]


def test_print_failure_is_shown_in_status(kitchen: Kitchen, monkeypatch) -> None:
    def broken(_kitchen):
        raise RuntimeError("Printer unavailable: no device")

    monkeypatch.setattr(kitchen_app, "print_kitchen_report", broken)

    async def scenario() -> None:
        app = KitchenApp(kitchen)
        async with app.run_test() as pilot:
            await pilot.press("p")
            assert app.system_status == "Print failed: Printer unavailable: no device"

    asyncio.run(scenario())
