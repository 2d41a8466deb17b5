"""Entry point: load a dish file, show it, adjust it for a diet and show it again."""

from __future__ import annotations

import argparse
import os
import sys

from rich.console import Console
from rich.text import Text

from kitchen.config import DISHES_PATH, DISHES_PATH_ENV
from kitchen.ingest import InvalidRecord
from kitchen.kitchen import Kitchen
from kitchen.models import DietaryRequest

RULE = "-------------------"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Load a kitchen from a dish file and apply a dietary request.")
    p.add_argument(
        "path",
        nargs="?",
        default=os.getenv(DISHES_PATH_ENV, DISHES_PATH),
        help=f"Dish file (default env {DISHES_PATH_ENV} or {DISHES_PATH}).",
    )
    p.add_argument("--skip-invalid", action="store_true", help="Skip malformed records instead of stopping.")
    p.add_argument("--all", action="store_true", help="Apply every dietary flag (the default when none is given).")
    for flag in ("vegetarian", "vegan", "gluten-free", "nut-free", "low-sodium", "low-sugar"):
        p.add_argument(f"--{flag}", action="store_true", help=f"Apply the {flag} accommodation.")
    p.add_argument("--report", action="store_true", help="Print the kitchen report after the adjustment.")
    p.add_argument("--tui", action="store_true", help="Open the interactive viewer instead of printing.")
    p.add_argument("--print", dest="print_ticket", action="store_true", help="Send the report to the ticket printer.")
    return p.parse_args(argv)


def request_from_args(args: argparse.Namespace) -> DietaryRequest:
    request = DietaryRequest(
        vegetarian=args.vegetarian,
        vegan=args.vegan,
        gluten_free=args.gluten_free,
        nut_free=args.nut_free,
        low_sodium=args.low_sodium,
        low_sugar=args.low_sugar,
    )
    if args.all or not request.active_flags():
        return DietaryRequest.everything()
    return request


def print_snapshot(console: Console, title: str, kitchen: Kitchen) -> None:
    console.print(Text(title))
    console.print(Text(RULE))
    console.print(Text(kitchen.render_menu()), end="")
    console.print(Text(RULE))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    console = Console(highlight=False, soft_wrap=True)

    try:
        kitchen = Kitchen.from_csv(args.path, skip_invalid=args.skip_invalid)
    except InvalidRecord as exc:
        Console(stderr=True, highlight=False, soft_wrap=True).print(Text(f"Invalid record in {args.path}: {exc}"))
        return 1

    if args.tui:
        from kitchen.kitchen_app import run

        run(kitchen)
        return 0

    print_snapshot(console, "Before adjustment", kitchen)
    kitchen.apply_dietary_adjustment(request_from_args(args))
    print_snapshot(console, "After adjustment", kitchen)

    if args.report:
        console.print(Text(kitchen.report()), end="")

    if args.print_ticket:
        from kitchen.printer import print_kitchen_report

        try:
            print_kitchen_report(kitchen)
        except RuntimeError as exc:
            Console(stderr=True, highlight=False, soft_wrap=True).print(Text(f"Print failed: {exc}"))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
