"""Textual viewer for a loaded kitchen."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from kitchen.config import DEBUG_LOG_PATH
from kitchen.dietary_modal import DietaryModal
from kitchen.kitchen import Kitchen
from kitchen.log import configure_file_logging, log_event
from kitchen.models import DietaryRequest, Dish
from kitchen.printer import check_printer_dependencies, print_kitchen_report
from kitchen.rendering import format_dish_label, format_request_tags, render_dish, window_bounds


class KitchenApp(App):
    """Browse dishes, serve them, adjust them for a diet and print the report."""

    TITLE = "Kitchen"
    SUB_TITLE = "Dishes / Report"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #dishes-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #detail-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #dishes-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #detail {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    selected_index = reactive(None)
    show_report = reactive(False)

    BINDINGS = [
        ("j", "move_selection(1)", "Next dish"),
        ("k", "move_selection(-1)", "Previous dish"),
        ("down", "move_selection(1)", "Next dish"),
        ("up", "move_selection(-1)", "Previous dish"),
        ("s", "serve_selected", "Serve"),
        ("f", "open_dietary", "Dietary"),
        ("r", "toggle_report", "Report"),
        Binding("p", "print_report", "Print report", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, kitchen: Kitchen) -> None:
        super().__init__()
        self.kitchen = kitchen
        self.last_request = DietaryRequest()
        self.system_status = ""
        configure_file_logging(DEBUG_LOG_PATH)
        log_event("app_init", {"dishes": kitchen.size()})

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="dishes-pane"):
                yield Static("Dishes", classes="pane-title")
                yield Static("(no dishes)", id="dishes-list")
            with Vertical(id="detail-pane"):
                yield Static(id="status-bar")
                yield Static(id="detail")

    def on_mount(self) -> None:
        _, msg = check_printer_dependencies()
        self.system_status = msg
        if self.kitchen.size():
            self.selected_index = 0
        self._refresh_all()

    def _dishes(self) -> list[Dish]:
        return self.kitchen.dishes()

    def _selected_dish(self) -> Dish | None:
        dishes = self._dishes()
        if self.selected_index is None or not (0 <= self.selected_index < len(dishes)):
            return None
        return dishes[self.selected_index]

    def action_move_selection(self, delta: int) -> None:
        total = self.kitchen.size()
        if not total:
            return
        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_all()

    def action_serve_selected(self) -> None:
        dish = self._selected_dish()
        if dish is None:
            return
        if self.kitchen.serve(dish):
            self.system_status = f"Served {dish.name}"
        else:
            self.system_status = f"Could not serve {dish.name}"
        total = self.kitchen.size()
        self.selected_index = min(self.selected_index or 0, total - 1) if total else None
        self._refresh_all()

    def action_toggle_report(self) -> None:
        self.show_report = not self.show_report
        self._refresh_all()

    def action_open_dietary(self) -> None:
        if isinstance(self.screen, DietaryModal):
            return
        self.push_screen(DietaryModal(self.last_request), callback=self._on_dietary_closed)

    def _on_dietary_closed(self, request: DietaryRequest | None) -> None:
        if request is None:
            return
        self.last_request = request
        self.kitchen.apply_dietary_adjustment(request)
        flags = ", ".join(request.active_flags()) or "no flags"
        self.system_status = f"Adjusted {self.kitchen.size()} dishes: {flags}"
        self._refresh_all()

    def action_print_report(self) -> None:
        if isinstance(self.screen, DietaryModal):
            return
        try:
            print_kitchen_report(self.kitchen)
        except Exception as exc:
            self.system_status = f"Print failed: {exc}"
            self._refresh_status()
            return
        self.system_status = "Report printed"
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _refresh_all(self) -> None:
        self._refresh_dishes()
        self._refresh_status()
        self._refresh_detail()

    def _refresh_dishes(self) -> None:
        try:
            dishes_widget = self.query_one("#dishes-list", Static)
        except NoMatches:
            return
        dishes = self._dishes()
        if not dishes:
            self.selected_index = None
            dishes_widget.update("(no dishes)")
            return

        start, end = window_bounds(len(dishes), self._visible_rows(dishes_widget), self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_dish_label(dishes[idx]))

        if end < len(dishes):
            lines.append("\n⋮", style="dim")

        dishes_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        counts = self.kitchen.count_by_kind()
        text = Text()
        text.append(
            f"{self.kitchen.size()} dishes "
            f"(A {counts['APPETIZER']} / M {counts['MAINCOURSE']} / D {counts['DESSERT']})  "
        )
        text.append_text(format_request_tags(self.last_request))
        text.append("\nS serve, F dietary, R report, P print, Ctrl+Q quit")
        text.append(f"\n{self.system_status or 'Ready'}", style="dim")
        bar.update(text)

    def _refresh_detail(self) -> None:
        try:
            detail = self.query_one("#detail", Static)
        except NoMatches:
            return
        if self.show_report:
            detail.update(Text(self.kitchen.report()))
            return
        dish = self._selected_dish()
        detail.update(Text(render_dish(dish)) if dish is not None else "")


def run(kitchen: Kitchen) -> None:
    """Run the Textual application."""
    KitchenApp(kitchen).run()
