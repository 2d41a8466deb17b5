"""Dietary request modal screen."""

from __future__ import annotations

from dataclasses import fields, replace

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from kitchen.models import DietaryRequest
from kitchen.rendering import DIETARY_FLAG_LABELS, format_request_tags


class DietaryModal(ModalScreen[DietaryRequest | None]):
    """Centered modal to toggle dietary flags and apply them to every dish."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("a", "apply", "Apply"),
    ]

    CSS = """
    DietaryModal {
        align: center middle;
        background: $background 60%;
    }

    #dietary-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #dietary-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #dietary-body {
        margin-bottom: 1;
        color: white;
    }

    #dietary-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, request: DietaryRequest | None = None) -> None:
        super().__init__()
        self.request = DietaryRequest() if request is None else request
        self.flag_names = [f.name for f in fields(DietaryRequest)]

    def compose(self) -> ComposeResult:
        with Container(id="dietary-dialog"):
            yield Static("Dietary Request", id="dietary-title")
            yield Static(id="dietary-body")
            yield Static("J/K/↑/↓ move, Enter toggle, A apply to all dishes, Esc/q close", id="dietary-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_apply(self) -> None:
        self.dismiss(self.request)

    def action_move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.flag_names)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        flag = self.flag_names[self.cursor_index]
        self.request = replace(self.request, **{flag: not getattr(self.request, flag)})
        self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#dietary-body", Static)

        content = Text(style="white")
        content.append_text(format_request_tags(self.request) if self.request.active_flags() else Text("(no flags)"))
        content.append("\n\n")
        for idx, flag in enumerate(self.flag_names):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            is_checked = getattr(self.request, flag)
            checked = "[x]" if is_checked else "[ ]"
            style = "bold white" if is_checked else "white"
            content.append(f"{pointer}{checked} {DIETARY_FLAG_LABELS[flag]}", style=style)
        body.update(content)
