"""Print the kitchen report on an ESC/POS ticket printer."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from kitchen.config import (
    PRINTER_BLANK_LINE_PX,
    PRINTER_FONT_PATH,
    PRINTER_FONT_PATH_ENV,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from kitchen.log import log_event
from kitchen.rendering import report_lines

if TYPE_CHECKING:
    from kitchen.kitchen import Kitchen

_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
)
# Extra vertical headroom so descenders are not clipped on thermal output.
_LINE_EXTRA_PX = 10


def _font_candidates() -> Iterator[str]:
    """Yield font paths for the report ticket, most specific first."""
    override = os.environ.get(PRINTER_FONT_PATH_ENV, "").strip()
    if override:
        yield override
    yield PRINTER_FONT_PATH
    yield from _LINUX_FONT_FALLBACKS


def resolve_printer_font_path() -> str:
    """Pick the first existing font: the env override, the configured path, then system fonts."""
    tried: list[str] = []
    for candidate in _font_candidates():
        if not candidate or candidate in tried:
            continue
        if Path(candidate).is_file():
            return candidate
        tried.append(candidate)
    raise RuntimeError(f"No usable printer font for the kitchen report (set {PRINTER_FONT_PATH_ENV}); tried {tried}")


def check_printer_dependencies() -> tuple[bool, str]:
    """Report whether escpos, Pillow and a font are all usable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Report printer unavailable: {exc}")
    return (True, "Report printer ready")


def render_line(text: str, font: object) -> object:
    """Render one line of text as a 1-bit image as wide as the paper."""
    from PIL import Image, ImageDraw

    if not text:
        return Image.new("1", (PRINTER_WIDTH_PX, PRINTER_BLANK_LINE_PX), color=1)

    probe = ImageDraw.Draw(Image.new("1", (1, 1), color=1))
    bbox = probe.textbbox((0, 0), text, font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(PRINTER_BLANK_LINE_PX, text_height + _LINE_EXTRA_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so the glyphs sit centred in the canvas.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def render_ticket_lines(lines: list[str], font: object) -> list[object]:
    return [render_line(line, font) for line in lines]


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def send_ticket(printer: object, images: list[object]) -> None:
    """Feed rendered lines to `printer`, add a tail for tearing and cut."""
    for img in images:
        printer.image(img)
    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()


def print_kitchen_report(kitchen: Kitchen, printer: object | None = None, font: object | None = None) -> None:
    """Print the kitchen report and cut the ticket at the end."""
    try:
        from PIL import ImageFont

        if printer is None:
            from escpos.printer import Usb

            printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
        if font is None:
            font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        log_event("print_failed", {"error": exc}, level=logging.ERROR)
        raise RuntimeError(f"Printer unavailable: {exc}") from exc

    lines = report_lines(kitchen)
    send_ticket(printer, render_ticket_lines(lines, font))
    log_event("print_done", {"lines": len(lines)})
