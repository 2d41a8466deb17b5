"""Runtime configuration defaults for loading, logging and printing."""

from __future__ import annotations

DISHES_PATH = "data/dishes.csv"
DISHES_PATH_ENV = "KITCHEN_DISHES_PATH"

# None means the kitchen bag grows without limit.
BAG_CAPACITY: int | None = None
# When True the bag refuses a dish equal to one it already holds.
BAG_UNIQUE = False

LOGGER_NAME = "kitchen"
DEBUG_LOG_PATH = "/tmp/kitchen-debug.log"

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 28
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_FONT_PATH_ENV = "KITCHEN_PRINTER_FONT_PATH"
PRINTER_LEFT_INDENT_PX = 16
PRINTER_BLANK_LINE_PX = 18
PRINTER_TAIL_SPACER_PX = 70
