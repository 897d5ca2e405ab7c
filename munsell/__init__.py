"""
Munsell Color Classifier

Maps hex codes, RGB triples and HSL values onto a small fixed set of
human-friendly color names (White, Black, Red, Orange, Yellow, Green,
Light Blue, Blue, Purple, Unknown).
"""

from loguru import logger

from munsell.colors import (
    Color,
    display_name,
    InvalidHexFormat,
    parse_hex,
    expand_hex,
    is_valid_hex,
    rgb_to_hsl,
    rgb_array_to_hsl,
    classify,
    classify_values,
)
from munsell.schemas import RGBComponents, HSLComponents
from munsell.api import color_from_hex, color_from_rgb, color_from_hsl, colors_from_rgb_array
from munsell.utils.logging import enable_logging, disable_logging

__version__ = "1.0.0"

# Silent until the host opts in with enable_logging()
logger.disable("munsell")
