"""
Color classification pipeline: hex parsing, RGB to HSL conversion and
HSL bucketing into named colors.
"""

from .color import Color, DISPLAY_NAMES, display_name
from .hex_parser import InvalidHexFormat, parse_hex, expand_hex, is_valid_hex
from .conversion import rgb_to_hsl, rgb_array_to_hsl
from .classifier import classify, classify_values
