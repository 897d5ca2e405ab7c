"""
Hex color code parsing.

Accepts ``[#]RGB``, ``[#]RRGGBB`` and ``[#]RRGGBBAA`` in either case. The
alpha byte of the 8-digit form is checked but not returned.
"""

import re
from typing import Any

from ..config import config
from ..schemas import RGBComponents
from ..utils.logging import get_logger

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class InvalidHexFormat(ValueError):
    """Hex color code with a bad length or non-hex characters."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid hex color code: {value}")


def expand_hex(hex_color: str) -> str:
    """
    Normalize a hex color code to six lowercase digits.

    Args:
        hex_color: Color code, with or without a single leading '#'

    Returns:
        "rrggbb" string without prefix

    Raises:
        InvalidHexFormat: If the length is not 3, 6 or 8 digits, or a
            character is not an ASCII hex digit
    """
    if not isinstance(hex_color, str):
        raise InvalidHexFormat(hex_color)

    digits = hex_color[1:] if hex_color.startswith('#') else hex_color

    if len(digits) not in config.HEX_LENGTHS or not _HEX_DIGITS.fullmatch(digits):
        get_logger().warning(f"Rejected hex color code: {hex_color!r}", extra={"hex": hex_color})
        raise InvalidHexFormat(hex_color)

    if len(digits) == 3:
        # shorthand, "abc" -> "aabbcc"
        digits = "".join(ch * 2 for ch in digits)

    return digits[:6].lower()


def parse_hex(hex_color: str) -> RGBComponents:
    """Decode a hex color code into RGB components."""
    digits = expand_hex(hex_color)
    rgb = RGBComponents(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    )
    get_logger().debug(f"Parsed {hex_color} -> RGB{rgb.as_tuple()}")
    return rgb


def is_valid_hex(hex_color: str) -> bool:
    """Check whether parse_hex would accept the given code."""
    try:
        expand_hex(hex_color)
    except InvalidHexFormat:
        return False
    return True
