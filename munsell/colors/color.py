"""
Named color categories returned by the classifier.
"""

import operator
from enum import IntEnum
from typing import Dict


class Color(IntEnum):
    """Closed set of color categories, tagged with stable integers."""
    UNKNOWN = 0
    WHITE = 1
    BLACK = 2
    RED = 3
    ORANGE = 4
    YELLOW = 5
    GREEN = 6
    LIGHT_BLUE = 7
    BLUE = 8
    PURPLE = 9

    @property
    def display_name(self) -> str:
        """Canonical human-readable name, e.g. "Light Blue"."""
        return DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


DISPLAY_NAMES: Dict[Color, str] = {
    Color.UNKNOWN: "Unknown",
    Color.WHITE: "White",
    Color.BLACK: "Black",
    Color.RED: "Red",
    Color.ORANGE: "Orange",
    Color.YELLOW: "Yellow",
    Color.GREEN: "Green",
    Color.LIGHT_BLUE: "Light Blue",
    Color.BLUE: "Blue",
    Color.PURPLE: "Purple",
}

_missing = [color.name for color in Color if color not in DISPLAY_NAMES]
if _missing:
    raise RuntimeError(f"Colors without a display name: {', '.join(_missing)}")


def display_name(value: int) -> str:
    """
    Display name for a raw integer tag.

    Args:
        value: Integer tag, usually ``int(color)``

    Returns:
        The variant's display name, or ``Color(<n>)`` for tags outside the enum

    Raises:
        TypeError: If value is not an integer (floats and strings included)
    """
    tag = operator.index(value)
    try:
        return Color(tag).display_name
    except ValueError:
        return f"Color({tag})"
