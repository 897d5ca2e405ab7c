"""
HSL to named color classification.

Rules are evaluated top to bottom on floored hue, saturation and lightness;
the first match wins.
"""

import math

from .color import Color
from ..schemas import HSLComponents
from ..utils.logging import get_logger


def _floor(value: float) -> float:
    # NaN and infinities pass through so the comparisons below stay total
    return math.floor(value) if math.isfinite(value) else value


def classify_values(hue: float, saturation: float, lightness: float) -> Color:
    """
    Bucket bare HSL values into a Color.

    Args:
        hue: Hue in degrees
        saturation: Saturation in percent
        lightness: Lightness in percent

    Returns:
        Matching Color, or Color.UNKNOWN when no rule applies
    """
    h = _floor(float(hue))
    s = _floor(float(saturation))
    l = _floor(float(lightness))

    if s <= 10 and l >= 90:
        return Color.WHITE
    elif l <= 13:
        return Color.BLACK
    elif (s <= 10 and l <= 70) or s == 0:
        return Color.BLACK  # gray
    elif (0 <= h <= 16) or h >= 346:
        return Color.RED
    elif 16 < h <= 36:
        if s < 90:
            return Color.ORANGE  # brown
        else:
            return Color.ORANGE
    elif 36 < h <= 64:
        if s < 90:
            return Color.YELLOW  # brown
        else:
            return Color.YELLOW
    elif 64 < h <= 165:
        return Color.GREEN
    elif 165 < h <= 208:
        return Color.LIGHT_BLUE
    elif 208 < h <= 260:
        return Color.BLUE
    elif 260 < h <= 290:
        return Color.PURPLE
    elif 290 < h <= 345:
        return Color.PURPLE  # pink

    return Color.UNKNOWN


def classify(hsl: HSLComponents) -> Color:
    """Classify HSL components into a named Color."""
    color = classify_values(hsl.hue, hsl.saturation, hsl.lightness)
    get_logger().debug(f"HSL{hsl.as_tuple()} -> {color.display_name}")
    return color
