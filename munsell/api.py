"""
Munsell public entry points.

Each function composes the pipeline stages: hex parsing, RGB to HSL
conversion and classification.
"""
from typing import List

import numpy as np

from munsell.colors import Color, parse_hex, rgb_to_hsl, rgb_array_to_hsl, classify, classify_values
from munsell.schemas import RGBComponents, HSLComponents
from munsell.utils.logging import get_logger


def color_from_hex(hex_color: str) -> Color:
    """
    Classify a hex color code.

    Args:
        hex_color: "[#]RGB", "[#]RRGGBB" or "[#]RRGGBBAA"

    Returns:
        Named Color

    Raises:
        InvalidHexFormat: If the code has a bad length or non-hex characters
    """
    color = classify(rgb_to_hsl(parse_hex(hex_color)))
    get_logger().debug("Classified hex color", extra={"hex": hex_color, "color": color.display_name})
    return color


def color_from_rgb(red: int, green: int, blue: int) -> Color:
    """Classify an 8-bit RGB triple."""
    rgb = RGBComponents(red=red, green=green, blue=blue)
    color = classify(rgb_to_hsl(rgb))
    get_logger().debug("Classified RGB color", extra={"rgb": rgb.as_tuple(), "color": color.display_name})
    return color


def color_from_hsl(hue: float, saturation: float, lightness: float) -> Color:
    """Classify HSL values (hue in degrees, saturation/lightness in percent)."""
    return classify(HSLComponents(hue=hue, saturation=saturation, lightness=lightness))


def colors_from_rgb_array(pixels: np.ndarray) -> List[Color]:
    """
    Classify every row of an (N, 3) RGB pixel array.

    Gives the same result as calling color_from_rgb on each row.
    """
    hsl = rgb_array_to_hsl(pixels)
    colors = [classify_values(h, s, l) for h, s, l in hsl]
    get_logger().debug("Classified pixel array", extra={"pixels": len(colors)})
    return colors
