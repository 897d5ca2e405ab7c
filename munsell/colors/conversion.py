"""
RGB to HSL conversion.

Hue follows the usual chroma-normalized hexagon formula. Saturation and
lightness are the simplified forms the classifier thresholds are tuned for:
saturation is chroma * 100 and lightness is (max + min) * 50, with no division
by 1 - |2L - 1|.
"""

import numpy as np

from ..schemas import RGBComponents, HSLComponents
from ..utils.logging import get_logger


def rgb_to_hsl(rgb: RGBComponents) -> HSLComponents:
    """
    Convert 8-bit RGB components to HSL.

    Args:
        rgb: RGB triple with channels in [0, 255]

    Returns:
        HSLComponents with hue in degrees [0, 360), saturation and
        lightness in percent [0, 100]
    """
    r = rgb.red / 255
    g = rgb.green / 255
    b = rgb.blue / 255

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    chroma = c_max - c_min

    if chroma == 0:
        hue = 0.0
    elif c_max == r:
        segment = (g - b) / chroma
        if segment < 0:
            # past 300 degrees, wrap to a full turn
            segment += 6
        hue = segment
    elif c_max == g:
        hue = (b - r) / chroma + 2
    else:
        hue = (r - g) / chroma + 4

    hsl = HSLComponents(
        hue=hue * 60,
        saturation=chroma * 100,
        lightness=(c_max + c_min) * 50,
    )
    get_logger().debug(f"RGB{rgb.as_tuple()} -> HSL{hsl.as_tuple()}")
    return hsl


def rgb_array_to_hsl(pixels: np.ndarray) -> np.ndarray:
    """
    Vectorized rgb_to_hsl over an array of pixels.

    Args:
        pixels: RGB values, shape (N, 3) or (3,), integers in [0, 255]

    Returns:
        float64 array (N, 3) with columns hue, saturation, lightness

    Raises:
        ValueError: If the shape is not (N, 3) or values fall outside [0, 255]
    """
    arr = np.asarray(pixels)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected RGB array of shape (N, 3), got {np.shape(pixels)}")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ValueError("RGB values must lie in [0, 255]")
    if arr.dtype.kind == "f" and not np.array_equal(arr, np.floor(arr)):
        raise ValueError("RGB values must be integers")

    rgb = arr.astype(np.float64) / 255
    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]

    c_max = rgb.max(axis=1)
    c_min = rgb.min(axis=1)
    chroma = c_max - c_min

    # Branch priority on ties: red, then green, then blue
    is_red = c_max == r
    is_green = ~is_red & (c_max == g)

    with np.errstate(divide="ignore", invalid="ignore"):
        seg_red = (g - b) / chroma
        seg_red = np.where(seg_red < 0, seg_red + 6, seg_red)
        seg_green = (b - r) / chroma + 2
        seg_blue = (r - g) / chroma + 4

    hue = np.where(is_red, seg_red, np.where(is_green, seg_green, seg_blue))
    hue = np.where(chroma == 0, 0.0, hue)

    get_logger().debug(f"Converted {len(rgb)} pixels to HSL")
    return np.stack([hue * 60, chroma * 100, (c_max + c_min) * 50], axis=1)
