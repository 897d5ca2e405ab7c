"""
Munsell Value Schemas
Pydantic models for the RGB and HSL components passed between pipeline stages.
"""
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class RGBComponents(BaseModel):
    """8-bit RGB triple."""
    model_config = ConfigDict(frozen=True)

    red: int = Field(..., ge=0, le=255, description="Red channel (0-255)")
    green: int = Field(..., ge=0, le=255, description="Green channel (0-255)")
    blue: int = Field(..., ge=0, le=255, description="Blue channel (0-255)")

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, int, int]) -> "RGBComponents":
        """Build from an (r, g, b) sequence."""
        red, green, blue = rgb
        return cls(red=red, green=green, blue=blue)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


class HSLComponents(BaseModel):
    """
    Hue in degrees [0, 360), saturation and lightness in percent [0, 100].

    Values outside those ranges are accepted; the classifier maps anything it
    cannot place to Color.UNKNOWN.
    """
    model_config = ConfigDict(frozen=True)

    hue: float = Field(..., description="Hue angle in degrees")
    saturation: float = Field(..., description="Saturation percentage")
    lightness: float = Field(..., description="Lightness percentage")

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.hue, self.saturation, self.lightness)
