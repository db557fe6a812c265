"""Hex codec, RGB distance and color-wheel geometry."""

import colorsys
import math

from color_diary_api.core.exceptions import ValidationError
from color_diary_api.schemas.color import RGBColor

# Value (brightness) at the wheel centre and at the rim.
WHEEL_MIN_VALUE = 0.3
WHEEL_MAX_VALUE = 1.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike ``round``."""
    return math.floor(value + 0.5)


def hex_to_rgb(value: str) -> RGBColor:
    """Parse a ``#RRGGBB`` string, raising ParseError on malformed input."""
    return RGBColor.from_hex(value)


def rgb_to_hex(color: RGBColor) -> str:
    """Canonical uppercase ``#RRGGBB``."""
    return color.hex


def color_distance(first: RGBColor, second: RGBColor) -> float:
    """Plain Euclidean distance in RGB space."""
    return math.dist((first.r, first.g, first.b), (second.r, second.g, second.b))


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGBColor:
    """Convert hue in degrees and saturation/value in [0, 1] to RGB."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360, saturation, value)
    return RGBColor(r=round_half_up(r * 255), g=round_half_up(g * 255), b=round_half_up(b * 255))


def wheel_color(angle: float, distance_ratio: float) -> RGBColor:
    """Color under a point of the wheel given in polar form.

    The angle is the hue; the distance from the centre (as a fraction of
    the radius) drives both saturation and brightness, so the centre is a
    dark gray and the rim is fully saturated.
    """
    saturation = min(max(distance_ratio, 0.0), 1.0)
    value = WHEEL_MIN_VALUE + saturation * (WHEEL_MAX_VALUE - WHEEL_MIN_VALUE)
    return hsv_to_rgb(angle % 360, saturation, value)


def wheel_position(x: float, y: float, radius: float) -> RGBColor:
    """Color under a point given relative to the wheel centre.

    Points outside the wheel are pulled onto the rim.
    """
    if radius <= 0:
        raise ValidationError("Wheel radius must be positive", field="radius")
    distance = math.hypot(x, y)
    angle = math.degrees(math.atan2(y, x))
    return wheel_color(angle, min(distance / radius, 1.0))
