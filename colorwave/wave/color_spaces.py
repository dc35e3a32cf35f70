"""HSLuv and Okhsl interpretations of a ColorCoordinate.

Both converters read the same coordinate: ``c0`` is a hue in turns (wrapped
modulo 1), ``c1`` is saturation and ``c2`` is lightness as proportions.

Clamping policy, shared by both models:

- saturation and lightness are clamped to [0, 1] before conversion,
- the sRGB result is clipped to the gamut and rounded to 8 bits,
- a coordinate or result that is not finite becomes FALLBACK_COLOR.

Conversions never log; a bad color only shows up as black in the strip.
"""

import math

from coloraide.everything import ColorAll as _Base

from colorwave.config.wave_config import FALLBACK_COLOR, OPAQUE_ALPHA


class Color(_Base):
    """Project-local Color class; HSLuv needs the Luv chain registered alongside it."""


def _clamp01(value):
    return min(max(value, 0.0), 1.0)


def _is_finite(values):
    return all(math.isfinite(v) for v in values)


def _encode(color):
    rgb = color.convert("srgb").fit(method="clip")[:-1]
    if not _is_finite(rgb):
        return FALLBACK_COLOR
    r, g, b = (int(round(_clamp01(v) * 255.0)) for v in rgb)
    return (r, g, b, OPAQUE_ALPHA)


def hsluv_to_rgba(coord):
    """
    Convert a coordinate through HSLuv.

    Args:
        coord: ColorCoordinate (hue in turns, saturation, lightness)

    Returns:
        (r, g, b, a) tuple of ints in 0..255
    """
    if not _is_finite(coord):
        return FALLBACK_COLOR
    hue = (coord[0] % 1.0) * 360.0
    saturation = _clamp01(coord[1]) * 100.0
    lightness = _clamp01(coord[2]) * 100.0
    return _encode(Color("hsluv", [hue, saturation, lightness]))


def okhsl_to_rgba(coord):
    """
    Convert a coordinate through Okhsl.

    Args:
        coord: ColorCoordinate (hue in turns, saturation, lightness)

    Returns:
        (r, g, b, a) tuple of ints in 0..255
    """
    if not _is_finite(coord):
        return FALLBACK_COLOR
    hue = (coord[0] % 1.0) * 360.0
    return _encode(Color("okhsl", [hue, _clamp01(coord[1]), _clamp01(coord[2])]))


COLOR_MODELS = {
    "hsluv": hsluv_to_rgba,
    "okhsl": okhsl_to_rgba,
}
