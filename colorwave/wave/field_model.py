"""Procedural color field sampled around a full period.

Each angular sample is mapped to a ColorCoordinate ``(c0, c1, c2)``:

- ``c0`` is a hue in turns, ``seed + scale * sin(angle)``. Only its
  fractional part is meaningful to a color model.
- ``c1`` and ``c2`` are harmonics of the phase ``u = pi * (1 - cos(angle))``,
  which runs 0 -> 2*pi -> 0 over one period. Driving the harmonics through
  ``u`` keeps them 2*pi-periodic for non-integer frequencies too.

  c1 = channel2.a - channel2.b * cos(channel2.freq * u + seed)
  c2 = channel3.a + channel3.b * sin(channel3.freq * u + seed)
"""

import math
from typing import List, NamedTuple

from colorwave.config.wave_config import SAMPLE_COUNT


class ColorCoordinate(NamedTuple):
    c0: float
    c1: float
    c2: float


def sample_angles(count=SAMPLE_COUNT) -> List[float]:
    """Angles of the angular samples, ``i / 180 * pi`` for ``i`` in ``0..count``."""
    return [i / 180.0 * math.pi for i in range(count)]


def harmonic_phase(angle: float) -> float:
    return math.pi * (1.0 - math.cos(angle))


def sample(angle: float, params) -> ColorCoordinate:
    """
    Evaluate the color field at one angle.

    Args:
        angle: Position around the period in radians
        params: ColorFieldParameters

    Returns:
        ColorCoordinate with hue in turns and two proportions
    """
    u = harmonic_phase(angle)
    c0 = params.seed + params.scale * math.sin(angle)
    c1 = params.channel2.a - params.channel2.b * math.cos(params.channel2.freq * u + params.seed)
    c2 = params.channel3.a + params.channel3.b * math.sin(params.channel3.freq * u + params.seed)
    return ColorCoordinate(c0, c1, c2)


def sample_field(params, count=SAMPLE_COUNT) -> List[ColorCoordinate]:
    """Evaluate the field at every angular sample, in column order."""
    return [sample(angle, params) for angle in sample_angles(count)]
