"""Rasterize the color field into a two-band RGBA strip.

The strip is CANVAS_WIDTH x CANVAS_HEIGHT. Angular sample ``i`` owns the
pixel columns ``[2i, 2i + 2)``; its HSLuv color fills rows ``[0, 150)`` and
its Okhsl color fills rows ``[150, 300)``.
"""

import logging

import cv2
import numpy as np

from colorwave.config.wave_config import (
    BAND_SPLIT,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLUMN_WIDTH,
    SAMPLE_COUNT,
)
from colorwave.wave.color_spaces import COLOR_MODELS
from colorwave.wave.field_model import sample_field

logger = logging.getLogger(__name__)

# (color model, first row, end row) from top to bottom
BANDS = (
    ("hsluv", 0, BAND_SPLIT),
    ("okhsl", BAND_SPLIT, CANVAS_HEIGHT),
)


def render_columns(params):
    """
    Compute the per-sample colors of both bands.

    Args:
        params: ColorFieldParameters

    Returns:
        Tuple (top, bottom) of uint8 arrays shaped (SAMPLE_COUNT, 4)
    """
    coords = sample_field(params, SAMPLE_COUNT)
    columns = []
    for model, _, _ in BANDS:
        convert = COLOR_MODELS[model]
        columns.append(np.array([convert(c) for c in coords], dtype=np.uint8))
    return tuple(columns)


def render(params):
    """
    Render the color wave for one parameter set.

    Args:
        params: ColorFieldParameters

    Returns:
        RGBA uint8 array shaped (CANVAS_HEIGHT, CANVAS_WIDTH, 4)
    """
    frame = np.zeros((CANVAS_HEIGHT, CANVAS_WIDTH, 4), dtype=np.uint8)

    for (model, top, bottom), colors in zip(BANDS, render_columns(params)):
        for i, color in enumerate(colors):
            x = i * COLUMN_WIDTH
            # cv2.rectangle corners are inclusive; thickness -1 fills without anti-aliasing
            cv2.rectangle(
                frame,
                (x, top),
                (x + COLUMN_WIDTH - 1, bottom - 1),
                tuple(int(v) for v in color),
                thickness=-1,
            )
        logger.debug(f"Band {model}: first={tuple(colors[0])}, last={tuple(colors[-1])}")

    return frame
