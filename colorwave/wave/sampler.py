"""Default and random parameter policies.

The random policy biases draws toward pleasant strips. Amplitudes come from a
bell-shaped approximation (mean of NORMAL_APPROX_SAMPLES uniforms) and each
channel's ``b`` is drawn after its ``a``, inside a range that keeps
``a +/- b`` within [0, 1].
"""

import logging

import numpy as np

from colorwave.config.wave_config import (
    NORMAL_APPROX_SAMPLES,
    RANDOM_AMPLITUDE_RANGE,
    RANDOM_FREQ_RANGE,
    RANDOM_SCALE_RANGE,
    RANDOM_SEED_RANGE,
)
from colorwave.wave.parameters import (
    ColorFieldParameters,
    HarmonicChannel,
    parameters_from_dict,
    parameters_to_dict,
)

logger = logging.getLogger(__name__)


def default_parameters():
    """Reset values used when the shell starts fresh or the user resets."""
    return parameters_from_dict({})


def normal_approx(rng, low, high):
    """
    Draw from a bell-shaped distribution over ``[low, high]``.

    Args:
        rng: numpy random Generator
        low: Lower bound of the range
        high: Upper bound of the range

    Returns:
        float
    """
    total = float(rng.random(NORMAL_APPROX_SAMPLES).sum())
    return low + total * (high - low) / NORMAL_APPROX_SAMPLES


def _headroom(a):
    return min(a, 1.0 - a)


def random_parameters(rng=None):
    """
    Draw a random parameter set.

    Args:
        rng: numpy random Generator, a fresh unseeded one when None

    Returns:
        ColorFieldParameters
    """
    if rng is None:
        rng = np.random.default_rng()

    scale = float(rng.uniform(*RANDOM_SCALE_RANGE))
    seed = float(rng.uniform(*RANDOM_SEED_RANGE))

    channel2_a = normal_approx(rng, *RANDOM_AMPLITUDE_RANGE)
    a2 = _headroom(channel2_a)
    channel2_b = normal_approx(rng, a2 / 2.0, a2)
    channel2_freq = normal_approx(rng, *RANDOM_FREQ_RANGE)

    channel3_a = normal_approx(rng, *RANDOM_AMPLITUDE_RANGE)
    a3 = _headroom(channel3_a)
    channel3_b = normal_approx(rng, 0.0, a3)
    channel3_freq = normal_approx(rng, *RANDOM_FREQ_RANGE)

    params = ColorFieldParameters(
        scale=scale,
        seed=seed,
        channel2=HarmonicChannel(channel2_a, channel2_b, channel2_freq),
        channel3=HarmonicChannel(channel3_a, channel3_b, channel3_freq),
    )
    logger.debug(f"Random parameters: {parameters_to_dict(params)}")
    return params
