"""Parameter record for the color wave and its persistence contract.

The eight floats in a ColorFieldParameters are the whole state a shell needs
to reproduce a render. They are persisted as a flat record whose keys match
the slider names; missing keys fall back to the reset values and unknown keys
are ignored, so older and newer state files both load.
"""

import json
import logging
import math
import os
from dataclasses import dataclass

from colorwave.config.wave_config import DEFAULT_PARAMETERS, PARAMETER_RANGES

logger = logging.getLogger(__name__)

PARAMETER_KEYS = tuple(DEFAULT_PARAMETERS)


@dataclass(frozen=True)
class HarmonicChannel:
    """One secondary harmonic: offset ``a``, amplitude ``b`` and frequency ``freq``."""
    a: float
    b: float
    freq: float


@dataclass(frozen=True)
class ColorFieldParameters:
    scale: float
    seed: float
    channel2: HarmonicChannel
    channel3: HarmonicChannel

    def __post_init__(self):
        for key, value in parameters_to_dict(self).items():
            if not math.isfinite(value):
                raise ValueError(f"Parameter {key} must be finite, got {value}")


def parameters_to_dict(params):
    """
    Flatten parameters into the persisted record.

    Args:
        params: ColorFieldParameters to flatten

    Returns:
        Dictionary with one float per key in PARAMETER_KEYS
    """
    return {
        "scale": float(params.scale),
        "seed": float(params.seed),
        "channel2_a": float(params.channel2.a),
        "channel2_b": float(params.channel2.b),
        "channel2_freq": float(params.channel2.freq),
        "channel3_a": float(params.channel3.a),
        "channel3_b": float(params.channel3.b),
        "channel3_freq": float(params.channel3.freq),
    }


def parameters_from_dict(data):
    """
    Build parameters from a persisted record.

    Keys missing from ``data`` take their reset value; keys that are not
    parameters are skipped.

    Args:
        data: Mapping of parameter names to numbers

    Returns:
        ColorFieldParameters
    """
    values = dict(DEFAULT_PARAMETERS)
    for key, value in data.items():
        if key not in values:
            logger.debug(f"Ignoring unknown parameter {key!r}")
            continue
        try:
            values[key] = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Parameter {key} is not a number: {value!r}")
    return ColorFieldParameters(
        scale=values["scale"],
        seed=values["seed"],
        channel2=HarmonicChannel(values["channel2_a"], values["channel2_b"], values["channel2_freq"]),
        channel3=HarmonicChannel(values["channel3_a"], values["channel3_b"], values["channel3_freq"]),
    )


def clamp_parameters(params):
    """Project every field onto its slider range."""
    values = parameters_to_dict(params)
    for key, (low, high) in PARAMETER_RANGES.items():
        values[key] = min(max(values[key], low), high)
    clamped = parameters_from_dict(values)
    if clamped != params:
        logger.debug(f"Clamped parameters to slider ranges: {parameters_to_dict(clamped)}")
    return clamped


def save_parameters(params, path):
    """Write parameters as a JSON record to ``path``."""
    with open(path, "w") as f:
        json.dump(parameters_to_dict(params), f, indent=2)
    logger.info(f"Saved parameters to {path}")


def load_parameters(path):
    """
    Read parameters from a JSON record.

    A missing file yields the reset values, the same as a first start with
    no stored state.

    Args:
        path: Path of the JSON state file

    Returns:
        ColorFieldParameters
    """
    if not os.path.exists(path):
        logger.info(f"No stored state at {path}, using defaults")
        return parameters_from_dict({})
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid parameter file {path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Invalid parameter file {path}: expected an object")
    return parameters_from_dict(data)
