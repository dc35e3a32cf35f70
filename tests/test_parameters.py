import json
import math
import unittest

import pytest

from colorwave.config.wave_config import DEFAULT_PARAMETERS
from colorwave.wave.parameters import (
    PARAMETER_KEYS,
    ColorFieldParameters,
    HarmonicChannel,
    clamp_parameters,
    load_parameters,
    parameters_from_dict,
    parameters_to_dict,
    save_parameters,
)
from colorwave.wave.sampler import default_parameters


class TestParameterRecord(unittest.TestCase):
    def test_record_keys(self):
        record = parameters_to_dict(default_parameters())
        self.assertEqual(tuple(record), PARAMETER_KEYS)
        self.assertEqual(len(record), 8)

    def test_missing_keys_fall_back_to_defaults(self):
        params = parameters_from_dict({"scale": 0.9, "channel3_freq": 4.0})
        expected = dict(DEFAULT_PARAMETERS, scale=0.9, channel3_freq=4.0)
        self.assertEqual(parameters_to_dict(params), expected)

    def test_unknown_keys_are_ignored(self):
        params = parameters_from_dict({"seed": 1.5, "channel4_a": 0.1, "theme": "dark"})
        self.assertEqual(params.seed, 1.5)
        self.assertEqual(params, parameters_from_dict({"seed": 1.5}))

    def test_numeric_strings_accepted(self):
        self.assertEqual(parameters_from_dict({"seed": "2.5"}).seed, 2.5)

    def test_non_numeric_rejected(self):
        with self.assertRaises(ValueError):
            parameters_from_dict({"scale": "bright"})
        with self.assertRaises(ValueError):
            parameters_from_dict({"scale": None})

    def test_non_finite_rejected(self):
        with self.assertRaises(ValueError):
            ColorFieldParameters(math.nan, 0.0, HarmonicChannel(0.5, 0.5, 1.0), HarmonicChannel(0.5, 0.35, 1.0))
        with self.assertRaises(ValueError):
            parameters_from_dict({"channel2_freq": float("inf")})

    def test_parameters_are_immutable(self):
        params = default_parameters()
        with self.assertRaises(AttributeError):
            params.scale = 0.7
        with self.assertRaises(AttributeError):
            params.channel2.a = 0.1

    def test_clamp_parameters(self):
        params = parameters_from_dict({
            "scale": 1.5,
            "seed": -2.0,
            "channel2_b": -0.1,
            "channel3_freq": 12.0,
        })
        clamped = parameters_to_dict(clamp_parameters(params))
        self.assertEqual(clamped["scale"], 1.0)
        self.assertEqual(clamped["seed"], 0.0)
        self.assertEqual(clamped["channel2_b"], 0.0)
        self.assertEqual(clamped["channel3_freq"], 10.0)
        self.assertEqual(clamp_parameters(default_parameters()), default_parameters())


def test_save_and_load(tmp_path):
    path = tmp_path / "state.json"
    params = parameters_from_dict({"scale": 0.75, "seed": 6.125, "channel2_freq": 2.5})
    save_parameters(params, str(path))

    with open(path) as f:
        assert json.load(f) == parameters_to_dict(params)
    assert load_parameters(str(path)) == params


def test_load_partial_state(tmp_path):
    path = tmp_path / "old_state.json"
    path.write_text(json.dumps({"scale": 0.4, "colors": 3}))
    params = load_parameters(str(path))
    assert params.scale == 0.4
    assert params.channel3 == default_parameters().channel3


def test_load_missing_file_uses_defaults(tmp_path):
    assert load_parameters(str(tmp_path / "absent.json")) == default_parameters()


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_invalid_file(tmp_path, content):
    path = tmp_path / "broken.json"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_parameters(str(path))
