import json

import pytest

import color_wave_cli
from colorwave.wave.parameters import parameters_to_dict
from colorwave.wave.sampler import default_parameters


def test_default_render_summary(capsys):
    assert color_wave_cli.main([]) == 0
    out = capsys.readouterr().out
    assert "scale: 0.2000" in out
    assert "top band: first=(119, 119, 119, 255)" in out
    assert "bottom band: first=(119, 119, 119, 255)" in out


def test_random_with_seed_is_reproducible(tmp_path, capsys):
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"
    color_wave_cli.main(["--random", "--rng-seed", "3", "--save", str(first)])
    color_wave_cli.main(["--random", "--rng-seed", "3", "--save", str(second)])
    assert json.loads(first.read_text()) == json.loads(second.read_text())


def test_state_round_trip(tmp_path, capsys):
    state = tmp_path / "state.json"
    state.write_text(json.dumps({"scale": 3.0, "seed": 4.5}))
    saved = tmp_path / "saved.json"
    color_wave_cli.main(["--state", str(state), "--save", str(saved)])
    record = json.loads(saved.read_text())
    # Loaded state is projected onto the slider ranges
    assert record["scale"] == 1.0
    assert record["seed"] == 4.5
    assert record["channel2_a"] == parameters_to_dict(default_parameters())["channel2_a"]


def test_missing_state_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        color_wave_cli.main(["--state", str(tmp_path / "nope.json")])


def test_sources_are_exclusive():
    with pytest.raises(SystemExit):
        color_wave_cli.main(["--random", "--reset"])


def test_rng_seed_requires_random():
    with pytest.raises(SystemExit):
        color_wave_cli.main(["--rng-seed", "4"])
    with pytest.raises(SystemExit):
        color_wave_cli.main(["--reset", "--rng-seed", "4"])
