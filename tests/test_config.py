from pathlib import Path

import pytest
import yaml

from rubikview.core.config import (
    Config,
    ControlsConfig,
    EngineConfig,
    ViewConfig,
    create_default_config,
    load_config,
    validate_config,
)


DEFAULT_YAML = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def test_defaults():
    config = Config()
    assert config.engine.quarter_turn_duration == 1.0
    assert config.engine.easing == "power2.inOut"
    assert config.controls.move_keys() == {
        "u": "up", "d": "down", "l": "left", "r": "right", "f": "front", "b": "back",
    }
    assert config.controls.invert_modifier == "shift"
    assert config.view.figsize == (11.0, 6.0)
    assert validate_config(config) == []


def test_round_trip_through_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    written = create_default_config(str(path))
    loaded = load_config(str(path))
    assert loaded.to_dict() == written.to_dict()


def test_shipped_default_matches_builtin_defaults():
    assert load_config(str(DEFAULT_YAML)).to_dict() == Config().to_dict()


def test_no_path_gives_defaults():
    assert load_config(None).to_dict() == Config().to_dict()


def test_partial_file(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("engine:\n  quarter_turn_duration: 0.3\ncontrols:\n  right: K\n")
    config = load_config(str(path))
    assert config.engine.quarter_turn_duration == 0.3
    assert config.controls.right == "k"
    assert config.view.elev == 25.0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("engine: [unclosed\n")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_unknown_field(tmp_path):
    path = tmp_path / "unknown.yaml"
    path.write_text("engine:\n  warp_speed: 9\n")
    with pytest.raises(ValueError):
        load_config(str(path))


@pytest.mark.parametrize("kwargs", [
    {"quarter_turn_duration": -1},
    {"easing": "bounce.out"},
    {"easing": ""},
    {"spacing": 0},
])
def test_engine_config_rejects(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_view_config_rejects_bad_cube_size():
    with pytest.raises(ValueError):
        ViewConfig(cube_size=1.5)


def test_long_duration_warns():
    with pytest.warns(UserWarning):
        EngineConfig(quarter_turn_duration=12)


def test_validate_duplicate_bindings():
    config = Config(controls=ControlsConfig(up="r"))
    issues = validate_config(config)
    assert any(i.startswith("ERROR") and "'r'" in i for i in issues)


def test_validate_warnings():
    config = Config(engine=EngineConfig(quarter_turn_duration=0.0))
    issues = validate_config(config)
    assert issues and all(i.startswith("WARNING") for i in issues)


def test_unknown_easing_in_file(tmp_path):
    path = tmp_path / "easing.yaml"
    path.write_text("engine:\n  easing: bounce.out\n")
    with pytest.raises(ValueError, match="easing must be one of"):
        load_config(str(path))
