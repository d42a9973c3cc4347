import json

import pytest

import utils.settings
from utils.settings import (
    DEFAULT_SETTINGS,
    RunnerSettings,
    apply_settings_overrides,
    load_settings,
)


def test_load_settings_without_path_returns_defaults():
    assert load_settings() is DEFAULT_SETTINGS
    assert DEFAULT_SETTINGS.array_size == 50
    assert "" in DEFAULT_SETTINGS.sample_strings


def test_load_settings_applies_json_overrides(tmp_path):
    config_path = tmp_path / "settings.json"
    config_path.write_text(
        json.dumps(
            {
                "array_size": 7,
                "sample_strings": {"extend": ["World"]},
            }
        )
    )

    settings = load_settings(config_path)

    assert settings.array_size == 7
    assert settings.sample_strings == DEFAULT_SETTINGS.sample_strings + ("World",)


def test_load_settings_reads_yaml(tmp_path):
    pytest.importorskip("yaml")
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("array_size: 3\nsample_strings:\n  - abc\n  - ''\n")

    settings = load_settings(config_path)

    assert settings == RunnerSettings(array_size=3, sample_strings=("abc", ""))


def test_load_settings_empty_file_keeps_base(tmp_path):
    config_path = tmp_path / "settings.json"
    config_path.write_text("   \n")

    assert load_settings(config_path) is DEFAULT_SETTINGS


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Settings file not found"):
        load_settings(tmp_path / "absent.json")


def test_load_settings_rejects_unknown_suffix(tmp_path):
    config_path = tmp_path / "settings.ini"
    config_path.write_text("array_size = 3")

    with pytest.raises(ValueError, match="Unsupported settings file format"):
        load_settings(config_path)


def test_load_settings_rejects_non_mapping(tmp_path):
    config_path = tmp_path / "settings.json"
    config_path.write_text("[1, 2, 3]")

    with pytest.raises(TypeError, match="must be a mapping"):
        load_settings(config_path)


def test_apply_settings_overrides_replace_then_extend():
    settings = apply_settings_overrides(
        DEFAULT_SETTINGS,
        {"sample_strings": {"replace": ["a"], "extend": "b"}},
    )

    assert settings.sample_strings == ("a", "b")
    assert settings.array_size == DEFAULT_SETTINGS.array_size


def test_apply_settings_overrides_rejects_negative_size():
    with pytest.raises(ValueError, match="non-negative"):
        apply_settings_overrides(DEFAULT_SETTINGS, {"array_size": -4})


def test_apply_settings_overrides_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown settings keys: step"):
        apply_settings_overrides(DEFAULT_SETTINGS, {"step": 2})


def test_apply_settings_overrides_rejects_non_string_samples():
    with pytest.raises(TypeError, match="must be strings"):
        apply_settings_overrides(DEFAULT_SETTINGS, {"sample_strings": ["ok", 5]})


def test_load_settings_reports_invalid_yaml(tmp_path):
    pytest.importorskip("yaml")
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("array_size: [1,\n")

    with pytest.raises(ValueError, match="Invalid YAML in"):
        load_settings(config_path)


def test_load_settings_yaml_requires_pyyaml(tmp_path, monkeypatch):
    monkeypatch.setattr(utils.settings, "yaml", None)
    config_path = tmp_path / "settings.yml"
    config_path.write_text("array_size: 3\n")

    with pytest.raises(RuntimeError, match="PyYAML is required"):
        load_settings(config_path)


def test_apply_settings_overrides_rejects_unknown_merge_keys():
    with pytest.raises(ValueError, match="Unknown sample_strings keys: extnd"):
        apply_settings_overrides(DEFAULT_SETTINGS, {"sample_strings": {"extnd": ["x"]}})
