"""Configuration helpers for the utility runner."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except ImportError:  # pragma: no cover - YAML files are rejected without PyYAML
    yaml = None  # type: ignore

from utils.validate import assert_valid_count


@dataclass(frozen=True)
class RunnerSettings:
    """Inputs the runner feeds to the array and string utilities."""

    array_size: int
    sample_strings: Tuple[str, ...]


_DEFAULT_SAMPLE_STRINGS = (
    "Hello",
    "",
    "This is a very long string to test memory management",
)

DEFAULT_SETTINGS = RunnerSettings(
    array_size=50,
    sample_strings=tuple(_DEFAULT_SAMPLE_STRINGS),
)

_KNOWN_KEYS = {"array_size", "sample_strings"}
_MERGE_KEYS = {"replace", "extend"}


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    *,
    base_settings: RunnerSettings = DEFAULT_SETTINGS,
) -> RunnerSettings:
    """Load :class:`RunnerSettings` from an optional JSON or YAML file."""

    if config_path is None:
        return base_settings

    path = Path(config_path)
    overrides = _load_config_data(path)
    return apply_settings_overrides(base_settings, overrides)


def apply_settings_overrides(
    base_settings: RunnerSettings, overrides: Mapping[str, Any]
) -> RunnerSettings:
    """Create new settings by applying *overrides* to *base_settings*."""

    if not overrides:
        return base_settings

    unknown = sorted(set(overrides) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")

    settings = base_settings
    if "array_size" in overrides:
        settings = replace(settings, array_size=assert_valid_count(overrides["array_size"]))
    if "sample_strings" in overrides:
        settings = replace(
            settings,
            sample_strings=_merge_strings(settings.sample_strings, overrides["sample_strings"]),
        )
    return settings


def _load_config_data(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML settings files")
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    elif suffix == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported settings file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError("Settings configuration must be a mapping")
    return data


def _merge_strings(base: Tuple[str, ...], override: Any) -> Tuple[str, ...]:
    if isinstance(override, Mapping):
        unknown = sorted(str(key) for key in override if key not in _MERGE_KEYS)
        if unknown:
            raise ValueError(f"Unknown sample_strings keys: {', '.join(unknown)}")
        result = list(base)
        if "replace" in override:
            result = _string_list(override.get("replace") or [])
        if "extend" in override:
            result.extend(_string_list(override.get("extend") or []))
        return tuple(result)

    return tuple(_string_list(override))


def _string_list(values: Any) -> list:
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, (list, tuple)):
        raise TypeError("Sample strings must be a string or a list of strings")

    result = []
    for item in values:
        if not isinstance(item, str):
            raise TypeError(f"Sample strings must be strings, got {type(item).__name__}")
        result.append(item)
    return result


__all__ = [
    "RunnerSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "apply_settings_overrides",
]
