"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance from a
``base.yaml`` next to the loaded file.
"""

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from component_class.config.settings import ComponentConfig, ComponentsConfig

if TYPE_CHECKING:
    from component_class.component import Component


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _component_name(entry: Any) -> str | None:
    if isinstance(entry, dict) and isinstance(entry.get("name"), str):
        return entry["name"]
    return None


def _merge_components(base: Any, override: Any) -> Any:
    """
    Merge component lists by name; override features win, order is kept.

    Anything that is not a list of named mappings is passed through unmerged
    so that validation reports it.
    """
    if not isinstance(base, list) or not isinstance(override, list):
        return override if override is not None else base

    merged: dict[str, dict[str, Any]] = {}
    unnamed: list[Any] = []
    for entry in [*base, *override]:
        name = _component_name(entry)
        if name is None:
            unnamed.append(entry)
        elif name in merged:
            merged[name] = _deep_merge(merged[name], entry)
        else:
            merged[name] = entry
    return [*merged.values(), *unnamed]


def load_yaml(path: Path) -> Any:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _process_config_values(data) if data else {}


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> ComponentsConfig:
    """
    Load component configuration from YAML file(s).

    Example file:
        logging:
          level: DEBUG
        components:
          - name: cache
            features:
              set-max-entries: 128
              enable-stats: true

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.
            Defaults to ``base.yaml`` in the same directory, if present.

    Returns:
        Validated ComponentsConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base.resolve() != config_path.resolve():
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    main_data = load_yaml(config_path)
    for data in (base_data, main_data):
        if not isinstance(data, dict):
            # Top-level lists or scalars are reported by validation
            return ComponentsConfig.model_validate(data)

    base_components = base_data.pop("components", None)
    main_components = main_data.pop("components", None)
    merged = _deep_merge(base_data, main_data)
    components = _merge_components(base_components, main_components)
    if components is not None:
        merged["components"] = components

    return ComponentsConfig.model_validate(merged)


def apply_component_config(
    component: "Component",
    config: ComponentConfig,
) -> list[Any]:
    """
    Apply configured feature values to a component.

    Each feature is invoked through ``component.config`` in file order; a
    None value invokes the feature without a value. Errors raised by the
    component propagate unchanged and stop the remaining features.

    Args:
        component: Component to configure.
        config: The component's configuration entry.

    Returns:
        Handler results in application order.
    """
    results = []
    for feature, value in config.features.items():
        if value is None:
            results.append(component.config(feature))
        else:
            results.append(component.config(feature, value))
    return results
