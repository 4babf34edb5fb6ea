"""
Configuration management with typed Pydantic models.

Describes feature values to apply to components and logging settings,
loaded from YAML with environment variable interpolation.
"""

from component_class.config.loader import (
    apply_component_config,
    load_config,
    load_yaml,
)
from component_class.config.settings import (
    ComponentConfig,
    ComponentsConfig,
    LoggingConfig,
)

__all__ = [
    "ComponentConfig",
    "ComponentsConfig",
    "LoggingConfig",
    "apply_component_config",
    "load_config",
    "load_yaml",
]
