"""
Typed configuration models using Pydantic.

A configuration file lists components by their registered name together
with the feature values to apply to them, plus logging settings.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level name")
    json_output: bool = Field(default=False, description="Render log events as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            msg = f"level must be one of {', '.join(_LOG_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class ComponentConfig(BaseModel):
    """Feature values for one component.

    Features are applied in the order they appear. A null value invokes the
    feature without a value (e.g. ``disable-debug: null``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Registered component name")
    features: dict[str, Any] = Field(
        default_factory=dict, description="Feature name -> value, applied in order"
    )

    @field_validator("features")
    @classmethod
    def validate_feature_names(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Reject empty feature names."""
        empty = [key for key in v if not key.strip()]
        if empty:
            msg = "feature names must be non-empty strings"
            raise ValueError(msg)
        return v


class ComponentsConfig(BaseModel):
    """Complete configuration file."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    components: list[ComponentConfig] = Field(default_factory=list)

    @field_validator("components")
    @classmethod
    def validate_unique_names(cls, v: list[ComponentConfig]) -> list[ComponentConfig]:
        """Ensure each component is configured at most once."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for component in v:
            if component.name in seen:
                duplicates.append(component.name)
            seen.add(component.name)
        if duplicates:
            msg = f"duplicate component names: {', '.join(duplicates)}"
            raise ValueError(msg)
        return v

    @property
    def component_names(self) -> list[str]:
        """Configured component names in file order."""
        return [component.name for component in self.components]

    def get(self, name: str) -> ComponentConfig:
        """
        Get a component's configuration by name.

        Raises:
            KeyError: If the component is not configured.
        """
        for component in self.components:
            if component.name == name:
                return component
        available = ", ".join(self.component_names) or "none"
        msg = f"Unknown component '{name}'. Available: {available}"
        raise KeyError(msg)
