"""
component-class: Base class for pluggable components.

Components declare dependencies on other components, expose named features
invoked by a component manager, and take part in an init/shutdown lifecycle.
"""

from importlib.metadata import version

__version__ = version("component-class")

from component_class.component import Component, Dependency  # noqa: E402
from component_class.exceptions import (  # noqa: E402
    AlreadyExistsError,
    ComponentError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    TypeMismatchError,
)
from component_class.features import MISSING, Feature, kebab_case  # noqa: E402
from component_class.manager import ComponentManager, is_component_manager  # noqa: E402

__all__ = [
    "MISSING",
    "AlreadyExistsError",
    "Component",
    "ComponentError",
    "ComponentManager",
    "Dependency",
    "Feature",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
    "TypeMismatchError",
    "__version__",
    "is_component_manager",
    "kebab_case",
]
