"""
Component manager contract.

The manager is an external collaborator. Components only check that the
object handed to them provides the expected capabilities; they never depend
on a concrete manager implementation.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from component_class.component import Component

REQUIRED_METHODS: tuple[str, ...] = (
    "register_type",
    "get_type",
    "register",
    "get",
    "clear",
    "config",
    "init",
    "shutdown",
)

REQUIRED_COLLECTIONS: tuple[str, ...] = (
    "component_list",
    "type_list",
)


class ComponentManager(Protocol):
    """Capabilities a component expects from its manager."""

    component_list: Mapping[str, "Component"]
    type_list: Mapping[str, type["Component"]]

    def register_type(self, type_name: str, ctor: type["Component"]) -> Any: ...

    def get_type(self, type_name: str) -> type["Component"] | None: ...

    def register(self, name: str, component: "Component") -> Any: ...

    def get(self, name: str) -> "Component | Any | None": ...

    def clear(self) -> Any: ...

    def config(self, name: str, feature: str, value: Any = ...) -> Any: ...

    def init(self) -> Any: ...

    def shutdown(self) -> Any: ...


def missing_capabilities(obj: Any) -> list[str]:
    """
    List the manager capabilities an object lacks.

    Methods must be callable attributes; collections must be mappings.

    Args:
        obj: Candidate manager.

    Returns:
        Names of missing or mistyped members, empty if the object conforms.
    """
    missing = [
        name for name in REQUIRED_METHODS if not callable(getattr(obj, name, None))
    ]
    missing.extend(
        name
        for name in REQUIRED_COLLECTIONS
        if not isinstance(getattr(obj, name, None), Mapping)
    )
    return missing


def is_component_manager(obj: Any) -> bool:
    """Check whether an object structurally satisfies the manager contract."""
    return obj is not None and not missing_capabilities(obj)
