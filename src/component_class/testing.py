"""
Stub component manager for tests and inspection.

Satisfies the manager contract with plain dictionaries. It does not order,
initialize or resolve components; use a real component manager for that.
"""

from typing import Any

from component_class.component import Component
from component_class.features import MISSING


class StubComponentManager:
    """Dict-backed manager stub."""

    def __init__(self, components: dict[str, Any] | None = None) -> None:
        self.component_list: dict[str, Any] = dict(components or {})
        self.type_list: dict[str, type[Component]] = {}

    def register_type(self, type_name: str, ctor: type[Component]) -> None:
        self.type_list[type_name] = ctor

    def get_type(self, type_name: str) -> type[Component] | None:
        return self.type_list.get(type_name)

    def register(self, name: str, component: Any) -> None:
        self.component_list[name] = component

    def get(self, name: str) -> Any:
        return self.component_list.get(name)

    def clear(self) -> None:
        self.component_list.clear()
        self.type_list.clear()

    def config(self, name: str, feature: str, value: Any = MISSING) -> Any:
        """Forward a feature call to the component registered as ``name``."""
        component = self.component_list[name]
        return component.config(feature, value)

    def init(self) -> None:
        pass

    def shutdown(self) -> None:
        pass
