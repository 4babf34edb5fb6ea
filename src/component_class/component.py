"""
Base class for pluggable components.

A component is owned by an external component manager. It declares the
components (or component types) it depends on, exposes named features that
the manager invokes through ``config()``, and takes part in an init/shutdown
lifecycle driven by the manager.
"""

from dataclasses import dataclass
from importlib.metadata import version
from typing import Any

from component_class.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    TypeMismatchError,
)
from component_class.features import (
    MISSING,
    Feature,
    FeatureHandler,
    TypeSpec,
    describe_type,
    kebab_case,
    kind_of,
    make_type_check,
)
from component_class.manager import ComponentManager, missing_capabilities
from component_class.utils.logging import get_logger

log = get_logger(__name__)

DISTRIBUTION = "component-class"


@dataclass(frozen=True)
class Dependency:
    """A dependency on a named component or on any component of a type."""

    name: str | None = None
    type: str | None = None

    def __post_init__(self) -> None:
        by_name = isinstance(self.name, str) and self.type is None
        by_type = self.name is None and isinstance(self.type, str)
        if not (by_name or by_type):
            msg = (
                "Dependency expected exactly one of 'name' or 'type' to be str, "
                f"got name={kind_of(self.name)}, type={kind_of(self.type)}"
            )
            raise InvalidArgumentError(msg)

    def as_dict(self) -> dict[str, str]:
        """Return ``{"name": ...}`` or ``{"type": ...}``."""
        if self.name is not None:
            return {"name": self.name}
        return {"type": str(self.type)}


def _require_str(value: Any, operation: str, argument: str) -> str:
    if not isinstance(value, str):
        msg = f"{operation} expected '{argument}' to be str, got {kind_of(value)}"
        raise InvalidArgumentError(msg)
    return value


class Component:
    """
    Base class for components managed by a component manager.

    Subclasses register their features and dependencies in ``__init__`` and
    override ``init()``/``shutdown()`` as needed.

    Attributes:
        manager: The managing component manager (borrowed, not owned).
    """

    def __init__(self, manager: ComponentManager) -> None:
        missing = missing_capabilities(manager)
        if missing:
            msg = (
                "Component expected 'manager' to be a component manager, "
                f"missing: {', '.join(missing)}"
            )
            raise InvalidArgumentError(msg)

        self.manager = manager
        self._features: dict[str, FeatureHandler] = {}
        self._dependencies: list[Dependency] = []
        self._values: dict[str, Any] = {}
        self._version = version(DISTRIBUTION)

        log.debug("component_created", component=type(self).__name__)

    @property
    def version(self) -> str:
        """Version of the component-class distribution this instance was built with."""
        return self._version

    # Dependencies

    def dependencies(self) -> list[Dependency]:
        """Return the declared dependencies in declaration order."""
        return list(self._dependencies)

    def add_dependency(self, name: str) -> None:
        """Declare a dependency on the component registered as ``name``."""
        _require_str(name, "add_dependency", "name")
        self._dependencies.append(Dependency(name=name))

    def add_dependency_type(self, type_: str) -> None:
        """Declare a dependency on any component registered under ``type_``."""
        _require_str(type_, "add_dependency_type", "type")
        self._dependencies.append(Dependency(type=type_))

    def remove_dependency(self, name: str) -> None:
        """Remove the first dependency declared on component ``name``."""
        _require_str(name, "remove_dependency", "name")
        self._remove_dependency(Dependency(name=name), "remove_dependency")

    def remove_dependency_type(self, type_: str) -> None:
        """Remove the first dependency declared on type ``type_``."""
        _require_str(type_, "remove_dependency_type", "type")
        self._remove_dependency(Dependency(type=type_), "remove_dependency_type")

    def _remove_dependency(self, dependency: Dependency, operation: str) -> None:
        try:
            self._dependencies.remove(dependency)
        except ValueError:
            msg = f"{operation} didn't have dependency: {dependency.as_dict()}"
            raise NotFoundError(msg) from None

    def resolve_dependency(self, name: str) -> Any:
        """
        Fetch a required component from the manager.

        Args:
            name: Registered name of the component.

        Returns:
            The component returned by ``manager.get(name)``.

        Raises:
            NotFoundError: If the manager has no component of that name.
        """
        _require_str(name, "resolve_dependency", "name")
        component = self.manager.get(name)
        if component is None:
            msg = f"{name} component not found"
            raise NotFoundError(msg)
        return component

    # Features

    def features(self) -> list[Feature]:
        """Return the registered features in registration order."""
        return [Feature(name=name, handler=fn) for name, fn in self._features.items()]

    def has_feature(self, name: str) -> bool:
        """Check whether a feature named ``name`` is registered."""
        _require_str(name, "has_feature", "name")
        return name in self._features

    def add_feature(self, name: str, handler: FeatureHandler) -> None:
        """
        Register ``handler`` under the feature name ``name``.

        Raises:
            InvalidArgumentError: If ``name`` is not a string or ``handler``
                is not callable.
            AlreadyExistsError: If the name is already registered.
        """
        _require_str(name, "add_feature", "name")
        if not callable(handler):
            msg = f"add_feature expected 'handler' to be callable, got {kind_of(handler)}"
            raise InvalidArgumentError(msg)
        if name in self._features:
            msg = f"add_feature already has feature named: '{name}'"
            raise AlreadyExistsError(msg)

        self._features[name] = handler
        log.debug("feature_added", component=type(self).__name__, feature=name)

    def remove_feature(self, name: str) -> None:
        """
        Unregister the feature ``name``.

        Raises:
            InvalidArgumentError: If ``name`` is not a string.
            NotFoundError: If the feature is not registered.
        """
        _require_str(name, "remove_feature", "name")
        if name not in self._features:
            msg = f"remove_feature didn't have feature named: '{name}'"
            raise NotFoundError(msg)

        del self._features[name]
        log.debug("feature_removed", component=type(self).__name__, feature=name)

    def config(self, feature: str, value: Any = MISSING) -> Any:
        """
        Invoke a feature.

        The handler is called with ``value``, or with no arguments when the
        value is omitted.

        Args:
            feature: Registered feature name.
            value: Optional value passed to the handler.

        Returns:
            Whatever the handler returns.

        Raises:
            InvalidArgumentError: If ``feature`` is not a string.
            NotFoundError: If the feature is not registered.
            InvalidStateError: If the registry entry is not callable.
        """
        _require_str(feature, "config", "feature")
        if feature not in self._features:
            msg = f"'{feature}' not found during config"
            raise NotFoundError(msg)

        handler = self._features[feature]
        if not callable(handler):
            msg = (
                f"feature registry misconfigured for '{feature}': "
                f"expected a callable, got {kind_of(handler)}"
            )
            raise InvalidStateError(msg)

        log.debug(
            "feature_config",
            component=type(self).__name__,
            feature=feature,
            has_value=value is not MISSING,
        )
        if value is MISSING:
            return handler()
        return handler(value)

    def feature_value(self, name: str) -> Any:
        """
        Return the value managed by a generated feature.

        Args:
            name: The name passed to the builder, in camel or kebab case.

        Returns:
            Stored value, or None if it was never set.
        """
        _require_str(name, "feature_value", "name")
        return self._values.get(kebab_case(name))

    def values(self) -> dict[str, Any]:
        """Return a copy of the values managed by generated features."""
        return dict(self._values)

    def _check_free(self, names: list[str]) -> None:
        for name in names:
            if name in self._features:
                msg = f"add_feature already has feature named: '{name}'"
                raise AlreadyExistsError(msg)

    def add_setter_getter_feature(
        self,
        name: str,
        type_: TypeSpec,
        default: Any = MISSING,
    ) -> None:
        """
        Register a typed ``set-<name>`` / ``get-<name>`` feature pair.

        The names are derived with ``kebab_case``. The setter validates its
        value against ``type_`` before storing it; the getter returns the
        stored value.

        Args:
            name: Camel-case value name, e.g. ``cacheSize``.
            type_: Kind tag (``"string"``, ``"number"``, ``"integer"``,
                ``"boolean"``, ``"bytes"``, ``"object"``, ``"function"``), a
                class, or a tuple of classes.
            default: Optional initial value, validated like a setter call.

        Raises:
            InvalidArgumentError: If ``name`` is not a string or ``type_`` is
                not a usable type spec.
            TypeMismatchError: If ``default`` does not match ``type_``.
            AlreadyExistsError: If a derived feature name is taken.
        """
        operation = "add_setter_getter_feature"
        _require_str(name, operation, "name")
        check = make_type_check(type_, operation)
        expected = describe_type(type_)
        key = kebab_case(name)
        setter_name = f"set-{key}"
        getter_name = f"get-{key}"

        def validate(value: Any) -> Any:
            if value is MISSING or not check(value):
                msg = f"{setter_name} expected {expected}, got {kind_of(value)}"
                raise TypeMismatchError(msg)
            return value

        if default is not MISSING:
            validate(default)
        self._check_free([setter_name, getter_name])

        def setter(value: Any = MISSING) -> None:
            self._values[key] = validate(value)

        def getter(_value: Any = MISSING) -> Any:
            return self._values.get(key)

        self.add_feature(setter_name, setter)
        self.add_feature(getter_name, getter)
        if default is not MISSING:
            self._values[key] = default

    def add_enable_feature(self, name: str, default: Any = MISSING) -> None:
        """
        Register ``enable-<name>``, ``disable-<name>`` and ``get-<name>``.

        ``enable-<name>`` stores its boolean argument (True when omitted).
        ``disable-<name>`` stores the negation of its argument, which
        defaults to True, so a bare call disables and ``False`` enables.

        Args:
            name: Camel-case switch name, e.g. ``debugOutput``.
            default: Optional initial boolean.

        Raises:
            InvalidArgumentError: If ``name`` is not a string.
            TypeMismatchError: If ``default`` is not a bool.
            AlreadyExistsError: If a derived feature name is taken.
        """
        _require_str(name, "add_enable_feature", "name")
        key = kebab_case(name)
        enable_name = f"enable-{key}"
        disable_name = f"disable-{key}"
        getter_name = f"get-{key}"

        def require_bool(feature: str, value: Any) -> bool:
            if not isinstance(value, bool):
                msg = f"{feature} expected boolean, got {kind_of(value)}"
                raise TypeMismatchError(msg)
            return value

        if default is not MISSING:
            require_bool("add_enable_feature default", default)
        self._check_free([enable_name, disable_name, getter_name])

        def enable(value: Any = True) -> None:
            self._values[key] = require_bool(enable_name, value)

        def disable(value: Any = True) -> None:
            self._values[key] = not require_bool(disable_name, value)

        def getter(_value: Any = MISSING) -> Any:
            return self._values.get(key)

        self.add_feature(enable_name, enable)
        self.add_feature(disable_name, disable)
        self.add_feature(getter_name, getter)
        if default is not MISSING:
            self._values[key] = default

    # Lifecycle

    def init(self) -> None:
        """Acquire runtime resources. Called at most once by the manager."""

    def shutdown(self) -> None:
        """Release runtime resources. Called at most once by the manager."""
