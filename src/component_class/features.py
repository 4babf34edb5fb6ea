"""
Feature records, name derivation and value kind checks.

Generated features (setter/getter pairs and enable/disable switches) derive
their registry names from a camel-case identifier and validate incoming
values against a declared type. Both concerns live here so every builder
uses the same rules.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from component_class.exceptions import InvalidArgumentError


class _Missing(Enum):
    """Marker type for an omitted feature value."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING

FeatureHandler: TypeAlias = Callable[..., Any]
TypeSpec: TypeAlias = str | type | tuple[type, ...]

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")

# Tags that name "no value"; nothing can be validated against them.
_EMPTY_KIND_TAGS = frozenset({"null", "undefined", "none"})

_PRIMITIVES = (str, bytes, int, float, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, _PRIMITIVES)


KIND_CHECKS: dict[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": _is_integer,
    "boolean": lambda value: isinstance(value, bool),
    "bytes": lambda value: isinstance(value, bytes),
    "object": _is_object,
    "function": callable,
}


@dataclass(frozen=True)
class Feature:
    """A registered feature: its name and the handler invoked by config()."""

    name: str
    handler: FeatureHandler


def kebab_case(name: str) -> str:
    """
    Derive a feature name from a camel-case identifier.

    A hyphen is inserted at every lowercase-to-uppercase transition and the
    result is lower-cased, e.g. ``veryLongTest`` -> ``very-long-test``.
    """
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def kind_of(value: Any) -> str:
    """Describe the kind of a value for error messages."""
    if value is None:
        return "None"
    if value is MISSING:
        return "no value"
    return type(value).__name__


def describe_type(type_spec: TypeSpec) -> str:
    """Human-readable name of a type spec."""
    if isinstance(type_spec, str):
        return type_spec.lower()
    if isinstance(type_spec, tuple):
        return " | ".join(t.__name__ for t in type_spec)
    return type_spec.__name__


def make_type_check(type_spec: Any, operation: str) -> Callable[[Any], bool]:
    """
    Build a predicate validating values against a type spec.

    Args:
        type_spec: A kind tag (see ``KIND_CHECKS``), a class, or a tuple of
            classes.
        operation: Name of the calling operation, used in error messages.

    Returns:
        Predicate returning True when a value matches.

    Raises:
        InvalidArgumentError: If the spec is an empty-kind tag, an unknown
            tag, or neither a tag nor a class.
    """
    if isinstance(type_spec, str):
        tag = type_spec.lower()
        if tag in _EMPTY_KIND_TAGS:
            msg = f"{operation} bad type: {type_spec}"
            raise InvalidArgumentError(msg)
        check = KIND_CHECKS.get(tag)
        if check is None:
            available = ", ".join(KIND_CHECKS)
            msg = f"{operation} unknown type tag {type_spec!r}. Available: {available}"
            raise InvalidArgumentError(msg)
        return check

    if isinstance(type_spec, type):
        return lambda value: isinstance(value, type_spec)

    if (
        isinstance(type_spec, tuple)
        and type_spec
        and all(isinstance(t, type) for t in type_spec)
    ):
        return lambda value: isinstance(value, type_spec)

    msg = f"{operation} bad type: {type_spec!r}"
    raise InvalidArgumentError(msg)
