"""Error taxonomy for component operations."""


class ComponentError(Exception):
    """Base class for all errors raised by component operations."""


class InvalidArgumentError(ComponentError, TypeError):
    """Wrong argument shape or type at a public entry point."""


class AlreadyExistsError(ComponentError, ValueError):
    """A feature with the same name is already registered."""


class NotFoundError(ComponentError, LookupError):
    """A feature, dependency declaration or required component is missing."""


class TypeMismatchError(ComponentError, TypeError):
    """A value failed the declared type check of a generated feature."""


class InvalidStateError(ComponentError, RuntimeError):
    """The feature registry holds an entry that cannot be invoked."""
