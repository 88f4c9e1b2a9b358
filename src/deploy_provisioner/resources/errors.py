"""Resource attribute error types."""

from __future__ import annotations

from typing import Any


class ResourceError(Exception):
    """Base exception for resource attribute errors."""


class TypeMismatchError(ResourceError, TypeError):
    """Raised when a value's kind does not match the attribute's declared type."""

    def __init__(self, attribute: str, value: Any, detail: str) -> None:
        super().__init__(
            f"Invalid value for attribute '{attribute}': {type(value).__name__} {value!r} "
            f"({detail})"
        )
        self.attribute = attribute
        self.value = value
        self.detail = detail


class CallbackValidationError(ResourceError, ValueError):
    """Raised when a callback attribute is given a value of an unsupported shape."""

    def __init__(self, attribute: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid value for callback attribute '{attribute}': {value!r} ({reason})"
        )
        self.attribute = attribute
        self.value = value
        self.reason = reason


class UnknownAttributeError(ResourceError, AttributeError):
    """Raised when a name is neither an attribute nor an alias of one."""

    def __init__(self, resource_type: str, attribute: str) -> None:
        super().__init__(f"Unknown attribute for {resource_type}: {attribute}")
        self.resource_type = resource_type
        self.attribute = attribute


class ImmutableAttributeError(ResourceError, AttributeError):
    """Raised on assignment to an attribute fixed at construction or derived."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"Attribute '{attribute}' is read-only")
        self.attribute = attribute
