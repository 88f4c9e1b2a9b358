"""Base resource class for deploy configuration resources."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, computed_field, model_validator
from pydantic import ValidationError as PydanticValidationError

from deploy_provisioner.resources.errors import (
    ImmutableAttributeError,
    ResourceError,
    TypeMismatchError,
    UnknownAttributeError,
)
from deploy_provisioner.resources.markers import collect_aliases

logger = logging.getLogger(__name__)


class Resource(BaseModel):
    """Base class for all resources.

    Resources are pure data: they hold validated configuration and derive
    values from it. Attributes are read and written either as Python
    attributes or through ``get``/``set`` by name; alias names declared with
    the ``Alias`` marker resolve to their field in both cases.

    Assignment is validated. A rejected assignment raises a ``ResourceError``
    subclass and leaves the previous value in place.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    resource_type: ClassVar[str]
    identity_field: ClassVar[str]

    _alias_table: ClassVar[dict[str, str]] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls._alias_table = collect_aliases(cls)

    @classmethod
    def aliases(cls) -> dict[str, str]:
        """Alias name -> field name."""
        return dict(cls._alias_table)

    @classmethod
    def canonical_name(cls, name: str) -> str:
        """Resolve *name* (field, derived value or alias) to the stored name."""
        resolved = cls._alias_table.get(name, name)
        if resolved not in cls.model_fields and resolved not in cls.model_computed_fields:
            raise UnknownAttributeError(cls.resource_type, name)
        return resolved

    @model_validator(mode="before")
    @classmethod
    def _resolve_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not cls._alias_table:
            return data
        resolved: dict[str, Any] = {}
        given_as: dict[str, str] = {}
        for key, value in data.items():
            name = cls._alias_table.get(key, key)
            if name in resolved:
                msg = f"'{given_as[name]}' and '{key}' name the same attribute; set only one"
                raise ValueError(msg)
            if name != key:
                logger.debug("Resolved %s alias %s -> %s", cls.resource_type, key, name)
            resolved[name] = value
            given_as[name] = key
        return resolved

    @computed_field  # type: ignore[prop-decorator]
    @property
    def address(self) -> str:
        """Unique address for this resource (e.g., 'deploy[/srv/app]')."""
        return f"{self.resource_type}[{getattr(self, self.identity_field)}]"

    def get(self, name: str) -> Any:
        """Read an attribute or derived value by name or alias."""
        return getattr(self, self.canonical_name(name))

    def set(self, name: str, value: Any) -> None:
        """Write an attribute by name or alias."""
        setattr(self, self.canonical_name(name), value)

    def __getattr__(self, name: str) -> Any:
        canonical = type(self)._alias_table.get(name)
        if canonical is not None:
            return getattr(self, canonical)
        return super().__getattr__(name)  # type: ignore[misc]

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            super().__setattr__(name, value)
            return

        cls = type(self)
        canonical = cls._alias_table.get(name, name)
        if canonical in cls.model_computed_fields:
            raise ImmutableAttributeError(canonical)
        if canonical not in cls.model_fields:
            raise UnknownAttributeError(cls.resource_type, name)

        try:
            super().__setattr__(canonical, value)
        except PydanticValidationError as exc:
            raise _translate_assignment_error(canonical, value, exc) from exc


def _translate_assignment_error(
    attribute: str, value: Any, exc: PydanticValidationError
) -> ResourceError:
    """Map a Pydantic assignment failure onto the resource error types."""
    error = exc.errors()[0]
    if error["type"] == "frozen_field":
        return ImmutableAttributeError(attribute)
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ResourceError):
        return cause
    return TypeMismatchError(attribute, value, error["msg"])
