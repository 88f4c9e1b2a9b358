"""Callback (hook) attribute values.

A deploy hook is declared in one of three ways and always stored as one of
two frozen models:

- ``{"eval": "deploy/before_migrate.rb"}`` → ``EvalCallback``
- ``{"recipe": "app::migrate"}`` or an inline callable → ``RecipeCallback``
- ``None`` → the attribute falls back to its default

``validate_callback_attribute`` is the single validator for every callback
attribute; it is parameterized only by the attribute name used in errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

from deploy_provisioner.resources.errors import CallbackValidationError

logger = logging.getLogger(__name__)

CALLBACK_KEYS: frozenset[str] = frozenset({"eval", "recipe"})


class CallbackReference(BaseModel):
    """Base class for normalized callback values."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def as_mapping(self) -> dict[str, Any]:
        """Render as the one-key mapping users write in configuration."""
        return self.model_dump()


class EvalCallback(CallbackReference):
    """Hook given as a file evaluated at the lifecycle point."""

    eval: str


class RecipeCallback(CallbackReference):
    """Hook given as a recipe name or an inline callable."""

    recipe: str | Callable[..., Any]

    @property
    def is_inline(self) -> bool:
        return not isinstance(self.recipe, str)

    @field_serializer("recipe", when_used="json")
    def _serialize_recipe(self, recipe: str | Callable[..., Any]) -> str:
        if isinstance(recipe, str):
            return recipe
        return f"<callable {getattr(recipe, '__qualname__', repr(recipe))}>"


CallbackAttribute = EvalCallback | RecipeCallback


def default_callback(attribute: str) -> EvalCallback:
    """Default hook for *attribute*: evaluate ``deploy/<attribute>.rb``."""
    return EvalCallback(eval=f"deploy/{attribute}.rb")


def validate_callback_attribute(attribute: str, value: Any) -> CallbackAttribute | None:
    """Normalize a raw callback declaration.

    Returns ``None`` for ``None`` (no override), otherwise the normalized
    callback model.

    Raises:
        CallbackValidationError: If *value* is not ``None``, a callable, a
            normalized callback, or a mapping with exactly one ``eval`` or
            ``recipe`` key whose value is a string.
    """
    if value is None:
        return None
    if isinstance(value, EvalCallback | RecipeCallback):
        return value
    if isinstance(value, Mapping):
        if len(value) != 1:
            raise CallbackValidationError(
                attribute, value, "mapping must have exactly one key, 'eval' or 'recipe'"
            )
        ((key, target),) = value.items()
        if key not in CALLBACK_KEYS:
            raise CallbackValidationError(
                attribute, value, f"unsupported key {key!r}, expected 'eval' or 'recipe'"
            )
        if not isinstance(target, str):
            raise CallbackValidationError(attribute, value, f"{key} target must be a string")
        if key == "eval":
            return EvalCallback(eval=target)
        return RecipeCallback(recipe=target)
    if callable(value):
        logger.debug("Storing inline callable for %s", attribute)
        return RecipeCallback(recipe=value)
    raise CallbackValidationError(
        attribute, value, "expected None, a callable, or a mapping with one 'eval'/'recipe' key"
    )
