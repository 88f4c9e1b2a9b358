"""Typed attribute cells shared by resource models.

Each alias below is a strict Pydantic type: values are stored only when they
already have the declared kind, nothing is coerced (``8675309`` is not a
string and ``"yes"`` is not a boolean). Sequence and mapping attributes are
replaced wholesale on assignment.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Strict, StrictBool, StrictInt, StrictStr

StringAttribute = StrictStr | None
BooleanAttribute = StrictBool
IntegerAttribute = StrictInt
# Strict on the container too: a tuple is not a list.
StringListAttribute = Annotated[list[StrictStr], Strict()]
# Keys and values are both strings (symlink pairs, environment variables).
StringMapAttribute = Annotated[dict[StrictStr, StrictStr], Strict()]

# Variables set by the single-string ``environment`` shorthand.
LEGACY_ENVIRONMENT_VARIABLES: tuple[str, ...] = ("RAILS_ENV", "RACK_ENV", "MERB_ENV")


def expand_environment(v: Any) -> Any:
    """Expand ``"production"`` to the framework environment variables.

    Mappings and every other kind pass through untouched; the strict mapping
    type then accepts or rejects them.
    """
    if isinstance(v, str):
        return dict.fromkeys(LEGACY_ENVIRONMENT_VARIABLES, v)
    return v


EnvironmentAttribute = Annotated[StringMapAttribute, BeforeValidator(expand_environment)]
