"""Declarative field markers for resource models.

``Alias`` attaches to a Pydantic field via ``Annotated`` and names the
alternative spellings a user may use for that field::

    revision: Annotated[StringAttribute, Alias("branch")] = None

Helper functions introspect the markers on the model class to build the
static alias table consumed by the resource access layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class Alias:
    """Field is also reachable under each of ``names``."""

    names: tuple[str, ...]

    def __init__(self, *names: str) -> None:
        object.__setattr__(self, "names", names)


# ── Shared introspection primitives ─────────────────────────────────


def _find_marker(field_info: FieldInfo, marker_type: type[M]) -> M | None:
    """Return the first marker of *marker_type* on a field, or ``None``."""
    return next((m for m in field_info.metadata if isinstance(m, marker_type)), None)


def _iter_marked_fields(
    model_or_cls: Any,
    marker_type: type[M],
) -> list[tuple[str, FieldInfo, M]]:
    """Return ``(field_name, field_info, marker)`` for every field carrying *marker_type*."""
    cls = model_or_cls if isinstance(model_or_cls, type) else type(model_or_cls)
    return [
        (name, fi, marker)
        for name, fi in cls.model_fields.items()
        if (marker := _find_marker(fi, marker_type)) is not None
    ]


# ── Public helpers ──────────────────────────────────────────────────


def collect_aliases(model_or_cls: Any) -> dict[str, str]:
    """Collect the ``alias -> field name`` table from ``Alias`` markers.

    Raises:
        ValueError: If an alias shadows a field or is claimed by two fields.
    """
    cls = model_or_cls if isinstance(model_or_cls, type) else type(model_or_cls)
    table: dict[str, str] = {}
    for name, _, marker in _iter_marked_fields(cls, Alias):
        for alias in marker.names:
            if alias in cls.model_fields:
                raise ValueError(f"Alias '{alias}' shadows field of the same name")
            if alias in table:
                raise ValueError(
                    f"Alias '{alias}' claimed by both '{table[alias]}' and '{name}'"
                )
            table[alias] = name
    return table
