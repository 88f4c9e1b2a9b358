"""Human-readable rendering of resolved deploys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import typer

from deploy_provisioner.resources.callbacks import EvalCallback

if TYPE_CHECKING:
    from collections.abc import Callable

    from deploy_provisioner.resources.callbacks import CallbackAttribute
    from deploy_provisioner.resources.deploy import DeploySnapshot


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _align_values(items: dict[str, str]) -> list[tuple[str, str]]:
    """Right-pad keys so ``=`` signs align."""
    if not items:
        return []
    max_key = max(len(k) for k in items)
    return [(k.ljust(max_key), v) for k, v in items.items()]


def _format_value(value: Any) -> str:
    """Format an attribute value for display."""
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def format_callback(callback: CallbackAttribute) -> str:
    """Render a hook as ``eval "file"``, ``recipe "name"`` or ``recipe <callable>``."""
    if isinstance(callback, EvalCallback):
        return f"eval {_format_value(callback.eval)}"
    if callback.is_inline:
        name = getattr(callback.recipe, "__qualname__", repr(callback.recipe))
        return f"recipe <callable {name}>"
    return f"recipe {_format_value(callback.recipe)}"


# ---------------------------------------------------------------------------
# Snapshot rendering
# ---------------------------------------------------------------------------

_LAYOUT_KEYS = ("deploy_to", "destination", "shared_path", "current_path", "depth", "scm_provider")


def format_snapshot(snapshot: DeploySnapshot, *, color: bool = True) -> str:
    """Render one resolved deploy as an indented block."""
    style = styler(color)
    layout = {k: _format_value(getattr(snapshot, k)) for k in _LAYOUT_KEYS}
    attrs = {
        k: _format_value(v)
        for k, v in snapshot.attributes.items()
        if k != "scm_provider" and v is not None
    }

    lines = [style(f"{snapshot.address} ({snapshot.action})", bold=True)]
    lines += [f"    {k} = {v}" for k, v in _align_values(layout)]
    lines += [f"    {k} = {v}" for k, v in _align_values(attrs)]
    if snapshot.environment:
        lines.append("    environment:")
        lines += [
            f"      {k} = {_format_value(v)}"
            for k, v in _align_values(dict(snapshot.environment))
        ]
    lines.append("    hooks:")
    hooks = {k: format_callback(v) for k, v in snapshot.hooks.items()}
    lines += [style(f"      {k} = {v}", fg="cyan") for k, v in _align_values(hooks)]
    return "\n".join(lines)


def format_snapshots(snapshots: list[DeploySnapshot], *, color: bool = True) -> str:
    """Render every resolved deploy, separated by blank lines."""
    if not snapshots:
        return "No deploys declared."
    return "\n\n".join(format_snapshot(s, color=color) for s in snapshots)


def format_validation_summary(count: int, *, color: bool = True) -> str:
    """Render ``N deploy resource(s) valid.``"""
    noun = "resource" if count == 1 else "resources"
    return styler(color)(f"{count} deploy {noun} valid.", fg="green")
