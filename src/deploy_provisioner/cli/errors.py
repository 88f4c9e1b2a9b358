"""Map exceptions to clean stderr messages and exit codes."""

from __future__ import annotations

import typer


def _err(msg: str, *, fg: str | None) -> None:
    """Print a styled message to stderr."""
    typer.echo(typer.style(msg, fg=fg), err=True)


def handle_error(exc: Exception, *, color: bool = True) -> int:
    """Print a clean error message to stderr and return an exit code.

    All errors map to exit code 1.  No tracebacks are printed.
    """
    from deploy_provisioner.config.loader import ConfigError
    from deploy_provisioner.resources.errors import ResourceError
    from deploy_provisioner.scm.registry import UnknownScmProviderError

    fg = typer.colors.RED if color else None

    if isinstance(exc, ConfigError):
        lines = str(exc).splitlines() or [""]
        if len(lines) == 1:
            _err(f"Configuration error: {lines[0]}", fg=fg)
        else:
            _err("Configuration error:", fg=fg)
            for line in lines:
                _err(f"  - {line}", fg=fg)
    elif isinstance(exc, ResourceError):
        _err(f"Invalid attribute: {exc}", fg=fg)
    elif isinstance(exc, UnknownScmProviderError):
        _err(f"SCM provider error: {exc}", fg=fg)
    else:
        _err(f"Error: {exc}", fg=fg)

    return 1
