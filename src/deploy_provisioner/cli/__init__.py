"""CLI application for deploy-provisioner."""

from __future__ import annotations

import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler

from deploy_provisioner import __version__

app = typer.Typer(
    name="deploy-provisioner",
    no_args_is_help=True,
    add_completion=False,
)

PACKAGE_LOGGER = "deploy_provisioner"

# Indexed by the number of -v flags.
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


class LogLevel(str, Enum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"deploy-provisioner {__version__}")
        raise typer.Exit


def setup_logging(level: int) -> logging.Logger:
    """Route package log records to stderr through a rich handler at *level*.

    Only the ``deploy_provisioner`` logger is touched; the root logger and
    any handlers installed by an embedding application are left alone.
    Calling this again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def resolve_log_level(verbose: int, log_level: LogLevel | None) -> int | None:
    """Pick the package log level; ``None`` leaves logging unconfigured.

    An explicit ``--log-level`` (or ``DEPLOY_LOG``) wins over ``-v`` flags.
    """
    if log_level is not None:
        return getattr(logging, log_level.value.upper())
    if verbose:
        return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]
    return None


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (-v info, -vv debug).",
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        envvar="DEPLOY_LOG",
        case_sensitive=False,
        help="Log level; overrides -v.",
    ),
) -> None:
    """Validate and inspect declarative deploy resources."""
    _ = version
    level = resolve_log_level(verbose, log_level)
    if level is not None:
        setup_logging(level)


from deploy_provisioner.cli import commands as _commands  # noqa: E402, F401
