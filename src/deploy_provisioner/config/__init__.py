"""YAML configuration loading and convenience resolve API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from deploy_provisioner.config.loader import ConfigError, load_config
from deploy_provisioner.config.schema import Config, DeployDefaults
from deploy_provisioner.scm.registry import UnknownScmProviderError, default_scm_registry

if TYPE_CHECKING:
    from pathlib import Path

    from deploy_provisioner.resources.deploy import DeploySnapshot
    from deploy_provisioner.scm.registry import ScmProviderRegistry

__all__ = [
    "Config",
    "ConfigError",
    "DeployDefaults",
    "load",
    "load_config",
    "resolve",
]


def load(path: Path | str) -> Config:
    """Load a YAML configuration file."""
    return load_config(path)


def resolve(
    config: Config, *, registry: ScmProviderRegistry | None = None
) -> list[DeploySnapshot]:
    """Snapshot every deploy, checking SCM providers against *registry*.

    Uses the built-in SCM registry when none is given.

    Raises:
        ConfigError: Listing every deploy whose provider is not registered.
    """
    registry = registry if registry is not None else default_scm_registry()
    snapshots: list[DeploySnapshot] = []
    errors: list[str] = []
    for deploy in config.deploys:
        try:
            snapshots.append(deploy.snapshot(registry))
        except UnknownScmProviderError as exc:
            errors.append(
                f"{deploy.address}: {exc} (known: {', '.join(registry.identifiers())})"
            )
    if errors:
        raise ConfigError("\n".join(errors))
    return snapshots
