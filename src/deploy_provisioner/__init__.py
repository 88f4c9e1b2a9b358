"""Declarative deploy resource configuration."""

from deploy_provisioner.resources import DeployResource, DeploySnapshot

__version__ = "0.1.0"

__all__ = ["DeployResource", "DeploySnapshot", "__version__"]
