"""SCM provider selection."""

from deploy_provisioner.scm.registry import (
    DEFAULT_SCM_PROVIDER,
    GIT,
    SUBVERSION,
    ScmProviderRegistration,
    ScmProviderRegistry,
    UnknownScmProviderError,
    default_scm_registry,
)

__all__ = [
    "DEFAULT_SCM_PROVIDER",
    "GIT",
    "SUBVERSION",
    "ScmProviderRegistration",
    "ScmProviderRegistry",
    "UnknownScmProviderError",
    "default_scm_registry",
]
