"""Configuration models for YAML-based deploy definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from deploy_provisioner.resources.deploy import (
    DeployResource,  # noqa: TC001 - Pydantic needs this at runtime
)


class DeployDefaults(BaseSettings):
    """Attribute values shared by every deploy in a file.

    Fields can be set in the YAML ``defaults`` section or via environment
    variables with the ``DEPLOY_`` prefix (``DEPLOY_USER``,
    ``DEPLOY_SCM_PROVIDER``...). Constructor kwargs take precedence.

    ``environment`` takes the single-string shorthand, e.g.
    ``DEPLOY_ENVIRONMENT=production``.
    """

    model_config = SettingsConfigDict(env_prefix="DEPLOY_", extra="forbid")

    user: str | None = None
    group: str | None = None
    role: str | None = None
    scm_provider: str | None = None
    environment: str | None = None

    def apply_to(self, entry: dict[str, Any]) -> dict[str, Any]:
        """Return *entry* with unset attributes filled from these defaults."""
        merged = dict(entry)
        for field, value in self.model_dump(exclude_none=True).items():
            merged.setdefault(field, value)
        return merged


def _none_to_list(v: Any) -> Any:
    return v if v is not None else []


class Config(BaseModel):
    """Deploy configuration: validates YAML structure directly."""

    model_config = ConfigDict(extra="forbid")

    defaults: DeployDefaults = Field(default_factory=DeployDefaults)
    deploys: Annotated[list[DeployResource], BeforeValidator(_none_to_list)] = []
    config_dir: Path = Path()

    def find(self, deploy_to: str) -> DeployResource | None:
        """Return the deploy rooted at *deploy_to*, if declared."""
        return next((d for d in self.deploys if d.deploy_to == deploy_to), None)
