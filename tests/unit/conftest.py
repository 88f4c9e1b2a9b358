"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from deploy_provisioner.config import load
from deploy_provisioner.resources.deploy import DeployResource

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from deploy_provisioner.config.schema import Config

_DEPLOY_ENV_VARS = (
    "DEPLOY_USER",
    "DEPLOY_GROUP",
    "DEPLOY_ROLE",
    "DEPLOY_SCM_PROVIDER",
    "DEPLOY_ENVIRONMENT",
    "DEPLOY_LOG",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _clean_deploy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove DEPLOY_* env vars so unit tests don't leak host config."""
    for var in _DEPLOY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def resource() -> DeployResource:
    return DeployResource("/my/deploy/dir")


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory fixture: write YAML + optional .env, return loaded Config."""

    def _make(yaml_str: str, *, dotenv: str | None = None) -> Config:
        (tmp_path / "deploy.yaml").write_text(yaml_str)
        if dotenv is not None:
            (tmp_path / ".env").write_text(dotenv)
        return load(tmp_path / "deploy.yaml")

    return _make
