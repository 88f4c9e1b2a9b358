"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from deploy_provisioner.config.schema import Config, DeployDefaults

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from deploy_provisioner.resources.deploy import DeployResource


class ConfigError(Exception):
    """Raised for configuration loading / validation errors."""


# Field name → environment variable.
_DEFAULTS_ENV_MAP: dict[str, str] = {
    "user": "DEPLOY_USER",
    "group": "DEPLOY_GROUP",
    "role": "DEPLOY_ROLE",
    "scm_provider": "DEPLOY_SCM_PROVIDER",
    "environment": "DEPLOY_ENVIRONMENT",
}


def _resolve_defaults(raw_defaults: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve shared defaults from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    """
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _DEFAULTS_ENV_MAP.items():
        val = raw_defaults.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    unknown = set(raw_defaults) - set(_DEFAULTS_ENV_MAP)
    if unknown:
        raise ConfigError(f"Unknown defaults: {', '.join(sorted(unknown))}")

    return resolved


def _merge_defaults(raw_deploys: Any, defaults: DeployDefaults) -> list[dict[str, Any]]:
    """Fill every deploy entry's unset attributes from *defaults*."""
    if raw_deploys is None:
        return []
    if not isinstance(raw_deploys, list):
        raise ConfigError("'deploys' must be a list")

    merged: list[dict[str, Any]] = []
    for i, entry in enumerate(raw_deploys):
        if not isinstance(entry, dict):
            raise ConfigError(f"deploys[{i}] must be a mapping, got {type(entry).__name__}")
        merged.append(defaults.apply_to(entry))
    return merged


def _validate_unique_roots(deploys: list[DeployResource]) -> list[str]:
    """Check that no two deploys share the same ``deploy_to`` root."""
    seen: dict[str, int] = {}  # deploy_to → first index
    errors: list[str] = []
    for i, d in enumerate(deploys):
        if d.deploy_to in seen:
            errors.append(
                f"Duplicate deploy_to '{d.deploy_to}': "
                f"found in both deploys[{seen[d.deploy_to]}] and deploys[{i}]"
            )
        else:
            seen[d.deploy_to] = i
    return errors


def _format_validation_error(exc: ValidationError) -> str:
    """One line per failing attribute, e.g. ``deploys[0].repo: Input should be...``."""
    lines: list[str] = []
    for err in exc.errors():
        loc = ""
        for part in err["loc"]:
            loc += f"[{part}]" if isinstance(part, int) else (f".{part}" if loc else str(part))
        lines.append(f"{loc}: {err['msg']}")
    return "\n".join(lines)


def load_config(path: Path | str) -> Config:
    """Load a YAML configuration file and return a ``Config`` object.

    Raises:
        ConfigError: On YAML parse errors, malformed sections, or attribute
            validation failures. The message names the failing attribute.
    """
    path = Path(path)

    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    raw_defaults = raw.get("defaults") or {}
    if not isinstance(raw_defaults, dict):
        raise ConfigError("'defaults' must be a mapping")

    try:
        defaults = DeployDefaults(**_resolve_defaults(raw_defaults, path.parent))
        raw["defaults"] = defaults
        raw["deploys"] = _merge_defaults(raw.get("deploys"), defaults)
        config = Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(exc)) from exc

    config.config_dir = path.parent

    errors = _validate_unique_roots(config.deploys)
    if errors:
        raise ConfigError("\n".join(errors))

    logger.info("Loaded config from %s (%d deploys)", path, len(config.deploys))
    return config
