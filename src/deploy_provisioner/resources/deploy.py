"""Deploy resource model.

Describes how a versioned source checkout is fetched into
``<deploy_to>/shared/<repository_cache>/`` and linked into the
shared/current layout, which lifecycle hooks run, and which SCM provider
performs the checkout. Nothing here touches the filesystem; the execution
layer receives a ``DeploySnapshot``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    computed_field,
    field_validator,
)

from deploy_provisioner.resources.attributes import (
    BooleanAttribute,
    EnvironmentAttribute,
    IntegerAttribute,
    StringAttribute,
    StringListAttribute,
    StringMapAttribute,
)
from deploy_provisioner.resources.base import Resource
from deploy_provisioner.resources.callbacks import (
    CallbackAttribute,
    default_callback,
    validate_callback_attribute,
)
from deploy_provisioner.resources.markers import Alias
from deploy_provisioner.resources.paths import PathResolver
from deploy_provisioner.scm.registry import DEFAULT_SCM_PROVIDER

if TYPE_CHECKING:
    from deploy_provisioner.scm.registry import ScmProviderRegistry

logger = logging.getLogger(__name__)

CALLBACK_ATTRIBUTES: tuple[str, ...] = (
    "before_migrate",
    "before_symlink",
    "before_restart",
    "after_restart",
)

DEFAULT_PURGE_BEFORE_SYMLINK: tuple[str, ...] = ("log", "tmp/pids", "public/system")
DEFAULT_CREATE_DIRS_BEFORE_SYMLINK: tuple[str, ...] = ("tmp", "public", "config")
DEFAULT_SYMLINKS: dict[str, str] = {"system": "public/system", "pids": "tmp/pids", "log": "log"}
DEFAULT_SYMLINK_BEFORE_MIGRATE: dict[str, str] = {"config/database.yml": "config/database.yml"}

DeployAction = Literal["deploy", "force_deploy", "rollback"]


def _callback_default(attribute: str) -> Any:
    return Field(default_factory=lambda: default_callback(attribute))


class DeployResource(Resource):
    """A deployment of a source checkout into a shared/current layout.

    ``deploy_to`` is the only required input and may be passed positionally::

        resource = DeployResource("/srv/app")
        resource.branch = "stable"
        resource.revision  # "stable"
    """

    resource_type: ClassVar[str] = "deploy"
    identity_field: ClassVar[str] = "deploy_to"

    deploy_to: Annotated[str, Field(strict=True, frozen=True, min_length=1)]
    action: DeployAction = "deploy"

    # Source
    repo: Annotated[StringAttribute, Alias("repository")] = None
    revision: Annotated[StringAttribute, Alias("branch")] = None
    remote: StringAttribute = None
    repository_cache: StringAttribute = None
    copy_exclude: StringAttribute = None
    scm_provider: Annotated[str, Field(strict=True)] = DEFAULT_SCM_PROVIDER
    scm_ssh_wrapper: Annotated[StringAttribute, Alias("ssh_wrapper", "git_ssh_wrapper")] = None
    svn_username: StringAttribute = None
    svn_password: StringAttribute = None
    svn_arguments: StringAttribute = None
    enable_submodules: BooleanAttribute = False
    shallow_clone: BooleanAttribute = False

    # Application
    role: StringAttribute = None
    user: StringAttribute = None
    group: StringAttribute = None
    environment: EnvironmentAttribute = Field(default_factory=dict)
    migrate: BooleanAttribute = False
    migration_command: StringAttribute = None
    restart_command: Annotated[StringAttribute, Alias("restart")] = None
    force_deploy: BooleanAttribute = False
    keep_releases: Annotated[IntegerAttribute, Field(ge=1)] = 5

    # Layout
    purge_before_symlink: StringListAttribute = Field(
        default_factory=lambda: list(DEFAULT_PURGE_BEFORE_SYMLINK)
    )
    create_dirs_before_symlink: StringListAttribute = Field(
        default_factory=lambda: list(DEFAULT_CREATE_DIRS_BEFORE_SYMLINK)
    )
    symlinks: StringMapAttribute = Field(default_factory=lambda: dict(DEFAULT_SYMLINKS))
    symlink_before_migrate: StringMapAttribute = Field(
        default_factory=lambda: dict(DEFAULT_SYMLINK_BEFORE_MIGRATE)
    )

    # Hooks. Stored as EvalCallback or RecipeCallback models, never as the raw
    # mapping; compare against configuration with ``.as_mapping()``.
    before_migrate: CallbackAttribute = _callback_default("before_migrate")
    before_symlink: CallbackAttribute = _callback_default("before_symlink")
    before_restart: CallbackAttribute = _callback_default("before_restart")
    after_restart: CallbackAttribute = _callback_default("after_restart")

    _paths: PathResolver | None = PrivateAttr(default=None)

    def __init__(self, deploy_to: str | None = None, /, **data: Any) -> None:
        if deploy_to is not None:
            if "deploy_to" in data:
                msg = "deploy_to given both positionally and by keyword"
                raise TypeError(msg)
            data["deploy_to"] = deploy_to
        super().__init__(**data)

    @field_validator(*CALLBACK_ATTRIBUTES, mode="before")
    @classmethod
    def _normalize_callback(cls, v: Any, info: ValidationInfo) -> CallbackAttribute:
        name = info.field_name
        return validate_callback_attribute(name, v) or default_callback(name)

    # -- Derived values -------------------------------------------------

    def _resolver(self) -> PathResolver:
        # Copies made with model_copy(update=...) share the original resolver.
        if self._paths is None or self._paths.deploy_to != self.deploy_to:
            self._paths = PathResolver(self.deploy_to)
        return self._paths

    @computed_field  # type: ignore[prop-decorator]
    @property
    def destination(self) -> str:
        """Checkout location, ``<deploy_to>/shared/<repository_cache>/``."""
        return self._resolver().destination(self.repository_cache)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def shared_path(self) -> str:
        return self._resolver().shared_path()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def current_path(self) -> str:
        return self._resolver().current_path()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def depth(self) -> str | None:
        """``"5"`` while ``shallow_clone`` is set, otherwise ``None``."""
        return self._resolver().depth(self.shallow_clone)

    # -- Hand-over ------------------------------------------------------

    def hooks(self) -> dict[str, CallbackAttribute]:
        """Normalized callbacks keyed by lifecycle point.

        Values are callback models; ``as_mapping()`` gives the
        ``{"eval": ...}`` / ``{"recipe": ...}`` form.
        """
        return {name: getattr(self, name) for name in CALLBACK_ATTRIBUTES}

    def snapshot(self, registry: ScmProviderRegistry | None = None) -> DeploySnapshot:
        """Freeze the resolved configuration for the execution layer.

        When *registry* is given, ``scm_provider`` must be registered in it.

        Raises:
            UnknownScmProviderError: If the provider is not in *registry*.
        """
        if registry is not None:
            registry.get(self.scm_provider)

        computed = set(type(self).model_computed_fields)
        attributes = self.model_dump(
            exclude={*computed, *CALLBACK_ATTRIBUTES, "deploy_to", "action", "environment"}
        )
        logger.debug("Snapshot of %s (scm_provider=%s)", self.address, self.scm_provider)
        return DeploySnapshot(
            address=self.address,
            action=self.action,
            deploy_to=self.deploy_to,
            destination=self.destination,
            shared_path=self.shared_path,
            current_path=self.current_path,
            depth=self.depth,
            scm_provider=self.scm_provider,
            environment=dict(self.environment),
            hooks=self.hooks(),
            attributes=attributes,
        )


class DeploySnapshot(BaseModel):
    """Read-only view of a resolved ``DeployResource``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: str
    action: DeployAction
    deploy_to: str
    destination: str
    shared_path: str
    current_path: str
    depth: str | None
    scm_provider: str
    environment: dict[str, str]
    hooks: dict[str, CallbackAttribute]
    attributes: dict[str, Any]
