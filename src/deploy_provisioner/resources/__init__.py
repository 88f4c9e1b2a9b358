"""Deploy resource definitions."""

from deploy_provisioner.resources.base import Resource
from deploy_provisioner.resources.callbacks import (
    CallbackReference,
    EvalCallback,
    RecipeCallback,
    validate_callback_attribute,
)
from deploy_provisioner.resources.deploy import (
    CALLBACK_ATTRIBUTES,
    DeployResource,
    DeploySnapshot,
)
from deploy_provisioner.resources.errors import (
    CallbackValidationError,
    ImmutableAttributeError,
    ResourceError,
    TypeMismatchError,
    UnknownAttributeError,
)
from deploy_provisioner.resources.paths import PathResolver

__all__ = [
    "CALLBACK_ATTRIBUTES",
    "CallbackReference",
    "CallbackValidationError",
    "DeployResource",
    "DeploySnapshot",
    "EvalCallback",
    "ImmutableAttributeError",
    "PathResolver",
    "RecipeCallback",
    "Resource",
    "ResourceError",
    "TypeMismatchError",
    "UnknownAttributeError",
    "validate_callback_attribute",
]
