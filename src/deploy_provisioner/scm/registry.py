"""SCM provider registry.

The resource model only stores a provider *identifier*; this registry is
where identifiers are declared and where the default one comes from.
"""

from __future__ import annotations

from dataclasses import dataclass


class UnknownScmProviderError(LookupError):
    """Raised when a provider identifier has no registration."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown SCM provider: {identifier}")
        self.identifier = identifier


@dataclass(frozen=True)
class ScmProviderRegistration:
    identifier: str
    description: str = ""


class ScmProviderRegistry:
    """Registry mapping provider identifier -> registration."""

    def __init__(self) -> None:
        self._registrations: dict[str, ScmProviderRegistration] = {}
        self._default: str | None = None

    def register(self, identifier: str, description: str = "", *, default: bool = False) -> None:
        if not isinstance(identifier, str) or not identifier:
            raise ValueError("SCM provider identifier must be a non-empty string")

        if identifier in self._registrations:
            raise ValueError(f"SCM provider already registered: {identifier}")

        self._registrations[identifier] = ScmProviderRegistration(
            identifier=identifier,
            description=description,
        )
        if default or self._default is None:
            self._default = identifier

    def get(self, identifier: str) -> ScmProviderRegistration:
        try:
            return self._registrations[identifier]
        except KeyError as e:
            raise UnknownScmProviderError(identifier) from e

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registrations

    def identifiers(self) -> list[str]:
        return list(self._registrations)

    @property
    def default(self) -> str:
        """Identifier of the default provider."""
        if self._default is None:
            raise LookupError("No SCM providers registered")
        return self._default


GIT = "git"
SUBVERSION = "subversion"


def default_scm_registry() -> ScmProviderRegistry:
    """Create a fresh registry with the built-in SCM providers."""
    registry = ScmProviderRegistry()
    registry.register(GIT, "Git checkout (supports submodules and shallow clones)", default=True)
    registry.register(SUBVERSION, "Subversion checkout or export")
    return registry


DEFAULT_SCM_PROVIDER = default_scm_registry().default
