"""Filesystem locations derived from a deploy root."""

from __future__ import annotations

DEFAULT_REPOSITORY_CACHE = "cached-copy"
SHALLOW_CLONE_DEPTH = "5"


class PathResolver:
    """Derive the shared/current layout paths for one deploy root.

    ``shared_path`` and ``current_path`` are memoized in separate slots so
    reading one never affects the other. ``destination`` and ``depth`` depend
    on mutable attributes and are recomputed on every call.
    """

    def __init__(self, deploy_to: str) -> None:
        self._deploy_to = deploy_to
        self._shared_path: str | None = None
        self._current_path: str | None = None

    @property
    def deploy_to(self) -> str:
        return self._deploy_to

    def shared_path(self) -> str:
        if self._shared_path is None:
            self._shared_path = f"{self._deploy_to}/shared"
        return self._shared_path

    def current_path(self) -> str:
        if self._current_path is None:
            self._current_path = f"{self._deploy_to}/current"
        return self._current_path

    def destination(self, repository_cache: str | None = None) -> str:
        """Checkout location: ``<deploy_to>/shared/<repository_cache>/``."""
        if repository_cache is None:
            repository_cache = DEFAULT_REPOSITORY_CACHE
        return f"{self.shared_path()}/{repository_cache}/"

    @staticmethod
    def depth(shallow_clone: bool) -> str | None:
        """Clone depth for shallow clones, ``None`` for full history."""
        return SHALLOW_CLONE_DEPTH if shallow_clone else None
