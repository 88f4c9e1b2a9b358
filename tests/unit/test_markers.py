"""Tests for declarative field markers and introspection helpers."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import BaseModel

from deploy_provisioner.resources.deploy import DeployResource
from deploy_provisioner.resources.markers import Alias, collect_aliases


class TestCollectAliases:
    def test_single_alias(self) -> None:
        class M(BaseModel):
            revision: Annotated[str, Alias("branch")] = ""

        assert collect_aliases(M) == {"branch": "revision"}

    def test_multiple_names(self) -> None:
        class M(BaseModel):
            wrapper: Annotated[str, Alias("ssh_wrapper", "git_ssh_wrapper")] = ""

        assert collect_aliases(M) == {"ssh_wrapper": "wrapper", "git_ssh_wrapper": "wrapper"}

    def test_accepts_instance(self) -> None:
        class M(BaseModel):
            repo: Annotated[str, Alias("repository")] = ""

        assert collect_aliases(M()) == {"repository": "repo"}

    def test_unmarked_fields_ignored(self) -> None:
        class M(BaseModel):
            user: str = ""

        assert collect_aliases(M) == {}

    def test_alias_shadowing_field_rejected(self) -> None:
        class M(BaseModel):
            repo: Annotated[str, Alias("user")] = ""
            user: str = ""

        with pytest.raises(ValueError, match="shadows"):
            collect_aliases(M)

    def test_alias_claimed_twice_rejected(self) -> None:
        class M(BaseModel):
            a: Annotated[str, Alias("x")] = ""
            b: Annotated[str, Alias("x")] = ""

        with pytest.raises(ValueError, match="claimed by both"):
            collect_aliases(M)

    def test_deploy_resource(self) -> None:
        aliases = collect_aliases(DeployResource)
        assert aliases["branch"] == "revision"
        assert aliases["repository"] == "repo"
        assert aliases["ssh_wrapper"] == "scm_ssh_wrapper"
