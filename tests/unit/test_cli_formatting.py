"""Tests for resolved deploy rendering."""

from __future__ import annotations

from deploy_provisioner.cli.formatting import (
    format_callback,
    format_snapshot,
    format_snapshots,
    format_validation_summary,
)
from deploy_provisioner.resources.callbacks import EvalCallback, RecipeCallback
from deploy_provisioner.resources.deploy import DeployResource


def restart_workers() -> None:
    pass


class TestFormatCallback:
    def test_eval(self) -> None:
        assert format_callback(EvalCallback(eval="deploy/x.rb")) == 'eval "deploy/x.rb"'

    def test_recipe(self) -> None:
        assert format_callback(RecipeCallback(recipe="app::hook")) == 'recipe "app::hook"'

    def test_inline(self) -> None:
        assert format_callback(RecipeCallback(recipe=restart_workers)) == (
            "recipe <callable restart_workers>"
        )


class TestFormatSnapshot:
    def test_layout_block(self) -> None:
        r = DeployResource("/srv/app", branch="stable", environment="production")
        text = format_snapshot(r.snapshot(), color=False)
        lines = text.splitlines()

        assert lines[0] == "deploy[/srv/app] (deploy)"
        assert '    destination  = "/srv/app/shared/cached-copy/"' in lines
        assert "    depth        = null" in lines
        assert '    scm_provider = "git"' in lines
        assert "    environment:" in lines
        assert '      RAILS_ENV = "production"' in lines
        assert "    hooks:" in lines
        assert any('revision' in line and '"stable"' in line for line in lines)

    def test_unset_attributes_hidden(self) -> None:
        text = format_snapshot(DeployResource("/srv/app").snapshot(), color=False)
        assert "svn_password" not in text
        assert "environment:" not in text

    def test_booleans_lowercase(self) -> None:
        text = format_snapshot(DeployResource("/srv/app", migrate=True).snapshot(), color=False)
        assert any("migrate" in line and line.endswith("= true") for line in text.splitlines())

    def test_color(self) -> None:
        text = format_snapshot(DeployResource("/srv/app").snapshot(), color=True)
        assert "\x1b[" in text


class TestFormatSnapshots:
    def test_empty(self) -> None:
        assert format_snapshots([], color=False) == "No deploys declared."

    def test_blocks_separated(self) -> None:
        snaps = [DeployResource("/a").snapshot(), DeployResource("/b").snapshot()]
        text = format_snapshots(snaps, color=False)
        assert "deploy[/a] (deploy)" in text
        assert "\n\ndeploy[/b] (deploy)" in text


class TestValidationSummary:
    def test_singular(self) -> None:
        assert format_validation_summary(1, color=False) == "1 deploy resource valid."

    def test_plural(self) -> None:
        assert format_validation_summary(3, color=False) == "3 deploy resources valid."
