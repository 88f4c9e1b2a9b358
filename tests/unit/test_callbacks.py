"""Tests for callback (hook) attribute validation and normalization."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from deploy_provisioner.resources.callbacks import (
    EvalCallback,
    RecipeCallback,
    default_callback,
    validate_callback_attribute,
)
from deploy_provisioner.resources.deploy import CALLBACK_ATTRIBUTES, DeployResource
from deploy_provisioner.resources.errors import CallbackValidationError


def _noop() -> None:
    pass


class TestValidateCallbackAttribute:
    def test_accepts_callable(self) -> None:
        result = validate_callback_attribute("optname", _noop)
        assert result == RecipeCallback(recipe=_noop)
        assert result.is_inline

    def test_accepts_lambda(self) -> None:
        hook = lambda: None  # noqa: E731
        assert validate_callback_attribute("optname", hook).recipe is hook

    def test_accepts_eval_mapping(self) -> None:
        result = validate_callback_attribute("optname", {"eval": "filename"})
        assert result == EvalCallback(eval="filename")

    def test_accepts_recipe_mapping(self) -> None:
        result = validate_callback_attribute("optname", {"recipe": "filename"})
        assert result == RecipeCallback(recipe="filename")
        assert not result.is_inline

    def test_none_means_no_override(self) -> None:
        assert validate_callback_attribute("optname", None) is None

    def test_normalized_value_passes_through(self) -> None:
        cb = EvalCallback(eval="deploy/x.rb")
        assert validate_callback_attribute("optname", cb) is cb

    def test_rejects_unknown_key(self) -> None:
        with pytest.raises(CallbackValidationError, match="unsupported key"):
            validate_callback_attribute("optname", {"fail": "me"})

    def test_rejects_more_than_one_key(self) -> None:
        with pytest.raises(CallbackValidationError, match="exactly one key"):
            validate_callback_attribute("optname", {"recipe": "r", "eval": "code"})

    def test_rejects_empty_mapping(self) -> None:
        with pytest.raises(CallbackValidationError, match="exactly one key"):
            validate_callback_attribute("optname", {})

    def test_rejects_non_string_target(self) -> None:
        with pytest.raises(CallbackValidationError, match="must be a string"):
            validate_callback_attribute("optname", {"eval": 42})

    @pytest.mark.parametrize("value", ["ucanhaz fail", 42, ["eval", "x"], True])
    def test_rejects_other_kinds(self, value: Any) -> None:
        with pytest.raises(CallbackValidationError) as exc_info:
            validate_callback_attribute("optname", value)
        assert exc_info.value.attribute == "optname"
        assert exc_info.value.value == value

    def test_error_names_attribute(self) -> None:
        with pytest.raises(CallbackValidationError, match="'before_symlink'"):
            validate_callback_attribute("before_symlink", "nope")

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_callback_attribute("optname", {"fail": "me"})


class TestCallbackModels:
    def test_as_mapping(self) -> None:
        assert EvalCallback(eval="foo").as_mapping() == {"eval": "foo"}
        assert RecipeCallback(recipe=_noop).as_mapping() == {"recipe": _noop}

    def test_frozen(self) -> None:
        cb = EvalCallback(eval="foo")
        with pytest.raises(ValidationError, match="frozen"):
            cb.eval = "bar"

    def test_default_callback(self) -> None:
        assert default_callback("before_restart") == EvalCallback(eval="deploy/before_restart.rb")


@pytest.mark.parametrize("name", CALLBACK_ATTRIBUTES)
class TestCallbackAttributes:
    def test_default(self, resource: DeployResource, name: str) -> None:
        assert getattr(resource, name).as_mapping() == {"eval": f"deploy/{name}.rb"}

    def test_eval_mapping(self, resource: DeployResource, name: str) -> None:
        setattr(resource, name, {"eval": "foo"})
        assert getattr(resource, name) == EvalCallback(eval="foo")
        assert getattr(resource, name).as_mapping() == {"eval": "foo"}

    def test_recipe_mapping(self, resource: DeployResource, name: str) -> None:
        resource.set(name, {"recipe": "app::hook"})
        assert resource.get(name) == RecipeCallback(recipe="app::hook")

    def test_inline_callable(self, resource: DeployResource, name: str) -> None:
        hook = lambda: None  # noqa: E731
        setattr(resource, name, hook)
        assert getattr(resource, name).as_mapping() == {"recipe": hook}

    def test_none_restores_default(self, resource: DeployResource, name: str) -> None:
        setattr(resource, name, {"eval": "foo"})
        setattr(resource, name, None)
        assert getattr(resource, name) == default_callback(name)

    @pytest.mark.parametrize(
        "value",
        [{"fail": "x"}, {"recipe": "r", "eval": "e"}, {"eval": 42}, "not a valid shape"],
    )
    def test_rejected_value_keeps_previous(
        self, resource: DeployResource, name: str, value: Any
    ) -> None:
        setattr(resource, name, {"eval": "kept.rb"})
        with pytest.raises(CallbackValidationError) as exc_info:
            setattr(resource, name, value)
        assert exc_info.value.attribute == name
        assert getattr(resource, name) == EvalCallback(eval="kept.rb")

    def test_at_construction(self, name: str) -> None:
        r = DeployResource("/srv/app", **{name: {"recipe": "app::hook"}})
        assert getattr(r, name) == RecipeCallback(recipe="app::hook")
