"""Unit tests for Configuration, Config and Issue."""

from __future__ import annotations

import pytest

from config_upgrade.core.configuration import Config, Configuration, Issue
from config_upgrade.core.enums import UpgradeErrorCode


class TestConfiguration:
    def test_defaults(self) -> None:
        config = Configuration("type1", 0)
        assert config.configs == []

    def test_does_not_alias_caller_list(self) -> None:
        configs = [Config("a", 1)]
        config = Configuration("type1", 1, configs)
        config.configs.append(Config("b", 2))
        assert configs == [Config("a", 1)]

    def test_negative_version_rejected(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            Configuration("type1", -1)

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            Configuration("type1", 1, [Config("a", 1), Config("a", 2)])

    def test_get_and_as_dict(self) -> None:
        config = Configuration("type1", 1, [Config("b", 1), Config("a", {"nested": [1]})])
        assert config.get("a") == Config("a", {"nested": [1]})
        assert config.get("missing") is None
        assert list(config.as_dict()) == ["b", "a"]


class TestIssue:
    def test_error_code_is_stable_string(self) -> None:
        issue = Issue(UpgradeErrorCode.DEFINITION_NOT_FOUND, "gone", "type1")
        assert issue.error_code == "YAML_UPGRADER_07"

    def test_str_with_and_without_instance(self) -> None:
        assert str(Issue(UpgradeErrorCode.DEFINITION_MALFORMED, "bad", "type1")) == (
            "CONTAINER_0900 - type1: bad"
        )
        assert str(Issue(UpgradeErrorCode.DEFINITION_MALFORMED, "bad", "type1", "conn1")) == (
            "CONTAINER_0900 - conn1 (type1): bad"
        )
