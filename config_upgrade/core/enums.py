"""Stable identifiers used in upgrade diagnostics."""

from __future__ import annotations

from enum import Enum


class UpgradeErrorCode(str, Enum):
    """Error codes carried by upgrade issues.

    Values are stable; consumers may match on them.
    """

    DEFINITION_MALFORMED = "CONTAINER_0900"
    UPGRADE_STEP_FAILED = "CONTAINER_0901"
    VERSION_EXCEEDS_SUPPORTED = "CONTAINER_0902"
    TYPE_NOT_FOUND = "CONTAINER_0903"
    DEFINITION_NOT_FOUND = "YAML_UPGRADER_07"


class ActionKind(str, Enum):
    """Action names accepted in an upgrade definition document."""

    SET_CONFIG = "setConfig"
    REPLACE_CONFIG = "replaceConfig"
    RENAME_CONFIG = "renameConfig"
    REMOVE_CONFIGS = "removeConfigs"
