"""Parsed upgrade definition models.

An UpgradeDefinition is the validated form of an upgrader YAML document.
All models are frozen: a definition is shared through the registry cache
and never changes once loaded.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from config_upgrade.core.enums import ActionKind


class DefinitionBase(BaseModel):
    """Base model for definition documents."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


def _check_pattern(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"invalid regular expression {value!r}: {e}") from e
    return value


# --- Actions ---


class SetConfigAction(DefinitionBase):
    """Set a config value, adding the config when it is absent."""

    kind: ClassVar[ActionKind] = ActionKind.SET_CONFIG

    name: str = Field(min_length=1)
    value: Any


class ReplaceConfigAction(DefinitionBase):
    """Replace the value of an existing config.

    When ``ifOldValueMatches`` is given, the value is only replaced if the
    current value equals it. Absent configs are left alone.
    """

    kind: ClassVar[ActionKind] = ActionKind.REPLACE_CONFIG

    name: str = Field(min_length=1)
    new_value: Any = Field(alias="newValue")
    if_old_value_matches: Any = Field(default=None, alias="ifOldValueMatches")

    @property
    def conditional(self) -> bool:
        return "if_old_value_matches" in self.model_fields_set


class RenameConfigAction(DefinitionBase):
    """Rename every config whose full name matches a regex."""

    kind: ClassVar[ActionKind] = ActionKind.RENAME_CONFIG

    old_name_pattern: str = Field(min_length=1, alias="oldNamePattern")
    new_name_pattern: str = Field(min_length=1, alias="newNamePattern")

    @field_validator("old_name_pattern")
    @classmethod
    def valid_old_name_pattern(cls, value: str) -> str:
        return _check_pattern(value)


class RemoveConfigsAction(DefinitionBase):
    """Remove every config whose full name matches a regex."""

    kind: ClassVar[ActionKind] = ActionKind.REMOVE_CONFIGS

    name_pattern: str = Field(min_length=1, alias="namePattern")

    @field_validator("name_pattern")
    @classmethod
    def valid_name_pattern(cls, value: str) -> str:
        return _check_pattern(value)


UpgradeAction = Union[SetConfigAction, ReplaceConfigAction, RenameConfigAction, RemoveConfigsAction]

_ACTION_MODELS: dict[str, type[DefinitionBase]] = {
    ActionKind.SET_CONFIG.value: SetConfigAction,
    ActionKind.REPLACE_CONFIG.value: ReplaceConfigAction,
    ActionKind.RENAME_CONFIG.value: RenameConfigAction,
    ActionKind.REMOVE_CONFIGS.value: RemoveConfigsAction,
}


def describe_errors(error: ValidationError) -> str:
    """Flatten a ValidationError into one line of 'location: message' parts."""
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def _parse_action(raw: Any) -> Any:
    """Turn a ``{actionName: {...}}`` entry into its action model."""
    if isinstance(raw, DefinitionBase):
        return raw
    if not isinstance(raw, dict) or len(raw) != 1:
        raise ValueError("each action must be a mapping with exactly one action name")
    name, body = next(iter(raw.items()))
    model = _ACTION_MODELS.get(name)
    if model is None:
        raise ValueError(f"unknown action '{name}', expected one of {sorted(_ACTION_MODELS)}")
    if not isinstance(body, dict):
        raise ValueError(f"action '{name}' must be a mapping")
    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise ValueError(f"action '{name}': {describe_errors(e)}") from None


# --- Steps ---


class UpgradeStep(DefinitionBase):
    """The actions that bring a configuration up to ``to_version``."""

    to_version: PositiveInt = Field(alias="toVersion")
    actions: tuple[UpgradeAction, ...] = ()

    @field_validator("actions", mode="before")
    @classmethod
    def parse_actions(cls, value: Any) -> Any:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise ValueError("actions must be a list")
        return tuple(_parse_action(item) for item in value)


class UpgradeDefinition(DefinitionBase):
    """Ordered upgrade steps for one connection/stage type."""

    upgrader_version: Literal[1] = Field(default=1, alias="upgraderVersion")
    upgrades: tuple[UpgradeStep, ...]

    @field_validator("upgrades")
    @classmethod
    def order_upgrades(cls, value: tuple[UpgradeStep, ...]) -> tuple[UpgradeStep, ...]:
        seen: set[int] = set()
        for step in value:
            if step.to_version in seen:
                raise ValueError(f"duplicate toVersion {step.to_version}")
            seen.add(step.to_version)
        return tuple(sorted(value, key=lambda s: s.to_version))

    def steps_between(self, from_version: int, to_version: int) -> list[UpgradeStep]:
        """Steps with ``from_version < step.to_version <= to_version``, ascending."""
        return [s for s in self.upgrades if from_version < s.to_version <= to_version]

    @property
    def versions(self) -> list[int]:
        return [s.to_version for s in self.upgrades]
