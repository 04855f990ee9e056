"""Step execution.

Applies the steps of an UpgradeDefinition to a Configuration. Each step
runs against a working copy of the configs and is committed together with
its version bump, so a failing step leaves the configuration at the
version of the last committed step.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Any

from config_upgrade.core.configuration import Config, Configuration, Issue
from config_upgrade.core.enums import ActionKind, UpgradeErrorCode
from config_upgrade.core.exceptions import UpgradeStepError
from config_upgrade.definition.model import (
    RemoveConfigsAction,
    RenameConfigAction,
    ReplaceConfigAction,
    SetConfigAction,
    UpgradeDefinition,
    UpgradeStep,
)

logger = logging.getLogger(__name__)


def _index_of(configs: list[Config], name: str) -> int | None:
    for i, config in enumerate(configs):
        if config.name == name:
            return i
    return None


def _set_config(configs: list[Config], action: SetConfigAction, to_version: int) -> None:
    i = _index_of(configs, action.name)
    if i is None:
        configs.append(Config(action.name, action.value))
    else:
        configs[i] = Config(action.name, action.value)


def _replace_config(configs: list[Config], action: ReplaceConfigAction, to_version: int) -> None:
    i = _index_of(configs, action.name)
    if i is None:
        return
    if action.conditional and configs[i].value != action.if_old_value_matches:
        return
    configs[i] = Config(action.name, action.new_value)


def _rename_config(configs: list[Config], action: RenameConfigAction, to_version: int) -> None:
    pattern = re.compile(action.old_name_pattern)
    renamed: list[Config] = []
    for config in configs:
        match = pattern.fullmatch(config.name)
        if match is None:
            renamed.append(config)
            continue
        try:
            new_name = match.expand(action.new_name_pattern)
        except (re.error, IndexError) as e:
            raise UpgradeStepError(
                to_version, f"cannot rename '{config.name}' with '{action.new_name_pattern}': {e}"
            ) from e
        renamed.append(Config(new_name, config.value))

    seen: set[str] = set()
    for config in renamed:
        if config.name in seen:
            raise UpgradeStepError(
                to_version, f"renaming with '{action.old_name_pattern}' produces duplicate config '{config.name}'"
            )
        seen.add(config.name)
    configs[:] = renamed


def _remove_configs(configs: list[Config], action: RemoveConfigsAction, to_version: int) -> None:
    pattern = re.compile(action.name_pattern)
    configs[:] = [c for c in configs if pattern.fullmatch(c.name) is None]


_ACTION_HANDLERS: dict[ActionKind, Callable[[list[Config], Any, int], None]] = {
    ActionKind.SET_CONFIG: _set_config,
    ActionKind.REPLACE_CONFIG: _replace_config,
    ActionKind.RENAME_CONFIG: _rename_config,
    ActionKind.REMOVE_CONFIGS: _remove_configs,
}


class StepExecutor:
    """Applies upgrade steps to configurations in place."""

    def apply_step(self, configuration: Configuration, step: UpgradeStep) -> None:
        """Apply one step and commit it with its version bump.

        Raises:
            UpgradeStepError: If the step is older than the configuration
                or an action cannot be applied. The configuration is left
                untouched.
        """
        if step.to_version < configuration.version:
            raise UpgradeStepError(
                step.to_version, f"configuration is already at version {configuration.version}"
            )
        working = list(configuration.configs)
        for action in step.actions:
            _ACTION_HANDLERS[action.kind](working, action, step.to_version)

        configuration.configs = working
        configuration.version = step.to_version

    def apply(
        self,
        configuration: Configuration,
        definition: UpgradeDefinition,
        from_version: int,
        to_version: int,
        instance_id: str | None = None,
    ) -> list[Issue]:
        """Upgrade ``configuration`` from ``from_version`` to ``to_version``.

        Returns an empty list on success, otherwise a single issue naming
        the step that failed. Versions without a step are skipped. Steps
        at or below the configuration's current version are never applied
        and the version never moves backwards.
        """
        from_version = max(from_version, configuration.version)
        for step in definition.steps_between(from_version, to_version):
            try:
                self.apply_step(configuration, step)
            except UpgradeStepError as e:
                return [
                    Issue(
                        error_code=UpgradeErrorCode.UPGRADE_STEP_FAILED,
                        message=str(e),
                        config_type=configuration.type,
                        instance_id=instance_id,
                        version=configuration.version,
                    )
                ]
            logger.debug(
                "Upgraded %s configuration %s to version %d",
                configuration.type,
                instance_id or "",
                step.to_version,
            )

        configuration.version = max(configuration.version, to_version)
        return []
