"""Definition layer - validated upgrader documents."""

from __future__ import annotations

from config_upgrade.definition.model import (
    RemoveConfigsAction,
    RenameConfigAction,
    ReplaceConfigAction,
    SetConfigAction,
    UpgradeAction,
    UpgradeDefinition,
    UpgradeStep,
)

__all__ = [
    "UpgradeDefinition",
    "UpgradeStep",
    "UpgradeAction",
    "SetConfigAction",
    "ReplaceConfigAction",
    "RenameConfigAction",
    "RemoveConfigsAction",
]
