"""config-upgrade - versioned configuration upgrade engine."""

from __future__ import annotations

from config_upgrade.core.configuration import Config, Configuration, Issue
from config_upgrade.core.enums import ActionKind, UpgradeErrorCode
from config_upgrade.core.exceptions import (
    ConfigUpgradeError,
    DefinitionError,
    DefinitionMalformedError,
    DefinitionNotFoundError,
    UpgradeStepError,
)
from config_upgrade.core.executor import StepExecutor
from config_upgrade.core.loader import DefinitionLoader
from config_upgrade.core.registry import DefinitionRegistry
from config_upgrade.core.settings import UpgraderSettings
from config_upgrade.core.upgrader import ConfigurationUpgrader
from config_upgrade.definition.model import UpgradeDefinition, UpgradeStep
from config_upgrade.descriptors.adapters import DirectDescriptor, LookupByType, TypeDescriptor
from config_upgrade.descriptors.protocol import DescriptorSource, TypeLookup

__all__ = [
    # Configuration
    "Config",
    "Configuration",
    "Issue",
    # Settings
    "UpgraderSettings",
    # Upgrader
    "ConfigurationUpgrader",
    # Definitions
    "DefinitionLoader",
    "DefinitionRegistry",
    "UpgradeDefinition",
    "UpgradeStep",
    # Execution
    "StepExecutor",
    # Descriptors
    "DescriptorSource",
    "TypeLookup",
    "TypeDescriptor",
    "DirectDescriptor",
    "LookupByType",
    # Enums
    "ActionKind",
    "UpgradeErrorCode",
    # Exceptions
    "ConfigUpgradeError",
    "DefinitionError",
    "DefinitionNotFoundError",
    "DefinitionMalformedError",
    "UpgradeStepError",
]
