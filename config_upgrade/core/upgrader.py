"""Configuration upgrade coordinator.

ConfigurationUpgrader is the public entry point. It resolves the declared
version and upgrade definition of a configuration's type, skips
configurations that are current, runs the StepExecutor for those that lag,
and reports every failure by appending an Issue to the caller's list.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from config_upgrade.core.configuration import Configuration, Issue
from config_upgrade.core.enums import UpgradeErrorCode
from config_upgrade.core.exceptions import DefinitionMalformedError, DefinitionNotFoundError
from config_upgrade.core.executor import StepExecutor
from config_upgrade.core.loader import DefinitionLoader
from config_upgrade.core.registry import DefinitionRegistry
from config_upgrade.core.settings import UpgraderSettings
from config_upgrade.descriptors.adapters import DescriptorAdapter, DirectDescriptor, LookupByType
from config_upgrade.descriptors.protocol import DescriptorSource, TypeLookup

logger = logging.getLogger(__name__)


class ConfigurationUpgrader:
    """Brings stored configurations up to the version their type declares.

    The upgrader never raises for a missing or malformed definition or for
    a version mismatch; it appends exactly one Issue and leaves the
    configuration unchanged instead. Issue lists are only appended to.

    Args:
        registry: Definition cache shared by all upgrades run through this upgrader.
        executor: Applies the selected steps.
    """

    def __init__(
        self,
        registry: DefinitionRegistry | None = None,
        executor: StepExecutor | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DefinitionRegistry()
        self._executor = executor if executor is not None else StepExecutor()

    @classmethod
    def from_settings(cls, settings: UpgraderSettings) -> ConfigurationUpgrader:
        """Create an upgrader whose loader searches the configured roots."""
        loader = DefinitionLoader(settings.definition_roots, encoding=settings.encoding)
        return cls(DefinitionRegistry(loader))

    @property
    def registry(self) -> DefinitionRegistry:
        return self._registry

    def upgrade_if_necessary(
        self,
        source: DescriptorSource,
        configuration: Configuration,
        instance_id: str | None,
        issues: list[Issue],
    ) -> None:
        """Upgrade using a descriptor of the configuration's exact type."""
        self._upgrade(DirectDescriptor(source), configuration, instance_id, issues)

    def upgrade_if_necessary_by_type(
        self,
        lookup: TypeLookup,
        configuration: Configuration,
        issues: list[Issue],
        instance_id: str | None = None,
    ) -> None:
        """Upgrade using a lookup keyed by the configuration's type name."""
        self._upgrade(LookupByType(lookup), configuration, instance_id, issues)

    def upgrade_all(
        self,
        lookup: TypeLookup,
        configurations: Mapping[str, Configuration],
        issues: list[Issue],
    ) -> None:
        """Upgrade every configuration of a validation pass, keyed by instance id.

        A failing configuration does not stop the others.
        """
        adapter = LookupByType(lookup)
        for instance_id, configuration in configurations.items():
            self._upgrade(adapter, configuration, instance_id, issues)

    def _issue(
        self,
        issues: list[Issue],
        code: UpgradeErrorCode,
        message: str,
        configuration: Configuration,
        instance_id: str | None,
        path: str | None = None,
    ) -> None:
        issue = Issue(
            error_code=code,
            message=message,
            config_type=configuration.type,
            instance_id=instance_id,
            version=configuration.version,
            path=path,
        )
        logger.warning("Configuration upgrade issue: %s", issue)
        issues.append(issue)

    def _upgrade(
        self,
        adapter: DescriptorAdapter,
        configuration: Configuration,
        instance_id: str | None,
        issues: list[Issue],
    ) -> None:
        descriptor = adapter.resolve(configuration)
        if descriptor is None:
            self._issue(
                issues,
                UpgradeErrorCode.TYPE_NOT_FOUND,
                f"No definition found for type '{configuration.type}'",
                configuration,
                instance_id,
            )
            return

        from_version = configuration.version
        to_version = descriptor.declared_version
        if from_version == to_version:
            return
        if from_version > to_version:
            self._issue(
                issues,
                UpgradeErrorCode.VERSION_EXCEEDS_SUPPORTED,
                f"Configuration version {from_version} is newer than supported version {to_version}",
                configuration,
                instance_id,
            )
            return

        path = descriptor.upgrader_path
        if not path:
            self._issue(
                issues,
                UpgradeErrorCode.DEFINITION_NOT_FOUND,
                f"No upgrader definition declared for type '{configuration.type}'",
                configuration,
                instance_id,
                path,
            )
            return

        try:
            definition = self._registry.resolve(path)
        except DefinitionNotFoundError as e:
            self._issue(issues, UpgradeErrorCode.DEFINITION_NOT_FOUND, str(e), configuration, instance_id, path)
            return
        except DefinitionMalformedError as e:
            self._issue(
                issues,
                UpgradeErrorCode.DEFINITION_MALFORMED,
                f"Error while upgrading from version {from_version} to version {to_version}: {e}",
                configuration,
                instance_id,
                path,
            )
            return

        step_issues = self._executor.apply(configuration, definition, from_version, to_version, instance_id)
        for issue in step_issues:
            logger.warning("Configuration upgrade issue: %s", issue)
        issues.extend(step_issues)
        if not step_issues:
            logger.info(
                "Upgraded %s configuration %s from version %d to %d",
                configuration.type,
                instance_id or "",
                from_version,
                to_version,
            )
