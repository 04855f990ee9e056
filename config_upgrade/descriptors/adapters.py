"""Descriptor adapters.

DirectDescriptor and LookupByType normalize both capability shapes to a
TypeDescriptor. Everything downstream of them only sees TypeDescriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config_upgrade.core.configuration import Configuration
from config_upgrade.descriptors.protocol import DescriptorSource, TypeLookup


@dataclass(frozen=True)
class TypeDescriptor:
    """Normalized (declared version, upgrade definition path) pair.

    Also satisfies DescriptorSource, so a TypeLookup may return it as is.
    """

    declared_version: int
    upgrader_path: str | None = None

    @classmethod
    def of(cls, source: DescriptorSource) -> TypeDescriptor:
        if isinstance(source, TypeDescriptor):
            return source
        return cls(source.version(), source.upgrader_definition_path())

    def version(self) -> int:
        return self.declared_version

    def upgrader_definition_path(self) -> str | None:
        return self.upgrader_path


class DescriptorAdapter(Protocol):
    """Resolves the TypeDescriptor that applies to a configuration."""

    def resolve(self, configuration: Configuration) -> TypeDescriptor | None:
        ...


class DirectDescriptor:
    """Adapter over a descriptor of the exact type being upgraded."""

    def __init__(self, source: DescriptorSource) -> None:
        self._source = source

    def resolve(self, configuration: Configuration) -> TypeDescriptor:
        return TypeDescriptor.of(self._source)


class LookupByType:
    """Adapter that looks the descriptor up by the configuration's type."""

    def __init__(self, lookup: TypeLookup) -> None:
        self._lookup = lookup

    def resolve(self, configuration: Configuration) -> TypeDescriptor | None:
        source = self._lookup.definition_for(configuration.type)
        if source is None:
            return None
        return TypeDescriptor.of(source)
