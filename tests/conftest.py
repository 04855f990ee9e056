"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from config_upgrade.core.settings import UpgraderSettings
from config_upgrade.core.upgrader import ConfigurationUpgrader

RESOURCES_DIR = Path(__file__).parent / "resources"


class FakeDescriptor:
    """Hand-written DescriptorSource."""

    def __init__(self, version: int, path: str | None) -> None:
        self._version = version
        self._path = path

    def version(self) -> int:
        return self._version

    def upgrader_definition_path(self) -> str | None:
        return self._path


class FakeLookup:
    """Hand-written TypeLookup over a dict of type name -> descriptor."""

    def __init__(self, descriptors: dict[str, FakeDescriptor]) -> None:
        self._descriptors = descriptors
        self.requested: list[str] = []

    def definition_for(self, type_name: str) -> FakeDescriptor | None:
        self.requested.append(type_name)
        return self._descriptors.get(type_name)


@pytest.fixture
def resources_dir() -> Path:
    return RESOURCES_DIR


@pytest.fixture
def upgrader(resources_dir: Path) -> ConfigurationUpgrader:
    """Upgrader whose definitions resolve against tests/resources."""
    return ConfigurationUpgrader.from_settings(UpgraderSettings(definition_roots=[resources_dir]))


@pytest.fixture
def descriptor():
    """Factory for fake descriptors.

    Usage:
        descriptor(2, "upgrader/TestConnectionConfigurationUpgrader1.yaml")
    """
    return FakeDescriptor


@pytest.fixture
def lookup():
    """Factory for fake type lookups.

    Usage:
        lookup({"type1": descriptor(2, "upgrader/x.yaml")})
    """
    return FakeLookup


@pytest.fixture
def tmp_definition_dir(tmp_path: Path) -> Path:
    """Temporary directory for upgrade definition files."""
    return tmp_path / "definitions"


@pytest.fixture
def write_definition(tmp_definition_dir: Path):
    """Helper to write definition files into the temp directory.

    Usage:
        write_definition("type1.yaml", "upgrades: []")
    """

    def _write(relative_path: str, content: str) -> Path:
        file_path = tmp_definition_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
