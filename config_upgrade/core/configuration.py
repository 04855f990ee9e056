"""Configuration value objects and upgrade diagnostics.

A Configuration is owned by the caller. The upgrade engine mutates it in
place and assumes exclusive access for the duration of one call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from config_upgrade.core.enums import UpgradeErrorCode


@dataclass(frozen=True)
class Config:
    """One named configuration setting."""

    name: str
    value: Any = None


@dataclass
class Configuration:
    """A typed, versioned, ordered bag of configs for one connection or stage.

    Args:
        type: Name of the connection/stage type the configs belong to.
        version: Schema version the configs were written with.
        configs: Ordered configs; names are unique.
    """

    type: str
    version: int
    configs: list[Config] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.version < 0:
            raise ValueError(f"Configuration version must be >= 0, got {self.version}")
        names = [c.name for c in self.configs]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate config names in configuration of type '{self.type}'")
        # Never alias the caller's list
        self.configs = list(self.configs)

    def get(self, name: str) -> Config | None:
        """Return the config with the given name, or None."""
        for config in self.configs:
            if config.name == name:
                return config
        return None

    def as_dict(self) -> dict[str, Any]:
        """Config values keyed by name, in order."""
        return {c.name: c.value for c in self.configs}


@dataclass(frozen=True)
class Issue:
    """A non-fatal upgrade diagnostic appended to a caller-owned list."""

    error_code: UpgradeErrorCode
    message: str
    config_type: str
    instance_id: str | None = None
    version: int | None = None
    path: str | None = None

    def __str__(self) -> str:
        where = self.config_type if self.instance_id is None else f"{self.instance_id} ({self.config_type})"
        return f"{self.error_code.value} - {where}: {self.message}"
