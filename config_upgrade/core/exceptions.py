"""config-upgrade exception hierarchy.

Loader, registry and executor raise these internally. The
ConfigurationUpgrader converts every one of them into an Issue, so none
of them escape an upgrade call.
"""

from __future__ import annotations


class ConfigUpgradeError(Exception):
    """Base exception for all config-upgrade errors."""


# --- Definition ---


class DefinitionError(ConfigUpgradeError):
    """Base for upgrade definition errors."""

    def __init__(self, path: str | None, message: str) -> None:
        self.path = path
        super().__init__(message)


class DefinitionNotFoundError(DefinitionError):
    """Raised when an upgrade definition cannot be located or read."""

    def __init__(self, path: str | None, detail: str | None = None) -> None:
        message = f"Upgrade definition not found: '{path}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(path, message)


class DefinitionMalformedError(DefinitionError):
    """Raised when an upgrade definition cannot be parsed into ordered steps."""

    def __init__(self, path: str | None, detail: str) -> None:
        self.detail = detail
        super().__init__(path, f"Invalid upgrade definition '{path}': {detail}")


# --- Execution ---


class UpgradeStepError(ConfigUpgradeError):
    """Raised when an action of an upgrade step cannot be applied."""

    def __init__(self, to_version: int, detail: str) -> None:
        self.to_version = to_version
        self.detail = detail
        super().__init__(f"Upgrade step to version {to_version} failed: {detail}")
