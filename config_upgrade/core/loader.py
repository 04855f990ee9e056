"""Upgrade definition loading.

Reads an upgrader YAML document and validates it into an
UpgradeDefinition. Relative paths are searched in the configured
definition roots, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import ValidationError

from config_upgrade.core.exceptions import DefinitionMalformedError, DefinitionNotFoundError
from config_upgrade.definition.model import UpgradeDefinition, describe_errors

logger = logging.getLogger(__name__)


class DefinitionLoader:
    """Loads upgrade definitions from YAML files.

    Args:
        roots: Directories searched for relative definition paths.
        encoding: Text encoding of definition files.
    """

    def __init__(
        self,
        roots: Sequence[Path | str] | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._roots = [Path(r) for r in roots] if roots is not None else [Path.cwd()]
        self._encoding = encoding

    @property
    def roots(self) -> list[Path]:
        return list(self._roots)

    def locate(self, path: str) -> Path | None:
        """Return the file a definition path refers to, or None."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate if candidate.is_file() else None
        for root in self._roots:
            resolved = root / candidate
            if resolved.is_file():
                return resolved
        return None

    def load(self, path: str | None) -> UpgradeDefinition:
        """Load and validate the definition at ``path``.

        Raises:
            DefinitionNotFoundError: If the path is empty, absent or unreadable.
            DefinitionMalformedError: If the content is not a valid definition.
        """
        if not path:
            raise DefinitionNotFoundError(path, "no upgrader definition declared")

        file_path = self.locate(path)
        if file_path is None:
            raise DefinitionNotFoundError(path)

        try:
            text = file_path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DefinitionNotFoundError(path, str(e)) from e

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DefinitionMalformedError(path, f"YAML parse error: {e}") from e

        if not isinstance(document, dict):
            raise DefinitionMalformedError(path, "document must be a mapping")

        try:
            definition = UpgradeDefinition.model_validate(document)
        except ValidationError as e:
            raise DefinitionMalformedError(path, describe_errors(e)) from e

        logger.debug(
            "Loaded upgrade definition %s from %s with versions %s",
            path,
            file_path,
            definition.versions,
        )
        return definition
