"""Upgrader settings.

UpgraderSettings is a Pydantic model for type-safe engine configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class UpgraderSettings(BaseModel):
    """Settings for locating and reading upgrade definitions."""

    definition_roots: list[Path] = Field(default_factory=lambda: [Path.cwd()])
    encoding: str = "utf-8"
