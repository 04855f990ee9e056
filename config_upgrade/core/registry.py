"""Definition Registry - loads and caches upgrade definitions by path.

Definitions are treated as static for the lifetime of the registry: an
entry, once loaded, is never invalidated. Failed loads are not cached, so
the next resolve retries.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from config_upgrade.core.loader import DefinitionLoader
from config_upgrade.definition.model import UpgradeDefinition

logger = logging.getLogger(__name__)


class Loader(Protocol):
    """Anything that turns a definition path into an UpgradeDefinition."""

    def load(self, path: str | None) -> UpgradeDefinition:
        ...


class _KeyLock:
    """Per-path lock, dropped once no resolve holds or waits on it."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class DefinitionRegistry:
    """Thread-safe, single-flight cache of upgrade definitions.

    Concurrent first resolves of one path block on a per-path lock so the
    loader runs once; resolves of other paths are not held up by it, and
    resolves of cached paths take no lock at all.

    Args:
        loader: Loader used on cache misses.
    """

    def __init__(self, loader: Loader | None = None) -> None:
        self._loader: Loader = loader if loader is not None else DefinitionLoader()
        self._definitions: dict[str, UpgradeDefinition] = {}
        self._key_locks: dict[str, _KeyLock] = {}
        self._guard = threading.Lock()

    def _acquire_key(self, path: str) -> threading.Lock:
        with self._guard:
            key_lock = self._key_locks.get(path)
            if key_lock is None:
                key_lock = self._key_locks[path] = _KeyLock()
            key_lock.users += 1
            return key_lock.lock

    def _release_key(self, path: str) -> None:
        with self._guard:
            key_lock = self._key_locks[path]
            key_lock.users -= 1
            if key_lock.users == 0:
                del self._key_locks[path]

    def resolve(self, path: str) -> UpgradeDefinition:
        """Return the definition for ``path``, loading it on first use.

        Raises:
            DefinitionNotFoundError: Propagated from the loader.
            DefinitionMalformedError: Propagated from the loader.
        """
        definition = self._definitions.get(path)
        if definition is not None:
            return definition

        lock = self._acquire_key(path)
        try:
            with lock:
                definition = self._definitions.get(path)
                if definition is not None:
                    logger.debug("Upgrade definition %s loaded by another caller", path)
                    return definition
                definition = self._loader.load(path)
                self._definitions[path] = definition
                return definition
        finally:
            self._release_key(path)

    def __contains__(self, path: object) -> bool:
        return path in self._definitions

    def __len__(self) -> int:
        """Number of cached definitions."""
        return len(self._definitions)

    @property
    def in_flight(self) -> int:
        """Number of paths with a resolve currently loading or waiting."""
        with self._guard:
            return len(self._key_locks)

    @property
    def paths(self) -> list[str]:
        """Cached definition paths, sorted alphabetically."""
        return sorted(self._definitions)
