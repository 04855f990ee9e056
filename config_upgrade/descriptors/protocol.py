"""Descriptor capability protocols.

Callers hand the upgrader one of two capabilities: a descriptor for the
exact type being upgraded, or a lookup that finds the descriptor by type
name. Both expose the version a type currently declares and where its
upgrade definition lives.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DescriptorSource(Protocol):
    """Declared version and upgrade definition path of one type."""

    def version(self) -> int:
        """Version the running software declares for the type."""
        ...

    def upgrader_definition_path(self) -> str | None:
        """Path of the type's upgrade definition, if it has one."""
        ...


@runtime_checkable
class TypeLookup(Protocol):
    """Finds the descriptor of a type by its name."""

    def definition_for(self, type_name: str) -> DescriptorSource | None:
        """Return the descriptor for ``type_name``, or None if unknown."""
        ...
