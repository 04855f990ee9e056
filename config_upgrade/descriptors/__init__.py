"""Descriptor capabilities and the adapters that normalize them."""

from __future__ import annotations

from config_upgrade.descriptors.adapters import (
    DescriptorAdapter,
    DirectDescriptor,
    LookupByType,
    TypeDescriptor,
)
from config_upgrade.descriptors.protocol import DescriptorSource, TypeLookup

__all__ = [
    "DescriptorSource",
    "TypeLookup",
    "TypeDescriptor",
    "DescriptorAdapter",
    "DirectDescriptor",
    "LookupByType",
]
