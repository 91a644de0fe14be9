"""Public domain model surface."""

from __future__ import annotations

from pkgsync.domain.model.enums import PACKAGE_ERROR_STATES, PackageState
from pkgsync.domain.model.package import InventoryEntry, PackageDescriptor, PackageRecord

__all__ = [
    "PACKAGE_ERROR_STATES",
    "InventoryEntry",
    "PackageDescriptor",
    "PackageRecord",
    "PackageState",
]
