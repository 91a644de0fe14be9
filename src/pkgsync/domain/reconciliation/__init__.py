"""Reconciliation core keeping the package registry in step with the inventory.

Flow of one run:
1) build an inventory snapshot from the dependency manager's package list
2) remove owned packages that vanished from disk and from the inventory
3) install new packages and reinstall owned packages whose path changed
4) report registry records that failed to load
"""

from __future__ import annotations

from .engine import DEFAULT_INSTALLER_NAME, Reconciler
from .plan import (
    ActionKind,
    InstallAction,
    PackageFailure,
    ReconciliationAction,
    ReconciliationResult,
    ReinstallAction,
    RemoveAction,
    SkipAction,
    SkipReason,
)
from .report import (
    ErrorDisplayPolicy,
    LoadErrorReporter,
    PackageWarning,
    all_errors,
    first_error,
    format_package_warning,
)
from .snapshot import InventorySnapshot, build_snapshot

__all__ = [
    "DEFAULT_INSTALLER_NAME",
    "ActionKind",
    "ErrorDisplayPolicy",
    "InstallAction",
    "InventorySnapshot",
    "LoadErrorReporter",
    "PackageFailure",
    "PackageWarning",
    "ReconciliationAction",
    "ReconciliationResult",
    "Reconciler",
    "ReinstallAction",
    "RemoveAction",
    "SkipAction",
    "SkipReason",
    "all_errors",
    "build_snapshot",
    "first_error",
    "format_package_warning",
]
