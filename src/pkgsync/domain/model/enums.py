"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PackageState(StrEnum):
    """Load state the registry assigns to a package record."""

    ENABLED = "enabled"
    NOT_FOUND = "not-found"
    NOT_LOADABLE = "not-loadable"


PACKAGE_ERROR_STATES: tuple[PackageState, ...] = (
    PackageState.NOT_FOUND,
    PackageState.NOT_LOADABLE,
)
