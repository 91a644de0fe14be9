"""Domain error definitions."""

from __future__ import annotations


class PkgSyncError(RuntimeError):
    """Base class for errors raised by the package synchronisation domain."""


class InstallError(PkgSyncError):
    """Raised when the registry rejects a package installation."""


class DuplicatePackageError(InstallError):
    """Raised when a package with the same name is already registered."""


class InvalidInstallPathError(InstallError):
    """Raised when an install path is relative, missing or not a directory."""


class PackageNotFoundError(PkgSyncError):
    """Raised when a package name has no record in the registry."""


class SnapshotError(PkgSyncError):
    """Raised when the dependency manager's inventory cannot be read."""
