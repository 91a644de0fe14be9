"""SQLAlchemy adapter package for the package registry."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, package_table
from .registry import SqlAlchemyPackageRegistry, probe_install_path
from .unit_of_work import (
    SqlAlchemyUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyPackageRegistry",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "package_table",
    "probe_install_path",
    "shutdown",
    "startup",
]
