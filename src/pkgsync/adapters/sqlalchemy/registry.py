"""Package registry backed by a SQLAlchemy session."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select

from pkgsync.adapters.sqlalchemy.mappings import package_table
from pkgsync.domain.errors import (
    DuplicatePackageError,
    InvalidInstallPathError,
    PackageNotFoundError,
)
from pkgsync.domain.model import PackageRecord, PackageState

if TYPE_CHECKING:
    from sqlalchemy import Row
    from sqlalchemy.orm import Session

    from pkgsync.domain.ports.registry import PackagePredicate


def probe_install_path(install_path: Path) -> tuple[PackageState, tuple[Exception, ...]]:
    """Derive a record's load state from what is on disk at ``install_path``."""

    if not install_path.exists():
        return PackageState.NOT_FOUND, (
            FileNotFoundError(f"The directory {install_path} does not exist."),
        )
    if not install_path.is_dir():
        return PackageState.NOT_LOADABLE, (
            NotADirectoryError(f"The path {install_path} is not a directory."),
        )
    return PackageState.ENABLED, ()


class SqlAlchemyPackageRegistry:
    """Store package records in the ``package`` table.

    Load state is not persisted; it is derived from the install path whenever a
    record is read. Predicates are evaluated in Python over rows in registration
    order.
    """

    def __init__(self, session: Session, root_dir: Path) -> None:
        self.session = session
        self._root_dir = root_dir

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def find_packages(self, predicate: PackagePredicate) -> list[PackageRecord]:
        stmt = select(package_table).order_by(package_table.c.id)
        records = (self._to_record(row) for row in self.session.execute(stmt))
        return [record for record in records if predicate(record)]

    def has_package(self, name: str) -> bool:
        stmt = select(package_table.c.id).where(package_table.c.name == name).limit(1)
        return self.session.execute(stmt).scalar_one_or_none() is not None

    def get_package(self, name: str) -> PackageRecord:
        stmt = select(package_table).where(package_table.c.name == name)
        row = self.session.execute(stmt).one_or_none()
        if row is None:
            raise PackageNotFoundError(f'The package "{name}" is not installed.')
        return self._to_record(row)

    def install_package(self, install_path: Path, name: str, installer: str) -> PackageRecord:
        path = Path(install_path)
        if not path.is_absolute():
            raise InvalidInstallPathError(f"The install path {path} must be absolute.")
        if not path.is_dir():
            raise InvalidInstallPathError(f"The directory {path} does not exist.")
        if self.has_package(name):
            raise DuplicatePackageError(f'A package named "{name}" is already installed.')

        self.session.execute(
            insert(package_table).values(name=name, install_path=str(path), installer=installer)
        )
        return self.get_package(name)

    def remove_package(self, name: str) -> None:
        self.session.execute(delete(package_table).where(package_table.c.name == name))

    @staticmethod
    def _to_record(row: Row[tuple[object, ...]]) -> PackageRecord:
        mapping = row._mapping  # noqa: SLF001
        install_path = Path(str(mapping["install_path"]))
        state, load_errors = probe_install_path(install_path)
        return PackageRecord(
            name=str(mapping["name"]),
            install_path=install_path,
            installer=str(mapping["installer"]),
            state=state,
            load_errors=load_errors,
        )


if TYPE_CHECKING:
    from typing import cast

    from pkgsync.domain.ports.registry import PackageRegistry

    _session_stub = cast("Session", object())
    _registry_check: PackageRegistry = SqlAlchemyPackageRegistry(_session_stub, Path())
