from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from pkgsync.adapters.sqlalchemy import create_all_tables, shutdown, startup
from pkgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
    tmp_path: Path,
) -> Iterator[Callable[[], SqlAlchemyUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(root_dir=tmp_path)

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    """``<tmp>/vendor`` holding an ``acme/foo`` and an ``acme/bar`` package directory."""

    vendor = tmp_path / "vendor"
    for name in ("acme/foo", "acme/bar"):
        (vendor / name).mkdir(parents=True)
    return vendor
