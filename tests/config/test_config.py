from __future__ import annotations

from pathlib import Path

import pytest

from pkgsync.config import (
    ConfigurationError,
    StorageConfig,
    env_flag,
    get_database_config,
    get_storage_config,
    get_sync_config,
)
from pkgsync.domain.reconciliation import DEFAULT_INSTALLER_NAME


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PKGSYNC_ROOT_DIR",
        "PKGSYNC_INSTALLED_MANIFEST",
        "PKGSYNC_INSTALLER",
        "PKGSYNC_BUILD_EXECUTABLE",
        "PKGSYNC_RUN_BUILD",
        "PKGSYNC_DATA_DIR",
        "DATABASE_URI",
    ):
        monkeypatch.delenv(name, raising=False)


def test_sync_config_defaults_to_vendor_layout(tmp_path: Path) -> None:
    config = get_sync_config(root_dir=tmp_path)

    root = tmp_path.resolve()
    assert config.root_dir == root
    assert config.installed_manifest == root / "vendor" / "installed.json"
    assert config.build_executable == root / "vendor" / "bin" / "pkgsync-build"
    assert config.installer == DEFAULT_INSTALLER_NAME
    assert config.run_build is True


def test_sync_config_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PKGSYNC_ROOT_DIR", str(tmp_path))
    monkeypatch.setenv("PKGSYNC_INSTALLED_MANIFEST", "deps/installed.json")
    monkeypatch.setenv("PKGSYNC_BUILD_EXECUTABLE", "/usr/local/bin/registry-build")
    monkeypatch.setenv("PKGSYNC_INSTALLER", " composer ")
    monkeypatch.setenv("PKGSYNC_RUN_BUILD", "off")

    config = get_sync_config()

    assert config.root_dir == tmp_path.resolve()
    assert config.installed_manifest == tmp_path.resolve() / "deps" / "installed.json"
    assert config.build_executable == Path("/usr/local/bin/registry-build")
    assert config.installer == "composer"
    assert config.run_build is False


def test_with_overrides_keeps_unset_values(tmp_path: Path) -> None:
    config = get_sync_config(root_dir=tmp_path)

    overridden = config.with_overrides(installer="pip")

    assert overridden.installer == "pip"
    assert overridden.installed_manifest == config.installed_manifest
    assert overridden.run_build is True


def test_env_flag_rejects_unknown_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "perhaps")

    with pytest.raises(ConfigurationError, match="EXAMPLE_FLAG"):
        env_flag("EXAMPLE_FLAG")


def test_env_flag_treats_blank_as_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "   ")

    assert env_flag("EXAMPLE_FLAG", default=True) is True


def test_storage_config_respects_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PKGSYNC_DATA_DIR", str(tmp_path / "data"))

    storage = get_storage_config()

    assert storage == StorageConfig(data_dir=tmp_path / "data")
    assert get_database_config(storage=storage).uri == (
        f"sqlite+pysqlite:///{(tmp_path / 'data').resolve() / 'registry.db'}"
    )
    assert (tmp_path / "data").is_dir()


def test_database_uri_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    assert get_database_config().uri == "sqlite+pysqlite:///:memory:"
