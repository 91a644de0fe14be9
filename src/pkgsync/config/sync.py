"""Settings for one registry synchronisation run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

from pkgsync.domain.reconciliation import DEFAULT_INSTALLER_NAME

from .env import env_flag, env_path, optional_env_var

DEFAULT_MANIFEST_PATH: Final[Path] = Path("vendor") / "installed.json"
DEFAULT_BUILD_EXECUTABLE: Final[Path] = Path("vendor") / "bin" / "pkgsync-build"


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Where to find the inventory and build step, and which installer tag we own."""

    root_dir: Path
    installed_manifest: Path
    build_executable: Path
    installer: str = DEFAULT_INSTALLER_NAME
    run_build: bool = True

    def with_overrides(
        self,
        *,
        installed_manifest: Path | None = None,
        installer: str | None = None,
        run_build: bool | None = None,
    ) -> SyncConfig:
        return replace(
            self,
            installed_manifest=installed_manifest or self.installed_manifest,
            installer=installer or self.installer,
            run_build=self.run_build if run_build is None else run_build,
        )


def get_sync_config(*, root_dir: Path | None = None) -> SyncConfig:
    resolved_root = (
        root_dir or env_path("PKGSYNC_ROOT_DIR") or Path.cwd()
    ).expanduser().resolve()
    return SyncConfig(
        root_dir=resolved_root,
        installed_manifest=(
            env_path("PKGSYNC_INSTALLED_MANIFEST", base_dir=resolved_root)
            or resolved_root / DEFAULT_MANIFEST_PATH
        ),
        build_executable=(
            env_path("PKGSYNC_BUILD_EXECUTABLE", base_dir=resolved_root)
            or resolved_root / DEFAULT_BUILD_EXECUTABLE
        ),
        installer=optional_env_var("PKGSYNC_INSTALLER") or DEFAULT_INSTALLER_NAME,
        run_build=env_flag("PKGSYNC_RUN_BUILD", default=True),
    )
