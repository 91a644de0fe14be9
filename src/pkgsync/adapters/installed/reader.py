"""Read the installed-packages manifest into package descriptors."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pkgsync.domain.errors import SnapshotError
from pkgsync.domain.model import PackageDescriptor

from .schema import InstalledManifest, InstalledPackagePayload

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_descriptor(payload: InstalledPackagePayload, *, base_dir: Path) -> PackageDescriptor:
    """Translate one manifest entry, resolving its install path against ``base_dir``."""

    install_path: Path | None = None
    if payload.install_path is not None:
        install_path = Path(payload.install_path)
        if not install_path.is_absolute():
            install_path = (base_dir / install_path).resolve()

    alias_of = (
        parse_descriptor(payload.alias_of, base_dir=base_dir)
        if payload.alias_of is not None
        else None
    )
    return PackageDescriptor(name=payload.name, install_path=install_path, alias_of=alias_of)


def load_manifest(path: Path) -> InstalledManifest:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Could not read installed packages from {path}: {exc}") from exc
    try:
        return InstalledManifest.model_validate_json(raw)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid installed packages manifest {path}: {exc}") from exc


class InstalledManifestSource:
    """``InstalledPackageSource`` backed by a manifest file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __call__(self) -> Sequence[PackageDescriptor]:
        manifest = load_manifest(self.path)
        base_dir = self.path.resolve().parent
        return [parse_descriptor(payload, base_dir=base_dir) for payload in manifest.packages]


if TYPE_CHECKING:
    from pkgsync.domain.ports.inventory import InstalledPackageSource

    _source_check: InstalledPackageSource = InstalledManifestSource(Path("installed.json"))
