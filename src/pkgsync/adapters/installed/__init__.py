"""Public interface for the installed-packages manifest adapter."""

from __future__ import annotations

from .reader import InstalledManifestSource, load_manifest, parse_descriptor
from .schema import InstalledManifest, InstalledPackagePayload

__all__ = [
    "InstalledManifest",
    "InstalledManifestSource",
    "InstalledPackagePayload",
    "load_manifest",
    "parse_descriptor",
]
