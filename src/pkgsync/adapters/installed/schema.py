"""Pydantic models describing the installed-packages manifest.

The manifest is a JSON document written by the dependency manager::

    {
        "packages": [
            {"name": "acme/foo", "install-path": "../acme/foo"},
            {"name": "acme/meta", "install-path": null},
            {"name": "acme/foo-alias", "alias-of": {"name": "acme/foo", "install-path": "..."}}
        ]
    }

A bare top-level list of packages is accepted as well. Relative install paths are
relative to the directory holding the manifest.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class InstalledBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class InstalledPackagePayload(InstalledBaseModel):
    name: str = Field(min_length=1)
    install_path: str | None = Field(default=None, alias="install-path")
    alias_of: InstalledPackagePayload | None = Field(default=None, alias="alias-of")

    _normalize_install_path = field_validator("install_path", mode="before")(_blank_to_none)


class InstalledManifest(InstalledBaseModel):
    packages: list[InstalledPackagePayload] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize_bare_list(cls, value: object) -> object:
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            return {"packages": list(cast(Sequence[object], value))}
        return value
