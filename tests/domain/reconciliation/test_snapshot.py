from __future__ import annotations

from pathlib import Path

from pkgsync.domain.model import InventoryEntry
from pkgsync.domain.reconciliation import InventorySnapshot, build_snapshot
from tests.helpers.registry import make_descriptor


def test_build_snapshot_keeps_inventory_order() -> None:
    snapshot = build_snapshot(
        [
            make_descriptor("zeta/z", "/vendor/zeta/z"),
            make_descriptor("alpha/a", "/vendor/alpha/a"),
        ]
    )

    assert list(snapshot) == ["zeta/z", "alpha/a"]
    assert list(snapshot.entries()) == [
        InventoryEntry(name="zeta/z", install_path=Path("/vendor/zeta/z")),
        InventoryEntry(name="alpha/a", install_path=Path("/vendor/alpha/a")),
    ]


def test_build_snapshot_drops_metapackages() -> None:
    snapshot = build_snapshot(
        [
            make_descriptor("acme/meta", None),
            make_descriptor("acme/foo", "/vendor/acme/foo"),
        ]
    )

    assert dict(snapshot) == {"acme/foo": Path("/vendor/acme/foo")}
    assert "acme/meta" not in snapshot


def test_build_snapshot_resolves_aliases_to_real_package() -> None:
    real = make_descriptor("acme/foo", "/vendor/acme/foo")
    alias = make_descriptor("acme/foo-alias", None, alias_of=real)

    snapshot = build_snapshot([alias])

    assert dict(snapshot) == {"acme/foo": Path("/vendor/acme/foo")}


def test_build_snapshot_follows_alias_chains() -> None:
    real = make_descriptor("acme/foo", "/vendor/acme/foo")
    alias = make_descriptor("acme/foo-1.x", None, alias_of=real)
    alias_of_alias = make_descriptor("acme/foo-dev", None, alias_of=alias)

    assert alias_of_alias.resolve() is real
    assert list(build_snapshot([alias_of_alias])) == ["acme/foo"]


def test_alias_of_metapackage_is_dropped() -> None:
    meta = make_descriptor("acme/meta", None)

    assert len(build_snapshot([make_descriptor("acme/meta-alias", None, alias_of=meta)])) == 0


def test_duplicate_entries_keep_first_position() -> None:
    real = make_descriptor("acme/foo", "/vendor/acme/foo")
    snapshot = build_snapshot(
        [
            real,
            make_descriptor("acme/bar", "/vendor/acme/bar"),
            make_descriptor("acme/foo-alias", None, alias_of=real),
        ]
    )

    assert list(snapshot) == ["acme/foo", "acme/bar"]


def test_snapshot_is_a_read_only_mapping() -> None:
    snapshot = InventorySnapshot({"acme/foo": "/vendor/acme/foo"})  # type: ignore[dict-item]

    assert snapshot["acme/foo"] == Path("/vendor/acme/foo")
    assert len(snapshot) == 1
    assert not hasattr(snapshot, "__setitem__")
