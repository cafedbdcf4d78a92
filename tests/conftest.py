"""Shared fixtures for arcdb page generation tests."""

from __future__ import annotations

import json
import typing as typ

import pytest

from arcdb_pages.catalog import Catalog
from arcdb_pages.config import SiteConfig
from arcdb_pages.context import GenerationContext

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

SAMPLE_RECORDS: list[dict[str, typ.Any]] = [
    {"Name": "Scrap Metal", "Rarity": "Common", "Sell Price": 10},
    {"Name": "Pulse Rifle Mk.II", "Rarity": "Rare", "Stackable": False},
    {"Rarity": "Uncommon", "Notes": "Dropped by <ARC> drones & \"Snitches\""},
]


@pytest.fixture
def write_catalog(
    tmp_path: Path,
) -> cabc.Callable[[typ.Any], Path]:
    """Return a helper that writes JSON-encodable data to ``data.json``."""

    def _write(records: typ.Any, *, name: str = "data.json") -> Path:
        path = tmp_path / "public" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_catalog() -> Catalog:
    """Return a three-item catalog with a missing name and markup in values."""
    return Catalog.from_records(SAMPLE_RECORDS)


@pytest.fixture
def context(tmp_path: Path, sample_catalog: Catalog) -> GenerationContext:
    """Return a generation context rooted in a per-test ``public`` directory."""
    return GenerationContext(
        catalog=sample_catalog, output_root=tmp_path / "public", site=SiteConfig()
    )
