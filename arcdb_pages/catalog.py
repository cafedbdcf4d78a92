"""Load the item catalog that both generation passes project into files.

The catalog is a JSON array of objects maintained outside this package
(normally ``public/data.json``). Each object becomes an :class:`Item`, an
ordered mapping with no fixed schema beyond an optional ``Name`` field. The
loader reads the whole file once and fails fast with :class:`CatalogError`
before any output is written, so a broken data file never leaves a
half-generated site behind.

Examples
--------
>>> from pathlib import Path
>>> from arcdb_pages.catalog import load_catalog
>>> catalog = load_catalog(Path("public/data.json"))  # doctest: +SKIP
>>> [item.slug for item in catalog][:1]  # doctest: +SKIP
['scrap-metal']
>>> Item({"Rarity": "Common"}).name
'item'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

import msgspec

from ._constants import FALLBACK_ITEM_NAME
from .text import slugify, to_text

if typ.TYPE_CHECKING:
    from pathlib import Path

NAME_FIELD = "Name"


class CatalogError(ValueError):
    """Raised when the catalog file cannot be read or decoded."""


@dc.dataclass(slots=True)
class Item:
    """One catalog record rendered as one item page.

    Attributes
    ----------
    fields : dict[str, typing.Any]
        Field names mapped to their decoded JSON values, in source order.
    """

    fields: dict[str, typ.Any]

    @property
    def name(self) -> str:
        """Return the display name, falling back to ``"item"`` when unset."""
        value = self.fields.get(NAME_FIELD)
        if not value:
            return FALLBACK_ITEM_NAME
        return to_text(value)

    @property
    def slug(self) -> str:
        """Return the URL-safe identifier derived from :attr:`name`."""
        return slugify(self.name)

    def rows(self) -> list[tuple[str, typ.Any]]:
        """Return ``(field, value)`` pairs in the record's field order."""
        return list(self.fields.items())


@dc.dataclass(slots=True)
class Catalog:
    """Ordered sequence of items loaded from a single data file."""

    items: list[Item] = dc.field(default_factory=list)

    @classmethod
    def from_records(
        cls, records: cabc.Iterable[cabc.Mapping[str, typ.Any]]
    ) -> Catalog:
        """Build a catalog from already-decoded mappings, preserving order."""
        return cls(items=[Item(dict(record)) for record in records])

    def __iter__(self) -> cabc.Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def slugs(self) -> list[str]:
        """Return the distinct item slugs in first-seen order."""
        return list(dict.fromkeys(item.slug for item in self.items))

    def slug_collisions(self) -> dict[str, list[str]]:
        """Return slugs shared by more than one item, mapped to their names."""
        names_by_slug: dict[str, list[str]] = {}
        for item in self.items:
            names_by_slug.setdefault(item.slug, []).append(item.name)
        return {
            slug: names for slug, names in names_by_slug.items() if len(names) > 1
        }


def load_catalog(path: Path) -> Catalog:
    """Read and decode the catalog JSON file.

    Parameters
    ----------
    path : Path
        Location of the JSON array of item objects.

    Returns
    -------
    Catalog
        Items in file order, each keeping its fields in file order.

    Raises
    ------
    CatalogError
        If the file is missing or unreadable, is not valid JSON, or is not an
        array of objects. The message names the path and the reason.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"Failed to read catalog '{path}': {exc.strerror or exc}"
        raise CatalogError(msg) from exc
    try:
        records = msgspec.json.decode(raw, type=list[dict[str, typ.Any]])
    except msgspec.MsgspecError as exc:
        msg = f"Failed to parse catalog '{path}': {exc}"
        raise CatalogError(msg) from exc
    return Catalog.from_records(records)


__all__ = ["NAME_FIELD", "Catalog", "CatalogError", "Item", "load_catalog"]
