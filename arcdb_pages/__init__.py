"""Utilities for generating the arcdb item pages and sitemap.

This package exposes the CLI entry points used by the site build to render one
static HTML page per catalog item and the sitemap that lists them.

Exports
-------
- ``app``: Cyclopts application with the ``items``, ``sitemap`` and ``build``
  subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_pages`` / ``generate_sitemap``: library entry points taking a
  loaded :class:`~arcdb_pages.catalog.Catalog`.

Examples
--------
>>> from arcdb_pages import main
>>> main()  # doctest: +SKIP
>>> from arcdb_pages import slugify
>>> slugify("Scrap Metal")
'scrap-metal'
"""

from __future__ import annotations

from .catalog import Catalog, CatalogError, Item, load_catalog
from .cli import app, main
from .generator import generate_pages
from .sitemap import generate_sitemap
from .text import escape_html, slugify

__all__ = [
    "Catalog",
    "CatalogError",
    "Item",
    "app",
    "escape_html",
    "generate_pages",
    "generate_sitemap",
    "load_catalog",
    "main",
    "slugify",
]
