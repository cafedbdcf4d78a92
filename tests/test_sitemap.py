"""Tests for the XML sitemap builder and its agreement with item pages."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from arcdb_pages.catalog import Catalog
from arcdb_pages.config import RouteConfig, SiteConfig
from arcdb_pages.generator import ItemPageGenerator
from arcdb_pages.sitemap import SitemapBuilder, generate_sitemap

if typ.TYPE_CHECKING:
    from pathlib import Path

    from arcdb_pages.context import GenerationContext

ITEM_PREFIX = "https://www.arcdb.site/items/"


def _entries(path: Path) -> list[tuple[str, str, str]]:
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
    return [
        (
            url.find("loc").get_text(),
            url.find("priority").get_text(),
            url.find("changefreq").get_text(),
        )
        for url in soup.find_all("url")
    ]


def test_sitemap_lists_static_routes_then_items(tmp_path: Path) -> None:
    catalog = Catalog.from_records([{"Name": "Scrap Metal", "Rarity": "Common"}])
    path = generate_sitemap(catalog, tmp_path / "sitemap.xml")

    assert path == tmp_path / "sitemap.xml"
    assert _entries(path) == [
        ("https://www.arcdb.site/", "1.00", "weekly"),
        ("https://www.arcdb.site/what-to-keep.html", "0.80", "weekly"),
        ("https://www.arcdb.site/what-to-sell.html", "0.80", "weekly"),
        ("https://www.arcdb.site/loot-guide.html", "0.80", "weekly"),
        ("https://www.arcdb.site/items/scrap-metal/", "0.60", "monthly"),
    ]


def test_sitemap_document_shape(tmp_path: Path) -> None:
    """The document carries the XML declaration and sitemaps.org namespace."""
    path = generate_sitemap(Catalog(), tmp_path / "sitemap.xml")
    text = path.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in text
    assert text.endswith("</urlset>\n")
    assert len(_entries(path)) == 4, "empty catalogs still list static routes"


def test_sitemap_and_pages_agree_on_slugs(context: GenerationContext) -> None:
    """Every written page has exactly one sitemap entry and vice versa."""
    written = ItemPageGenerator(context).run()
    sitemap_path = SitemapBuilder(context).run()

    item_locs = [loc for loc, _, _ in _entries(sitemap_path) if loc.startswith(ITEM_PREFIX)]
    sitemap_slugs = {loc.removeprefix(ITEM_PREFIX).rstrip("/") for loc in item_locs}
    page_slugs = {path.parent.name for path in written}

    assert len(item_locs) == len(written) == len(context.catalog)
    assert sitemap_slugs == page_slugs == {"scrap-metal", "pulse-rifle-mk-ii", "item"}


def test_sitemap_dedupes_colliding_slugs(tmp_path: Path) -> None:
    catalog = Catalog.from_records([{"Name": "ARC Alloy"}, {"Name": "arc-alloy"}])
    path = generate_sitemap(catalog, tmp_path / "sitemap.xml")
    item_locs = [loc for loc, _, _ in _entries(path) if loc.startswith(ITEM_PREFIX)]
    assert item_locs == ["https://www.arcdb.site/items/arc-alloy/"]


def test_sitemap_rerun_is_byte_identical(context: GenerationContext) -> None:
    builder = SitemapBuilder(context)
    first = builder.run().read_bytes()
    second = builder.run().read_bytes()
    assert first == second


def test_sitemap_overwrites_previous_file(tmp_path: Path) -> None:
    target = tmp_path / "sitemap.xml"
    target.write_text("stale", encoding="utf-8")
    generate_sitemap(Catalog.from_records([{"Name": "Fresh"}]), target)
    assert "stale" not in target.read_text(encoding="utf-8")


def test_sitemap_uses_configured_routes(tmp_path: Path) -> None:
    site = SiteConfig(
        base_url="https://example.invalid",
        routes=[RouteConfig(path="/", priority="0.90", changefreq="daily")],
        item_priority="0.40",
        item_changefreq="yearly",
    )
    catalog = Catalog.from_records([{"Name": "Widget"}])
    path = generate_sitemap(catalog, tmp_path / "out" / "sitemap.xml", site=site)
    assert _entries(path) == [
        ("https://example.invalid/", "0.90", "daily"),
        ("https://example.invalid/items/widget/", "0.40", "yearly"),
    ]


def test_sitemap_escapes_route_markup(tmp_path: Path) -> None:
    """Reserved XML characters in configured routes are written as entities."""
    site = SiteConfig(
        base_url="https://example.invalid",
        routes=[RouteConfig(path="/search?kind=ammo&sort=<price>")],
    )
    path = generate_sitemap(Catalog(), tmp_path / "sitemap.xml", site=site)
    xml = path.read_text(encoding="utf-8")
    assert (
        "<loc>https://example.invalid/search?kind=ammo&amp;sort=&lt;price&gt;</loc>"
        in xml
    ), xml
    loc = _entries(path)[0][0]
    assert loc == "https://example.invalid/search?kind=ammo&sort=<price>", loc
