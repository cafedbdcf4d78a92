"""Typed dataclasses describing arcdb site configuration structures."""

from __future__ import annotations

import dataclasses as dc


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RouteConfig:
    """A fixed top-level route listed ahead of item pages in the sitemap."""

    path: str
    priority: str = "0.80"
    changefreq: str = "weekly"


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Guide link rendered in the item page footer navigation."""

    label: str
    href: str


@dc.dataclass(slots=True)
class AssetConfig:
    """Static asset paths referenced from every item page head."""

    icon: str = "/icon.svg"
    manifest: str = "/manifest.webmanifest"
    stylesheet: str = "/dark-mode.css"
    script: str = "/dark-mode.js"
    og_image: str = "/icon.svg"


def _default_routes() -> list[RouteConfig]:
    return [
        RouteConfig(path="/", priority="1.00", changefreq="weekly"),
        RouteConfig(path="/what-to-keep.html"),
        RouteConfig(path="/what-to-sell.html"),
        RouteConfig(path="/loot-guide.html"),
    ]


def _default_guides() -> list[NavLinkConfig]:
    return [
        NavLinkConfig(label="What to Keep Guide", href="/what-to-keep.html"),
        NavLinkConfig(label="What to Sell Guide", href="/what-to-sell.html"),
        NavLinkConfig(label="Loot Farming Guide", href="/loot-guide.html"),
    ]


@dc.dataclass(slots=True)
class SiteConfig:
    """Static configuration shared by the page generator and sitemap builder.

    Attributes
    ----------
    base_url : str
        Absolute site origin without a trailing slash; prefixes canonical,
        Open Graph, and sitemap URLs.
    site_name : str
        Label used for the breadcrumb root and back link.
    brand : str
        Game name used in page copy, keywords, and the JSON-LD brand.
    title_template : str
        Page title with a ``{name}`` placeholder.
    description_template : str
        Meta description with a ``{name}`` placeholder.
    assets : AssetConfig
        Icon, manifest, stylesheet, script, and Open Graph image paths.
    routes : list[RouteConfig]
        Static routes listed first in the sitemap, in order.
    guides : list[NavLinkConfig]
        Footer navigation links on item pages.
    item_priority : str
        Sitemap priority literal for item pages.
    item_changefreq : str
        Sitemap change frequency for item pages.
    """

    base_url: str = "https://www.arcdb.site"
    site_name: str = "ARC Raiders Database"
    brand: str = "ARC Raiders"
    title_template: str = "{name} - ARC Raiders Item | Database & Guide"
    description_template: str = (
        "{name} in ARC Raiders: complete item details including rarity, "
        "recycling value, sell price, crafting uses, and quest/workshop "
        "requirements. Part of the ARC Raiders items database."
    )
    assets: AssetConfig = dc.field(default_factory=AssetConfig)
    routes: list[RouteConfig] = dc.field(default_factory=_default_routes)
    guides: list[NavLinkConfig] = dc.field(default_factory=_default_guides)
    item_priority: str = "0.60"
    item_changefreq: str = "monthly"

    def absolute_url(self, path: str) -> str:
        """Join ``path`` onto :attr:`base_url` with exactly one slash."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def item_url(self, slug: str) -> str:
        """Return the canonical URL of the item page for ``slug``."""
        return self.absolute_url(f"items/{slug}/")


__all__ = [
    "AssetConfig",
    "NavLinkConfig",
    "RouteConfig",
    "SiteConfig",
    "SiteConfigError",
]
