"""Load and validate site configuration YAML for arcdb page builds.

This subpackage parses the optional ``config/site.yaml`` file, merges it over
the built-in arcdb.site defaults, and produces typed dataclasses
(:class:`SiteConfig`, :class:`RouteConfig`, etc.) that the item page generator
and the sitemap builder consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from arcdb_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.item_url("scrap-metal")  # doctest: +SKIP
'https://www.arcdb.site/items/scrap-metal/'
"""

from .loader import load_site_config
from .models import (
    AssetConfig,
    NavLinkConfig,
    RouteConfig,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "AssetConfig",
    "NavLinkConfig",
    "RouteConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
