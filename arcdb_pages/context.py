"""Explicit inputs shared by the item page and sitemap generation passes."""

from __future__ import annotations

import dataclasses as dc
import logging
from pathlib import Path

from ._constants import DEFAULT_OUTPUT_ROOT, ITEMS_DIRNAME, SITEMAP_FILENAME
from .catalog import Catalog, load_catalog
from .config import SiteConfig, load_site_config

LOGGER = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GenerationContext:
    """Catalog, output root, and site configuration for one generation run.

    Attributes
    ----------
    catalog : Catalog
        Items loaded once for the run; read-only for both passes.
    output_root : Path
        Directory served as static assets (``public`` by default).
    site : SiteConfig
        Base URL, routes, asset paths, and page copy templates.
    """

    catalog: Catalog
    output_root: Path = DEFAULT_OUTPUT_ROOT
    site: SiteConfig = dc.field(default_factory=SiteConfig)

    @property
    def items_root(self) -> Path:
        """Return the directory that holds one sub-directory per item."""
        return self.output_root / ITEMS_DIRNAME

    @property
    def sitemap_path(self) -> Path:
        """Return the default sitemap location under the output root."""
        return self.output_root / SITEMAP_FILENAME

    def warn_slug_collisions(self) -> dict[str, list[str]]:
        """Log one warning per slug shared by several items and return them."""
        collisions = self.catalog.slug_collisions()
        for slug, names in collisions.items():
            LOGGER.warning(
                "Slug %r is shared by %d items (%s); only the last page is kept.",
                slug,
                len(names),
                ", ".join(names),
            )
        return collisions


def build_context(
    *,
    catalog_path: Path,
    output_root: Path = DEFAULT_OUTPUT_ROOT,
    config_path: Path | None = None,
) -> GenerationContext:
    """Load the site config and catalog into a :class:`GenerationContext`.

    Raises
    ------
    CatalogError
        If the catalog cannot be read or decoded.
    SiteConfigError
        If the configuration file is invalid.
    """
    site = load_site_config(config_path)
    catalog = load_catalog(catalog_path)
    return GenerationContext(catalog=catalog, output_root=output_root, site=site)


__all__ = ["GenerationContext", "build_context"]
