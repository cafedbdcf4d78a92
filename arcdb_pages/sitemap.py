"""Build the XML sitemap that lists static routes and every item page.

The builder projects the catalog into ``public/sitemap.xml`` following the
sitemaps.org protocol: the configured static routes come first, then one
``<url>`` per item pointing at ``<base>/items/<slug>/``. Slugs come from the
same :func:`~arcdb_pages.text.slugify` the page generator uses, so every
written page has exactly one sitemap entry.

Typical usage pairs the builder with a generation context:

>>> from pathlib import Path
>>> from arcdb_pages.context import build_context
>>> from arcdb_pages.sitemap import SitemapBuilder
>>> context = build_context(catalog_path=Path("public/data.json"))  # doctest: +SKIP
>>> SitemapBuilder(context).run()  # doctest: +SKIP
PosixPath('public/sitemap.xml')
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import DEFAULT_OUTPUT_ROOT, SITEMAP_FILENAME, SITEMAP_NAMESPACE
from .config import SiteConfig
from .context import GenerationContext

if typ.TYPE_CHECKING:
    from .catalog import Catalog


@dc.dataclass(slots=True, frozen=True)
class SitemapEntry:
    """One ``<url>`` element of the sitemap."""

    loc: str
    priority: str
    changefreq: str


class SitemapBuilder:
    """Render the sitemap for the static routes and catalog items."""

    def __init__(
        self, context: GenerationContext, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the sitemap builder.

        Parameters
        ----------
        context : GenerationContext
            Catalog, output root, and site configuration for this run.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``arcdb_pages/templates`` directory when ``None``.
        """
        self.context = context
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("sitemap.xml.jinja")

    def run(self, output_path: Path | None = None) -> Path:
        """Render the sitemap and write it, replacing any previous file.

        Parameters
        ----------
        output_path : Path, optional
            Destination file; defaults to ``sitemap.xml`` under the context's
            output root.

        Returns
        -------
        Path
            Location of the written sitemap.
        """
        self.context.warn_slug_collisions()
        target = output_path or self.context.sitemap_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.render(), encoding="utf-8")
        return target

    def render(self) -> str:
        """Return the sitemap XML document as text."""
        xml = self.template.render(
            namespace=SITEMAP_NAMESPACE,
            static_entries=self.static_entries(),
            item_entries=self.item_entries(),
        )
        if not xml.endswith("\n"):
            xml += "\n"
        return xml

    def static_entries(self) -> list[SitemapEntry]:
        """Return entries for the configured static routes, in order."""
        site = self.context.site
        return [
            SitemapEntry(
                loc=site.absolute_url(route.path),
                priority=route.priority,
                changefreq=route.changefreq,
            )
            for route in site.routes
        ]

    def item_entries(self) -> list[SitemapEntry]:
        """Return one entry per distinct item slug, in catalog order."""
        site = self.context.site
        return [
            SitemapEntry(
                loc=site.item_url(slug),
                priority=site.item_priority,
                changefreq=site.item_changefreq,
            )
            for slug in self.context.catalog.slugs()
        ]


def generate_sitemap(
    catalog: Catalog,
    output_path: Path = DEFAULT_OUTPUT_ROOT / SITEMAP_FILENAME,
    *,
    site: SiteConfig | None = None,
) -> Path:
    """Write the sitemap for ``catalog`` to ``output_path``.

    Convenience wrapper that builds a :class:`GenerationContext` rooted at the
    sitemap's parent directory and runs :class:`SitemapBuilder`.
    """
    context = GenerationContext(
        catalog=catalog, output_root=output_path.parent, site=site or SiteConfig()
    )
    return SitemapBuilder(context).run(output_path)


__all__ = ["SitemapBuilder", "SitemapEntry", "generate_sitemap"]
