"""High-level orchestration for item page generation.

This module turns every record of the catalog into a standalone HTML document
at ``public/items/<slug>/index.html``. It exposes :class:`ItemPageGenerator`,
which consumes a :class:`~arcdb_pages.context.GenerationContext`, builds an
:class:`~arcdb_pages.generator.models.ItemPageModel` per item (page copy,
Open Graph URLs, Product structured data, attribute rows), renders it with the
shared ``item_page.jinja`` template, and writes the result. Output contains no
timestamps, so re-running on an unchanged catalog rewrites identical bytes.

Example
-------
>>> from pathlib import Path
>>> from arcdb_pages.context import build_context
>>> from arcdb_pages.generator import ItemPageGenerator
>>> context = build_context(catalog_path=Path("public/data.json"))  # doctest: +SKIP
>>> ItemPageGenerator(context).run()  # doctest: +SKIP
[PosixPath('public/items/scrap-metal/index.html'), ...]
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from arcdb_pages._constants import DEFAULT_OUTPUT_ROOT, INDEX_FILENAME
from arcdb_pages.config import SiteConfig
from arcdb_pages.context import GenerationContext
from arcdb_pages.generator.models import ItemPageModel
from arcdb_pages.generator.structured_data import (
    build_product_json_ld,
    serialize_json_ld,
)
from arcdb_pages.text import escape_html, format_template

if typ.TYPE_CHECKING:
    from arcdb_pages.catalog import Catalog, Item

LOGGER = logging.getLogger(__name__)


class ItemPageGenerator:
    """Render one themed HTML page per catalog item."""

    def __init__(
        self, context: GenerationContext, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the generator with a run context and template directory.

        Parameters
        ----------
        context : GenerationContext
            Catalog, output root, and site configuration for this run.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.

        Notes
        -----
        Autoescaping is disabled: the template escapes item text explicitly
        through the ``escape_html`` filter and embeds the JSON-LD block
        verbatim.
        """
        self.context = context
        self.site = context.site
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["escape_html"] = escape_html
        self.template = self.env.get_template("item_page.jinja")

    def run(self, *, clean: bool = False) -> list[Path]:
        """Render every catalog item into ``items/<slug>/index.html``.

        Parameters
        ----------
        clean : bool, optional
            Remove the whole ``items`` directory first so pages of items no
            longer in the catalog disappear. Defaults to ``False``.

        Returns
        -------
        list[Path]
            Distinct written paths, in the order they were first written.
            Items whose slugs collide share one path; the last one wins.

        Raises
        ------
        OSError
            Propagated unchanged when a directory or file cannot be written.
        """
        items_root = self.context.items_root
        if clean and items_root.exists():
            LOGGER.info("Removing stale item pages under %s", items_root)
            shutil.rmtree(items_root)
        items_root.mkdir(parents=True, exist_ok=True)
        self.context.warn_slug_collisions()

        written: dict[Path, None] = {}
        for item in self.context.catalog:
            output_path = self.write_item(item)
            written[output_path] = None
        return list(written)

    def write_item(self, item: Item) -> Path:
        """Render ``item`` and write it under its slug directory."""
        model = self.build_model(item)
        out_dir = self.context.items_root / model.slug
        out_dir.mkdir(parents=True, exist_ok=True)
        output_path = out_dir / INDEX_FILENAME
        output_path.write_text(self.render(model), encoding="utf-8")
        LOGGER.debug("wrote %s", output_path)
        return output_path

    def render(self, model: ItemPageModel) -> str:
        """Render the full HTML document for ``model``."""
        html = self.template.render(item=model, site=self.site)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def build_model(self, item: Item) -> ItemPageModel:
        """Construct the template model for ``item`` from the site settings."""
        name = item.name
        slug = item.slug
        title = format_template(self.site.title_template, name=name)
        description = format_template(self.site.description_template, name=name)
        json_ld = build_product_json_ld(item, site=self.site, description=description)
        return ItemPageModel(
            name=name,
            slug=slug,
            title=title,
            description=description,
            keywords=self._keywords(name, slug),
            canonical_url=self.site.item_url(slug),
            og_image=self._asset_url(self.site.assets.og_image),
            json_ld=serialize_json_ld(json_ld),
            rows=item.rows(),
        )

    def _keywords(self, name: str, slug: str) -> str:
        """Return the keyword list: brand + name, brand items, slug, brand database."""
        brand = self.site.brand.lower()
        return ", ".join(
            (
                f"{brand} {name.lower()}",
                f"{brand} items",
                slug,
                f"{brand} database",
            )
        )

    def _asset_url(self, path: str) -> str:
        """Return ``path`` as an absolute URL unless it already is one."""
        if path.startswith(("http://", "https://")):
            return path
        return self.site.absolute_url(path)


def generate_pages(
    catalog: Catalog,
    output_root: Path = DEFAULT_OUTPUT_ROOT,
    *,
    site: SiteConfig | None = None,
    clean: bool = False,
) -> list[Path]:
    """Write one page per item of ``catalog`` under ``output_root/items``.

    Convenience wrapper that builds a :class:`GenerationContext` and runs
    :class:`ItemPageGenerator`; see :meth:`ItemPageGenerator.run`.
    """
    context = GenerationContext(
        catalog=catalog, output_root=output_root, site=site or SiteConfig()
    )
    return ItemPageGenerator(context).run(clean=clean)


__all__ = ["ItemPageGenerator", "generate_pages"]
