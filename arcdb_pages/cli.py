"""Cyclopts CLI entrypoint for generating arcdb item pages and the sitemap.

The ``arcdb-pages`` console script defined here reads the item catalog
(``public/data.json`` by default), renders one HTML page per item under
``public/items/`` and writes ``public/sitemap.xml``. The two passes are
independent: ``items`` and ``sitemap`` may run separately (or concurrently),
and ``build`` runs both. ``arcdb-item-pages`` and ``arcdb-sitemap`` are
argument-free shortcuts for the build tool.

Every command loads the catalog before writing anything; a missing or
malformed catalog is logged and the process exits with status 1.

Examples
--------
Generate everything with the default paths:

>>> from arcdb_pages.cli import main
>>> main()  # doctest: +SKIP

Regenerate item pages into a custom directory, removing stale ones:

>>> from arcdb_pages.cli import app
>>> app(["items", "--output-dir", "dist", "--clean"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_OUTPUT_ROOT,
    DEFAULT_SITE_CONFIG,
    SITEMAP_FILENAME,
)
from .catalog import CatalogError
from .config import SiteConfigError
from .context import GenerationContext, build_context
from .generator import ItemPageGenerator
from .sitemap import SitemapBuilder

LOGGER = logging.getLogger(__name__)
PACKAGE_LOGGER = "arcdb_pages"

app = App(name="arcdb-pages", help="Generate arcdb item pages and sitemap.")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _set_verbosity(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def _resolve_config(config: Path | None) -> Path | None:
    """Return the explicit config path, or the default file when it exists."""
    if config is not None:
        return config
    if DEFAULT_SITE_CONFIG.exists():
        return DEFAULT_SITE_CONFIG
    return None


def _load_context(
    *, catalog: Path, output_dir: Path, config: Path | None
) -> GenerationContext:
    """Build the run context or exit with status 1 before anything is written."""
    config_path = _resolve_config(config)
    try:
        return build_context(
            catalog_path=catalog, output_root=output_dir, config_path=config_path
        )
    except CatalogError as exc:
        LOGGER.error("%s", exc)  # noqa: TRY400 - reason is already in the message
        raise SystemExit(1) from exc
    except (SiteConfigError, TypeError, OSError, YAMLError) as exc:
        msg = f"Failed to load site config '{config_path}': {exc}"
        LOGGER.error("%s", msg)  # noqa: TRY400 - reason is already in the message
        raise SystemExit(1) from exc


def _run_items(context: GenerationContext, *, clean: bool) -> list[Path]:
    written = ItemPageGenerator(context).run(clean=clean)
    LOGGER.info(
        "Generated %d item pages under %s/",
        len(written),
        _format_path(context.items_root),
    )
    return written


def _run_sitemap(context: GenerationContext) -> Path:
    sitemap_path = SitemapBuilder(context).run()
    LOGGER.info(
        "Generated sitemap with %d item pages at %s",
        len(context.catalog.slugs()),
        _format_path(sitemap_path),
    )
    return sitemap_path


@app.command(help="Render one HTML page per catalog item.")
def items(
    *,
    catalog: typ.Annotated[
        Path, Parameter(help="Path to the catalog JSON file")
    ] = DEFAULT_CATALOG_PATH,
    output_dir: typ.Annotated[
        Path, Parameter(help="Static output root that receives items/")
    ] = DEFAULT_OUTPUT_ROOT,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config YAML")
    ] = None,
    clean: typ.Annotated[
        bool, Parameter(help="Remove existing item pages before rendering")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Log every written page")] = False,
) -> None:
    """Generate item pages for every record in the catalog.

    Parameters
    ----------
    catalog : Path, optional
        Catalog JSON file; defaults to ``public/data.json``.
    output_dir : Path, optional
        Output root; pages land in ``<output_dir>/items/<slug>/index.html``.
    config : Path or None, optional
        Site configuration file. When ``None``, ``config/site.yaml`` is used
        if present, otherwise the built-in defaults.
    clean : bool, optional
        Delete ``<output_dir>/items`` before rendering.
    verbose : bool, optional
        Log each written path at debug level.

    Raises
    ------
    SystemExit
        With status 1 when the catalog or site config cannot be loaded.
    """
    _set_verbosity(verbose=verbose)
    context = _load_context(catalog=catalog, output_dir=output_dir, config=config)
    _run_items(context, clean=clean)


@app.command(help="Write the XML sitemap for static routes and item pages.")
def sitemap(
    *,
    catalog: typ.Annotated[
        Path, Parameter(help="Path to the catalog JSON file")
    ] = DEFAULT_CATALOG_PATH,
    output_dir: typ.Annotated[
        Path, Parameter(help=f"Static output root that receives {SITEMAP_FILENAME}")
    ] = DEFAULT_OUTPUT_ROOT,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config YAML")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate the sitemap for the catalog; see :func:`items` for parameters."""
    _set_verbosity(verbose=verbose)
    context = _load_context(catalog=catalog, output_dir=output_dir, config=config)
    _run_sitemap(context)


@app.command(help="Render item pages and the sitemap from one catalog load.")
def build(
    *,
    catalog: typ.Annotated[
        Path, Parameter(help="Path to the catalog JSON file")
    ] = DEFAULT_CATALOG_PATH,
    output_dir: typ.Annotated[
        Path, Parameter(help="Static output root")
    ] = DEFAULT_OUTPUT_ROOT,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config YAML")
    ] = None,
    clean: typ.Annotated[
        bool, Parameter(help="Remove existing item pages before rendering")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Log every written page")] = False,
) -> None:
    """Run the item page pass followed by the sitemap pass."""
    _set_verbosity(verbose=verbose)
    context = _load_context(catalog=catalog, output_dir=output_dir, config=config)
    _run_items(context, clean=clean)
    _run_sitemap(context)


def _configure_logging() -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.INFO)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``arcdb-pages`` command."""
    _configure_logging()
    app()


def item_pages_main() -> None:
    """Run the ``items`` command with default paths (``arcdb-item-pages``)."""
    _configure_logging()
    app(["items"])


def sitemap_main() -> None:
    """Run the ``sitemap`` command with default paths (``arcdb-sitemap``)."""
    _configure_logging()
    app(["sitemap"])


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
