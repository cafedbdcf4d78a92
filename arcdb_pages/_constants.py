"""Common literal values used across arcdb_pages.

These constants keep directory names, filenames, and fallbacks centralized so
the page generator, the sitemap builder, the CLI, and tests derive identical
paths from the same values. Intended for internal use within the arcdb_pages
package.

Examples
--------
>>> from arcdb_pages import _constants
>>> _constants.ITEM_PAGE_TEMPLATE.format(slug="scrap-metal")
'items/scrap-metal/index.html'
>>> _constants.FALLBACK_ITEM_NAME
'item'
"""

from pathlib import Path

FALLBACK_ITEM_NAME = "item"
ITEMS_DIRNAME = "items"
INDEX_FILENAME = "index.html"
SITEMAP_FILENAME = "sitemap.xml"
ITEM_PAGE_TEMPLATE = ITEMS_DIRNAME + "/{slug}/" + INDEX_FILENAME

DEFAULT_OUTPUT_ROOT = Path("public")
DEFAULT_CATALOG_PATH = DEFAULT_OUTPUT_ROOT / "data.json"
DEFAULT_SITE_CONFIG = Path("config/site.yaml")

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
