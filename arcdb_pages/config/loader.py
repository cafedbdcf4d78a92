"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_assets,
    _build_guides,
    _build_routes,
    _format_priority,
    _normalize_base_url,
    _optional_str,
    _section,
    _validate_changefreq,
)
from .models import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load the YAML configuration describing the published site.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML file (for example, ``config/site.yaml``).
        When ``None`` the built-in arcdb.site defaults are returned.

    Returns
    -------
    SiteConfig
        Defaults with every key present in the file applied on top.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If routes, priorities, or change frequencies are invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from arcdb_pages.config import load_site_config
    >>> load_site_config().base_url
    'https://www.arcdb.site'
    """
    base = SiteConfig()
    if path is None:
        return base
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site = _section(raw, "site")
    items = _section(raw, "items")

    return SiteConfig(
        base_url=_normalize_base_url(site.get("base_url"), base.base_url),
        site_name=_optional_str(site.get("name")) or base.site_name,
        brand=_optional_str(site.get("brand")) or base.brand,
        title_template=_optional_str(site.get("title_template"))
        or base.title_template,
        description_template=_optional_str(site.get("description_template"))
        or base.description_template,
        assets=_build_assets(_section(raw, "assets"), base.assets),
        routes=_build_routes(raw.get("routes"), base.routes),
        guides=_build_guides(raw.get("guides"), base.guides),
        item_priority=_format_priority(items.get("priority"), base.item_priority),
        item_changefreq=_validate_changefreq(
            items.get("changefreq"), base.item_changefreq
        ),
    )


__all__ = ["load_site_config"]
