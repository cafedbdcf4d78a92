"""Shared dataclasses used by the item page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True)
class ItemPageModel:
    """Structured data passed to the item page template.

    Values are unescaped; the template applies ``escape_html`` to each one
    except ``json_ld``, which is already serialized for a script block.

    Attributes
    ----------
    name : str
        Resolved display name (``"item"`` when the record has none).
    slug : str
        URL-safe identifier shared with the sitemap.
    title : str
        Document title built from the configured template.
    description : str
        Meta and body description built from the configured template.
    keywords : str
        Comma-separated keyword list derived from the name and slug.
    canonical_url : str
        Absolute URL of the page, also used for ``og:url``.
    og_image : str
        Absolute URL of the Open Graph preview image.
    json_ld : str
        Product structured data serialized as compact JSON.
    rows : list[tuple[str, typing.Any]]
        Field name and raw value pairs, in the item's field order.
    """

    name: str
    slug: str
    title: str
    description: str
    keywords: str
    canonical_url: str
    og_image: str
    json_ld: str
    rows: list[tuple[str, typ.Any]]


__all__ = ["ItemPageModel"]
