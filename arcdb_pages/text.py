r"""Slug derivation and HTML escaping shared by both generation passes.

The page generator and the sitemap builder must agree on every item's slug,
so both import :func:`slugify` from here rather than carrying their own copy.
:func:`escape_html` neutralizes markup-significant characters in item-derived
text before it is interpolated into the page shell.

Examples
--------
>>> from arcdb_pages.text import escape_html, slugify, to_text
>>> slugify("Pulse Rifle Mk.II")
'pulse-rifle-mk-ii'
>>> escape_html('A & B <tag> "quoted"')
'A &amp; B &lt;tag&gt; &quot;quoted&quot;'
>>> to_text(True), to_text(12.0), to_text(None)
('true', '12', 'null')
"""

from __future__ import annotations

import json
import re
import typing as typ

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")

# Ampersand first so later substitutions are not escaped twice.
_HTML_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def to_text(value: object) -> str:
    """Return the display string for a catalog value.

    Parameters
    ----------
    value : object
        Any JSON-decoded value: ``str``, ``int``, ``float``, ``bool``,
        ``None``, ``list`` or ``dict``.

    Returns
    -------
    str
        ``true``/``false`` for booleans, ``null`` for ``None``,
        integral floats without a fractional part, compact JSON for
        containers, and ``str(value)`` otherwise.
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case float() if value.is_integer():
            return str(int(value))
        case list() | dict():
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        case _:
            return str(value)


def slugify(value: object) -> str:
    """Convert a display name into a lowercase hyphen-separated slug.

    Every maximal run of characters outside ``[a-z0-9]`` collapses into one
    hyphen and surrounding hyphens are stripped. Names made only of symbols
    produce an empty string, which callers accept as a valid path segment.
    """
    return SLUG_PATTERN.sub("-", to_text(value).lower()).strip("-")


def escape_html(value: object) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` in the text form of ``value``."""
    text = to_text(value)
    for needle, entity in _HTML_REPLACEMENTS:
        text = text.replace(needle, entity)
    return text


def format_template(template: str, **fields: typ.Any) -> str:
    """Substitute ``{name}``-style placeholders without touching other braces."""
    result = template
    for key, value in fields.items():
        result = result.replace("{" + key + "}", to_text(value))
    return result


__all__ = ["SLUG_PATTERN", "escape_html", "format_template", "slugify", "to_text"]
