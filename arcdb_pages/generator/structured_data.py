"""Build the schema.org Product block embedded in every item page."""

from __future__ import annotations

import json
import typing as typ

if typ.TYPE_CHECKING:
    from arcdb_pages.catalog import Item
    from arcdb_pages.config import SiteConfig

SCHEMA_CONTEXT = "https://schema.org"

# Characters the HTML tokenizer reacts to inside a script element.
_SCRIPT_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def _property_value(value: object) -> object:
    """Return ``value`` with integral floats collapsed to ints.

    The attribute table prints ``12.0`` as ``12``; the structured data carries
    the same number so both views of a record agree.

    >>> _property_value(12.0), _property_value(2.5), _property_value("12.0")
    (12, 2.5, '12.0')
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_product_json_ld(
    item: Item, *, site: SiteConfig, description: str
) -> dict[str, typ.Any]:
    """Return the Product structured data for ``item``.

    Every field of the record, ``Name`` included, becomes a ``PropertyValue``
    in ``additionalProperty`` with its decoded value, in field order.
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Product",
        "name": item.name,
        "description": description,
        "identifier": item.slug,
        "brand": {"@type": "Brand", "name": site.brand},
        "additionalProperty": [
            {"@type": "PropertyValue", "name": key, "value": _property_value(value)}
            for key, value in item.rows()
        ],
    }


def serialize_json_ld(payload: typ.Mapping[str, typ.Any]) -> str:
    """Serialize ``payload`` for an inline ``application/ld+json`` script.

    Output is compact and keeps key order, so identical input always yields
    identical bytes. ``<``, ``>`` and ``&`` are written as ``\\u003c``,
    ``\\u003e`` and ``\\u0026``: the result is still the same JSON, but no
    item text can open a comment, close the script element, or otherwise
    change how the browser tokenizes the page.

    >>> serialize_json_ld({"note": "<!--<script>"})
    '{"note":"\\\\u003c!--\\\\u003cscript\\\\u003e"}'
    """
    encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, replacement in _SCRIPT_UNSAFE.items():
        encoded = encoded.replace(char, replacement)
    return encoded


__all__ = ["SCHEMA_CONTEXT", "build_product_json_ld", "serialize_json_ld"]
