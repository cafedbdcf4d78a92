"""Utilities for building and writing arcdb item pages."""

from .models import ItemPageModel
from .page_generator import ItemPageGenerator, generate_pages
from .structured_data import build_product_json_ld, serialize_json_ld

__all__ = [
    "ItemPageGenerator",
    "ItemPageModel",
    "build_product_json_ld",
    "generate_pages",
    "serialize_json_ld",
]
