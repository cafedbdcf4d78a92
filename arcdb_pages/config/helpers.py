"""Utility helpers shared by the arcdb configuration loader."""

from __future__ import annotations

import typing as typ

from .models import AssetConfig, NavLinkConfig, RouteConfig, SiteConfigError

CHANGEFREQ_VALUES = frozenset(
    {"always", "hourly", "daily", "weekly", "monthly", "yearly", "never"}
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return the mapping stored under ``key``, or an empty dict when unset."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _normalize_base_url(value: object | None, fallback: str) -> str:
    """Return ``value`` without trailing slashes, or ``fallback`` when unset."""
    text = _optional_str(value)
    if text is None:
        return fallback
    return text.rstrip("/")


def _format_priority(value: object | None, fallback: str) -> str:
    """Render a sitemap priority as a two-decimal literal between 0 and 1."""
    if value is None:
        return fallback
    try:
        number = float(str(value))
    except ValueError as exc:
        msg = f"Sitemap priority must be a number, got {value!r}."
        raise SiteConfigError(msg) from exc
    if not 0.0 <= number <= 1.0:
        msg = f"Sitemap priority must be between 0.0 and 1.0, got {value!r}."
        raise SiteConfigError(msg)
    return f"{number:.2f}"


def _validate_changefreq(value: object | None, fallback: str) -> str:
    """Return a sitemap change frequency, rejecting values the protocol lacks."""
    text = _optional_str(value)
    if text is None:
        return fallback
    normalized = text.lower()
    if normalized not in CHANGEFREQ_VALUES:
        allowed = ", ".join(sorted(CHANGEFREQ_VALUES))
        msg = f"Unknown changefreq {text!r}; expected one of: {allowed}."
        raise SiteConfigError(msg)
    return normalized


def _build_assets(
    payload: typ.Mapping[str, typ.Any] | None, base: AssetConfig
) -> AssetConfig:
    """Merge an ``assets`` mapping over the base AssetConfig."""
    if not payload:
        return base
    return AssetConfig(
        icon=_optional_str(payload.get("icon")) or base.icon,
        manifest=_optional_str(payload.get("manifest")) or base.manifest,
        stylesheet=_optional_str(payload.get("stylesheet")) or base.stylesheet,
        script=_optional_str(payload.get("script")) or base.script,
        og_image=_optional_str(payload.get("og_image")) or base.og_image,
    )


def _build_routes(
    payload: list[typ.Any] | None, base: list[RouteConfig]
) -> list[RouteConfig]:
    """Build the ordered static route list, or keep ``base`` when unset."""
    if payload is None:
        return list(base)
    if not isinstance(payload, list):
        msg = "'routes' must be a list of mappings."
        raise SiteConfigError(msg)
    routes: list[RouteConfig] = []
    for index, entry in enumerate(payload):
        match entry:
            case str() as path:
                routes.append(RouteConfig(path=path))
            case dict():
                path = _optional_str(entry.get("path"))
                if path is None:
                    msg = f"Route #{index + 1} is missing 'path'."
                    raise SiteConfigError(msg)
                routes.append(
                    RouteConfig(
                        path=path,
                        priority=_format_priority(entry.get("priority"), "0.80"),
                        changefreq=_validate_changefreq(
                            entry.get("changefreq"), "weekly"
                        ),
                    )
                )
            case _:
                msg = f"Route #{index + 1} must be a path or a mapping."
                raise SiteConfigError(msg)
    return routes


def _build_guides(
    payload: list[typ.Any] | None, base: list[NavLinkConfig]
) -> list[NavLinkConfig]:
    """Build footer guide links, skipping entries without a label or href."""
    if payload is None:
        return list(base)
    if not isinstance(payload, list):
        msg = "'guides' must be a list of mappings."
        raise SiteConfigError(msg)
    guides: list[NavLinkConfig] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        label = _optional_str(entry.get("label"))
        href = _optional_str(entry.get("href"))
        if label and href:
            guides.append(NavLinkConfig(label=label, href=href))
    return guides


__all__ = [
    "CHANGEFREQ_VALUES",
    "_build_assets",
    "_build_guides",
    "_build_routes",
    "_format_priority",
    "_normalize_base_url",
    "_optional_str",
    "_section",
    "_validate_changefreq",
]
