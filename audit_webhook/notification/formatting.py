from __future__ import annotations

from typing import Optional

PLACEHOLDER = "-"


def title_from_event_kind(kind: str) -> str:
    """
    Convert an event identifier such as ``"SIGN_IN"`` into ``"Sign In"``.

    Empty segments (from leading, trailing or doubled underscores) are kept
    as-is, so the number of separators is preserved as spaces.
    """
    words = kind.split("_")
    return " ".join(w[:1].upper() + w[1:].lower() if w else w for w in words)


def format_location(country: Optional[str], city: Optional[str]) -> str:
    """
    Build a display location from optional country and city.

    Returns
    -------
    str
        ``""`` when both are empty, the present value when only one is set,
        otherwise ``"City, Country"``.
    """
    country = country or ""
    city = city or ""
    if not country and not city:
        return ""
    if not city:
        return country
    if not country:
        return city
    return f"{city}, {country}"


def value_or_placeholder(value: Optional[str]) -> str:
    """Return a dash for empty values so chat receivers never get blank fields."""
    if not value:
        return PLACEHOLDER
    return value
