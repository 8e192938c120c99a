"""Canonical record fields and the header aliases accepted for each."""

from typing import Dict, Iterable, Optional, Tuple


# Canonical field -> accepted aliases, in priority order
FIELD_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "lat": ("latitude", "lat", "y"),
    "lng": ("longitude", "lng", "lon", "x"),
    "value": ("value", "score", "amount", "count", "population"),
    "bias": ("bias",),
    "category": ("category", "type", "class"),
    "region_tag": ("region", "area", "zone"),
}

COORDINATE_FIELDS: Tuple[str, ...] = ("lat", "lng")


def resolve_columns(
    headers: Iterable[str],
    synonyms: Optional[Dict[str, Tuple[str, ...]]] = None,
) -> Dict[str, Optional[str]]:
    """Map each canonical field to the source header that provides it.

    Matching is case-insensitive and surrounding whitespace is ignored. For
    each field the first alias present in the headers wins, regardless of
    column order. A header is claimed by at most one field.

    Args:
        headers: Column names (or property keys) from the source.
        synonyms: Alias table. Defaults to FIELD_SYNONYMS.

    Returns:
        Dictionary mapping canonical field -> original header, or None when
        no alias matched.
    """
    synonyms = synonyms or FIELD_SYNONYMS

    by_lower: Dict[str, str] = {}
    for header in headers:
        key = str(header).strip().lower()
        by_lower.setdefault(key, header)

    mapping: Dict[str, Optional[str]] = {}
    claimed = set()
    for field_name, aliases in synonyms.items():
        mapping[field_name] = None
        for alias in aliases:
            header = by_lower.get(alias)
            if header is not None and header not in claimed:
                mapping[field_name] = header
                claimed.add(header)
                break

    return mapping


def has_coordinates(mapping: Dict[str, Optional[str]]) -> bool:
    """Return True when both coordinate fields were resolved."""
    return all(mapping.get(name) is not None for name in COORDINATE_FIELDS)
