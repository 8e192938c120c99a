"""Coarse latitude bands used as region labels for untagged records."""

from typing import Tuple


# (exclusive lower latitude bound, band name), checked north to south
LATITUDE_BANDS: Tuple[Tuple[float, str], ...] = (
    (60.0, "Arctic"),
    (30.0, "Northern"),
    (0.0, "Tropical North"),
    (-30.0, "Tropical South"),
    (-60.0, "Southern"),
)
SOUTHERNMOST_BAND = "Antarctic"


def latitude_band(lat: float) -> str:
    """Name the latitude band containing `lat`.

    Band edges belong to the band on their south side, so the equator is
    "Tropical South" and 60.0 is "Northern".
    """
    for lower, name in LATITUDE_BANDS:
        if lat > lower:
            return name
    return SOUTHERNMOST_BAND
