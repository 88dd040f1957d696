# sitescore/services/features.py

import math
from typing import Optional, Tuple

from sitescore.schemas.analysis import Location, NDVIAnalysis

OUTDOOR_KEYWORDS = ("restaurant", "cafe", "retail")

# (min competitors, points), highest tier first; lower bound inclusive
DENSITY_TIERS = ((70, 11.0), (50, 8.0), (30, 5.0), (15, 3.0), (5, 1.0))
DENSITY_FLOOR = 0.5


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves toward +inf (73.5 -> 74, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))


def clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


def finite_or_zero(x: Optional[float]) -> float:
    """None, NaN and +-inf all count as no signal."""
    if x is None or not math.isfinite(x):
        return 0.0
    return x


def competitor_density_points(competitor_count: int) -> float:
    """
    Competitor count read as proven demand, not as a penalty.
    """
    for min_count, points in DENSITY_TIERS:
        if competitor_count >= min_count:
            return points
    return DENSITY_FLOOR


def is_outdoor_business(business_type: str) -> bool:
    bt = (business_type or "").lower()
    return any(k in bt for k in OUTDOOR_KEYWORDS)


def location_hash(location: Optional[Location]) -> float:
    """
    Deterministic trig hash in [0, 1): frac(|sin(lat*12.9898 + lng*78.233) * 43758.5453|).
    No location -> 0.5 (zero offset).
    """
    if location is None:
        return 0.5
    x = math.sin(location.lat * 12.9898 + location.lng * 78.233) * 43758.5453
    return math.fmod(abs(x), 1.0)


def location_offset(location: Optional[Location]) -> float:
    """Per-location demand shift in [-3, +3]."""
    return location_hash(location) * 6 - 3


def ndvi_changes(ndvi: Optional[NDVIAnalysis]) -> Tuple[float, float, float]:
    """(urban, vegetation, total) change percentages, 0 where absent."""
    ca = ndvi.change_analysis if ndvi is not None else None
    if ca is None:
        return 0.0, 0.0, 0.0
    return (
        finite_or_zero(ca.urban_change_percentage),
        finite_or_zero(ca.vegetation_change_percentage),
        finite_or_zero(ca.total_change_percentage),
    )
