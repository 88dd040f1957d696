# sitescore/services/demand.py
# -----------------------------------------------------------------------------
# Seasonal demand curve (12 points, Jan..Dec)
# - fixed base pattern, shifted by a deterministic per-location offset
# - vegetation boost for outdoor businesses (Mar~Sep), urban boost all year
# - month-over-month change is measured against the unadjusted base pattern
# -----------------------------------------------------------------------------
from __future__ import annotations

from loguru import logger

from sitescore.schemas.analysis import MONTHS, AnalysisInputs, DemandPoint
from sitescore.services.features import (
    clamp,
    is_outdoor_business,
    location_offset,
    ndvi_changes,
    round_half_up,
)

BASE_PATTERN = (85, 78, 92, 88, 95, 76, 76, 89, 94, 91, 87, 98)

ADJUSTED_MIN, ADJUSTED_MAX = 75, 100
DEMAND_MIN, DEMAND_MAX = 70, 100
GROWING_SEASON = range(2, 9)  # Mar..Sep

VEG_FACTOR, VEG_CAP = 0.2, 10.0
URBAN_FACTOR, URBAN_CAP = 0.15, 8.0


def score_multiplier(base_score: float) -> float:
    if base_score >= 70:
        return 1.0
    return max(base_score / 70, 0.85)


def adjusted_pattern(offset: float) -> list[int]:
    return [
        int(clamp(round_half_up(v + offset), ADJUSTED_MIN, ADJUSTED_MAX))
        for v in BASE_PATTERN
    ]


def generate_seasonal_demand(
    inputs: AnalysisInputs, base_score: int
) -> list[DemandPoint]:
    offset = location_offset(inputs.location)
    pattern = adjusted_pattern(offset)
    outdoor = is_outdoor_business(inputs.business_type)
    urban, veg, _ = ndvi_changes(inputs.ndvi_data)
    mult = score_multiplier(base_score)

    out: list[DemandPoint] = []
    for i, month in enumerate(MONTHS):
        demand = float(pattern[i])
        if veg > 0 and outdoor and i in GROWING_SEASON:
            demand += min(veg * VEG_FACTOR, VEG_CAP)
        if urban > 0:
            demand += min(urban * URBAN_FACTOR, URBAN_CAP)
        demand *= mult

        change = round_half_up(demand - BASE_PATTERN[i - 1] * mult) if i > 0 else 0
        out.append(
            DemandPoint(
                month=month,
                demand=round_half_up(clamp(demand, DEMAND_MIN, DEMAND_MAX)),
                change_from_previous=change,
            )
        )

    logger.debug(
        f"[demand] offset={offset:+.3f} outdoor={outdoor} urban={urban} "
        f"veg={veg} multiplier={mult:.3f}"
    )
    return out
