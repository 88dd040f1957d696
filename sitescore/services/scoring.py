# sitescore/services/scoring.py
# -----------------------------------------------------------------------------
# Success score (70~85)
# - baseline 70 + NDVI / satellite / competitor-density points
# - +3 when neither satellite nor NDVI data came back
# - density ceiling (>=70 -> 81, >=50 -> 78), then hard clamp to [70, 85]
# -----------------------------------------------------------------------------
from loguru import logger

from sitescore.schemas.analysis import AnalysisInputs
from sitescore.services.features import (
    clamp,
    competitor_density_points,
    finite_or_zero,
    ndvi_changes,
    round_half_up,
)

SCORE_BASELINE = 70.0
SCORE_MIN, SCORE_MAX = 70, 85

NDVI_CAP = 4.0
SATELLITE_CAP = 3.5
MISSING_DATA_BONUS = 3.0

# (min competitors, ceiling), checked in order
DENSITY_CEILINGS = ((70, 81), (50, 78))


def ndvi_points(inputs: AnalysisInputs) -> float:
    if inputs.ndvi_data is None or inputs.ndvi_data.change_analysis is None:
        return 0.0
    urban, veg, total = (abs(v) for v in ndvi_changes(inputs.ndvi_data))
    return min(urban * 0.3 + veg * 0.2 + total * 0.1, NDVI_CAP)


def satellite_points(inputs: AnalysisInputs) -> float:
    sat = inputs.satellite_data
    if sat is None or sat.statistics is None:
        return 0.0
    change = abs(finite_or_zero(sat.statistics.change_percentage))
    return min(change * 0.2, SATELLITE_CAP)


def compute_success_score(inputs: AnalysisInputs) -> int:
    """
    Bounded viability score for a location. Never raises; missing upstream
    data counts as zero contribution.
    """
    competitor_count = len(inputs.businesses)
    score = SCORE_BASELINE

    ndvi = ndvi_points(inputs)
    sat = satellite_points(inputs)
    density = competitor_density_points(competitor_count)
    score += ndvi
    score += sat
    score += density

    no_data = inputs.satellite_data is None and inputs.ndvi_data is None
    if no_data:
        score += MISSING_DATA_BONUS

    final = round_half_up(score)
    for min_count, ceiling in DENSITY_CEILINGS:
        if competitor_count >= min_count:
            final = min(final, ceiling)
            break

    final = int(clamp(final, SCORE_MIN, SCORE_MAX))
    logger.debug(
        f"[score] competitors={competitor_count} ndvi=+{ndvi:.2f} "
        f"satellite=+{sat:.2f} density=+{density} no_data_bonus={no_data} "
        f"-> {final}"
    )
    return final
