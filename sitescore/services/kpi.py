# sitescore/services/kpi.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from sitescore.schemas.analysis import CompetitorRecord, KPISet, NDVIAnalysis
from sitescore.services.features import finite_or_zero, ndvi_changes, round_half_up


def mean_rating(businesses: Sequence[CompetitorRecord]) -> float:
    """Missing ratings count as 0. Empty -> 0."""
    if not businesses:
        return 0.0
    return sum(finite_or_zero(b.rating) for b in businesses) / len(businesses)


def round_1dp(x: float) -> float:
    return float(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_kpis(
    businesses: Sequence[CompetitorRecord],
    success_score: int,
    ndvi_data: Optional[NDVIAnalysis] = None,
) -> KPISet:
    # revenue uses the raw mean; only the reported rating is rounded
    avg = mean_rating(businesses)
    count = len(businesses)
    urban, _, _ = ndvi_changes(ndvi_data)

    # lower is better: urban growth and competition both push rent up
    rent = round_half_up(max(50.0, 90 - urban * 0.5 - count * 0.3))

    return KPISet(
        avg_rating=round_1dp(avg),
        monthly_demand=round_half_up(10000 + success_score * 150),
        rent_sensitivity=rent,
        competitor_count=count,
        revenue_potential=round_half_up(50000 + success_score * 800 + avg * 5000),
    )
