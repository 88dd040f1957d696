# sitescore/services/analyzer.py
from __future__ import annotations

from loguru import logger

from sitescore.schemas.analysis import AnalysisInputs, AnalysisReport
from sitescore.services.demand import generate_seasonal_demand
from sitescore.services.kpi import compute_kpis
from sitescore.services.scoring import compute_success_score


def analyze_location(inputs: AnalysisInputs) -> AnalysisReport:
    """
    Score first, then feed the score into the demand curve and KPIs.
    Same inputs always give the same report.
    """
    score = compute_success_score(inputs)
    demand = generate_seasonal_demand(inputs, base_score=score)
    kpis = compute_kpis(inputs.businesses, score, inputs.ndvi_data)

    logger.info(
        f"[analysis] type={inputs.business_type!r} "
        f"competitors={kpis.competitor_count} satellite={inputs.satellite_data is not None} "
        f"ndvi={inputs.ndvi_data is not None} score={score}"
    )
    return AnalysisReport(
        business_type=inputs.business_type,
        location=inputs.location,
        success_score=score,
        seasonal_demand=demand,
        kpis=kpis,
    )
