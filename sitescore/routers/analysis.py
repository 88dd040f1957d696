# sitescore/routers/analysis.py
# -----------------------------------------------------------------------------
# /analysis/score     : success score only
# /analysis/demand    : seasonal demand curve (base_score optional)
# /analysis/kpis      : KPI set from competitors + score
# /analysis/location  : full report (score -> demand -> KPIs)
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException
from loguru import logger

from sitescore.schemas.analysis import (
    AnalysisInputs,
    AnalysisReport,
    DemandRequest,
    DemandResponse,
    KPIRequest,
    KPISet,
    ScoreResponse,
)
from sitescore.services.analyzer import analyze_location
from sitescore.services.demand import generate_seasonal_demand
from sitescore.services.kpi import compute_kpis
from sitescore.services.scoring import compute_success_score

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("/score", response_model=ScoreResponse)
def score(req: AnalysisInputs):
    try:
        return ScoreResponse(success_score=compute_success_score(req))
    except Exception as e:
        logger.exception("[analysis] score failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/demand", response_model=DemandResponse)
def demand(req: DemandRequest):
    try:
        base = req.base_score
        if base is None:
            base = compute_success_score(req)
        return DemandResponse(
            base_score=base,
            seasonal_demand=generate_seasonal_demand(req, base_score=base),
        )
    except Exception as e:
        logger.exception("[analysis] demand failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/kpis", response_model=KPISet)
def kpis(req: KPIRequest):
    try:
        return compute_kpis(req.businesses, req.success_score, req.ndvi_data)
    except Exception as e:
        logger.exception("[analysis] kpis failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/location", response_model=AnalysisReport)
def location(req: AnalysisInputs):
    try:
        return analyze_location(req)
    except Exception as e:
        logger.exception("[analysis] location report failed")
        raise HTTPException(status_code=500, detail=str(e))
