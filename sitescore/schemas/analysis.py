# sitescore/schemas/analysis.py
# -----------------------------------------------------------------------------
# Value objects for the scoring engine
# - upstream payloads (competitors, satellite change, NDVI) come in as-is;
#   unknown keys are ignored
# - everything is frozen: built once per request, never mutated
# -----------------------------------------------------------------------------
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal, Optional, get_args

Month = Literal["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
MONTHS: List[str] = list(get_args(Month))


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CompetitorRecord(Frozen):
    name: str = ""
    rating: Optional[float] = Field(None, ge=0, le=5)  # missing ⇒ 0 in KPIs
    distance_km: float = Field(0.0, ge=0)
    size_seats: int = Field(0, ge=0)


class ChangeStatistics(Frozen):
    change_percentage: Optional[float] = None
    changed_pixels: Optional[int] = None
    total_pixels: Optional[int] = None


class ChangeDetectionResult(Frozen):
    """Satellite change-detection response (only `statistics` is scored)."""

    success: bool = True
    message: Optional[str] = None
    coordinates: Optional[Dict[str, float]] = None
    dates: Optional[Dict[str, str]] = None
    statistics: Optional[ChangeStatistics] = None


class NDVIChange(Frozen):
    urban_change_percentage: Optional[float] = None
    vegetation_change_percentage: Optional[float] = None
    total_change_percentage: Optional[float] = None


class NDVIAnalysis(Frozen):
    """NDVI response (only `change_analysis` is scored)."""

    change_analysis: Optional[NDVIChange] = None


class Location(Frozen):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class AnalysisInputs(Frozen):
    businesses: List[CompetitorRecord] = Field(default_factory=list)
    satellite_data: Optional[ChangeDetectionResult] = None
    ndvi_data: Optional[NDVIAnalysis] = None
    business_type: str
    location: Optional[Location] = None


class DemandRequest(AnalysisInputs):
    base_score: Optional[int] = None  # None ⇒ computed success score


class KPIRequest(Frozen):
    businesses: List[CompetitorRecord] = Field(default_factory=list)
    success_score: int
    ndvi_data: Optional[NDVIAnalysis] = None


class ScoreResponse(Frozen):
    success_score: int = Field(ge=70, le=85)


class DemandPoint(Frozen):
    month: Month
    demand: int = Field(ge=70, le=100)
    change_from_previous: int


class DemandResponse(Frozen):
    base_score: int
    seasonal_demand: List[DemandPoint]


class KPISet(Frozen):
    avg_rating: float
    monthly_demand: int
    rent_sensitivity: int = Field(ge=50)
    competitor_count: int = Field(ge=0)
    revenue_potential: int


class AnalysisReport(Frozen):
    business_type: str
    location: Optional[Location] = None
    success_score: int = Field(ge=70, le=85)
    seasonal_demand: List[DemandPoint]
    kpis: KPISet
