# tests/test_scoring.py
import pytest

from sitescore.schemas.analysis import AnalysisInputs, CompetitorRecord
from sitescore.services.features import competitor_density_points, round_half_up
from sitescore.services.scoring import compute_success_score


def _competitors(n: int) -> list[CompetitorRecord]:
    return [CompetitorRecord(name=f"shop {i}", rating=4.0) for i in range(n)]


def _inputs(n: int = 0, satellite=None, ndvi=None) -> AnalysisInputs:
    return AnalysisInputs.model_validate(
        {
            "businesses": [c.model_dump() for c in _competitors(n)],
            "satellite_data": satellite,
            "ndvi_data": ndvi,
            "business_type": "cafe",
        }
    )


def test_dense_area_without_imagery_is_capped_at_81():
    # 70 + 11 + 3 = 84 -> density ceiling 81
    assert compute_success_score(_inputs(70)) == 81


def test_busy_area_is_capped_at_78():
    # 70 + 8 + 3 = 81 -> ceiling 78
    assert compute_success_score(_inputs(50)) == 78


def test_satellite_contribution_is_capped():
    sat = {"statistics": {"change_percentage": 500}}
    # 70 + 3.5 + 0.5 = 74
    assert compute_success_score(_inputs(0, satellite=sat)) == 74


def test_missing_data_bonus_rounds_half_up():
    # 70 + 0.5 + 3 = 73.5 -> 74
    assert compute_success_score(_inputs(2)) == 74


def test_ndvi_uses_magnitudes():
    ndvi = {
        "change_analysis": {
            "urban_change_percentage": -5,
            "vegetation_change_percentage": -2.5,
            "total_change_percentage": 0,
        }
    }
    # 1.5 + 0.5 + 0.5 (density) = 72.5 -> 73
    assert compute_success_score(_inputs(0, ndvi=ndvi)) == 73


def test_ndvi_without_change_analysis_scores_nothing_and_blocks_bonus():
    # payload present but empty: no NDVI points, no missing-data bonus
    assert compute_success_score(_inputs(0, ndvi={})) == 71


def test_satellite_without_percentage_counts_as_zero():
    sat = {"statistics": {"changed_pixels": 10, "total_pixels": 100}}
    assert compute_success_score(_inputs(5, satellite=sat)) == 71


@pytest.mark.parametrize("n", [0, 4, 5, 14, 15, 29, 30, 49, 50, 69, 70, 500])
@pytest.mark.parametrize("change", [0, 12.5, -80, 1e6])
def test_score_stays_in_band(n, change):
    sat = {"statistics": {"change_percentage": change}}
    ndvi = {
        "change_analysis": {
            "urban_change_percentage": change,
            "vegetation_change_percentage": change,
            "total_change_percentage": change,
        }
    }
    for s, v in ((None, None), (sat, None), (None, ndvi), (sat, ndvi)):
        assert 70 <= compute_success_score(_inputs(n, s, v)) <= 85


def test_score_is_deterministic():
    sat = {"statistics": {"change_percentage": 12.5}}
    a = compute_success_score(_inputs(33, satellite=sat))
    b = compute_success_score(_inputs(33, satellite=sat))
    assert a == b == 78  # 70 + 2.5 + 5 = 77.5


@pytest.mark.parametrize(
    "n, points",
    [(0, 0.5), (4, 0.5), (5, 1), (15, 3), (30, 5), (49, 5), (50, 8), (69, 8), (70, 11)],
)
def test_density_tiers(n, points):
    assert competitor_density_points(n) == points


def test_round_half_up():
    assert round_half_up(73.5) == 74
    assert round_half_up(72.5) == 73
    assert round_half_up(-2.5) == -2
    assert round_half_up(-5.95) == -6


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_signals_count_as_zero(bad):
    sat = {"statistics": {"change_percentage": bad}}
    ndvi = {
        "change_analysis": {
            "urban_change_percentage": bad,
            "vegetation_change_percentage": bad,
            "total_change_percentage": 5,
        }
    }
    # satellite present but unusable: 70 + 0.5 (density), no missing-data bonus
    assert compute_success_score(_inputs(0, satellite=sat)) == 71
    # only total_change survives: 70 + 0.5 + 0.5 = 71
    assert compute_success_score(_inputs(0, ndvi=ndvi)) == 71
