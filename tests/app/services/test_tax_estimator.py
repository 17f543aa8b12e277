from datetime import date
from decimal import Decimal

import pytest

from app.core.engine_config import EngineConfig
from app.models import Confidence, PSLFScenario, Recommendation, RefinanceScenario
from app.services import TaxEstimator


def _pslf(years: str, payments_remaining: int, tax: str) -> PSLFScenario:
    return PSLFScenario(
        monthly_payment=Decimal("387.00"),
        total_paid=Decimal("46440.00"),
        years_remaining=Decimal(years),
        payments_made=120 - payments_remaining,
        payments_remaining=payments_remaining,
        forgiven_amount=Decimal("238560.00"),
        tax_on_forgiveness=Decimal(tax),
        starting_salary=Decimal("65000"),
        final_salary=Decimal("65000"),
        completion_age=Decimal("38"),
        confidence=Confidence.HIGH,
    )


@pytest.mark.parametrize(
    ("salary", "expected"),
    [
        ("400000", "0.35"),
        ("399999", "0.32"),
        ("200000", "0.32"),
        ("100000", "0.24"),
        ("99999", "0.22"),
        ("0", "0.22"),
    ],
)
def test_marginal_rate_brackets(salary, expected):
    assert TaxEstimator(EngineConfig()).marginal_rate(Decimal(salary)) == Decimal(expected)


def test_tax_on_forgiveness_adds_state_rate():
    estimator = TaxEstimator(EngineConfig())

    assert estimator.tax_on_forgiveness(Decimal("238560"), Decimal("65000")) == Decimal("64411.20")
    assert estimator.tax_on_forgiveness(Decimal("0"), Decimal("65000")) == Decimal("0")


def test_pslf_summary_schedules_tax_at_forgiveness_year():
    estimator = TaxEstimator(EngineConfig())
    recommendation = Recommendation(
        chosen=_pslf("10", 120, "64411.20"),
        alternative=None,
        reason="",
        confidence=Confidence.HIGH,
        rule="pslf_saves_20_percent",
    )

    summary = estimator.build_summary(recommendation, date(2025, 1, 15))

    assert len(summary.implications) == 1
    implication = summary.implications[0]
    assert implication.year == 2035
    assert implication.taxable_forgiveness == Decimal("238560.00")
    assert implication.estimated_tax == Decimal("64411.20")
    assert summary.annual_set_aside == Decimal("6441.12")


def test_partial_years_round_forgiveness_year_up():
    estimator = TaxEstimator(EngineConfig())
    recommendation = Recommendation(
        chosen=_pslf("5.5", 66, "55000.00"),
        alternative=None,
        reason="",
        confidence=Confidence.HIGH,
        rule="pslf_saves_20_percent",
    )

    summary = estimator.build_summary(recommendation, date(2025, 6, 1))

    assert summary.implications[0].year == 2031
    assert summary.annual_set_aside == Decimal("9166.67")


def test_completed_pslf_sets_aside_whole_tax():
    estimator = TaxEstimator(EngineConfig())
    recommendation = Recommendation(
        chosen=_pslf("0", 0, "64411.20"),
        alternative=None,
        reason="",
        confidence=Confidence.HIGH,
        rule="pslf_saves_20_percent",
    )

    summary = estimator.build_summary(recommendation, date(2025, 1, 15))

    assert summary.implications[0].year == 2025
    assert summary.annual_set_aside == Decimal("64411.20")


def test_refinance_has_no_forgiveness_tax():
    estimator = TaxEstimator(EngineConfig())
    scenario = RefinanceScenario(
        rate_pct=Decimal("4.0"),
        term_years=10,
        monthly_payment=Decimal("2025.90"),
        total_paid=Decimal("243108.00"),
        total_interest=Decimal("43108.00"),
        debt_to_income_ratio=Decimal("0.0608"),
        is_affordable=True,
        eligibility_tier="excellent",
        approval_odds=95,
        completion_age=42,
        confidence=Confidence.HIGH,
    )
    recommendation = Recommendation(
        chosen=scenario, alternative=None, reason="", confidence=Confidence.HIGH, rule="pslf_unavailable"
    )

    summary = estimator.build_summary(recommendation, date(2025, 1, 15))

    assert summary.implications == ()
    assert summary.annual_set_aside is None
    assert summary.interest_deduction.max_deduction == Decimal("2500")
    assert "$2,500" in summary.interest_deduction.description
    assert summary.interest_deduction.single_phase_out == (Decimal("70000"), Decimal("85000"))
