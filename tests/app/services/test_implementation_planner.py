from decimal import Decimal

from app.models import Confidence, Priority, PSLFScenario, Recommendation, RefinanceScenario
from app.services import ImplementationPlanner


def _pslf_recommendation() -> Recommendation:
    scenario = PSLFScenario(
        monthly_payment=Decimal("387.00"),
        total_paid=Decimal("46440.00"),
        years_remaining=Decimal("10"),
        payments_made=0,
        payments_remaining=120,
        forgiven_amount=Decimal("238560.00"),
        tax_on_forgiveness=Decimal("64411.20"),
        starting_salary=Decimal("65000"),
        final_salary=Decimal("65000"),
        completion_age=Decimal("38"),
        confidence=Confidence.HIGH,
    )
    return Recommendation(chosen=scenario, alternative=None, reason="", confidence=Confidence.HIGH, rule="test")


def _refinance_recommendation() -> Recommendation:
    scenario = RefinanceScenario(
        rate_pct=Decimal("3.5"),
        term_years=5,
        monthly_payment=Decimal("3638.36"),
        total_paid=Decimal("218301.60"),
        total_interest=Decimal("18301.60"),
        debt_to_income_ratio=Decimal("0.1092"),
        is_affordable=True,
        eligibility_tier="excellent",
        approval_odds=95,
        completion_age=37,
        confidence=Confidence.HIGH,
    )
    return Recommendation(chosen=scenario, alternative=None, reason="", confidence=Confidence.HIGH, rule="test")


def test_pslf_plan_starts_with_employment_verification():
    steps = ImplementationPlanner().plan(_pslf_recommendation())

    assert [step.order for step in steps] == [1, 2, 3, 4]
    assert steps[0].title == "Verify Employment Eligibility"
    assert steps[0].priority is Priority.CRITICAL
    assert any("Employment Certification" in step.title for step in steps)


def test_refinance_plan_starts_with_comparing_offers():
    steps = ImplementationPlanner().plan(_refinance_recommendation())

    assert [step.order for step in steps] == [1, 2, 3, 4]
    assert steps[0].title == "Compare Refinancing Offers"
    assert "SoFi" in steps[0].resources
    assert all(step.resources for step in steps)
