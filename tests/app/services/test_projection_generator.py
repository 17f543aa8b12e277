from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.models import (
    CareerStage,
    Confidence,
    PSLFScenario,
    Recommendation,
    RefinanceScenario,
    StrategyType,
)
from app.services import ProjectionGenerator, PSLFProjector, TaxEstimator


def _generator() -> tuple[ProjectionGenerator, PSLFProjector]:
    config = EngineConfig()
    projector = PSLFProjector(config, TaxEstimator(config))
    return ProjectionGenerator(config, projector), projector


def _recommend(chosen) -> Recommendation:
    return Recommendation(chosen=chosen, alternative=None, reason="", confidence=Confidence.HIGH, rule="test")


def test_pslf_schedule_rounds_partial_years_up():
    generator, projector = _generator()
    scenario = PSLFScenario(
        monthly_payment=Decimal("346.04"),
        total_paid=Decimal("60000"),
        years_remaining=Decimal("9.5"),
        payments_made=6,
        payments_remaining=114,
        forgiven_amount=Decimal("250000"),
        tax_on_forgiveness=Decimal("67500"),
        starting_salary=Decimal("65000"),
        final_salary=Decimal("228668.25"),
        completion_age=Decimal("37.5"),
        confidence=Confidence.HIGH,
    )

    schedule = generator.generate(_recommend(scenario), Decimal("65000"), CareerStage.RESIDENT_FELLOW)

    assert schedule.strategy is StrategyType.PSLF
    assert [row.year for row in schedule.rows] == list(range(1, 11))
    assert schedule.rows[0].salary == Decimal("65000.00")
    assert schedule.rows[1].salary == Decimal("74750.00")
    assert schedule.rows[0].monthly_payment == projector.idr_monthly_payment(Decimal("65000"))
    assert schedule.rows[0].annual_payment == schedule.rows[0].monthly_payment * 12
    assert schedule.rows[0].payments_remaining == 102
    assert schedule.rows[-1].payments_remaining == 0
    assert [milestone.year for milestone in schedule.milestones] == [1, 5, 10]


def test_completed_pslf_still_has_first_year_milestones():
    generator, _ = _generator()
    scenario = PSLFScenario(
        monthly_payment=Decimal("0"),
        total_paid=Decimal("0"),
        years_remaining=Decimal("0"),
        payments_made=120,
        payments_remaining=0,
        forgiven_amount=Decimal("100000"),
        tax_on_forgiveness=Decimal("27000"),
        starting_salary=Decimal("65000"),
        final_salary=Decimal("65000"),
        completion_age=Decimal("28"),
        confidence=Confidence.HIGH,
    )

    schedule = generator.generate(_recommend(scenario), Decimal("65000"), CareerStage.RESIDENT_FELLOW)

    assert schedule.rows == ()
    assert [milestone.year for milestone in schedule.milestones] == [1, 1, 1]


def test_refinance_schedule_counts_down_the_term():
    generator, _ = _generator()
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

    schedule = generator.generate(_recommend(scenario), Decimal("400000"), CareerStage.NEW_ATTENDING)

    assert schedule.strategy is StrategyType.REFINANCE
    assert len(schedule.rows) == 10
    assert all(row.monthly_payment == Decimal("2025.90") for row in schedule.rows)
    assert [row.remaining_term_years for row in schedule.rows] == list(range(9, -1, -1))
    assert schedule.rows[1].salary == Decimal("420000.00")
    assert all(row.payments_remaining is None for row in schedule.rows)
    assert [milestone.year for milestone in schedule.milestones] == [1, 5, 10]
    assert schedule.milestones[-1].action == "celebration"
