from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from app.core.engine_config import EngineConfig
from app.core.errors import ValidationError
from app.models import (
    BorrowerProfile,
    CareerGoal,
    CareerStage,
    Confidence,
    EmployerType,
    EmploymentInfo,
    LoanAccount,
    LoanKind,
    OptimizationInput,
    StrategyType,
)
from app.services import OptimizationEngine

AS_OF = date(2025, 1, 15)


def _case_study_engine() -> OptimizationEngine:
    # Guideline and flat growth chosen so the IDR payment lands on $387/month.
    base = EngineConfig(poverty_guideline=Decimal("12373.33"))
    config = replace(base, growth_rates={**base.growth_rates, CareerStage.RESIDENT_FELLOW: Decimal("0")})
    return OptimizationEngine(config)


def _fellow_request(
    employer_type: EmployerType = EmployerType.NONPROFIT_501C3,
    goals: CareerGoal = CareerGoal.ACADEMIC_MEDICINE,
) -> OptimizationInput:
    return OptimizationInput(
        profile=BorrowerProfile(
            specialty="pediatrics",
            career_stage=CareerStage.RESIDENT_FELLOW,
            career_goals=goals,
        ),
        federal_loans=(
            LoanAccount(
                balance=Decimal("285000"),
                interest_rate_pct=Decimal("0"),
                kind=LoanKind.FEDERAL,
                loan_type="Direct Consolidation",
            ),
        ),
        employment=EmploymentInfo(employer_type=employer_type, annual_salary=Decimal("65000")),
    )


def test_pediatric_fellow_case_study():
    result = _case_study_engine().optimize(_fellow_request(), AS_OF)

    pslf = result.pslf_analysis
    assert pslf is not None
    assert pslf.monthly_payment == Decimal("387.00")
    assert pslf.total_paid == Decimal("46440.00")
    assert pslf.forgiven_amount == Decimal("238560.00")
    assert pslf.tax_on_forgiveness == Decimal("64411.20")
    assert pslf.net_cost == Decimal("110851.20")

    recommendation = result.recommendation
    assert recommendation.recommended_strategy is StrategyType.PSLF
    assert recommendation.confidence is Confidence.HIGH
    assert recommendation.chosen is pslf
    assert recommendation.alternative is result.refinancing_analysis.recommended

    refinancing = result.refinancing_analysis
    assert refinancing.affordable_scenarios == ()
    assert (refinancing.recommended.rate_pct, refinancing.recommended.term_years) == (Decimal("3.5"), 5)
    assert refinancing.approval_odds == 40

    assert abs(result.savings.vs_standard_plan - Decimal("343200")) / Decimal("343200") < Decimal("0.015")
    assert result.savings.vs_alternative == (refinancing.recommended.total_paid - pslf.net_cost).quantize(Decimal("1"))

    assert len(result.detailed_projections.rows) == 10
    assert result.tax_implications.implications[0].year == 2035
    assert result.implementation_steps[0].title == "Verify Employment Eligibility"
    assert result.as_of == AS_OF


def test_private_employer_gets_refinancing_only():
    result = _case_study_engine().optimize(_fellow_request(employer_type=EmployerType.PRIVATE), AS_OF)

    assert result.pslf_eligibility.is_eligible is False
    assert result.pslf_analysis is None
    assert result.recommendation.recommended_strategy is StrategyType.REFINANCE
    assert result.recommendation.alternative is None
    assert result.tax_implications.implications == ()
    assert result.detailed_projections.strategy is StrategyType.REFINANCE


def test_optimization_is_idempotent():
    engine = OptimizationEngine(EngineConfig())
    request = _fellow_request()

    first = engine.optimize(request, AS_OF)
    second = engine.optimize(request, AS_OF)

    assert first == second


def test_salary_falls_back_to_table_estimate():
    engine = OptimizationEngine(EngineConfig())
    request = OptimizationInput(
        profile=BorrowerProfile(
            specialty="Surgery",
            career_stage=CareerStage.NEW_ATTENDING,
            career_goals=CareerGoal.PRIVATE_PRACTICE,
        ),
        private_loans=(
            LoanAccount(balance=Decimal("300000"), interest_rate_pct=Decimal("7.2"), kind=LoanKind.PRIVATE),
        ),
    )

    assert engine.resolve_salary(request) == Decimal("450000")
    result = engine.optimize(request, AS_OF)
    assert result.refinancing_analysis.recommended.is_affordable is True
    assert result.refinancing_analysis.approval_odds == 95


def test_invalid_inputs_are_rejected_before_running():
    with pytest.raises(ValidationError):
        LoanAccount(balance=Decimal("-1"), interest_rate_pct=Decimal("5"), kind=LoanKind.FEDERAL)

    with pytest.raises(ValidationError):
        LoanAccount(balance=Decimal("1000"), interest_rate_pct=Decimal("101"), kind=LoanKind.FEDERAL)

    with pytest.raises(ValidationError):
        OptimizationInput(
            profile=BorrowerProfile(
                specialty="pediatrics",
                career_stage=CareerStage.RESIDENT_FELLOW,
                career_goals=CareerGoal.NOT_SURE,
            ),
            federal_loans=(
                LoanAccount(balance=Decimal("1000"), interest_rate_pct=Decimal("5"), kind=LoanKind.PRIVATE),
            ),
        )


def test_reported_zero_salary_is_not_replaced_by_table_estimate():
    engine = OptimizationEngine(EngineConfig())
    request = OptimizationInput(
        profile=BorrowerProfile(
            specialty="surgery",
            career_stage=CareerStage.NEW_ATTENDING,
            career_goals=CareerGoal.ACADEMIC_MEDICINE,
        ),
        federal_loans=(
            LoanAccount(
                balance=Decimal("200000"),
                interest_rate_pct=Decimal("6.8"),
                kind=LoanKind.FEDERAL,
                loan_type="Direct Unsubsidized",
            ),
        ),
        employment=EmploymentInfo(employer_type=EmployerType.ACADEMIC, annual_salary=Decimal("0")),
    )

    assert engine.resolve_salary(request) == Decimal("0")
    result = engine.optimize(request, AS_OF)

    assert result.pslf_analysis is not None
    assert result.pslf_analysis.monthly_payment == Decimal("0")
    refinancing = result.refinancing_analysis
    assert all(s.debt_to_income_ratio == Decimal("0") for s in refinancing.scenarios)
    assert all(s.eligibility_tier == "challenging" for s in refinancing.scenarios)
    assert refinancing.approval_odds == 40


@pytest.mark.parametrize("specialty", ["", "   "])
def test_blank_specialty_is_rejected(specialty):
    with pytest.raises(ValidationError, match="specialty"):
        BorrowerProfile(
            specialty=specialty,
            career_stage=CareerStage.RESIDENT_FELLOW,
            career_goals=CareerGoal.ACADEMIC_MEDICINE,
        )
