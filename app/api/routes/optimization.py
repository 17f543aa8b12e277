from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from app.api.deps import get_clock, get_engine, require_api_key
from app.models import (
    BorrowerProfile,
    CareerGoal,
    CareerStage,
    EmployerType,
    EmploymentInfo,
    ExtractedLoanData,
    LoanAccount,
    LoanKind,
    OptimizationInput,
    OptimizationResult,
    PSLFScenario,
    RefinanceScenario,
    RepaymentScenario,
)
from app.schemas.request import LoanAccountSchema, OptimizationRequest
from app.schemas.response import (
    ImplementationStepSchema,
    InterestDeductionSchema,
    LoanSummarySchema,
    MilestoneSchema,
    OptimizationResponse,
    ProjectionRowSchema,
    ProjectionSchema,
    PSLFEligibilitySchema,
    PSLFScenarioSchema,
    RecommendationSchema,
    RefinanceScenarioSchema,
    RefinancingAnalysisSchema,
    RuleResultSchema,
    SavingsSchema,
    ScenarioSchema,
    TaxImplicationSchema,
    TaxImplicationsSchema,
)
from app.services import OptimizationEngine

router = APIRouter(prefix="/v1", tags=["optimization"], dependencies=[Depends(require_api_key)])


@router.post(
    "/optimization",
    response_model=OptimizationResponse,
    response_model_by_alias=True,
    summary="Recommend a PSLF or refinancing repayment strategy",
)
def optimize_repayment(
    payload: OptimizationRequest,
    engine: OptimizationEngine = Depends(get_engine),
    today: date = Depends(get_clock),
) -> OptimizationResponse:
    request = _to_domain(payload)
    result = engine.optimize(request, now=payload.as_of or today)
    return _to_response(result)


def _to_domain(payload: OptimizationRequest) -> OptimizationInput:
    loan_data = payload.loan_data
    profile = payload.user_profile
    extracted = loan_data.extracted_data
    employment = loan_data.employment

    def map_loans(loans: list[LoanAccountSchema], kind: LoanKind) -> tuple[LoanAccount, ...]:
        return tuple(LoanAccount.from_dict(loan.model_dump(), kind=kind) for loan in loans)

    return OptimizationInput(
        profile=BorrowerProfile(
            specialty=profile.specialty,
            career_stage=CareerStage.from_raw(profile.career_stage, field="careerStage"),
            career_goals=CareerGoal.from_raw(profile.career_goals, field="careerGoals"),
            state=profile.state,
        ),
        federal_loans=map_loans(loan_data.federal_loans, LoanKind.FEDERAL),
        private_loans=map_loans(loan_data.private_loans, LoanKind.PRIVATE),
        extracted=ExtractedLoanData(
            current_payment_plan=extracted.current_payment_plan,
            monthly_payment=extracted.monthly_payment,
            pslf_payment_count=extracted.pslf_payment_count,
        ),
        employment=EmploymentInfo(
            employer_type=EmployerType.parse(employment.employer_type),
            pslf_eligible=employment.pslf_eligible,
            annual_salary=employment.annual_salary,
        ),
    )


def _map_pslf(scenario: PSLFScenario) -> PSLFScenarioSchema:
    return PSLFScenarioSchema(
        monthly_payment=scenario.monthly_payment,
        total_paid=scenario.total_paid,
        years_remaining=scenario.years_remaining,
        payments_made=scenario.payments_made,
        payments_remaining=scenario.payments_remaining,
        forgiven_amount=scenario.forgiven_amount,
        tax_on_forgiveness=scenario.tax_on_forgiveness,
        net_cost=scenario.net_cost,
        final_salary=scenario.final_salary,
        completion_age=scenario.completion_age,
        payment_plan=scenario.payment_plan,
        confidence=scenario.confidence,
        requirements=list(scenario.requirements),
    )


def _map_refinance(scenario: RefinanceScenario) -> RefinanceScenarioSchema:
    return RefinanceScenarioSchema(
        rate=scenario.rate_pct,
        term_years=scenario.term_years,
        monthly_payment=scenario.monthly_payment,
        total_paid=scenario.total_paid,
        total_interest=scenario.total_interest,
        debt_to_income_ratio=scenario.debt_to_income_ratio,
        is_affordable=scenario.is_affordable,
        eligibility=scenario.eligibility_tier,
        approval_odds=scenario.approval_odds,
        completion_age=scenario.completion_age,
        confidence=scenario.confidence,
    )


def _map_scenario(scenario: RepaymentScenario) -> ScenarioSchema:
    if isinstance(scenario, PSLFScenario):
        return _map_pslf(scenario)
    return _map_refinance(scenario)


def _to_response(result: OptimizationResult) -> OptimizationResponse:
    summary = result.loan_summary
    eligibility = result.pslf_eligibility
    refinancing = result.refinancing_analysis
    recommendation = result.recommendation
    projections = result.detailed_projections
    taxes = result.tax_implications
    deduction = taxes.interest_deduction

    return OptimizationResponse(
        as_of=result.as_of,
        loan_summary=LoanSummarySchema(
            total_balance=summary.total_balance,
            total_federal_balance=summary.total_federal_balance,
            total_private_balance=summary.total_private_balance,
            weighted_federal_rate=summary.weighted_federal_rate_pct,
            weighted_private_rate=summary.weighted_private_rate_pct,
            federal_loan_count=summary.federal_loan_count,
            private_loan_count=summary.private_loan_count,
            current_payment_plan=summary.current_payment_plan,
            current_monthly_payment=summary.current_monthly_payment,
            pslf_payments_made=summary.pslf_payments_made,
        ),
        pslf_eligibility=PSLFEligibilitySchema(
            is_eligible=eligibility.is_eligible,
            reasons=list(eligibility.reasons),
            rule_results=[
                RuleResultSchema(rule=rule.rule, passed=rule.passed, detail=rule.detail)
                for rule in eligibility.rule_results
            ],
        ),
        pslf_analysis=_map_pslf(result.pslf_analysis) if result.pslf_analysis else None,
        refinancing_analysis=RefinancingAnalysisSchema(
            available_scenarios=[_map_refinance(scenario) for scenario in refinancing.scenarios],
            recommended_scenario=_map_refinance(refinancing.recommended),
            best_rate=refinancing.best_rate_pct,
            estimated_approval_odds=refinancing.approval_odds,
        ),
        recommendation=RecommendationSchema(
            recommended_strategy=recommendation.recommended_strategy,
            reason=recommendation.reason,
            confidence=recommendation.confidence,
            note=recommendation.note,
            decision_rule=recommendation.rule,
            primary_option=_map_scenario(recommendation.chosen),
            alternative_option=(
                _map_scenario(recommendation.alternative) if recommendation.alternative is not None else None
            ),
        ),
        savings=SavingsSchema(
            potential_savings=result.savings.potential_savings,
            vs_standard_plan=result.savings.vs_standard_plan,
            vs_alternative=result.savings.vs_alternative,
        ),
        detailed_projections=ProjectionSchema(
            strategy=projections.strategy,
            annual_summary=[
                ProjectionRowSchema(
                    year=row.year,
                    salary=row.salary,
                    monthly_payment=row.monthly_payment,
                    annual_payment=row.annual_payment,
                    payments_remaining=row.payments_remaining,
                    remaining_term=row.remaining_term_years,
                )
                for row in projections.rows
            ],
            milestones=[
                MilestoneSchema(year=milestone.year, event=milestone.event, action=milestone.action)
                for milestone in projections.milestones
            ],
        ),
        tax_implications=TaxImplicationsSchema(
            future_years=[
                TaxImplicationSchema(
                    year=item.year,
                    taxable_forgiveness=item.taxable_forgiveness,
                    estimated_tax=item.estimated_tax,
                    description=item.description,
                )
                for item in taxes.implications
            ],
            interest_deduction=InterestDeductionSchema(
                max_benefit=deduction.max_deduction,
                single_phase_out=list(deduction.single_phase_out),
                married_phase_out=list(deduction.married_phase_out),
                description=deduction.description,
            ),
            annual_set_aside=taxes.annual_set_aside,
        ),
        implementation_steps=[
            ImplementationStepSchema(
                step=step.order,
                title=step.title,
                description=step.description,
                timeline=step.timeline,
                priority=step.priority,
                resources=list(step.resources),
            )
            for step in result.implementation_steps
        ],
    )
