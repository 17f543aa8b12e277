from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal, Optional, Union

from app.models import Confidence, Priority, StrategyType

from .request import CamelModel


class LoanSummarySchema(CamelModel):
    total_balance: Decimal
    total_federal_balance: Decimal
    total_private_balance: Decimal
    weighted_federal_rate: Decimal
    weighted_private_rate: Decimal
    federal_loan_count: int
    private_loan_count: int
    current_payment_plan: str
    current_monthly_payment: Decimal
    pslf_payments_made: int


class RuleResultSchema(CamelModel):
    rule: str
    passed: bool
    detail: Optional[str] = None


class PSLFEligibilitySchema(CamelModel):
    is_eligible: bool
    reasons: list[str]
    rule_results: list[RuleResultSchema]


class PSLFScenarioSchema(CamelModel):
    strategy: Literal["PSLF"] = "PSLF"
    monthly_payment: Decimal
    total_paid: Decimal
    years_remaining: Decimal
    payments_made: int
    payments_remaining: int
    forgiven_amount: Decimal
    tax_on_forgiveness: Decimal
    net_cost: Decimal
    final_salary: Decimal
    completion_age: Decimal
    payment_plan: str
    confidence: Confidence
    requirements: list[str]


class RefinanceScenarioSchema(CamelModel):
    strategy: Literal["Refinance"] = "Refinance"
    rate: Decimal
    term_years: int
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    debt_to_income_ratio: Decimal
    is_affordable: bool
    eligibility: str
    approval_odds: int
    completion_age: int
    confidence: Confidence


ScenarioSchema = Union[PSLFScenarioSchema, RefinanceScenarioSchema]


class RefinancingAnalysisSchema(CamelModel):
    available_scenarios: list[RefinanceScenarioSchema]
    recommended_scenario: RefinanceScenarioSchema
    best_rate: Decimal
    estimated_approval_odds: int


class RecommendationSchema(CamelModel):
    recommended_strategy: StrategyType
    reason: str
    confidence: Confidence
    note: Optional[str] = None
    decision_rule: str
    primary_option: ScenarioSchema
    alternative_option: Optional[ScenarioSchema] = None


class SavingsSchema(CamelModel):
    potential_savings: Decimal
    vs_standard_plan: Decimal
    vs_alternative: Decimal


class ProjectionRowSchema(CamelModel):
    year: int
    salary: Decimal
    monthly_payment: Decimal
    annual_payment: Decimal
    payments_remaining: Optional[int] = None
    remaining_term: Optional[int] = None


class MilestoneSchema(CamelModel):
    year: int
    event: str
    action: str


class ProjectionSchema(CamelModel):
    strategy: StrategyType
    annual_summary: list[ProjectionRowSchema]
    milestones: list[MilestoneSchema]


class TaxImplicationSchema(CamelModel):
    year: int
    taxable_forgiveness: Decimal
    estimated_tax: Decimal
    description: str


class InterestDeductionSchema(CamelModel):
    max_benefit: Decimal
    single_phase_out: list[Decimal]
    married_phase_out: list[Decimal]
    description: str


class TaxImplicationsSchema(CamelModel):
    future_years: list[TaxImplicationSchema]
    interest_deduction: InterestDeductionSchema
    annual_set_aside: Optional[Decimal] = None


class ImplementationStepSchema(CamelModel):
    step: int
    title: str
    description: str
    timeline: str
    priority: Priority
    resources: list[str]


class OptimizationResponse(CamelModel):
    as_of: date
    loan_summary: LoanSummarySchema
    pslf_eligibility: PSLFEligibilitySchema
    pslf_analysis: Optional[PSLFScenarioSchema] = None
    refinancing_analysis: RefinancingAnalysisSchema
    recommendation: RecommendationSchema
    savings: SavingsSchema
    detailed_projections: ProjectionSchema
    tax_implications: TaxImplicationsSchema
    implementation_steps: list[ImplementationStepSchema]
