from __future__ import annotations

from app.models import ImplementationStep, Priority, Recommendation, StrategyType

PSLF_STEPS: tuple[ImplementationStep, ...] = (
    ImplementationStep(
        order=1,
        title="Verify Employment Eligibility",
        description="Confirm your employer qualifies for PSLF",
        timeline="Within 1 week",
        priority=Priority.CRITICAL,
        resources=("PSLF Help Tool on StudentAid.gov",),
    ),
    ImplementationStep(
        order=2,
        title="Consolidate Non-Direct Loans",
        description="Consolidate any FFEL or Perkins loans into Direct Loans",
        timeline="2-4 weeks",
        priority=Priority.CRITICAL,
        resources=("Direct Consolidation Loan Application",),
    ),
    ImplementationStep(
        order=3,
        title="Switch to Income-Driven Repayment",
        description="Enroll in an income-driven repayment plan so every payment qualifies",
        timeline="2-3 weeks",
        priority=Priority.CRITICAL,
        resources=("Income-Driven Repayment Plan Request",),
    ),
    ImplementationStep(
        order=4,
        title="Submit Employment Certification",
        description="File the certification form now and annually to track qualifying payments",
        timeline="1-2 weeks",
        priority=Priority.HIGH,
        resources=("PSLF Employment Certification Form",),
    ),
)

REFINANCE_STEPS: tuple[ImplementationStep, ...] = (
    ImplementationStep(
        order=1,
        title="Compare Refinancing Offers",
        description="Get rate quotes from 3-5 lenders using soft credit checks",
        timeline="1-2 weeks",
        priority=Priority.CRITICAL,
        resources=("Credible", "SoFi", "Laurel Road", "Earnest"),
    ),
    ImplementationStep(
        order=2,
        title="Gather Required Documents",
        description="Collect proof of income, employment, and current loan details",
        timeline="3-5 days",
        priority=Priority.HIGH,
        resources=("Pay stubs", "Tax returns", "Current loan statements"),
    ),
    ImplementationStep(
        order=3,
        title="Submit Applications",
        description="Apply with the top 2-3 lenders within the same two-week window",
        timeline="1 week",
        priority=Priority.CRITICAL,
        resources=("Lender online applications",),
    ),
    ImplementationStep(
        order=4,
        title="Review and Accept Best Offer",
        description="Compare final rate, term, and borrower protections before signing",
        timeline="3-5 days",
        priority=Priority.CRITICAL,
        resources=("Loan comparison worksheet",),
    ),
)

_STEPS_BY_STRATEGY = {
    StrategyType.PSLF: PSLF_STEPS,
    StrategyType.REFINANCE: REFINANCE_STEPS,
}


class ImplementationPlanner:
    def plan(self, recommendation: Recommendation) -> tuple[ImplementationStep, ...]:
        return _STEPS_BY_STRATEGY[recommendation.recommended_strategy]
