from __future__ import annotations

from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.core.logging import get_logger
from app.models import (
    Confidence,
    LoanPortfolioSummary,
    OptimizationInput,
    PSLFEligibility,
    PSLFScenario,
)

from .amortization import MONTHS_PER_YEAR, ONE, ZERO, roll_forward_balance, to_cents
from .pslf_eligibility import QUALIFYING_EMPLOYERS, PSLFEligibilityChecker
from .tax_estimator import TaxEstimator

logger = get_logger(__name__)

PSLF_REQUIREMENTS = (
    "Work full-time for a qualifying employer (government, 501(c)(3) nonprofit, academic)",
    "Make 120 qualifying payments under an income-driven repayment plan",
    "Only Direct Loans are eligible (consolidate FFEL loans if needed)",
    "Submit the Employment Certification Form annually",
    "Submit the PSLF application after the 120th payment",
)


def salary_in_year(starting_salary: Decimal, growth_rate: Decimal, year_index: int) -> Decimal:
    """Salary for the zero-based simulation year ``year_index``."""
    return to_cents(starting_salary * (ONE + growth_rate) ** year_index)


class PSLFProjector:
    def __init__(
        self,
        config: EngineConfig,
        tax_estimator: TaxEstimator,
        eligibility_checker: PSLFEligibilityChecker | None = None,
    ) -> None:
        self._config = config
        self._tax_estimator = tax_estimator
        self._eligibility_checker = eligibility_checker or PSLFEligibilityChecker()

    def idr_monthly_payment(self, salary: Decimal) -> Decimal:
        threshold = self._config.poverty_guideline * self._config.poverty_multiplier
        discretionary = max(ZERO, salary - threshold)
        annual_payment = discretionary * self._config.idr_income_share
        return to_cents(annual_payment / Decimal(MONTHS_PER_YEAR))

    def project(
        self,
        request: OptimizationInput,
        summary: LoanPortfolioSummary,
        salary: Decimal,
        eligibility: PSLFEligibility | None = None,
    ) -> PSLFScenario | None:
        eligibility = eligibility or self._eligibility_checker.evaluate(request)
        if not eligibility.is_eligible:
            logger.debug("PSLF skipped: %s", "; ".join(eligibility.reasons))
            return None

        stage = request.profile.career_stage
        growth = self._config.growth_rate_for(stage)
        payments_made = summary.pslf_payments_made
        payments_remaining = max(0, self._config.pslf_payment_requirement - payments_made)
        years_remaining = Decimal(payments_remaining) / Decimal(MONTHS_PER_YEAR)

        total_paid, final_salary = self._simulate_payments(salary, growth, payments_remaining)
        average_payment = (
            to_cents(total_paid / Decimal(payments_remaining)) if payments_remaining else ZERO
        )
        forgiven = roll_forward_balance(
            summary.total_federal_balance,
            summary.weighted_federal_rate_pct,
            average_payment,
            payments_remaining,
        )
        tax = self._tax_estimator.tax_on_forgiveness(forgiven, final_salary)

        employer_confirmed = request.employment.employer_type in QUALIFYING_EMPLOYERS
        return PSLFScenario(
            monthly_payment=self.idr_monthly_payment(salary),
            total_paid=total_paid,
            years_remaining=years_remaining,
            payments_made=payments_made,
            payments_remaining=payments_remaining,
            forgiven_amount=forgiven,
            tax_on_forgiveness=tax,
            starting_salary=salary,
            final_salary=final_salary,
            completion_age=Decimal(self._config.age_for(stage)) + years_remaining,
            confidence=Confidence.HIGH if employer_confirmed else Confidence.MEDIUM,
            requirements=PSLF_REQUIREMENTS,
        )

    def _simulate_payments(
        self, salary: Decimal, growth: Decimal, payments_remaining: int
    ) -> tuple[Decimal, Decimal]:
        total_paid = ZERO
        final_salary = salary
        monthly_payment = ZERO
        for month in range(payments_remaining):
            if month % MONTHS_PER_YEAR == 0:
                final_salary = salary_in_year(salary, growth, month // MONTHS_PER_YEAR)
                monthly_payment = self.idr_monthly_payment(final_salary)
            total_paid += monthly_payment
        return total_paid, final_salary
