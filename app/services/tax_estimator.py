from __future__ import annotations

import math
from datetime import date
from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.models import (
    InterestDeductionFact,
    PSLFScenario,
    Recommendation,
    TaxImplication,
    TaxSummary,
)

from .amortization import ZERO, to_cents


class TaxEstimator:
    """Rough federal + state exposure estimates; not tax advice."""

    def __init__(self, config: EngineConfig) -> None:
        self._config = config
        self._brackets = tuple(sorted(config.tax_brackets, key=lambda bracket: bracket.min_salary, reverse=True))

    def marginal_rate(self, salary: Decimal) -> Decimal:
        for bracket in self._brackets:
            if salary >= bracket.min_salary:
                return bracket.marginal_rate
        return self._config.default_marginal_rate

    def combined_rate(self, salary: Decimal) -> Decimal:
        return self.marginal_rate(salary) + self._config.state_tax_rate

    def tax_on_forgiveness(self, forgiven_amount: Decimal, salary: Decimal) -> Decimal:
        if forgiven_amount <= ZERO:
            return ZERO
        return to_cents(forgiven_amount * self.combined_rate(salary))

    def interest_deduction(self) -> InterestDeductionFact:
        cap = self._config.interest_deduction_cap
        single_low, single_high = self._config.single_phase_out
        married_low, married_high = self._config.married_phase_out
        return InterestDeductionFact(
            max_deduction=cap,
            single_phase_out=self._config.single_phase_out,
            married_phase_out=self._config.married_phase_out,
            description=(
                f"Deduct up to ${cap:,.0f} in student loan interest paid; phases out between "
                f"${single_low:,.0f}-${single_high:,.0f} (single) or "
                f"${married_low:,.0f}-${married_high:,.0f} (married filing jointly)"
            ),
        )

    def build_summary(self, recommendation: Recommendation, as_of: date) -> TaxSummary:
        chosen = recommendation.chosen
        if not isinstance(chosen, PSLFScenario):
            return TaxSummary(implications=(), interest_deduction=self.interest_deduction())

        years = math.ceil(chosen.years_remaining)
        implication = TaxImplication(
            year=as_of.year + years,
            taxable_forgiveness=chosen.forgiven_amount,
            estimated_tax=chosen.tax_on_forgiveness,
            description="Estimated federal and state tax due on the forgiven PSLF balance",
        )
        set_aside = chosen.tax_on_forgiveness if years == 0 else to_cents(chosen.tax_on_forgiveness / Decimal(years))
        return TaxSummary(
            implications=(implication,),
            interest_deduction=self.interest_deduction(),
            annual_set_aside=set_aside,
        )
