from __future__ import annotations

from decimal import Decimal

from app.core.engine_config import EngineConfig
from app.models import LoanPortfolioSummary, Recommendation, SavingsResult

from .amortization import ZERO, standard_plan_cost, to_whole


class SavingsCalculator:
    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    def baseline_cost(self, chosen_cost: Decimal) -> Decimal:
        """Proxy baseline: the chosen cost itself repaid over ten years at the average federal rate."""
        return standard_plan_cost(chosen_cost, self._config.baseline_federal_rate_pct, self._config.standard_plan_months)

    def standard_plan_cost(self, summary: LoanPortfolioSummary) -> Decimal:
        return standard_plan_cost(
            summary.total_balance, self._config.standard_plan_rate_pct, self._config.standard_plan_months
        )

    def calculate(self, recommendation: Recommendation, summary: LoanPortfolioSummary) -> SavingsResult:
        chosen = recommendation.chosen
        chosen_cost = chosen.net_cost
        baseline_gap = self.baseline_cost(chosen_cost) - chosen_cost

        alternative = recommendation.alternative
        if alternative is not None:
            alternative_gap = alternative.net_cost - chosen_cost
            potential = max(alternative_gap, baseline_gap)
            vs_alternative = abs(alternative_gap)
        else:
            potential = baseline_gap
            vs_alternative = ZERO

        vs_standard = self.standard_plan_cost(summary) - chosen.total_paid

        return SavingsResult(
            potential_savings=_clamp(potential),
            vs_standard_plan=_clamp(vs_standard),
            vs_alternative=_clamp(vs_alternative),
        )


def _clamp(value: Decimal) -> Decimal:
    return max(ZERO, to_whole(value))
