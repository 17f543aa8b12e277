from __future__ import annotations

from decimal import Decimal

from app.core.engine_config import ApprovalTier, EngineConfig
from app.core.logging import get_logger
from app.models import BorrowerProfile, Confidence, RefinanceAnalysis, RefinanceScenario

from .amortization import MONTHS_PER_YEAR, ZERO, amortized_payment

logger = get_logger(__name__)

RATIO_PLACES = Decimal("0.0001")

_TIER_CONFIDENCE = {
    "excellent": Confidence.HIGH,
    "good": Confidence.HIGH,
    "fair": Confidence.MEDIUM,
}


class RefinanceScenarioGenerator:
    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    def approval_tier(self, salary: Decimal, balance: Decimal) -> ApprovalTier:
        if salary <= ZERO:
            return self._config.fallback_tier
        balance_to_salary = balance / salary
        for tier in self._config.approval_tiers:
            if salary >= tier.min_salary and balance_to_salary <= tier.max_balance_to_salary:
                return tier
        return self._config.fallback_tier

    def generate(self, balance: Decimal, salary: Decimal, profile: BorrowerProfile) -> RefinanceAnalysis:
        tier = self.approval_tier(salary, balance)
        start_age = self._config.age_for(profile.career_stage)
        scenarios = [
            self._build_scenario(balance, salary, rate, term, tier, start_age)
            for rate in self._config.refinance_rates_pct
            for term in self._config.refinance_terms_years
        ]
        scenarios.sort(key=lambda scenario: scenario.sort_key)

        recommended = next((scenario for scenario in scenarios if scenario.is_affordable), scenarios[0])
        logger.debug(
            "Refinance grid: %d scenarios, %d affordable, recommended %s%% over %d years",
            len(scenarios),
            sum(1 for scenario in scenarios if scenario.is_affordable),
            recommended.rate_pct,
            recommended.term_years,
        )
        return RefinanceAnalysis(
            scenarios=tuple(scenarios),
            recommended=recommended,
            best_rate_pct=min(self._config.refinance_rates_pct),
            approval_odds=tier.approval_odds,
        )

    def _build_scenario(
        self,
        balance: Decimal,
        salary: Decimal,
        rate_pct: Decimal,
        term_years: int,
        tier: ApprovalTier,
        start_age: int,
    ) -> RefinanceScenario:
        months = term_years * MONTHS_PER_YEAR
        payment = amortized_payment(balance, rate_pct, months)
        total_paid = payment * months

        if salary > ZERO:
            raw_ratio = payment / (salary / Decimal(MONTHS_PER_YEAR))
            affordable = raw_ratio <= self._config.max_debt_to_income
            ratio = raw_ratio.quantize(RATIO_PLACES)
        else:
            ratio = ZERO
            affordable = False

        return RefinanceScenario(
            rate_pct=rate_pct,
            term_years=term_years,
            monthly_payment=payment,
            total_paid=total_paid,
            total_interest=total_paid - balance,
            debt_to_income_ratio=ratio,
            is_affordable=affordable,
            eligibility_tier=tier.name,
            approval_odds=tier.approval_odds,
            completion_age=start_age + term_years,
            confidence=_TIER_CONFIDENCE.get(tier.name, Confidence.LOW),
        )
