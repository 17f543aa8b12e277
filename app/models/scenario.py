from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence, Union

from .common import Confidence, StrategyType


@dataclass(frozen=True)
class PSLFScenario:
    monthly_payment: Decimal
    total_paid: Decimal
    years_remaining: Decimal
    payments_made: int
    payments_remaining: int
    forgiven_amount: Decimal
    tax_on_forgiveness: Decimal
    starting_salary: Decimal
    final_salary: Decimal
    completion_age: Decimal
    confidence: Confidence
    payment_plan: str = "IDR"
    requirements: tuple[str, ...] = ()
    strategy: StrategyType = field(default=StrategyType.PSLF, init=False)

    @property
    def net_cost(self) -> Decimal:
        return self.total_paid + self.tax_on_forgiveness


@dataclass(frozen=True)
class RefinanceScenario:
    rate_pct: Decimal
    term_years: int
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    debt_to_income_ratio: Decimal
    is_affordable: bool
    eligibility_tier: str
    approval_odds: int
    completion_age: int
    confidence: Confidence
    strategy: StrategyType = field(default=StrategyType.REFINANCE, init=False)

    @property
    def net_cost(self) -> Decimal:
        return self.total_paid

    @property
    def sort_key(self) -> tuple[Decimal, int, Decimal]:
        return (self.total_paid, self.term_years, self.rate_pct)


RepaymentScenario = Union[PSLFScenario, RefinanceScenario]


@dataclass(frozen=True)
class RefinanceAnalysis:
    scenarios: Sequence[RefinanceScenario]
    recommended: RefinanceScenario
    best_rate_pct: Decimal
    approval_odds: int

    @property
    def affordable_scenarios(self) -> tuple[RefinanceScenario, ...]:
        return tuple(scenario for scenario in self.scenarios if scenario.is_affordable)


@dataclass(frozen=True)
class Recommendation:
    chosen: RepaymentScenario
    alternative: RepaymentScenario | None
    reason: str
    confidence: Confidence
    rule: str
    note: str | None = None

    @property
    def recommended_strategy(self) -> StrategyType:
        return self.chosen.strategy
