from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence

from app.core.logging import get_logger
from app.models import (
    Confidence,
    PSLFScenario,
    Recommendation,
    RefinanceAnalysis,
    RepaymentScenario,
    StrategyType,
)

logger = get_logger(__name__)

PSLF_ADVANTAGE = Decimal("0.8")
REFINANCE_ADVANTAGE = Decimal("0.9")


@dataclass(frozen=True)
class CostComparison:
    pslf_net_cost: Decimal | None
    refinance_net_cost: Decimal
    refinance_affordable: bool

    @property
    def difference(self) -> Decimal:
        if self.pslf_net_cost is None:
            return Decimal("0")
        return abs(self.pslf_net_cost - self.refinance_net_cost)


@dataclass(frozen=True)
class DecisionRule:
    name: str
    applies: Callable[[CostComparison], bool]
    strategy: StrategyType
    confidence: Confidence
    reason: str
    note: str | None = None


# Evaluated top to bottom; the first matching row wins.
DECISION_TABLE: tuple[DecisionRule, ...] = (
    DecisionRule(
        name="pslf_unavailable",
        applies=lambda c: c.pslf_net_cost is None and c.refinance_affordable,
        strategy=StrategyType.REFINANCE,
        confidence=Confidence.HIGH,
        reason="Not eligible for PSLF - refinancing offers better terms",
    ),
    DecisionRule(
        name="pslf_unavailable_unaffordable",
        applies=lambda c: c.pslf_net_cost is None,
        strategy=StrategyType.REFINANCE,
        confidence=Confidence.LOW,
        reason="Not eligible for PSLF - refinancing is the only modeled option",
        note="No refinance term keeps payments within the recommended debt-to-income limit",
    ),
    DecisionRule(
        name="pslf_saves_20_percent",
        applies=lambda c: c.pslf_net_cost < c.refinance_net_cost * PSLF_ADVANTAGE,
        strategy=StrategyType.PSLF,
        confidence=Confidence.HIGH,
        reason="PSLF saves {savings} over refinancing",
    ),
    DecisionRule(
        name="refinance_saves_10_percent",
        applies=lambda c: c.refinance_net_cost < c.pslf_net_cost * REFINANCE_ADVANTAGE,
        strategy=StrategyType.REFINANCE,
        confidence=Confidence.HIGH,
        reason="Refinancing saves {savings} and provides certainty",
    ),
    # Near ties default to PSLF: product policy, keep unless product says otherwise.
    DecisionRule(
        name="near_tie_defaults_to_pslf",
        applies=lambda c: True,
        strategy=StrategyType.PSLF,
        confidence=Confidence.MEDIUM,
        reason="Marginal difference ({savings}) - PSLF provides more forgiveness upside",
        note="The margin is small; weigh your personal preference for certainty against forgiveness risk",
    ),
)


def select_rule(comparison: CostComparison, table: Sequence[DecisionRule] = DECISION_TABLE) -> DecisionRule:
    for rule in table:
        if rule.applies(comparison):
            return rule
    raise LookupError("decision table has no matching rule")


def format_currency(amount: Decimal) -> str:
    return f"${amount:,.0f}"


class StrategyRecommender:
    def __init__(self, table: Sequence[DecisionRule] = DECISION_TABLE) -> None:
        self._table = tuple(table)

    def recommend(self, pslf: PSLFScenario | None, refinancing: RefinanceAnalysis) -> Recommendation:
        refinance = refinancing.recommended
        comparison = CostComparison(
            pslf_net_cost=pslf.net_cost if pslf is not None else None,
            refinance_net_cost=refinance.total_paid,
            refinance_affordable=refinance.is_affordable,
        )
        rule = select_rule(comparison, self._table)

        if rule.strategy is StrategyType.PSLF:
            if pslf is None:
                raise LookupError(f"rule {rule.name} selected PSLF without a PSLF analysis")
            chosen: RepaymentScenario = pslf
            alternative: RepaymentScenario | None = refinance
        elif rule.strategy is StrategyType.REFINANCE:
            chosen = refinance
            alternative = pslf
        else:
            raise LookupError(f"unsupported strategy {rule.strategy}")

        logger.debug("Decision rule %s selected %s", rule.name, rule.strategy.value)
        return Recommendation(
            chosen=chosen,
            alternative=alternative,
            reason=rule.reason.format(savings=format_currency(comparison.difference)),
            confidence=rule.confidence,
            rule=rule.name,
            note=rule.note,
        )
