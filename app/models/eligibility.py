from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class RuleEvaluation:
    rule: str
    passed: bool
    detail: str | None = None


@dataclass(frozen=True)
class PSLFEligibility:
    rule_results: Sequence[RuleEvaluation]

    @property
    def is_eligible(self) -> bool:
        return all(result.passed for result in self.rule_results)

    @property
    def reasons(self) -> tuple[str, ...]:
        positives = [result.detail for result in self.rule_results if result.passed and result.detail]
        negatives = [result.detail for result in self.rule_results if not result.passed and result.detail]
        return tuple(positives + negatives)

    def rule(self, name: str) -> RuleEvaluation | None:
        return next((result for result in self.rule_results if result.rule == name), None)
