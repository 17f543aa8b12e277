from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from .common import Priority, StrategyType


@dataclass(frozen=True)
class SavingsResult:
    potential_savings: Decimal
    vs_standard_plan: Decimal
    vs_alternative: Decimal


@dataclass(frozen=True)
class YearlyProjectionRow:
    year: int
    salary: Decimal
    monthly_payment: Decimal
    annual_payment: Decimal
    payments_remaining: int | None = None
    remaining_term_years: int | None = None


@dataclass(frozen=True)
class Milestone:
    year: int
    event: str
    action: str


@dataclass(frozen=True)
class ProjectionSchedule:
    strategy: StrategyType
    rows: Sequence[YearlyProjectionRow]
    milestones: Sequence[Milestone]


@dataclass(frozen=True)
class TaxImplication:
    year: int
    taxable_forgiveness: Decimal
    estimated_tax: Decimal
    description: str


@dataclass(frozen=True)
class InterestDeductionFact:
    max_deduction: Decimal
    single_phase_out: tuple[Decimal, Decimal]
    married_phase_out: tuple[Decimal, Decimal]
    description: str


@dataclass(frozen=True)
class TaxSummary:
    implications: Sequence[TaxImplication]
    interest_deduction: InterestDeductionFact
    annual_set_aside: Decimal | None = None


@dataclass(frozen=True)
class ImplementationStep:
    order: int
    title: str
    description: str
    timeline: str
    priority: Priority
    resources: tuple[str, ...]
