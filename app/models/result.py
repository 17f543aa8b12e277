from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from .borrower import BorrowerProfile
from .eligibility import PSLFEligibility
from .plan import ImplementationStep, ProjectionSchedule, SavingsResult, TaxSummary
from .portfolio import LoanPortfolioSummary
from .scenario import PSLFScenario, Recommendation, RefinanceAnalysis


@dataclass(frozen=True)
class OptimizationResult:
    as_of: date
    profile: BorrowerProfile
    loan_summary: LoanPortfolioSummary
    pslf_eligibility: PSLFEligibility
    pslf_analysis: PSLFScenario | None
    refinancing_analysis: RefinanceAnalysis
    recommendation: Recommendation
    savings: SavingsResult
    detailed_projections: ProjectionSchedule
    tax_implications: TaxSummary
    implementation_steps: Sequence[ImplementationStep]
