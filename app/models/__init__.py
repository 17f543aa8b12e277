from .account import LoanAccount
from .borrower import BorrowerProfile, EmploymentInfo, ExtractedLoanData, OptimizationInput
from .common import (
    CareerGoal,
    CareerStage,
    Confidence,
    EmployerType,
    LoanKind,
    Priority,
    SpecialtyCategory,
    StrategyType,
)
from .eligibility import PSLFEligibility, RuleEvaluation
from .plan import (
    ImplementationStep,
    InterestDeductionFact,
    Milestone,
    ProjectionSchedule,
    SavingsResult,
    TaxImplication,
    TaxSummary,
    YearlyProjectionRow,
)
from .portfolio import LoanPortfolioSummary
from .result import OptimizationResult
from .scenario import (
    PSLFScenario,
    Recommendation,
    RefinanceAnalysis,
    RefinanceScenario,
    RepaymentScenario,
)

__all__ = [
    "BorrowerProfile",
    "CareerGoal",
    "CareerStage",
    "Confidence",
    "EmployerType",
    "EmploymentInfo",
    "ExtractedLoanData",
    "ImplementationStep",
    "InterestDeductionFact",
    "LoanAccount",
    "LoanKind",
    "LoanPortfolioSummary",
    "Milestone",
    "OptimizationInput",
    "OptimizationResult",
    "PSLFEligibility",
    "PSLFScenario",
    "Priority",
    "ProjectionSchedule",
    "Recommendation",
    "RefinanceAnalysis",
    "RefinanceScenario",
    "RepaymentScenario",
    "RuleEvaluation",
    "SavingsResult",
    "SpecialtyCategory",
    "StrategyType",
    "TaxImplication",
    "TaxSummary",
    "YearlyProjectionRow",
]
