from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from app.core.errors import ValidationError

from .account import LoanAccount
from .common import CareerGoal, CareerStage, EmployerType, LoanKind, SpecialtyCategory


@dataclass(frozen=True)
class BorrowerProfile:
    specialty: str
    career_stage: CareerStage
    career_goals: CareerGoal
    state: str | None = None

    def __post_init__(self) -> None:
        if not (self.specialty or "").strip():
            raise ValidationError("specialty is required")
        if not isinstance(self.career_stage, CareerStage):
            raise ValidationError("career_stage is required")
        if not isinstance(self.career_goals, CareerGoal):
            raise ValidationError("career_goals is required")

    @property
    def specialty_category(self) -> SpecialtyCategory:
        return SpecialtyCategory.for_specialty(self.specialty)


@dataclass(frozen=True)
class EmploymentInfo:
    employer_type: EmployerType = EmployerType.UNKNOWN
    pslf_eligible: bool = False
    annual_salary: Decimal | None = None

    def __post_init__(self) -> None:
        if self.annual_salary is not None and self.annual_salary < 0:
            raise ValidationError(f"annual salary must be non-negative, got {self.annual_salary}")


@dataclass(frozen=True)
class ExtractedLoanData:
    """Servicer metadata pulled from statements by the document-analysis service."""

    current_payment_plan: str | None = None
    monthly_payment: Decimal | None = None
    pslf_payment_count: int | None = None

    def __post_init__(self) -> None:
        if self.pslf_payment_count is not None and self.pslf_payment_count < 0:
            raise ValidationError("pslf_payment_count must be non-negative")
        if self.monthly_payment is not None and self.monthly_payment < 0:
            raise ValidationError("monthly_payment must be non-negative")


@dataclass(frozen=True)
class OptimizationInput:
    profile: BorrowerProfile
    federal_loans: Sequence[LoanAccount] = field(default_factory=tuple)
    private_loans: Sequence[LoanAccount] = field(default_factory=tuple)
    extracted: ExtractedLoanData = field(default_factory=ExtractedLoanData)
    employment: EmploymentInfo = field(default_factory=EmploymentInfo)

    def __post_init__(self) -> None:
        if any(loan.kind is not LoanKind.FEDERAL for loan in self.federal_loans):
            raise ValidationError("federal_loans may only contain federal loans")
        if any(loan.kind is not LoanKind.PRIVATE for loan in self.private_loans):
            raise ValidationError("private_loans may only contain private loans")

    @property
    def loans(self) -> tuple[LoanAccount, ...]:
        return (*self.federal_loans, *self.private_loans)

    @property
    def has_direct_loan(self) -> bool:
        return any(loan.is_direct for loan in self.federal_loans)
