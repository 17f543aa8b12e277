from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoanAccountSchema(CamelModel):
    balance: Decimal
    interest_rate: Decimal = Field(..., description="Annual rate in percent, e.g. 6.8")
    loan_type: Optional[str] = None
    disbursement_date: Optional[date] = None
    servicer: Optional[str] = None


class ExtractedDataSchema(CamelModel):
    current_payment_plan: Optional[str] = None
    monthly_payment: Optional[Decimal] = None
    pslf_payment_count: Optional[int] = None


class EmploymentSchema(CamelModel):
    employer_type: Optional[str] = None
    pslf_eligible: bool = False
    annual_salary: Optional[Decimal] = None


class LoanDataSchema(CamelModel):
    federal_loans: list[LoanAccountSchema] = Field(default_factory=list)
    private_loans: list[LoanAccountSchema] = Field(default_factory=list)
    extracted_data: ExtractedDataSchema = Field(default_factory=ExtractedDataSchema)
    employment: EmploymentSchema = Field(default_factory=EmploymentSchema)


class UserProfileSchema(CamelModel):
    specialty: str
    career_stage: str
    career_goals: str
    state: Optional[str] = None


class OptimizationRequest(CamelModel):
    loan_data: LoanDataSchema
    user_profile: UserProfileSchema
    as_of: Optional[date] = Field(default=None, description="Calculation date; defaults to today")
