from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoanPortfolioSummary:
    total_balance: Decimal
    total_federal_balance: Decimal
    total_private_balance: Decimal
    weighted_federal_rate_pct: Decimal
    weighted_private_rate_pct: Decimal
    federal_loan_count: int
    private_loan_count: int
    current_payment_plan: str
    current_monthly_payment: Decimal
    pslf_payments_made: int
