from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from app.models import ExtractedLoanData, LoanAccount, LoanKind, LoanPortfolioSummary

from .amortization import ZERO

DEFAULT_PAYMENT_PLAN = "Standard"


class LoanSummaryBuilder:
    def build(self, loans: Sequence[LoanAccount], extracted: ExtractedLoanData | None = None) -> LoanPortfolioSummary:
        extracted = extracted or ExtractedLoanData()
        federal = [loan for loan in loans if loan.kind is LoanKind.FEDERAL]
        private = [loan for loan in loans if loan.kind is LoanKind.PRIVATE]

        federal_balance = sum((loan.balance for loan in federal), ZERO)
        private_balance = sum((loan.balance for loan in private), ZERO)

        return LoanPortfolioSummary(
            total_balance=federal_balance + private_balance,
            total_federal_balance=federal_balance,
            total_private_balance=private_balance,
            weighted_federal_rate_pct=_weighted_rate(federal, federal_balance),
            weighted_private_rate_pct=_weighted_rate(private, private_balance),
            federal_loan_count=len(federal),
            private_loan_count=len(private),
            current_payment_plan=extracted.current_payment_plan or DEFAULT_PAYMENT_PLAN,
            current_monthly_payment=extracted.monthly_payment or ZERO,
            pslf_payments_made=extracted.pslf_payment_count or 0,
        )


def _weighted_rate(loans: Sequence[LoanAccount], total_balance: Decimal) -> Decimal:
    if not loans or total_balance == ZERO:
        return ZERO
    weighted = sum((loan.balance * loan.interest_rate_pct for loan in loans), ZERO)
    return weighted / total_balance
