from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Self

from app.core.errors import ValidationError

from .common import LoanKind

MAX_RATE_PCT = Decimal("100")


@dataclass(frozen=True)
class LoanAccount:
    balance: Decimal
    interest_rate_pct: Decimal
    kind: LoanKind
    loan_type: str | None = None
    disbursement_date: date | None = None
    servicer: str | None = None

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise ValidationError(f"loan balance must be non-negative, got {self.balance}")
        if not Decimal("0") <= self.interest_rate_pct <= MAX_RATE_PCT:
            raise ValidationError(f"interest rate must be within 0-100%, got {self.interest_rate_pct}")

    @property
    def is_direct(self) -> bool:
        return self.kind is LoanKind.FEDERAL and "direct" in (self.loan_type or "").lower()

    @classmethod
    def _parse_decimal(cls, value: object, field: str) -> Decimal:
        if value is None:
            raise ValidationError(f"{field} is required")
        try:
            return Decimal(str(value))
        except Exception as exc:  # noqa: BLE001
            raise ValidationError(f"invalid decimal for {field}: {value}") from exc

    @classmethod
    def from_dict(cls, data: dict, *, kind: LoanKind) -> Self:
        raw_date = data.get("disbursement_date")
        return cls(
            balance=cls._parse_decimal(data.get("balance"), "balance"),
            interest_rate_pct=cls._parse_decimal(data.get("interest_rate"), "interest_rate"),
            kind=kind,
            loan_type=data.get("loan_type"),
            disbursement_date=date.fromisoformat(raw_date) if isinstance(raw_date, str) else raw_date,
            servicer=data.get("servicer"),
        )
