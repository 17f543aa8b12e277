from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, getcontext

getcontext().prec = 28

ZERO = Decimal("0")
ONE = Decimal("1")
TWOPLACES = Decimal("0.01")
WHOLE = Decimal("1")
MONTHS_PER_YEAR = 12


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def to_whole(value: Decimal) -> Decimal:
    return value.quantize(WHOLE, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / Decimal("100") / Decimal(MONTHS_PER_YEAR)


def amortized_payment(balance: Decimal, annual_rate_pct: Decimal, term_months: int) -> Decimal:
    """Level monthly payment that retires ``balance`` over ``term_months``."""
    if term_months <= 0:
        raise ValueError("term_months must be positive")
    if balance <= ZERO:
        return ZERO
    rate = monthly_rate(annual_rate_pct)
    if rate == ZERO:
        return to_cents(balance / Decimal(term_months))
    factor = (ONE + rate) ** term_months
    return to_cents(balance * rate * factor / (factor - ONE))


def standard_plan_cost(balance: Decimal, annual_rate_pct: Decimal, term_months: int) -> Decimal:
    return amortized_payment(balance, annual_rate_pct, term_months) * term_months


def roll_forward_balance(
    balance: Decimal, annual_rate_pct: Decimal, monthly_payment: Decimal, months: int
) -> Decimal:
    """Accrue interest and apply a fixed payment each month, flooring the balance at zero."""
    rate = monthly_rate(annual_rate_pct)
    remaining = balance
    for _ in range(months):
        interest = to_cents(remaining * rate)
        remaining = remaining + interest - monthly_payment
        if remaining <= ZERO:
            return ZERO
    return to_cents(remaining)
