from decimal import Decimal

from app.services.amortization import amortized_payment, roll_forward_balance, standard_plan_cost


def test_standard_plan_payment_matches_closed_form_annuity():
    payment = amortized_payment(Decimal("285000"), Decimal("6.8"), 120)

    r = 0.068 / 12
    expected = 285000 * r * (1 + r) ** 120 / ((1 + r) ** 120 - 1)

    assert abs(float(payment) - expected) < 0.01
    # published case study quotes roughly $3,247 for this balance
    assert abs(float(payment) - 3247) / 3247 < 0.015


def test_zero_rate_falls_back_to_straight_line():
    assert amortized_payment(Decimal("12000"), Decimal("0"), 120) == Decimal("100.00")


def test_zero_balance_has_no_payment():
    assert amortized_payment(Decimal("0"), Decimal("5"), 60) == Decimal("0")
    assert standard_plan_cost(Decimal("0"), Decimal("5"), 60) == Decimal("0")


def test_roll_forward_floors_at_zero():
    assert roll_forward_balance(Decimal("1000"), Decimal("0"), Decimal("400"), 3) == Decimal("0")


def test_roll_forward_accrues_interest_when_payment_is_small():
    balance = roll_forward_balance(Decimal("100000"), Decimal("6"), Decimal("100"), 12)

    assert balance > Decimal("100000")


def test_roll_forward_over_zero_months_returns_balance():
    assert roll_forward_balance(Decimal("2500.50"), Decimal("7"), Decimal("300"), 0) == Decimal("2500.50")
