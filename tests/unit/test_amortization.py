"""Unit tests for French-system amortization"""

import pytest
from dealer_finance.domain.amortization import (
    annuity_payment,
    calculate_rates,
    french_schedule,
    schedule_totals,
)
from dealer_finance.domain.exceptions import InvalidInputError


def test_calculate_rates_monthly():
    """Test TNA 42% -> TEM 3.5%, TEA compounds the monthly rate"""
    rates = calculate_rates(42)

    assert rates.tem == pytest.approx(3.5)
    assert rates.periodic_rate == pytest.approx(3.5)
    assert rates.periods_per_year == 12
    assert rates.tea == pytest.approx(51.106866, abs=1e-4)


def test_calculate_rates_quarterly_keeps_monthly_tea():
    rates = calculate_rates(42, "quarterly")

    assert rates.periodic_rate == pytest.approx(10.5)
    assert rates.periods_per_year == 4
    assert rates.tea == pytest.approx(calculate_rates(42).tea)


def test_calculate_rates_unknown_periodicity():
    with pytest.raises(InvalidInputError):
        calculate_rates(42, "weekly")


def test_annuity_payment_zero_rate():
    assert annuity_payment(12000, 0, 12) == 1000


def test_french_schedule_payment_and_payoff():
    schedule = french_schedule(100000, 12, 42)

    assert len(schedule) == 12
    assert all(row.payment == pytest.approx(10348.394926, abs=1e-4) for row in schedule)
    assert schedule[0].interest == pytest.approx(3500)
    assert schedule[0].beginning_balance == 100000
    assert schedule[-1].ending_balance == pytest.approx(0, abs=1e-6)
    assert sum(row.principal for row in schedule) == pytest.approx(100000)


def test_french_schedule_balances_chain():
    schedule = french_schedule(50000, 6, 21)

    for previous, current in zip(schedule, schedule[1:]):
        assert current.beginning_balance == pytest.approx(previous.ending_balance)
        assert current.interest < previous.interest
        assert current.principal > previous.principal


def test_french_schedule_with_tax():
    """Test IVA applies to the interest share only"""
    schedule = french_schedule(100000, 12, 42, include_tax=True)

    assert schedule[0].tax == pytest.approx(3500 * 0.105)
    assert schedule[0].total_payment == pytest.approx(schedule[0].payment + schedule[0].tax)


def test_french_schedule_without_tax():
    schedule = french_schedule(100000, 12, 42)

    assert all(row.tax == 0 for row in schedule)
    assert all(row.total_payment == row.payment for row in schedule)


def test_french_schedule_single_period():
    schedule = french_schedule(10000, 1, 24)

    assert len(schedule) == 1
    assert schedule[0].payment == pytest.approx(10200)
    assert schedule[0].principal == pytest.approx(10000)
    assert schedule[0].ending_balance == pytest.approx(0, abs=1e-6)


def test_french_schedule_zero_rate():
    schedule = french_schedule(12000, 12, 0)

    assert all(row.payment == 1000 for row in schedule)
    assert all(row.interest == 0 for row in schedule)
    assert schedule[-1].ending_balance == pytest.approx(0)


def test_schedule_totals():
    schedule = french_schedule(100000, 12, 42, include_tax=True)
    totals = schedule_totals(schedule)

    assert totals.principal == pytest.approx(100000)
    assert totals.payment == pytest.approx(10348.394926 * 12, abs=1e-3)
    assert totals.interest == pytest.approx(totals.payment - 100000)
    assert totals.tax == pytest.approx(totals.interest * 0.105)
    assert totals.total_payment == pytest.approx(totals.payment + totals.tax)


@pytest.mark.parametrize(
    "capital,periods,tna",
    [(0, 12, 42), (-1, 12, 42), (1000, 0, 42), (1000, 12, -1)],
)
def test_french_schedule_invalid_input(capital, periods, tna):
    with pytest.raises(InvalidInputError):
        french_schedule(capital, periods, tna)


def test_french_schedule_near_zero_rate():
    """Test a rate too small to move (1+r)^n still amortizes flat"""
    schedule = french_schedule(1000, 12, 1e-15)

    assert all(row.payment == pytest.approx(1000 / 12) for row in schedule)
    assert sum(row.principal for row in schedule) == pytest.approx(1000)
    assert schedule[-1].ending_balance == 0


def test_french_schedule_huge_rate_long_term():
    """Test 100000% TNA over 600 months pays interest only until the last installments"""
    schedule = french_schedule(1000, 600, 100000)
    rate = 100000 / 12 / 100

    assert len(schedule) == 600
    assert schedule[0].payment == pytest.approx(1000 * rate)
    assert schedule[0].interest == pytest.approx(1000 * rate)
    assert all(0 <= row.ending_balance <= 1000 for row in schedule)
    assert schedule[-1].ending_balance == 0
    assert schedule[-1].principal == pytest.approx(1000 * rate / (1 + rate))
    assert sum(row.principal for row in schedule) == pytest.approx(1000, rel=1e-6)


def test_calculate_rates_overflowing_tna():
    with pytest.raises(InvalidInputError):
        calculate_rates(1e300)


def test_french_schedule_overflowing_payment():
    with pytest.raises(InvalidInputError):
        french_schedule(1e300, 12, 1e20)
