"""Unit tests for refinancing proposals and due-date scheduling"""

import pytest
from datetime import date
from dealer_finance.domain.exceptions import InvalidInputError
from dealer_finance.domain.refinancing import debt_in_pesos, due_dates, next_due_date, propose


def test_propose_direct_rate():
    """Test 100,000 at 3.5% over 12 installments"""
    proposal = propose(100000, 12, 3.5, date(2025, 1, 15))

    assert proposal.coefficient == pytest.approx(1.42)
    assert proposal.total_payable == pytest.approx(142000)
    assert proposal.interest_total == pytest.approx(42000)
    assert proposal.installment_amount == pytest.approx(11833.33, abs=0.01)
    assert len(proposal.plan) == 12


def test_propose_flat_shares():
    proposal = propose(100000, 12, 3.5, date(2025, 1, 15))

    for installment in proposal.plan:
        assert installment.principal == pytest.approx(100000 / 12)
        assert installment.interest == pytest.approx(3500)
        assert installment.amount == pytest.approx(installment.principal + installment.interest)

    assert [i.number for i in proposal.plan] == list(range(1, 13))
    assert proposal.plan[0].remaining_balance == pytest.approx(100000 - 100000 / 12)
    assert proposal.plan[-1].remaining_balance == pytest.approx(0, abs=1e-6)
    assert all(i.remaining_balance >= 0 for i in proposal.plan)


def test_propose_zero_rate():
    proposal = propose(60000, 6, 0, date(2025, 1, 15))

    assert proposal.coefficient == 1
    assert proposal.interest_total == 0
    assert proposal.installment_amount == 10000


@pytest.mark.parametrize("debt,installments,rate", [(0, 12, 3.5), (1000, 0, 3.5), (1000, 12, -1)])
def test_propose_invalid_input(debt, installments, rate):
    with pytest.raises(InvalidInputError):
        propose(debt, installments, rate, date(2025, 1, 15))


def test_due_dates_move_weekends_back():
    """Test weekend due dates fall on the preceding Friday"""
    dates = due_dates(date(2025, 1, 15), 3)

    assert dates == [date(2025, 1, 15), date(2025, 2, 14), date(2025, 3, 14)]
    assert all(d.weekday() < 5 for d in dates)


def test_due_dates_chained_anchor_drifts():
    """Test the chained schedule keeps the adjusted day of the first date"""
    assert due_dates(date(2025, 5, 31), 3) == [date(2025, 5, 30), date(2025, 6, 30), date(2025, 7, 30)]
    assert due_dates(date(2025, 11, 30), 3) == [date(2025, 11, 28), date(2025, 12, 26), date(2026, 1, 28)]


def test_due_dates_fixed_anchor():
    """Test the fixed schedule keeps the requested day of month"""
    assert due_dates(date(2025, 5, 31), 3, fixed_anchor=True) == [
        date(2025, 5, 30),
        date(2025, 6, 30),
        date(2025, 7, 31),
    ]
    assert due_dates(date(2025, 11, 30), 3, fixed_anchor=True) == [
        date(2025, 11, 28),
        date(2025, 12, 30),
        date(2026, 1, 30),
    ]


def test_next_due_date_clamps_to_month_end():
    assert next_due_date(date(2025, 1, 31), 31) == date(2025, 2, 28)


def test_propose_uses_fixed_anchor():
    proposal = propose(1000, 3, 1, date(2025, 5, 31), fixed_anchor=True)

    assert proposal.plan[-1].due_date == date(2025, 7, 31)


def test_debt_in_pesos():
    assert debt_in_pesos(1000, "USD", 1485) == 1485000
    assert debt_in_pesos(250000, "ARS") == 250000
    assert debt_in_pesos(250000, "ARS", 1485) == 250000


@pytest.mark.parametrize(
    "amount,currency,rate",
    [(1000, "USD", None), (1000, "USD", 0), (1000, "EUR", 1100), (0, "ARS", None)],
)
def test_debt_in_pesos_invalid(amount, currency, rate):
    with pytest.raises(InvalidInputError):
        debt_in_pesos(amount, currency, rate)
