"""Debt refinancing proposals - flat direct-rate installment plans with business-day due dates"""

from datetime import date
from typing import List

from dealer_finance.domain.exceptions import InvalidInputError
from dealer_finance.domain.models import PlanInstallment, RefinancingProposal
from dealer_finance.utils.date_utils import add_months, last_business_day


def next_due_date(previous: date, preferred_day: int) -> date:
    """One calendar month after previous, on preferred_day (clamped to month end), moved off weekends"""
    return last_business_day(add_months(previous, 1, day=preferred_day))


def due_dates(first_due_date: date, installments: int, fixed_anchor: bool = False) -> List[date]:
    """
    Due dates for every installment.

    The first date is moved back to the last business day. Then:
    - fixed_anchor=False (legacy): the preferred day is taken from the
      adjusted first date and each date chains from the previous adjusted
      date, so a weekend adjustment on the first date carries over.
    - fixed_anchor=True: every date is derived from the requested first date
      (same day of month, n months later), then adjusted on its own.
    """
    first = last_business_day(first_due_date)
    dates = [first]

    if fixed_anchor:
        for i in range(1, installments):
            dates.append(last_business_day(add_months(first_due_date, i)))
        return dates

    preferred_day = first.day
    for _ in range(1, installments):
        dates.append(next_due_date(dates[-1], preferred_day))
    return dates


def propose(
    debt_in_pesos: float,
    installments: int,
    monthly_rate: float,
    first_due_date: date,
    fixed_anchor: bool = False,
) -> RefinancingProposal:
    """
    Build a refinancing proposal using simple (direct) interest.

    - coefficient = 1 + monthly_rate/100 * installments
    - total payable = debt * coefficient
    - installment = total payable / installments
    - principal and interest shares are flat per installment
    - remaining balance = debt - principal share * n, floored at 0

    Example:
        100,000 at 3.5% over 12 -> coefficient 1.42, total 142,000,
        interest 42,000, installment 11,833.33
    """
    if debt_in_pesos <= 0:
        raise InvalidInputError("Debt must be positive")
    if installments <= 0:
        raise InvalidInputError("Number of installments must be positive")
    if monthly_rate < 0:
        raise InvalidInputError("Monthly rate cannot be negative")

    coefficient = 1 + (monthly_rate / 100 * installments)
    total_payable = debt_in_pesos * coefficient
    interest_total = total_payable - debt_in_pesos
    installment_amount = total_payable / installments
    principal_share = debt_in_pesos / installments
    interest_share = interest_total / installments

    plan = [
        PlanInstallment(
            number=number,
            due_date=due,
            principal=principal_share,
            interest=interest_share,
            amount=installment_amount,
            remaining_balance=max(0.0, debt_in_pesos - principal_share * number),
        )
        for number, due in enumerate(due_dates(first_due_date, installments, fixed_anchor), start=1)
    ]

    return RefinancingProposal(
        installments=installments,
        monthly_rate=monthly_rate,
        plan=plan,
        debt_in_pesos=debt_in_pesos,
        interest_total=interest_total,
        total_payable=total_payable,
        installment_amount=installment_amount,
        coefficient=coefficient,
    )


def debt_in_pesos(amount: float, currency: str, exchange_rate: float | None = None) -> float:
    """Convert the outstanding debt to ARS; USD debts need a positive exchange rate"""
    if amount <= 0:
        raise InvalidInputError("Debt must be positive")
    if currency == "ARS":
        return amount
    if currency == "USD":
        if not exchange_rate or exchange_rate <= 0:
            raise InvalidInputError("A positive exchange rate is required for USD debts")
        return amount * exchange_rate
    raise InvalidInputError(f"Unsupported currency: {currency}")
