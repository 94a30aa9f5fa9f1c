"""French-system loan amortization and rate conversions"""

import math
from typing import Dict, List

from dealer_finance.domain.exceptions import InvalidInputError
from dealer_finance.domain.models import AmortizationRow, AmortizationTotals, RateCalculations

PERIODS_PER_YEAR: Dict[str, int] = {
    "monthly": 12,
    "bimonthly": 6,
    "quarterly": 4,
    "semiannual": 2,
    "annual": 1,
}

DEFAULT_TAX_RATE = 10.5  # IVA on interest


def calculate_rates(tna: float, periodicity: str = "monthly") -> RateCalculations:
    """
    Derive monthly, periodic and effective annual rates from a nominal annual rate.

    All rates are percentages:
    - TEM = TNA / 12
    - periodic = TNA / periods per year
    - TEA = ((1 + TEM/100)^12 - 1) * 100

    TEA always compounds the monthly rate, whatever the installment periodicity.
    """
    if periodicity not in PERIODS_PER_YEAR:
        raise InvalidInputError(f"Unknown periodicity: {periodicity}")

    periods_per_year = PERIODS_PER_YEAR[periodicity]
    tem = tna / 12
    periodic_rate = tna / periods_per_year
    try:
        tea = ((1 + tem / 100) ** 12 - 1) * 100
    except OverflowError:
        raise InvalidInputError(f"Nominal annual rate too large: {tna}") from None

    return RateCalculations(
        tna=tna,
        tem=tem,
        tea=tea,
        periodic_rate=periodic_rate,
        periods_per_year=periods_per_year,
    )


def annuity_payment(capital: float, rate: float, periods: int) -> float:
    """
    Fixed installment: capital * r(1+r)^n / ((1+r)^n - 1).

    Evaluated as capital * r / (1 - (1+r)^-n) through log1p/expm1: rates
    near zero tend to capital / n, large rates tend to capital * r.
    A zero rate is exactly capital / n.
    """
    if rate == 0:
        return capital / periods
    return capital * rate / -math.expm1(-periods * math.log1p(rate))


def remaining_balance(capital: float, rate: float, periods: int, paid: int) -> float:
    """Balance still owed after `paid` of `periods` fixed installments"""
    if rate == 0:
        return capital * (periods - paid) / periods
    growth = math.log1p(rate)
    return capital * math.expm1((paid - periods) * growth) / math.expm1(-periods * growth)


def french_schedule(
    capital: float,
    periods: int,
    tna: float,
    periodicity: str = "monthly",
    include_tax: bool = False,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> List[AmortizationRow]:
    """
    Build a fixed-payment (French system) schedule.

    Per period:
    - interest = balance * r
    - principal = payment - interest
    - tax = interest * tax_rate/100 when include_tax
    - total = payment + tax
    - ending balance from the closed form, floored at 0, so the last
      period always closes at exactly 0
    """
    if capital <= 0:
        raise InvalidInputError("Capital must be positive")
    if periods <= 0:
        raise InvalidInputError("Number of periods must be positive")
    if tna < 0:
        raise InvalidInputError("Nominal annual rate cannot be negative")

    rates = calculate_rates(tna, periodicity)
    rate = rates.periodic_rate / 100
    payment = annuity_payment(capital, rate, periods)
    if not math.isfinite(payment):
        raise InvalidInputError("Capital and rate too large to build a schedule")

    rows = []
    balance = capital
    for period in range(1, periods + 1):
        interest = balance * rate
        principal = payment - interest
        tax = interest * (tax_rate / 100) if include_tax else 0.0
        ending_balance = max(0.0, remaining_balance(capital, rate, periods, period))

        rows.append(
            AmortizationRow(
                period=period,
                beginning_balance=balance,
                payment=payment,
                principal=principal,
                interest=interest,
                tax=tax,
                total_payment=payment + tax,
                ending_balance=ending_balance,
            )
        )
        balance = ending_balance

    return rows


def schedule_totals(rows: List[AmortizationRow]) -> AmortizationTotals:
    return AmortizationTotals(
        payment=sum(r.payment for r in rows),
        principal=sum(r.principal for r in rows),
        interest=sum(r.interest for r in rows),
        tax=sum(r.tax for r in rows),
        total_payment=sum(r.total_payment for r in rows),
    )
