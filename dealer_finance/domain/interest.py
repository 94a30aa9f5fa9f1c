"""Statutory interest accrual (resarcitorio / punitorio) over a piecewise-constant rate table"""

import bisect
import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Tuple

from dealer_finance.domain.exceptions import InvalidInputError
from dealer_finance.domain.models import AccrualPeriod, InterestAccrual, RateEntry
from dealer_finance.domain.reference_data import ARCA_INTEREST_RATES

logger = logging.getLogger(__name__)


class RateTable:
    """Immutable, date-ordered set of rate entries with lookup by day"""

    def __init__(self, entries: Iterable[RateEntry]):
        ordered = sorted(entries, key=lambda e: e.valid_from)

        for entry in ordered:
            if entry.valid_to < entry.valid_from:
                raise InvalidInputError(f"Rate entry ends before it starts: {entry.valid_from}")
        for previous, current in zip(ordered, ordered[1:]):
            if current.valid_from <= previous.valid_to:
                raise InvalidInputError(
                    f"Overlapping rate entries: {previous.valid_from}..{previous.valid_to} "
                    f"and {current.valid_from}..{current.valid_to}"
                )

        self._entries: Tuple[RateEntry, ...] = tuple(ordered)
        self._starts: Tuple[date, ...] = tuple(e.valid_from for e in ordered)

    @property
    def entries(self) -> Tuple[RateEntry, ...]:
        return self._entries

    def lookup(self, day: date) -> Optional[RateEntry]:
        """Entry whose [valid_from, valid_to] contains day, or None (gap or before the table)"""
        idx = bisect.bisect_right(self._starts, day) - 1
        if idx < 0:
            return None
        entry = self._entries[idx]
        return entry if day <= entry.valid_to else None

    def next_start(self, day: date) -> Optional[date]:
        """First entry start strictly after day, or None past the last entry"""
        idx = bisect.bisect_right(self._starts, day)
        return self._starts[idx] if idx < len(self._starts) else None


_DEFAULT_TABLE = RateTable(ARCA_INTEREST_RATES)


def default_rate_table() -> RateTable:
    """ARCA/AFIP published rates"""
    return _DEFAULT_TABLE


def accrue_interest(table: RateTable, principal: float, from_date: date, to_date: date) -> InterestAccrual:
    """
    Accrue resarcitorio and punitorio interest on principal from from_date to to_date.

    Walks [from_date, to_date) one rate entry at a time: each sub-period
    runs from the current day to the end of the entry covering it (or to
    to_date) and accrues principal * daily_rate/100 * days for both tracks,
    using the daily rates of that entry. Days with no entry accrue nothing,
    and the walk jumps to the next entry start.
    """
    if principal <= 0:
        raise InvalidInputError("Principal must be positive")
    if to_date <= from_date:
        raise InvalidInputError("Payment date must be after the start date")

    periods = []
    day = from_date
    while day < to_date:
        entry = table.lookup(day)
        if entry is None:
            upcoming = table.next_start(day)
            end = min(upcoming, to_date) if upcoming is not None else to_date
            logger.debug("No rate entry for %s, %d days accrue nothing", day, (end - day).days)
            day = end
            continue

        end = to_date if entry.valid_to >= to_date else entry.valid_to + timedelta(days=1)
        days = (end - day).days
        periods.append(
            AccrualPeriod(
                start=day,
                end=end,
                days=days,
                resarcitorio_daily_rate=entry.resarcitorio_daily,
                resarcitorio_interest=principal * (entry.resarcitorio_daily / 100) * days,
                punitorio_daily_rate=entry.punitorio_daily,
                punitorio_interest=principal * (entry.punitorio_daily / 100) * days,
                norm=entry.norm,
            )
        )
        day = end

    resarcitorio_total = sum(p.resarcitorio_interest for p in periods)
    punitorio_total = sum(p.punitorio_interest for p in periods)
    total_interest = resarcitorio_total + punitorio_total

    return InterestAccrual(
        principal=principal,
        from_date=from_date,
        to_date=to_date,
        total_days=(to_date - from_date).days,
        resarcitorio_total=resarcitorio_total,
        punitorio_total=punitorio_total,
        total_interest=total_interest,
        total_payable=principal + total_interest,
        periods=periods,
    )
