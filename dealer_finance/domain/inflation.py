"""Compound inflation over a range of months"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from dealer_finance.domain.models import InflationMonth, InflationResult
from dealer_finance.domain.reference_data import INDEC_MONTHLY_INFLATION
from dealer_finance.utils.date_utils import shift_month


class InflationIndex:
    """Read-only monthly inflation series keyed by (year, month)"""

    def __init__(self, monthly: Mapping[Tuple[int, int], float]):
        self._monthly = MappingProxyType(dict(monthly))

    def rate(self, year: int, month: int) -> Optional[float]:
        """Published inflation for the month, in percent, or None when missing"""
        return self._monthly.get((year, month))

    def years(self) -> list[int]:
        return sorted({year for year, _ in self._monthly})

    def compound(self, from_year: int, from_month: int, to_year: int, to_month: int) -> Optional[InflationResult]:
        """
        Compound monthly inflation from (from_year, from_month) to (to_year, to_month), both inclusive.

        Months missing from the series are skipped and do not count towards
        the averages. Returns None when the end is not after the start or when
        no month in the range has data.
        """
        if (to_year, to_month) <= (from_year, from_month):
            return None

        multiplier = 1.0
        per_month = []
        year, month = from_year, from_month
        while (year, month) <= (to_year, to_month):
            inflation = self.rate(year, month)
            if inflation is not None:
                multiplier *= 1 + inflation / 100
                per_month.append(
                    InflationMonth(
                        year=year,
                        month=month,
                        inflation=inflation,
                        accumulated=(multiplier - 1) * 100,
                    )
                )
            year, month = shift_month(year, month, 1)

        if not per_month:
            return None

        months = len(per_month)
        return InflationResult(
            total_percent=(multiplier - 1) * 100,
            avg_monthly_percent=(multiplier ** (1 / months) - 1) * 100,
            annualized_percent=(multiplier ** (12 / months) - 1) * 100,
            multiplier=multiplier,
            months_counted=months,
            per_month=per_month,
        )


_DEFAULT_INDEX = InflationIndex(INDEC_MONTHLY_INFLATION)


def default_inflation_index() -> InflationIndex:
    """INDEC CPI series"""
    return _DEFAULT_INDEX
