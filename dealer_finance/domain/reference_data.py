"""
Static reference tables: ARCA/AFIP statutory interest rates and INDEC monthly CPI.

Both tables are loaded once at import time and must be treated as read-only.
"""

from datetime import date
from types import MappingProxyType
from typing import Mapping, Tuple

from dealer_finance.domain.models import RateEntry


def _entry(
    valid_from: str,
    valid_to: str,
    resarcitorio_monthly: float,
    resarcitorio_daily: float,
    punitorio_monthly: float,
    punitorio_daily: float,
    norm: str,
) -> RateEntry:
    return RateEntry(
        valid_from=date.fromisoformat(valid_from),
        valid_to=date.fromisoformat(valid_to),
        resarcitorio_monthly=resarcitorio_monthly,
        resarcitorio_daily=resarcitorio_daily,
        punitorio_monthly=punitorio_monthly,
        punitorio_daily=punitorio_daily,
        norm=norm,
    )


# Resarcitorio (compensatory) and punitorio (punitive) rates, % per month and per day.
# The open-ended current entry runs until 2999-12-31.
ARCA_INTEREST_RATES: Tuple[RateEntry, ...] = (
    _entry("2025-07-01", "2999-12-31", 2.75, 0.091667, 3.5, 0.116667, "R (MEC) 823/2025"),
    _entry("2025-03-01", "2025-06-30", 4, 0.133333, 5, 0.166667, "R (ME) 3/2024"),
    _entry("2025-02-01", "2025-02-28", 7.26, 0.242, 8.38, 0.279333, "R (ME) 3/2024"),
    _entry("2024-12-01", "2025-01-31", 7.47, 0.249, 8.62, 0.287333, "R (ME) 3/2024"),
    _entry("2024-10-01", "2024-11-30", 6.41, 0.213667, 7.39, 0.246333, "R (ME) 3/2024"),
    _entry("2024-08-01", "2024-09-30", 6.41, 0.213667, 7.39, 0.246333, "R (ME) 3/2024"),
    _entry("2024-06-01", "2024-07-31", 6.41, 0.213667, 7.39, 0.246333, "R (ME) 3/2024"),
    _entry("2024-04-01", "2024-05-31", 12.07, 0.402333, 13.93, 0.464333, "R (ME) 3/2024"),
    _entry("2024-02-01", "2024-03-31", 15.27, 0.509, 17.62, 0.587333, "R (ME) 3/2024"),
    _entry("2022-09-01", "2024-01-31", 5.91, 0.197, 7.37, 0.245667, "R (ME) 559/2022"),
    _entry("2022-07-01", "2022-08-31", 4.25, 0.141667, 5.19, 0.173, "R (MH) 598/2019"),
    _entry("2022-04-01", "2022-06-30", 3.72, 0.124, 4.56, 0.152, "R (MH) 598/2019"),
    _entry("2022-01-01", "2022-03-31", 3.35, 0.111667, 4.11, 0.137, "R (MH) 598/2019"),
    _entry("2021-10-01", "2021-12-31", 3.35, 0.111667, 4.11, 0.137, "R (MH) 598/2019"),
    _entry("2021-07-01", "2021-09-30", 3.35, 0.111667, 4.11, 0.137, "R (MH) 598/2019"),
    _entry("2021-04-01", "2021-06-30", 3.35, 0.111667, 4.11, 0.137, "R (MH) 598/2019"),
    _entry("2021-01-01", "2021-03-31", 3.35, 0.111667, 4.11, 0.137, "R (MH) 598/2019"),
    _entry("2020-10-01", "2020-12-31", 3.02, 0.100667, 3.71, 0.123667, "R (MH) 598/2019"),
    _entry("2020-07-01", "2020-09-30", 2.76, 0.092, 3.39, 0.113, "R (MH) 598/2019"),
    _entry("2020-04-01", "2020-06-30", 2.5, 0.083333, 3.08, 0.102667, "R (MH) 598/2019"),
    _entry("2020-01-01", "2020-03-31", 3.6, 0.12, 4.41, 0.147, "R (MH) 598/2019"),
    _entry("2019-10-01", "2019-12-31", 5.34, 0.178, 6.49, 0.216333, "R (MH) 598/2019"),
    _entry("2019-08-01", "2019-09-30", 4.73, 0.157667, 5.76, 0.192, "R (MH) 598/2019"),
    _entry("2019-07-01", "2019-07-31", 4.73, 0.157667, 5.76, 0.192, "R (MH) 50/2019"),
    _entry("2019-04-01", "2019-06-30", 3.76, 0.125333, 4.61, 0.153667, "R (MH) 50/2019"),
    _entry("2019-03-01", "2019-03-31", 4.5, 0.15, 5.6, 0.186667, "R (MH) 50/2019"),
    _entry("2011-01-01", "2019-02-28", 3, 0.1, 4, 0.133333, "R (MEyFP) 841/2010"),
    _entry("2006-07-01", "2010-12-31", 2, 0.066667, 3, 0.1, "R (MEyOSP) 492/2006"),
    _entry("2004-09-01", "2006-06-30", 1.5, 0.05, 2.5, 0.083333, "R (MEyOSP) 578/2004"),
)

# Monthly CPI variation in %, keyed by (year, month).
# Source: INDEC (2017+).
INDEC_MONTHLY_INFLATION: Mapping[Tuple[int, int], float] = MappingProxyType({
    (2017, 1): 1.585, (2017, 2): 2.067, (2017, 3): 2.314, (2017, 4): 2.733, (2017, 5): 1.376, (2017, 6): 1.176,
    (2017, 7): 1.789, (2017, 8): 1.406, (2017, 9): 1.906, (2017, 10): 1.531, (2017, 11): 1.34, (2017, 12): 3.14,
    (2018, 1): 1.763, (2018, 2): 2.441, (2018, 3): 2.306, (2018, 4): 2.78, (2018, 5): 2.047, (2018, 6): 3.725,
    (2018, 7): 3.108, (2018, 8): 3.885, (2018, 9): 6.512, (2018, 10): 5.387, (2018, 11): 3.159, (2018, 12): 2.617,
    (2019, 1): 2.876, (2019, 2): 3.797, (2019, 3): 4.675, (2019, 4): 3.447, (2019, 5): 3.05, (2019, 6): 2.687,
    (2019, 7): 2.217, (2019, 8): 3.948, (2019, 9): 5.885, (2019, 10): 3.311, (2019, 11): 4.235, (2019, 12): 3.734,
    (2020, 1): 2.258, (2020, 2): 2.036, (2020, 3): 3.348, (2020, 4): 1.473, (2020, 5): 1.548, (2020, 6): 2.255,
    (2020, 7): 1.925, (2020, 8): 2.712, (2020, 9): 2.818, (2020, 10): 3.78, (2020, 11): 3.142, (2020, 12): 4.016,
    (2021, 1): 4.042, (2021, 2): 3.587, (2021, 3): 4.809, (2021, 4): 4.084, (2021, 5): 3.306, (2021, 6): 3.179,
    (2021, 7): 2.998, (2021, 8): 2.469, (2021, 9): 3.546, (2021, 10): 3.518, (2021, 11): 2.522, (2021, 12): 3.851,
    (2022, 1): 3.863, (2022, 2): 4.694, (2022, 3): 6.742, (2022, 4): 6.035, (2022, 5): 5.05, (2022, 6): 5.295,
    (2022, 7): 7.406, (2022, 8): 6.97, (2022, 9): 6.166, (2022, 10): 6.347, (2022, 11): 4.916, (2022, 12): 5.125,
    (2023, 1): 6.028, (2023, 2): 6.628, (2023, 3): 7.675, (2023, 4): 8.403, (2023, 5): 7.773, (2023, 6): 5.951,
    (2023, 7): 6.345, (2023, 8): 12.442, (2023, 9): 12.75, (2023, 10): 8.302, (2023, 11): 12.811, (2023, 12): 25.465,
    (2024, 1): 20.615, (2024, 2): 13.241, (2024, 3): 11.01, (2024, 4): 8.833, (2024, 5): 4.176, (2024, 6): 4.577,
    (2024, 7): 4.031, (2024, 8): 4.172, (2024, 9): 3.469, (2024, 10): 2.692, (2024, 11): 2.427, (2024, 12): 2.704,
    (2025, 1): 2.211, (2025, 2): 2.402, (2025, 3): 3.729, (2025, 4): 2.781, (2025, 5): 1.501, (2025, 6): 1.619,
    (2025, 7): 1.902, (2025, 8): 1.876, (2025, 9): 2.076, (2025, 10): 2.342, (2025, 11): 2.473,
})
