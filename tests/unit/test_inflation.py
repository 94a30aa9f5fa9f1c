"""Unit tests for compound inflation over the CPI series"""

import pytest
from dealer_finance.domain.inflation import InflationIndex, default_inflation_index


def test_compound_first_quarter_2025():
    result = default_inflation_index().compound(2025, 1, 2025, 3)

    assert result.months_counted == 3
    assert result.total_percent == pytest.approx(8.569107, abs=1e-5)
    assert result.avg_monthly_percent == pytest.approx(2.778456, abs=1e-5)
    assert [m.inflation for m in result.per_month] == [2.211, 2.402, 3.729]
    assert result.per_month[0].accumulated == pytest.approx(2.211)
    assert result.per_month[-1].accumulated == pytest.approx(result.total_percent)


def test_compound_across_year_end():
    result = default_inflation_index().compound(2024, 11, 2025, 2)

    assert [(m.year, m.month) for m in result.per_month] == [(2024, 11), (2024, 12), (2025, 1), (2025, 2)]


def test_compound_requires_end_after_start():
    index = default_inflation_index()

    assert index.compound(2025, 3, 2025, 3) is None
    assert index.compound(2025, 3, 2025, 1) is None


def test_missing_months_are_skipped():
    """Test gaps neither compound nor count towards the averages"""
    index = InflationIndex({(2024, 1): 10.0, (2024, 3): 10.0})
    result = index.compound(2024, 1, 2024, 3)

    assert result.months_counted == 2
    assert result.total_percent == pytest.approx(21)
    assert result.avg_monthly_percent == pytest.approx(10)
    assert result.annualized_percent == pytest.approx((1.21 ** 6 - 1) * 100)
    assert [m.accumulated for m in result.per_month] == pytest.approx([10, 21])


def test_range_without_data():
    assert InflationIndex({}).compound(2024, 1, 2024, 6) is None
    assert default_inflation_index().compound(1990, 1, 1990, 12) is None


def test_adjust_amount():
    result = InflationIndex({(2024, 1): 10.0, (2024, 2): 10.0}).compound(2024, 1, 2024, 2)

    assert result.adjust(100) == pytest.approx(121)


def test_index_is_read_only():
    index = default_inflation_index()

    assert index.rate(2025, 1) == 2.211
    assert index.rate(1990, 1) is None
    assert 2017 in index.years()
    with pytest.raises(TypeError):
        index._monthly[(2025, 1)] = 0
