import pandas as pd
import pytest

from inflation_tracker.processing import (
    round2,
    format_percent,
    separate_with_commas,
    retained_value_series,
    compute_country_stats,
    compare_countries,
)
from inflation_tracker.tracker import InflationTracker


@pytest.mark.parametrize("num, expected", [
    (64.8, 64.8),
    (1.005, 1.0),  # 100.49999999999999 in binary
    (0.125, 0.13),
    (-0.125, -0.13),
    (2.5, 2.5),
    (1234567.891, 1234567.89),
    (1234567.895001, 1234567.9),
])
def test_round2(num, expected):
    assert round2(num) == expected


def test_round2_halves_away_from_zero():
    assert round2(0.005) == 0.01
    assert round2(-0.375) == -0.38


@pytest.mark.parametrize("num, expected", [
    (5000000.0, "5,000,000"),
    (5000000, "5,000,000"),
    (1234567.89, "1,234,567.89"),
    (1234567.8, "1,234,567.8"),
    (999.5, "999.5"),
    (0.0, "0"),
    (-1234.5, "-1,234.5"),
    (0.00005, "0.00005"),
    (-0.0000001, "-0.0000001"),
    (12345.00005, "12,345.00005"),
])
def test_separate_with_commas(num, expected):
    assert separate_with_commas(num) == expected


@pytest.mark.parametrize("rate, expected", [
    (0.28, "28.00"),
    (0.001, "0.10"),
    (-0.003, "-0.30"),
    (0.151, "15.10"),
])
def test_format_percent(rate, expected):
    assert format_percent(rate) == expected


def test_retained_value_series():
    rates = pd.Series([0.28, 0.10], index=[1993, 1994])
    retained = retained_value_series(rates, 100.0)
    assert list(retained.index) == [1993, 1994]
    assert retained[1993] == pytest.approx(72.0)
    assert retained[1994] == pytest.approx(64.8)


def test_compute_country_stats():
    tracker = InflationTracker("Testland")
    tracker.insert_series(1993, [0.28, 0.10])
    stats = compute_country_stats(tracker, 100.0, 1993, 1995)
    assert stats['country'] == "Testland"
    assert (stats['max_year'], stats['max_val']) == (1993, 0.28)
    assert (stats['min_year'], stats['min_val']) == (1994, 0.10)
    assert stats['future_val'] == pytest.approx(64.8)
    assert stats['future_val_rounded'] == 64.8


def test_compare_countries_lowest_value_first():
    stats = {
        'A': {'future_val': 2.0},
        'B': {'future_val': 1.0},
    }
    df = compare_countries(stats)
    assert list(df.index) == ['B', 'A']
