"""Inflation tracker for the Czech and Slovak Republics.

This package contains the yearly inflation tracker, configuration, number
formatting, charting and the two-country comparison report.
"""

from .config import (
    STARTING_YEAR,
    NUMBER_OF_YEARS,
    SAVED_MONEY,
    COUNTRY_INFLATION_RATES,
    CHART_COLORS,
)
from .tracker import (
    InflationTracker,
    TrackerError,
    EmptyTrackerError,
    InvalidYearRangeError,
    MissingYearDataError,
)
from .processing import (
    round2,
    separate_with_commas,
    compute_country_stats,
    compare_countries,
)
from .report import run_report
from .charts import create_comparison_chart, save_comparison_chart

__all__ = [
    'STARTING_YEAR',
    'NUMBER_OF_YEARS',
    'SAVED_MONEY',
    'COUNTRY_INFLATION_RATES',
    'CHART_COLORS',
    'InflationTracker',
    'TrackerError',
    'EmptyTrackerError',
    'InvalidYearRangeError',
    'MissingYearDataError',
    'round2',
    'separate_with_commas',
    'compute_country_stats',
    'compare_countries',
    'run_report',
    'create_comparison_chart',
    'save_comparison_chart',
]
