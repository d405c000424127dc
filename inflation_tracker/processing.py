"""Number formatting and statistics functions for inflation tracking."""

from decimal import Decimal, ROUND_HALF_UP

import pandas as pd


def round2(num):
    """Round a number to two decimal places, halves away from zero."""
    cents = Decimal(num * 100.0).to_integral_value(rounding=ROUND_HALF_UP)
    return float(cents) / 100.0


def format_percent(rate):
    """Format a rate proportion as a percentage with two decimals (no % sign)."""
    return f"{rate * 100:.2f}"


def separate_with_commas(num):
    """
    Format a number with commas between groups of thousands.

    Floats use their shortest round-trip representation, and whole values
    are printed without a fractional part (5000000.0 -> "5,000,000").
    """
    if float(num).is_integer():
        return f"{int(num):,}"
    # Shortest round-trip digits, never in exponent notation
    text = format(Decimal(repr(float(num))), 'f')
    int_part, _, frac_part = text.partition('.')
    sign = '-' if int_part.startswith('-') else ''
    return f"{sign}{int(int_part.lstrip('-')):,}.{frac_part}"


def retained_value_series(rates, money):
    """
    Value of cash at the end of each year, with no interest earned.

    Args:
        rates: Series of yearly rates indexed by year
        money: Amount held at the start of the first year

    Returns:
        Series indexed by year with the remaining value after that year
    """
    return money * (1.0 - rates).cumprod()


def compute_country_stats(tracker, money, start_year, end_year):
    """
    Compute summary statistics for the country held by a tracker.

    Returns dict with extremes, the future value and its rounded form.
    """
    max_year, max_val = tracker.get_max()
    min_year, min_val = tracker.get_min()
    future_val = tracker.get_future_val(money, start_year, end_year)
    return {
        'country': tracker.country_name,
        'max_year': max_year,
        'max_val': max_val,
        'min_year': min_year,
        'min_val': min_val,
        'money': money,
        'future_val': future_val,
        'future_val_rounded': round2(future_val),
    }


def compare_countries(stats_by_country):
    """
    Order countries by how much value their cash retained.

    Args:
        stats_by_country: Dict of country -> stats from compute_country_stats

    Returns:
        DataFrame indexed by country, lowest retained value first
    """
    df = pd.DataFrame.from_dict(stats_by_country, orient='index')
    return df.sort_values('future_val', kind='stable')
