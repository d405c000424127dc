"""Czech vs Slovak inflation comparison report.

A factory owner split his cash between the Czech Republic and the Slovak
Republic after the division of Czechoslovakia in 1993. The report prints the
yearly inflation for both countries, their extremes, and what the cash was
worth 30 years later.
"""

from .config import (
    STARTING_YEAR,
    END_YEAR,
    SAVED_MONEY,
    COUNTRY_INFLATION_RATES,
    REPORT_COUNTRIES,
)
from .processing import compare_countries, compute_country_stats, format_percent, separate_with_commas
from .tracker import InflationTracker


def print_country_summary(tracker, money=SAVED_MONEY, start_year=STARTING_YEAR, end_year=END_YEAR):
    """
    Print the data block for the country currently held by the tracker.

    Args:
        tracker: InflationTracker filled with one country's rates
        money: Cash saved in start_year
        start_year: First year of saving
        end_year: Year in which the saved cash is valued

    Returns:
        Stats dict from compute_country_stats
    """
    print(f"Data for {tracker.country_name}:")
    tracker.print_data()

    stats = compute_country_stats(tracker, money, start_year, end_year)
    print(f"Maximum was {stats['max_year']}: {format_percent(stats['max_val'])}%")
    print(f"Minimum was {stats['min_year']}: {format_percent(stats['min_val'])}%")
    print(f"Saving {separate_with_commas(money)} for {end_year - start_year} years in {start_year} "
          f"with no interest rate would mean having {separate_with_commas(stats['future_val_rounded'])} in {end_year}")
    print()
    return stats


def print_verdict(comparison):
    """
    Print which country's inflation ate more of the saved cash.

    Args:
        comparison: DataFrame from compare_countries, lowest retained value first
    """
    higher, lower = comparison.index[0], comparison.index[1]
    print(f"{higher} had a higher inflation rate than {lower}!")


def run_report(countries=REPORT_COUNTRIES, rates=None, money=SAVED_MONEY):
    """
    Print the full two-country report, reusing a single tracker.

    Args:
        countries: Pair of country names, in report order
        rates: Optional dict of country -> yearly rates from STARTING_YEAR
            (defaults to COUNTRY_INFLATION_RATES)
        money: Cash saved in each country

    Returns:
        Dict of country -> future value of the saved cash
    """
    rates = rates or COUNTRY_INFLATION_RATES
    first_country, second_country = countries
    stats = {}

    tracker = InflationTracker(first_country)
    tracker.insert_series(STARTING_YEAR, rates[first_country])
    stats[first_country] = print_country_summary(tracker, money, STARTING_YEAR, END_YEAR)

    # Same tracker for the second country, check that it is empty first
    tracker.clear()
    tracker.print_data()
    print()

    tracker.change_country_name(second_country)
    tracker.insert_series(STARTING_YEAR, rates[second_country])
    stats[second_country] = print_country_summary(tracker, money, STARTING_YEAR, END_YEAR)

    print_verdict(compare_countries(stats))

    return {country: country_stats['future_val'] for country, country_stats in stats.items()}


def main():
    run_report()
