"""Configuration loading and constants for the inflation tracker."""

import json
import os


def _load_config_data():
    """Load configuration data from JSON file."""
    config_path = os.path.join(os.path.dirname(__file__), 'config_data.json')
    with open(config_path, 'r') as f:
        return json.load(f)


_CONFIG_DATA = _load_config_data()

# Data covers 1993 - 2022, the first 30 years after the division of Czechoslovakia
STARTING_YEAR = _CONFIG_DATA['starting_year']
NUMBER_OF_YEARS = _CONFIG_DATA['number_of_years']
END_YEAR = STARTING_YEAR + NUMBER_OF_YEARS

# Cash kept under the mattress for the whole period
SAVED_MONEY = _CONFIG_DATA['saved_money']

# Annual inflation rates as proportions (0.28 = 28%), one per year from STARTING_YEAR
COUNTRY_INFLATION_RATES = {
    country: tuple(rates)
    for country, rates in _CONFIG_DATA['inflation_rates'].items()
}

# Countries in the order the report walks through them
REPORT_COUNTRIES = tuple(_CONFIG_DATA['report_countries'])

# Default color scheme for charts (loaded from config_data.json)
CHART_COLORS = _CONFIG_DATA['chart_colors']


def get_country_rates(country):
    """Get the yearly rates for a country as (year, rate) pairs."""
    rates = COUNTRY_INFLATION_RATES[country]
    return tuple(zip(range(STARTING_YEAR, STARTING_YEAR + len(rates)), rates))
