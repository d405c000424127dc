"""Ordered year -> inflation rate tracker with extremum and future value queries."""

import pandas as pd


class TrackerError(Exception):
    """Base class for inflation tracker errors."""


class EmptyTrackerError(TrackerError, ValueError):
    """Raised when an extremum is requested from a tracker with no data."""


class InvalidYearRangeError(TrackerError, ValueError):
    """Raised in strict mode when start_year >= end_year."""


class MissingYearDataError(TrackerError, KeyError):
    """Raised in strict mode when a year in the requested range has no rate."""


class InflationTracker:
    """
    Yearly inflation rates for a single country, kept in insertion order.

    Besides the rates themselves, the tracker keeps a running highest/lowest
    cache that is updated on every insert. get_max() and get_min() do not use
    it; they scan the stored rates instead.

    Example usage:
        tracker = InflationTracker('Czech Republic')
        tracker.insert(1993, 0.28)
        tracker.insert(1994, 0.10)
        tracker.get_max()                          # (1993, 0.28)
        tracker.get_future_val(100.0, 1993, 1995)  # 64.8
    """

    def __init__(self, name=''):
        """
        Initialize a tracker with the given country name.

        Args:
            name: Name of the country
        """
        self.country_name = ''
        self.yearly_val = {}
        self.highest_year = None
        self.highest_val = None
        self.lowest_year = None
        self.lowest_val = None
        self.change_country_name(name)

    def __len__(self):
        return len(self.yearly_val)

    def __iter__(self):
        return iter(self.yearly_val)

    def __contains__(self, year):
        return year in self.yearly_val

    def __repr__(self):
        return f"InflationTracker({self.country_name!r}, years={len(self)})"

    def items(self):
        """(year, rate) pairs in insertion order."""
        return self.yearly_val.items()

    def insert(self, year, value):
        """
        Insert a rate for a year and update the highest/lowest cache.

        Re-inserting an existing year overwrites its rate but keeps its
        position. The lowest cache is only checked when the value is not a
        new highest.

        Args:
            year: Year of measurement, used as the key
            value: Measured inflation rate as a proportion
        """
        self.yearly_val[year] = value

        if len(self.yearly_val) == 1:
            self.highest_year, self.highest_val = year, value
            self.lowest_year, self.lowest_val = year, value
        elif value > self.highest_val:
            self.highest_year, self.highest_val = year, value
        elif value < self.lowest_val:
            self.lowest_year, self.lowest_val = year, value

    def extend(self, pairs):
        """Insert (year, rate) pairs in the given order."""
        for year, value in pairs:
            self.insert(year, value)

    def insert_series(self, start_year, values):
        """Insert consecutive yearly rates starting at start_year."""
        self.extend(zip(range(start_year, start_year + len(values)), values))

    def clear(self):
        """Clear all rates, the country name and the highest/lowest cache."""
        self.country_name = ''
        self.yearly_val.clear()
        self.highest_year = None
        self.highest_val = None
        self.lowest_year = None
        self.lowest_val = None

    def change_country_name(self, new_name):
        self.country_name = new_name

    def get_max(self):
        """
        Get the year and value of the maximum yearly inflation.

        Ties go to the year inserted first.

        Returns:
            Tuple of (year, rate)

        Raises:
            EmptyTrackerError: If no rates are stored
        """
        if not self.yearly_val:
            raise EmptyTrackerError(f"No inflation data for {self.country_name or 'tracker'}")
        return max(self.yearly_val.items(), key=lambda item: item[1])

    def get_min(self):
        """
        Get the year and value of the minimum yearly inflation.

        Ties go to the year inserted first.

        Returns:
            Tuple of (year, rate)

        Raises:
            EmptyTrackerError: If no rates are stored
        """
        if not self.yearly_val:
            raise EmptyTrackerError(f"No inflation data for {self.country_name or 'tracker'}")
        return min(self.yearly_val.items(), key=lambda item: item[1])

    def get_future_val(self, money, start_year, end_year, strict=False):
        """
        Get the value of cash kept from start_year until end_year.

        Every year in [start_year, end_year) erodes the money by its rate,
        with no interest earned in between.

        Args:
            money: Original value
            start_year: Year when money was worth 100%
            end_year: Year for which we want to know the value
            strict: Raise instead of printing a warning on bad input

        Returns:
            The future value of money in end_year

        Raises:
            InvalidYearRangeError: If strict and start_year >= end_year
            MissingYearDataError: If strict and a year in range has no rate
        """
        if start_year >= end_year:
            if strict:
                raise InvalidYearRangeError(
                    f"Start year {start_year} must be before end year {end_year}")
            print("Warning: Incorrect start year and end year!")

        current_money = money
        for year in range(start_year, end_year):
            rate = self.yearly_val.get(year)
            if rate is None:
                if strict:
                    raise MissingYearDataError(year)
                # Missing years count as 0% inflation
                print("Warning: Incorrect data!")
                continue
            current_money *= 1.0 - rate

        return current_money

    def print_data(self):
        """
        Print stored data as one "year | rate%" line per year.

        Prints a warning instead if there is no data to print.
        """
        if not self.yearly_val:
            print("Warning: Found no data to print!")
            return

        for year, value in self.yearly_val.items():
            print(f"{year} | {value * 100:.2f}%")

    def to_series(self):
        """Get the stored rates as a pandas Series indexed by year."""
        return pd.Series(
            list(self.yearly_val.values()),
            index=pd.Index(list(self.yearly_val.keys()), name='Year'),
            name=self.country_name,
            dtype=float,
        )
