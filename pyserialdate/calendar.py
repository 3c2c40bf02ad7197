"""A module to calculate dates from spreadsheet style serial day numbers.
This uses the proleptic Gregorian Calendar for every supported date.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to a serial
number where serial 2 is 1/1/1900 and serial 2958465 is 12/31/9999.
Serial 1 is never produced; it mirrors the spreadsheet numbering, which
agrees with these serials for every date from 3/1/1900 on.

Julian Dates are computed with jdcal so callers exchanging dates with
astronomical software can convert without going through datetime.
"""

__all__ = ['SERIAL_LOWER_BOUND', 'SERIAL_UPPER_BOUND',
           'MINIMUM_YEAR_SUPPORTED', 'MAXIMUM_YEAR_SUPPORTED',
           'MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY',
           'SATURDAY', 'SUNDAY',
           'JANUARY', 'FEBRUARY', 'MARCH', 'APRIL', 'MAY', 'JUNE', 'JULY',
           'AUGUST', 'SEPTEMBER', 'OCTOBER', 'NOVEMBER', 'DECEMBER',
           'FIRST_WEEK_IN_MONTH', 'SECOND_WEEK_IN_MONTH',
           'THIRD_WEEK_IN_MONTH', 'FOURTH_WEEK_IN_MONTH',
           'LAST_WEEK_IN_MONTH', 'PRECEDING', 'NEAREST', 'FOLLOWING',
           'is_leap_year', 'leap_year_count', 'last_day_of_month',
           'is_valid_weekday_code', 'is_valid_month_code',
           'is_valid_week_in_month_code', 'is_valid_relative_code',
           'month_code_to_quarter',
           'ymd2serial', 'serial2ymd', 'serial2julian', 'julian2serial']

from typing import Tuple  # pylint: disable=unused-import
import jdcal

from .exception import OutOfRangeError, InvalidArgumentError

SERIAL_LOWER_BOUND = 2
SERIAL_UPPER_BOUND = 2958465
MINIMUM_YEAR_SUPPORTED = 1900
MAXIMUM_YEAR_SUPPORTED = 9999

# Weekday codes agree with datetime.date.weekday(); serial 2 is a Monday.
MONDAY = 0
TUESDAY = 1
WEDNESDAY = 2
THURSDAY = 3
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6

JANUARY = 1
FEBRUARY = 2
MARCH = 3
APRIL = 4
MAY = 5
JUNE = 6
JULY = 7
AUGUST = 8
SEPTEMBER = 9
OCTOBER = 10
NOVEMBER = 11
DECEMBER = 12

FIRST_WEEK_IN_MONTH = 1
SECOND_WEEK_IN_MONTH = 2
THIRD_WEEK_IN_MONTH = 3
FOURTH_WEEK_IN_MONTH = 4
LAST_WEEK_IN_MONTH = 0

PRECEDING = -1
NEAREST = 0
FOLLOWING = 1

# Indexed by month code; entry 13 is the length of the year.
AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH = (
    0, 0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)

AGGREGATE_DAYS_TO_END_OF_MONTH = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)


def is_leap_year(year):
    # type: (int) -> bool
    """Return True if YEAR is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_year_count(year):
    # type: (int) -> int
    """Return the number of leap years from 1900 to YEAR inclusive.

    1900 itself is not a leap year, so this is 0 for any year up to 1903.
    """
    if year < MINIMUM_YEAR_SUPPORTED:
        return 0
    leap4 = year // 4 - MINIMUM_YEAR_SUPPORTED // 4
    leap100 = year // 100 - MINIMUM_YEAR_SUPPORTED // 100
    leap400 = year // 400 - MINIMUM_YEAR_SUPPORTED // 400
    return leap4 - leap100 + leap400


def is_valid_weekday_code(code):
    # type: (int) -> bool
    return isinstance(code, int) and MONDAY <= code <= SUNDAY


def is_valid_month_code(code):
    # type: (int) -> bool
    return isinstance(code, int) and JANUARY <= code <= DECEMBER


def is_valid_week_in_month_code(code):
    # type: (int) -> bool
    return code in (FIRST_WEEK_IN_MONTH, SECOND_WEEK_IN_MONTH,
                    THIRD_WEEK_IN_MONTH, FOURTH_WEEK_IN_MONTH,
                    LAST_WEEK_IN_MONTH)


def is_valid_relative_code(code):
    # type: (int) -> bool
    return code in (PRECEDING, NEAREST, FOLLOWING)


def month_code_to_quarter(month):
    # type: (int) -> int
    """Return the quarter (1-4) that the month code falls in."""
    if not is_valid_month_code(month):
        raise InvalidArgumentError("Invalid month code: %r" % (month,))
    return (month - 1) // 3 + 1


def _preceding_table(year):
    # type: (int) -> Tuple[int, ...]
    if is_leap_year(year):
        return LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH
    return AGGREGATE_DAYS_TO_END_OF_PRECEDING_MONTH


def last_day_of_month(month, year):
    # type: (int, int) -> int
    """Return the number of days in MONTH of YEAR."""
    if not is_valid_month_code(month):
        raise OutOfRangeError("Invalid month: %r" % (month,))
    if is_leap_year(year):
        table = LEAP_YEAR_AGGREGATE_DAYS_TO_END_OF_MONTH
    else:
        table = AGGREGATE_DAYS_TO_END_OF_MONTH
    return table[month] - table[month - 1]


def _first_serial_of_year(year):
    # type: (int) -> int
    return (365 * (year - MINIMUM_YEAR_SUPPORTED)
            + leap_year_count(year - 1) + SERIAL_LOWER_BOUND)


def ymd2serial(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to a serial day number.
      year  - between 1900-9999
      month - 1 - 12
      day   - 1 - 31 (depending upon month and year)
    An OutOfRangeError is raised for anything else, including a day past
    the end of its month (for example 2/29 in a common year).
    """
    if not isinstance(year, int) or not isinstance(day, int):
        raise OutOfRangeError("Invalid date: %r/%r/%r (year and day must be integers)"
                              % (month, day, year))
    if year < MINIMUM_YEAR_SUPPORTED or year > MAXIMUM_YEAR_SUPPORTED:
        raise OutOfRangeError("Invalid year: %r (not between %d and %d inclusive)"
                              % (year, MINIMUM_YEAR_SUPPORTED, MAXIMUM_YEAR_SUPPORTED))
    if not is_valid_month_code(month):
        raise OutOfRangeError("Invalid month: %r" % (month,))
    if day < 1 or day > last_day_of_month(month, year):
        raise OutOfRangeError("Invalid day: %r for %d/%d" % (day, month, year))

    return _first_serial_of_year(year) + _preceding_table(year)[month] + day - 1


def serial2ymd(serial):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given serial day number to a tuple (year,month,day).

       +----------------------------+
       |  serial | (year,month,day) |
       |---------+------------------|
       |       2 | (1900,1,1)       |
       |      61 | (1900,3,1)       |
       |   36526 | (2000,1,1)       |
       | 2958465 | (9999,12,31)     |
       +----------------------------+
    """
    if serial < SERIAL_LOWER_BOUND or serial > SERIAL_UPPER_BOUND:
        raise OutOfRangeError("Invalid serial: %r (not between %d and %d inclusive)"
                              % (serial, SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND))

    # Counting every year as 365 days overestimates the year; walk back
    # until the year starts on or before the serial.
    year = MINIMUM_YEAR_SUPPORTED + (serial - SERIAL_LOWER_BOUND) // 365
    start = _first_serial_of_year(year)
    while start > serial:
        year -= 1
        start = _first_serial_of_year(year)

    day_of_year = serial - start + 1
    table = _preceding_table(year)
    month = JANUARY
    while table[month + 1] < day_of_year:
        month += 1
    return year, month, day_of_year - table[month]


def serial2julian(serial):
    # type: (int) -> float
    """Return the Julian Date at midnight starting the given serial day."""
    y, m, d = serial2ymd(serial)
    return sum(jdcal.gcal2jd(y, m, d))


def julian2serial(jd):
    # type: (float) -> int
    """Return the serial of the day containing Julian Date JD.

    Any fraction of a day is dropped.
    """
    y, m, d, _ = jdcal.jd2gcal(jd, 0.0)
    return ymd2serial(y, m, d)
