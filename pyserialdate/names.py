"""Display names for month, weekday, week-in-month and relative codes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Nothing here reads the process locale.  Callers who want names in another
language build their own NameTable and pass it as NAMES.
"""

__all__ = ['NameTable', 'ENGLISH', 'month_code_to_string',
           'weekday_code_to_string', 'week_in_month_to_string',
           'relative_to_string', 'format_date']

from collections import namedtuple

from typing import Any  # pylint: disable=unused-import

from .exception import InvalidArgumentError
from .calendar import is_valid_month_code, is_valid_weekday_code
from .calendar import is_valid_week_in_month_code, is_valid_relative_code
from .calendar import FIRST_WEEK_IN_MONTH, SECOND_WEEK_IN_MONTH
from .calendar import THIRD_WEEK_IN_MONTH, FOURTH_WEEK_IN_MONTH
from .calendar import LAST_WEEK_IN_MONTH
from .calendar import PRECEDING, NEAREST, FOLLOWING

# months and short_months are indexed by month code - 1,
# weekdays and short_weekdays by weekday code (MONDAY == 0).
NameTable = namedtuple('NameTable',
                       ['months', 'short_months', 'weekdays', 'short_weekdays'])

ENGLISH = NameTable(
    months=('January', 'February', 'March', 'April', 'May', 'June', 'July',
            'August', 'September', 'October', 'November', 'December'),
    short_months=('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug',
                  'Sep', 'Oct', 'Nov', 'Dec'),
    weekdays=('Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday',
              'Saturday', 'Sunday'),
    short_weekdays=('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun'))

_WEEK_IN_MONTH = {FIRST_WEEK_IN_MONTH: "First",
                  SECOND_WEEK_IN_MONTH: "Second",
                  THIRD_WEEK_IN_MONTH: "Third",
                  FOURTH_WEEK_IN_MONTH: "Fourth",
                  LAST_WEEK_IN_MONTH: "Last"}

_RELATIVE = {PRECEDING: "Preceding",
             NEAREST: "Nearest",
             FOLLOWING: "Following"}


def month_code_to_string(month, shortened=False, names=ENGLISH):
    # type: (int, bool, NameTable) -> str
    if not is_valid_month_code(month):
        raise InvalidArgumentError("Invalid month code: %r" % (month,))
    table = names.short_months if shortened else names.months
    return table[month - 1]


def weekday_code_to_string(weekday, shortened=False, names=ENGLISH):
    # type: (int, bool, NameTable) -> str
    if not is_valid_weekday_code(weekday):
        raise InvalidArgumentError("Invalid day-of-the-week code: %r" % (weekday,))
    table = names.short_weekdays if shortened else names.weekdays
    return table[weekday]


def week_in_month_to_string(code):
    # type: (int) -> str
    if not is_valid_week_in_month_code(code):
        raise InvalidArgumentError("Invalid week-in-month code: %r" % (code,))
    return _WEEK_IN_MONTH[code]


def relative_to_string(code):
    # type: (int) -> str
    if not is_valid_relative_code(code):
        raise InvalidArgumentError("Invalid relative code: %r" % (code,))
    return _RELATIVE[code]


def format_date(value, shortened=False, names=ENGLISH):
    # type: (Any, bool, NameTable) -> str
    """Render a SerialDate as day-month-year, e.g. 1-January-1900."""
    return "%d-%s-%d" % (value.day,
                         month_code_to_string(value.month, shortened, names),
                         value.year)
