"""Date arithmetic and weekday search over SerialDate values.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Every function returns a new SerialDate; the base date is never changed.
A result outside 1/1/1900 - 12/31/9999 raises OutOfRangeError.
"""

__all__ = ['add_days', 'add_months', 'add_years', 'end_of_month',
           'previous_day_of_week', 'following_day_of_week',
           'nearest_day_of_week', 'relative_day_of_week']

from .exception import InvalidArgumentError
from .calendar import is_valid_weekday_code, is_valid_relative_code
from .calendar import last_day_of_month
from .calendar import PRECEDING, NEAREST, FOLLOWING
from .serialdate import SerialDate


def add_days(days, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the date DAYS after BASE (before it if DAYS is negative)."""
    return SerialDate(base.serial + days)


def add_months(months, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the date MONTHS calendar months after BASE.

    The day of month is kept where possible and otherwise clamped to the
    last day of the target month, so 5/31 plus one month is 6/30.
    """
    year, month = divmod(base.year * 12 + base.month - 1 + months, 12)
    month += 1
    day = min(base.day, last_day_of_month(month, year))
    return SerialDate.from_ymd(year, month, day)


def add_years(years, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the same day and month YEARS later; 2/29 may become 2/28."""
    year = base.year + years
    day = min(base.day, last_day_of_month(base.month, year))
    return SerialDate.from_ymd(year, base.month, day)


def end_of_month(base):
    # type: (SerialDate) -> SerialDate
    return SerialDate.from_ymd(base.year, base.month,
                               last_day_of_month(base.month, base.year))


def _check_weekday(target):
    # type: (int) -> None
    if not is_valid_weekday_code(target):
        raise InvalidArgumentError("Invalid day-of-the-week code: %r" % (target,))


def previous_day_of_week(target, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the latest date before BASE falling on weekday TARGET.

    If BASE is itself a TARGET weekday the result is one week earlier.
    """
    _check_weekday(target)
    base_dow = base.day_of_week()
    if base_dow > target:
        adjust = min(0, target - base_dow)
    else:
        adjust = -7 + max(0, target - base_dow)
    return add_days(adjust, base)


def following_day_of_week(target, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the earliest date after BASE falling on weekday TARGET.

    Unlike previous_day_of_week, a BASE that is already a TARGET weekday
    is returned unchanged rather than moved a week on.
    """
    _check_weekday(target)
    base_dow = base.day_of_week()
    if base_dow > target:
        adjust = 7 + min(0, target - base_dow)
    else:
        adjust = max(0, target - base_dow)
    return add_days(adjust, base)


def nearest_day_of_week(target, base):
    # type: (int, SerialDate) -> SerialDate
    """Return the TARGET weekday closest to BASE, at most 3 days away."""
    _check_weekday(target)
    adjust = target - base.day_of_week()
    if adjust <= -4:
        adjust += 7
    elif adjust >= 4:
        adjust -= 7
    return add_days(adjust, base)


_SEARCHES = {PRECEDING: previous_day_of_week,
             NEAREST: nearest_day_of_week,
             FOLLOWING: following_day_of_week}


def relative_day_of_week(relative, target, base):
    # type: (int, int, SerialDate) -> SerialDate
    """Find weekday TARGET PRECEDING, NEAREST or FOLLOWING the BASE date."""
    if not is_valid_relative_code(relative):
        raise InvalidArgumentError("Invalid relative code: %r" % (relative,))
    return _SEARCHES[relative](target, base)
