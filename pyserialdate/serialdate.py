"""A module for housing the SerialDate value class.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
SerialDate -- An immutable calendar date backed by a serial day number.
AnnotatedDate -- A SerialDate paired with a free-text description.

Include Modes (for SerialDate.is_in_range):
INCLUDE_NONE -- Neither bound is part of the range.
INCLUDE_FIRST -- The earlier bound is part of the range.
INCLUDE_SECOND -- The later bound is part of the range.
INCLUDE_BOTH -- Both bounds are part of the range.
"""

__all__ = ['SerialDate', 'AnnotatedDate', 'INCLUDE_NONE', 'INCLUDE_FIRST',
           'INCLUDE_SECOND', 'INCLUDE_BOTH']

import operator
from datetime import date as Date

from typing import Optional, Tuple  # pylint: disable=unused-import

from .exception import InvalidArgumentError
from .calendar import SERIAL_LOWER_BOUND, ymd2serial, serial2ymd
from .calendar import serial2julian, julian2serial
from .names import format_date

INCLUDE_NONE = 0
INCLUDE_FIRST = 1
INCLUDE_SECOND = 2
INCLUDE_BOTH = 3


class SerialDate(object):
    """A calendar date between 1/1/1900 and 12/31/9999.

    The date is held both as its serial number and as (year, month, day);
    the two are computed together at construction and never change.
    Instances are hashable and ordered by serial number.
    """

    __slots__ = ('_serial', '_ymd')

    def __init__(self, serial):
        # type: (int) -> None
        serial = operator.index(serial)
        ymd = serial2ymd(serial)
        object.__setattr__(self, '_serial', serial)
        object.__setattr__(self, '_ymd', ymd)

    def __setattr__(self, name, value):
        raise AttributeError("SerialDate is immutable")

    def __delattr__(self, name):
        raise AttributeError("SerialDate is immutable")

    def __reduce__(self):
        return (self.__class__, (self._serial,))

    @classmethod
    def from_serial(cls, serial):
        # type: (int) -> SerialDate
        return cls(serial)

    @classmethod
    def from_dmy(cls, day, month, year):
        # type: (int, int, int) -> SerialDate
        """Create a date from day, month and year, in that order."""
        return cls(ymd2serial(year, month, day))

    @classmethod
    def from_ymd(cls, year, month, day):
        # type: (int, int, int) -> SerialDate
        return cls(ymd2serial(year, month, day))

    @classmethod
    def from_date(cls, value):
        # type: (Date) -> SerialDate
        """Create a date from a datetime.date (or datetime.datetime).

        Any time of day is ignored.
        """
        return cls(ymd2serial(value.year, value.month, value.day))

    @classmethod
    def from_julian(cls, jd):
        # type: (float) -> SerialDate
        return cls(julian2serial(jd))

    @classmethod
    def today(cls):
        # type: () -> SerialDate
        return cls.from_date(Date.today())

    def to_serial(self):
        # type: () -> int
        return self._serial

    def to_date(self):
        # type: () -> Date
        return Date(*self._ymd)

    def to_julian(self):
        # type: () -> float
        return serial2julian(self._serial)

    def to_ymd(self):
        # type: () -> Tuple[int, int, int]
        return self._ymd

    @property
    def serial(self):
        # type: () -> int
        return self._serial

    @property
    def year(self):
        # type: () -> int
        return self._ymd[0]

    @property
    def month(self):
        # type: () -> int
        return self._ymd[1]

    @property
    def day(self):
        # type: () -> int
        return self._ymd[2]

    def day_of_week(self):
        # type: () -> int
        """Return the weekday code, MONDAY (0) through SUNDAY (6)."""
        return (self._serial - SERIAL_LOWER_BOUND) % 7

    def with_description(self, description):
        # type: (Optional[str]) -> AnnotatedDate
        return AnnotatedDate(self, description)

    # Ordering

    def compare(self, other):
        # type: (SerialDate) -> int
        """Return the number of days from OTHER to this date."""
        return self._serial - other.serial

    def is_on(self, other):
        # type: (SerialDate) -> bool
        return self.compare(other) == 0

    def is_before(self, other):
        # type: (SerialDate) -> bool
        return self.compare(other) < 0

    def is_on_or_before(self, other):
        # type: (SerialDate) -> bool
        return self.compare(other) <= 0

    def is_after(self, other):
        # type: (SerialDate) -> bool
        return self.compare(other) > 0

    def is_on_or_after(self, other):
        # type: (SerialDate) -> bool
        return self.compare(other) >= 0

    def is_in_range(self, d1, d2, include=INCLUDE_BOTH):
        # type: (SerialDate, SerialDate, int) -> bool
        """Return True if this date lies between D1 and D2.

        The bounds may be given in either order.  INCLUDE decides which of
        them count as part of the range: INCLUDE_FIRST refers to the earlier
        of the two dates and INCLUDE_SECOND to the later one.
        """
        if include not in (INCLUDE_NONE, INCLUDE_FIRST, INCLUDE_SECOND, INCLUDE_BOTH):
            raise InvalidArgumentError("Invalid include mode: %r" % (include,))
        start = min(d1.serial, d2.serial)
        end = max(d1.serial, d2.serial)
        s = self._serial
        if include == INCLUDE_BOTH:
            return start <= s <= end
        if include == INCLUDE_FIRST:
            return start <= s < end
        if include == INCLUDE_SECOND:
            return start < s <= end
        return start < s < end

    def __eq__(self, other):
        if isinstance(other, SerialDate):
            return self._serial == other._serial
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, SerialDate):
            return self._serial != other._serial
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, SerialDate):
            return self._serial < other._serial
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, SerialDate):
            return self._serial <= other._serial
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, SerialDate):
            return self._serial > other._serial
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, SerialDate):
            return self._serial >= other._serial
        return NotImplemented

    def __hash__(self):
        return hash(self._serial)

    def __repr__(self):
        # type: () -> str
        return "%s(%d)" % (self.__class__.__name__, self._serial)

    def __str__(self):
        # type: () -> str
        return format_date(self)


class AnnotatedDate(object):
    """A SerialDate carrying a free-text description.

    The description is not part of the date's value: two annotated dates
    compare, order and hash exactly as their underlying dates do, and an
    annotated date compares with bare SerialDates the same way.
    """

    __slots__ = ('_date', '_description')

    def __init__(self, date, description=None):
        # type: (SerialDate, Optional[str]) -> None
        object.__setattr__(self, '_date', date)
        object.__setattr__(self, '_description', description)

    def __setattr__(self, name, value):
        raise AttributeError("AnnotatedDate is immutable")

    def __delattr__(self, name):
        raise AttributeError("AnnotatedDate is immutable")

    def __reduce__(self):
        return (self.__class__, (self._date, self._description))

    @property
    def date(self):
        # type: () -> SerialDate
        return self._date

    @property
    def description(self):
        # type: () -> Optional[str]
        return self._description

    def with_description(self, description):
        # type: (Optional[str]) -> AnnotatedDate
        return AnnotatedDate(self._date, description)

    def _other_date(self, other):
        # type: (object) -> Optional[SerialDate]
        if isinstance(other, AnnotatedDate):
            return other._date
        if isinstance(other, SerialDate):
            return other
        return None

    def __eq__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date == other

    def __ne__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date != other

    def __lt__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date < other

    def __le__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date <= other

    def __gt__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date > other

    def __ge__(self, other):
        other = self._other_date(other)
        if other is None:
            return NotImplemented
        return self._date >= other

    def __hash__(self):
        return hash(self._date)

    def __repr__(self):
        # type: () -> str
        return "%s(%r, %r)" % (self.__class__.__name__, self._date, self._description)

    def __str__(self):
        # type: () -> str
        if self._description:
            return "%s (%s)" % (self._date, self._description)
        return str(self._date)
