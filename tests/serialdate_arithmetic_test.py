"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pytest

import pyserialdate
from pyserialdate import SerialDate
from pyserialdate import add_days, add_months, add_years, end_of_month
from pyserialdate import previous_day_of_week, following_day_of_week
from pyserialdate import nearest_day_of_week, relative_day_of_week
from pyserialdate.exception import OutOfRangeError, InvalidArgumentError

from . import serial2date


def dmy(day, month, year):
    return SerialDate.from_dmy(day, month, year)


class TestAddDays(object):

    def test_across_year_boundary(self):
        assert add_days(1, dmy(31, 12, 1999)) == dmy(1, 1, 2000)
        assert add_days(-1, dmy(1, 1, 2000)) == dmy(31, 12, 1999)

    def test_leap_day(self):
        assert add_days(1, dmy(28, 2, 2024)) == dmy(29, 2, 2024)
        assert add_days(1, dmy(28, 2, 2023)) == dmy(1, 3, 2023)

    def test_zero(self):
        d = dmy(15, 6, 2010)
        assert add_days(0, d) == d

    def test_matches_datetime(self, sample_dates):
        for i, d in enumerate(sample_dates):
            n = (i * 7919) % 20000 - 10000
            target = d.serial + n
            if not pyserialdate.SERIAL_LOWER_BOUND <= target <= pyserialdate.SERIAL_UPPER_BOUND:
                with pytest.raises(OutOfRangeError):
                    add_days(n, d)
                continue
            assert add_days(n, d).to_date() == serial2date(target)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            add_days(-1, SerialDate(2))
        with pytest.raises(OutOfRangeError):
            add_days(1, dmy(31, 12, 9999))


class TestAddMonths(object):

    def test_clamps_to_end_of_month(self):
        assert add_months(1, dmy(31, 5, 2023)) == dmy(30, 6, 2023)
        assert add_months(1, dmy(31, 1, 2023)) == dmy(28, 2, 2023)
        assert add_months(1, dmy(31, 1, 2024)) == dmy(29, 2, 2024)

    def test_year_carry(self):
        assert add_months(1, dmy(15, 12, 2023)) == dmy(15, 1, 2024)
        assert add_months(14, dmy(15, 11, 2023)) == dmy(15, 1, 2025)
        assert add_months(-1, dmy(15, 1, 2024)) == dmy(15, 12, 2023)
        assert add_months(-13, dmy(31, 3, 2024)) == dmy(28, 2, 2023)
        assert add_months(-24, dmy(10, 7, 2024)) == dmy(10, 7, 2022)

    def test_clamp_does_not_accumulate(self):
        # Each step starts from the original base, not from a clamped result.
        base = dmy(31, 1, 2023)
        assert [add_months(n, base).day for n in range(12)] == \
            [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            add_months(-1, dmy(15, 1, 1900))
        with pytest.raises(OutOfRangeError):
            add_months(1, dmy(1, 12, 9999))


class TestAddYears(object):

    def test_leap_day_clamps(self):
        assert add_years(1, dmy(29, 2, 2020)) == dmy(28, 2, 2021)
        assert add_years(4, dmy(29, 2, 2020)) == dmy(29, 2, 2024)
        assert add_years(80, dmy(29, 2, 2020)) == dmy(28, 2, 2100)

    def test_plain(self):
        assert add_years(-100, dmy(1, 3, 2000)) == dmy(1, 3, 1900)
        assert add_years(0, dmy(29, 2, 2000)) == dmy(29, 2, 2000)

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            add_years(1, dmy(1, 1, 9999))


class TestEndOfMonth(object):

    def test_end_of_month(self):
        assert end_of_month(dmy(1, 2, 2024)) == dmy(29, 2, 2024)
        assert end_of_month(dmy(15, 2, 1900)) == dmy(28, 2, 1900)
        assert end_of_month(dmy(30, 4, 2023)) == dmy(30, 4, 2023)
        assert end_of_month(dmy(5, 12, 9999)).serial == pyserialdate.SERIAL_UPPER_BOUND


class TestWeekdaySearch(object):

    def test_previous(self, monday):
        assert previous_day_of_week(pyserialdate.FRIDAY, monday) == dmy(12, 1, 2024)
        assert previous_day_of_week(pyserialdate.SUNDAY, monday) == dmy(14, 1, 2024)
        assert previous_day_of_week(pyserialdate.TUESDAY, monday) == dmy(9, 1, 2024)

    def test_previous_on_target_goes_back_a_week(self, monday):
        assert previous_day_of_week(pyserialdate.MONDAY, monday) == dmy(8, 1, 2024)

    def test_following(self, monday):
        assert following_day_of_week(pyserialdate.FRIDAY, monday) == dmy(19, 1, 2024)
        assert following_day_of_week(pyserialdate.TUESDAY, monday) == dmy(16, 1, 2024)
        friday = dmy(19, 1, 2024)
        assert following_day_of_week(pyserialdate.MONDAY, friday) == dmy(22, 1, 2024)

    def test_following_on_target_returns_base(self, monday):
        assert following_day_of_week(pyserialdate.MONDAY, monday) == monday

    def test_previous_and_following_distance(self, sample_dates):
        for d in sample_dates[:500]:
            for target in range(7):
                if target == d.day_of_week() or d.serial < 9 \
                        or d.serial > pyserialdate.SERIAL_UPPER_BOUND - 7:
                    continue
                prev = previous_day_of_week(target, d)
                assert prev.day_of_week() == target
                assert 1 <= d.serial - prev.serial <= 7
                nxt = following_day_of_week(target, d)
                assert nxt.day_of_week() == target
                assert 1 <= nxt.serial - d.serial <= 7

    def test_nearest(self, monday):
        assert nearest_day_of_week(pyserialdate.MONDAY, monday) == monday
        assert nearest_day_of_week(pyserialdate.WEDNESDAY, monday) == dmy(17, 1, 2024)
        assert nearest_day_of_week(pyserialdate.THURSDAY, monday) == dmy(18, 1, 2024)
        assert nearest_day_of_week(pyserialdate.FRIDAY, monday) == dmy(12, 1, 2024)
        assert nearest_day_of_week(pyserialdate.SUNDAY, monday) == dmy(14, 1, 2024)

    def test_nearest_minimizes_distance(self, sample_dates):
        for d in sample_dates[:500]:
            if d.serial < 9 or d.serial > pyserialdate.SERIAL_UPPER_BOUND - 7:
                continue
            for target in range(7):
                result = nearest_day_of_week(target, d)
                shift = result.serial - d.serial
                assert -3 <= shift <= 3
                assert result.day_of_week() == target
                candidates = [abs(k) for k in range(-7, 8)
                              if add_days(k, d).day_of_week() == target]
                assert abs(shift) == min(candidates)

    def test_relative(self, monday):
        friday = pyserialdate.FRIDAY
        assert relative_day_of_week(pyserialdate.PRECEDING, friday, monday) == \
            previous_day_of_week(friday, monday)
        assert relative_day_of_week(pyserialdate.NEAREST, friday, monday) == \
            nearest_day_of_week(friday, monday)
        assert relative_day_of_week(pyserialdate.FOLLOWING, friday, monday) == \
            following_day_of_week(friday, monday)

    def test_invalid_codes(self, monday):
        for search in (previous_day_of_week, following_day_of_week,
                       nearest_day_of_week):
            with pytest.raises(InvalidArgumentError):
                search(7, monday)
            with pytest.raises(InvalidArgumentError):
                search(-1, monday)
        with pytest.raises(InvalidArgumentError):
            relative_day_of_week(2, pyserialdate.MONDAY, monday)

    def test_relative_accepts_exactly_the_valid_codes(self, monday):
        for code in range(-3, 4):
            if pyserialdate.is_valid_relative_code(code):
                assert relative_day_of_week(code, pyserialdate.FRIDAY, monday) \
                    .day_of_week() == pyserialdate.FRIDAY
            else:
                with pytest.raises(InvalidArgumentError):
                    relative_day_of_week(code, pyserialdate.FRIDAY, monday)

    def test_at_range_edges(self):
        first = SerialDate(pyserialdate.SERIAL_LOWER_BOUND)
        with pytest.raises(OutOfRangeError):
            previous_day_of_week(pyserialdate.SUNDAY, first)
        assert following_day_of_week(pyserialdate.SUNDAY, first) == dmy(7, 1, 1900)
