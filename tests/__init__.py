"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import datetime

# Serial 0 would be 12/30/1899; every supported serial is a day count from it.
SERIAL_EPOCH = datetime.date(1899, 12, 30)


def date2serial(value):
    # type: (datetime.date) -> int
    """Independent serial computation through datetime ordinals."""
    return value.toordinal() - SERIAL_EPOCH.toordinal()


def serial2date(serial):
    # type: (int) -> datetime.date
    return datetime.date.fromordinal(SERIAL_EPOCH.toordinal() + serial)
