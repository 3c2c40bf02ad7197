"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ['Error', 'OutOfRangeError', 'InvalidArgumentError']


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class OutOfRangeError(Error, ValueError):
    """A year, month, day or serial lies outside the supported range."""

    def __init__(self, value):
        Error.__init__(self, value)


class InvalidArgumentError(Error, ValueError):
    """A weekday, month, relative or include code is not recognized."""

    def __init__(self, value):
        Error.__init__(self, value)
