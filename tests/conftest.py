"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
import random

import pytest

from typing import List  # pylint: disable=unused-import

from pyserialdate import SerialDate, SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND

_log = logging.getLogger("pyserialdatetest")

# Fixed so a failing sample can be reproduced.
SAMPLE_SEED = 19000101
SAMPLE_SIZE = 2000


@pytest.fixture(scope='session')
def sample_serials():
    # type: () -> List[int]
    """Random serials across the whole range plus both bounds."""
    rnd = random.Random(SAMPLE_SEED)
    serials = [rnd.randint(SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND)
               for _ in range(SAMPLE_SIZE)]
    serials.extend([SERIAL_LOWER_BOUND, SERIAL_UPPER_BOUND])
    _log.info("Sampled %d serials with seed %d", len(serials), SAMPLE_SEED)
    return serials


@pytest.fixture(scope='session')
def sample_dates(sample_serials):
    # type: (List[int]) -> List[SerialDate]
    return [SerialDate(s) for s in sample_serials]


@pytest.fixture
def monday():
    # type: () -> SerialDate
    """Monday, 1/15/2024."""
    return SerialDate.from_dmy(15, 1, 2024)
