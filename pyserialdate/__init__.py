"""Calendar dates as spreadsheet compatible serial day numbers.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .exception import *   # pylint: disable=wildcard-import
from .calendar import *    # pylint: disable=wildcard-import
from .names import *       # pylint: disable=wildcard-import
from .serialdate import *  # pylint: disable=wildcard-import
from .arithmetic import *  # pylint: disable=wildcard-import
