#!/usr/bin/env python

"""Set up the pyserialdate package.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pyserialdate

To install with the test requirements:

    pip install 'pyserialdate[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pyserialdate', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pyserialdate/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pyserialdate',
    version=VERSION,
    author='NuoDB',
    description='Spreadsheet compatible serial day number dates',
    keywords='date calendar serial spreadsheet gregorian',
    packages=['pyserialdate'],
    license='BSD License',
    long_description=open(readme).read(),
    install_requires=['jdcal>=1.4'],
    extras_require=dict(test='pytest>=6'),
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
    ],
)
