# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Bingyu Liu

import os
import re

from setuptools import find_packages, setup


project_name = "redis_helper"
this_directory = os.path.abspath(os.path.dirname(__file__))


def read_version():
    """Function to read the version from the package without importing it."""
    with open(os.path.join(this_directory, project_name, "__init__.py"), encoding="utf-8") as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


setup(
    name="redis-helper",
    version=read_version(),
    description="Key naming helpers and a lease-based distributed lock for Redis",
    license="MPL-2.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "redis>=4.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
