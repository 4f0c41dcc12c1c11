# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Lock module for redis_helper.

Provides a lease-based distributed lock on top of the SETNX / GET / GETSET /
DEL primitives of a key-value store.
"""

from redis_helper.core.lock.base import BaseLock, is_held
from redis_helper.core.lock.redis_lock import RedisLock

# Lock is an alias for RedisLock
Lock = RedisLock

__all__ = [
    "BaseLock",
    "Lock",
    "RedisLock",
    "is_held",
]
