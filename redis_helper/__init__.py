# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

__version__ = "0.1.0"

from redis_helper import constants
from redis_helper.client.connection import get_redis, set_redis
from redis_helper.core.lock import BaseLock, Lock, RedisLock
from redis_helper.core.storage import KeyValueStore, MemoryStore
from redis_helper.helper import RedisHelper
from redis_helper.util.exceptions import LockTimeout, RedisHelperError, UnknownUniqueValue

__all__ = [
    "BaseLock",
    "KeyValueStore",
    "Lock",
    "LockTimeout",
    "MemoryStore",
    "RedisHelper",
    "RedisHelperError",
    "RedisLock",
    "UnknownUniqueValue",
    "get_redis",
    "set_redis",
]
