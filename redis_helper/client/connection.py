# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Default Redis connection shared by the helpers.
"""

from typing import Optional

import redis

import redis_helper
from redis_helper.client.log import logger

_REDIS: Optional[redis.Redis] = None


def get_redis() -> redis.Redis:
    """Returns the default connection, creating it on first use.

    ``REDIS_URL`` takes precedence over the host/port/db/password settings in
    :mod:`redis_helper.constants`.
    """
    global _REDIS
    if _REDIS is None:
        constants = redis_helper.constants
        if constants.REDIS_URL:
            _REDIS = redis.Redis.from_url(constants.REDIS_URL)
        else:
            _REDIS = redis.Redis(
                host=constants.REDIS_HOST,
                port=constants.REDIS_PORT,
                db=constants.REDIS_DB,
                password=constants.REDIS_PASSWORD,
            )
        logger.debug("Created default redis connection %s", _REDIS)
    return _REDIS


def set_redis(conn: Optional[redis.Redis]):
    """Replaces the default connection. ``None`` drops it so the next
    :func:`get_redis` call builds a fresh one."""
    global _REDIS
    _REDIS = conn
