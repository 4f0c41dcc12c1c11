# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Redis-based distributed lock implementation.
"""

import time
from typing import Any, Callable, Mapping, Optional

import redis_helper
from redis_helper.client.log import logger
from redis_helper.core.lock.base import BaseLock
from redis_helper.core.storage.provider import KeyValueStore
from redis_helper.util.exceptions import LockTimeout


def _parse_expiration(value) -> float:
    """Reads a stored lease expiration. Absent or malformed values read as 0.0,
    i.e. as a lease that has already expired."""
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed lock expiration %r", value)
        return 0.0


class RedisLock(BaseLock):
    """Redis-based distributed lock.

    The value stored under the lock key is the UNIX timestamp at which the
    current holder's lease expires. The lock is taken with SETNX; a lease
    left behind by a holder that never released it is taken over with
    GETSET once it has expired.

    Example:
        >>> import redis
        >>> client = redis.Redis(host='localhost', port=6379, db=0)
        >>> lock = RedisLock(client, "my_lock", timeout=2)
        >>> lock.lock(lambda: 1 + 1)
        2
        >>> with lock:
        ...     # Critical section
        ...     pass

    Args:
        redis: A Redis client, or any other KeyValueStore.
        lock_key: The lock key name in the store.
        options: Optional settings. ``timeout`` is both the longest time spent
            waiting for the lock and the lease duration once acquired
            (default: 5 seconds).
        timeout: Overrides ``options["timeout"]``.
        clock: Returns the current time as a UNIX timestamp.
    """

    def __init__(
        self,
        redis: KeyValueStore,
        lock_key: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(lock_key)
        self.redis = redis
        self.options = dict(options or {})
        if timeout is not None:
            self.options["timeout"] = timeout
        self._clock = clock
        self._locked_by_self = False
        self._timeout = None

    @property
    def locked(self) -> bool:
        """Whether this instance holds the lease."""
        return self._locked_by_self

    def unlock(self):
        """Release the lock.

        The key is deleted only if this instance set it, so a lease taken
        over by somebody else is never released from here.
        """
        if self._locked_by_self:
            self.redis.delete(self.lock_key)
            self._locked_by_self = False
            logger.debug("Released lock %s", self.lock_key)

    def _now(self) -> float:
        return self._clock()

    def _try_lock(self, start: float):
        """Acquire the lock, polling until it is free or the timeout passes.

        Args:
            start: UNIX timestamp at which waiting began.

        Raises:
            LockTimeout: If the lock cannot be acquired within the timeout.
        """
        while True:
            if self.redis.setnx(self.lock_key, self.expiration()):
                self._locked_by_self = True
                logger.debug("Acquired lock %s", self.lock_key)
                return

            current = _parse_expiration(self.redis.get(self.lock_key))
            if current < self._clock():
                # Previous holder's lease expired without being released.
                old = _parse_expiration(self.redis.getset(self.lock_key, self.expiration()))
                if old < self._clock():
                    self._locked_by_self = True
                    logger.warning("Took over expired lock %s (expired at %f)", self.lock_key, old)
                    return

            time.sleep(redis_helper.constants.LOCK_POLL_INTERVAL)
            if self._clock() - start > self.timeout():
                logger.warning("Timed out after %.2fs waiting for lock %s", self.timeout(), self.lock_key)
                raise LockTimeout(self.lock_key, self.timeout())

    def expiration(self) -> float:
        """UNIX timestamp until which a lease taken now is valid."""
        return self._clock() + self.timeout()

    def timeout(self) -> float:
        """Lock acquisition timeout and lease duration, in seconds."""
        if self._timeout is None:
            timeout = self.options.get("timeout")
            if timeout is None:
                timeout = redis_helper.constants.DEFAULT_LOCK_TIMEOUT
            self._timeout = float(timeout)
        return self._timeout
