# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Mixin for classes that keep data in Redis.

Example:
    >>> class Foo(RedisHelper):
    ...     def __init__(self, id, end_at):
    ...         self.id = id
    ...         self.end_at = end_at
    ...
    ...     def bar_count(self):
    ...         # bar_count_key() == attr_key("bar_count") == "Foo:<id>:bar_count"
    ...         return int(self.redis().get(self.bar_count_key()) or 0)
    ...
    ...     def update_bar_count(self, count):
    ...         self.redis().setex(self.bar_count_key(), self.ttl_to(self.end_at), count)
    >>> Foo.define_attr_keys("bar_count")
"""

import time
from datetime import datetime
from typing import Any, Callable, Optional, TypeVar, Union

import redis_helper
from redis_helper.client.connection import get_redis
from redis_helper.core.lock import RedisLock
from redis_helper.util.exceptions import UnknownUniqueValue

T = TypeVar("T")


def _is_blank(value) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


def _join_key(*parts) -> str:
    return redis_helper.constants.REDIS_KEY_DELIMITER.join(str(p) for p in parts if p is not None)


class RedisHelper:
    _redis = None

    @classmethod
    def redis(cls):
        """The class's connection, the package default one unless set with set_redis()."""
        if cls._redis is None:
            return get_redis()
        return cls._redis

    @classmethod
    def set_redis(cls, conn):
        cls._redis = conn

    @classmethod
    def define_attr_keys(cls, *names: str, unique_attr: Optional[str] = None):
        """Adds a ``<name>_key()`` method for each name.

        Args:
            names: Key names.
            unique_attr: Attribute used as the instance's unique key (default: ``id``).
        """
        for name in names:
            def key_method(self, _name=name):
                return self.attr_key(_name, unique_attr)

            key_method.__name__ = f"{name}_key"
            setattr(cls, key_method.__name__, key_method)

    @classmethod
    def generate_key(cls, unique_key, attr_name: Optional[str] = None) -> str:
        """Builds ``"<ClassName>:<unique_key>[:<attr_name>]"``."""
        return _join_key(cls.__name__, unique_key, attr_name)

    @classmethod
    def lock(cls, base_key: Optional[str], work: Callable[[], T], **options) -> T:
        """Runs ``work`` while holding the lock on ``"<base_key>:lock"``.

        Callable on the class and on instances.

        Example:
            >>> foo.lock(foo.attr_key("bar"), lambda: do_something())

        Args:
            base_key: Key of the locked resource.
            work: Zero-argument callable run under the lock.
            options: Lock options, e.g. ``timeout``.
        """
        lock_key = _join_key(base_key, redis_helper.constants.LOCK_POSTFIX)
        return RedisLock(cls.redis(), lock_key, options).lock(work)

    def attr_key(self, attr_name: str, unique_attr: Optional[str] = None) -> str:
        """Key built from the instance's unique key and ``attr_name``."""
        return self.generate_key(self.unique_key(unique_attr), attr_name)

    def instance_key(self, unique_attr: Optional[str] = None) -> str:
        """Key built from the instance's unique key, ``"<ClassName>:<unique key>"``."""
        return self.generate_key(self.unique_key(unique_attr))

    def unique_key(self, unique_attr: Optional[str] = None) -> Any:
        attr_name = unique_attr if not _is_blank(unique_attr) else redis_helper.constants.DEFAULT_UNIQUE_ATTR_NAME
        value = getattr(self, attr_name, None)
        if callable(value):
            value = value()
        if _is_blank(value):
            raise UnknownUniqueValue(attr_name)
        return value

    @staticmethod
    def ttl_to(
        to_time: Union[datetime, float],
        from_time: Union[datetime, float, None] = None,
        unsigned_non_zero: bool = True,
    ) -> int:
        """TTL (in seconds) that makes a key expire at ``to_time``.

        Example:
            >>> # expire 24 hours from now
            >>> redis.setex(key, RedisHelper.ttl_to(datetime.now() + timedelta(days=1)), value)

        Args:
            to_time: Expiry time, a datetime or a UNIX timestamp.
            from_time: Current time (default: now).
            unsigned_non_zero: Return 1 instead of a TTL that is zero or negative.
        """
        if isinstance(to_time, datetime):
            if from_time is None:
                from_time = datetime.now(to_time.tzinfo)
            ttl = int((to_time - from_time).total_seconds())
        else:
            if from_time is None:
                from_time = time.time()
            ttl = int(to_time - from_time)
        if ttl > 0:
            return ttl
        return 1 if unsigned_non_zero else ttl
