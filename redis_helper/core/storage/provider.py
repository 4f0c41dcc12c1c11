# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Bingyu Liu

from abc import ABC, abstractmethod

import redis


class KeyValueStore(ABC):
    """The store primitives a lock is built on.

    Method names follow redis-py, so a ``redis.Redis`` client is a
    ``KeyValueStore`` without any wrapping.
    """

    @abstractmethod
    def setnx(self, key: str, value) -> bool:
        """Atomically sets ``key`` to ``value`` only if ``key`` does not exist.

        Returns:
            bool: True if the value was set.
        """

    @abstractmethod
    def get(self, key: str):
        """Returns the value stored at ``key``, or None if it is absent."""

    @abstractmethod
    def getset(self, key: str, value):
        """Atomically sets ``key`` to ``value`` and returns the previous value
        (None if the key was absent)."""

    @abstractmethod
    def delete(self, *keys: str) -> int:
        """Removes the keys. Returns the number of keys that were removed."""

    @abstractmethod
    def exists(self, *keys: str) -> int:
        """Returns how many of the given keys are present."""


KeyValueStore.register(redis.Redis)
