# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Bingyu Liu

import threading
from typing import Dict, Optional

from redis_helper.core.storage.provider import KeyValueStore


class MemoryStore(KeyValueStore):
    """Store class keeping the values in process memory.

    Values are kept as strings, the way Redis keeps the string form of
    whatever it is given.
    """

    def __init__(self):
        self.dict: Dict[str, str] = {}
        self._mutex = threading.Lock()

    def setnx(self, key: str, value) -> bool:
        """Sets the value at ``key`` unless the key is already present.

        Example:

            >>> store = MemoryStore()
            >>> store.setnx("abc", 1)
            True
            >>> store.setnx("abc", 2)
            False

        Args:
            key (str): the key to set.
            value: the value to be assigned at the key.

        Returns:
            bool: True if the value was set.
        """
        with self._mutex:
            if key in self.dict:
                return False
            self.dict[key] = str(value)
            return True

    def get(self, key: str) -> Optional[str]:
        """Gets the value at ``key``.

        Example:

            >>> store = MemoryStore()
            >>> store.set("abc", 1.5)
            >>> store.get("abc")
            '1.5'

        Returns:
            str: the stored value, or None if the key is absent.
        """
        with self._mutex:
            return self.dict.get(key)

    def set(self, key: str, value):
        with self._mutex:
            self.dict[key] = str(value)

    def getset(self, key: str, value) -> Optional[str]:
        """Replaces the value at ``key`` and returns the previous one.

        Returns:
            str: the previous value, or None if the key was absent.
        """
        with self._mutex:
            old = self.dict.get(key)
            self.dict[key] = str(value)
            return old

    def delete(self, *keys: str) -> int:
        with self._mutex:
            removed = 0
            for key in keys:
                if self.dict.pop(key, None) is not None:
                    removed += 1
            return removed

    def exists(self, *keys: str) -> int:
        with self._mutex:
            return sum(1 for key in keys if key in self.dict)

    def clear(self):
        """Clears the store."""
        with self._mutex:
            self.dict = {}

    def __contains__(self, key):
        return bool(self.exists(key))

    def __iter__(self):
        with self._mutex:
            keys = list(self.dict)
        yield from keys

    def __len__(self):
        with self._mutex:
            return len(self.dict)
