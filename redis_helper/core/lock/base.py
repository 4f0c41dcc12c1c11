# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

"""
Abstract base class for key-based locks.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from contextvars import ContextVar
from threading import get_ident
from typing import Callable, FrozenSet, List, Optional, Tuple, TypeVar

T = TypeVar("T")

# (thread id, lock keys) held by the current thread / asyncio task
_HELD_KEYS: ContextVar[Tuple[Optional[int], FrozenSet[str]]] = ContextVar(
    "redis_helper_held_keys", default=(None, frozenset())
)


def _held_keys() -> FrozenSet[str]:
    thread_id, keys = _HELD_KEYS.get()
    # A context copied into another thread does not carry the marker along.
    if thread_id != get_ident():
        return frozenset()
    return keys


def is_held(lock_key: str) -> bool:
    """Whether the current execution context already holds ``lock_key``."""
    return lock_key in _held_keys()


class BaseLock(ABC):
    """Abstract base class for key-based locks.

    This class runs a unit of work while the lock is held and releases the
    lock on every exit path. Acquisition is reentrant per execution context:
    a nested call for a key the caller already holds runs the work directly,
    without acquiring or releasing again.

    Subclasses must implement _try_lock() and unlock().

    Attributes:
        lock_key: The key identifying the locked resource.
    """

    def __init__(self, lock_key: str):
        """Initialize the lock.

        Args:
            lock_key: The key identifying the locked resource.
        """
        self.lock_key = lock_key
        self._holds: List = []

    def lock(self, work: Callable[[], T] = None) -> T:
        """Run ``work`` while holding the lock.

        Args:
            work: A zero-argument callable.

        Returns:
            Whatever ``work`` returns.

        Raises:
            TypeError: If no callable is given.
            LockTimeout: If the lock cannot be acquired within the timeout.
        """
        if work is None or not callable(work):
            raise TypeError("lock() requires a callable to run while the lock is held")
        with self.hold():
            return work()

    @contextmanager
    def hold(self):
        """Context manager holding the lock for the duration of the block."""
        held = _held_keys()
        if self.lock_key in held:
            yield self
            return
        token = _HELD_KEYS.set((get_ident(), held | {self.lock_key}))
        try:
            self._try_lock(self._now())
            yield self
        finally:
            self.unlock()
            _HELD_KEYS.reset(token)

    def __enter__(self):
        """Context manager entry - acquires the lock."""
        hold = self.hold()
        hold.__enter__()
        self._holds.append(hold)
        return self

    def __exit__(self, *args, **kwargs):
        """Context manager exit - releases the lock."""
        return self._holds.pop().__exit__(*args, **kwargs)

    @abstractmethod
    def _now(self) -> float:
        """Current time as a UNIX timestamp."""

    @abstractmethod
    def _try_lock(self, start: float) -> None:
        """Acquire the lock.

        Args:
            start: UNIX timestamp at which waiting began.

        Raises:
            LockTimeout: If the lock cannot be acquired within the timeout.
        """

    @abstractmethod
    def unlock(self) -> None:
        """Release the lock.

        This method should be safe to call even if the lock is not held.
        """
