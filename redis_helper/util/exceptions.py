# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin


class RedisHelperError(Exception):
    pass


class LockTimeout(RedisHelperError):
    def __init__(self, lock_key=None, timeout=None):
        self.lock_key = lock_key
        self.timeout = timeout
        if lock_key is None:
            super().__init__("Unable to acquire the lock.")
        else:
            super().__init__(f"Unable to acquire the lock on '{lock_key}' within {timeout} seconds.")


class UnknownUniqueValue(RedisHelperError):
    def __init__(self, attr_name):
        self.attr_name = attr_name
        super().__init__(f"The value of the unique attribute '{attr_name}' is blank.")
