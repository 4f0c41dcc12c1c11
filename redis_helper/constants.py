# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import os

# Lock acquisition timeout and lease duration (seconds)
DEFAULT_LOCK_TIMEOUT = 5
# Sleep between two acquisition attempts (seconds)
LOCK_POLL_INTERVAL = 0.1

REDIS_KEY_DELIMITER = ":"
LOCK_POSTFIX = "lock"
DEFAULT_UNIQUE_ATTR_NAME = "id"

# Default connection, see redis_helper.client.connection
REDIS_URL = os.getenv("REDIS_URL")
REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB = int(os.getenv("REDIS_DB", "0"))
REDIS_PASSWORD = os.getenv("REDIS_PASSWORD")
