# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

import redis_helper
from redis_helper import MemoryStore, RedisHelper
from redis_helper.util.exceptions import UnknownUniqueValue

BASE_KEY = "lock_example"


class Foo(RedisHelper):
    def __init__(self, id, number):
        self.id = id
        self.number = number
        self.empty_key = ""


class Bar(Foo):
    pass


Bar.define_attr_keys("hoge", "piyo", unique_attr="id")
Bar.define_attr_keys("hoge_by_number", unique_attr="number")


@pytest.fixture
def foo():
    return Foo(42, 114514)


@pytest.fixture
def bar():
    return Bar(42, 114514)


@pytest.fixture
def store():
    store = MemoryStore()
    Foo.set_redis(store)
    yield store
    Foo.set_redis(None)


def test_version():
    assert redis_helper.__version__ is not None


class TestRedis:
    def test_default_connection(self, foo):
        with patch("redis_helper.helper.get_redis") as get_redis:
            assert foo.redis() is get_redis.return_value

    def test_custom_connection(self, foo):
        conn = MagicMock()
        Foo.set_redis(conn)
        try:
            assert foo.redis() is conn
            assert Foo.redis() is conn
        finally:
            Foo.set_redis(None)


class TestAttrKey:
    def test_default_unique_attr(self, foo):
        assert foo.attr_key("bar") == "Foo:42:bar"

    def test_another_unique_attr(self, foo):
        assert foo.attr_key("bar", "number") == "Foo:114514:bar"

    def test_empty_unique_attr(self, foo):
        with pytest.raises(UnknownUniqueValue):
            foo.attr_key("bar", "empty_key")

    def test_missing_unique_attr(self, foo):
        with pytest.raises(UnknownUniqueValue):
            foo.attr_key("bar", "no_such_attr")

    def test_blank_id(self):
        with pytest.raises(UnknownUniqueValue):
            Foo(None, 1).attr_key("bar")
        with pytest.raises(UnknownUniqueValue):
            Foo("  ", 1).attr_key("bar")

    def test_zero_is_not_blank(self):
        assert Foo(0, 1).attr_key("bar") == "Foo:0:bar"

    def test_instance_key(self, foo):
        assert foo.instance_key() == "Foo:42"
        assert foo.instance_key("number") == "Foo:114514"

    def test_generate_key(self):
        assert Foo.generate_key(1) == "Foo:1"
        assert Foo.generate_key(1, "bar") == "Foo:1:bar"


class TestDefineAttrKeys:
    def test_default_unique_attr(self, bar):
        assert bar.hoge_key() == "Bar:42:hoge"
        assert bar.piyo_key() == "Bar:42:piyo"

    def test_custom_unique_attr(self, bar):
        assert bar.hoge_by_number_key() == "Bar:114514:hoge_by_number"

    def test_keys_not_added_to_parent(self, foo):
        assert not hasattr(foo, "hoge_key")


class TestTtlTo:
    def test_default_from_time(self, foo):
        ttl = foo.ttl_to(datetime.now(timezone.utc) + timedelta(seconds=1000))
        assert 0 < ttl <= 1000

    def test_future(self, foo):
        from_time = datetime.now(timezone.utc)
        assert foo.ttl_to(from_time + timedelta(seconds=1000), from_time) == 1000

    def test_just_now(self, foo):
        from_time = datetime.now(timezone.utc)
        assert foo.ttl_to(from_time, from_time) == 1

    def test_just_now_signed(self, foo):
        from_time = datetime.now(timezone.utc)
        assert foo.ttl_to(from_time, from_time, unsigned_non_zero=False) == 0

    def test_past_signed(self, foo):
        from_time = datetime.now(timezone.utc)
        assert foo.ttl_to(from_time - timedelta(seconds=10), from_time, unsigned_non_zero=False) == -10

    def test_timestamps(self):
        assert RedisHelper.ttl_to(1100.5, 1000.0) == 100
        assert RedisHelper.ttl_to(1000.0, 1000.0) == 1


class TestLock:
    def test_class_lock_uses_lock_key(self):
        conn = MagicMock()
        work = MagicMock()
        with patch("redis_helper.helper.RedisLock") as lock_cls:
            Foo.set_redis(conn)
            try:
                Foo.lock(BASE_KEY, work)
            finally:
                Foo.set_redis(None)
        lock_cls.assert_called_once_with(conn, f"{BASE_KEY}:lock", {})
        lock_cls.return_value.lock.assert_called_once_with(work)

    def test_instance_lock_delegates(self, foo):
        with patch("redis_helper.helper.RedisLock") as lock_cls:
            Foo.set_redis(MagicMock())
            try:
                foo.lock(BASE_KEY, lambda: None, timeout=1)
            finally:
                Foo.set_redis(None)
        assert lock_cls.call_args[0][1] == f"{BASE_KEY}:lock"
        assert lock_cls.call_args[0][2] == {"timeout": 1}

    def test_lock_runs_work(self, foo, store):
        assert foo.lock(foo.attr_key("bar"), lambda: store.exists("Foo:42:bar:lock")) == 1
        assert len(store) == 0

    def test_lock_without_base_key(self, store):
        assert Foo.lock(None, lambda: store.exists("lock")) == 1
