import pytest

from reworkbot.services.cache import ExpiringCache


class TestExpiringCache:

    def test_empty_cache_is_expired(self, clock):
        cache = ExpiringCache(300, clock)
        assert cache.is_expired
        assert cache.get() is None
        assert cache.expires_at is None

    def test_fresh_after_set(self, clock):
        cache = ExpiringCache(300, clock)
        cache.set(["a"])
        assert not cache.is_expired
        assert cache.get() == ["a"]
        assert cache.expires_at == clock.now + 300

    def test_value_unchanged_until_deadline(self, clock):
        cache = ExpiringCache(300, clock)
        value = ["a", "b"]
        cache.set(value)
        clock.advance(299.9)
        assert not cache.is_expired
        assert cache.get() is value

    def test_expires_exactly_at_deadline(self, clock):
        cache = ExpiringCache(300, clock)
        cache.set(1)
        clock.advance(300)
        assert cache.is_expired

    def test_get_does_not_clear_stale_value(self, clock):
        cache = ExpiringCache(300, clock)
        cache.set(1)
        clock.advance(1000)
        assert cache.is_expired
        assert cache.get() == 1

    def test_set_restarts_window(self, clock):
        cache = ExpiringCache(300, clock)
        cache.set(1)
        clock.advance(250)
        cache.set(2)
        clock.advance(250)
        assert not cache.is_expired
        assert cache.value == 2

    def test_invalidate(self, clock):
        cache = ExpiringCache(300, clock)
        cache.set(1)
        cache.invalidate()
        assert cache.is_expired
        assert cache.value is None

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            ExpiringCache(0)
