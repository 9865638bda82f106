"""Tests for the in-memory sliding-window rate limiter."""

from utils.rate_limit import InMemoryRateLimiter


class FakeMonotonic:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestInMemoryRateLimiter:
    def test_allows_up_to_limit(self):
        limiter = InMemoryRateLimiter(clock=FakeMonotonic())

        results = [limiter.is_allowed("login:1.2.3.4", 3, 60) for _ in range(4)]

        assert results == [True, True, True, False]

    def test_window_slides(self):
        clock = FakeMonotonic()
        limiter = InMemoryRateLimiter(clock=clock)
        for _ in range(2):
            limiter.is_allowed("key", 2, 60)

        clock.now += 61

        assert limiter.is_allowed("key", 2, 60) is True

    def test_keys_are_independent(self):
        limiter = InMemoryRateLimiter(clock=FakeMonotonic())
        limiter.is_allowed("a", 1, 60)

        assert limiter.is_allowed("b", 1, 60) is True

    def test_non_positive_limits_deny(self):
        limiter = InMemoryRateLimiter()

        assert limiter.is_allowed("key", 0, 60) is False
        assert limiter.is_allowed("key", 1, 0) is False

    def test_reset_forgets_events(self):
        limiter = InMemoryRateLimiter(clock=FakeMonotonic())
        limiter.is_allowed("key", 1, 60)

        limiter.reset()

        assert limiter.is_allowed("key", 1, 60) is True
