"""
Shared fixtures: a scripted transport and a manual clock, so the services
can be exercised without network access.
"""

from collections import defaultdict, deque

import pytest

from reworkbot.services.transport import ApiResponse, ApiTransport


class FakeTransport(ApiTransport):
    """ApiTransport that replays scripted responses per path and records calls."""

    def __init__(self, base_url="https://api.test/", redact_params=()):
        super().__init__(base_url, redact_params)
        self.calls = []
        self.closed = False
        self._scripts = defaultdict(deque)

    def script(self, path, *outcomes):
        """Queue outcomes for a path: ApiResponse, exception, or (status, body)."""
        for outcome in outcomes:
            if isinstance(outcome, tuple):
                status, body = outcome
                outcome = ApiResponse(status=status, body=body, url=self.describe(path))
            self._scripts[path].append(outcome)
        return self

    def calls_to(self, path):
        return [call for call in self.calls if call[0] == path]

    async def get(self, path, params=None, allow_redirects=True):
        self.calls.append((path, dict(params or {}), allow_redirects))
        queue = self._scripts[path]
        if not queue:
            raise AssertionError(f"Unexpected request to {path!r}")
        # The last outcome keeps repeating
        outcome = queue.popleft() if len(queue) > 1 else queue[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self):
        self.closed = True


class ManualClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_transport():
    return FakeTransport
