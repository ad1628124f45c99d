"""Shared fixtures for the pushseq test suite."""

from collections.abc import Callable, Sequence

import pytest


class Probe(Sequence):
    """
    Read-tracking collection.

    Records every index handed out, so tests can assert that nothing past
    the stopping element was read.
    """

    def __init__(self, items):
        self._items = list(items)
        self.reads = []

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        value = self._items[index]
        self.reads.append(index)
        return value


class Recorder:
    """Callback that keeps what it was given and stops after `limit` elements."""

    def __init__(self, limit=None):
        self.limit = limit
        self.seen = []

    def __call__(self, value):
        self.seen.append(value)
        return self.limit is None or len(self.seen) < self.limit


@pytest.fixture
def probe() -> Callable[[Sequence], Probe]:
    """Factory fixture: probe([1, 2, 3])."""
    return Probe


@pytest.fixture
def recorder() -> Callable[..., Recorder]:
    """Factory fixture: recorder(limit=1)."""
    return Recorder
