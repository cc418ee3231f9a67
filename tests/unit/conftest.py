"""Shared fixtures: thread-safe in-memory stand-ins for the durable store and the cache.

The fakes honor the same contracts as the DynamoDB and Redis DAOs
(conditional insert, atomic hit increment, TTL-less cache) and count calls,
so service-level properties can be asserted without AWS or Redis.
"""

import threading
from collections import Counter
from dataclasses import replace

import pytest

from dynashort.constants import TTL
from dynashort.models import ShortURLModel
from dynashort.dao.base import ShortURLBaseDAO, ShortURLCacheBaseDAO
from dynashort.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from dynashort.services import BackgroundTasks


class InMemoryShortURLDAO(ShortURLBaseDAO):
    def __init__(self):
        self.records: dict[str, ShortURLModel] = {}
        self.calls = Counter()
        self.healthy = True
        self._lock = threading.Lock()

    def insert(self, short_url, **kwargs):
        with self._lock:
            self.calls['insert'] += 1
            if short_url.shortcode in self.records:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self.records[short_url.shortcode] = short_url
        return self

    def get(self, shortcode, **kwargs):
        with self._lock:
            self.calls['get'] += 1
            if shortcode not in self.records:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            return self.records[shortcode]

    def exists(self, shortcode, **kwargs):
        with self._lock:
            self.calls['exists'] += 1
            return shortcode in self.records

    def hit(self, shortcode, **kwargs):
        with self._lock:
            self.calls['hit'] += 1
            if shortcode not in self.records:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            record = self.records[shortcode]
            self.records[shortcode] = replace(record, hits=record.hits + 1)
            return record.hits + 1

    def healthcheck(self, raise_error=False):
        return self.healthy


class InMemoryCacheDAO(ShortURLCacheBaseDAO):
    def __init__(self):
        self.entries: dict[str, tuple[str, int]] = {}
        self.calls = Counter()
        self.healthy = True
        self._lock = threading.Lock()

    def get(self, shortcode):
        with self._lock:
            self.calls['get'] += 1
            entry = self.entries.get(shortcode)
            return None if entry is None else entry[0]

    def put(self, shortcode, target, ttl=TTL.CACHE):
        with self._lock:
            self.calls['put'] += 1
            self.entries[shortcode] = (target, ttl)
        return self

    def healthcheck(self, raise_error=False):
        return self.healthy


@pytest.fixture
def store() -> InMemoryShortURLDAO:
    return InMemoryShortURLDAO()


@pytest.fixture
def cache() -> InMemoryCacheDAO:
    return InMemoryCacheDAO()


@pytest.fixture
def tasks():
    _tasks = BackgroundTasks(max_workers=4)
    yield _tasks
    _tasks.shutdown(wait=True)
