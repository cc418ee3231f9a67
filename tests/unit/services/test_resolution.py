"""Unit tests for ShortURLResolutionService

Test coverage includes:

1. Malformed shortcodes
   - Rejected as not found without any cache or store call.

2. Cache hits
   - Served from the cache without a store read; hit still recorded.

3. Cache misses
   - Served from the store, cache repopulated in the background.
   - Second resolution is a cache hit (store read exactly once).
   - Unknown shortcodes raise ShortURLNotFoundError.

4. Failures
   - Cache failures degrade to a store read.
   - Background failures never surface.
   - Data store failures on a miss propagate.
"""

from unittest.mock import MagicMock

import pytest

from dynashort.constants import TTL
from dynashort.models import ShortURLModel
from dynashort.dao.exceptions import CacheUnavailableError, DataStoreError, ShortURLNotFoundError
from dynashort.services import BackgroundTasks, ShortURLResolutionService


SHORTCODE = 'Gh71WPTx9'
TARGET = 'https://example.com/page'


@pytest.fixture
def service(store, cache, tasks):
    return ShortURLResolutionService(store, cache, tasks)


@pytest.fixture
def stored(store):
    store.insert(ShortURLModel(shortcode=SHORTCODE, target=TARGET, domain='short.ly'))
    store.calls.clear()
    return store


# -------------------------------
# 1. Malformed shortcodes
# -------------------------------


@pytest.mark.parametrize('shortcode', ['', 'abc', 'Gh71WPTx9X', 'Gh71WPT-9', '../../etc', None])
def test_resolve_malformed_shortcode(service, store, cache, shortcode):
    with pytest.raises(ShortURLNotFoundError):
        service.resolve(shortcode)

    assert store.calls == {}
    assert cache.calls == {}


# -------------------------------
# 2. Cache hits
# -------------------------------


def test_resolve_cache_hit(service, stored, cache, tasks):
    cache.put(SHORTCODE, TARGET)

    assert service.resolve(SHORTCODE) == TARGET
    assert tasks.drain(timeout=5) is True

    assert stored.calls['get'] == 0
    assert stored.calls['hit'] == 1


# -------------------------------
# 3. Cache misses
# -------------------------------


def test_resolve_cache_miss(service, stored, cache, tasks):
    assert service.resolve(SHORTCODE) == TARGET
    assert tasks.drain(timeout=5) is True

    assert stored.calls['get'] == 1
    assert stored.calls['hit'] == 1
    assert cache.entries[SHORTCODE] == (TARGET, TTL.CACHE)


def test_resolve_twice_reads_store_once(service, stored, tasks):
    assert service.resolve(SHORTCODE) == TARGET
    assert tasks.drain(timeout=5) is True
    assert service.resolve(SHORTCODE) == TARGET
    assert tasks.drain(timeout=5) is True

    assert stored.calls['get'] == 1
    assert stored.get(SHORTCODE).hits == 2


def test_resolve_unknown_shortcode(service, store, cache, tasks):
    with pytest.raises(ShortURLNotFoundError, match="Short URL with code 'Zz00Zz00Z' not found"):
        service.resolve('Zz00Zz00Z')

    assert tasks.drain(timeout=5) is True
    assert store.calls['hit'] == 0
    assert cache.calls['put'] == 0


# -------------------------------
# 4. Failures
# -------------------------------


def test_resolve_cache_failure_falls_back_to_store(service, stored, cache, tasks):
    cache.get = MagicMock(side_effect=CacheUnavailableError("Can't connect to Redis at localhost:6379/0."))

    assert service.resolve(SHORTCODE) == TARGET
    assert tasks.drain(timeout=5) is True
    assert stored.calls['get'] == 1


def test_resolve_background_failures_are_not_surfaced(stored, cache):
    tasks = BackgroundTasks(max_workers=2)
    cache.put = MagicMock(side_effect=CacheUnavailableError("Can't connect to Redis at localhost:6379/0."))
    stored.hit = MagicMock(side_effect=DataStoreError("Can't reach DynamoDB table 'URLMapping'."))
    service = ShortURLResolutionService(stored, cache, tasks)

    assert service.resolve(SHORTCODE) == TARGET
    tasks.shutdown(wait=True)

    cache.put.assert_called_once_with(SHORTCODE, TARGET, ttl=TTL.CACHE)
    stored.hit.assert_called_once_with(SHORTCODE)


def test_resolve_data_store_failure_propagates(service, store):
    store.get = MagicMock(side_effect=DataStoreError("Can't reach DynamoDB table 'URLMapping'."))

    with pytest.raises(DataStoreError):
        service.resolve(SHORTCODE)
