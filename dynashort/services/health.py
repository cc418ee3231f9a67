from datetime import datetime, UTC

from dynashort.types import HealthSummary
from dynashort.dao.base import ShortURLBaseDAO, ShortURLCacheBaseDAO


def health_summary(cache: ShortURLCacheBaseDAO, store: ShortURLBaseDAO | None = None) -> HealthSummary:
    """Report dependency reachability

    The service is healthy ('OK') only when the cache is reachable and, if a
    store is given, the store is reachable too. Without a store the summary
    degrades to cache-only reporting with 'storeReady' set to None.

    Example:
        >>> health_summary(cache, store)
        {'cacheReady': True, 'storeReady': True, 'status': 'OK', 'timestamp': '2025-10-15T12:00:00.000Z'}
    """
    cache_ready = cache.healthcheck(raise_error=False)
    store_ready = None if store is None else store.healthcheck(raise_error=False)
    healthy = cache_ready and store_ready is not False

    # fmt: off
    timestamp = datetime.now(UTC) \
                        .isoformat(timespec='milliseconds') \
                        .replace('+00:00', 'Z')
    # fmt: on
    return {
        'cacheReady': cache_ready,
        'storeReady': store_ready,
        'status': 'OK' if healthy else 'ERROR',
        'timestamp': timestamp,
    }
