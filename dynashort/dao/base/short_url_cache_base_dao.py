"""Abstract base class for ShortURL cache DAOs.

The cache holds a time-bounded projection `shortcode -> original URL`. Its
absence or staleness must only ever affect latency, never correctness.

Example:
    >>> from dynashort.dao.redis import ShortURLRedisCacheDAO
    >>> cache = ShortURLRedisCacheDAO(redis_host='localhost', prefix='dynashort:dev')
    >>> cache.put('Gh71WPTx9', 'https://example.com')
    >>> cache.get('Gh71WPTx9')
    'https://example.com'
"""

from abc import ABC, abstractmethod

from dynashort.constants import TTL


class ShortURLCacheBaseDAO(ABC):
    """Interface for ShortURL cache data access objects.

    Methods:
        get(shortcode: str) -> str | None:
            Return the cached target URL, or None on a miss.
            Raises CacheUnavailableError on connectivity issues.

        put(shortcode: str, target: str, ttl: int = TTL.CACHE) -> ShortURLCacheBaseDAO:
            Cache the target URL for `ttl` seconds.
            Raises CacheUnavailableError on connectivity issues.

        healthcheck(raise_error: bool = False) -> bool:
            Report cache reachability.
    """

    @abstractmethod
    def get(self, shortcode: str) -> str | None:
        pass

    @abstractmethod
    def put(self, shortcode: str, target: str, ttl: int = TTL.CACHE) -> 'ShortURLCacheBaseDAO':
        pass

    @abstractmethod
    def healthcheck(self, raise_error: bool = False) -> bool:
        pass
