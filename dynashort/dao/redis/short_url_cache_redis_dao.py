"""Data Access Object (DAO) implementation for caching short URLs in Redis

Responsibilities:
    - Store the `shortcode -> original URL` projection with a TTL;
    - Look the projection up by shortcode;
    - Translate Redis connectivity issues into CacheUnavailableError.

Classes:
    ShortURLRedisCacheDAO:
        Cache DAO for ShortURL projections in a Redis datastore.

Example:
    >>> from dynashort.dao.redis import ShortURLRedisCacheDAO
    >>> cache = ShortURLRedisCacheDAO(prefix='dynashort:dev')
    >>> cache.put('Gh71WPTx9', 'https://example.com/page')
    <ShortURLRedisCacheDAO>
    >>> cache.get('Gh71WPTx9')
    'https://example.com/page'
    >>> cache.get('missing00')
    None
"""

from beartype import beartype

from dynashort.constants import TTL
from dynashort.dao.base import ShortURLCacheBaseDAO
from dynashort.dao.redis.mixins import RedisClientMixin
from dynashort.dao.redis.helpers import handle_redis_connection_error


class ShortURLRedisCacheDAO(RedisClientMixin, ShortURLCacheBaseDAO):
    """Redis-based cache DAO for short URL projections

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str) -> str | None:
        """Return the cached original URL for `shortcode`, or None on a miss

        Raises:
            CacheUnavailableError:
                If Redis connectivity issues occur.
        """
        target = self.redis.get(self.keys.link_url_key(shortcode))
        if isinstance(target, bytes):
            target = target.decode('utf-8')
        return target

    @handle_redis_connection_error
    @beartype
    def put(self, shortcode: str, target: str, ttl: int = TTL.CACHE) -> 'ShortURLRedisCacheDAO':
        """Cache the original URL for `shortcode` for `ttl` seconds (SET ... EX)

        Raises:
            CacheUnavailableError:
                If Redis connectivity issues occur.
        """
        self.redis.set(self.keys.link_url_key(shortcode), target, ex=ttl)
        return self
