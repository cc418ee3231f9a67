import functools
from typing import Any
from collections.abc import Callable

import redis

from dynashort.dao.exceptions import CacheUnavailableError


__all__ = []


def _describe_connection(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connection errors

    Every redis-py error is translated, not only connection failures:
    callers only ever need to absorb one type.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises CacheUnavailableError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, shortcode):
        ...     return self.redis.get(self.keys.link_url_key(shortcode))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailableError(f"Can't connect to Redis at {_describe_connection(self.redis)}.") from e

    return wrapper
