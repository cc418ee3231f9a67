"""Redis mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize Redis client (with per-call socket timeouts)
    - Healthcheck Redis client

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLRedisCacheDAO(RedisClientMixin, ShortURLCacheBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisCacheDAO(prefix="dynashort:prod")
        >>> dao.healthcheck()
        True
"""

import logging
from typing import Optional

import redis

from dynashort.constants import Defaults, CACHE_UNAVAILABLE
from dynashort.dao.redis.redis_key_schema import RedisKeySchema
from dynashort.dao.redis.helpers import _describe_connection
from dynashort.dao.exceptions import CacheUnavailableError


logger = logging.getLogger(__name__)


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Active Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        healthcheck(raise_error: bool = False) -> bool:
            Ping Redis to verify connectivity.
            Optionally raise a CacheUnavailableError if unreachable.
    """

    def __init__(
        self,
        redis_host: Optional[str] = Defaults.REDIS_HOST,
        redis_port: Optional[int] = Defaults.REDIS_PORT,
        redis_db: Optional[int] = Defaults.REDIS_DB,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_ssl: Optional[bool] = False,
        redis_timeout: Optional[float] = Defaults.DEPENDENCY_TIMEOUT,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Initialize a Redis-based DAO

        The option is given to either use an existing Redis client instance or
        create one via the appropriate Redis connection parameters. Client
        construction never fails on an unreachable server: the cache is optional
        for correctness, so connectivity is only reported by healthcheck().

        Args:
            redis_host (Optional[str]):
                Hostname of the Redis server. Defaults to 'localhost'.

            redis_port (Optional[int]):
                Redis server port. Defaults to 6379.

            redis_db (Optional[int]):
                Redis database index. Defaults to 0.

            redis_decode_responses (Optional[bool]):
                If True, decodes Redis responses. Defaults to True.

            redis_username (Optional[str]):
                Username for Redis authentication (if required).

            redis_password (Optional[str]):
                Password for Redis authentication (if required).

            redis_ssl (Optional[bool]):
                If True, connect over TLS (e.g. ElastiCache with in-transit encryption).

            redis_timeout (Optional[float]):
                Socket connect/read timeout in seconds. Defaults to 3 seconds.

            redis_client (Optional[redis.Redis]):
                Pre-initialized Redis client. If None, a new client is created.

            prefix (Optional[str]):
                Namespace prefix for all Redis keys, e.g. 'app:env'.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                ssl=bool(redis_ssl),
                socket_timeout=redis_timeout,
                socket_connect_timeout=redis_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

    def healthcheck(self, raise_error: bool = False) -> bool:
        """PING Redis to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises CacheUnavailableError on failure. Defaults to False.

        Returns:
            bool:
                True if Redis is reachable, False otherwise (only if raise_error=False).

        Raises:
            CacheUnavailableError:
                If Redis connection cannot be established and raise_error=True.
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if raise_error:
                raise CacheUnavailableError(
                    f"Can't connect to Redis at {_describe_connection(self.redis)}. Check the provided configuration parameters."
                ) from e
            logger.warning(
                'Redis healthcheck failed.',
                extra={'event': CACHE_UNAVAILABLE, 'redis': _describe_connection(self.redis)},
            )
            return False
        else:
            return True
