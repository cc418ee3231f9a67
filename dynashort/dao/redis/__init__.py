from dynashort.dao.redis.redis_key_schema import RedisKeySchema
from dynashort.dao.redis.mixins import RedisClientMixin
from dynashort.dao.redis.short_url_cache_redis_dao import ShortURLRedisCacheDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortURLRedisCacheDAO',
]
