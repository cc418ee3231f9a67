"""Short URL resolution (cache-aside)

Procedure followed by `ShortURLResolutionService.resolve()`:
    - Step 1: Reject malformed shortcodes as not found
    - Step 2: Look the shortcode up in the cache; on a hit, record the hit
              in the background and return
    - Step 3: On a miss (or cache failure), read the durable store
    - Step 4: Repopulate the cache and record the hit, both in the background

The durable store is the single source of truth. Cache failures always
degrade to a store round trip, and background side effects never affect
the response.
"""

import logging

from dynashort.constants import TTL, CACHE_HIT, CACHE_MISS, CACHE_UNAVAILABLE, SHORT_URL_NOT_FOUND
from dynashort.dao.base import ShortURLBaseDAO, ShortURLCacheBaseDAO
from dynashort.dao.exceptions import ShortURLNotFoundError, CacheUnavailableError
from dynashort.services.background import BackgroundTasks
from dynashort.services.hit_accountant import HitAccountant
from dynashort.utils.shortener import is_valid_shortcode


logger = logging.getLogger(__name__)


class ShortURLResolutionService:
    """Resolve shortcodes to their original URLs.

    Args:
        store (ShortURLBaseDAO): durable mapping store.
        cache (ShortURLCacheBaseDAO): ephemeral cache in front of the store.
        tasks (BackgroundTasks): executor for fire-and-forget side effects.
        hit_accountant (HitAccountant | None): defaults to one bound to `store` and `tasks`.
    """

    def __init__(
        self,
        store: ShortURLBaseDAO,
        cache: ShortURLCacheBaseDAO,
        tasks: BackgroundTasks,
        hit_accountant: HitAccountant | None = None,
    ):
        self.store = store
        self.cache = cache
        self.tasks = tasks
        self.hit_accountant = hit_accountant or HitAccountant(store, tasks)

    def resolve(self, shortcode: str) -> str:
        """Return the original URL behind `shortcode`.

        Raises:
            ShortURLNotFoundError: unknown or malformed shortcode.
            DataStoreError: cache miss and the durable store is unavailable.
        """
        if not is_valid_shortcode(shortcode):
            logger.info('Malformed shortcode.', extra={'shortcode': str(shortcode)[:64], 'event': SHORT_URL_NOT_FOUND})
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        target = self._from_cache(shortcode)
        if target is not None:
            logger.debug('Resolved short URL from cache.', extra={'shortcode': shortcode, 'event': CACHE_HIT})
            self.hit_accountant.record_hit(shortcode)
            return target

        logger.debug('Cache miss, reading data store.', extra={'shortcode': shortcode, 'event': CACHE_MISS})
        target = self.store.get(shortcode).target

        self.tasks.submit(self._repopulate_cache, shortcode, target, description=f'cache repopulation for {shortcode}')
        self.hit_accountant.record_hit(shortcode)
        return target

    def _from_cache(self, shortcode: str) -> str | None:
        try:
            return self.cache.get(shortcode)
        except CacheUnavailableError:
            logger.warning(
                'Cache lookup failed, falling back to data store.',
                exc_info=True,
                extra={'shortcode': shortcode, 'event': CACHE_UNAVAILABLE},
            )
            return None

    def _repopulate_cache(self, shortcode: str, target: str) -> None:
        self.cache.put(shortcode, target, ttl=TTL.CACHE)
