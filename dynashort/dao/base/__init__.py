from dynashort.dao.base.short_url_base_dao import ShortURLBaseDAO
from dynashort.dao.base.short_url_cache_base_dao import ShortURLCacheBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLCacheBaseDAO',
]
