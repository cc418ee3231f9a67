import logging

from dynashort.dao.base import ShortURLBaseDAO
from dynashort.services.background import BackgroundTasks


logger = logging.getLogger(__name__)


class HitAccountant:
    """Fire-and-forget hit counting against the durable store.

    Every successful resolution schedules exactly one atomic increment.
    Failed increments are logged and dropped: under-counting is accepted in
    exchange for redirect latency and availability.
    """

    def __init__(self, store: ShortURLBaseDAO, tasks: BackgroundTasks):
        self.store = store
        self.tasks = tasks

    def record_hit(self, shortcode: str) -> None:
        self.tasks.submit(self._increment, shortcode, description=f'hit accounting for {shortcode}')

    def _increment(self, shortcode: str) -> int:
        hits = self.store.hit(shortcode)
        logger.debug('Recorded hit.', extra={'shortcode': shortcode, 'hits': hits})
        return hits
