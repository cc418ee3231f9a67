from dynashort.services.background import BackgroundTasks
from dynashort.services.hit_accountant import HitAccountant
from dynashort.services.creation import ShortURLCreationService, CreatedShortURL
from dynashort.services.resolution import ShortURLResolutionService
from dynashort.services.health import health_summary
from dynashort.services.shortener import ShortenerService, build_service


__all__ = [
    'BackgroundTasks',
    'HitAccountant',
    'ShortURLCreationService',
    'CreatedShortURL',
    'ShortURLResolutionService',
    'health_summary',
    'ShortenerService',
    'build_service',
]
