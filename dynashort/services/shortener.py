"""Service-facing API consumed by the HTTP layer

Classes:
    ShortenerService:
        Facade over creation, resolution and health reporting with
        explicitly injected store, cache and background executor.

Functions:
    build_service(config) -> ShortenerService:
        Construct a ShortenerService wired to DynamoDB and Redis from a
        configuration document (see `dynashort.utils.config.load_config`).

Example:
    >>> service = build_service(load_config())
    >>> created = service.create_mapping('short.ly', 'https://example.com/page')
    >>> created.short_url
    'https://short.ly/Gh71WPTx9'
    >>> service.resolve_mapping(created.shortcode)
    'https://example.com/page'
"""

from dynashort.types import LambdaConfiguration, HealthSummary
from dynashort.dao.base import ShortURLBaseDAO, ShortURLCacheBaseDAO
from dynashort.dao.dynamodb import ShortURLDynamoDBDAO
from dynashort.dao.redis import ShortURLRedisCacheDAO
from dynashort.services.background import BackgroundTasks
from dynashort.services.creation import ShortURLCreationService, CreatedShortURL
from dynashort.services.resolution import ShortURLResolutionService
from dynashort.services.health import health_summary


class ShortenerService:
    def __init__(self, store: ShortURLBaseDAO, cache: ShortURLCacheBaseDAO, tasks: BackgroundTasks | None = None):
        self.store = store
        self.cache = cache
        self.tasks = tasks or BackgroundTasks()
        self.creation = ShortURLCreationService(store, cache)
        self.resolution = ShortURLResolutionService(store, cache, self.tasks)

    def create_mapping(self, domain: str, url: str) -> CreatedShortURL:
        return self.creation.create(domain, url)

    def resolve_mapping(self, shortcode: str) -> str:
        return self.resolution.resolve(shortcode)

    def health_summary(self) -> HealthSummary:
        return health_summary(self.cache, self.store)

    def close(self, wait: bool = True) -> None:
        """Stop the background executor, optionally waiting for pending side effects."""
        self.tasks.shutdown(wait=wait)


def build_service(config: LambdaConfiguration) -> ShortenerService:
    store = ShortURLDynamoDBDAO(**config['dynamodb'])
    cache = ShortURLRedisCacheDAO(
        **{f'redis_{k}': v for k, v in config['redis'].items()},
        prefix=config['service']['prefix'],
    )
    tasks = BackgroundTasks(max_workers=config['service']['background_workers'])
    return ShortenerService(store, cache, tasks)
