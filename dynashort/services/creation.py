"""Short URL creation

Procedure followed by `ShortURLCreationService.create()`:
    - Step 1: Validate domain and target URL
    - Step 2: Acquire an unused shortcode (bounded generate-and-check loop)
    - Step 3: Persist the mapping with a conditional (create-if-absent) write
    - Step 4: Seed the cache (best effort)
    - Step 5: Return the shortened URL

The existence check in step 2 and the write in step 3 are separate calls, so
concurrent creators may both see a candidate as unused. The conditional write
settles the race: the loser gets ShortURLAlreadyExistsError and runs
acquisition once more before giving up with GenerationExhaustedError.
"""

import logging
from dataclasses import dataclass
from collections.abc import Callable

from dynashort.constants import TTL, Shortcode, SHORT_URL_CREATED, GENERATION_EXHAUSTED, SHORTCODE_COLLISION, CACHE_UNAVAILABLE
from dynashort.exceptions import InvalidInputError, GenerationExhaustedError
from dynashort.models import ShortURLModel
from dynashort.dao.base import ShortURLBaseDAO, ShortURLCacheBaseDAO
from dynashort.dao.exceptions import ShortURLAlreadyExistsError, CacheUnavailableError
from dynashort.utils.helpers import get_short_url, is_absolute_url
from dynashort.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedShortURL:
    """Result of a successful creation."""

    shortcode: str
    short_url: str
    target: str


class ShortURLCreationService:
    """Create unique short URL mappings.

    Args:
        store (ShortURLBaseDAO): durable mapping store.
        cache (ShortURLCacheBaseDAO): ephemeral cache seeded after each creation.
        generator (Callable[[], str]): shortcode generator, `generate_shortcode` by default.
        max_attempts (int): candidates tried per acquisition round.
        race_retries (int): extra acquisition rounds after a lost conditional write.
    """

    def __init__(
        self,
        store: ShortURLBaseDAO,
        cache: ShortURLCacheBaseDAO,
        generator: Callable[[], str] = generate_shortcode,
        max_attempts: int = Shortcode.MAX_ATTEMPTS,
        race_retries: int = Shortcode.RACE_RETRIES,
    ):
        self.store = store
        self.cache = cache
        self.generator = generator
        self.max_attempts = max_attempts
        self.race_retries = race_retries

    def create(self, domain: str, url: str) -> CreatedShortURL:
        """Create a short URL for `url` served under `domain`.

        Raises:
            InvalidInputError: empty domain/url or url is not absolute.
            GenerationExhaustedError: no unused shortcode could be acquired.
            DataStoreError: the durable store is unavailable (not retried).
        """
        domain, url = self._validate(domain, url)

        for round_ in range(1 + self.race_retries):
            shortcode = self._acquire_shortcode()
            short_url = ShortURLModel(shortcode=shortcode, target=url, domain=domain)
            try:
                self.store.insert(short_url)
            except ShortURLAlreadyExistsError:
                logger.info(
                    'Lost conditional write race for shortcode.',
                    extra={'shortcode': shortcode, 'event': SHORTCODE_COLLISION, 'round': round_ + 1},
                )
                continue
            break
        else:
            logger.warning(
                'Could not persist a unique shortcode.',
                extra={'event': GENERATION_EXHAUSTED, 'rounds': 1 + self.race_retries},
            )
            raise GenerationExhaustedError('Could not generate unique code, please try again.')

        self._seed_cache(shortcode, url)

        short_url_string = get_short_url(domain, shortcode)
        logger.info(
            'Created short URL.',
            extra={'shortcode': shortcode, 'domain': domain, 'event': SHORT_URL_CREATED},
        )
        return CreatedShortURL(shortcode=shortcode, short_url=short_url_string, target=url)

    @staticmethod
    def _validate(domain: str, url: str) -> tuple[str, str]:
        if not isinstance(domain, str) or not domain.strip():
            raise InvalidInputError("Missing required parameter 'domain'.")
        if not isinstance(url, str) or not url.strip():
            raise InvalidInputError("Missing required parameter 'url'.")
        if not is_absolute_url(url):
            raise InvalidInputError('Invalid URL format.')
        return domain.strip(), url

    def _acquire_shortcode(self) -> str:
        """Return the first generated candidate with no durable record.

        Raises:
            GenerationExhaustedError: every candidate within the bound already exists.
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generator()
            if not self.store.exists(candidate):
                return candidate
            logger.info(
                'Generated shortcode already exists.',
                extra={'shortcode': candidate, 'event': SHORTCODE_COLLISION, 'attempt': attempt},
            )

        logger.warning(
            'Shortcode generation attempts exhausted.',
            extra={'event': GENERATION_EXHAUSTED, 'attempts': self.max_attempts},
        )
        raise GenerationExhaustedError('Could not generate unique code, please try again.')

    def _seed_cache(self, shortcode: str, url: str) -> None:
        try:
            self.cache.put(shortcode, url, ttl=TTL.CACHE)
        except CacheUnavailableError:
            logger.warning(
                'Failed to seed cache for new short URL.',
                exc_info=True,
                extra={'shortcode': shortcode, 'event': CACHE_UNAVAILABLE},
            )
