from dataclasses import dataclass, field
from datetime import datetime, UTC
from decimal import Decimal

from dynashort.types import DynamoDBItem


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping (the durable UrlMapping record).

    Attributes:
        shortcode (str):
            The unique 9-character identifier representing the shortened URL.
        target (str):
            The original absolute URL that the shortcode redirects to.
        domain (str):
            Host the shortcode is served under, e.g. 'short.ly'.
        created_at (datetime):
            Creation moment (UTC). Set once, never updated.
        hits (int):
            Number of successful resolutions. Only ever mutated in the data
            store through an atomic increment.

    Example:
        >>> url = ShortURLModel(
        ...     shortcode='Gh71WPTx9',
        ...     target='https://example.com/article/123',
        ...     domain='short.ly',
        ... )
        >>> url.hits
        0
        >>> url.to_item()['originalUrl']
        'https://example.com/article/123'
    """

    shortcode: str
    target: str
    domain: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    hits: int = 0

    def to_item(self) -> DynamoDBItem:
        """Serialize into the durable record shape."""
        return {
            'shortCode': self.shortcode,
            'originalUrl': self.target,
            'domain': self.domain,
            'createdAt': self.created_at.isoformat().replace('+00:00', 'Z'),
            'hitCount': self.hits,
        }

    @classmethod
    def from_item(cls, item: DynamoDBItem) -> 'ShortURLModel':
        """Deserialize a durable record.

        DynamoDB returns numbers as `Decimal`; `hitCount` may be missing on
        records written out-of-band.
        """
        hits = item.get('hitCount', 0)
        return cls(
            shortcode=item['shortCode'],
            target=item['originalUrl'],
            domain=item.get('domain', ''),
            created_at=datetime.fromisoformat(item['createdAt'].replace('Z', '+00:00')),
            hits=int(hits) if isinstance(hits, (int, Decimal)) else 0,
        )
