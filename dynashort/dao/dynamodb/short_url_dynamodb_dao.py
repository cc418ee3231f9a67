"""Data Access Object (DAO) implementation for managing shortened URLs in DynamoDB

This module provides a DynamoDB-based implementation of ShortURLBaseDAO.

Item layout (partition key: shortCode):

    {
        "shortCode": "Gh71WPTx9",
        "originalUrl": "https://example.com/page",
        "domain": "short.ly",
        "createdAt": "2025-10-15T12:00:00Z",
        "hitCount": 0
    }

Responsibilities:
    - Conditionally insert short URLs (create-if-absent);
    - Retrieve short URLs and check their existence;
    - Atomically increment per-link hit counters;
    - Raise appropriate DAO exceptions.

Classes:
    ShortURLDynamoDBDAO:
        DAO for storing and retrieving ShortURLModel in a DynamoDB table.

Example:
    >>> from dynashort.models import ShortURLModel
    >>> from dynashort.dao.dynamodb import ShortURLDynamoDBDAO

    >>> dao = ShortURLDynamoDBDAO(table_name='URLMapping')
    >>> dao.insert(ShortURLModel(shortcode='Gh71WPTx9', target='https://example.com/page', domain='short.ly'))
    <ShortURLDynamoDBDAO>
    >>> dao.get('Gh71WPTx9').target
    'https://example.com/page'
    >>> dao.hit('Gh71WPTx9')
    1
"""

from beartype import beartype
from botocore.exceptions import ClientError

from dynashort.models import ShortURLModel
from dynashort.dao.base import ShortURLBaseDAO
from dynashort.dao.dynamodb.mixins import DynamoDBClientMixin
from dynashort.dao.dynamodb.helpers import handle_dynamodb_errors, error_code, CONDITIONAL_CHECK_FAILED
from dynashort.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLDynamoDBDAO(DynamoDBClientMixin, ShortURLBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for managing short URL mappings

    Attributes (see DynamoDBClientMixin):
        table (boto3 DynamoDB Table resource):
            Table used to persist short URL mappings.
    """

    @handle_dynamodb_errors
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLDynamoDBDAO':
        """Insert a short URL mapping only if its shortcode is unused

        The `attribute_not_exists(shortCode)` condition makes the write the
        authoritative uniqueness check: of two concurrent writers racing for
        the same shortcode exactly one succeeds, the other gets
        ShortURLAlreadyExistsError. No record is ever overwritten.

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                On any other DynamoDB failure.
        """
        try:
            self.table.put_item(
                Item=short_url.to_item(),
                ConditionExpression='attribute_not_exists(shortCode)',
            )
        except ClientError as e:
            if error_code(e) == CONDITIONAL_CHECK_FAILED:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.") from e
            raise
        return self

    @handle_dynamodb_errors
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode (strongly consistent read)

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
            DataStoreError:
                On DynamoDB failures.
        """
        response = self.table.get_item(Key={'shortCode': shortcode}, ConsistentRead=True)
        item = response.get('Item')
        if item is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return ShortURLModel.from_item(item)

    @handle_dynamodb_errors
    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        """Check whether a record exists under `shortcode`

        Only the key attribute is projected to keep the read small.

        Raises:
            DataStoreError:
                On DynamoDB failures.
        """
        response = self.table.get_item(Key={'shortCode': shortcode}, ProjectionExpression='shortCode')
        return 'Item' in response

    @handle_dynamodb_errors
    @beartype
    def hit(self, shortcode: str, **kwargs) -> int:
        """Atomically increment the hit counter of a short URL

        Uses `ADD hitCount :inc`, so concurrent hits never lose updates. The
        `attribute_exists(shortCode)` condition stops ADD from creating a
        counter-only item for a shortcode that has no mapping.

        Returns:
            int: hit counter value after the increment.

        Raises:
            ShortURLNotFoundError:
                If no short URL with the given shortcode exists.
            DataStoreError:
                On any other DynamoDB failure.
        """
        try:
            response = self.table.update_item(
                Key={'shortCode': shortcode},
                UpdateExpression='ADD hitCount :inc',
                ConditionExpression='attribute_exists(shortCode)',
                ExpressionAttributeValues={':inc': 1},
                ReturnValues='UPDATED_NEW',
            )
        except ClientError as e:
            if error_code(e) == CONDITIONAL_CHECK_FAILED:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from e
            raise
        return int(response['Attributes']['hitCount'])
