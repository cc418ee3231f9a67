"""DynamoDB mixin providing shared table initialization and connectivity checks.

Responsibilities:
    - Initialize a boto3 DynamoDB Table resource with per-call timeouts
    - Healthcheck the table (DescribeTable)

Classes:
    - DynamoDBClientMixin: Base mixin to inject table setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLDynamoDBDAO(DynamoDBClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLDynamoDBDAO(table_name='URLMapping', region_name='us-east-1')
        >>> dao.healthcheck()
        True
"""

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from dynashort.constants import Defaults, DATA_STORE_UNAVAILABLE
from dynashort.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


class DynamoDBClientMixin:
    """Mixin DynamoDB table setup and health check for DynamoDB-backed DAOs.

    Attributes:
        table (boto3 DynamoDB Table resource):
            Table holding one item per short URL, keyed by 'shortCode'.

    Methods:
        healthcheck(raise_error: bool = False) -> bool:
            Describe the table to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        table_name: Optional[str] = Defaults.DYNAMODB_TABLE,
        region_name: Optional[str] = Defaults.AWS_REGION,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = Defaults.DEPENDENCY_TIMEOUT,
        table: Optional[Any] = None,
    ):
        """Initialize a DynamoDB-based DAO

        The option is given to either use an existing Table resource or create
        one via the appropriate connection parameters.

        Args:
            table_name (Optional[str]):
                Name of the DynamoDB table. Defaults to 'URLMapping'.

            region_name (Optional[str]):
                AWS region of the table. Defaults to 'us-east-1'.

            endpoint_url (Optional[str]):
                Custom endpoint, e.g. LocalStack or DynamoDB Local. Defaults to AWS.

            timeout (Optional[float]):
                Connect and read timeout for every call, in seconds. Defaults to 3 seconds.

            table (Optional[boto3 Table resource]):
                Pre-initialized Table resource. If None, a new one is created.
        """
        if table is None:
            config = Config(
                connect_timeout=timeout,
                read_timeout=timeout,
                retries={'max_attempts': 2, 'mode': 'standard'},
            )
            dynamodb = boto3.resource('dynamodb', region_name=region_name, endpoint_url=endpoint_url, config=config)
            table = dynamodb.Table(table_name)

        self.table = table

    def healthcheck(self, raise_error: bool = False) -> bool:
        """DescribeTable to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to False.

        Returns:
            bool:
                True if the table is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If the table cannot be described and raise_error=True.
        """
        try:
            self.table.meta.client.describe_table(TableName=self.table.name)
        except (BotoCoreError, ClientError) as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't reach DynamoDB table '{self.table.name}'. Check the provided configuration parameters."
                ) from e
            logger.warning('DynamoDB healthcheck failed.', extra={'event': DATA_STORE_UNAVAILABLE, 'table': self.table.name})
            return False
        else:
            return True
