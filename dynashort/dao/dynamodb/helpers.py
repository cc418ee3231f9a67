import functools
from typing import Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from dynashort.dao.exceptions import DataStoreError


__all__ = []

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def error_code(error: ClientError) -> str:
    """Return the AWS error code carried by a botocore ClientError."""
    return error.response.get('Error', {}).get('Code', '')


def handle_dynamodb_errors[F: Callable[..., Any]](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle data store errors

    Every botocore failure (throttling, missing table, connect/read timeouts,
    endpoint resolution issues, ...) surfaces as DataStoreError. Methods that
    need to interpret a specific error code (e.g. a failed condition) must
    catch it themselves before it reaches this wrapper.

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations which may raise
            botocore.exceptions.ClientError or botocore.exceptions.BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on data store failures.

    Example:
        >>> @handle_dynamodb_errors
        ... def get(self, shortcode):
        ...     return self.table.get_item(Key={'shortCode': shortcode})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            raise DataStoreError(f"DynamoDB request to table '{self.table.name}' failed ({error_code(e)}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table '{self.table.name}'.") from e

    return wrapper
