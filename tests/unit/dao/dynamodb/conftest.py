from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def table() -> MagicMock:
    """Mock a boto3 DynamoDB Table resource."""
    _table = MagicMock(spec=['name', 'meta', 'put_item', 'get_item', 'update_item'])
    _table.name = 'URLMapping-test'
    _table.get_item.return_value = {}
    return _table


@pytest.fixture
def client_error():
    """Build botocore ClientErrors carrying a given AWS error code."""

    def _client_error(code: str, operation: str = 'PutItem') -> ClientError:
        return ClientError({'Error': {'Code': code, 'Message': f'{code} raised by test'}}, operation)

    return _client_error
