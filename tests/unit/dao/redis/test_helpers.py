"""Unit tests for handle_redis_connection_error decorator.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Error handling
       - Ensures every redis-py error is converted into CacheUnavailableError.
    3. Function metadata preservation
"""

from unittest.mock import MagicMock

import pytest
import redis

from dynashort.dao.redis.helpers import handle_redis_connection_error
from dynashort.dao.exceptions import CacheUnavailableError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {'host': 'localhost', 'port': 6379, 'db': 0}
        self.error = error

    @handle_redis_connection_error
    def ping(self):
        """Ping the cache."""
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    assert DummyDAO().ping() == 'OK'


# -------------------------------
# 2. Error handling
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ConnectionError('Connection refused'),
        redis.exceptions.TimeoutError('Timeout reading from socket'),
        redis.exceptions.AuthenticationError('invalid password'),
        redis.exceptions.ResponseError('OOM command not allowed'),
    ],
)
def test_decorator_transforms_redis_errors(error):
    with pytest.raises(CacheUnavailableError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        DummyDAO(error).ping()

    assert exc_info.value.__cause__ is error


def test_decorator_does_not_swallow_other_errors():
    with pytest.raises(ValueError):
        DummyDAO(ValueError('not a redis error')).ping()


# -------------------------------
# 3. Metadata preservation
# -------------------------------


def test_decorator_preserves_metadata():
    assert DummyDAO.ping.__name__ == 'ping'
    assert DummyDAO.ping.__doc__ == 'Ping the cache.'
