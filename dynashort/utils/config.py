"""Utility functions for application configuration management.

Configuration is read from environment variables (set by the Lambda
function definition, a container runtime, or a developer shell). The
resulting document is split per dependency:

    {
        "dynamodb": {
            "table_name": "URLMapping",
            "region_name": "us-east-1",
            "endpoint_url": None,
            "timeout": 3.0
        },
        "redis": {
            "host": "localhost",
            "port": 6379,
            "db": 0,
            "username": None,
            "password": None,
            "ssl": False,
            "timeout": 3.0
        },
        "service": {
            "prefix": "dynashort:local",
            "background_workers": 4
        }
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), 'local' by default.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the cache key prefix '<app name>:<app env>', or None if `APP_NAME` is not set.

    load_config() -> dict
        Load the configuration document described above. Outside of local
        runs, `DYNAMODB_TABLE` and `REDIS_HOST` are mandatory.

Example:
    >>> from dynashort.utils.config import load_config
    >>> config = load_config()
    >>> config['redis']['host']
    'localhost'
"""

import os
import logging

from dynashort.types import LambdaConfiguration
from dynashort.constants import ENV, Defaults
from dynashort.exceptions import BadConfigurationError
from dynashort.utils.helpers import require_environment
from dynashort.utils.runtime import running_locally


logger = logging.getLogger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise BadConfigurationError(f'{name} must be an integer (given value: {raw!r}).') from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise BadConfigurationError(f'{name} must be a number (given value: {raw!r}).') from e
    if value <= 0:
        raise BadConfigurationError(f'{name} must be positive (given value: {raw!r}).')
    return value


def _dynamodb_endpoint() -> str | None:
    endpoint = os.environ.get(ENV.DynamoDB.ENDPOINT)
    if endpoint:
        return endpoint
    if running_locally():
        return os.environ.get(ENV.LocalStack.ENDPOINT, 'http://localhost:4566')
    return None


def _load_config() -> LambdaConfiguration:
    timeout = _env_float(ENV.App.DEPENDENCY_TIMEOUT, Defaults.DEPENDENCY_TIMEOUT)
    workers = _env_int(ENV.App.BACKGROUND_WORKERS, Defaults.BACKGROUND_WORKERS)
    if workers < 1:
        raise BadConfigurationError(f'{ENV.App.BACKGROUND_WORKERS} must be at least 1 (given value: {workers}).')

    config = {
        'dynamodb': {
            'table_name': os.environ.get(ENV.DynamoDB.TABLE, Defaults.DYNAMODB_TABLE),
            'region_name': os.environ.get(ENV.DynamoDB.REGION, Defaults.AWS_REGION),
            'endpoint_url': _dynamodb_endpoint(),
            'timeout': timeout,
        },
        'redis': {
            'host': os.environ.get(ENV.Redis.HOST, Defaults.REDIS_HOST),
            'port': _env_int(ENV.Redis.PORT, Defaults.REDIS_PORT),
            'db': _env_int(ENV.Redis.DB, Defaults.REDIS_DB),
            'username': os.environ.get(ENV.Redis.USERNAME) or None,
            'password': os.environ.get(ENV.Redis.PASSWORD) or None,
            'ssl': os.environ.get(ENV.Redis.TLS, '').lower() in _TRUTHY,
            'timeout': timeout,
        },
        'service': {
            'prefix': app_prefix(),
            'background_workers': workers,
        },
    }
    logger.debug(
        'Loaded configuration from environment.',
        extra={'appEnv': app_env(), 'table': config['dynamodb']['table_name'], 'redisHost': config['redis']['host']},
    )
    return config


@require_environment(ENV.DynamoDB.TABLE, ENV.Redis.HOST)
def _load_deployed_config() -> LambdaConfiguration:
    return _load_config()


def load_config() -> LambdaConfiguration:
    """Load service configuration from environment variables

    Local runs fall back to defaults for every value. Deployed runs must set
    `DYNAMODB_TABLE` and `REDIS_HOST` explicitly.

    Returns:
        dict: configuration document with 'dynamodb', 'redis' and 'service' sections.

    Raises:
        MissingEnvironmentVariableError:
            If a mandatory variable is missing outside of local runs.
        BadConfigurationError:
            If a numeric variable cannot be parsed.
    """
    if running_locally():
        return _load_config()
    return _load_deployed_config()
