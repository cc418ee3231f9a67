from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Cache projection of a short URL (shortcode -> original URL) (24 hours in seconds)
    CACHE = 86_400  # 60 * 60 * 24


class Shortcode:
    """Shortcode generation parameters."""

    LENGTH = 9  # Characters in every generated shortcode
    RANDOM_BYTES = 9  # CSPRNG bytes drawn per encoding round (12 base64 chars)
    MAX_ATTEMPTS = 5  # Candidates tried before giving up on uniqueness
    RACE_RETRIES = 1  # Extra generation rounds after losing a conditional write


class Defaults:
    """Default configuration values."""

    DYNAMODB_TABLE = 'URLMapping'
    AWS_REGION = 'us-east-1'
    REDIS_HOST = 'localhost'
    REDIS_PORT = 6379
    REDIS_DB = 0
    DEPENDENCY_TIMEOUT = 3.0  # Seconds, applied to every DynamoDB/Redis call
    BACKGROUND_WORKERS = 4
    SERVICE_NAME = 'URL Shortener'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        DEPENDENCY_TIMEOUT = 'DEPENDENCY_TIMEOUT'
        BACKGROUND_WORKERS = 'BACKGROUND_WORKERS'

    class DynamoDB(StrEnum):
        TABLE = 'DYNAMODB_TABLE'
        ENDPOINT = 'DYNAMODB_ENDPOINT'
        REGION = 'AWS_REGION'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        TLS = 'REDIS_TLS'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Log / response event codes
SHORT_URL_CREATED = 'SHORT_URL_CREATED'
INVALID_INPUT = 'INVALID_INPUT'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
GENERATION_EXHAUSTED = 'GENERATION_EXHAUSTED'
SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
CACHE_HIT = 'CACHE_HIT'
CACHE_MISS = 'CACHE_MISS'
CACHE_UNAVAILABLE = 'CACHE_UNAVAILABLE'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
BACKGROUND_TASK_FAILED = 'BACKGROUND_TASK_FAILED'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
