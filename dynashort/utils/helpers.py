"""Helper utilities for the shortener services and AWS lambda functions.

Functions:
    get_short_url(domain: str, shortcode: str) -> str
        Get string representation of short URL for a given domain and shortcode
    is_absolute_url(url: str) -> bool
        Check whether a string parses as an absolute URL
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler: Callable) -> Callable
        Decorator: Turn unexpected lambda handler exceptions into a 500 response

Example:
    >>> from dynashort.utils.helpers import get_short_url
    >>> get_short_url('short.ly', 'Gh71WPTx9')
    'https://short.ly/Gh71WPTx9'
"""

import os
import json
import logging
import functools
from urllib.parse import urlsplit
from collections.abc import Callable

from dynashort.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from dynashort.exceptions import MissingEnvironmentVariableError
from dynashort.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def get_short_url(domain: str, shortcode: str) -> str:
    """Get string representation of shortened URL

    Args:
        domain (str): host the short URL is served under, e.g. 'short.ly'
        shortcode (str): shortcode

    Returns:
        str: short url string representation, e.g. 'https://short.ly/Gh71WPTx9'
    """
    return f'https://{domain.strip("/")}/{shortcode}'


def is_absolute_url(url: str) -> bool:
    """Check whether `url` is a syntactically valid absolute URL

    An absolute URL has both a scheme and a network location. Whitespace
    anywhere in the string and unparsable ports are rejected.

    Example:
        >>> is_absolute_url('https://example.com/page')
        True
        >>> is_absolute_url('not-a-url')
        False
    """
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        return False

    try:
        components = urlsplit(url)
        components.port  # raises ValueError on malformed ports
    except ValueError:
        return False

    return bool(components.scheme) and bool(components.netloc) and bool(components.hostname)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('DYNAMODB_TABLE')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'DYNAMODB_TABLE'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with a generic 500 whenever a lambda handler raises

    Internal details never leak into the response body. When running
    locally the original exception is re-raised to ease debugging.
    """

    @functools.wraps(handler)
    def wrapper(event, context, *args, **kwargs):
        try:
            return handler(event, context, *args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return {
                'statusCode': 500,
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
