"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store.

    ShortURLAlreadyExistsError:
        Raised when a conditional insert loses to an existing record.

    DataStoreError:
        Raised when the durable data store is unavailable (connection issues, timeouts, throttling, etc.).

    CacheUnavailableError:
        Raised when the cache cannot be reached. Callers absorb it.

Example:
    >>> from dynashort.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'Gh71WPTx9' not found.")
    Traceback (most recent call last):
        ...
    dynashort.dao.exceptions.ShortURLNotFoundError: Short URL with code 'Gh71WPTx9' not found.
"""

from dynashort.exceptions import ShortenerError


class DAOError(ShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Raised when a ShortURLModel is not found in the data store."""

    error_code = 'dao:short_url_not_found_error'


class ShortURLAlreadyExistsError(DAOError):
    """Raised when inserting a ShortURLModel whose shortcode is already taken."""

    error_code = 'dao:short_url_already_exists_error'


class DataStoreError(DAOError):
    """Raised when the durable data store encounters an error.

    Examples include connection issues, timeouts, throttling and missing tables.
    """

    error_code = 'dao:data_store_error'


class CacheUnavailableError(DAOError):
    """Raised when the cache cannot be read from or written to."""

    error_code = 'dao:cache_unavailable_error'
