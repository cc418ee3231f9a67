"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all durable ShortURL DAO
implementations, regardless of the underlying storage (e.g., DynamoDB).

Responsibilities:
    - Provide an interface for conditionally inserting and retrieving ShortURLModel objects.
    - Provide an atomic hit counter increment.
    - Standardize error handling across data store implementations.

Example:
    >>> from dynashort.models import ShortURLModel
    >>> from dynashort.dao.dynamodb import ShortURLDynamoDBDAO

    >>> dao = ShortURLDynamoDBDAO(table_name='URLMapping')
    >>> dao.insert(ShortURLModel(shortcode='Gh71WPTx9', target='https://example.com', domain='short.ly'))
    >>> dao.get('Gh71WPTx9').target
    'https://example.com'
    >>> dao.hit('Gh71WPTx9')
    1

NOTE:
    Mappings are permanent. The DAO does not provide an interface to delete
    or update entries.
"""

from abc import ABC, abstractmethod

from dynashort.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for durable ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Create the record only if no record exists under its shortcode.
            Raises ShortURLAlreadyExistsError if the shortcode is taken.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        exists(shortcode: str, **kwargs) -> bool:
            Check whether a record exists under the shortcode.
            Raises DataStoreError on connection or read failure.

        hit(shortcode: str, **kwargs) -> int:
            Atomically increment the hit counter and return its new value.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or write failure.

        healthcheck(raise_error: bool = False) -> bool:
            Report data store reachability.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store (create-if-absent).

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        """Check whether a ShortURLModel exists under the given shortcode.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def hit(self, shortcode: str, **kwargs) -> int:
        """Atomically increment the hit counter of a ShortURLModel.

        Implementations must use the data store's atomic add and never a
        read-modify-write cycle.

        Returns:
            int: the hit counter after the increment.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def healthcheck(self, raise_error: bool = False) -> bool:
        """Return True if the data store is reachable.

        Raises:
            DataStoreError:
                If unreachable and raise_error=True.
        """
        pass
