"""Abstract base class for Mapping data access objects (DAOs).

This class establishes a consistent contract for all Mapping DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, in-memory).

Responsibilities:
    - Provide an async interface for inserting, retrieving and mutating MappingModel objects.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by the mapping store.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, UTC
        >>> from shortlinker.models import MappingModel
        >>> from shortlinker.dao.redis import MappingRedisDAO

        >>> dao = await MappingRedisDAO(...).connect()

        >>> mapping = MappingModel(
        ...     alias='a1b2c3',
        ...     destination='https://example.com/blog/article-123',
        ...     created_at=datetime.now(UTC),
        ... )
        >>> await dao.insert(mapping)

        >>> retrieved = await dao.get('a1b2c3')
        >>> print(retrieved.destination)
        https://example.com/blog/article-123

        >>> print(retrieved.expires_at)
        None
"""

from abc import ABC, abstractmethod
from datetime import datetime

from shortlinker.models import MappingModel


class MappingBaseDAO(ABC):
    """Interface for Mapping data access objects (DAOs).

    Methods:
        connect() -> MappingBaseDAO:
            Verify connectivity with the data store.

        close() -> None:
            Release connections held by the DAO.

        insert(mapping: MappingModel, **kwargs) -> MappingBaseDAO:
            Insert a new MappingModel into the data store.
            Raises MappingAlreadyExistsError if the alias already exists.

        get(alias: str, **kwargs) -> MappingModel:
            Retrieve a MappingModel by alias.
            Raises MappingNotFoundError if the entry does not exist.

        find_by_destination(destination: str, **kwargs) -> MappingModel | None:
            Retrieve a MappingModel whose destination equals the given string exactly.

        update_destination(alias: str, destination: str, **kwargs) -> MappingBaseDAO:
            Overwrite the destination of an existing mapping.
            Raises MappingNotFoundError if the entry does not exist.

        update_expiry(alias: str, expires_at: datetime, **kwargs) -> MappingBaseDAO:
            Overwrite the expiry of an existing mapping.
            Raises MappingNotFoundError if the entry does not exist.

        count(increment: bool, **kwargs) -> int:
            Return counter from data store.
            Optionally increment counter before retrieving.

        All methods raise DataStoreError on connection, read or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., MappingRedisDAO or
        MappingMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Mappings are never deleted. Expiry is a soft, read-time check
          performed by the caller, not by the DAO.
        - No uniqueness is enforced on destinations. find_by_destination()
          returns one of possibly many matching mappings.
    """

    async def connect(self) -> 'MappingBaseDAO':
        """Verify connectivity with the data store.

        Returns:
            MappingBaseDAO: self (for method chaining)
        """
        return self

    async def close(self) -> None:
        """Release any connections held by the DAO."""
        return None

    @abstractmethod
    async def insert(self, mapping: MappingModel, **kwargs) -> 'MappingBaseDAO':
        """Insert a new MappingModel into the data store.

        Args:
            mapping (MappingModel):
                The MappingModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            MappingBaseDAO: self (for method chaining)

        Raises:
            MappingAlreadyExistsError:
                If a MappingModel with the same alias already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    async def get(self, alias: str, **kwargs) -> MappingModel:
        """Retrieve a MappingModel from the data store by its alias.

        Args:
            alias (str):
                The alias of the MappingModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            MappingModel: The MappingModel instance.

        Raises:
            MappingNotFoundError:
                If no MappingModel with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    async def find_by_destination(self, destination: str, **kwargs) -> MappingModel | None:
        """Retrieve a MappingModel whose destination matches exactly.

        Args:
            destination (str):
                The destination URL, compared as an exact string.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            MappingModel | None: A matching MappingModel if one exists, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    async def update_destination(self, alias: str, destination: str, **kwargs) -> 'MappingBaseDAO':
        """Overwrite the destination of an existing mapping in place.

        Args:
            alias (str):
                The alias of the mapping to update.

            destination (str):
                The new destination URL.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            MappingBaseDAO: self (for method chaining)

        Raises:
            MappingNotFoundError:
                If no MappingModel with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    async def update_expiry(self, alias: str, expires_at: datetime, **kwargs) -> 'MappingBaseDAO':
        """Overwrite the expiry of an existing mapping in place.

        Args:
            alias (str):
                The alias of the mapping to update.

            expires_at (datetime):
                The new timezone-aware expiry time.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            MappingBaseDAO: self (for method chaining)

        Raises:
            MappingNotFoundError:
                If no MappingModel with the given alias exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    async def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve the current counter value from the data store.

        Args:
            increment (bool):
                If True, increment the counter by 1 before returning the value.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current counter value.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
