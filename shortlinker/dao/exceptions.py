"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    MappingNotFoundError:
        Raised when a MappingModel is not found in the data store.

    MappingAlreadyExistsError:
        Raised when attempting to insert a MappingModel whose alias is taken.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shortlinker.dao.exceptions import MappingNotFoundError
    >>> raise MappingNotFoundError("Mapping with alias 'abc123' not found.")
    Traceback (most recent call last):
        ...
    shortlinker.dao.exceptions.MappingNotFoundError: Mapping with alias 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class MappingNotFoundError(DAOError):
    """Exception raised when a MappingModel is not found in the data store."""

    pass


class MappingAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a MappingModel with an alias that already exists."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass
