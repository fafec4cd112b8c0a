"""In-memory DAO implementation for mappings

Keeps mappings in a per-instance dictionary. Used to run the mapping store
without Redis, e.g. in tests exercising the store end to end.

Example:
    >>> dao = MappingMemoryDAO()
    >>> await dao.count(increment=True)
    1
"""

import dataclasses
from collections.abc import Iterable
from datetime import datetime

from beartype import beartype

from shortlinker.models import MappingModel
from shortlinker.dao.base import MappingBaseDAO
from shortlinker.dao.exceptions import MappingAlreadyExistsError, MappingNotFoundError


class MappingMemoryDAO(MappingBaseDAO):
    """Dictionary-backed MappingBaseDAO

    Args:
        mappings (Iterable[MappingModel]):
            Mappings to preload, e.g. test fixtures.
        counter (int):
            Initial value of the alias counter.
    """

    def __init__(self, mappings: Iterable[MappingModel] = (), counter: int = 0):
        # dicts keep insertion order, so find_by_destination() returns the oldest match
        self.mappings: dict[str, MappingModel] = {m.alias: m for m in mappings}
        self.counter = counter

    def _existing(self, alias: str) -> MappingModel:
        try:
            return self.mappings[alias]
        except KeyError:
            raise MappingNotFoundError(f"Mapping with alias '{alias}' not found.") from None

    @beartype
    async def insert(self, mapping: MappingModel, **kwargs) -> 'MappingMemoryDAO':
        if mapping.alias in self.mappings:
            raise MappingAlreadyExistsError(f"Mapping with alias '{mapping.alias}' already exists.")
        self.mappings[mapping.alias] = mapping
        return self

    @beartype
    async def get(self, alias: str, **kwargs) -> MappingModel:
        return self._existing(alias)

    @beartype
    async def find_by_destination(self, destination: str, **kwargs) -> MappingModel | None:
        return next((m for m in self.mappings.values() if m.destination == destination), None)

    @beartype
    async def update_destination(self, alias: str, destination: str, **kwargs) -> 'MappingMemoryDAO':
        self.mappings[alias] = dataclasses.replace(self._existing(alias), destination=destination)
        return self

    @beartype
    async def update_expiry(self, alias: str, expires_at: datetime, **kwargs) -> 'MappingMemoryDAO':
        self.mappings[alias] = dataclasses.replace(self._existing(alias), expires_at=expires_at)
        return self

    async def count(self, increment: bool = False, **kwargs) -> int:
        if increment:
            self.counter += 1
        return self.counter
