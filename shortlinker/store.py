"""Mapping store: lifecycle and resolution of alias mappings

The store is a set of independent async operations. None of them holds state
of its own; everything they need (the DAO, alias parameters, the clock) comes
from the StoreContext passed in by the caller.

Operations:
    create_or_get(ctx, destination) -> str
        Return the alias of an existing mapping for `destination`, or create one.
    update(ctx, alias, new_destination) -> bool
        Point an existing alias at a new destination.
    resolve(ctx, alias) -> str
        Return the destination of an active mapping.
    extend_expiry(ctx, alias, days_to_add) -> bool
        Reset a mapping's expiry to now + days_to_add days.

Errors:
    ValidationError     destination is not an absolute http(s) URL
    NotFoundError       no mapping for the alias
    ExpiredError        mapping exists, but its expiry is in the past
    InternalError       data store failure or alias space exhausted

Example:
    >>> from shortlinker.dao.memory import MappingMemoryDAO
    >>> ctx = StoreContext(dao=MappingMemoryDAO())
    >>> alias = await create_or_get(ctx, 'https://example.com/a')
    >>> alias == await create_or_get(ctx, 'https://example.com/a')
    True
    >>> await resolve(ctx, alias)
    'https://example.com/a'
    >>> await extend_expiry(ctx, alias, -1)
    True
    >>> await resolve(ctx, alias)
    Traceback (most recent call last):
        ...
    shortlinker.exceptions.ExpiredError: ...
"""

import contextlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC

from shortlinker.constants import AliasDefaults
from shortlinker.dao.base import MappingBaseDAO
from shortlinker.dao.exceptions import DataStoreError, MappingAlreadyExistsError, MappingNotFoundError
from shortlinker.exceptions import ExpiredError, InternalError, NotFoundError
from shortlinker.models import MappingModel
from shortlinker.types import Clock
from shortlinker.utils.shortener import generate_alias
from shortlinker.utils.validation import validate_destination


logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class StoreContext:
    """Explicit handle passed into every store operation.

    Attributes:
        dao (MappingBaseDAO):
            Persistence collaborator owning the mapping collection.
        salt (str):
            Secret salt for alias generation.
        alias_length (int):
            Number of characters of generated aliases.
        max_alias_retries (int):
            How many counter values to try when a generated alias is taken.
        clock (Clock):
            Source of the current (timezone-aware) time.
    """

    dao: MappingBaseDAO
    salt: str = AliasDefaults.SALT
    alias_length: int = AliasDefaults.LENGTH
    max_alias_retries: int = AliasDefaults.MAX_RETRIES
    clock: Clock = field(default=utc_now)


@contextlib.contextmanager
def _translate_dao_errors(alias: str | None = None) -> Iterator[None]:
    try:
        yield
    except MappingNotFoundError as e:
        raise NotFoundError(f"alias '{alias}' doesn't exist") from e
    except DataStoreError as e:
        raise InternalError(str(e)) from e


async def create_or_get(ctx: StoreContext, destination: str) -> str:
    """Return an alias for `destination`, creating a mapping only if none exists

    Destinations are matched as exact strings: 'https://example.com' and
    'https://example.com/' get different aliases. An existing mapping is
    returned untouched, including its expiry.

    Two concurrent calls for the same new destination may both create a
    mapping. Both aliases stay valid.

    Args:
        ctx (StoreContext): store handle.
        destination (str): absolute http(s) URL.

    Returns:
        str: the alias.

    Raises:
        ValidationError: if destination is not a well-formed absolute URL.
        InternalError: on data store failure, or if no free alias was found
                       within ctx.max_alias_retries attempts.
    """
    validate_destination(destination)

    with _translate_dao_errors():
        existing = await ctx.dao.find_by_destination(destination)
        if existing is not None:
            logger.debug('Destination already shortened.', extra={'alias': existing.alias})
            return existing.alias

        for attempt in range(1, ctx.max_alias_retries + 1):
            counter = await ctx.dao.count(increment=True)
            alias = generate_alias(counter, salt=ctx.salt, length=ctx.alias_length)
            mapping = MappingModel(alias=alias, destination=destination, created_at=ctx.clock())

            try:
                await ctx.dao.insert(mapping)
            except MappingAlreadyExistsError:
                logger.warning('Generated alias is already taken.', extra={'alias': alias, 'attempt': attempt})
                continue

            logger.info('Created mapping.', extra={'alias': alias})
            return alias

    raise InternalError(f'no free alias found after {ctx.max_alias_retries} attempts')


async def update(ctx: StoreContext, alias: str, new_destination: str) -> bool:
    """Overwrite the destination of an existing mapping

    `created_at` and `expires_at` are left untouched.

    Raises:
        ValidationError: if new_destination is not a well-formed absolute URL.
        NotFoundError: if the alias doesn't exist. No mapping is created.
        InternalError: on data store failure.
    """
    validate_destination(new_destination)

    with _translate_dao_errors(alias):
        await ctx.dao.update_destination(alias, new_destination)

    logger.info('Updated mapping destination.', extra={'alias': alias})
    return True


async def resolve(ctx: StoreContext, alias: str) -> str:
    """Return the destination an alias redirects to

    Expiry is checked on every call. Expired mappings stay stored and can be
    revived with extend_expiry().

    Raises:
        NotFoundError: if the alias doesn't exist.
        ExpiredError: if the mapping's expiry is in the past.
        InternalError: on data store failure.
    """
    with _translate_dao_errors(alias):
        mapping = await ctx.dao.get(alias)

    if mapping.is_expired(ctx.clock()):
        raise ExpiredError(f"alias '{alias}' expired at {mapping.expires_at.isoformat()}")
    return mapping.destination


async def extend_expiry(ctx: StoreContext, alias: str, days_to_add: int) -> bool:
    """Set a mapping's expiry to now + `days_to_add` days

    Any previous expiry is discarded, not extended. A negative number of days
    yields an already expired mapping.

    Raises:
        NotFoundError: if the alias doesn't exist.
        InternalError: on data store failure.
    """
    expires_at = ctx.clock() + timedelta(days=days_to_add)

    with _translate_dao_errors(alias):
        await ctx.dao.update_expiry(alias, expires_at)

    logger.info('Extended mapping expiry.', extra={'alias': alias, 'expires_at': expires_at.isoformat()})
    return True
