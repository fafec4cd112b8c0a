"""Plumbing shared by all Lambda handlers

Functions:
    open_store(app_config) -> AsyncContextManager[StoreContext]
        Connect the configured DAO, yield a StoreContext, close the DAO on exit.
    run_in_store(app_config, operation, *args) -> Any
        Run a mapping store operation to completion from synchronous Lambda code.
    respond_to_error(error, alias=None) -> dict
        Log an application error and build its HTTP response.

Example:
    >>> from shortlinker.store import resolve
    >>> run_in_store({'redis': {'host': 'localhost'}}, resolve, 'abc123')
    'https://example.com/page'
"""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from shortlinker.dao.exceptions import DataStoreError
from shortlinker.dao.redis import MappingRedisDAO
from shortlinker.exceptions import ConfigurationError, InternalError, ShortLinkerError
from shortlinker.lambdas.responses import response_error
from shortlinker.store import StoreContext
from shortlinker.types import LambdaConfiguration, LambdaResponse
from shortlinker.utils import alias_length, alias_salt, app_prefix


logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def open_store(app_config: LambdaConfiguration) -> AsyncIterator[StoreContext]:
    """Open a StoreContext backed by the configured data store

    Raises:
        ConfigurationError: if the config has no 'redis' section.
        InternalError: if the data store can't be reached.
    """
    if 'redis' not in app_config:
        raise ConfigurationError(f'Unsupported backend(s): {", ".join(app_config) or "none"}.')

    logger.debug('Assuming Redis as the backend database for mappings')
    redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
    dao = MappingRedisDAO(**redis_config, prefix=app_prefix())

    try:
        try:
            await dao.connect()
        except DataStoreError as e:
            raise InternalError(str(e)) from e

        yield StoreContext(dao=dao, salt=alias_salt(), alias_length=alias_length())
    finally:
        await dao.close()


def run_in_store(app_config: LambdaConfiguration, operation: Callable[..., Awaitable[Any]], *args: Any) -> Any:
    async def _run() -> Any:
        async with open_store(app_config) as ctx:
            return await operation(ctx, *args)

    return asyncio.run(_run())


def respond_to_error(error: ShortLinkerError, alias: str | None = None) -> LambdaResponse:
    """Log an application error and turn it into a response

    Client errors (4xx) are logged at INFO level, server errors (5xx)
    at ERROR level with their traceback.
    """
    extra = {'event': error.error_code, 'alias': alias}
    if error.status_code >= 500:
        logger.error('Request failed. Responding with %s.', error.status_code, exc_info=error, extra=extra)
    else:
        logger.info('Request rejected. Responding with %s.', error.status_code, extra=extra)
    return response_error(error)
