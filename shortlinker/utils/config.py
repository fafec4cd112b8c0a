"""Utility functions for application configuration management.

Lambda functions read their data store configuration from **AWS AppConfig**.
Each environment (`APP_ENV`) has a dedicated AppConfig *Environment* within
the AppConfig *Application* identified by `APP_NAME`. Configuration data is a
JSON document deployed under a configuration profile (`backend-config` by
default):

    {
        "build": 42,
        "active_backend": "redis",
        "configs": {
            "shorten_url":   {"redis": {"host": "...", "port": 6379, "db": 0}},
            "update_url":    {"redis": { ... }},
            "redirect_url":  {"redis": { ... }},
            "extend_expiry": {"redis": { ... }}
        }
    }

Each Lambda loads its own section (e.g., `"shorten_url"`) for the active backend.

Alias generation is configured through plain environment variables
(`ALIAS_SALT`, `ALIAS_LENGTH`), since it is identical for every Lambda.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    alias_salt() -> str, alias_length() -> int
        Return the alias generation parameters.

    load_config(lambda_name: str) -> dict
        Load configuration for a given Lambda from AWS AppConfig. Under SAM,
        load it from a local AppConfig agent instead.

Example:
    >>> from shortlinker.utils.config import load_config
    >>> config = load_config('shorten_url')
    >>> print(config['redis']['host'])
    redis-15501.host.docker.internal
"""

import os
import json
import functools
import logging
import urllib.parse
import urllib.request
from collections.abc import Callable

import boto3

from shortlinker.constants import ENV, AliasDefaults
from shortlinker.exceptions import ConfigurationError
from shortlinker.utils.helpers import require_environment
from shortlinker.utils.runtime import running_locally


logger = logging.getLogger(__name__)

LOCAL_AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal'})
LOCAL_AGENT_PORT = 2772


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'shortlinker'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'shortlinker:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def alias_salt() -> str:
    return os.environ.get(ENV.Alias.SALT) or AliasDefaults.SALT


def alias_length() -> int:
    """Return the alias length from 'ALIAS_LENGTH' (7 by default)

    Raises:
        ConfigurationError: if ALIAS_LENGTH is not a positive integer.
    """
    raw = os.environ.get(ENV.Alias.LENGTH)
    if not raw:
        return AliasDefaults.LENGTH

    try:
        length = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"ALIAS_LENGTH must be an integer (given value: '{raw}').") from e
    if length < 1:
        raise ConfigurationError(f'ALIAS_LENGTH must be positive (given value: {length}).')
    return length


def _active_backend_section(document: dict, lambda_name: str) -> dict:
    backend = document['active_backend']
    return {backend: document['configs'][lambda_name][backend]}


def _validate_agent_url(url: str | None) -> str:
    if not url:
        return ''
    components = urllib.parse.urlparse(url)
    if components.scheme not in {'http', 'https'}:
        raise ConfigurationError(f'Bad scheme {url}')
    if components.hostname not in LOCAL_AGENT_HOSTS:
        raise ConfigurationError(f'Bad host {url}')
    if components.port not in {LOCAL_AGENT_PORT, None}:
        raise ConfigurationError(f'Bad port {url}')
    return url


def _sam_load_local_appconfig(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: load AppConfig from a local AppConfig Agent when running under SAM

    Behavior:
        - If the application is running locally and `APPCONFIG_AGENT_URL` is set
          to a safe local URL, fetch the app configuration JSON from the local agent.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).

    Environment variables used:
        APPCONFIG_AGENT_URL     – Base URL of the local agent (e.g., http://host.docker.internal:2772).
        APPCONFIG_PROFILE_NAME  – Optional profile name (default: "backend-config").
    """

    @functools.wraps(func)
    def wrapper(lambda_name: str, *args, **kwargs) -> dict:
        agent_url = _validate_agent_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not running_locally() or not agent_url:
            return func(lambda_name, *args, **kwargs)

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, 'backend-config')
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'

        logger.debug('Trying to load AppConfig from local agent.', extra={'agentUrl': url, 'lambdaName': lambda_name})
        with urllib.request.urlopen(url, timeout=5) as r:  # noqa: S310
            document = json.load(r)

        logger.debug('Loaded AppConfig from local agent.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
        return _active_backend_section(document, lambda_name)

    return wrapper


@_sam_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(lambda_name: str) -> dict:
    """Load configuration for a given Lambda from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g., "shorten_url" or "redirect_url").

    Returns:
        dict: {<active backend>: <the lambda's backend config>}

    Raises:
        MissingEnvironmentVariableError:
            If any of the required environment variables is missing.
        ConfigurationError:
            If the document has no section for this lambda or backend.
        botocore.exceptions.ClientError:
            If AppConfig calls fail.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    document = json.loads(response['Configuration'].read().decode('utf-8'))

    try:
        data = _active_backend_section(document, lambda_name)
    except KeyError as e:
        raise ConfigurationError(f"AppConfig document has no config for '{lambda_name}' ({e}).") from e

    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
    return data
