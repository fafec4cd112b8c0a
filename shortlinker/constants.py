from enum import StrEnum


class AliasDefaults:
    """Default alias generation parameters."""

    SALT = 'shortlinker'
    LENGTH = 7
    MAX_RETRIES = 3  # attempts before giving up on colliding aliases


class ExpiryDefaults:
    """Bounds of expiry updates."""

    MAX_DAYS_TO_ADD = 36_500  # ~100 years either way, well inside datetime range


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        SHORT_URL_BASE = 'SHORT_URL_BASE'

    class Alias(StrEnum):
        SALT = 'ALIAS_SALT'
        LENGTH = 'ALIAS_LENGTH'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Event codes attached to structured logs and error responses
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
UPDATE_SUCCESS = 'UPDATE_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
EXPIRY_EXTENDED = 'EXPIRY_EXTENDED'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
