from shortlinker.utils.config import app_env, app_name, app_prefix, alias_salt, alias_length, load_config
from shortlinker.utils.helpers import base_url, get_short_url, require_environment, guarantee_500_response
from shortlinker.utils.shortener import generate_alias
from shortlinker.utils.validation import is_web_uri, validate_destination
from shortlinker.utils.logging import initialize_logging


__all__ = [
    'generate_alias',
    'app_env',
    'app_name',
    'app_prefix',
    'alias_salt',
    'alias_length',
    'load_config',
    'base_url',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'is_web_uri',
    'validate_destination',
    'initialize_logging',
]
