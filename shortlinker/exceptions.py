"""Application-level exceptions.

Every exception carries an `error_code` which is returned to API clients
in the `errorCode` field of error responses, and an HTTP `status_code`
the Lambda handlers respond with.

Example:
    >>> from shortlinker.exceptions import NotFoundError
    >>> err = NotFoundError("Alias 'abc123' not found.")
    >>> err.error_code, err.status_code
    ('ALIAS_NOT_FOUND', 404)
"""


class ShortLinkerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'SHORTLINKER_ERROR'
    status_code = 500


class ValidationError(ShortLinkerError):
    """Raised when a destination is not a well-formed absolute URL."""

    error_code = 'INVALID_URL'
    status_code = 400


class BadRequestError(ShortLinkerError):
    """Raised when a request body or path is malformed."""

    error_code = 'BAD_REQUEST'
    status_code = 400


class NotFoundError(ShortLinkerError):
    """Raised when no mapping exists for an alias."""

    error_code = 'ALIAS_NOT_FOUND'
    status_code = 404


class ExpiredError(ShortLinkerError):
    """Raised when a mapping exists but its expiry is in the past."""

    error_code = 'ALIAS_EXPIRED'
    status_code = 410


class InternalError(ShortLinkerError):
    """Raised when the persistence layer fails (e.g. connectivity loss)."""

    error_code = 'INTERNAL_ERROR'
    status_code = 500


class ConfigurationError(ShortLinkerError):
    """Base exception for all configuration errors."""

    error_code = 'CONFIGURATION_ERROR'
    status_code = 500


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'MISSING_ENVIRONMENT_VARIABLE'
