"""Application-wide logging initialization

Call `initialize_logging()` once per Lambda container, before any other
logging is done (the lambda handler modules do this at import time).

Every record is written to stdout as a single JSON object, e.g.:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "shortlinker.lambdas.redirect_url.app",
    "message": "Redirecting client to destination. Responding with 302.",
    "alias": "Gh71TCN",
    "event": "REDIRECT_SUCCESS"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinker.constants import ENV


# Attributes every LogRecord carries; anything else was passed via `extra`
RESERVED_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras and tracebacks"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update({key: value for key, value in record.__dict__.items() if key not in RESERVED_ATTRS})

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # extras may hold datetimes and other non-JSON types
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
