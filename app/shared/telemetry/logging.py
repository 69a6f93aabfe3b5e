"""Logging configuration for the application."""

import logging
import sys
from collections.abc import Iterable

from app.core.config import get_settings

# Third-party loggers that are chatty at INFO; raised to WARNING unless debugging.
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


def setup_logging(filters: Iterable[logging.Filter] = ()) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. SQL statement logging stays off unless
    database_echo is set (it can contain search terms).

    Args:
        filters: Filters attached to the stdout handler. The format expects
            one of them to set record.request_id; it defaults to '-'.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(_DefaultRequestId())
    for log_filter in filters:
        handler.addFilter(log_filter)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=[handler])
    for name in _NOISY_LOGGERS:
        if name == "sqlalchemy.engine" and settings.database_echo:
            continue
        logging.getLogger(name).setLevel(logging.WARNING)


class _DefaultRequestId(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True
