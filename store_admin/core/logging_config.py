"""
Logging configuration for the application.

WHAT: Configures the root logger with a console handler and an optional
file handler.

WHY: Modules log through `logging.getLogger(__name__)`; this is the one place
that decides where those records go and in which format. The request ID
from RequestContextMiddleware is added to every record so log lines of one
request can be correlated.
"""

import logging
from pathlib import Path
from typing import Optional

from store_admin.middleware.request_context import get_request_context


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestIdFilter(logging.Filter):
    """Attach the current request ID (or "-") to each log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_request_context()
        record.request_id = ctx.request_id if ctx else "-"
        return True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    If the root logger already has handlers (a second create_app call, or a
    test runner that installed its own), nothing is changed.

    Args:
        level: Logging level name, case insensitive
        logfile: Optional path of a file to log to as well
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    request_id_filter = RequestIdFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_id_filter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(request_id_filter)
        root.addHandler(file_handler)
