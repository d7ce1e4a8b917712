"""Logging setup for the analyzer service.

Search phases, preparation summaries and backend failures are emitted as
event-style messages with ``extra`` fields; this module routes them all to
stdout through one formatter.
"""

import logging
import sys

from social_analyzer.core.config import settings


def setup_logging() -> None:
    """Install a single stdout handler on the root logger.

    Safe to call more than once (the app lifespan and tests both do):
    any existing root handlers are replaced.  Unknown ``LOG_LEVEL`` values
    fall back to INFO.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Per-request lines from the HTTP client and server add nothing over
    # the backend_request_failed / search_phase events.
    for name in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)
