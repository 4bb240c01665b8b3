"""
logging_config.py — Centralized Logging Configuration for the NBA Data API

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so uvicorn and pymongo records route through Loguru with
the same format and request context.

Business Rules:
- All logs go through Loguru (no direct print() or stdlib logging)
- Records below ERROR go to stdout, ERROR and above go to stderr
- JSON format in production for machine parsing
- Human-readable format in development
- Request ID from middleware is included when available

Called by: nbadata/main.py (lifespan), nbadata/__main__.py
Depends on: nbadata/config.py (for log_level, app_env)
"""

import logging
import sys

from loguru import logger

from .config import Settings

_DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[request_id]}</cyan> | "
    "{message}"
)


def _below_error(record) -> bool:
    return record["level"].no < logger.level("ERROR").no


def setup_logging(settings: Settings) -> None:
    """Configure Loguru and intercept stdlib logging.

    Call once at startup, before the server starts handling requests.
    """
    # Remove Loguru's default stderr handler so we control format
    logger.remove()
    logger.configure(extra={"request_id": "-"})

    log_level = settings.log_level.upper()

    if settings.is_production:
        # Production: JSON lines (Docker captures these)
        logger.add(sys.stdout, level=log_level, format="{message}",
                   filter=_below_error, serialize=True)
        logger.add(sys.stderr, level="ERROR", format="{message}", serialize=True)
    else:
        # Development: human-readable with colors
        logger.add(sys.stdout, level=log_level, format=_DEV_FORMAT,
                   filter=_below_error, colorize=True)
        logger.add(sys.stderr, level="ERROR", format=_DEV_FORMAT, colorize=True)

    # Intercept stdlib logging → route through Loguru
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    # Quiet noisy third-party loggers; the middleware logs every request itself
    for noisy in ("uvicorn.access", "pymongo"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured (level={}, production={})", log_level, settings.is_production)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller (skip frames from stdlib logging internals)
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


class RequestLogger:
    """Writes one line per handled request.

    Built once at startup and handed to RequestLoggingMiddleware. Responses
    with status >= 400 are logged at ERROR (stderr), the rest at INFO (stdout).
    """

    def __init__(self, sink=None):
        self._log = (sink or logger).bind(component="http")

    def log_request(self, method: str, uri: str, status: int, duration: float) -> None:
        entry = f"{method} {uri} (took {format_duration(duration)})"
        if status >= 400:
            self._log.error("[{}] {}", status, entry)
        else:
            self._log.info("[{}] {}", status, entry)


def format_duration(seconds: float) -> str:
    """Render elapsed seconds as a short human-readable string."""
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 0.001:
        return f"{seconds * 1000:.3f}ms"
    return f"{seconds * 1_000_000:.0f}µs"
