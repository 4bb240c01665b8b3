"""Run the API server: python -m nbadata"""

import sys

import uvicorn
from loguru import logger
from pydantic import ValidationError

from .config import get_settings
from .logging_config import setup_logging


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        if any(err["loc"] == ("mongodb_uri",) for err in e.errors()):
            logger.critical("Missing 'MONGODB_URI' environment variable.")
        else:
            logger.critical("Invalid configuration: {}", e)
        return 1

    setup_logging(settings)
    logger.info("Starting server on port {}...", settings.port)
    uvicorn.run("nbadata.main:app", host=settings.host, port=settings.port,
                log_config=None, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
