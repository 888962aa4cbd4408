# shared/logging_config.py
import logging
import sys

from shared.config import AppConfig

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "asyncio")


def setup_logging(config: AppConfig) -> None:
    """Configure stdlib logging once for the whole process."""
    level = getattr(logging, config.log_level, logging.INFO)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        level=level,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("services").setLevel(level)
    logging.getLogger("shared").setLevel(level)
