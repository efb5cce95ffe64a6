#
# PROJECT: raytracer-core
# MODULE: raytracer_core/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
from typing import Optional

LOGGER_NAME = "raytracer_core"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING,
                  handler: Optional[logging.Handler] = None) -> logging.Logger:
    """
    Route the package's log records to a single handler (stderr by default).

    The core only emits DEBUG records (canvas creation, rejected writes,
    encode/decode summaries); pass logging.DEBUG to see them. A second call
    swaps the previous handler out and closes it.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
