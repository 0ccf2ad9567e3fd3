"""Logging configuration for courier applications."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from courier.settings import CourierSettings, get_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: CourierSettings | None = None) -> str | None:
    """Setup logging based on the debug setting.

    Note: stdout/stderr are left alone since a running Textual app owns the
    terminal. Only Python's logging output is routed, to a file in debug
    mode and to devnull otherwise.

    Returns:
        The log file path in debug mode, otherwise None.
    """
    settings = settings or get_settings()

    if settings.debug:
        # When debug is on, log every bubble step to a file
        timestamp = datetime.now().strftime("%Y%m%d-%H%M")
        log_file = settings.log_file or f"courier_{timestamp}.log"
        log_fd = open(log_file, "a")

        logging.basicConfig(
            level=logging.DEBUG,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(log_fd)],
            force=True,
        )
        logger = logging.getLogger(__name__)
        logger.info(f"Debug mode enabled, logging to {log_file}")
        return log_file

    devnull = open(os.devnull, "w")
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(devnull)],
        force=True,
    )
    return None
