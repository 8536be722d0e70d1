"""
File: logging_setup.py
Purpose: JSON logging for the client and CLI; request fields (method, path, status) arrive via `extra=`.
"""

import logging
from pythonjsonlogger.json import JsonFormatter

from .config import settings


def configure_logging(level: str = "INFO", service_name: str = "") -> None:
    """Send root logs to stderr as JSON, each record tagged with the service name.

    Raises ValueError for an unknown level name.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        static_fields={"service": service_name or settings.SERVICE_NAME},
    ))
    logger.handlers = [handler]
