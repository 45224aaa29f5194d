"""JSON logging for the support chat Lambda."""

import logging
import os

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "formbridge-support"


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger that writes one JSON object per line.

    Every record carries the service and environment so CloudWatch queries can
    filter across stages; ``LOG_LEVEL`` quiets per-search logs in prod.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
            static_fields={
                "service": SERVICE_NAME,
                "environment": os.environ.get("ENVIRONMENT", "dev"),
            },
        )
    )
    logger.addHandler(handler)
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    logger.propagate = False
    return logger
