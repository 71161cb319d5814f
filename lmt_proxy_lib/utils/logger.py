import logging

from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def prepare_logger(
    logger_name: str,
    logger_file_name: Optional[str] = None,
    log_level: Optional[str] = "INFO",
) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    logger.setLevel((log_level or "INFO").upper())

    # Endpoints are instantiated more than once (tests, gunicorn reloads)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if logger_file_name:
        file_handler = logging.FileHandler(logger_file_name, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
