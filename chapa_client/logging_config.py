"""
Logging Configuration Module.

Centralized logging setup for applications using the Chapa client. Library
modules only create loggers via ``logging.getLogger(__name__)``; call
:func:`setup_logging` from the application entry point to attach handlers.

Features:
- Configurable log levels per module
- Console and optional file logging
- Simple, detailed, or JSON-like line formats
"""

import logging
from pathlib import Path
from typing import Optional

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "chapa_client.log"

# Third-party libraries (reduce noise)
MODULE_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def _resolve_format(log_format: str) -> str:
    if log_format == "json":
        return JSON_FORMAT
    if log_format == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: str = "detailed",
    enable_file: bool = False,
    log_file_dir: str = "logs",
) -> None:
    """
    Configure logging for an application using the client.

    Args:
        log_level: Override the level from ``CHAPA_LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Line format (simple, detailed, json)
        enable_file: Whether to also log to ``<log_file_dir>/chapa_client.log``
        log_file_dir: Directory for the log file
    """
    if log_level is None:
        from chapa_client.config import get_settings

        log_level = get_settings().log_level
    level = log_level.upper()

    formatter = logging.Formatter(_resolve_format(log_format), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_file_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(log_file_dir) / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("chapa_client").setLevel(level)
    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={log_format}, file_logging={enable_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
