"""Logging configuration for json2struct."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter for machine-read output."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry['exception'] = self.formatException(record.exc_info)
        if hasattr(record, 'language'):
            log_entry['language'] = record.language
        if hasattr(record, 'root_name'):
            log_entry['root_name'] = record.root_name
        return json.dumps(log_entry)


def setup_logger(
    name: str = "json2struct",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    json_format: bool = False,
) -> logging.Logger:
    """
    Set up and configure the logger.

    The package logger 'json2struct' is configured as well, so child loggers
    (json2struct.schema_inference.inferrer, ...) inherit level and handlers.
    Console output goes to stderr so reports written to stdout stay clean.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        console_output: Whether to output to console
        json_format: Use structured JSON format

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    package_logger = logging.getLogger('json2struct')
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger is not package_logger:
        logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    # Prevent duplicate log messages through the root logger
    package_logger.propagate = False

    return logger
