"""
Logging setup for the ``vocabmaster_app`` package logger.

Module loggers (``logging.getLogger(__name__)``) propagate to it, so one
call configures the console and rotating-file output for the whole app.
Set ``LOG_JSON`` to write one JSON object per line instead of plain text.
"""

import json
import logging
import logging.handlers
import os
from typing import Optional

LOGGER_NAME = 'vocabmaster_app'
LOG_FILE_NAME = 'vocabmaster.log'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'


class JsonLineFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _default_log_dir() -> str:
    package_root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    return os.path.join(package_root, 'logs')


def build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonLineFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the package logger and return it.

    Calling it again (one app per test) replaces the previous handlers and
    closes their files.

    Args:
        app: Flask application; when given, werkzeug request logs are quieted.
        log_level: DEBUG, INFO, WARNING or ERROR.
        log_dir: Directory for ``vocabmaster.log``; defaults to ``logs/``.
        json_format: Emit JSON lines rather than plain text.
    """
    log_dir = log_dir or _default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = build_formatter(json_format)
    handlers = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8',
        ),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s, json=%s", log_level, log_dir, json_format)
    return logger
