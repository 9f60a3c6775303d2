"""
Logging setup for test runs.

Structured logging with structlog on top of two stdlib handlers: the console
and a log file under logs/ that rolls over at midnight. Loggers are handed
to the browser factory and page objects explicitly, bound to the test id.
"""
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import structlog

ROOT_LOGGER_NAME = 'saucedemo'
LOG_FILE_NAME = 'test-log.txt'
# structlog renders the timestamp, level and logger name into the message
MESSAGE_FORMAT = '%(message)s'

_handlers = []


def configure_logging(log_dir='logs', level='INFO'):
    """
    Install console and daily rolling file handlers and configure structlog.

    Safe to call more than once; only the first call in a process installs
    handlers until shutdown_logging() removes them.

    Args:
        log_dir: Directory for the rolling log file (created if missing)
        level: Minimum level name, e.g. INFO or DEBUG

    Returns:
        Path of the active log file
    """
    log_path = Path(log_dir) / LOG_FILE_NAME
    if _handlers:
        return log_path

    log_path.parent.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(MESSAGE_FORMAT))

    rolling_file = TimedRotatingFileHandler(
        log_path, when='midnight', backupCount=14, encoding='utf-8')
    rolling_file.setFormatter(logging.Formatter(MESSAGE_FORMAT))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.propagate = False
    for handler in (console, rolling_file):
        root.addHandler(handler)
        _handlers.append(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return log_path


def get_logger(name='tests', **context):
    """Bound logger under the framework namespace, carrying the given context."""
    return structlog.get_logger(f'{ROOT_LOGGER_NAME}.{name}').bind(**context)


def shutdown_logging():
    """Flush and close the handlers installed by configure_logging()."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    while _handlers:
        handler = _handlers.pop()
        root.removeHandler(handler)
        handler.flush()
        handler.close()
