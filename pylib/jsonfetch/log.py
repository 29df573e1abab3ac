'''structlog setup: console rendering to stderr so stdout carries only the payload.'''

import sys

import structlog

from jsonfetch.config import LOG_LEVELS


_LEVEL_NUMBERS = dict(zip(LOG_LEVELS, (10, 20, 30, 40, 50)))


def configure_logging(log_level: str = 'warning') -> None:
    '''Plain-traceback console logging to stderr, filtered at log_level.'''
    from structlog.contextvars import merge_contextvars
    from structlog.dev import ConsoleRenderer, plain_traceback, set_exc_info
    from structlog.processors import StackInfoRenderer, TimeStamper, add_log_level

    structlog.configure(
        processors=[
            merge_contextvars,
            add_log_level,
            StackInfoRenderer(),
            set_exc_info,
            TimeStamper(fmt='%Y-%m-%d %H:%M:%S', utc=False),
            ConsoleRenderer(exception_formatter=plain_traceback, colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVEL_NUMBERS[log_level]),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def ensure_logging() -> None:
    '''Apply the default setup unless the caller already configured structlog.'''
    if not structlog.is_configured():
        configure_logging()
