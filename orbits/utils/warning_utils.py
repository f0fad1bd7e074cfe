import contextlib
import logging
import warnings
from typing import Iterator, Optional, Sequence


class LoggedMessageError(RuntimeError):
    """A log record that was turned into an exception. The original record is kept in ``record``."""

    def __init__(self, record: logging.LogRecord, message: str):
        super().__init__(f"Log message converted to exception: {message}")
        self.record = record


class LoggingExceptionHandler(logging.Handler):
    """Raises LoggedMessageError for every record at or above its level."""

    def __init__(self, level=logging.WARNING):
        super().__init__(level)

    def emit(self, record: logging.LogRecord):
        raise LoggedMessageError(record, self.format(record))


@contextlib.contextmanager
def warnings_as_exceptions(
    warning_types: Optional[Sequence[type[Warning]]] = None,
    log_level: int = logging.WARNING,
    logger_name: Optional[str] = None,
) -> Iterator[None]:
    """
    Context manager that temporarily converts warnings and log messages to exceptions.

    Used by the tests and the benchmarks to make sure that numeric code (e.g. the stats of
    thousands of generated systems) runs without silent RuntimeWarnings such as overflows.

    Args:
        warning_types: Warning categories to convert. If None, all warnings are converted.
        log_level: Log level at or above which log messages are converted to exceptions.
        logger_name: Logger to watch, the root logger if None.

    Usage:
        with warnings_as_exceptions([RuntimeWarning], logger_name="orbits"):
            compute_stats("planet", scales)

    Raises:
        LoggedMessageError: If a log message at or above ``log_level`` is emitted.
    """
    with warnings.catch_warnings():
        for warning_type in warning_types or [Warning]:
            warnings.filterwarnings("error", category=warning_type)

        handler = LoggingExceptionHandler(level=log_level)
        watched_logger = logging.getLogger(logger_name)
        watched_logger.addHandler(handler)

        try:
            yield
        finally:
            watched_logger.removeHandler(handler)
