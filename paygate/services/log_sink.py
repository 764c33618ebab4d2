import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator

SINK_LOGGER_NAME = "paygate.payments"

# date, time and microseconds, e.g. 2024/05/01 12:30:45.123456
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S.%f"


class _MicrosecondFormatter(logging.Formatter):
    """logging.Formatter renders time with time.strftime, which has no %f."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created).strftime(datefmt or TIMESTAMP_FORMAT)


@contextmanager
def open_log_sink(
    path: str,
    level: int | str = logging.INFO,
    name: str = SINK_LOGGER_NAME,
) -> Iterator[logging.Logger]:
    """
    Open the payment log sink for the lifetime of the with-block.

    Every line goes both to ``path`` (created if absent, appended otherwise)
    and to stdout. The handlers are detached and closed when the block exits,
    whether normally or through an exception, and the logger's previous
    level and propagate flag are restored. An OSError from opening the file
    propagates to the caller before anything is yielded.

    Sinks that are open at the same time must use distinct ``name`` values;
    two sinks on one logger write every line to both files.

    Handler.emit is serialised by each handler's own lock, so the returned
    logger may be shared by every processor and used from several threads.
    """
    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    console_handler = logging.StreamHandler(sys.stdout)
    handlers: list[logging.Handler] = [file_handler, console_handler]

    formatter = _MicrosecondFormatter("%(asctime)s %(message)s", datefmt=TIMESTAMP_FORMAT)
    logger = logging.getLogger(name)
    previous_level, previous_propagate = logger.level, logger.propagate
    logger.setLevel(level)
    logger.propagate = False
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    try:
        yield logger
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate
