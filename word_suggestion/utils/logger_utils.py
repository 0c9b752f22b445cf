# logger_utils.py - logging setup and block timing

import logging
import sys
import time
from typing import Optional, TextIO, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("word_suggestion")


def setup_logging(level: Union[int, str] = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger. Calling it again replaces the handler.
    Each record is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | module | message
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


class Log:
    @staticmethod
    def metric(tag, value, unit=""):
        """Record a metric line (timings, counts) at INFO."""
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("build_model"):
                do_some_work()
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
        return False
