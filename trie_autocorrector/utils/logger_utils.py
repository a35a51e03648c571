# logger_utils.py -  logging setup and timing helpers

import logging
import os
import time
from typing import Optional

# [YYYY-MM-DD HH:MM:SS] LEVEL   | message
LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "trie_autocorrector"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", path: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the package logger.
    Messages go to stderr, and also to `path` when given (directory created if needed).
    Calling it again replaces the previous handlers.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    pkg.addHandler(stream)

    if path:
        log_dir = os.path.dirname(path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(fmt)
        pkg.addHandler(fh)

    pkg.propagate = False
    return pkg


class Log:
    """Small helpers for metrics and timing on top of `logging`."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts...).
        Example: "dictionary load done: 0.123s"
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure the execution time of a code block.
        To use:
            with Log.time_block("load dictionary") as t:
                do_some_work()
            t.elapsed  # seconds
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
