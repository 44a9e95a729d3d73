# logging_setup.py
import logging
import os
import sys


def setup_logging(level=None):
    """
    Configures the root logger with a single console handler.
    Call once, before the first log line. LOG_LEVEL is used when no level is given.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate handlers when called twice (e.g. reloads).
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
