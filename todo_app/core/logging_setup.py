"""Logging setup shared by the server and the console."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once, before the first log call."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # évite les doublons si appelé deux fois
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    logging.captureWarnings(True)
