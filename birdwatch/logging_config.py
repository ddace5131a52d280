"""
Logging setup for the application.

``setup_logging`` attaches a console handler to the root logger the
first time it is called. Later calls (tests, repeated ``create_app``)
leave the existing handlers alone.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a timestamped console handler."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
