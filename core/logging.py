"""Logging setup shared by the API and the server entrypoint."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Calling this more than once only adjusts the level.
    """

    global _handler

    root = logging.getLogger()
    root.setLevel(level)
    if _handler is not None and _handler in root.handlers:
        return
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
