from __future__ import annotations

import logging
import sys
from typing import Any

# Per-entry output of the header reader, below DEBUG
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

# The adapter adds a frame on top of the logger itself
_STACK_LEVEL = 3 if sys.version_info >= (3, 11) else 4


class HeaderLogAdapter(logging.LoggerAdapter):
    """Adds ``trace`` to the loggers of this package without replacing the process-wide logger class."""

    def __init__(self, logger: logging.Logger):
        super().__init__(logger, {})

    def trace(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", _STACK_LEVEL)
            self.log(TRACE_LEVEL, msg, *args, **kwargs)


def get_logger(name: str | None = None) -> HeaderLogAdapter:
    return HeaderLogAdapter(logging.getLogger(name))
