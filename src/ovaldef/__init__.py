from __future__ import annotations

import logging
from typing import Any

TRACE = logging.DEBUG - 5


def _register_trace_level() -> None:
    """
    Register a TRACE level below DEBUG on the logging module and the active logger class, unless a
    "trace" level or method is already installed.
    """
    if hasattr(logging, "TRACE") or hasattr(logging.getLoggerClass(), "trace"):
        return

    def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, message, args, **kwargs)

    def root_trace(message: str, *args: Any, **kwargs: Any) -> None:
        logging.log(TRACE, message, *args, **kwargs)

    logging.addLevelName(TRACE, "TRACE")
    setattr(logging, "TRACE", TRACE)  # noqa: B010
    setattr(logging.getLoggerClass(), "trace", trace)  # noqa: B010
    setattr(logging, "trace", root_trace)  # noqa: B010


# note: the CLI config and the walker both expect the level to exist at import time
_register_trace_level()
