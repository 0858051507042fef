"""
Console message sink.

`make_sink()` is called once at process start; the returned logger is passed
to whatever needs to report diagnostics. Module loggers under `exprtree.*`
propagate into it.
"""

import logging
import sys
from typing import Optional, TextIO

RESET = "\033[0m"
COLORS = {
    logging.DEBUG: "\033[34m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[41m",
}
LABELS = {logging.CRITICAL: "FAULT"}


class ColorFormatter(logging.Formatter):
    def __init__(self, color: bool = True):
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        label = LABELS.get(record.levelno, record.levelname)
        msg = f"[{label}] {super().format(record)}"
        if not self.color:
            return msg
        return f"{COLORS.get(record.levelno, '')}{msg}{RESET}"


def make_sink(level: str = "WARNING", color: bool = True, stream: Optional[TextIO] = None,
              name: str = "exprtree") -> logging.Logger:
    logger = logging.getLogger(name)
    for h in list(logger.handlers):
        if getattr(h, "_exprtree_sink", False):
            logger.removeHandler(h)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ColorFormatter(color))
    handler._exprtree_sink = True
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
