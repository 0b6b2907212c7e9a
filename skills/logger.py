"""Server logging: stderr plus a rotating file, with NUBANs masked."""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from typing import Sequence

from ngn.nuban import mask_nuban
from skills.config import log_dir, log_level

_NUBAN_PATTERN = re.compile(r"\b\d{10}\b")


class _MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Render once so NUBANs passed as args are masked too.
        record.msg = _NUBAN_PATTERN.sub(lambda m: mask_nuban(m.group(0)), record.getMessage())
        record.args = None
        return True


def setup_logger(name: str = "ngnMCP", libraries: Sequence[str] = ("ngn",)) -> logging.Logger:
    """
    Attach console and file handlers to *name* and to the *libraries* loggers.

    Only the server calls this; the ``ngn`` package itself logs to a
    NullHandler. Calling it again for a configured name only re-checks
    NGN_LOG_LEVEL.
    """
    console_level = log_level()
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    directory = log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    masking = _MaskingFilter()
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(masking)

    fh = RotatingFileHandler(
        directory / "server.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    fh.addFilter(masking)

    for target in (logger, *(logging.getLogger(lib) for lib in libraries)):
        target.setLevel(logging.DEBUG)
        target.addHandler(console)
        target.addHandler(fh)
        target.propagate = False
    return logger
