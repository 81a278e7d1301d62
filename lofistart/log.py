from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

try:
    from rich.logging import RichHandler
    _HAS_RICH = True
except ImportError:
    RichHandler = None  # type: ignore
    _HAS_RICH = False

PACKAGE_LOGGER = "lofistart"


@dataclass(frozen=True)
class LogConfig:
    level: str = "WARNING"
    no_color: bool = False


def setup_logging(cfg: LogConfig) -> logging.Logger:
    """Attach one handler to the package logger (not the root logger).

    The engine is meant to be embedded in a view layer that owns the root
    logger; only the ``lofistart`` hierarchy is configured here. Calling this
    again replaces the handler instead of stacking a second one.
    """
    level = getattr(logging, cfg.level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)
    pkg.propagate = False
    for h in list(pkg.handlers):
        pkg.removeHandler(h)

    plain = cfg.no_color or os.getenv("NO_COLOR") is not None or not sys.stderr.isatty()
    if _HAS_RICH and not plain:
        handler: logging.Handler = RichHandler(show_time=False, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    handler.setLevel(level)
    pkg.addHandler(handler)
    return pkg


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
