"""Central logging configuration for the library."""
from __future__ import annotations

import logging
from typing import Optional, Union

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger; handlers are left to the application."""
    return logging.getLogger(name)


def configure(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Install a basic stream handler, used by the command line entry-point."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    else:
        logging.getLogger().setLevel(level)
