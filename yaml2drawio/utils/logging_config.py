import logging
from typing import Optional

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    if fmt is None:
        fmt = DEFAULT_FORMAT
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
    root.setLevel(level)


def level_for(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


__all__ = ["configure_logging", "level_for", "DEFAULT_FORMAT"]
