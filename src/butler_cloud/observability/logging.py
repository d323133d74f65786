from __future__ import annotations

import logging
from typing import Sequence

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", *, extra_handlers: Sequence[logging.Handler] | None = None) -> None:
    """Configure root logging with a consistent format.

    ``httpx`` logs every request at INFO; it is held at WARNING unless DEBUG is
    requested so client output stays readable.
    """

    logging.basicConfig(level=level.upper(), format=DEFAULT_FORMAT)
    if level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
    if extra_handlers:
        root = logging.getLogger()
        for handler in extra_handlers:
            root.addHandler(handler)


__all__ = ["configure_logging"]
