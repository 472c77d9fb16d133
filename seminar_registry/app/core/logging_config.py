"""
Process‑wide logging for the seminar registry.

Records go to stderr and, when ``LOG_FILE`` is set, to that file too.
Registrations, status changes and bulk sends are logged at ``INFO`` and
failed gateway calls at ``WARNING``.  The image client (``httpx``)
reports every request at ``INFO``; those loggers are held at
``WARNING`` unless the service runs at ``DEBUG``.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    noisy_loggers: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Install the service handlers unless the root logger already has some.

    ``level`` is a level name, case insensitive; anything unknown means
    ``INFO``.  A second call, or a host such as uvicorn or pytest that
    configured logging first, leaves the existing setup untouched.
    """
    if logging.getLogger().handlers:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile), encoding="utf-8"))
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    if numeric_level > logging.DEBUG:
        for name in noisy_loggers:
            logging.getLogger(name).setLevel(logging.WARNING)
