"""
Logging configuration for the API process.

``setup_logging`` installs one formatter on the root logger (console,
plus a file when ``LOG_FILE`` is set) and routes Uvicorn's own loggers
through it, so request lines and query failures share one format and
one destination.  ``run.py`` starts Uvicorn with ``log_config=None`` for
that reason.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by Uvicorn.  Their level follows ours and they
# propagate to the root handlers instead of keeping their own.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    access_level: Optional[str] = None,
) -> None:
    """Configure the root logger and align Uvicorn's loggers with it.

    Parameters
    ----------
    level : str
        Level name for the application (e.g. ``"DEBUG"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    access_level : Optional[str]
        Level for ``uvicorn.access`` (one line per request).  Defaults
        to ``level``; set it to ``"WARNING"`` to silence request lines.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    numeric_access_level = getattr(logging, (access_level or level).upper(), numeric_level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_access_level if name == "uvicorn.access" else numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # Root handlers already installed (second ``create_app`` call, pytest).
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
