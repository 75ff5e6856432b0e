"""
SQLite store access.

The service reads from a single SQLite file holding the ``restaurants``
and ``dishes`` tables.  The schema and its rows are maintained outside
this application; here the file is only ever opened read only.

One connection is opened at application startup (``open_store``) and
shared by every request until shutdown (``close_store``).  Handlers run
in FastAPI's worker threadpool, so the connection is created with
``check_same_thread=False``.  Nothing writes through it, so no locking
is needed.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import settings
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)

_connection: Optional[sqlite3.Connection] = None


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def open_store(path: Optional[str] = None) -> sqlite3.Connection:
    """Open the process‑wide read‑only connection.

    Calling this while a connection is already open returns the open
    connection.  A missing database file raises ``sqlite3.OperationalError``
    so that the application fails at startup instead of on the first
    request.
    """
    global _connection
    if _connection is not None:
        return _connection
    db_path = path or get_database_path()
    uri = Path(db_path).resolve().as_uri() + "?mode=ro"
    conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
    # Return rows as dict‑like objects keyed by column name
    conn.row_factory = sqlite3.Row
    _connection = conn
    logger.info("Opened store %s (read only)", db_path)
    return conn


def close_store() -> None:
    """Close the shared connection if one is open."""
    global _connection
    if _connection is None:
        return
    _connection.close()
    _connection = None
    logger.info("Closed store")


def get_connection() -> sqlite3.Connection:
    """Return the shared connection or raise ``StoreUnavailableError``."""
    if _connection is None:
        raise StoreUnavailableError()
    return _connection


def fetch_all(query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """Run one parameterized statement and return every row.

    Each row becomes a plain ``dict`` whose key order follows the column
    order of the result set.  Driver errors are not caught here.
    """
    rows = get_connection().execute(query, tuple(params)).fetchall()
    return [dict(row) for row in rows]
