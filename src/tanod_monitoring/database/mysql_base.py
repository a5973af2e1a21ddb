from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
import structlog

from ..core.exceptions import StoreUnavailable
from .connection import DatabaseConnection

log = structlog.get_logger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` on a fresh connection, committing on success.

    Driver errors leave this block as ``StoreUnavailable``; anything else is
    re-raised untouched after a rollback.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        log.error("store_unavailable", stage="connect", error=str(e))
        raise StoreUnavailable("Could not reach the database") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        log.error("store_unavailable", stage="query", error=str(e))
        raise StoreUnavailable("Database operation failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_placeholders(values) -> str:
    """``%s,%s,...`` for an ``IN (...)`` clause; callers must skip empty input."""
    return ",".join(["%s"] * len(values))
