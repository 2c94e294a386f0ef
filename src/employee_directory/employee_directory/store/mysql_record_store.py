from __future__ import annotations

import json
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, escape_like, fetchall, fetchone, load_json
from .repository import RecordStore


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT `value` FROM kv_store WHERE `key`=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return load_json(row["value"])

    def set(self, key: str, value: dict) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(`key`, `value`) VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE `value`=VALUES(`value`)
                """,
                (key, json.dumps(value)),
            )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE `key`=%s", (key,))

    def get_by_prefix(self, prefix: str) -> Sequence[tuple[str, dict]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT `key`, `value` FROM kv_store WHERE `key` LIKE %s ORDER BY `key`",
                (escape_like(prefix) + "%",),
            )
            return [(r["key"], load_json(r["value"])) for r in fetchall(cur)]
