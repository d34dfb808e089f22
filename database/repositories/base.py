from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from database.sql import placeholder, positional_params, sql_for_partial_update


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def _fetch_one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
        row = self.db.execute(text(sql), dict(params or {})).mappings().first()
        return dict(row) if row is not None else None

    def _fetch_all(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        rows = self.db.execute(text(sql), dict(params or {})).mappings().all()
        return [dict(row) for row in rows]

    def _update_returning(
        self,
        table: str,
        key_column: str,
        key: str,
        data: Mapping[str, Any],
        overrides: Mapping[str, str],
        returning: str
    ) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to the row whose key matches ``key`` case-insensitively.

        The key is bound after the SET values, as the last placeholder.
        Returns the updated row, or None when nothing matched.
        """
        clauses, values = sql_for_partial_update(data, overrides)
        key_placeholder = placeholder(len(values) + 1)

        sql = (
            f"UPDATE {table} "
            f"SET {', '.join(clauses)} "
            f"WHERE LOWER({key_column}) = {key_placeholder} "
            f"RETURNING {returning}"
        )
        return self._fetch_one(sql, positional_params([*values, key.lower()]))
