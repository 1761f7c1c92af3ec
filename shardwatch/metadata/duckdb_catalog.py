from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import duckdb
import pandas as pd

from .source import TableNotFoundError


def to_utc_naive(value) -> pd.Timestamp:
    """Convert a timestamp to UTC-naive for DuckDB storage and predicates."""
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")
    return ts.tz_localize(None)


def to_utc_aware(value) -> pd.Timestamp:
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


@dataclass
class DuckDBRefreshCatalog:
    """
    Refresh log kept in a DuckDB file.

    Pipelines call record() when they finish writing a table; monitors read
    the latest write time back with last_modified().
    """

    path: str
    table_name: str = "table_refresh_log"
    name: str = "duckdb"

    def __post_init__(self) -> None:
        Path(self.path).resolve().parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _conn(self):
        return duckdb.connect(self.path)

    def _init_db(self) -> None:
        with self._conn() as con:
            con.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.table_name} (
                    dataset VARCHAR NOT NULL,
                    table_id VARCHAR NOT NULL,
                    last_modified_utc TIMESTAMP NOT NULL,
                    PRIMARY KEY (dataset, table_id)
                );
                """
            )

    def record(
        self, table_id: str, last_modified, dataset: Optional[str] = None
    ) -> None:
        with self._conn() as con:
            con.execute(
                f"""
                INSERT INTO {self.table_name}(dataset, table_id, last_modified_utc)
                VALUES (?, ?, ?)
                ON CONFLICT(dataset, table_id) DO UPDATE SET
                    last_modified_utc=excluded.last_modified_utc
                """,
                [dataset or "", table_id, to_utc_naive(last_modified).to_pydatetime()],
            )

    def last_modified(
        self, table_id: str, dataset: Optional[str] = None
    ) -> pd.Timestamp:
        with self._conn() as con:
            row = con.execute(
                f"SELECT last_modified_utc FROM {self.table_name} "
                "WHERE dataset = ? AND table_id = ?",
                [dataset or "", table_id],
            ).fetchone()
        if row is None:
            raise TableNotFoundError(table_id, dataset)
        return to_utc_aware(row[0])
