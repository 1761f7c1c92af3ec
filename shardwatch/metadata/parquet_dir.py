from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

from .source import TableNotFoundError


@dataclass
class ParquetShardDirectory:
    """Tables stored as one file per shard; last-modified is the file mtime.

    Layout:
      root/<dataset>/<table_id>.parquet
      root/<table_id>.parquet            (no dataset)
    """

    root: str
    suffix: str = ".parquet"
    name: str = "parquet"

    def __post_init__(self) -> None:
        self.root_path = Path(self.root).resolve()

    def _table_path(self, table_id: str, dataset: Optional[str]) -> Path:
        base = self.root_path / dataset if dataset else self.root_path
        return base / f"{table_id}{self.suffix}"

    def last_modified(
        self, table_id: str, dataset: Optional[str] = None
    ) -> pd.Timestamp:
        path = self._table_path(table_id, dataset)
        if not path.is_file():
            raise TableNotFoundError(table_id, dataset)
        return pd.Timestamp(path.stat().st_mtime_ns, unit="ns", tz="UTC")
