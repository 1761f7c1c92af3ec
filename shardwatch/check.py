# shardwatch/check.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from typing import List, Optional, Sequence

import pandas as pd

from .config.table_config import TableConfig
from .metadata.source import MetadataSource, TableNotFoundError
from .resolve.table_id import resolve_table_id
from .staleness import is_old

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["table_id", "last_modified", "is_old", "reasons", "error"]


@dataclass(frozen=True)
class TableCheck:
    """Outcome of checking one configured table."""

    name: str
    table_id: str
    last_modified: Optional[pd.Timestamp]
    is_old: bool
    reasons: List[str] = field(default_factory=list)
    error: Optional[str] = None


def check_table(tc: TableConfig, source: MetadataSource, now) -> TableCheck:
    now = pd.Timestamp(now)
    if now.tzinfo is None:
        # backends report UTC-aware times
        now = now.tz_localize("UTC")
    table_id = resolve_table_id(tc, now)
    try:
        last_modified = source.last_modified(table_id, dataset=tc.dataset)
    except TableNotFoundError as exc:
        logger.warning("%s: table %s not found in %s", tc.label, table_id, source.name)
        return TableCheck(
            name=tc.label,
            table_id=table_id,
            last_modified=None,
            is_old=True,
            reasons=[f"Table {table_id} was not found"],
            error=str(exc),
        )

    old, reasons = is_old(tc, now, last_modified)
    logger.debug(
        "%s: table_id=%s last_modified=%s is_old=%s",
        tc.label,
        table_id,
        last_modified,
        old,
    )
    if old:
        logger.warning("%s (%s) is stale: %s", tc.label, table_id, "; ".join(reasons))
    return TableCheck(
        name=tc.label,
        table_id=table_id,
        last_modified=last_modified,
        is_old=old,
        reasons=reasons,
    )


def _build_report(checks: Sequence[TableCheck]) -> pd.DataFrame:
    # explicit dtypes keep None (not NaN) in last_modified/error on every pandas version
    index = pd.Index([c.name for c in checks], name="name", dtype=object)
    columns = {
        "table_id": pd.Series([c.table_id for c in checks], index=index, dtype=object),
        "last_modified": pd.Series(
            [c.last_modified for c in checks], index=index, dtype=object
        ),
        "is_old": pd.Series([c.is_old for c in checks], index=index, dtype=bool),
        "reasons": pd.Series([list(c.reasons) for c in checks], index=index, dtype=object),
        "error": pd.Series([c.error for c in checks], index=index, dtype=object),
    }
    return pd.DataFrame(columns, index=index)[REPORT_COLUMNS]


def check_tables(
    configs: Sequence[TableConfig],
    source: MetadataSource,
    now: Optional[pd.Timestamp] = None,
) -> pd.DataFrame:
    """Check every configured table against `source` as of `now`.

    Returns a DataFrame indexed by table name with columns
    table_id, last_modified, is_old, reasons, error.
    `now` defaults to the current UTC time; a naive `now` is taken as UTC.
    """
    if now is None:
        now = pd.Timestamp(datetime.now(timezone.utc))
    report = _build_report([check_table(tc, source, now) for tc in configs])
    if report.empty:
        return report

    logger.info(
        "Checked %d tables against %s: %d stale",
        len(report),
        source.name,
        int(report["is_old"].sum()),
    )
    return report


def stale_messages(report: pd.DataFrame) -> List[str]:
    """One line per stale table, suitable for composing an alert."""
    out = []
    for name, row in report[report["is_old"].astype(bool)].iterrows():
        out.append(f"{name} ({row['table_id']}): " + "; ".join(row["reasons"]))
    return out
