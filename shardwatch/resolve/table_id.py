from __future__ import annotations

import pandas as pd

from ..config.table_config import ShardDate, TableConfig


def _reference_day(tc: TableConfig, now: pd.Timestamp) -> pd.Timestamp:
    """Calendar day (naive midnight) the shard suffix should name."""
    if tc.time_threshold is not None and now < tc.time_threshold.at(now):
        # today's cutoff has not passed yet, so today's shard may not exist
        day = pd.Timestamp(now.date()) - pd.Timedelta(days=1)
    else:
        day = pd.Timestamp(now.date())

    if tc.date_for_shards == ShardDate.ONE_DAY_AGO:
        return day - pd.Timedelta(days=1)
    if tc.date_for_shards == ShardDate.FIRST_DAY_OF_THE_MONTH:
        return day.replace(day=1)
    return day


def resolve_table_id(tc: TableConfig, now) -> str:
    """Concrete table id to inspect as of `now`.

    Unsharded tables (and unrecognised shard policies) resolve to the bare
    template; sharded ones get a YYYYMMDD suffix.
    """
    if not tc.date_for_shards.is_sharded:
        return tc.table
    day = _reference_day(tc, pd.Timestamp(now))
    return f"{tc.table}{day.strftime('%Y%m%d')}"
