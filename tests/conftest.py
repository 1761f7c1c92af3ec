import pandas as pd
import pytest

from shardwatch.config.table_config import DurationThreshold, TableConfig, TimeThreshold
from shardwatch.metadata.duckdb_catalog import DuckDBRefreshCatalog


@pytest.fixture
def refresh_catalog(tmp_path):
    """DuckDB refresh log with a few tables recorded (times in UTC)."""
    catalog = DuckDBRefreshCatalog(str(tmp_path / "refresh.duckdb"))
    catalog.record("events_20210630", pd.Timestamp("2021-06-30T23:40:00Z"), dataset="raw")
    catalog.record("events_20210701", pd.Timestamp("2021-07-01T01:50:00Z"), dataset="raw")
    catalog.record("users", pd.Timestamp("2021-07-01T00:30:00Z"), dataset="core")
    return catalog


@pytest.fixture
def monitored_tables():
    return [
        # daily shard expected by 03:00 UTC
        TableConfig(
            table="events_",
            dataset="raw",
            date_for_shards="TODAY",
            time_threshold=TimeThreshold.parse("03:00"),
            name="events",
        ),
        # non-sharded table refreshed hourly
        TableConfig(
            table="users",
            dataset="core",
            duration_threshold=DurationThreshold.parse("1h"),
        ),
        # shard that was never written
        TableConfig(
            table="orders_",
            dataset="raw",
            date_for_shards="ONE_DAY_AGO",
            name="orders",
        ),
    ]
