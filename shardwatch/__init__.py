"""shardwatch: freshness checks for date-sharded, periodically refreshed tables."""

from .config.table_config import (
    ShardDate,
    TimeThreshold,
    DurationThreshold,
    TableConfig,
)
from .config.loader import ConfigError, load_table_configs, table_config_from_dict
from .resolve.table_id import resolve_table_id
from .staleness import is_old
from .time.clock import format_duration, parse_duration, project_clock

from .metadata.source import MetadataSource, TableNotFoundError
from .metadata.duckdb_catalog import DuckDBRefreshCatalog
from .metadata.parquet_dir import ParquetShardDirectory
from .check import TableCheck, check_table, check_tables, stale_messages

__all__ = [
    "ShardDate",
    "TimeThreshold",
    "DurationThreshold",
    "TableConfig",
    "ConfigError",
    "load_table_configs",
    "table_config_from_dict",
    "resolve_table_id",
    "is_old",
    "format_duration",
    "parse_duration",
    "project_clock",
    "MetadataSource",
    "TableNotFoundError",
    "DuckDBRefreshCatalog",
    "ParquetShardDirectory",
    "TableCheck",
    "check_table",
    "check_tables",
    "stale_messages",
]
