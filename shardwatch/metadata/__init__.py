from .source import MetadataSource, TableNotFoundError
from .duckdb_catalog import DuckDBRefreshCatalog
from .parquet_dir import ParquetShardDirectory

__all__ = [
    "MetadataSource",
    "TableNotFoundError",
    "DuckDBRefreshCatalog",
    "ParquetShardDirectory",
]
