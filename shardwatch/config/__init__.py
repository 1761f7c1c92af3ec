from .table_config import ShardDate, TimeThreshold, DurationThreshold, TableConfig
from .loader import ConfigError, load_table_configs, table_config_from_dict

__all__ = [
    "ShardDate",
    "TimeThreshold",
    "DurationThreshold",
    "TableConfig",
    "ConfigError",
    "load_table_configs",
    "table_config_from_dict",
]
