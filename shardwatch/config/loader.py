from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from .table_config import DurationThreshold, TableConfig, TimeThreshold

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {
    "table",
    "date_for_shards",
    "time_threshold",
    "duration_threshold",
    "dataset",
    "name",
}


class ConfigError(ValueError):
    """Raised when a table configuration entry is malformed."""


def table_config_from_dict(d: Mapping[str, Any]) -> TableConfig:
    if not isinstance(d, Mapping):
        raise ConfigError(f"Table entry must be an object, got {type(d).__name__}")

    unknown = sorted(set(d) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown table config keys: {', '.join(unknown)}")

    table = d.get("table")
    if not table or not isinstance(table, str):
        raise ConfigError("Table entry requires a non-empty 'table' string.")

    try:
        time_threshold = (
            TimeThreshold.parse(d["time_threshold"])
            if d.get("time_threshold")
            else None
        )
        duration_threshold = (
            DurationThreshold.parse(d["duration_threshold"])
            if d.get("duration_threshold")
            else None
        )
    except ValueError as exc:
        raise ConfigError(f"Table {table!r}: {exc}") from exc

    return TableConfig(
        table=table,
        date_for_shards=d.get("date_for_shards") or "",
        time_threshold=time_threshold,
        duration_threshold=duration_threshold,
        dataset=d.get("dataset"),
        name=d.get("name"),
    )


def load_table_configs(path: Union[str, Path]) -> List[TableConfig]:
    """Load table configs from a JSON file.

    The document is either {"tables": [...]} or a bare list of table entries.
    """
    with open(path, "r", encoding="utf-8") as f:
        doc = json.load(f)

    entries: Any = doc.get("tables") if isinstance(doc, dict) else doc
    if not isinstance(entries, list):
        raise ConfigError(f"{path}: expected a list of tables")

    configs: List[TableConfig] = []
    for i, entry in enumerate(entries):
        try:
            tc = table_config_from_dict(entry)
        except ConfigError as exc:
            raise ConfigError(f"{path}: tables[{i}]: {exc}") from exc
        logger.debug("loaded table config %s", tc)
        configs.append(tc)

    logger.info("Loaded %d table configs from %s", len(configs), path)
    return configs
