import json
import logging
import tempfile
from pathlib import Path

import pandas as pd

from shardwatch.config.loader import load_table_configs
from shardwatch.metadata.duckdb_catalog import DuckDBRefreshCatalog
from shardwatch.check import check_tables, stale_messages


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    root = Path(tempfile.mkdtemp(prefix="shardwatch_demo_"))
    config_path = root / "tables.json"
    config_path.write_text(
        json.dumps(
            {
                "tables": [
                    {
                        "name": "daily_events",
                        "dataset": "raw",
                        "table": "events_",
                        "date_for_shards": "TODAY",
                        "time_threshold": "03:00",
                    },
                    {
                        "name": "monthly_rollup",
                        "dataset": "mart",
                        "table": "rollup_",
                        "date_for_shards": "FIRST_DAY_OF_THE_MONTH",
                        "duration_threshold": "36h",
                    },
                    {
                        "dataset": "core",
                        "table": "users",
                        "duration_threshold": "1h",
                    },
                ]
            },
            indent=2,
        ),
        encoding="utf-8",
    )

    # pretend the pipelines have been writing their refresh log
    catalog = DuckDBRefreshCatalog(str(root / "refresh.duckdb"))
    catalog.record("events_20210701", pd.Timestamp("2021-07-01T05:10:00Z"), dataset="raw")
    catalog.record("rollup_20210701", pd.Timestamp("2021-07-01T01:00:00Z"), dataset="mart")
    catalog.record("users", pd.Timestamp("2021-07-01T11:45:00Z"), dataset="core")

    configs = load_table_configs(config_path)
    report = check_tables(configs, catalog, now=pd.Timestamp("2021-07-01T12:00:00Z"))

    print(report[["table_id", "last_modified", "is_old"]])
    for line in stale_messages(report):
        print("STALE:", line)


if __name__ == "__main__":
    main()
