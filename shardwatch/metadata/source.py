from typing import Optional, Protocol
import pandas as pd


class TableNotFoundError(KeyError):
    """The metadata backend has no table with the requested id."""

    def __init__(self, table_id: str, dataset: Optional[str] = None):
        self.table_id = table_id
        self.dataset = dataset
        super().__init__(f"{dataset}.{table_id}" if dataset else table_id)


class MetadataSource(Protocol):
    name: str

    def last_modified(
        self, table_id: str, dataset: Optional[str] = None
    ) -> pd.Timestamp:
        """Return the table's last-modified time as a tz-aware UTC Timestamp.

        Raises TableNotFoundError if the table does not exist.
        """
        ...
