from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum
import logging
import re
from typing import Optional, Union

import pandas as pd

from ..time.clock import parse_duration, project_clock

logger = logging.getLogger(__name__)

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class ShardDate(str, Enum):
    """Which calendar day a date-sharded table name is suffixed with."""

    NONE = ""
    TODAY = "TODAY"
    ONE_DAY_AGO = "ONE_DAY_AGO"
    FIRST_DAY_OF_THE_MONTH = "FIRST_DAY_OF_THE_MONTH"
    # unrecognised config values; resolved like NONE
    UNKNOWN = "UNKNOWN"

    @staticmethod
    def parse(value: Optional[Union[str, "ShardDate"]]) -> "ShardDate":
        if isinstance(value, ShardDate):
            return value
        text = "" if value is None else str(value).strip().upper()
        if not text:
            return ShardDate.NONE
        for member in ShardDate:
            if member is not ShardDate.UNKNOWN and member.value == text:
                return member
        logger.warning(
            "Unrecognised date_for_shards %r; treating table as unsharded", value
        )
        return ShardDate.UNKNOWN

    @property
    def is_sharded(self) -> bool:
        return self not in (ShardDate.NONE, ShardDate.UNKNOWN)


@dataclass(frozen=True)
class TimeThreshold:
    """Daily cutoff: the table should be refreshed by this time of day."""

    time: time

    def __post_init__(self) -> None:
        value = self.time
        if isinstance(value, (pd.Timestamp, datetime)):
            value = value.time()
        if not isinstance(value, time):
            raise TypeError(f"TimeThreshold expects a time of day, got {value!r}")
        object.__setattr__(self, "time", value)

    @staticmethod
    def parse(s: str) -> "TimeThreshold":
        text = str(s).strip()
        match = _CLOCK_RE.match(text)
        if not match:
            raise ValueError(f"Invalid time threshold {s!r}. Expected HH:MM or HH:MM:SS.")
        hour, minute = int(match.group(1)), int(match.group(2))
        second = int(match.group(3) or 0)
        try:
            return TimeThreshold(time(hour, minute, second))
        except ValueError as exc:
            raise ValueError(f"Invalid time threshold {s!r}: {exc}") from exc

    def at(self, day_of) -> pd.Timestamp:
        """The cutoff instant on `day_of`'s calendar date, in its timezone."""
        return project_clock(self.time, day_of)


@dataclass(frozen=True)
class DurationThreshold:
    """Maximum tolerated age of a table since its last modification."""

    duration: pd.Timedelta

    def __post_init__(self) -> None:
        td = pd.Timedelta(self.duration)
        if td is pd.NaT or td < pd.Timedelta(0):
            raise ValueError(f"Duration threshold must be non-negative: {self.duration!r}")
        object.__setattr__(self, "duration", td)

    @staticmethod
    def parse(s: str) -> "DurationThreshold":
        return DurationThreshold(parse_duration(s))


@dataclass(frozen=True)
class TableConfig:
    table: str
    date_for_shards: ShardDate = ShardDate.NONE
    time_threshold: Optional[TimeThreshold] = None
    duration_threshold: Optional[DurationThreshold] = None

    dataset: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_for_shards", ShardDate.parse(self.date_for_shards))

    @property
    def label(self) -> str:
        return self.name or self.table


__all__ = [
    "ShardDate",
    "TimeThreshold",
    "DurationThreshold",
    "TableConfig",
]
