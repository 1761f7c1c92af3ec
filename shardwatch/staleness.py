from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd

from .config.table_config import DurationThreshold, TableConfig, TimeThreshold
from .time.clock import format_clock, format_duration


def _time_violation(
    threshold: TimeThreshold, current: pd.Timestamp, last_modified: pd.Timestamp
) -> Optional[str]:
    cutoff = threshold.at(current)
    # before today's cutoff nothing is overdue yet
    if current < cutoff:
        return None
    if last_modified > cutoff:
        return (
            f"The table should be created by {format_clock(cutoff)}, "
            f"but last modified time is {format_clock(last_modified)}"
        )
    return None


def _duration_violation(
    threshold: DurationThreshold, current: pd.Timestamp, last_modified: pd.Timestamp
) -> Optional[str]:
    age = current - last_modified
    if age > threshold.duration:
        return (
            f"The table should be modified in {format_duration(threshold.duration)}, "
            f"but not modified in {format_duration(age)}"
        )
    return None


def is_old(tc: TableConfig, current, last_modified) -> Tuple[bool, List[str]]:
    """Decide whether a table is stale.

    Returns (is_old, reasons). Each configured threshold is checked on its
    own; reasons are ordered time threshold first, duration threshold second.
    A config with no thresholds is never old.
    """
    current = pd.Timestamp(current)
    last_modified = pd.Timestamp(last_modified)

    reasons: List[str] = []
    if tc.time_threshold is not None:
        reason = _time_violation(tc.time_threshold, current, last_modified)
        if reason is not None:
            reasons.append(reason)
    if tc.duration_threshold is not None:
        reason = _duration_violation(tc.duration_threshold, current, last_modified)
        if reason is not None:
            reasons.append(reason)
    return bool(reasons), reasons
