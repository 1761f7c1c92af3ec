from __future__ import annotations

from datetime import datetime, time
import re
from typing import Union

import pandas as pd

ClockLike = Union[time, datetime, pd.Timestamp]

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"(\d*)(?:\.(\d*))?(ns|us|µs|μs|ms|s|m|h)")

# largest duration a pd.Timedelta (and a Go time.Duration) can hold
_MAX_NS = 2**63 - 1


def _as_timestamp(value) -> pd.Timestamp:
    return value if isinstance(value, pd.Timestamp) else pd.Timestamp(value)


def project_clock(clock: ClockLike, current) -> pd.Timestamp:
    """Return `clock`'s time of day placed on `current`'s calendar date.

    The result carries `current`'s timezone. Only hour/minute/second are kept.
    Wall-clock times that do not exist (DST gap) are shifted forward and
    ambiguous ones resolve to the first occurrence.
    """
    cur = _as_timestamp(current)
    naive = pd.Timestamp(
        year=cur.year,
        month=cur.month,
        day=cur.day,
        hour=clock.hour,
        minute=clock.minute,
        second=clock.second,
    )
    if cur.tz is None:
        return naive
    return naive.tz_localize(cur.tz, ambiguous=True, nonexistent="shift_forward")


def format_clock(ts) -> str:
    """HH:MM of an instant in its own timezone."""
    return _as_timestamp(ts).strftime("%H:%M")


def _fmt_frac(value: int, digits: int) -> str:
    # value scaled by 10**digits; trailing zeros of the fraction are trimmed
    whole, frac = divmod(value, 10**digits)
    if frac == 0:
        return str(whole)
    return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")


def format_duration(td) -> str:
    """Render a duration the way Go's time.Duration prints it (1h30m0s, 1.5s, 300ms)."""
    ns = int(pd.Timedelta(td).value)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_fmt_frac(ns, 3)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_fmt_frac(ns, 6)}ms"

    hours, rem = divmod(ns, _UNIT_NS["h"])
    minutes, rem = divmod(rem, _UNIT_NS["m"])
    seconds = _fmt_frac(rem, 9)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def parse_duration(text: str) -> pd.Timedelta:
    """Parse a Go-style duration string such as "1h30m", "90s" or "1.5h".

    Components are summed in integer nanoseconds; fractional digits beyond
    nanosecond precision are truncated.
    """
    s = str(text).strip()
    if not s:
        raise ValueError("Duration string is required.")

    sign = 1
    if s[0] in "+-":
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s == "0":
        return pd.Timedelta(0)

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None or not (match.group(1) or match.group(2)):
            raise ValueError(f"Invalid duration: {text!r}")
        whole, frac, unit = match.group(1), match.group(2) or "", _UNIT_NS[match.group(3)]
        total += int(whole or 0) * unit
        if frac:
            total += int(frac) * unit // 10 ** len(frac)
        if total > _MAX_NS:
            raise ValueError(f"Duration out of range: {text!r}")
        pos = match.end()

    return pd.Timedelta(total * sign, unit="ns")
