import pandas as pd
import pytest

from shardwatch.config.table_config import DurationThreshold, TableConfig, TimeThreshold
from shardwatch.staleness import is_old

TZ = "Asia/Tokyo"


def jst(s: str) -> pd.Timestamp:
    return pd.Timestamp(s, tz=TZ)


HOUR = DurationThreshold(pd.Timedelta(hours=1))


@pytest.mark.parametrize(
    "tc, last_modified, current, expected_old, expected_reasons",
    [
        pytest.param(
            TableConfig(table="t", time_threshold=TimeThreshold(jst("2020-01-01 12:00"))),
            jst("2020-01-01 11:00"),
            jst("2020-01-01 12:30"),
            False,
            [],
            id="modified-before-cutoff",
        ),
        pytest.param(
            TableConfig(table="t", time_threshold=TimeThreshold(jst("2020-01-01 11:00"))),
            jst("2020-01-01 12:00"),
            jst("2020-01-01 12:30"),
            True,
            ["The table should be created by 11:00, but last modified time is 12:00"],
            id="modified-after-cutoff",
        ),
        pytest.param(
            TableConfig(table="t", duration_threshold=HOUR),
            jst("2020-01-01 11:00"),
            jst("2020-01-01 11:30"),
            False,
            [],
            id="within-duration",
        ),
        pytest.param(
            TableConfig(table="t", duration_threshold=HOUR),
            jst("2020-01-01 11:00"),
            jst("2020-01-01 12:30"),
            True,
            ["The table should be modified in 1h0m0s, but not modified in 1h30m0s"],
            id="over-duration",
        ),
        pytest.param(
            TableConfig(
                table="t",
                time_threshold=TimeThreshold(jst("2020-01-01 11:00")),
                duration_threshold=HOUR,
            ),
            jst("2020-01-01 11:00"),
            jst("2020-01-01 11:30"),
            False,
            [],
            id="both-pass",
        ),
        pytest.param(
            TableConfig(
                table="t",
                time_threshold=TimeThreshold(jst("2020-01-01 10:00")),
                duration_threshold=HOUR,
            ),
            jst("2020-01-01 11:00"),
            jst("2020-01-01 12:30"),
            True,
            [
                "The table should be created by 10:00, but last modified time is 11:00",
                "The table should be modified in 1h0m0s, but not modified in 1h30m0s",
            ],
            id="both-fail",
        ),
        pytest.param(
            TableConfig(table="t", time_threshold=TimeThreshold(jst("2020-01-01 12:00"))),
            jst("2019-12-31 11:00"),
            jst("2020-01-01 11:30"),
            False,
            [],
            id="before-cutoff-modified-yesterday-morning",
        ),
        pytest.param(
            TableConfig(table="t", time_threshold=TimeThreshold(jst("2020-01-01 11:00"))),
            jst("2019-12-31 12:00"),
            jst("2020-01-01 10:30"),
            False,
            [],
            id="before-cutoff-modified-yesterday-after-cutoff",
        ),
    ],
)
def test_is_old(tc, last_modified, current, expected_old, expected_reasons):
    old, reasons = is_old(tc, current, last_modified)
    assert old is expected_old
    assert reasons == expected_reasons


def test_no_thresholds_is_never_old():
    tc = TableConfig(table="t")
    old, reasons = is_old(tc, jst("2020-01-01 12:00"), jst("1990-01-01 00:00"))
    assert old is False
    assert reasons == []


def test_duration_equal_to_threshold_is_fresh():
    tc = TableConfig(table="t", duration_threshold=HOUR)
    old, _ = is_old(tc, jst("2020-01-01 12:00"), jst("2020-01-01 11:00"))
    assert old is False


def test_cutoff_reached_exactly_counts_as_passed():
    tc = TableConfig(table="t", time_threshold=TimeThreshold.parse("11:00"))
    old, reasons = is_old(tc, jst("2020-01-01 11:00"), jst("2020-01-01 11:00:01"))
    assert old is True
    assert reasons == [
        "The table should be created by 11:00, but last modified time is 11:00"
    ]


def test_each_instant_keeps_its_own_timezone():
    # cutoff 11:00 JST == 02:00 UTC; modified at 03:00 UTC (12:00 JST)
    tc = TableConfig(table="t", time_threshold=TimeThreshold.parse("11:00"))
    current = jst("2020-01-01 12:30")
    last_modified = pd.Timestamp("2020-01-01T03:00:00Z")
    old, reasons = is_old(tc, current, last_modified)
    assert old is True
    assert reasons == [
        "The table should be created by 11:00, but last modified time is 03:00"
    ]


def test_cutoff_projected_in_current_timezone():
    # a UTC current puts the cutoff at 11:00 UTC; a JST current at 02:00 UTC
    tc = TableConfig(table="t", time_threshold=TimeThreshold.parse("11:00"))
    old, _ = is_old(
        tc,
        pd.Timestamp("2020-01-01T11:00:00Z"),
        pd.Timestamp("2020-01-01T01:00:00Z"),
    )
    assert old is False

    old, _ = is_old(
        tc,
        jst("2020-01-01 20:00"),
        pd.Timestamp("2020-01-01T03:00:00Z"),
    )
    assert old is True


def test_is_old_is_deterministic():
    tc = TableConfig(
        table="t", time_threshold=TimeThreshold.parse("10:00"), duration_threshold=HOUR
    )
    args = (tc, jst("2020-01-01 12:30"), jst("2020-01-01 11:00"))
    assert is_old(*args) == is_old(*args)
