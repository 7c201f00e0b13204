import pytest

from src.sipintar.sipintar.analysis.aggregator import compute_stats, format_rate
from src.sipintar.sipintar.core.enums import AttendanceStatus


def test_counts_sum_to_total_and_rate(make_record):
    records = [
        make_record("1", status=AttendanceStatus.PRESENT),
        make_record("2", status=AttendanceStatus.PRESENT),
        make_record("3", status=AttendanceStatus.SICK),
    ]

    stats = compute_stats(records)

    assert stats.total == 3
    assert sum(stats.counts_by_status.values()) == stats.total
    assert stats.count(AttendanceStatus.SICK) == 1
    assert stats.count(AttendanceStatus.ABSENT) == 0
    assert stats.rate_label == "66.7"


def test_rate_is_100_only_when_everyone_present(make_record):
    all_present = [make_record(str(i)) for i in range(4)]
    one_absent = all_present[:3] + [make_record("9", status=AttendanceStatus.ABSENT)]

    assert compute_stats(all_present).attendance_rate == 100
    assert 0 <= compute_stats(one_absent).attendance_rate < 100


def test_rate_zero_when_nobody_present(make_record):
    stats = compute_stats([make_record("1", status=AttendanceStatus.EXCUSED_LEAVE)])

    assert stats.attendance_rate == 0
    assert stats.count(AttendanceStatus.EXCUSED_LEAVE) == 1


def test_empty_set_has_no_stats():
    with pytest.raises(ValueError):
        compute_stats([])


def test_format_rate_one_decimal():
    assert format_rate(100.0) == "100.0"
    assert format_rate(12.345) == "12.3"
