"""
Tests for models module
"""

import dataclasses

import pytest

from apptotals import ApplicationStat, LogRecord


class TestApplicationStat:
    """Tests for ApplicationStat dataclass."""

    def test_zero_state(self):
        """A fresh stat has an empty name and zero times."""
        stat = ApplicationStat()

        assert stat.name == ""
        assert stat.cpu_time == 0
        assert stat.io_wait == 0
        assert stat.total_time == 0

    def test_update_adds_times(self):
        """Test update accumulates and keeps total in sync."""
        stat = ApplicationStat()

        stat.update(1, 2)
        assert stat.cpu_time == 1
        assert stat.io_wait == 2
        assert stat.total_time == 3

        stat.update(10, 11)
        assert stat.cpu_time == 11
        assert stat.io_wait == 13
        assert stat.total_time == 24

    def test_update_recomputes_total(self):
        """Total is derived from the sums, not incremented separately."""
        stat = ApplicationStat(name="foo", cpu_time=16, io_wait=78, total_time=0)
        stat.update(22, 82)

        assert stat.total_time == 198

    def test_to_dict(self):
        stat = ApplicationStat(name="web")
        stat.update(4, 5)

        assert stat.to_dict() == {"name": "web", "cpu_time": 4, "io_wait": 5, "total_time": 9}


class TestLogRecord:
    """Tests for LogRecord dataclass."""

    def test_optional_fields_default_to_none(self):
        record = LogRecord(app="web")

        assert record.cpu_time is None
        assert record.io_wait is None

    def test_frozen(self):
        record = LogRecord(app="web", cpu_time=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.app = "db"
