"""当前时间概览与时区辅助函数测试"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from utime.core import clock
from utime.core.clock import format_clock, format_timestamp, offset_hours, zone_identifier
from utime.core.summary import SEPARATOR, current_summary


class TestCurrentSummary:
    def test_full_block(self, new_york, summer_noon):
        summary = current_summary(new_york, summer_noon)

        assert summary.lines() == [
            "Current Time Information:",
            "==============================",
            "UTC Time      : 2024-07-01 12:00:00 UTC",
            "Local Time    : 2024-07-01 08:00:00 EDT",
            "Time Zone     : EDT (UTC-4)",
            "Location      : America/New_York",
            "==============================",
        ]

    def test_render_joins_lines(self, new_york, winter_noon):
        text = current_summary(new_york, winter_noon).render()

        assert text.startswith("Current Time Information:\n" + SEPARATOR)
        assert "Local Time    : 2024-01-15 07:00:00 EST" in text
        assert "Time Zone     : EST (UTC-5)" in text
        assert text.endswith(SEPARATOR)

    @pytest.mark.parametrize(
        "zone_name,expected",
        [
            ("UTC", "UTC (UTC+0)"),
            ("Asia/Kolkata", "IST (UTC+5)"),
            ("America/St_Johns", "NDT (UTC-2)"),
            ("Europe/Zurich", "CEST (UTC+2)"),
            ("Asia/Dubai", "+04 (UTC+4)"),
        ],
    )
    def test_zone_line(self, zone_name, expected, summer_noon):
        """偏移只显示整小时部分，向零截断"""
        summary = current_summary(ZoneInfo(zone_name), summer_noon)
        assert f"Time Zone     : {expected}" in summary.lines()

    def test_utc_line_is_independent_of_local_zone(self, summer_noon):
        tokyo = current_summary(ZoneInfo("Asia/Tokyo"), summer_noon)
        assert tokyo.lines()[2] == "UTC Time      : 2024-07-01 12:00:00 UTC"
        assert tokyo.lines()[3] == "Local Time    : 2024-07-01 21:00:00 JST"

    def test_reads_clock_when_no_instant_given(self, utc):
        before = datetime.now(timezone.utc)
        summary = current_summary(utc)

        assert summary.utc.tzinfo is timezone.utc
        assert before <= summary.utc <= datetime.now(timezone.utc)

    def test_system_zone(self, system_tz, summer_noon):
        system_tz("Europe/Zurich")
        summary = current_summary(None, summer_noon)

        assert summary.lines()[3] == "Local Time    : 2024-07-01 14:00:00 CEST"
        assert summary.lines()[5] == "Location      : Europe/Zurich"


class TestZoneIdentifier:
    def test_override_zone_key(self, new_york):
        assert zone_identifier(new_york) == "America/New_York"

    def test_tz_environment_variable(self, monkeypatch):
        monkeypatch.setenv("TZ", ":Europe/Paris")
        assert zone_identifier() == "Europe/Paris"

    def test_localtime_symlink(self, monkeypatch, tmp_path):
        target = tmp_path / "zoneinfo" / "Asia" / "Tokyo"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"")
        link = tmp_path / "localtime"
        link.symlink_to(target)

        monkeypatch.delenv("TZ", raising=False)
        monkeypatch.setattr(clock, "_LOCALTIME_LINK", link)
        assert zone_identifier() == "Asia/Tokyo"

    def test_falls_back_to_local(self, monkeypatch, tmp_path):
        monkeypatch.delenv("TZ", raising=False)
        monkeypatch.setattr(clock, "_LOCALTIME_LINK", tmp_path / "missing")
        assert zone_identifier() == "Local"

    def test_plain_localtime_file(self, monkeypatch, tmp_path):
        plain = tmp_path / "localtime"
        plain.write_bytes(b"")

        monkeypatch.delenv("TZ", raising=False)
        monkeypatch.setattr(clock, "_LOCALTIME_LINK", plain)
        assert zone_identifier() == "Local"


class TestFormatting:
    def test_milliseconds_are_truncated(self):
        dt = datetime(2024, 1, 1, 12, 34, 56, 999_999, tzinfo=timezone.utc)
        assert format_clock(dt, milliseconds=True) == "12:34:56.999"
        assert format_clock(dt) == "12:34:56"

    def test_timestamp(self):
        dt = datetime(2024, 1, 1, 1, 2, 3, tzinfo=timezone.utc)
        assert format_timestamp(dt) == "2024-01-01 01:02:03 UTC"

    def test_negative_half_hour_offset_truncates_toward_zero(self):
        dt = datetime(2024, 1, 15, 12, tzinfo=ZoneInfo("America/St_Johns"))
        assert offset_hours(dt) == -3
