"""
当前时间概览（UTC / 本地时间 / 时区 / 位置）
"""

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from .clock import (
    format_timestamp,
    offset_hours,
    to_local,
    utc_now,
    zone_abbreviation,
    zone_identifier,
)

SEPARATOR = "=" * 30


@dataclass(frozen=True)
class TimeSummary:
    """某一时刻的 UTC / 本地时间信息"""

    utc: datetime
    local: datetime
    location: str

    @property
    def zone_name(self) -> str:
        return zone_abbreviation(self.local)

    @property
    def utc_offset_hours(self) -> int:
        return offset_hours(self.local)

    def lines(self) -> list[str]:
        return [
            "Current Time Information:",
            SEPARATOR,
            f"UTC Time      : {format_timestamp(self.utc)}",
            f"Local Time    : {format_timestamp(self.local)}",
            f"Time Zone     : {self.zone_name} (UTC{self.utc_offset_hours:+d})",
            f"Location      : {self.location}",
            SEPARATOR,
        ]

    def render(self) -> str:
        return "\n".join(self.lines())


def current_summary(zone: tzinfo | None = None, now: datetime | None = None) -> TimeSummary:
    """读取当前时刻并生成概览"""
    utc = (now or utc_now()).astimezone(timezone.utc)
    return TimeSummary(utc=utc, local=to_local(utc, zone), location=zone_identifier(zone))
