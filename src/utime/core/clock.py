"""
时钟与时区

- 读取当前时刻（UTC）
- 解析本地时区（系统时区或 UTIME_TIMEZONE 覆盖）
- 时间戳格式化

本地时区的偏移和缩写每次调用都重新读取，不做缓存，
因为夏令时状态取决于具体时刻。
"""

import logging
import os
from datetime import datetime, timedelta, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..errors import ErrorType, UtimeError

logger = logging.getLogger(__name__)

# Biel Mean Time: 固定 UTC+1，无夏令时
BMT = timezone(timedelta(hours=1), "BMT")

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_LOCALTIME_LINK = Path("/etc/localtime")


def utc_now() -> datetime:
    """当前时刻（带 UTC 时区）"""
    return datetime.now(timezone.utc)


def resolve_local_zone(name: str | None = None) -> tzinfo | None:
    """
    解析本地时区。

    Args:
        name: IANA 时区名；为空表示使用系统本地时区

    Returns:
        ZoneInfo 实例；使用系统时区时返回 None（交给 datetime.astimezone 处理）

    Raises:
        UtimeError: 时区名无效
    """
    if not name:
        return None
    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UtimeError(
            ErrorType.CONFIG,
            f"Unknown time zone '{name}' (set via UTIME_TIMEZONE).",
            argument=name,
        ) from e
    logger.debug("使用时区覆盖: %s", zone.key)
    return zone


def to_local(instant: datetime, zone: tzinfo | None = None) -> datetime:
    """把时刻转换到本地时区（zone 为 None 时使用系统时区）"""
    return instant.astimezone(zone)


def zone_identifier(zone: tzinfo | None = None) -> str:
    """
    本地时区的标识符，例如 "America/New_York"。

    查找顺序: 覆盖时区的 key -> TZ 环境变量 -> /etc/localtime 链接目标 -> "Local"
    """
    if isinstance(zone, ZoneInfo):
        return zone.key
    if zone is not None:
        return str(zone)

    tz_env = os.environ.get("TZ", "").lstrip(":")
    if tz_env:
        return tz_env

    try:
        target = _LOCALTIME_LINK.resolve(strict=True)
    except OSError:
        return "Local"
    parts = target.parts
    if "zoneinfo" in parts:
        key = "/".join(parts[parts.index("zoneinfo") + 1:])
        if key:
            return key
    return "Local"


def zone_abbreviation(dt: datetime) -> str:
    """时区缩写（EDT、CET...）；没有缩写的时区返回数字偏移，如 +0530"""
    return dt.tzname() or dt.strftime("%z")


def offset_hours(dt: datetime) -> int:
    """UTC 偏移的整小时部分，向零截断（-3:30 -> -3）"""
    offset = dt.utcoffset() or timedelta(0)
    return int(offset.total_seconds() / 3600)


def format_date(dt: datetime) -> str:
    # 年份始终补足四位，strftime 在 1000 年以前不补零
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def format_clock(dt: datetime, *, milliseconds: bool = False) -> str:
    """HH:MM:SS，或 HH:MM:SS.mmm（毫秒截断，不四舍五入）"""
    text = f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    if milliseconds:
        text += f".{dt.microsecond // 1000:03d}"
    return text


def format_timestamp(dt: datetime) -> str:
    """YYYY-MM-DD HH:MM:SS <ZONE>"""
    return f"{format_date(dt)} {format_clock(dt)} {zone_abbreviation(dt)}"
