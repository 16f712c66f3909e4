"""
Swatch Internet Time（beat 时间）

一天分为 1000 个 beat，每个 86.4 秒，以 Biel Mean Time（固定 UTC+1）的午夜为起点，
不受夏令时影响。

- beat_of / current_beat / format_beat: 当前 beat（@DDD.DD）
- parse_beat: 解析 "@NNN" 参数
- beat_range: 某个 beat 在今天（BMT 日期）对应的本地时间区间
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from ..errors import ErrorType, UtimeError
from .clock import BMT, format_clock, format_date, to_local, utc_now, zone_abbreviation
from .epoch import current_epoch

logger = logging.getLogger(__name__)

BEATS_PER_DAY = 1000
SECONDS_PER_DAY = 86400
SECONDS_PER_BEAT = 86.4
BMT_OFFSET_SECONDS = 3600

_BEAT_RE = re.compile(r"([+-]?)0*([0-9]+)")


def beat_of(epoch_seconds: int) -> float:
    """epoch 秒数对应的 beat 值，范围 [0, 1000)"""
    seconds_since_midnight = (epoch_seconds + BMT_OFFSET_SECONDS) % SECONDS_PER_DAY
    return seconds_since_midnight * 1000.0 / SECONDS_PER_DAY


def format_beat(beat: float) -> str:
    """格式化为 @DDD.DD，例如 @023.45"""
    return "@%06.2f" % beat


def current_beat(now: datetime | None = None) -> str:
    """当前时刻的 beat 时间字符串"""
    return format_beat(beat_of(current_epoch(now)))


def parse_beat(text: str) -> int:
    """
    解析 beat 参数，可带一个前导 '@'。

    Raises:
        UtimeError: 不是整数，或不在 0-999 范围内
    """
    digits = text[1:] if text.startswith("@") else text
    match = _BEAT_RE.fullmatch(digits)
    # "@000...0" 是合法的 0，去掉前导零后最多 3 位
    if match and len(match.group(2)) <= 3:
        beat = int(match.group(1) + match.group(2))
        if 0 <= beat < BEATS_PER_DAY:
            return beat
    raise UtimeError(
        ErrorType.VALIDATION,
        f"Invalid beat time '{text}'. Must be '@' followed by 0-999.",
        argument=text,
    )


def bmt_midnight(now: datetime | None = None) -> datetime:
    """当前 BMT 日期的午夜（BMT 时区）"""
    now_bmt = (now or utc_now()).astimezone(BMT)
    return datetime(now_bmt.year, now_bmt.month, now_bmt.day, tzinfo=BMT)


def beat_start(midnight: datetime, beat: int) -> datetime:
    # 直接相乘，避免逐个累加带来的误差
    return midnight + timedelta(seconds=beat * SECONDS_PER_BEAT)


@dataclass(frozen=True)
class BeatRange:
    """一个 beat 对应的本地时间区间，end 为开区间（下一个 beat 的开始）"""

    beat: int
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def describe(self) -> str:
        """@<beat> corresponds to the time range <start> - <end> <ZONE> (on <date>)"""
        return (
            f"@{self.beat} corresponds to the time range "
            f"{format_clock(self.start, milliseconds=True)} - "
            f"{format_clock(self.end, milliseconds=True)} "
            f"{zone_abbreviation(self.start)} (on {format_date(self.start)})"
        )


def beat_range(beat: int, zone: tzinfo | None = None, now: datetime | None = None) -> BeatRange:
    """
    计算 beat 在今天（按 BMT 日期）对应的本地时间区间。

    Args:
        beat: 0-999
        zone: 本地时区（None 表示系统时区）
        now: 当前时刻，默认读取系统时钟
    """
    midnight = bmt_midnight(now)
    logger.debug("BMT 午夜: %s", midnight.isoformat())
    return BeatRange(
        beat=beat,
        start=to_local(beat_start(midnight, beat), zone),
        end=to_local(beat_start(midnight, beat + 1), zone),
    )


def convert_beat(text: str, zone: tzinfo | None = None, now: datetime | None = None) -> str:
    """解析 beat 参数并描述对应的本地时间区间"""
    return beat_range(parse_beat(text), zone, now).describe()
