"""
时间转换核心

所有函数都是无状态的：输入当前时刻、本地时区和参数字符串，输出格式化文本。
"""

from .beat import BeatRange, beat_range, convert_beat, current_beat, parse_beat
from .clock import BMT, resolve_local_zone, utc_now
from .epoch import convert_epoch, current_epoch, parse_epoch
from .summary import TimeSummary, current_summary

__all__ = [
    "BMT",
    "BeatRange",
    "TimeSummary",
    "beat_range",
    "convert_beat",
    "convert_epoch",
    "current_beat",
    "current_epoch",
    "current_summary",
    "parse_beat",
    "parse_epoch",
    "resolve_local_zone",
    "utc_now",
]
