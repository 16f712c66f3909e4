"""
Unix epoch 时间

- current_epoch: 当前时刻的 epoch 秒数
- parse_epoch: 严格解析十进制有符号 64 位整数
- epoch_to_local: epoch 秒数转换为本地时间
"""

import logging
import re
from datetime import datetime, timedelta, tzinfo

from ..errors import ErrorType, UtimeError
from .clock import UNIX_EPOCH, format_timestamp, to_local, utc_now

logger = logging.getLogger(__name__)

# 可选符号 + ASCII 数字，不允许空白和下划线（int() 都会接受）；前导零单独分组
_EPOCH_RE = re.compile(r"([+-]?)0*([0-9]+)")

# 有符号 64 位整数最多 19 位
INT64_DIGITS = 19

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def current_epoch(now: datetime | None = None) -> int:
    """当前时刻距 Unix epoch 的整秒数（与时区无关）"""
    now = now or utc_now()
    return int((now - UNIX_EPOCH) // timedelta(seconds=1))


def parse_epoch(text: str) -> int:
    """
    解析 epoch 参数。

    Raises:
        UtimeError: 不是合法的十进制整数，或超出有符号 64 位范围
    """
    match = _EPOCH_RE.fullmatch(text)
    # 先去掉前导零再比较位数，避免超长字符串触发 int() 的位数上限
    if match and len(match.group(2)) <= INT64_DIGITS:
        value = int(match.group(1) + match.group(2))
        if INT64_MIN <= value <= INT64_MAX:
            return value
    raise UtimeError(
        ErrorType.VALIDATION,
        f"Invalid epoch time '{text}'. Please provide an integer.",
        argument=text,
    )


def epoch_to_local(epoch: int, zone: tzinfo | None = None) -> datetime:
    """
    把 epoch 秒数（UTC 参考）转换为本地时区的时刻。

    超出公元 1-9999 年时抛出 OverflowError（平台 localtime 失败时可能是 OSError）。
    """
    return to_local(UNIX_EPOCH + timedelta(seconds=epoch), zone)


def convert_epoch(text: str, zone: tzinfo | None = None) -> str:
    """解析 epoch 参数并格式化为 YYYY-MM-DD HH:MM:SS <ZONE>"""
    epoch = parse_epoch(text)
    try:
        local = epoch_to_local(epoch, zone)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("epoch %d 超出可表示范围: %s", epoch, e)
        raise UtimeError(
            ErrorType.VALIDATION,
            f"Epoch time '{text}' is outside the supported date range.",
            argument=text,
        ) from e
    return format_timestamp(local)
