"""
参数分发

把命令行 flag 和位置参数解析成唯一的 Action，再由 main 模块执行。
校验按顺序进行，第一个命中的规则生效。
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import ErrorType, UtimeError

logger = logging.getLogger(__name__)

COMBINE_ERROR = "Cannot combine -epoch or -beat flags with each other or with other arguments."
TOO_MANY_ERROR = "Too many arguments."


class ActionKind(Enum):
    """要执行的动作"""

    SUMMARY = "summary"  # 无参数：打印当前时间概览
    EPOCH = "epoch"  # -epoch：打印当前 epoch
    BEAT = "beat"  # -beat：打印当前 beat
    CONVERT_EPOCH = "convert_epoch"  # <epoch_time>
    CONVERT_BEAT = "convert_beat"  # @<beat_time>


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    argument: str | None = None


def parse_action(epoch: bool, beat: bool, args: list[str] | tuple[str, ...] = ()) -> Action:
    """
    根据 flag 和位置参数选择动作。

    Raises:
        UtimeError: 参数组合不合法（ErrorType.ARGUMENTS）
    """
    args = list(args)

    if (epoch and beat) or ((epoch or beat) and args):
        raise UtimeError(ErrorType.ARGUMENTS, COMBINE_ERROR)
    if len(args) > 1:
        raise UtimeError(ErrorType.ARGUMENTS, TOO_MANY_ERROR)

    if epoch:
        action = Action(ActionKind.EPOCH)
    elif beat:
        action = Action(ActionKind.BEAT)
    elif args:
        arg = args[0]
        if arg.startswith("@"):
            action = Action(ActionKind.CONVERT_BEAT, arg)
        else:
            action = Action(ActionKind.CONVERT_EPOCH, arg)
    else:
        action = Action(ActionKind.SUMMARY)

    logger.debug("选择动作: %s %s", action.kind.value, action.argument or "")
    return action
