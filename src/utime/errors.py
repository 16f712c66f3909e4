"""
结构化错误

提供 UtimeError 异常类和 ErrorType 枚举，
让 CLI 层根据错误类型决定：是否打印用法说明、使用哪个退出码。

Usage:
    from utime.errors import UtimeError, ErrorType

    if not _EPOCH_RE.fullmatch(text):
        raise UtimeError(
            ErrorType.VALIDATION,
            f"Invalid epoch time '{text}'. Please provide an integer.",
            argument=text,
        )
"""

from enum import Enum


class ErrorType(Enum):
    """错误类型"""

    ARGUMENTS = "arguments"  # 参数组合错误（冲突的 flag、多余的位置参数）
    VALIDATION = "validation"  # 参数值解析失败（非整数 epoch、越界 beat）
    CONFIG = "config"  # 环境配置错误（UTIME_TIMEZONE 无效等）


class UtimeError(Exception):
    """
    utime 的统一异常。

    核心模块只负责抛出，由 main 模块统一输出到 stderr 并退出。
    所有错误类型的退出码都是 1。
    """

    exit_code = 1

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        *,
        argument: str | None = None,
    ) -> None:
        self.error_type = error_type
        self.message = message
        self.argument = argument
        super().__init__(message)

    @property
    def shows_usage(self) -> bool:
        """参数类错误需要附带用法说明，配置错误不需要"""
        return self.error_type in (ErrorType.ARGUMENTS, ErrorType.VALIDATION)

    def __repr__(self) -> str:
        return f"UtimeError({self.error_type.value}, {self.message!r})"
