"""
日志配置和初始化

功能:
- 配置根日志记录器
- 设置控制台处理器（stderr）
"""

import logging
import sys
from typing import TextIO

from .handlers import ColoredConsoleHandler


def setup_logging(
    log_level: str = "WARNING",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_to_console: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    配置日志系统

    Args:
        log_level: 日志级别
        log_format: 日志格式
        log_to_console: 是否输出到控制台
        stream: 控制台输出流（默认 sys.stderr）

    Returns:
        根日志记录器
    """
    # 获取根日志记录器
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # 清除现有处理器
    root_logger.handlers.clear()

    # 控制台处理器
    if log_to_console:
        console_handler = ColoredConsoleHandler(stream or sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(log_format))
        root_logger.addHandler(console_handler)
    else:
        # 不输出时也要挂一个空处理器，避免 logging 回退到 lastResort
        root_logger.addHandler(logging.NullHandler())

    return root_logger

