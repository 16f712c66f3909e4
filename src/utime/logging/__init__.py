"""
utime 日志系统

功能:
- 配置根日志记录器
- 控制台彩色输出（只写 stderr）
"""

from .config import setup_logging
from .handlers import ColoredConsoleHandler

__all__ = [
    "setup_logging",
    "ColoredConsoleHandler",
]
