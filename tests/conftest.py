"""公共 fixture: 固定时刻、时区、配置隔离"""

import logging
import time
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from utime.config import settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """每个测试使用默认配置，不受运行环境的 UTIME_* 变量影响"""
    monkeypatch.setattr(settings, "timezone", "")
    monkeypatch.setattr(settings, "log_level", "WARNING")
    monkeypatch.setattr(settings, "log_to_console", True)
    return settings


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI 会重置根日志记录器，测试结束后恢复"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def new_york():
    return ZoneInfo("America/New_York")


@pytest.fixture
def summer_noon():
    """2024-07-01 12:00:00 UTC（北半球夏令时期间）"""
    return datetime(2024, 7, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def winter_noon():
    """2024-01-15 12:00:00 UTC（北半球标准时间期间）"""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def system_tz(monkeypatch):
    """切换系统时区（TZ 环境变量 + tzset），测试结束后恢复"""

    def _set(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
