"""
utime 配置模块

只读取 UTIME_ 前缀的环境变量，不读取任何配置文件。
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用配置"""

    # === 时区 ===
    # 为空时使用系统本地时区；否则使用指定的 IANA 时区（如 Europe/Zurich）
    timezone: str = Field(default="", description="覆盖系统本地时区的 IANA 时区名")

    # === 日志配置 ===
    # 日志只输出到 stderr，stdout 保留给程序输出
    log_level: str = Field(default="WARNING", description="日志级别")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="日志格式"
    )
    log_to_console: bool = Field(default=True, description="是否输出到控制台（stderr）")

    model_config = {
        "env_prefix": "UTIME_",
        "extra": "ignore",
        # 忽略空字符串环境变量（例如 UTIME_LOG_TO_CONSOLE=），避免 bool 解析失败
        "env_ignore_empty": True,
    }

    @property
    def timezone_override(self) -> str | None:
        """去掉空白后的时区覆盖值，未设置时返回 None"""
        name = self.timezone.strip()
        return name or None


# 全局配置实例
settings = Settings()
