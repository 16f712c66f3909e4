"""
utime 包入口点 - 支持 `python -m utime` 调用
"""

from utime.main import app

if __name__ == "__main__":
    app(prog_name="utime")
