"""
utime - 时间显示与转换工具

支持 UTC/本地时间、Unix epoch 和 Swatch Internet Time（beat 时间）。
"""


def _resolve_version() -> str:
    """
    解析版本号。

    优先读取源码根目录的 pyproject.toml（editable 安装时始终最新），
    否则回退到已安装包的元数据。
    """
    from pathlib import Path

    version = "0.0.0-dev"

    project_root = Path(__file__).parent.parent.parent
    pyproject_path = project_root / "pyproject.toml"
    if pyproject_path.exists():
        try:
            import tomllib
            with open(pyproject_path, "rb") as f:
                project = tomllib.load(f)["project"]
            if project.get("name") == "utime":
                return project["version"]
        except (OSError, KeyError, ValueError):
            pass

    try:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as meta_version
        version = meta_version("utime")
    except PackageNotFoundError:
        pass

    return version


__version__ = _resolve_version()

__author__ = "utime"
