"""
utime CLI 入口

使用 Typer 解析参数，Rich 向 stderr 输出用法说明和错误信息。
程序结果只写 stdout。

与常见 CLI 不同的约定:
- 支持单横线长选项（-epoch、-beat、-help）
- 横线后紧跟数字的参数（如 -86400）和未知的 "--xxx" 参数都按位置参数处理，负数 epoch 可以直接传入
- 所有错误（包括 -h）都以退出码 1 结束
"""

import logging
import re
from datetime import datetime, tzinfo
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typer.core import TyperCommand

from . import __version__
from .config import settings
from .core import (
    convert_beat,
    convert_epoch,
    current_beat,
    current_epoch,
    current_summary,
    resolve_local_zone,
)
from .dispatch import Action, ActionKind, parse_action
from .errors import UtimeError
from .logging import setup_logging

logger = logging.getLogger(__name__)

PROG_NAME = "utime"
SYNOPSIS = "[-epoch] [-beat] [@<beat_time> | <epoch_time>]"

USAGE_OPTIONS = [
    ("-epoch", "Print the current Unix epoch time."),
    ("-beat", "Print the current Swatch Internet Time (@beats)."),
    ("<epoch_time>", "Convert the given Unix epoch time (integer seconds) to local time."),
    (
        "@<beat_time>",
        "Convert the given Swatch Internet Time (0-999) to a local time range for the current day.",
    ),
    ("-version", "Show the version and exit."),
    ("-h, -help", "Show this help message."),
]

# typer 导出的 BadParameter 来自它实际使用的 click（新版本内置了一份），父类就是 UsageError
UsageError = typer.BadParameter.__base__

# 横线后紧跟数字的参数（-86400、-5h）一律是位置参数，不拆成短选项
_DASH_NUMBER_RE = re.compile(r"-[0-9]")

# Typer 应用
app = typer.Typer(
    name=PROG_NAME,
    help="Display current UTC/local time, Unix epoch time and Swatch Internet Time.",
    add_completion=False,
)

# Rich 控制台（stderr）
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_usage(prog_name: str = PROG_NAME) -> None:
    """打印用法说明到 stderr"""
    err_console.print(f"Usage: {escape(prog_name)} {escape(SYNOPSIS)}")
    err_console.print()
    err_console.print("Displays current UTC and local time information by default.")
    err_console.print()
    err_console.print("Options:")

    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column()
    for option, description in USAGE_OPTIONS:
        table.add_row(f"  {escape(option)}", escape(description))

    err_console.print(table)


def fail(
    message: str,
    *,
    prog_name: str = PROG_NAME,
    show_usage: bool = True,
    exit_code: int = 1,
) -> NoReturn:
    """输出错误（和用法说明）并退出"""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    if show_usage:
        print_usage(prog_name)
    raise typer.Exit(exit_code)


class UtimeCommand(TyperCommand):
    """
    解析阶段的错误（如 -epoch=1）也按 utime 的格式报告：
    错误信息 + 用法说明，退出码 1（click 默认是 2）。
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        numbers = [arg for arg in args if _DASH_NUMBER_RE.match(arg)]
        options = [arg for arg in args if not _DASH_NUMBER_RE.match(arg)]
        try:
            remaining = super().parse_args(ctx, options)
        except UsageError as e:
            fail(e.format_message(), prog_name=ctx.info_name or PROG_NAME)

        if numbers:
            ctx.params["args"] = tuple(ctx.params.get("args") or ()) + tuple(numbers)
        return remaining


def run_action(action: Action, zone: tzinfo | None = None, now: datetime | None = None) -> str:
    """
    执行动作，返回要写到 stdout 的文本。

    Args:
        action: parse_action 的结果
        zone: 本地时区；为 None 时读取 UTIME_TIMEZONE，仍为空则使用系统时区
        now: 当前时刻，默认读取系统时钟
    """
    if action.kind is ActionKind.EPOCH:
        return str(current_epoch(now))
    if action.kind is ActionKind.BEAT:
        return current_beat(now)

    # 只有需要本地时间的动作才解析时区
    if zone is None:
        zone = resolve_local_zone(settings.timezone_override)

    if action.kind is ActionKind.CONVERT_EPOCH:
        return convert_epoch(action.argument, zone)
    if action.kind is ActionKind.CONVERT_BEAT:
        return convert_beat(action.argument, zone, now)
    return current_summary(zone, now).render()


@app.command(
    cls=UtimeCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
def utime(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None, metavar="[@<beat_time> | <epoch_time>]", show_default=False
    ),
    epoch: bool = typer.Option(False, "-epoch", "--epoch", help="Print the current Unix epoch time."),
    beat: bool = typer.Option(
        False, "-beat", "--beat", help="Print the current Swatch Internet Time (@beats)."
    ),
    version: bool = typer.Option(False, "-version", "--version", help="Show the version and exit."),
    help_: bool = typer.Option(False, "-h", "-help", "--help", help="Show this help message."),
):
    """
    Display current UTC and local time information by default.
    """
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_to_console=settings.log_to_console,
    )
    prog_name = ctx.info_name or PROG_NAME

    if help_:
        print_usage(prog_name)
        raise typer.Exit(1)

    if version:
        typer.echo(f"utime v{__version__}")
        raise typer.Exit(0)

    try:
        action = parse_action(epoch, beat, args or [])
        output = run_action(action)
    except UtimeError as e:
        logger.debug("命令失败: %r", e)
        fail(e.message, prog_name=prog_name, show_usage=e.shows_usage, exit_code=e.exit_code)

    typer.echo(output)


if __name__ == "__main__":
    app()
