"""
dotprov CLI 主入口

不带子命令运行时执行完整安装流程；example / validate 用于生成和检查配置文件。
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..config import ProvisionConfig, save_config, ConfigError
from ..errors import ExitCode
from .commands import install, validate


app = typer.Typer(
    name="dotprov",
    help="在 openSUSE Leap 上为 Unity 开发安装 .NET 8 SDK",
    no_args_is_help=False,
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """显示版本信息"""
    if value:
        console.print(f"dotprov v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML 配置文件（默认使用内置配置）",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="输出详细调试日志 (DEBUG 级别)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="日志输出文件",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息",
    ),
) -> None:
    """安装 .NET 8 SDK（依赖、Microsoft 软件源、SDK 本身），并验证安装结果。"""
    if ctx.invoked_subcommand is not None:
        return
    install.install_command(config=config, verbose=verbose, log_file=log_file)


app.command("validate", help="验证配置文件")(validate.validate_command)


@app.command("example")
def example_command(
    output: str = typer.Option(
        "dotprov.yaml",
        "--output", "-o",
        help="输出配置文件路径",
    )
) -> None:
    """生成默认配置文件"""
    try:
        save_config(ProvisionConfig(), output)
    except ConfigError as e:
        console.print(f"[red]生成配置失败: {e}[/red]")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    console.print(f"✓ 默认配置文件已生成: [green]{output}[/green]")
    console.print("根据需要修改后运行:")
    console.print(f"  [cyan]dotprov -c {output}[/cyan]")


if __name__ == "__main__":
    app()
