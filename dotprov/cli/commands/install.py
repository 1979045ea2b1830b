"""
Install 命令实现

执行完整的安装流程，并把结果转换为进程退出码。
"""

import traceback
from pathlib import Path
from typing import Optional

import typer

from ...config import load_config, ConfigError, ConfigValidationError
from ...errors import ExitCode
from ...provision.provisioner import Provisioner
from ...utils.logging import configure_logging, error, warning, print, OutputLevel

RULE = "=" * 66


def print_banner(major_version: int, platform_name: str) -> None:
    print(RULE)
    print(f"Unity .NET {major_version} 安装程序 ({platform_name})", markup=False)
    print(RULE)
    print()


def install_command(
    config: Optional[Path] = None,
    verbose: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """执行安装流程

    不提供任何参数时使用内置默认配置，不读取配置文件和环境变量。

    Raises:
        typer.Exit: 总是以退出码结束
    """
    configure_logging(OutputLevel.DEBUG if verbose else OutputLevel.INFO, log_file)

    try:
        config_obj = load_config(config)
    except ConfigValidationError as e:
        error("配置验证失败:")
        print(e.format_errors(), markup=False)
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    except ConfigError as e:
        error(f"配置错误: {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    print_banner(config_obj.target.major_version, config_obj.platform.display_name)

    provisioner = Provisioner(config_obj)
    try:
        result = provisioner.run()
    except KeyboardInterrupt:
        print()
        error("安装被用户中断")
        raise typer.Exit(ExitCode.INTERRUPTED)
    except Exception:
        error("安装过程中发生意外错误")
        if verbose:
            print(traceback.format_exc(), markup=False)
        raise

    if result.cancelled:
        raise typer.Exit(ExitCode.SUCCESS)

    if not result.success:
        if log_file:
            warning(f"请检查日志文件 {log_file} 获取详细信息。")
        raise typer.Exit(result.exit_code)

    if result.warnings:
        warning(f"安装完成，有 {len(result.warnings)} 条警告，详见上方输出")
    raise typer.Exit(ExitCode.SUCCESS)
