"""系统能力模块

封装对包管理器、提权操作、下载、目标工具和终端交互的调用。
"""

from .command import CmdResult, run_cmd, format_argv
from .fetch import Fetcher, WgetFetcher, url_basename
from .host import HostInfo, is_superuser, parse_os_release, read_host_info
from .package_manager import PackageManager, SudoSystemOps, SystemOps, ZypperPackageManager
from .prompt import ConfirmFn, console_confirm, is_affirmative
from .tool import DotnetProbe, ToolProbe, leading_version_component

__all__ = [
    "CmdResult",
    "run_cmd",
    "format_argv",
    "Fetcher",
    "WgetFetcher",
    "url_basename",
    "HostInfo",
    "is_superuser",
    "parse_os_release",
    "read_host_info",
    "PackageManager",
    "SystemOps",
    "ZypperPackageManager",
    "SudoSystemOps",
    "ConfirmFn",
    "console_confirm",
    "is_affirmative",
    "DotnetProbe",
    "ToolProbe",
    "leading_version_component",
]
