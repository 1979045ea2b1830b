"""
错误与退出码

安装流程中所有致命错误都继承 ProvisionError，并携带进程退出码。
用户取消（ProvisionCancelled）不是错误，以退出码 0 结束。
"""

from enum import IntEnum
from pathlib import Path
from typing import Optional, Sequence


class ExitCode(IntEnum):
    """进程退出码"""
    SUCCESS = 0
    CONFIG_ERROR = 2
    PRIVILEGED_USER = 10
    UNSUPPORTED_OS = 11
    DESCRIPTOR_MISSING = 12
    TOOL_MISSING = 13
    COMMAND_NOT_FOUND = 127
    INTERRUPTED = 130


class ProvisionError(Exception):
    """安装流程致命错误基类"""

    exit_code: int = 1

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class PrivilegeError(ProvisionError):
    """以超级用户身份运行"""
    exit_code = ExitCode.PRIVILEGED_USER


class UnsupportedPlatformError(ProvisionError):
    """主机系统不受支持"""
    exit_code = ExitCode.UNSUPPORTED_OS


class DescriptorMissingError(ProvisionError):
    """下载后软件源描述文件不存在"""
    exit_code = ExitCode.DESCRIPTOR_MISSING

    def __init__(self, message: str, scratch_dir: Optional[Path] = None):
        super().__init__(message)
        self.scratch_dir = scratch_dir


class ToolMissingError(ProvisionError):
    """安装后目标命令仍不可解析"""
    exit_code = ExitCode.TOOL_MISSING


class CommandError(ProvisionError):
    """外部命令（包管理器、rpm、wget 等）执行失败

    退出码即外部命令自身的退出状态。scratch_dir 非空时表示
    失败发生在临时目录清理之前，该目录被遗留。
    """

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "",
                 scratch_dir: Optional[Path] = None):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        self.scratch_dir = scratch_dir
        message = f"命令执行失败 ({returncode}): {' '.join(self.argv)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message, exit_code=returncode if returncode > 0 else 1)


class ProvisionCancelled(Exception):
    """操作员拒绝继续安装（正常退出）"""
    pass
