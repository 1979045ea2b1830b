"""
目标工具探测

ToolProbe 封装对已安装工具自身 CLI 的查询。安装状态不做缓存，
每次都重新调用工具获取。
"""

from __future__ import annotations

import shutil
from typing import List, Optional, Protocol

from .command import run_cmd


class ToolProbe(Protocol):
    """目标工具查询能力"""

    def which(self) -> Optional[str]:
        ...

    def version(self) -> Optional[str]:
        ...

    def list_sdks(self) -> List[str]:
        ...

    def list_runtimes(self) -> List[str]:
        ...


def leading_version_component(version: str) -> Optional[int]:
    """返回版本号的首个数字段，例如 "8.0.404" -> 8"""
    head = version.strip().split(".", 1)[0]
    return int(head) if head.isdigit() else None


class DotnetProbe:
    """dotnet CLI 探测实现"""

    def __init__(self, command: str = "dotnet"):
        self.command = command

    def which(self) -> Optional[str]:
        return shutil.which(self.command)

    def version(self) -> Optional[str]:
        """读取版本号，查询失败时返回 None"""
        result = run_cmd([self.command, "--version"], check=False)
        if not result.ok:
            return None
        return result.stdout.strip() or None

    def list_sdks(self) -> List[str]:
        return self._lines("--list-sdks")

    def list_runtimes(self) -> List[str]:
        return self._lines("--list-runtimes")

    def _lines(self, flag: str) -> List[str]:
        result = run_cmd([self.command, flag])
        return [line for line in result.stdout.splitlines() if line.strip()]
