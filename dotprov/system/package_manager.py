"""
包管理器与特权系统操作

PackageManager / SystemOps 是安装步骤依赖的能力接口，
Zypper / Sudo 实现通过 run_cmd 调用系统命令。测试中以内存假实现替换。
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence

from .command import run_cmd


class PackageManager(Protocol):
    """系统包管理器能力"""

    def is_installed(self, name: str) -> bool:
        ...

    def install(self, name: str) -> None:
        ...

    def refresh(self) -> None:
        ...


class SystemOps(Protocol):
    """需要提权的系统配置操作"""

    def import_key(self, url: str) -> None:
        ...

    def install_file(self, src: Path, dest: Path, owner: str) -> None:
        ...


class ZypperPackageManager:
    """基于 zypper 的包管理器实现"""

    def __init__(self, elevate: Sequence[str] = ("sudo",)):
        self.elevate: List[str] = list(elevate)

    def is_installed(self, name: str) -> bool:
        # zypper search -i 在没有匹配的已安装包时返回非零
        result = run_cmd(["zypper", "search", "-i", name], check=False)
        return result.ok

    def install(self, name: str) -> None:
        run_cmd([*self.elevate, "zypper", "install", "-y", name], capture=False)

    def refresh(self) -> None:
        run_cmd([*self.elevate, "zypper", "refresh"], capture=False)


class SudoSystemOps:
    """通过提权命令执行 rpm --import / mv / chown"""

    def __init__(self, elevate: Sequence[str] = ("sudo",)):
        self.elevate: List[str] = list(elevate)

    def import_key(self, url: str) -> None:
        run_cmd([*self.elevate, "rpm", "--import", url], capture=False)

    def install_file(self, src: Path, dest: Path, owner: str) -> None:
        run_cmd([*self.elevate, "mv", str(src), str(dest)], capture=False)
        run_cmd([*self.elevate, "chown", owner, str(dest)], capture=False)
