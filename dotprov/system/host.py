"""
主机信息

读取 os-release 文件（shell 风格的 KEY=value），以及判断当前是否为超级用户。
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union


@dataclass(frozen=True)
class HostInfo:
    """主机系统描述（只读）"""
    name: str
    version_id: str = ""
    pretty_name: str = ""

    def matches(self, token: str) -> bool:
        return token in self.name

    def describe(self) -> str:
        return f"{self.name} {self.version_id}".strip()


def parse_os_release(text: str) -> Dict[str, str]:
    """解析 os-release 内容

    值可以带单引号或双引号；注释行和空行被忽略。
    """
    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, raw = line.partition("=")
        try:
            parts = shlex.split(raw)
        except ValueError:
            parts = [raw.strip("\"'")]
        values[key.strip()] = " ".join(parts)
    return values


def read_host_info(path: Union[str, Path] = "/etc/os-release") -> HostInfo:
    """读取主机描述

    Raises:
        FileNotFoundError: 标识文件不存在
        OSError: 标识文件无法读取（权限不足、是目录等）
        UnicodeDecodeError: 标识文件不是 UTF-8 文本
    """
    values = parse_os_release(Path(path).read_text(encoding="utf-8"))
    return HostInfo(
        name=values.get("NAME", ""),
        version_id=values.get("VERSION_ID", ""),
        pretty_name=values.get("PRETTY_NAME", ""),
    )


def is_superuser() -> bool:
    return os.geteuid() == 0
