"""
远程文件下载

通过 wget 把远程文件下载到指定目录。下载成功与否由调用方检查目标文件是否存在来判断。
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol
from urllib.parse import urlparse

from .command import run_cmd


class Fetcher(Protocol):
    """按 URL 下载文件的能力"""

    def fetch(self, url: str, dest_dir: Path) -> Path:
        ...


def url_basename(url: str) -> str:
    return PurePosixPath(urlparse(url).path).name


class WgetFetcher:
    """wget 下载实现

    返回预期的文件路径；文件是否真的存在不在这里判断。
    """

    def fetch(self, url: str, dest_dir: Path) -> Path:
        run_cmd(["wget", "-q", url], cwd=dest_dir)
        return dest_dir / url_basename(url)
