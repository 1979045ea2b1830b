"""
路径工具

提供路径处理和临时目录相关的工具函数。
"""

import shutil
import tempfile
from pathlib import Path
from typing import Union


def get_temp_dir(prefix: str = "dotprov_") -> Path:
    """创建唯一命名的临时目录

    Args:
        prefix: 目录前缀

    Returns:
        Path: 临时目录路径（调用方负责删除）
    """
    return Path(tempfile.mkdtemp(prefix=prefix))


def remove_tree(path: Union[str, Path]) -> None:
    """删除目录树，目录不存在时忽略"""
    shutil.rmtree(path, ignore_errors=True)
