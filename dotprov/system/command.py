"""
外部命令执行

所有对包管理器、rpm、wget 和目标工具的调用都经过 run_cmd，
保证命令行被统一记录，失败统一转换为 CommandError。
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from ..errors import CommandError, ExitCode
from ..utils.logging import debug, LogStage


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    capture: bool = True,
    cwd: Optional[Union[str, Path]] = None,
) -> CmdResult:
    """执行外部命令

    Args:
        argv: 命令及参数
        check: 非零退出时是否抛出 CommandError
        capture: 是否捕获输出；为 False 时输出直接写到终端，
            包管理器自身的诊断信息原样呈现给操作员
        cwd: 工作目录

    Returns:
        CmdResult: 执行结果（未捕获时 stdout/stderr 为空串）

    Raises:
        CommandError: check 为真且命令失败，或可执行文件不存在
    """
    argv_list = [str(a) for a in argv]
    debug(format_argv(argv_list), stage=LogStage.CMD)

    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.PIPE if capture else None,
            cwd=str(cwd) if cwd is not None else None,
        )
    except FileNotFoundError as e:
        if not check:
            return CmdResult(argv=argv_list, returncode=ExitCode.COMMAND_NOT_FOUND, stdout="", stderr=str(e))
        raise CommandError(argv_list, ExitCode.COMMAND_NOT_FOUND, str(e)) from e

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        debug(f"STDOUT {stdout.strip()}", stage=LogStage.CMD)
    if stderr:
        debug(f"STDERR {stderr.strip()}", stage=LogStage.CMD)

    if check and p.returncode != 0:
        raise CommandError(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)
