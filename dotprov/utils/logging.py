"""
日志工具 - 统一输出门面

提供带时间戳的统一输出接口，封装底层的 Rich Console。
所有步骤、命令执行和 CLI 都通过这里输出。
"""

import threading
from datetime import datetime
from pathlib import Path
from typing import Optional, Union, Any

from rich.console import Console


class OutputLevel:
    """输出级别常量"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogStage:
    """日志阶段标记"""
    INIT = "INIT"
    PREFLIGHT = "PREFLIGHT"
    DEPS = "DEPS"
    REPO = "REPO"
    PACKAGE = "PACKAGE"
    VERIFY = "VERIFY"
    DONE = "DONE"
    CMD = "CMD"


_LEVEL_ORDER = {
    OutputLevel.DEBUG: 0,
    OutputLevel.INFO: 1,
    OutputLevel.SUCCESS: 1,
    OutputLevel.WARNING: 2,
    OutputLevel.ERROR: 3,
}

_LEVEL_STYLES = {
    OutputLevel.DEBUG: "dim",
    OutputLevel.INFO: "blue",
    OutputLevel.SUCCESS: "green",
    OutputLevel.WARNING: "yellow",
    OutputLevel.ERROR: "red bold",
}


class OutputFacade:
    """输出门面

    统一封装所有输出操作。终端输出带颜色，日志文件输出带完整日期。
    错误信息写入 stderr。
    """

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self._lock = threading.RLock()
        self._console = console or Console(highlight=False, log_path=False)
        self._error_console = error_console or Console(stderr=True, highlight=False)
        self._file_handle = None  # type: Optional[Any]
        self._log_level = OutputLevel.INFO
        self._date_format = "%Y-%m-%d %H:%M:%S"
        self._time_format = "%H:%M:%S"

    def _get_timestamp(self, include_date: bool = False) -> str:
        now = datetime.now()
        return now.strftime(self._date_format if include_date else self._time_format)

    def _should_output(self, level: str) -> bool:
        current_level = _LEVEL_ORDER.get(self._log_level, 1)
        return _LEVEL_ORDER.get(level, 1) >= current_level

    def _format_message(self, message: str, level: str,
                        stage: Optional[str] = None, include_date: bool = False) -> str:
        """格式化纯文本消息（日志文件使用）"""
        timestamp = self._get_timestamp(include_date)
        if stage:
            return f"[{timestamp}] [{level}] [{stage}] {message}"
        return f"[{timestamp}] [{level}] {message}"

    def _write_to_file(self, message: str, level: str, stage: Optional[str] = None):
        if not self._file_handle:
            return
        self._file_handle.write(self._format_message(message, level, stage, include_date=True) + "\n")
        self._file_handle.flush()

    def _emit(self, message: str, level: str, stage: Optional[str] = None):
        if not self._should_output(level):
            return

        style = _LEVEL_STYLES.get(level, "default")
        timestamp = self._get_timestamp()
        # 消息本身可能含有方括号（命令行、版本列表），不做 markup 解析
        prefix = f"[dim]{timestamp}[/dim] [{style}]\\[{level}][/{style}]"
        if stage:
            prefix += f" [cyan]{stage}[/cyan]"

        with self._lock:
            target = self._error_console if level == OutputLevel.ERROR else self._console
            target.print(prefix, end=" ")
            target.print(message, markup=False)
            self._write_to_file(message, level, stage)

    def set_level(self, level: str):
        """设置输出级别"""
        with self._lock:
            if level in _LEVEL_ORDER:
                self._log_level = level

    def set_log_file(self, file_path: Union[str, Path]):
        """设置日志文件（追加写入）"""
        with self._lock:
            if self._file_handle:
                self._file_handle.close()
            log_path = Path(file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(log_path, 'a', encoding='utf-8')

    def debug(self, message: str, stage: Optional[str] = None):
        self._emit(message, OutputLevel.DEBUG, stage)

    def info(self, message: str, stage: Optional[str] = None):
        self._emit(message, OutputLevel.INFO, stage)

    def success(self, message: str, stage: Optional[str] = None):
        self._emit(message, OutputLevel.SUCCESS, stage)

    def warning(self, message: str, stage: Optional[str] = None):
        self._emit(message, OutputLevel.WARNING, stage)

    def error(self, message: str, stage: Optional[str] = None):
        self._emit(message, OutputLevel.ERROR, stage)

    def raw_print(self, *args, **kwargs):
        """原生 print 的包装，保持 Rich Console 兼容性"""
        with self._lock:
            self._console.print(*args, **kwargs)
            if self._file_handle and args:
                self._file_handle.write(" ".join(str(a) for a in args) + "\n")
                self._file_handle.flush()

    def close(self):
        """关闭输出门面"""
        with self._lock:
            if self._file_handle:
                self._file_handle.close()
                self._file_handle = None


# 全局输出门面实例
_output_facade: Optional[OutputFacade] = None


def get_output_facade() -> OutputFacade:
    """获取全局输出门面实例"""
    global _output_facade
    if _output_facade is None:
        _output_facade = OutputFacade()
    return _output_facade


def set_output_facade(facade: Optional[OutputFacade]) -> None:
    """替换全局输出门面（测试中注入录制用的 Console）"""
    global _output_facade
    if _output_facade is not None and _output_facade is not facade:
        _output_facade.close()
    _output_facade = facade


def debug(message: str, stage: Optional[str] = None):
    get_output_facade().debug(message, stage)


def info(message: str, stage: Optional[str] = None):
    get_output_facade().info(message, stage)


def success(message: str, stage: Optional[str] = None):
    get_output_facade().success(message, stage)


def warning(message: str, stage: Optional[str] = None):
    get_output_facade().warning(message, stage)


def error(message: str, stage: Optional[str] = None):
    get_output_facade().error(message, stage)


def print(*args, **kwargs):
    """统一的 print 函数替代"""
    get_output_facade().raw_print(*args, **kwargs)


def set_log_level(level: str):
    get_output_facade().set_level(level)


def set_log_file(file_path: Union[str, Path]):
    get_output_facade().set_log_file(file_path)


def close_logger():
    """关闭日志系统"""
    global _output_facade
    if _output_facade:
        _output_facade.close()
        _output_facade = None


def configure_logging(level: str = OutputLevel.INFO, log_file: Optional[Union[str, Path]] = None):
    """配置日志系统"""
    set_log_level(level)
    if log_file:
        set_log_file(log_file)


import atexit
atexit.register(close_logger)
