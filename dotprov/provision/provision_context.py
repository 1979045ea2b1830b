"""
安装上下文模块

定义安装过程中各步骤共享的数据结构和可注入的系统能力。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..config.schema import ProvisionConfig
from ..system import (
    ConfirmFn,
    DotnetProbe,
    Fetcher,
    HostInfo,
    PackageManager,
    SudoSystemOps,
    SystemOps,
    ToolProbe,
    WgetFetcher,
    ZypperPackageManager,
    console_confirm,
    is_superuser,
)

# 进度回调类型: (步骤描述, 当前百分比, 总数, 消息)
ProgressCallback = Callable[[str, int, int, str], None]


class StepStatus(str, Enum):
    """步骤状态"""
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"
    CANCELLED = "cancelled"


@dataclass
class Capabilities:
    """安装步骤依赖的外部能力集合"""
    package_manager: PackageManager
    system_ops: SystemOps
    fetcher: Fetcher
    tool: ToolProbe
    confirm: ConfirmFn
    is_superuser: Callable[[], bool]

    @classmethod
    def for_host(cls, config: ProvisionConfig) -> 'Capabilities':
        """基于真实系统命令的默认实现"""
        elevate = config.privilege.elevate
        return cls(
            package_manager=ZypperPackageManager(elevate),
            system_ops=SudoSystemOps(elevate),
            fetcher=WgetFetcher(),
            tool=DotnetProbe(config.target.command),
            confirm=console_confirm,
            is_superuser=is_superuser,
        )


@dataclass
class ProvisionContext:
    """安装上下文，包含安装过程中的共享数据"""
    config: ProvisionConfig
    capabilities: Capabilities
    progress_callback: Optional[ProgressCallback] = None

    # 安装过程中收集的数据
    host: Optional[HostInfo] = None
    existing_version: Optional[str] = None
    installed_deps: List[str] = field(default_factory=list)
    installed_version: Optional[str] = None
    sdks: List[str] = field(default_factory=list)
    runtimes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    step_status: Dict[str, StepStatus] = field(default_factory=dict)
    stats: Dict[str, Any] = field(default_factory=lambda: {'start_time': 0.0, 'end_time': 0.0})

    @property
    def caps(self) -> Capabilities:
        return self.capabilities

    def report_progress(self, stage: str, percent: int, message: str = "") -> None:
        if self.progress_callback:
            self.progress_callback(stage, percent, 100, message)
