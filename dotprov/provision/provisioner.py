"""
安装器主类

负责整个安装流程的协调，把管道的执行结果转换为 ProvisionResult。
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config.schema import ProvisionConfig
from ..errors import ExitCode, ProvisionCancelled, ProvisionError
from .provision_context import Capabilities, ProgressCallback, ProvisionContext, StepStatus
from .provision_pipeline import ProvisionPipeline


@dataclass
class ProvisionResult:
    """安装结果"""
    success: bool
    exit_code: int = ExitCode.SUCCESS
    cancelled: bool = False
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    installed_version: Optional[str] = None
    step_status: Dict[str, StepStatus] = field(default_factory=dict)
    elapsed: float = 0.0


class Provisioner:
    """SDK 安装器

    使用管道模式协调安装步骤，提供统一的安装接口。
    """

    def __init__(self, config: Optional[ProvisionConfig] = None,
                 capabilities: Optional[Capabilities] = None):
        """初始化安装器

        Args:
            config: 安装配置，默认使用内置配置
            capabilities: 外部能力，默认使用真实系统命令
        """
        self.config = config or ProvisionConfig()
        self.capabilities = capabilities or Capabilities.for_host(self.config)
        self.pipeline = ProvisionPipeline()

    def run(self, progress_callback: Optional[ProgressCallback] = None) -> ProvisionResult:
        """执行安装

        致命错误和用户取消都转换为结果对象返回；KeyboardInterrupt 不在这里处理。
        """
        context = ProvisionContext(
            config=self.config,
            capabilities=self.capabilities,
            progress_callback=progress_callback,
        )

        try:
            self.pipeline.run(context)
        except ProvisionCancelled:
            return self._result(context, success=True, cancelled=True)
        except ProvisionError as e:
            return self._result(context, success=False, exit_code=int(e.exit_code), error=str(e))

        return self._result(context, success=True)

    def validate_pipeline(self) -> List[str]:
        return self.pipeline.validate_pipeline()

    @staticmethod
    def _result(context: ProvisionContext, success: bool, exit_code: int = ExitCode.SUCCESS,
                cancelled: bool = False, error: Optional[str] = None) -> ProvisionResult:
        end = context.stats.get('end_time') or time.time()
        return ProvisionResult(
            success=success,
            exit_code=exit_code,
            cancelled=cancelled,
            error=error,
            warnings=list(context.warnings),
            installed_version=context.installed_version,
            step_status=dict(context.step_status),
            elapsed=max(0.0, end - context.stats.get('start_time', end)),
        )
