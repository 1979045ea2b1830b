"""
安装管道模块

按固定顺序执行安装步骤，遇到第一个致命错误立即终止。
"""

import time
from typing import List, Optional

from ..config.schema import ProvisionConfig
from ..errors import ProvisionCancelled, ProvisionError
from ..utils.logging import success, error, debug, LogStage
from .provision_context import Capabilities, ProgressCallback, ProvisionContext, StepStatus
from .steps.provision_step import ProvisionStep
from .steps.preflight_step import PreflightStep
from .steps.dependency_step import DependencyStep
from .steps.repository_step import RepositoryStep
from .steps.package_step import PackageStep
from .steps.verify_step import VerifyStep
from .steps.completion_step import CompletionStep


class ProvisionPipeline:
    """安装管道，负责协调安装步骤的执行"""

    def __init__(self):
        self._steps: List[ProvisionStep] = []
        self._init_default_steps()

    def _init_default_steps(self):
        self._steps = [
            PreflightStep(),
            DependencyStep(),
            RepositoryStep(),
            PackageStep(),
            VerifyStep(),
            CompletionStep(),
        ]

    def add_step(self, step: ProvisionStep, position: Optional[int] = None):
        """添加安装步骤"""
        if position is None:
            self._steps.append(step)
        else:
            self._steps.insert(position, step)

    def remove_step(self, step_name: str):
        """移除安装步骤"""
        self._steps = [step for step in self._steps if step.name != step_name]

    def get_steps(self) -> List[ProvisionStep]:
        """获取所有安装步骤"""
        return self._steps.copy()

    def execute(
        self,
        config: ProvisionConfig,
        capabilities: Capabilities,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> ProvisionContext:
        """执行安装管道

        Returns:
            ProvisionContext: 安装上下文，包含每个步骤的状态

        Raises:
            ProvisionError: 某个步骤失败，后续步骤保持 pending
            ProvisionCancelled: 操作员拒绝继续
        """
        context = ProvisionContext(
            config=config,
            capabilities=capabilities,
            progress_callback=progress_callback,
        )
        return self.run(context)

    def run(self, context: ProvisionContext) -> ProvisionContext:
        """在给定上下文上依次执行各步骤"""
        for step in self._steps:
            context.step_status[step.name] = StepStatus.PENDING

        context.stats['start_time'] = time.time()
        debug(f"安装步骤: {', '.join(s.name for s in self._steps)}", stage=LogStage.INIT)

        for step in self._steps:
            start, end = step.get_progress_range()
            context.report_progress(step.description, start)

            try:
                step.execute(context)
            except ProvisionCancelled:
                context.step_status[step.name] = StepStatus.CANCELLED
                context.stats['end_time'] = time.time()
                raise
            except ProvisionError as e:
                context.step_status[step.name] = StepStatus.ABORTED
                context.stats['end_time'] = time.time()
                error(f"步骤失败 [{step.name}]: {e}", stage=LogStage.INIT)
                raise

            context.step_status[step.name] = StepStatus.SUCCEEDED
            context.report_progress(step.description, end)

        context.stats['end_time'] = time.time()
        elapsed = context.stats['end_time'] - context.stats['start_time']
        success(f"全部步骤完成，用时 {elapsed:.1f} 秒", stage=LogStage.DONE)
        return context

    def validate_pipeline(self) -> List[str]:
        """验证安装管道的完整性

        Returns:
            List[str]: 验证错误列表，空列表表示验证通过
        """
        errors = []

        if not self._steps:
            errors.append("安装管道中没有步骤")
            return errors

        names = [step.name for step in self._steps]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            errors.append(f"步骤名称重复: {', '.join(duplicates)}")

        prev_end = 0
        for step in self._steps:
            start, end = step.get_progress_range()
            if start != prev_end:
                errors.append(f"步骤 '{step.name}' 的进度范围不连续: 期望起始 {prev_end}%, 实际 {start}%")
            if start >= end:
                errors.append(f"步骤 '{step.name}' 的进度范围无效: {start}% - {end}%")
            prev_end = end

        if prev_end != 100:
            errors.append(f"安装管道的总进度范围不是100%: {prev_end}%")

        return errors
