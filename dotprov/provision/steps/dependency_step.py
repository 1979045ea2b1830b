"""
依赖安装步骤模块

确保所需的系统库已安装。已安装的包不会重复安装。
"""

from ...utils.logging import info, success, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep


class DependencyStep(ProvisionStep):
    """依赖安装步骤"""

    def __init__(self):
        super().__init__("dependencies", "安装依赖库")

    def get_progress_range(self) -> tuple[int, int]:
        return (10, 25)

    def execute(self, context: ProvisionContext) -> None:
        info("安装依赖...", stage=LogStage.DEPS)
        pm = context.caps.package_manager

        for name in context.config.dependencies:
            if pm.is_installed(name):
                success(f"{name} 已安装", stage=LogStage.DEPS)
                continue

            info(f"正在安装 {name}...", stage=LogStage.DEPS)
            pm.install(name)
            context.installed_deps.append(name)
            success(f"{name} 安装完成", stage=LogStage.DEPS)
