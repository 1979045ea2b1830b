"""
SDK 安装步骤模块

安装固定主版本的 SDK 软件包（运行时和 ASP.NET Core 运行时作为依赖一并安装）。
"""

from ...utils.logging import info, success, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep


class PackageStep(ProvisionStep):
    """SDK 安装步骤"""

    def __init__(self):
        super().__init__("package", "安装 SDK 软件包")

    def get_progress_range(self) -> tuple[int, int]:
        return (50, 85)

    def execute(self, context: ProvisionContext) -> None:
        target = context.config.target
        info(f"正在安装 {target.label} ({target.package})...", stage=LogStage.PACKAGE)
        context.caps.package_manager.install(target.package)
        success(f"{target.label} 安装完成!", stage=LogStage.PACKAGE)
