"""
安装验证步骤模块

重新解析目标命令并读取版本、SDK 列表和运行时列表。
主版本不符只产生警告，不终止流程。
"""

from ...errors import ToolMissingError
from ...system import leading_version_component
from ...utils.logging import info, success, warning, error, print, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep


class VerifyStep(ProvisionStep):
    """安装验证步骤"""

    def __init__(self):
        super().__init__("verify", "验证安装结果")

    def get_progress_range(self) -> tuple[int, int]:
        return (85, 95)

    def execute(self, context: ProvisionContext) -> None:
        target = context.config.target
        tool = context.caps.tool

        info(f"正在验证 {target.label} 安装...", stage=LogStage.VERIFY)

        if tool.which() is None:
            error(f"未找到 {target.command} 命令，安装可能失败。", stage=LogStage.VERIFY)
            raise ToolMissingError(f"安装后仍无法在 PATH 中找到 {target.command}")

        version = tool.version() or "unknown"
        context.installed_version = version
        success(f"{target.command} 版本: {version}", stage=LogStage.VERIFY)

        context.sdks = tool.list_sdks()
        context.runtimes = tool.list_runtimes()

        print()
        info("已安装的 SDK:", stage=LogStage.VERIFY)
        for line in context.sdks:
            print(f"  {line}", markup=False, highlight=False)

        print()
        info("已安装的运行时:", stage=LogStage.VERIFY)
        for line in context.runtimes:
            print(f"  {line}", markup=False, highlight=False)

        if leading_version_component(version) == target.major_version:
            success(f"{target.label} 已成功安装，可以用于 Unity 开发!", stage=LogStage.VERIFY)
        else:
            message = f"期望主版本 {target.major_version}，实际版本 {version}"
            context.warnings.append(message)
            warning(message, stage=LogStage.VERIFY)
