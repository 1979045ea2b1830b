"""
预检步骤模块

检查运行身份、主机系统，以及目标工具是否已经安装。
"""

from ...errors import PrivilegeError, ProvisionCancelled, UnsupportedPlatformError
from ...system import read_host_info
from ...utils.logging import info, success, warning, error, print, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep


class PreflightStep(ProvisionStep):
    """预检步骤"""

    def __init__(self):
        super().__init__("preflight", "预检运行环境")

    def get_progress_range(self) -> tuple[int, int]:
        return (0, 10)

    def execute(self, context: ProvisionContext) -> None:
        self._check_privilege(context)
        self._check_platform(context)
        self._check_existing(context)

        print()
        info(f"开始为 Unity 开发安装 {context.config.target.label}...", stage=LogStage.PREFLIGHT)
        print()

    def _check_privilege(self, context: ProvisionContext) -> None:
        if context.caps.is_superuser():
            error("请不要以 root 身份运行本程序，请使用普通用户运行。", stage=LogStage.PREFLIGHT)
            error("需要特权的操作会在对应步骤中通过 sudo 单独请求密码。", stage=LogStage.PREFLIGHT)
            raise PrivilegeError("不允许以超级用户身份运行")

    def _check_platform(self, context: ProvisionContext) -> None:
        platform = context.config.platform
        try:
            host = read_host_info(platform.os_release)
        except FileNotFoundError:
            error(f"无法识别操作系统。本程序仅支持 {platform.display_name}。", stage=LogStage.PREFLIGHT)
            raise UnsupportedPlatformError(f"系统标识文件不存在: {platform.os_release}")
        except (OSError, UnicodeDecodeError) as e:
            error(f"无法读取系统标识文件。本程序仅支持 {platform.display_name}。", stage=LogStage.PREFLIGHT)
            raise UnsupportedPlatformError(f"系统标识文件无法读取: {platform.os_release} ({e})") from e

        if not host.matches(platform.distro_token):
            error(f"本程序仅支持 {platform.display_name}，检测到: {host.name or '未知'}", stage=LogStage.PREFLIGHT)
            raise UnsupportedPlatformError(f"不受支持的系统: {host.name or '未知'}")

        context.host = host
        success(f"检测到系统: {host.describe()}", stage=LogStage.PREFLIGHT)

    def _check_existing(self, context: ProvisionContext) -> None:
        tool = context.caps.tool
        if tool.which() is None:
            return

        version = tool.version() or "unknown"
        context.existing_version = version
        warning(f"{context.config.target.command} 已安装 (版本: {version})", stage=LogStage.PREFLIGHT)

        if not context.caps.confirm("是否仍要继续？这可能会安装额外的版本。"):
            info("用户取消了安装。", stage=LogStage.PREFLIGHT)
            raise ProvisionCancelled()

        info("继续安装...", stage=LogStage.PREFLIGHT)
