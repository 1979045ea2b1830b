"""
软件源配置步骤模块

导入 GPG 信任密钥，下载软件源描述文件并安装到包管理器的配置目录，
最后刷新软件源索引。

临时目录只在两条路径上被删除：描述文件下载后缺失，以及描述文件安装成功。
下载命令或 mv/chown 本身失败时流程直接终止，临时目录被遗留，
其路径记录在 CommandError.scratch_dir 中并输出警告。
"""

from ...errors import CommandError, DescriptorMissingError
from ...utils import get_temp_dir, remove_tree
from ...utils.logging import info, success, warning, error, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep


class RepositoryStep(ProvisionStep):
    """软件源配置步骤"""

    def __init__(self):
        super().__init__("repository", "添加 Microsoft 软件源")

    def get_progress_range(self) -> tuple[int, int]:
        return (25, 50)

    def execute(self, context: ProvisionContext) -> None:
        repo = context.config.repository
        caps = context.caps

        info("添加 Microsoft 软件源...", stage=LogStage.REPO)

        info("导入 Microsoft GPG 密钥...", stage=LogStage.REPO)
        caps.system_ops.import_key(repo.key_url)

        info("下载软件源配置...", stage=LogStage.REPO)
        scratch_dir = get_temp_dir()
        try:
            descriptor = caps.fetcher.fetch(repo.descriptor_url, scratch_dir)
        except CommandError as e:
            self._leave_scratch(e, scratch_dir)
            raise

        if not descriptor.is_file():
            error("下载软件源配置失败", stage=LogStage.REPO)
            remove_tree(scratch_dir)
            raise DescriptorMissingError(f"下载后未找到描述文件: {descriptor.name}", scratch_dir=scratch_dir)

        info("安装软件源配置...", stage=LogStage.REPO)
        try:
            caps.system_ops.install_file(descriptor, repo.descriptor_path, repo.owner)
        except CommandError as e:
            self._leave_scratch(e, scratch_dir)
            raise

        remove_tree(scratch_dir)
        success(f"软件源配置已写入 {repo.descriptor_path}", stage=LogStage.REPO)

        info("刷新软件源...", stage=LogStage.REPO)
        caps.package_manager.refresh()

    @staticmethod
    def _leave_scratch(exc: CommandError, scratch_dir) -> None:
        exc.scratch_dir = scratch_dir
        warning(f"临时目录未清理: {scratch_dir}", stage=LogStage.REPO)
