"""
输出门面单元测试
"""

from io import StringIO

import pytest
from rich.console import Console

from dotprov.utils import logging as log
from dotprov.utils.logging import LogStage, OutputFacade, OutputLevel


@pytest.fixture
def facade():
    out, err = StringIO(), StringIO()
    facade = OutputFacade(
        console=Console(file=out, width=200, color_system=None),
        error_console=Console(file=err, width=200, color_system=None),
    )
    facade.out, facade.err = out, err
    log.set_output_facade(facade)
    yield facade
    log.set_output_facade(None)
    facade.close()


class TestOutputFacade:
    """OutputFacade 测试"""

    def test_levels_and_stage(self, facade):
        log.info("安装依赖...", stage=LogStage.DEPS)
        log.success("libicu 已安装", stage=LogStage.DEPS)
        log.warning("期望主版本 8", stage=LogStage.VERIFY)

        out = facade.out.getvalue()
        assert "[INFO] DEPS 安装依赖..." in out
        assert "[SUCCESS] DEPS libicu 已安装" in out
        assert "[WARNING] VERIFY 期望主版本 8" in out

    def test_errors_go_to_stderr(self, facade):
        log.error("下载软件源配置失败", stage=LogStage.REPO)

        assert "下载软件源配置失败" in facade.err.getvalue()
        assert "下载软件源配置失败" not in facade.out.getvalue()

    def test_debug_hidden_by_default(self, facade):
        log.debug("sudo zypper refresh", stage=LogStage.CMD)
        assert facade.out.getvalue() == ""

        log.set_log_level(OutputLevel.DEBUG)
        log.debug("sudo zypper refresh", stage=LogStage.CMD)
        assert "sudo zypper refresh" in facade.out.getvalue()

    def test_message_brackets_not_parsed_as_markup(self, facade):
        log.info("8.0.404 [/usr/share/dotnet/sdk]")
        assert "8.0.404 [/usr/share/dotnet/sdk]" in facade.out.getvalue()

    def test_invalid_level_ignored(self, facade):
        facade.set_level("TRACE")

        log.debug("sudo zypper refresh")
        log.info("刷新软件源...")

        out = facade.out.getvalue()
        assert "sudo zypper refresh" not in out
        assert "刷新软件源..." in out

    def test_log_file(self, facade, tmp_path):
        log_path = tmp_path / "nested" / "dotprov.log"
        log.configure_logging(OutputLevel.INFO, log_path)

        log.info("写入文件", stage=LogStage.INIT)
        log.print("横幅")
        facade.close()

        content = log_path.read_text(encoding="utf-8")
        assert "[INFO] [INIT] 写入文件" in content
        assert "横幅" in content
