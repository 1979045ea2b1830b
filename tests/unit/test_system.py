"""
系统能力单元测试

测试命令执行、os-release 解析、zypper / sudo 命令行、dotnet 探测、下载和交互确认。
subprocess.run 全部被替换，不会执行真实命令。
"""

import subprocess
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from dotprov.errors import CommandError, ExitCode
from dotprov.system.command import CmdResult, format_argv, run_cmd
from dotprov.system.fetch import WgetFetcher, url_basename
from dotprov.system.host import HostInfo, parse_os_release, read_host_info
from dotprov.system.package_manager import SudoSystemOps, ZypperPackageManager
from dotprov.system.prompt import console_confirm, is_affirmative
from dotprov.system.tool import DotnetProbe, leading_version_component


def completed(argv, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(argv, returncode, stdout=stdout, stderr=stderr)


class TestRunCmd:
    """run_cmd 测试"""

    @patch("dotprov.system.command.subprocess.run")
    def test_success_captures_output(self, mock_run):
        mock_run.return_value = completed(["echo"], 0, stdout="hello\n")

        result = run_cmd(["echo", "hello"])

        assert isinstance(result, CmdResult)
        assert result.ok
        assert result.stdout == "hello\n"
        kwargs = mock_run.call_args.kwargs
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.PIPE

    @patch("dotprov.system.command.subprocess.run")
    def test_failure_raises_with_returncode(self, mock_run):
        mock_run.return_value = completed(["zypper"], 104, stderr="No provider of 'x' found.")

        with pytest.raises(CommandError) as exc_info:
            run_cmd(["zypper", "install", "x"])

        assert exc_info.value.returncode == 104
        assert exc_info.value.exit_code == 104
        assert "No provider" in str(exc_info.value)

    @patch("dotprov.system.command.subprocess.run")
    def test_failure_without_check(self, mock_run):
        mock_run.return_value = completed(["zypper"], 104)

        result = run_cmd(["zypper", "search", "-i", "x"], check=False)

        assert not result.ok
        assert result.returncode == 104

    @patch("dotprov.system.command.subprocess.run")
    def test_uncaptured_output(self, mock_run):
        mock_run.return_value = completed(["sudo"], 0, stdout=None, stderr=None)

        result = run_cmd(["sudo", "zypper", "refresh"], capture=False)

        assert result.stdout == ""
        kwargs = mock_run.call_args.kwargs
        assert kwargs["stdout"] is None
        assert kwargs["stderr"] is None

    @patch("dotprov.system.command.subprocess.run", side_effect=FileNotFoundError("wget"))
    def test_missing_executable(self, _mock_run):
        with pytest.raises(CommandError) as exc_info:
            run_cmd(["wget", "-q", "https://example.com/a"])
        assert exc_info.value.exit_code == ExitCode.COMMAND_NOT_FOUND

        result = run_cmd(["wget"], check=False)
        assert result.returncode == ExitCode.COMMAND_NOT_FOUND

    def test_format_argv_quotes(self):
        assert format_argv(["echo", "a b"]) == "echo 'a b'"


class TestHostInfo:
    """os-release 解析测试"""

    def test_parse_quoted_values(self):
        values = parse_os_release('NAME="openSUSE Leap"\nVERSION_ID=\'15.6\'\n# comment\n\nID=opensuse-leap\n')
        assert values == {"NAME": "openSUSE Leap", "VERSION_ID": "15.6", "ID": "opensuse-leap"}

    def test_read_host_info(self, os_release):
        host = read_host_info(os_release)
        assert host.name == "openSUSE Leap"
        assert host.version_id == "15.6"
        assert host.describe() == "openSUSE Leap 15.6"
        assert host.matches("openSUSE")
        assert not host.matches("Ubuntu")

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_host_info(tmp_path / "missing")

    def test_missing_name_field(self, tmp_path):
        path = tmp_path / "os-release"
        path.write_text("VERSION_ID=1\n", encoding="utf-8")
        host = read_host_info(path)
        assert host == HostInfo(name="", version_id="1", pretty_name="")
        assert not host.matches("openSUSE")


class TestZypperPackageManager:
    """zypper 命令行测试"""

    @patch("dotprov.system.package_manager.run_cmd")
    def test_is_installed(self, mock_run):
        mock_run.return_value = CmdResult(argv=[], returncode=0, stdout="", stderr="")
        assert ZypperPackageManager().is_installed("libicu")
        mock_run.assert_called_once_with(["zypper", "search", "-i", "libicu"], check=False)

        mock_run.return_value = CmdResult(argv=[], returncode=104, stdout="", stderr="")
        assert not ZypperPackageManager().is_installed("libicu")

    @patch("dotprov.system.package_manager.run_cmd")
    def test_install_is_elevated(self, mock_run):
        ZypperPackageManager(["sudo"]).install("dotnet-sdk-8.0")
        mock_run.assert_called_once_with(["sudo", "zypper", "install", "-y", "dotnet-sdk-8.0"], capture=False)

    @patch("dotprov.system.package_manager.run_cmd")
    def test_refresh(self, mock_run):
        ZypperPackageManager(["doas"]).refresh()
        mock_run.assert_called_once_with(["doas", "zypper", "refresh"], capture=False)


class TestSudoSystemOps:
    """rpm / mv / chown 命令行测试"""

    @patch("dotprov.system.package_manager.run_cmd")
    def test_import_key(self, mock_run):
        SudoSystemOps().import_key("https://packages.microsoft.com/keys/microsoft.asc")
        mock_run.assert_called_once_with(
            ["sudo", "rpm", "--import", "https://packages.microsoft.com/keys/microsoft.asc"], capture=False
        )

    @patch("dotprov.system.package_manager.run_cmd")
    def test_install_file_moves_then_chowns(self, mock_run):
        SudoSystemOps().install_file(Path("/tmp/x/prod.repo"), Path("/etc/zypp/repos.d/microsoft-prod.repo"), "root:root")

        argvs = [c.args[0] for c in mock_run.call_args_list]
        assert argvs == [
            ["sudo", "mv", "/tmp/x/prod.repo", "/etc/zypp/repos.d/microsoft-prod.repo"],
            ["sudo", "chown", "root:root", "/etc/zypp/repos.d/microsoft-prod.repo"],
        ]


class TestDotnetProbe:
    """dotnet 探测测试"""

    @patch("dotprov.system.tool.shutil.which", return_value="/usr/bin/dotnet")
    def test_which(self, mock_which):
        assert DotnetProbe().which() == "/usr/bin/dotnet"
        mock_which.assert_called_once_with("dotnet")

    @patch("dotprov.system.tool.run_cmd")
    def test_version(self, mock_run):
        mock_run.return_value = CmdResult(argv=[], returncode=0, stdout="8.0.404\n", stderr="")
        assert DotnetProbe().version() == "8.0.404"

    @patch("dotprov.system.tool.run_cmd")
    def test_version_failure_returns_none(self, mock_run):
        mock_run.return_value = CmdResult(argv=[], returncode=1, stdout="", stderr="boom")
        assert DotnetProbe().version() is None

    @patch("dotprov.system.tool.run_cmd")
    def test_listings_skip_blank_lines(self, mock_run):
        mock_run.return_value = CmdResult(
            argv=[], returncode=0, stdout="8.0.404 [/usr/share/dotnet/sdk]\n\n", stderr=""
        )
        assert DotnetProbe().list_sdks() == ["8.0.404 [/usr/share/dotnet/sdk]"]
        mock_run.assert_called_with(["dotnet", "--list-sdks"])

        DotnetProbe().list_runtimes()
        mock_run.assert_called_with(["dotnet", "--list-runtimes"])

    @pytest.mark.parametrize("version, expected", [
        ("8.0.404", 8),
        ("10.0.100-preview.1", 10),
        ("unknown", None),
        ("", None),
    ])
    def test_leading_version_component(self, version, expected):
        assert leading_version_component(version) == expected


class TestWgetFetcher:
    """wget 下载测试"""

    def test_url_basename(self):
        assert url_basename("https://packages.microsoft.com/config/opensuse/15/prod.repo") == "prod.repo"

    @patch("dotprov.system.fetch.run_cmd")
    def test_fetch_runs_in_dest_dir(self, mock_run, tmp_path):
        path = WgetFetcher().fetch("https://packages.microsoft.com/config/opensuse/15/prod.repo", tmp_path)

        assert path == tmp_path / "prod.repo"
        mock_run.assert_called_once_with(
            ["wget", "-q", "https://packages.microsoft.com/config/opensuse/15/prod.repo"], cwd=tmp_path
        )


class TestConfirm:
    """交互确认测试"""

    @pytest.mark.parametrize("answer, expected", [
        ("y", True),
        ("Y", True),
        ("yes", True),
        ("YeS", True),
        (" yes ", True),
        ("", False),
        ("n", False),
        ("no", False),
        ("yep", False),
        (None, False),
    ])
    def test_is_affirmative(self, answer, expected):
        assert is_affirmative(answer) is expected

    def test_console_confirm_reads_answer(self):
        console = MagicMock(spec=Console)
        console.input.return_value = "y"
        assert console_confirm("继续？", console=console)
        assert "[y/N]" in console.input.call_args.args[0]

    def test_console_confirm_eof_declines(self):
        console = MagicMock(spec=Console)
        console.input.side_effect = EOFError
        assert not console_confirm("继续？", console=console)

    def test_console_confirm_with_real_console(self):
        console = Console(file=StringIO())
        with patch("builtins.input", return_value="no"):
            assert not console_confirm("继续？", console=console)
