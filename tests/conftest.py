"""
测试公共夹具

为每个系统能力提供记录调用的内存假实现，测试中不会调用真实的
包管理器、网络或 sudo。
"""

import shutil
from pathlib import Path
from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from dotprov.config.schema import ProvisionConfig
from dotprov.errors import CommandError
from dotprov.provision.provision_context import Capabilities, ProvisionContext


OPENSUSE_RELEASE = '''NAME="openSUSE Leap"
VERSION="15.6"
ID="opensuse-leap"
VERSION_ID="15.6"
PRETTY_NAME="openSUSE Leap 15.6"
'''


class FakeTool:
    """目标工具假实现，install() 之后变为可解析"""

    def __init__(self, present: bool = False, version: Optional[str] = "8.0.404"):
        self.present = present
        self._version = version
        self.sdks = ["8.0.404 [/usr/share/dotnet/sdk]"]
        self.runtimes = [
            "Microsoft.AspNetCore.App 8.0.11 [/usr/share/dotnet/shared/Microsoft.AspNetCore.App]",
            "Microsoft.NETCore.App 8.0.11 [/usr/share/dotnet/shared/Microsoft.NETCore.App]",
        ]
        self.calls: List[str] = []

    def install(self):
        self.present = True

    def which(self):
        self.calls.append("which")
        return "/usr/bin/dotnet" if self.present else None

    def version(self):
        self.calls.append("version")
        return self._version

    def list_sdks(self):
        self.calls.append("list_sdks")
        return list(self.sdks)

    def list_runtimes(self):
        self.calls.append("list_runtimes")
        return list(self.runtimes)


class FakePackageManager:
    """包管理器假实现"""

    def __init__(self, installed=None, fail: Optional[Dict[str, int]] = None, on_install=None):
        self.installed = set(installed or [])
        self.fail = dict(fail or {})
        self.on_install = on_install
        self.calls: List[tuple] = []

    def is_installed(self, name):
        self.calls.append(("is_installed", name))
        return name in self.installed

    def install(self, name):
        self.calls.append(("install", name))
        if name in self.fail:
            raise CommandError(["sudo", "zypper", "install", "-y", name], self.fail[name])
        self.installed.add(name)
        if self.on_install:
            self.on_install(name)

    def refresh(self):
        self.calls.append(("refresh",))
        if "refresh" in self.fail:
            raise CommandError(["sudo", "zypper", "refresh"], self.fail["refresh"])

    def installs(self):
        return [c[1] for c in self.calls if c[0] == "install"]


class FakeSystemOps:
    """提权系统操作假实现，install_file 真实移动到 tmp 目录下的目标路径"""

    def __init__(self, fail_key: Optional[int] = None, fail_install: Optional[int] = None):
        self.fail_key = fail_key
        self.fail_install = fail_install
        self.calls: List[tuple] = []

    def import_key(self, url):
        self.calls.append(("import_key", url))
        if self.fail_key is not None:
            raise CommandError(["sudo", "rpm", "--import", url], self.fail_key)

    def install_file(self, src, dest, owner):
        self.calls.append(("install_file", Path(src).name, Path(dest), owner))
        if self.fail_install is not None:
            raise CommandError(["sudo", "mv", str(src), str(dest)], self.fail_install)
        Path(dest).parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(src), str(dest))


class FakeFetcher:
    """下载假实现

    content 为 None 时模拟“命令成功但没有生成文件”；fail 非空时模拟下载命令失败。
    """

    def __init__(self, content: Optional[str] = "[packages-microsoft-com-prod]\n", fail: Optional[int] = None):
        self.content = content
        self.fail = fail
        self.dest_dirs: List[Path] = []

    def fetch(self, url, dest_dir):
        self.dest_dirs.append(Path(dest_dir))
        name = url.rsplit("/", 1)[-1]
        if self.fail is not None:
            raise CommandError(["wget", "-q", url], self.fail)
        target = Path(dest_dir) / name
        if self.content is not None:
            target.write_text(self.content, encoding="utf-8")
        return target


@pytest.fixture
def os_release(tmp_path):
    path = tmp_path / "os-release"
    path.write_text(OPENSUSE_RELEASE, encoding="utf-8")
    return path


@pytest.fixture
def config(tmp_path, os_release):
    return ProvisionConfig.from_dict({
        "platform": {"os_release": str(os_release)},
        "repository": {"descriptor_path": str(tmp_path / "repos.d" / "microsoft-prod.repo")},
    })


@pytest.fixture
def tool():
    return FakeTool()


@pytest.fixture
def package_manager(tool):
    def on_install(name):
        if name == "dotnet-sdk-8.0":
            tool.install()
    return FakePackageManager(on_install=on_install)


@pytest.fixture
def caps(package_manager, tool):
    return Capabilities(
        package_manager=package_manager,
        system_ops=FakeSystemOps(),
        fetcher=FakeFetcher(),
        tool=tool,
        confirm=MagicMock(return_value=False),
        is_superuser=lambda: False,
    )


@pytest.fixture
def context(config, caps):
    return ProvisionContext(config=config, capabilities=caps)
