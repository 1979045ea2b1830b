"""
配置 Schema 定义

使用 Pydantic 定义安装流程的配置模型。所有字段都有默认值，
默认值即 openSUSE Leap 上安装 .NET 8 SDK 的标准参数，
不提供配置文件时直接使用 ProvisionConfig()。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class _StrictModel(BaseModel):
    """所有配置段共用的设置：拒绝未知字段，去除字符串首尾空白"""

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class TargetModel(_StrictModel):
    """目标工具模型"""
    command: str = Field("dotnet", description="安装后在 PATH 中可解析的命令名", min_length=1)
    package: str = Field("dotnet-sdk-8.0", description="要安装的 SDK 软件包名", min_length=1)
    major_version: int = Field(8, description="期望的主版本号", ge=1)
    display_name: Optional[str] = Field(None, description="显示名称，留空时由主版本号生成")

    @property
    def label(self) -> str:
        """输出中使用的名称，例如 .NET 8 SDK"""
        return self.display_name or f".NET {self.major_version} SDK"


class PlatformModel(_StrictModel):
    """主机平台模型"""
    os_release: Path = Field(Path("/etc/os-release"), description="系统标识文件路径")
    distro_token: str = Field("openSUSE", description="NAME 字段中必须包含的发行版标记", min_length=1)
    display_name: str = Field("openSUSE Leap", description="支持的发行版显示名称")


class RepositoryModel(_StrictModel):
    """软件源配置模型"""
    key_url: str = Field(
        "https://packages.microsoft.com/keys/microsoft.asc",
        description="GPG 信任密钥地址",
    )
    descriptor_url: str = Field(
        "https://packages.microsoft.com/config/opensuse/15/prod.repo",
        description="软件源描述文件地址",
    )
    descriptor_path: Path = Field(
        Path("/etc/zypp/repos.d/microsoft-prod.repo"),
        description="描述文件在系统配置目录中的安装路径",
    )
    owner: str = Field("root:root", description="安装后描述文件的属主", pattern=r"^[\w.-]+(:[\w.-]+)?$")

    @field_validator('key_url', 'descriptor_url')
    @classmethod
    def validate_https(cls, v: str) -> str:
        """只允许 HTTPS 地址"""
        parsed = urlparse(v)
        if parsed.scheme != "https" or not parsed.netloc:
            raise ValueError("地址必须是 https:// 开头的完整 URL")
        return v

    @field_validator('descriptor_path')
    @classmethod
    def validate_descriptor_path(cls, v: Path) -> Path:
        if not v.is_absolute():
            raise ValueError("描述文件安装路径必须是绝对路径")
        return v


class PrivilegeModel(_StrictModel):
    """提权配置模型"""
    elevate: List[str] = Field(default_factory=lambda: ["sudo"], description="提权命令前缀", min_length=1)


class ConfigModel(_StrictModel):
    """配置元信息模型"""
    version: int = Field(1, description="配置 schema 版本", ge=1)

    @field_validator('version')
    @classmethod
    def validate_config_version(cls, v: int) -> int:
        SUPPORTED_VERSIONS = [1]
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(f"不支持的配置版本 {v}，支持的版本: {SUPPORTED_VERSIONS}")
        return v


class ProvisionConfig(_StrictModel):
    """安装流程主配置模型"""

    config: ConfigModel = Field(default_factory=ConfigModel, description="配置元信息")
    target: TargetModel = Field(default_factory=TargetModel, description="目标工具")
    platform: PlatformModel = Field(default_factory=PlatformModel, description="主机平台")
    dependencies: List[str] = Field(default_factory=lambda: ["libicu"], description="需要预先安装的系统库")
    repository: RepositoryModel = Field(default_factory=RepositoryModel, description="软件源")
    privilege: PrivilegeModel = Field(default_factory=PrivilegeModel, description="提权设置")

    @field_validator('dependencies')
    @classmethod
    def validate_dependencies(cls, v: List[str]) -> List[str]:
        """去除空白和重复项，保持顺序"""
        cleaned: List[str] = []
        for name in v:
            name = name.strip()
            if not name:
                raise ValueError("依赖包名不能为空")
            if name not in cleaned:
                cleaned.append(name)
        return cleaned

    def to_dict(self) -> Dict[str, Any]:
        """转换为可写入 YAML 的字典"""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProvisionConfig':
        return cls.model_validate(data)
