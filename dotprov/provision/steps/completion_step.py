"""
完成报告步骤模块

只输出安装总结，没有其他副作用。
"""

from typing import List

from ...utils.logging import success, print, LogStage
from ..provision_context import ProvisionContext
from .provision_step import ProvisionStep

RULE = "=" * 66

# 按主版本号给出的选型说明，没有条目的版本不输出这一段
WHY_DOTNET = {
    8: [
        "LTS（长期支持）至 2026 年 11 月",
        "与 Unity 6 和 Unity 2022 LTS 完全兼容",
        "针对 Unity 开发优化的性能",
        "Unity 构建工具和 IDE 集成所必需",
    ],
}

NEXT_STEPS = [
    "Unity 现在应当可以使用全部 .NET 功能",
    "可以在 Project Settings 中确认 Unity 已识别 .NET",
    "新建一个 Unity 项目测试集成效果",
]


def installed_components(major: int) -> List[str]:
    return [
        f".NET {major} SDK（开发用）",
        f".NET {major} Runtime（运行应用程序）",
        "ASP.NET Core Runtime（Web 应用）",
        "所需的 targeting pack 及依赖",
    ]


def _bullets(items, numbered: bool = False) -> None:
    for idx, item in enumerate(items, start=1):
        marker = f"{idx}." if numbered else "•"
        print(f"  {marker} {item}", markup=False, highlight=False)


class CompletionStep(ProvisionStep):
    """完成报告步骤"""

    def __init__(self):
        super().__init__("complete", "输出安装总结")

    def get_progress_range(self) -> tuple[int, int]:
        return (95, 100)

    def execute(self, context: ProvisionContext) -> None:
        major = context.config.target.major_version

        print()
        print(RULE)
        success(f"Unity .NET {major} 安装完成!", stage=LogStage.DONE)
        print(RULE)
        print()
        print("已安装的内容:")
        _bullets(installed_components(major))
        print()
        if major in WHY_DOTNET:
            print(f"为什么 Unity 使用 .NET {major}:")
            _bullets(WHY_DOTNET[major])
            print()
        print("后续步骤:")
        _bullets(NEXT_STEPS, numbered=True)
        print()
        if context.installed_version:
            success(f"当前 {context.config.target.command} 版本: {context.installed_version}", stage=LogStage.DONE)
        success("祝 Unity 开发愉快!", stage=LogStage.DONE)
