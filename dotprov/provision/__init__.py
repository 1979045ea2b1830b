"""安装流程模块

提供 SDK 安装的核心功能。
"""

from .provisioner import Provisioner, ProvisionResult
from .provision_context import Capabilities, ProvisionContext, StepStatus
from .provision_pipeline import ProvisionPipeline

__all__ = [
    "Provisioner",
    "ProvisionResult",
    "Capabilities",
    "ProvisionContext",
    "StepStatus",
    "ProvisionPipeline",
]
