"""
dotprov - openSUSE Leap 上的 Unity .NET 8 SDK 安装工具

Provisions the .NET 8 SDK required for Unity development on openSUSE Leap.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config.schema import ProvisionConfig
from .provision.provisioner import Provisioner, ProvisionResult

__all__ = ["ProvisionConfig", "Provisioner", "ProvisionResult", "__version__"]
