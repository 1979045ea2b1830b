"""安装步骤"""

from .provision_step import ProvisionStep
from .preflight_step import PreflightStep
from .dependency_step import DependencyStep
from .repository_step import RepositoryStep
from .package_step import PackageStep
from .verify_step import VerifyStep
from .completion_step import CompletionStep

__all__ = [
    "ProvisionStep",
    "PreflightStep",
    "DependencyStep",
    "RepositoryStep",
    "PackageStep",
    "VerifyStep",
    "CompletionStep",
]
