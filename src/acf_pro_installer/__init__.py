"""
acf_pro_installer: install Advanced Custom Fields PRO through a package manager
without exposing the license key in the project or its lock file.
"""

from acf_pro_installer.acf_installer_config import AcfInstallerConfig
from acf_pro_installer.acf_installer_exceptions import (
    AcfInstallerException,
    InvalidVersionError,
    MalformedUrlError,
    MissingKeyError,
)
from acf_pro_installer.lifecycle_hooks import AcfProInstallerPlugin

__all__ = [
    "AcfInstallerConfig",
    "AcfInstallerException",
    "AcfProInstallerPlugin",
    "InvalidVersionError",
    "MalformedUrlError",
    "MissingKeyError",
]
