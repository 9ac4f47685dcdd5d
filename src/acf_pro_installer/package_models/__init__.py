"""
Package and operation models.

This package provides Pydantic data models for the packages and operations
the package manager passes to the lifecycle hooks.
"""

from .package_ref import PackageRef
from .operations import (
    InstallOperation,
    Operation,
    UninstallOperation,
    UpdateOperation,
    package_for_operation,
    parse_operation,
)

__all__ = [
    "PackageRef",
    # Operations
    "Operation",
    "InstallOperation",
    "UpdateOperation",
    "UninstallOperation",
    "package_for_operation",
    "parse_operation",
]
