"""
Validation of the version of the licensed package.

The download endpoint only serves one concrete archive per exact version, so
version constraints (ranges, wildcards, pre-releases) cannot be resolved
against it.
"""

import re

from acf_pro_installer.acf_installer_exceptions import InvalidVersionError

# major.minor.patch with an optional build digit, e.g. 5.9.1 or 5.9.10.1
EXACT_VERSION_PATTERN = re.compile(r"\d\.\d\.\d{1,2}(?:\.\d)?", re.ASCII)


def validate_version(version: str, package_name: str) -> str:
    """
    Validate that the version is an exact major.minor.patch[.build] version.

    Args:
        version: The version string of the package
        package_name: Name of the package, used in the error message

    Returns:
        The version, unchanged

    Raises:
        InvalidVersionError: If the version is not exact
    """
    if not isinstance(version, str) or not EXACT_VERSION_PATTERN.fullmatch(version):
        raise InvalidVersionError(version, package_name)
    return version
