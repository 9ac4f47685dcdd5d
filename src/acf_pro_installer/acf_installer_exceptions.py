"""
This module contains the exceptions raised by the ACF PRO installer plugin.

All of them are fatal for the operation that triggered the hook: they are
raised synchronously and left for the package manager to report.
"""


class AcfInstallerException(Exception):
    """
    Base class for all exceptions raised by the plugin.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidVersionError(AcfInstallerException):
    """
    Raised when the version of the licensed package is not an exact version.
    """

    def __init__(self, version: object, package_name: str):
        self.version = version
        self.package_name = package_name
        super().__init__(
            f"The version constraint of {package_name} should be exact "
            f'(with 3 or 4 digits). Invalid version string "{version}"'
        )


class MissingKeyError(AcfInstallerException):
    """
    Raised when the license key can be found neither in the environment nor in the secret file.
    """

    def __init__(self, env_var_name: str, secret_file_name: str = ".env"):
        self.env_var_name = env_var_name
        self.secret_file_name = secret_file_name
        super().__init__(
            f"Could not find a license key. Set the environment variable "
            f"{env_var_name} or add it to the {secret_file_name} file."
        )


class MalformedUrlError(AcfInstallerException):
    """
    Raised when a url cannot be parsed.
    """

    def __init__(self, url: object, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed url {url!r}: {reason}")
