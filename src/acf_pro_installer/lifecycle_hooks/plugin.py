"""
A package manager plugin that makes installing ACF PRO possible.

The WordPress plugin Advanced Custom Fields PRO (ACF PRO) cannot be installed
from a public registry. This plugin works with a user supplied 'package'
repository entry: it downloads the right version from the ACF site using the
version number of that entry and a license key from the environment or a
.env file, so the key never has to be written to the project manifest or to
the lock file.

Two hooks are involved:

    Pre install/update: the version is added to the dist url
                        (ends up in the lock file)
    Pre file download:  the key is added to the url of this one request
                        (never ends up in the lock file)
"""

import logging
import pathlib
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from acf_pro_installer.acf_installer_config import AcfInstallerConfig
from acf_pro_installer.acf_installer_exceptions import AcfInstallerException
from acf_pro_installer.acf_installer_logger import AcfInstallerLogger
from acf_pro_installer.package_manager import (
    EventKind,
    PackageEvent,
    PreFileDownloadEvent,
)
from acf_pro_installer.package_models import package_for_operation
from acf_pro_installer.secret_resolution import SecretResolver
from acf_pro_installer.url_rewriting import add_query_param, validate_version
from .rewrite_url_remote_fetcher import RewriteUrlRemoteFetcher

VERSION_QUERY_PARAM = "t"
KEY_QUERY_PARAM = "k"


class HookState(str, Enum):
    """
    What the plugin is doing. Every hook returns to IDLE when it finishes or raises.
    """

    IDLE = "idle"
    VERSION_PINNING = "version_pinning"
    KEY_INJECTION = "key_injection"


class AcfProInstallerPlugin:
    """
    Lifecycle hooks that pin the ACF PRO version and inject the license key.
    """

    def __init__(
        self,
        config: Optional[AcfInstallerConfig] = None,
        logger: Optional[AcfInstallerLogger] = None,
        secret_resolver: Optional[SecretResolver] = None,
    ):
        """
        Initialize the plugin.

        Args:
            config: Target package name, download url and key variable. Defaults to ACF PRO.
            logger: Logger for progress and error messages
            secret_resolver: Resolver for the license key. Defaults to one reading
                os.environ and the configured secret file in the working directory.
        """
        self.config = config or AcfInstallerConfig()
        self.logger = logger or AcfInstallerLogger()
        self.secret_resolver = secret_resolver or SecretResolver(
            secret_file_name=self.config.secret_file_name, logger=self.logger
        )
        self.state = HookState.IDLE
        self._subscribed_events: Dict[EventKind, Callable[[Any], None]] = {
            EventKind.PRE_PACKAGE_INSTALL: self.on_pre_package_action,
            EventKind.PRE_PACKAGE_UPDATE: self.on_pre_package_action,
            EventKind.PRE_FILE_DOWNLOAD: self.on_pre_file_download,
        }

    @classmethod
    def from_project(
        cls,
        project_dir: Union[str, pathlib.Path],
        logger: Optional[AcfInstallerLogger] = None,
    ) -> "AcfProInstallerPlugin":
        """
        Create the plugin for a project directory.

        Settings are read from the [tool.acf-pro-installer] table of the
        project's pyproject.toml, and the secret file is looked up next to it.
        """
        project_dir = pathlib.Path(project_dir)
        config = AcfInstallerConfig.from_toml(project_dir / "pyproject.toml")
        logger = logger or AcfInstallerLogger()
        secret_resolver = SecretResolver(
            secret_file_name=config.secret_file_name,
            working_directory=project_dir,
            logger=logger,
        )
        return cls(config=config, logger=logger, secret_resolver=secret_resolver)

    def get_subscribed_events(self) -> Dict[EventKind, Callable[[Any], None]]:
        """
        Get the handlers of the events this plugin subscribes to.
        """
        return dict(self._subscribed_events)

    def on_pre_package_action(self, event: PackageEvent) -> None:
        """
        Add the version to the package dist url.

        This happens before install/update so that every version gets its own
        url in the lock file. Otherwise the package manager could serve any
        cached version, since all of them would share the same url.

        Raises:
            InvalidVersionError: If the package version is not exact
            MalformedUrlError: If the dist url cannot be parsed
        """
        package = package_for_operation(event.operation)
        if package.name != self.config.package_name:
            return

        self.state = HookState.VERSION_PINNING
        try:
            version = validate_version(package.pretty_version, package.name)
            package.dist_url = add_query_param(
                package.dist_url, VERSION_QUERY_PARAM, version
            )
        except AcfInstallerException as e:
            self.logger.log(
                f"Could not pin the version of {package.name}",
                logging.ERROR,
                str(e),
            )
            raise
        finally:
            self.state = HookState.IDLE

        self.logger.log(
            f"Pinned {package.name} to version {version}", logging.INFO
        )

    def on_pre_file_download(self, event: PreFileDownloadEvent) -> None:
        """
        Add the license key to the url of the current download.

        The key is not added to the package because it would show up in the
        lock file. Instead the fetcher of this download is swapped for one
        that fetches the url with the key.

        Raises:
            MissingKeyError: If no license key is available
            MalformedUrlError: If the download url cannot be parsed
        """
        package_url = event.processed_url
        if not self.is_package_url(package_url):
            return

        self.state = HookState.KEY_INJECTION
        try:
            key = self.secret_resolver.resolve_key(self.config.key_env_variable)
            rewritten_url = add_query_param(package_url, KEY_QUERY_PARAM, key)
        except AcfInstallerException as e:
            self.logger.log(
                f"Could not add the license key to {package_url}",
                logging.ERROR,
                str(e),
            )
            raise
        finally:
            self.state = HookState.IDLE

        event.set_remote_fetcher(
            RewriteUrlRemoteFetcher.for_fetcher(rewritten_url, event.remote_fetcher)
        )
        self.logger.log(
            f"Added the license key to the download of {package_url}", logging.INFO
        )

    def is_package_url(self, url: str) -> bool:
        """
        Test if url points to the download endpoint of the licensed package.
        """
        return url.startswith(self.config.package_url)
