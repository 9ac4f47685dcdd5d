"""
Events the package manager dispatches to plugins.
"""

import dataclasses
from enum import Enum
from typing import Union

from acf_pro_installer.package_models import (
    InstallOperation,
    UninstallOperation,
    UpdateOperation,
)
from .remote_fetcher import RemoteFetcher


class EventKind(str, Enum):
    """
    Lifecycle events a plugin can subscribe to.
    """

    PRE_PACKAGE_INSTALL = "pre-package-install"
    PRE_PACKAGE_UPDATE = "pre-package-update"
    PRE_FILE_DOWNLOAD = "pre-file-download"


@dataclasses.dataclass
class PackageEvent:
    """
    Fired before a package is installed or updated.
    """

    kind: EventKind
    operation: Union[InstallOperation, UpdateOperation, UninstallOperation]


@dataclasses.dataclass
class PreFileDownloadEvent:
    """
    Fired right before a file is fetched. One per fetch attempt.

    The fetcher may be replaced for this single download; the package manager
    uses whatever fetcher the event holds once all subscribers have run.
    """

    processed_url: str
    remote_fetcher: RemoteFetcher

    def set_remote_fetcher(self, remote_fetcher: RemoteFetcher) -> None:
        self.remote_fetcher = remote_fetcher
