"""
Remote fetcher used by the package manager to download package archives.

Handles fetching file contents over HTTP and copying them to disk.
"""

import logging
import pathlib
from typing import Any, Callable, Dict, Optional, Union

import httpx

from acf_pro_installer.acf_installer_logger import AcfInstallerLogger

# Options understood by the fetcher, passed through to httpx.Client
CLIENT_OPTIONS = ("timeout", "headers", "auth", "follow_redirects")


class RemoteFetcher:
    """
    Fetches remote files.

    All transport configuration lives in ``options`` (timeouts, headers,
    auth, redirect policy) and ``tls_disabled`` so that a variant of a
    fetcher can be created with exactly the same configuration.
    """

    def __init__(
        self,
        options: Optional[Dict[str, Any]] = None,
        tls_disabled: bool = False,
        logger: Optional[AcfInstallerLogger] = None,
        client_factory: Callable[..., httpx.Client] = httpx.Client,
    ):
        """
        Initialize the remote fetcher.

        Args:
            options: Transport options, see CLIENT_OPTIONS
            tls_disabled: Skip TLS certificate verification
            logger: Logger for progress and error messages
            client_factory: Callable building the httpx client, e.g. to plug in a transport
        """
        self._options = dict(options or {})
        self._tls_disabled = tls_disabled
        self.logger = logger or AcfInstallerLogger()
        self.client_factory = client_factory

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def is_tls_disabled(self) -> bool:
        return self._tls_disabled

    def _client(self) -> httpx.Client:
        kwargs = {k: v for k, v in self._options.items() if k in CLIENT_OPTIONS}
        kwargs.setdefault("follow_redirects", True)
        return self.client_factory(verify=not self._tls_disabled, **kwargs)

    def _describe(self, url: str) -> str:
        return url

    def fetch(self, url: str) -> bytes:
        """
        Get the contents of a remote file.

        Args:
            url: The url to fetch

        Returns:
            The file contents

        Raises:
            httpx.HTTPError: If the request fails or returns an error status
        """
        self.logger.log(f"Fetching {self._describe(url)}", logging.INFO)
        with self._client() as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content

    def copy(self, url: str, destination: Union[str, pathlib.Path]) -> pathlib.Path:
        """
        Download a remote file to destination.

        Args:
            url: The url to download
            destination: Path of the file to write

        Returns:
            The destination path

        Raises:
            httpx.HTTPError: If the request fails or returns an error status
            RuntimeError: If the downloaded file is empty
        """
        dest_path = pathlib.Path(destination)
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        self.logger.log(
            f"Downloading {self._describe(url)} to {dest_path}", logging.INFO
        )
        with self._client() as client:
            with client.stream("GET", url) as response:
                response.raise_for_status()
                with open(dest_path, "wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)

        # Verify download
        if dest_path.stat().st_size == 0:
            dest_path.unlink()
            raise RuntimeError(f"Downloaded file is empty: {dest_path}")

        return dest_path
