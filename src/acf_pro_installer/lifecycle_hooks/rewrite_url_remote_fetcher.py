"""
Remote fetcher that always downloads one fixed url.
"""

import contextlib
import logging
import pathlib
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

import httpx

from acf_pro_installer.acf_installer_logger import AcfInstallerLogger
from acf_pro_installer.package_manager import RemoteFetcher

REDACTED = "(query redacted)"

# Loggers of the http stack that print request urls
HTTP_LOGGERS = ("httpx", "httpcore")


class QueryRedactingFilter(logging.Filter):
    """
    Replaces the query of a url in log records and messages.
    """

    def __init__(self, url: str):
        super().__init__()
        self.secrets = self._query_forms(url)

    @staticmethod
    def _query_forms(url: str) -> List[str]:
        forms = set()
        if "?" in url:
            forms.add(url.split("?", 1)[1].split("#", 1)[0])
        try:
            # httpx may normalize the query it prints
            forms.add(httpx.URL(url).query.decode("ascii", "replace"))
        except httpx.InvalidURL:
            pass
        return sorted((f for f in forms if f), key=len, reverse=True)

    def redact(self, text: str) -> str:
        for secret in self.secrets:
            text = text.replace(secret, REDACTED)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


class RewriteUrlRemoteFetcher(RemoteFetcher):
    """
    A RemoteFetcher that ignores the requested url and fetches rewritten_url instead.

    Used to download the licensed package from a url that carries the license
    key, while the url the package manager knows about (and writes to its
    lock file) stays free of it. The query of rewritten_url is redacted from
    the http stack's logs and from the errors raised to the package manager.
    """

    def __init__(
        self,
        rewritten_url: str,
        options: Optional[Dict[str, Any]] = None,
        tls_disabled: bool = False,
        logger: Optional[AcfInstallerLogger] = None,
        client_factory: Callable[..., httpx.Client] = httpx.Client,
    ):
        super().__init__(
            options=options,
            tls_disabled=tls_disabled,
            logger=logger,
            client_factory=client_factory,
        )
        self.rewritten_url = rewritten_url

    @classmethod
    def for_fetcher(
        cls, rewritten_url: str, fetcher: RemoteFetcher
    ) -> "RewriteUrlRemoteFetcher":
        """
        Create a variant of fetcher that downloads rewritten_url, keeping its transport configuration.
        """
        return cls(
            rewritten_url,
            options=fetcher.options,
            tls_disabled=fetcher.is_tls_disabled(),
            logger=fetcher.logger,
            client_factory=fetcher.client_factory,
        )

    def _describe(self, url: str) -> str:
        # The rewritten url contains the license key
        return f"{url.split('?', 1)[0]} {REDACTED}"

    @contextlib.contextmanager
    def _redacted(self) -> Iterator[None]:
        """
        Keep the query of rewritten_url out of http logs and errors while a request runs.

        Raises:
            httpx.HTTPError: With the query redacted, if the request fails
        """
        log_filter = QueryRedactingFilter(self.rewritten_url)
        http_loggers = [logging.getLogger(name) for name in HTTP_LOGGERS]
        for http_logger in http_loggers:
            http_logger.addFilter(log_filter)
        try:
            yield
        except httpx.HTTPError as e:
            message = log_filter.redact(str(e))
            self.logger.log(
                f"Download of {self._describe(self.rewritten_url)} failed",
                logging.ERROR,
                message,
            )
            raise httpx.HTTPError(message) from None
        finally:
            for http_logger in http_loggers:
                http_logger.removeFilter(log_filter)

    def fetch(self, url: str) -> bytes:
        with self._redacted():
            return super().fetch(self.rewritten_url)

    def copy(self, url: str, destination: Union[str, pathlib.Path]) -> pathlib.Path:
        with self._redacted():
            return super().copy(self.rewritten_url, destination)

    def __repr__(self) -> str:
        return (
            f"RewriteUrlRemoteFetcher(url={self._describe(self.rewritten_url)}, "
            f"tls_disabled={self.is_tls_disabled()})"
        )
